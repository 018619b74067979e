# flappy/tests/render_tests.py
"""
Viewport adapter and renderer: asset images, background scroll, prompt overlay.

Usage (from repo root):
  python -m flappy.tests.render_tests
"""
from __future__ import annotations
import os
import tempfile

import pygame

from flappy.game.config import COLOR_ACCENT, COLOR_BG, COLOR_DANGER
from flappy.game.events import ViewportReady
from flappy.game.machine import Game, GameState, Phase
from flappy.game.player import spawn_player
from flappy.game.render import Renderer, prompt_lines, to_scalable
from flappy.game.settings import Assets, GameConfig
from flappy.game.timing import GapSampler
from flappy.game.viewport import Viewport, viewport_of

W, H = 800, 600


def _state(phase=Phase.PLAYING, **kw) -> GameState:
    return GameState(player=spawn_player(GameConfig(), W, H), viewport_width=float(W),
                     viewport_height=float(H), phase=phase, **kw)


def _screen() -> pygame.Surface:
    return pygame.Surface((W, H), 0, 32)


def _close(c1, c2, tol=3) -> bool:
    return all(abs(int(a) - int(b)) <= tol for a, b in zip(c1[:3], c2[:3]))


def _save_palette_sprite(folder: str):
    """Writes an 8-bit palette image; returns (path, its rgb)."""
    surf = pygame.Surface((16, 16), 0, 8)
    surf.fill((200, 30, 30))
    path = os.path.join(folder, "bird8.bmp")
    pygame.image.save(surf, path)
    return path, tuple(surf.get_at((0, 0)))[:3]


# ------------------------ Viewport ------------------------

def test_viewport_of_surface():
    vp = viewport_of(pygame.Surface((640, 480)))
    assert vp == Viewport(640.0, 480.0)
    assert vp.ready_event() == ViewportReady(640.0, 480.0)

    cfg = GameConfig()
    game = Game(cfg, sampler=GapSampler(cfg, seed=1))
    game.handle(vp.ready_event())
    assert (game.state.viewport_width, game.state.viewport_height) == (640.0, 480.0)
    assert game.state.player.y == (480 - cfg.player_height) / 2


# ------------------------ Images ------------------------

def test_palette_image_is_promoted():
    img8 = pygame.Surface((16, 16), 0, 8)
    out = to_scalable(img8)
    assert out.get_bitsize() in (24, 32)
    # must not raise on a promoted surface
    pygame.transform.smoothscale(out, (50, 50))


def check_palette_sprite_draws(folder: str):
    path, rgb = _save_palette_sprite(folder)
    state = _state()
    screen = _screen()
    Renderer(Assets(player_image=path)).draw(screen, state)
    p = state.player
    centre = (int(p.x + p.width / 2), int(p.y + p.height / 2))
    assert _close(screen.get_at(centre), rgb), "sprite not blitted at the player position"
    assert not _close(screen.get_at(centre), COLOR_ACCENT)


def test_palette_sprite_draws():
    with tempfile.TemporaryDirectory() as folder:
        check_palette_sprite_draws(folder)


def check_background_scrolls(folder: str):
    a, b = (10, 20, 200), (220, 220, 40)
    bg = pygame.Surface((W, H), 0, 32)
    bg.fill(b)
    bg.fill(a, pygame.Rect(0, 0, 100, H))          # marker band x in [0, 100)
    path = os.path.join(folder, "bg.bmp")
    pygame.image.save(bg, path)

    renderer = Renderer(Assets(background_image=path))
    screen = _screen()

    renderer.draw(screen, _state(background_offset=0.0))
    assert _close(screen.get_at((50, 10)), a)
    assert _close(screen.get_at((650, 10)), b)

    # shifted 200 px left: the band wraps in from the second copy at [600, 700)
    renderer.draw(screen, _state(background_offset=200.0))
    assert _close(screen.get_at((50, 10)), b)
    assert _close(screen.get_at((650, 10)), a)


def test_background_scrolls():
    with tempfile.TemporaryDirectory() as folder:
        check_background_scrolls(folder)


# ------------------------ Prompt overlay ------------------------

def test_prompt_text_per_stop_reason():
    idle = prompt_lines(_state(Phase.STOPPED))
    paused = prompt_lines(_state(Phase.STOPPED, paused=True))
    over = prompt_lines(_state(Phase.STOPPED, crashed=True))

    assert idle == ["SPACE / click to start"]
    assert paused[0] == "PAUSED" and any("P to resume" in s for s in paused)
    assert over[0] == "GAME OVER"
    # pause only does something in a run, so no hint outside one
    assert not any("pause" in s.lower() for s in idle + over)


def test_paused_overlay_drawn():
    screen = _screen()
    Renderer().draw(screen, _state(Phase.STOPPED, paused=True))
    # left edge of the centred panel, clear of text and player
    assert not _close(screen.get_at((245, 265)), COLOR_BG, tol=0)

    screen = _screen()
    Renderer().draw(screen, _state(Phase.PLAYING))
    assert _close(screen.get_at((245, 265)), COLOR_BG, tol=0), "no overlay while playing"


def test_crashed_player_drawn_in_danger_colour():
    screen = _screen()
    state = _state(Phase.STOPPED, crashed=True)
    Renderer().draw(screen, state)
    p = state.player
    assert _close(screen.get_at((int(p.x) + 5, int(p.y) + 5)), COLOR_DANGER, tol=0)


def main():
    test_viewport_of_surface()
    test_palette_image_is_promoted()
    test_palette_sprite_draws()
    test_background_scrolls()
    test_prompt_text_per_stop_reason()
    test_paused_overlay_drawn()
    test_crashed_player_drawn_in_danger_colour()
    print("✓ render tests passed")


if __name__ == "__main__":
    main()
