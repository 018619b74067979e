# flappy/game/render.py
from __future__ import annotations
from typing import Dict, List, Optional

import pygame

from .config import (
    COLOR_BG, COLOR_FG, COLOR_ACCENT, COLOR_OBSTACLE, COLOR_DANGER, COLOR_PANEL,
)
from .machine import GameState, Phase
from .settings import Assets


def to_scalable(img: pygame.Surface) -> pygame.Surface:
    """smoothscale only takes 24/32-bit surfaces; palette images are promoted first."""
    if pygame.display.get_surface() is not None:
        return img.convert_alpha()
    if img.get_bitsize() in (24, 32):
        return img
    out = pygame.Surface(img.get_size(), pygame.SRCALPHA, 32)
    out.blit(img, (0, 0))
    return out


def prompt_lines(state: GameState) -> List[str]:
    """Overlay text for a STOPPED game; the pause hint only applies to a paused run."""
    if state.paused:
        return ["PAUSED", "P to resume"]
    if state.crashed:
        return ["GAME OVER", "SPACE / click to play again"]
    return ["SPACE / click to start"]


class Renderer:
    """
    Draws a GameState onto a pygame surface. Never mutates the state.
    Images are loaded lazily from the Assets paths and cached per size.
    """
    def __init__(self, assets: Optional[Assets] = None):
        self.assets = assets or Assets()
        self._images: Dict[str, pygame.Surface] = {}
        self._scaled: Dict[tuple, pygame.Surface] = {}
        self._font: Optional[pygame.font.Font] = None

    def _image(self, path: Optional[str], size) -> Optional[pygame.Surface]:
        if not path:
            return None
        key = (path, int(size[0]), int(size[1]))
        if key not in self._scaled:
            if path not in self._images:
                self._images[path] = to_scalable(pygame.image.load(path))
            self._scaled[key] = pygame.transform.smoothscale(self._images[path], key[1:])
        return self._scaled[key]

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("jetbrainsmono", 22)
        return self._font

    def draw(self, screen: pygame.Surface, state: GameState):
        w, h = int(state.viewport_width), int(state.viewport_height)
        self._draw_background(screen, state, w, h)

        for o in state.obstacles:
            pygame.draw.rect(screen, COLOR_OBSTACLE, o.rect.to_pygame())

        p = state.player
        sprite = self._image(self.assets.player_image, (p.width, p.height))
        if sprite is not None:
            screen.blit(sprite, (int(p.x), int(p.y)))
        else:
            pygame.draw.rect(screen, COLOR_DANGER if state.crashed else COLOR_ACCENT, p.rect.to_pygame())

        if state.phase is Phase.STOPPED:
            self._draw_prompt(screen, state, w, h)

    def _draw_background(self, screen: pygame.Surface, state: GameState, w: int, h: int):
        bg = self._image(self.assets.background_image, (w, h))
        if bg is None:
            screen.fill(COLOR_BG)
            return
        # Two copies side by side, shifted left by the scroll offset
        off = int(state.background_offset)
        screen.blit(bg, (-off, 0))
        screen.blit(bg, (w - off, 0))

    def _draw_prompt(self, screen: pygame.Surface, state: GameState, w: int, h: int):
        font = self._get_font()
        lines = prompt_lines(state)

        panel_w, panel_h = 320, 30 * len(lines) + 20
        panel = pygame.Surface((panel_w, panel_h), pygame.SRCALPHA)
        panel.fill(COLOR_PANEL)
        x0, y0 = (w - panel_w) // 2, (h - panel_h) // 2
        screen.blit(panel, (x0, y0))
        for i, msg in enumerate(lines):
            txt = font.render(msg, True, COLOR_FG)
            screen.blit(txt, (x0 + (panel_w - txt.get_width()) // 2, y0 + 10 + i * 30))
