# flappy/game/player.py
from __future__ import annotations
from dataclasses import dataclass, replace

from .geometry import Rect
from .settings import GameConfig


@dataclass(frozen=True)
class PlayerBody:
    """
    Player hitbox + vertical motion.
    - vy > 0 moves the body UP the screen (y decreases)
    - x stays fixed for a whole session; the world scrolls instead
    """
    x: float
    y: float
    vy: float
    width: float
    height: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


def spawn_player(config: GameConfig, viewport_width: float, viewport_height: float) -> PlayerBody:
    """Default body: fixed x, vertically centered, at rest."""
    return PlayerBody(
        x=viewport_width * config.player_x_ratio,
        y=(viewport_height - config.player_height) / 2,
        vy=0.0,
        width=config.player_width,
        height=config.player_height,
    )


def integrate(body: PlayerBody, dt: float, gravity: float) -> PlayerBody:
    """Advance under constant gravity. Uses the mean velocity over the step,
    so splitting dt into smaller steps gives the same trajectory."""
    vy = body.vy - gravity * dt
    y = body.y - 0.5 * (body.vy + vy) * dt
    return replace(body, y=y, vy=vy)


def apply_impulse(body: PlayerBody, jump_speed: float) -> PlayerBody:
    """Flap: velocity is replaced, not added to."""
    return replace(body, vy=jump_speed)
