# flappy/game/settings.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config import (
    GRAVITY, JUMP_IMPULSE_SPEED, OBSTACLE_VELOCITY, BACKGROUND_VELOCITY,
    SPAWN_INTERVAL_MS, GAP_HEIGHT_RANGE,
    PLAYER_W, PLAYER_H, PLAYER_X_RATIO, OBSTACLE_W,
)


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable tuning passed to the game at construction.

    gravity / jump_impulse_speed / velocities are in px and seconds.
    gap_height_range is (low, high) as fractions of the viewport height;
    a sampled gap height is the height of the solid segment spawned.
    """
    gravity: float = GRAVITY
    jump_impulse_speed: float = JUMP_IMPULSE_SPEED
    obstacle_velocity: float = OBSTACLE_VELOCITY
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    gap_height_range: Tuple[float, float] = GAP_HEIGHT_RANGE
    player_width: float = PLAYER_W
    player_height: float = PLAYER_H
    player_x_ratio: float = PLAYER_X_RATIO
    obstacle_width: float = OBSTACLE_W
    background_velocity: float = BACKGROUND_VELOCITY

    def __post_init__(self):
        lo, hi = self.gap_height_range
        if not (0.0 <= lo <= hi <= 1.0):
            raise ValueError(f"gap_height_range must satisfy 0 <= low <= high <= 1, got {self.gap_height_range}")
        if self.spawn_interval_ms <= 0:
            raise ValueError(f"spawn_interval_ms must be > 0, got {self.spawn_interval_ms}")
        if self.player_width <= 0 or self.player_height <= 0:
            raise ValueError("player dimensions must be positive")
        if self.obstacle_width <= 0:
            raise ValueError("obstacle_width must be positive")

    def replace(self, **changes) -> "GameConfig":
        return replace(self, **changes)


@dataclass(frozen=True)
class Assets:
    """Opaque image handles (paths/URIs). Only the renderer looks inside."""
    player_image: Optional[str] = None
    background_image: Optional[str] = None
