# flappy/env/observations.py
from __future__ import annotations
from typing import Optional

import numpy as np

from ..game.config import JUMP_IMPULSE_SPEED
from ..game.machine import GameState
from ..game.obstacles import Obstacle

OBS_DIM = 5
VY_SCALE = 2.0 * JUMP_IMPULSE_SPEED  # |vy| at or above this saturates to ±1

OBS_LOW = np.array([0.0, -1.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def next_obstacle(state: GameState) -> Optional[Obstacle]:
    """Nearest obstacle whose right edge is still ahead of the player's left edge."""
    px = state.player.x
    ahead = [o for o in state.obstacles if o.rect.right > px]
    if not ahead:
        return None
    return min(ahead, key=lambda o: o.rect.x)


def build_observation(state: GameState, vy_scale: float = VY_SCALE) -> np.ndarray:
    """
    [y_norm, vy_norm, dx_norm, gap_top_norm, gap_bottom_norm], float32.

    y_norm          player top in [0, H - player_h]
    vy_norm         vy / vy_scale clipped to [-1, 1] (positive = rising)
    dx_norm         distance from the player's right edge to the next obstacle / W
    gap_top/bottom  open vertical band beside the next obstacle, / H
    With no obstacle ahead: dx=1 and the gap is the whole screen.
    """
    p = state.player
    w = max(1.0, state.viewport_width)
    h = max(1.0, state.viewport_height)

    y_norm = _clamp01(p.y / max(1.0, h - p.height))
    vy_norm = max(-1.0, min(1.0, p.vy / max(1.0, vy_scale)))

    o = next_obstacle(state)
    if o is None:
        dx_norm, gap_top, gap_bot = 1.0, 0.0, 1.0
    else:
        dx_norm = _clamp01((o.rect.x - (p.x + p.width)) / w)
        if o.side == "top":
            gap_top, gap_bot = _clamp01(o.rect.bottom / h), 1.0
        else:
            gap_top, gap_bot = 0.0, _clamp01(o.rect.y / h)

    return np.array([y_norm, vy_norm, dx_norm, gap_top, gap_bot], dtype=np.float32)
