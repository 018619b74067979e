# flappy/game/collision.py
from __future__ import annotations
from typing import Iterable

from .geometry import overlaps
from .obstacles import Obstacle
from .player import PlayerBody


def out_of_bounds(body: PlayerBody, viewport_height: float) -> bool:
    return body.y < 0 or body.y + body.height > viewport_height


def has_collided(body: PlayerBody, obstacles: Iterable[Obstacle], viewport_height: float) -> bool:
    """Crash test: off the top/bottom edge, or touching any obstacle (strictly)."""
    if out_of_bounds(body, viewport_height):
        return True
    me = body.rect
    return any(overlaps(me, o.rect) for o in obstacles)
