# flappy/game/obstacles.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from .geometry import Rect


@dataclass(frozen=True)
class Obstacle:
    rect: Rect
    side: str  # "top" or "bot": which viewport edge the segment is flush with

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def width(self) -> float:
        return self.rect.width


def spawn(gap_height: float, viewport_width: float, viewport_height: float,
          toggle: bool, width: float) -> Obstacle:
    """
    One solid segment of height `gap_height`, just past the right edge.
    toggle=True -> flush with the top (y=0); False -> flush with the bottom.
    """
    if toggle:
        return Obstacle(Rect(viewport_width, 0.0, width, gap_height), "top")
    return Obstacle(Rect(viewport_width, viewport_height - gap_height, width, gap_height), "bot")


def advance(obstacles: Sequence[Obstacle], dt: float, velocity: float) -> List[Obstacle]:
    """Scroll every obstacle left by velocity*dt."""
    dx = -velocity * dt
    return [Obstacle(o.rect.moved(dx), o.side) for o in obstacles]


def prune(obstacles: Sequence[Obstacle]) -> List[Obstacle]:
    """Drop obstacles fully off the left edge; keeps the rest in order."""
    return [o for o in obstacles if not (o.rect.right < 0)]
