# flappy/game/geometry.py
from __future__ import annotations
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Rect:
    """Axis-aligned float rectangle in viewport space (origin top-left, y down)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def moved(self, dx: float = 0.0, dy: float = 0.0) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def to_pygame(self) -> pygame.Rect:
        """Integer rect for drawing only; collisions stay in floats."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


def overlaps(a: Rect, b: Rect) -> bool:
    """Strict AABB test: rectangles that only share an edge do not overlap."""
    return (a.x < b.x + b.width and a.x + a.width > b.x
            and a.y < b.y + b.height and a.y + a.height > b.y)
