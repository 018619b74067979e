# flappy/game/viewport.py
from __future__ import annotations
from dataclasses import dataclass

import pygame

from .events import ViewportReady


@dataclass(frozen=True)
class Viewport:
    """Logical playable area, independent of the physical display size."""
    width: float
    height: float

    def ready_event(self) -> ViewportReady:
        return ViewportReady(self.width, self.height)


def viewport_of(surface: pygame.Surface) -> Viewport:
    w, h = surface.get_size()
    return Viewport(float(w), float(h))
