# flappy/game/controls.py
from __future__ import annotations
import pygame
from pygame import K_SPACE, K_p

from .events import Event, ActivateInput, PauseToggleInput, ViewportReady, NoOp

ACTIVATE_KEYS = (K_SPACE,)
PAUSE_KEYS = (K_p,)


def map_event(event: pygame.event.Event) -> Event:
    """Raw pygame event -> game event. Unknown input is a NoOp, never an error."""
    if event.type == pygame.KEYDOWN:
        if event.key in ACTIVATE_KEYS:
            return ActivateInput()
        if event.key in PAUSE_KEYS:
            return PauseToggleInput()
        return NoOp()
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return ActivateInput()
    if event.type == pygame.FINGERDOWN:
        return ActivateInput()
    if event.type == pygame.VIDEORESIZE:
        return ViewportReady(float(event.w), float(event.h))
    return NoOp()
