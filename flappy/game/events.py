# flappy/game/events.py
"""
Events accepted by Game.handle().

Hosts (pygame loop, RL env, tests) translate raw input and timers into these;
anything unrecognised becomes NoOp.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ViewportReady:
    width: float
    height: float


@dataclass(frozen=True)
class TimeAdvance:
    dt: float  # seconds


@dataclass(frozen=True)
class ActivateInput:
    pass


@dataclass(frozen=True)
class PauseToggleInput:
    pass


@dataclass(frozen=True)
class SpawnSample:
    height: float  # sampled gap height (px)


@dataclass(frozen=True)
class NoOp:
    pass


Event = Union[ViewportReady, TimeAdvance, ActivateInput, PauseToggleInput, SpawnSample, NoOp]
