# flappy/game/timing.py
from __future__ import annotations
import random
from typing import Callable, Optional

from .config import MAX_DT
from .settings import GameConfig


class GapSampler:
    """
    External randomness for the obstacle stream.
    `uniform(low, high)` may be any sampler (random.Random.uniform,
    numpy Generator.uniform, a scripted stub in tests).
    """
    def __init__(self, config: GameConfig,
                 uniform: Optional[Callable[[float, float], float]] = None,
                 seed: Optional[int] = None):
        if uniform is None:
            if seed is None:
                seed = random.randrange(0, 2**32 - 1)
            uniform = random.Random(seed).uniform
        self.seed = seed
        self.config = config
        self._uniform = uniform

    def sample(self, viewport_height: float) -> float:
        lo, hi = self.config.gap_height_range
        return float(self._uniform(lo * viewport_height, hi * viewport_height))


class SpawnClock:
    """Counts frame time and reports how many spawn ticks fell due."""
    def __init__(self, interval_ms: int):
        self.interval_s = interval_ms / 1000.0
        self._elapsed = 0.0

    def reset(self):
        self._elapsed = 0.0

    def tick(self, dt: float) -> int:
        self._elapsed += dt
        due = 0
        while self._elapsed >= self.interval_s:
            self._elapsed -= self.interval_s
            due += 1
        return due


def clamp_dt(dt: float, max_dt: float = MAX_DT) -> float:
    return max_dt if dt > max_dt else dt
