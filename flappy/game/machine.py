# flappy/game/machine.py
"""
Game state machine.

Phases:
    STOPPED: idle, game over (state frozen as it crashed) or paused
    PLAYING: one physics + collision pass per TimeAdvance

Every event goes through Game.handle(); renderers only read Game.state.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from .collision import has_collided
from .config import WIDTH, HEIGHT
from .events import (
    Event, ViewportReady, TimeAdvance, ActivateInput, PauseToggleInput, SpawnSample,
)
from .obstacles import Obstacle, spawn, advance, prune
from .player import PlayerBody, spawn_player, integrate, apply_impulse
from .settings import Assets, GameConfig
from .timing import GapSampler

logger = logging.getLogger(__name__)


class Phase(Enum):
    STOPPED = auto()
    PLAYING = auto()


@dataclass
class GameState:
    player: PlayerBody
    viewport_width: float
    viewport_height: float
    obstacles: List[Obstacle] = field(default_factory=list)  # spawn order, newest last
    phase: Phase = Phase.STOPPED
    spawn_toggle: bool = True     # True -> next segment flush with the top
    paused: bool = False          # STOPPED by a pause, resumable
    crashed: bool = False         # STOPPED by a collision (game over)
    background_offset: float = 0.0


class Game:
    def __init__(self, config: Optional[GameConfig] = None,
                 sampler: Optional[GapSampler] = None,
                 assets: Optional[Assets] = None,
                 width: float = WIDTH, height: float = HEIGHT):
        self.config = config or GameConfig()
        self.sampler = sampler or GapSampler(self.config)
        self.assets = assets or Assets()
        self.state = GameState(
            player=spawn_player(self.config, width, height),
            viewport_width=float(width),
            viewport_height=float(height),
        )

    # -------------------- Entry point --------------------

    def handle(self, event: Event) -> GameState:
        if isinstance(event, ViewportReady):
            self._on_viewport(event.width, event.height)
        elif isinstance(event, TimeAdvance):
            if self.state.phase is Phase.PLAYING:
                self._step(event.dt)
        elif isinstance(event, ActivateInput):
            if self.state.phase is Phase.PLAYING:
                s = self.state
                s.player = apply_impulse(s.player, self.config.jump_impulse_speed)
            else:
                self._start()
        elif isinstance(event, PauseToggleInput):
            self._on_pause_toggle()
        elif isinstance(event, SpawnSample):
            if self.state.phase is Phase.PLAYING:
                self._spawn(event.height)
        # NoOp and anything unrecognised: nothing to do
        return self.state

    # Thin wrappers for hosts that prefer calls over event objects
    def resize(self, width: float, height: float) -> GameState:
        return self.handle(ViewportReady(width, height))

    def tick(self, dt: float) -> GameState:
        return self.handle(TimeAdvance(dt))

    def activate(self) -> GameState:
        return self.handle(ActivateInput())

    def toggle_pause(self) -> GameState:
        return self.handle(PauseToggleInput())

    def spawn(self, height: float) -> GameState:
        return self.handle(SpawnSample(height))

    @property
    def playing(self) -> bool:
        return self.state.phase is Phase.PLAYING

    # -------------------- Transitions --------------------

    def _on_viewport(self, width: float, height: float):
        s = self.state
        s.viewport_width = float(width)
        s.viewport_height = float(height)
        if s.phase is Phase.STOPPED:
            s.player = spawn_player(self.config, s.viewport_width, s.viewport_height)
            s.obstacles = []
            s.paused = False
            s.crashed = False
            s.background_offset = 0.0
        logger.debug("Viewport set to %sx%s (%s)", width, height, s.phase.name)

    def _start(self):
        s = self.state
        s.obstacles = []
        s.player = apply_impulse(
            spawn_player(self.config, s.viewport_width, s.viewport_height),
            self.config.jump_impulse_speed,
        )
        s.spawn_toggle = True
        s.paused = False
        s.crashed = False
        s.background_offset = 0.0
        self._spawn(self.sampler.sample(s.viewport_height))
        s.phase = Phase.PLAYING
        logger.info("Game started (viewport %sx%s)", s.viewport_width, s.viewport_height)

    def _on_pause_toggle(self):
        s = self.state
        if s.phase is Phase.PLAYING:
            s.phase = Phase.STOPPED
            s.paused = True
            logger.info("Paused")
        elif s.paused:
            s.phase = Phase.PLAYING
            s.paused = False
            logger.info("Resumed")

    def _spawn(self, gap_height: float):
        s = self.state
        o = spawn(gap_height, s.viewport_width, s.viewport_height,
                  s.spawn_toggle, self.config.obstacle_width)
        s.obstacles.append(o)
        s.spawn_toggle = not s.spawn_toggle
        logger.debug("Spawned %s obstacle h=%.1f", o.side, gap_height)

    def _step(self, dt: float):
        s = self.state
        cfg = self.config
        s.player = integrate(s.player, dt, cfg.gravity)
        s.obstacles = prune(advance(s.obstacles, dt, cfg.obstacle_velocity))
        if s.viewport_width > 0:
            s.background_offset = (s.background_offset + cfg.background_velocity * dt) % s.viewport_width

        # Post-update positions decide near misses at tick boundaries
        if has_collided(s.player, s.obstacles, s.viewport_height):
            s.phase = Phase.STOPPED
            s.crashed = True
            logger.info("Crashed at y=%.1f with %d obstacles on screen", s.player.y, len(s.obstacles))
