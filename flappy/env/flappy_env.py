# flappy/env/flappy_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from flappy.game.collision import out_of_bounds
from flappy.game.config import WIDTH, HEIGHT
from flappy.game.events import ActivateInput, SpawnSample, TimeAdvance, ViewportReady
from flappy.game.machine import Game, Phase
from flappy.game.render import Renderer
from flappy.game.settings import Assets, GameConfig
from flappy.game.timing import GapSampler, SpawnClock
from flappy.env.observations import build_observation, OBS_LOW, OBS_HIGH


class FlappyEnv(gym.Env):
    """
    Flappy Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal), driving the same Game state machine as the app.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: shape (5,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0,
                 config: Optional[GameConfig] = None,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 assets: Optional[Assets] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.config = config or GameConfig()
        self.width, self.height = int(width), int(height)
        self.assets = assets or Assets()

        # Internal sim timing
        self.sim_fps = 60
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            # decisions per second = sim_fps / frame_skip
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = FLAP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.game: Optional[Game] = None
        self.sampler: Optional[GapSampler] = None
        self.spawn_clock = SpawnClock(self.config.spawn_interval_ms)
        self.timestep: int = 0
        self.elapsed_s: float = 0.0
        self.death_cause: Optional[str] = None   # "obstacle" | "bounds" | None

        # Rendering
        self.renderer: Optional[Renderer] = None
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Gap heights come from the env's seeded generator -> reproducible episodes
        self.sampler = GapSampler(self.config, uniform=self.np_random.uniform)
        self.game = Game(self.config, sampler=self.sampler, assets=self.assets,
                         width=self.width, height=self.height)
        self.game.handle(ViewportReady(self.width, self.height))
        self.game.handle(ActivateInput())
        self.spawn_clock.reset()

        self.timestep = 0
        self.elapsed_s = 0.0
        self.death_cause = None

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.game is not None, "Call reset() before step()"

        game = self.game
        if action == 1 and game.playing:
            game.handle(ActivateInput())

        for _ in range(self.frame_skip):
            for _ in range(self.spawn_clock.tick(self.dt)):
                game.handle(SpawnSample(self.sampler.sample(game.state.viewport_height)))
            game.handle(TimeAdvance(self.dt))
            self.elapsed_s += self.dt
            if not game.playing:
                s = game.state
                self.death_cause = "bounds" if out_of_bounds(s.player, s.viewport_height) else "obstacle"
                break

        self.timestep += 1
        terminated = game.state.phase is Phase.STOPPED
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        # +1 for surviving the decision, -1 on the crash
        reward = -1.0 if terminated else 1.0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.game is not None
        return build_observation(self.game.state)

    def _info(self) -> Dict[str, Any]:
        s = self.game.state
        return {
            "timestep": self.timestep,
            "time_s": self.elapsed_s,
            "obstacles": len(s.obstacles),
            "death_cause": self.death_cause,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.game is None:
            return None

        if self.renderer is None:
            self.renderer = Renderer(self.assets)

        if self.render_mode == "human":
            if self.screen is None:
                pygame.init()
                self.screen = pygame.display.set_mode((self.width, self.height))
                pygame.display.set_caption("Flappy — Gym Env")
                self.clock = pygame.time.Clock()
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            self.renderer.draw(self.screen, self.game.state)
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        # rgb_array: off-screen surface, no window needed
        if self.screen is None:
            self.screen = pygame.Surface((self.width, self.height))
        self.renderer.draw(self.screen, self.game.state)
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
                pygame.quit()
            self.screen = None
            self.clock = None
