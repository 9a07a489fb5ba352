# rocket_run/env/platformer_env.py
from __future__ import annotations
from typing import Optional, Dict, Any, List
import numpy as np
import gymnasium as gym
import pygame

from rocket_run.game.config import WIDTH, HEIGHT, FPS, START_LIVES
from rocket_run.game.render import draw_world, draw_hud
from rocket_run.game.session import GameSession
from rocket_run.game.state import GameEvent, Intents, SessionStatus
from rocket_run.env.observations import build_observation, observation_bounds

# action -> (left, right, jump)
ACTIONS = (
    (False, False, False),   # 0 NOOP
    (True, False, False),    # 1 LEFT
    (False, True, False),    # 2 RIGHT
    (False, False, True),    # 3 JUMP
    (True, False, True),     # 4 LEFT + JUMP
    (False, True, True),     # 5 RIGHT + JUMP
)

REWARD_COLLECT = 1.0
REWARD_LEVEL_COMPLETE = 10.0
REWARD_LIFE_LOST = -5.0
REWARD_PROGRESS_PER_PX = 0.01


class RocketRunEnv(gym.Env):
    """
    Rocket Run Gymnasium environment (vector observations).
    - Simulation at 60 Hz, one GameSession frame per sim step.
    - Agent acts every `frame_skip` frames (default 4).
    - A jump action is a single key press on the first sub-frame.
    - Observation: shape (17,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 lives: int = START_LIVES):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.lives = int(lives)

        self.sim_fps = FPS
        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(len(ACTIONS))
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.session: Optional[GameSession] = None
        self.timestep: int = 0
        self.best_world_x: int = 0

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)
        # The level is hand-authored: seeding only affects self.np_random.
        self.session = GameSession(lives=self.lives)
        self.timestep = 0
        self.best_world_x = self.session.state.character.world_x

        obs = self._get_obs()
        return obs, self._info([])

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None, "call reset() before step()"

        left, right, jump = ACTIONS[int(action)]
        events: List[GameEvent] = []
        lives_before = self.session.state.lives
        reward = 0.0

        for i in range(self.frame_skip):
            # release jump after the first sub-frame so the next jump action is a fresh press
            intents = Intents(move_left=left, move_right=right, jump=jump and i == 0)
            events.extend(self.session.step(intents))
            if self.session.is_over:
                break

        state = self.session.state
        if state.character.world_x > self.best_world_x:
            reward += REWARD_PROGRESS_PER_PX * (state.character.world_x - self.best_world_x)
            self.best_world_x = state.character.world_x
        reward += REWARD_COLLECT * events.count(GameEvent.COLLECT)
        if GameEvent.LEVEL_COMPLETE in events:
            reward += REWARD_LEVEL_COMPLETE
        lost = lives_before - state.lives
        if lost > 0:
            reward += REWARD_LIFE_LOST * lost
            # respawn puts the character back at the start
            self.best_world_x = state.character.world_x

        self.timestep += 1
        terminated = self.session.is_over
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = self._info(events)

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return build_observation(self.session.state, self.lives)

    def _info(self, events: List[GameEvent]) -> Dict[str, Any]:
        assert self.session is not None
        state = self.session.state
        return {
            "timestep": self.timestep,
            "score": state.score,
            "lives": state.lives,
            "world_x": state.character.world_x,
            "status": state.status.value,
            "events": [e.value for e in events],
            "level_complete": state.status is SessionStatus.LEVEL_COMPLETE,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Rocket Run - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.font = pygame.font.Font(None, 28)

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()

        snap = self.session.snapshot()
        draw_world(self.screen, snap)
        draw_hud(self.screen, snap, self.font, self.font)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
