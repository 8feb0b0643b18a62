from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blockfall.game import Action, FallingBlockGame, GameConfig, PIECE_COLORS, TetrominoType

# Pause and reset belong to the episode loop, not the agent
ENV_ACTIONS = (Action.LEFT, Action.RIGHT, Action.ROTATE, Action.SOFT_DROP, Action.NONE)

EMPTY_COLOR = (30, 30, 36)


class FallingBlockEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 gravity_every: int = 4,
                 max_episode_steps: int = 10000,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        if gravity_every < 1:
            raise ValueError(f"gravity_every must be positive, got {gravity_every}")
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        height, width = self.game.grid.height, self.game.grid.width
        top = int(max(TetrominoType))
        # Settled cells are positive identities, the falling piece negative
        self.observation_space = spaces.Box(low=-top, high=top, shape=(height, width), dtype=np.int8)
        self.action_space = spaces.Discrete(len(ENV_ACTIONS))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared_total": self.game.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        if not self.action_space.contains(int(action)):
            raise ValueError(f"action {action!r} is outside {self.action_space}")
        score_before = self.game.score
        lines_before = self.game.lines_cleared_total

        self.game.step(ENV_ACTIONS[int(action)])
        self._steps += 1
        if self._steps % self.gravity_every == 0 and not self.game.game_over:
            self.game.tick()

        terminated = bool(self.game.game_over)
        truncated = not terminated and self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)
        if terminated:
            reward += self.terminal_penalty

        info = self._get_info()
        info["lines_cleared"] = self.game.lines_cleared_total - lines_before
        return self.game.get_state(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = self.game.get_state()
        cell = 12
        h, w = state.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                color = PIECE_COLORS[TetrominoType(abs(v))] if v else EMPTY_COLOR
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
