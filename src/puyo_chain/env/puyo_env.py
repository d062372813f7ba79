from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from puyo_chain.game import Action, GameConfig, PuyoGame


# Display colors for the default palette names; anything else falls back to grey.
RGB_BY_NAME: Dict[str, Tuple[int, int, int]] = {
    "red": (230, 60, 60),
    "green": (70, 200, 90),
    "blue": (60, 110, 230),
    "yellow": (235, 210, 60),
    "purple": (170, 80, 210),
}
BACKGROUND = (30, 30, 36)


class PuyoChainEnv(gym.Env):
    """Single-player environment over :class:`PuyoGame`.

    Each step applies the chosen action and then one gravity tick, so the pair
    keeps falling whatever the agent does. The reward is the score gained
    during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 2}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = PuyoGame(config)
        self.render_mode = render_mode
        self.terminal_penalty = float(terminal_penalty)

        rows, cols = self.game.grid.shape
        n_colors = self.game.config.palette_size

        # Observation: board with the falling pair overlaid as negative values, plus the next pair
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=-n_colors, high=n_colors, shape=(rows, cols), dtype=np.int8),
                "next": spaces.Box(low=1, high=n_colors, shape=(2,), dtype=np.int8),
            }
        )
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "board": self.game.get_state().astype(np.int8),
            "next": np.array(self.game.next_piece.colors, dtype=np.int8),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "last_chain": self.game.last_chain,
            "pieces_placed": self.game.pieces_placed,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        score_before = self.game.score
        self.game.step(int(action))
        self.game.tick()
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.game.config.max_episode_steps
        if terminated:
            reward += self.terminal_penalty
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = self.game.get_state()
        cell = 12
        h, w = state.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for row in range(h):
            for col in range(w):
                name = self.game.color_name(state[row, col])
                color = BACKGROUND if name is None else RGB_BY_NAME.get(name, (200, 200, 200))
                img[row * cell : (row + 1) * cell - 1, col * cell : (col + 1) * cell - 1, :] = color
        return img
