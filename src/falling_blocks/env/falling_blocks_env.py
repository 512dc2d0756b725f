from __future__ import annotations

import random
from fractions import Fraction
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import FallingBlocksGame, GameConfig, TickInput
from falling_blocks.game.pieces import color_for


ACTION_INPUTS = (
    TickInput(),                  # 0: none
    TickInput(left=True),         # 1: move left
    TickInput(right=True),        # 2: move right
    TickInput(rotate_cw=True),    # 3: rotate clockwise
    TickInput(rotate_ccw=True),   # 4: rotate counter-clockwise
    TickInput(soft_drop=True),    # 5: hold soft drop for this frame
)


class FallingBlocksEnv(gym.Env):
    """Plays the falling-block game one frame per step.

    Every step advances the engine by ``frame_time`` seconds with the chosen
    action as that frame's input. The reward is the points scored during the
    frame; the episode terminates on game over.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 5}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frame_time: Fraction = Fraction(1, 5),
        max_episode_steps: int = 10_000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.game = FallingBlocksGame(self.config, rng=random.Random(self.config.random_seed))
        self.render_mode = render_mode
        self.frame_time = frame_time
        self.max_episode_steps = int(max_episode_steps)

        rows, cols = self.config.rows, self.config.columns
        self.observation_space = spaces.Box(low=-7, high=7, shape=(rows, cols), dtype=np.int8)
        self.action_space = spaces.Discrete(len(ACTION_INPUTS))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.start_game()
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        report = self.game.tick(self.frame_time, ACTION_INPUTS[int(action)])
        self._steps += 1

        terminated = bool(self.game.game_over)
        truncated = not terminated and self._steps >= self.max_episode_steps
        info = self._get_info()
        info["lines_cleared"] = report.lines_cleared
        info["pieces_locked"] = report.pieces_locked
        return self.game.get_state(), float(report.points), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            state = self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = int(state[y, x])
                    color = color_for(v) if v else (0, 0, 0)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
