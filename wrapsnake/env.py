from __future__ import annotations

from typing import Optional

import numpy as np

from wrapsnake.game import GameConfig, SnakeGame
from wrapsnake.grid import Direction


class SnakeEnv:
    """Lightweight Gym-like wrapper for headless play.

    Each ``step`` is one frame: the action is the key held during it and
    ``dt`` the frame's elapsed time.
    """

    ACTIONS = (None, Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frame_time: float = 1.0 / 60.0,
    ) -> None:
        self.game = SnakeGame(config=config, render_mode=render_mode)
        self.frame_time = frame_time
        self.state: np.ndarray = self._encode_state()

    def reset(self, seed: Optional[int] = None) -> np.ndarray:
        if seed is not None:
            self.game.random.seed(seed)
        self.game.reset()
        self.state = self._encode_state()
        return self.state

    def step(self, action: int, dt: Optional[float] = None):
        assert 0 <= action < len(self.ACTIONS), "Invalid action"
        key = self.ACTIONS[action]
        held = frozenset() if key is None else frozenset({key})
        result = self.game.frame(held, self.frame_time if dt is None else dt)
        self.state = self._encode_state()
        info = {
            "length": len(result.snake),
            "direction": result.direction,
            "moved": result.moved,
            "spawned": result.spawned,
            "ate_food": result.ate_food,
        }
        return self.state, info

    def render(self) -> None:
        self.game.render()

    def close(self) -> None:
        self.game.close()

    def _encode_state(self) -> np.ndarray:
        """3 channels (body, head, food), indexed ``[channel, y, x]``."""
        h, w = self.game.grid.height, self.game.grid.width
        state = np.zeros((3, h, w), dtype=np.float32)

        snake = self.game.snake
        for x, y in snake:
            state[0, y, x] = 1.0

        head_x, head_y = snake[0]
        state[1, head_y, head_x] = 1.0

        food = self.game.food
        if food is not None:
            state[2, food.y, food.x] = 1.0

        return state
