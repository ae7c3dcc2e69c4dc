from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    LEFT = "LEFT"
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
}

# y grows upwards, matching the centered-origin layout
_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
}


class MovementPolicy(Enum):
    WRAPAROUND = "wraparound"
    CLAMPED = "clamped"


def wrap(coordinate: int, bound: int) -> int:
    """Euclidean modulo: always lands in ``[0, bound)``."""
    return coordinate % bound


def clamp(coordinate: int, bound: int) -> int:
    return max(0, min(bound - 1, coordinate))


@dataclass(frozen=True)
class Grid:
    width: int = 10
    height: int = 10
    policy: MovementPolicy = MovementPolicy.WRAPAROUND

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid width and height must be positive")

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def step(self, pos: Position, direction: Direction, distance: int = 1) -> Position:
        dx, dy = direction.delta
        x = pos.x + dx * distance
        y = pos.y + dy * distance
        if self.policy is MovementPolicy.CLAMPED:
            return Position(clamp(x, self.width), clamp(y, self.height))
        return Position(wrap(x, self.width), wrap(y, self.height))

