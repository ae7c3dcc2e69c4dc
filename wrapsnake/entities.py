from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from wrapsnake.grid import Direction, Position

EntityId = int

HEAD_SIZE = 0.8
SEGMENT_SIZE = 0.65
FOOD_SIZE = 0.8


@dataclass
class SnakeHead:
    current_direction: Direction
    last_applied_direction: Optional[Direction] = None


@dataclass
class SnakeSegment:
    position: Position


@dataclass
class Food:
    position: Position


class EntityRegistry:
    """Owns the snake's segment chain and the live food.

    ``segments`` is the ordered follow-chain, head first. Segment data is
    stored by id; segments never reference each other.
    """

    def __init__(self) -> None:
        self._ids = itertools.count()
        self.segments: List[EntityId] = []
        self.head: Optional[SnakeHead] = None
        self._segment_data: Dict[EntityId, SnakeSegment] = {}
        self.food_id: Optional[EntityId] = None
        self.food: Optional[Food] = None

    def _next_id(self) -> EntityId:
        return next(self._ids)

    # -- snake -----------------------------------------------------------

    def spawn_snake(self, positions: Sequence[Position], direction: Direction) -> List[EntityId]:
        """Replace the whole snake with a fresh chain at ``positions``."""
        if not positions:
            raise ValueError("a snake needs at least a head")
        self._segment_data.clear()
        self.segments = []
        for pos in positions:
            self.segments.append(self._add_segment(pos))
        self.head = SnakeHead(current_direction=direction)
        return list(self.segments)

    def _add_segment(self, pos: Position) -> EntityId:
        eid = self._next_id()
        self._segment_data[eid] = SnakeSegment(Position(*pos))
        return eid

    def grow(self, pos: Position) -> EntityId:
        eid = self._add_segment(pos)
        self.segments.append(eid)
        return eid

    @property
    def head_id(self) -> EntityId:
        return self.segments[0]

    def position_of(self, eid: EntityId) -> Position:
        return self._segment_data[eid].position

    def set_position(self, eid: EntityId, pos: Position) -> None:
        self._segment_data[eid].position = pos

    def snake_positions(self) -> List[Position]:
        # Positions are immutable tuples, so this list is a full snapshot.
        return [self._segment_data[eid].position for eid in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    # -- food ------------------------------------------------------------

    def spawn_food(self, pos: Position) -> EntityId:
        """Place food at ``pos``, replacing any food already on the board."""
        self.food_id = self._next_id()
        self.food = Food(Position(*pos))
        return self.food_id

    def despawn_food(self) -> None:
        self.food_id = None
        self.food = None

    def clear(self) -> None:
        self.segments = []
        self._segment_data.clear()
        self.head = None
        self.despawn_food()


@dataclass(frozen=True)
class RenderItem:
    entity: EntityId
    kind: str  # "head", "segment" or "food"
    position: Position
    size: float
