from __future__ import annotations

import logging
import random
from typing import AbstractSet, List

from wrapsnake.entities import EntityRegistry, SnakeHead
from wrapsnake.grid import Direction, Grid, Position

logger = logging.getLogger(__name__)

# Checked in this order when several keys are held at once.
INPUT_PRIORITY = (Direction.LEFT, Direction.DOWN, Direction.UP, Direction.RIGHT)

SNAKE_HEAD_VELOCITY = 1


def candidate_direction(held: AbstractSet[Direction], current: Direction) -> Direction:
    for direction in INPUT_PRIORITY:
        if direction in held:
            return direction
    return current


def resolve_input(held: AbstractSet[Direction], head: SnakeHead) -> bool:
    """Apply the held keys to ``head``. Returns False if a reversal was refused."""
    candidate = candidate_direction(held, head.current_direction)
    if candidate == head.current_direction.opposite():
        return False
    head.last_applied_direction = head.current_direction
    head.current_direction = candidate
    return True


def advance_snake(registry: EntityRegistry, grid: Grid) -> List[Position]:
    """Move the head one tile and pull every trailing segment along.

    Returns the pre-move snapshot of all segment positions, head first.
    """
    assert registry.head is not None
    snapshot = registry.snake_positions()
    new_head = grid.step(snapshot[0], registry.head.current_direction, SNAKE_HEAD_VELOCITY)
    registry.set_position(registry.head_id, new_head)
    for eid, pos in zip(registry.segments[1:], snapshot):
        registry.set_position(eid, pos)
    return snapshot


def consume_food(registry: EntityRegistry, snapshot: List[Position]) -> bool:
    """Eat the food under the head and grow onto the old tail cell."""
    if registry.food is None or not registry.segments:
        return False
    if registry.position_of(registry.head_id) != registry.food.position:
        return False
    eaten = registry.food.position
    registry.despawn_food()
    eid = registry.grow(snapshot[-1])
    logger.debug("food eaten at %s, segment %d added at %s", eaten, eid, snapshot[-1])
    return True


def random_cell(grid: Grid, rng: random.Random) -> Position:
    # No rejection sampling: food may land under the snake.
    return Position(int(rng.random() * grid.width), int(rng.random() * grid.height))


def spawn_food(registry: EntityRegistry, grid: Grid, rng: random.Random) -> Position:
    replaced = registry.food
    pos = random_cell(grid, rng)
    registry.spawn_food(pos)
    if replaced is not None:
        logger.debug("food at %s replaced by %s", replaced.position, pos)
    else:
        logger.debug("food spawned at %s", pos)
    return pos
