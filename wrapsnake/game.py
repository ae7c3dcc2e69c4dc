from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Sequence, Tuple

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

from wrapsnake import systems
from wrapsnake.clock import SimulationClock
from wrapsnake.entities import (
    FOOD_SIZE,
    HEAD_SIZE,
    SEGMENT_SIZE,
    EntityRegistry,
    RenderItem,
)
from wrapsnake.grid import Direction, Grid, MovementPolicy, Position
from wrapsnake.layout import layout, screen_rect

logger = logging.getLogger(__name__)

SNAKE_HEAD_COLOR = (179, 179, 179)
SNAKE_SEGMENT_COLOR = (77, 77, 77)
FOOD_COLOR = (255, 47, 136)  # #ff2f88
BACKGROUND_COLOR = (0, 0, 0)
WINDOW_TITLE = "(Bad) Snake"

_COLORS = {
    "head": SNAKE_HEAD_COLOR,
    "segment": SNAKE_SEGMENT_COLOR,
    "food": FOOD_COLOR,
}


@dataclass
class GameConfig:
    width: int = 10
    height: int = 10
    move_period: float = 0.15
    spawn_period: float = 1.0
    initial_snake: Sequence[Tuple[int, int]] = ((3, 3), (3, 2))
    initial_direction: Direction = Direction.UP
    policy: MovementPolicy = MovementPolicy.WRAPAROUND
    grow_on_eat: bool = True
    resolution: Tuple[int, int] = (500, 500)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("board width and height must be positive")
        if self.move_period <= 0 or self.spawn_period <= 0:
            raise ValueError("timer periods must be positive")
        if not self.initial_snake:
            raise ValueError("initial snake needs at least a head")
        for x, y in self.initial_snake:
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"initial segment {(x, y)} is off the board")

    @classmethod
    def reduced(cls, **overrides) -> "GameConfig":
        """Clamped board edges and a lone head, no trailing segments."""
        overrides.setdefault("policy", MovementPolicy.CLAMPED)
        overrides.setdefault("initial_snake", ((3, 3),))
        return cls(**overrides)


@dataclass
class FrameResult:
    snake: List[Position]
    food: Optional[Position]
    direction: Direction
    moved: bool = False
    spawned: bool = False
    ate_food: bool = False


class SnakeGame:
    """One game session: owns the board, the entities and both timers.

    ``frame`` runs the systems in a fixed order: input, movement (with
    eating), then food spawning.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.grid = Grid(self.config.width, self.config.height, self.config.policy)
        self.random = random.Random(self.config.seed)
        self.registry = EntityRegistry()
        self.clock = SimulationClock(self.config.move_period, self.config.spawn_period)

        self._window = None

        if self.render_mode:
            self._init_render()

        self.reset()

    def _init_render(self) -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        pygame.init()
        self._window = pygame.display.set_mode(self.config.resolution)
        pygame.display.set_caption(WINDOW_TITLE)

    def reset(self) -> FrameResult:
        self.registry.clear()
        self.registry.spawn_snake(
            [Position(x, y) for x, y in self.config.initial_snake],
            self.config.initial_direction,
        )
        self.clock.reset()
        logger.debug("snake spawned at %s facing %s", self.snake, self.direction.value)
        return self._result()

    @property
    def head(self):
        return self.registry.head

    @property
    def direction(self) -> Direction:
        return self.registry.head.current_direction

    @property
    def snake(self) -> List[Position]:
        return self.registry.snake_positions()

    @property
    def food(self) -> Optional[Position]:
        return self.registry.food.position if self.registry.food else None

    def frame(self, held: AbstractSet[Direction], delta: float) -> FrameResult:
        systems.resolve_input(held, self.registry.head)
        ticks = self.clock.tick(delta)

        ate_food = False
        if ticks.move:
            snapshot = systems.advance_snake(self.registry, self.grid)
            if self.config.grow_on_eat:
                ate_food = systems.consume_food(self.registry, snapshot)
        if ticks.spawn:
            systems.spawn_food(self.registry, self.grid, self.random)

        return self._result(moved=ticks.move, spawned=ticks.spawn, ate_food=ate_food)

    def _result(self, moved: bool = False, spawned: bool = False, ate_food: bool = False) -> FrameResult:
        return FrameResult(
            snake=self.snake,
            food=self.food,
            direction=self.direction,
            moved=moved,
            spawned=spawned,
            ate_food=ate_food,
        )

    def render_items(self) -> List[RenderItem]:
        items = []
        for i, eid in enumerate(self.registry.segments):
            kind, size = ("head", HEAD_SIZE) if i == 0 else ("segment", SEGMENT_SIZE)
            items.append(RenderItem(eid, kind, self.registry.position_of(eid), size))
        if self.registry.food is not None:
            items.append(RenderItem(self.registry.food_id, "food", self.registry.food.position, FOOD_SIZE))
        return items

    def _resolution(self) -> Optional[Tuple[int, int]]:
        surface = pygame.display.get_surface()
        return surface.get_size() if surface is not None else None

    def render(self) -> None:
        if not self.render_mode:
            return
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        resolution = self._resolution()
        sprites = layout(self.render_items(), (self.grid.width, self.grid.height), resolution)
        if not sprites:
            return

        assert self._window is not None
        self._window.fill(BACKGROUND_COLOR)
        # Food is drawn last so it shows on top of a body it spawned under.
        for sprite in sprites:
            rect = pygame.Rect(*screen_rect(sprite, resolution))
            pygame.draw.rect(self._window, _COLORS[sprite.item.kind], rect)
        pygame.display.flip()

    def close(self) -> None:
        if pygame:
            pygame.quit()
