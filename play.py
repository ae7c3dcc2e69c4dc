from __future__ import annotations

import argparse
import logging
import sys

import pygame

from wrapsnake.game import GameConfig, SnakeGame
from wrapsnake.grid import Direction, MovementPolicy

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake on a wraparound board")
    parser.add_argument("--grid", type=int, nargs=2, default=(10, 10))
    parser.add_argument("--move-period", type=float, default=0.15)
    parser.add_argument("--spawn-period", type=float, default=1.0)
    parser.add_argument("--resolution", type=int, nargs=2, default=(500, 500))
    parser.add_argument("--clamped", action="store_true", help="Stop at the board edges instead of wrapping")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--debug", action="store_true", help="Log spawn and growth events")
    return parser.parse_args()


def held_directions(pressed) -> frozenset:
    return frozenset(direction for key, direction in KEYMAP.items() if pressed[key])


def main() -> None:
    args = parse_args()
    if args.debug:
        logging.getLogger("wrapsnake").setLevel(logging.DEBUG)

    width, height = args.grid
    overrides = dict(
        width=width,
        height=height,
        move_period=args.move_period,
        spawn_period=args.spawn_period,
        resolution=tuple(args.resolution),
        seed=args.seed,
    )
    config = GameConfig.reduced(**overrides) if args.clamped else GameConfig(**overrides)
    game = SnakeGame(config=config, render_mode="human")
    clock = pygame.time.Clock()
    logger.info(
        "Starting %dx%d %s board",
        width,
        height,
        "clamped" if config.policy is MovementPolicy.CLAMPED else "wraparound",
    )

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Final length: %d", len(game.snake))
                game.close()
                sys.exit()

        delta = clock.tick(args.fps) / 1000.0
        game.frame(held_directions(pygame.key.get_pressed()), delta)
        game.render()


if __name__ == "__main__":
    main()
