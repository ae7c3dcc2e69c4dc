import pytest

from wrapsnake.game import GameConfig, SnakeGame
from wrapsnake.grid import Direction, MovementPolicy, Position

NO_KEYS = frozenset()


def test_snake_moves_up_each_movement_tick():
    game = SnakeGame(GameConfig(seed=123))
    heads = []
    for _ in range(3):
        result = game.frame(NO_KEYS, 0.15)
        assert result.moved
        heads.append(result.snake[0])
        assert result.snake[1] == Position(3, result.snake[0].y - 1)
    assert heads == [(3, 4), (3, 5), (3, 6)]
    assert game.food is None


def test_no_movement_before_period_elapses():
    game = SnakeGame()
    result = game.frame(NO_KEYS, 0.1)
    assert not result.moved
    assert result.snake == [(3, 3), (3, 2)]


def test_overshooting_frame_advances_only_once():
    game = SnakeGame()
    result = game.frame(NO_KEYS, 0.4)
    assert result.moved
    assert result.snake == [(3, 4), (3, 3)]


def test_turn_applies_on_next_movement_tick():
    game = SnakeGame()
    game.frame(frozenset({Direction.LEFT}), 0.05)
    assert game.snake[0] == (3, 3)
    assert game.head.last_applied_direction is Direction.UP
    result = game.frame(NO_KEYS, 0.1)
    assert result.direction is Direction.LEFT
    assert result.snake == [(2, 3), (3, 3)]


def test_reversal_is_ignored():
    game = SnakeGame()
    result = game.frame(frozenset({Direction.DOWN}), 0.15)
    assert result.direction is Direction.UP
    assert result.snake[0] == (3, 4)


def test_head_wraps_across_the_top_edge():
    game = SnakeGame(GameConfig(initial_snake=((4, 9), (4, 8))))
    result = game.frame(NO_KEYS, 0.15)
    assert result.snake == [(4, 0), (4, 9)]


def test_snake_grows_when_eating():
    game = SnakeGame()
    game.registry.spawn_food(Position(3, 4))
    result = game.frame(NO_KEYS, 0.15)
    assert result.ate_food
    assert result.food is None
    assert result.snake == [(3, 4), (3, 3), (3, 2)]

    result = game.frame(NO_KEYS, 0.15)
    assert result.snake == [(3, 5), (3, 4), (3, 3)]


def test_food_is_not_eaten_when_growth_disabled():
    game = SnakeGame(GameConfig(grow_on_eat=False))
    game.registry.spawn_food(Position(3, 4))
    result = game.frame(NO_KEYS, 0.15)
    assert not result.ate_food
    assert result.food == (3, 4)
    assert len(result.snake) == 2


def test_spawn_timer_replaces_food():
    game = SnakeGame(GameConfig(seed=7, move_period=5.0))
    result = game.frame(NO_KEYS, 0.99)
    assert not result.spawned
    assert result.food is None

    result = game.frame(NO_KEYS, 0.01)
    assert result.spawned
    first_id = game.registry.food_id

    game.frame(NO_KEYS, 1.0)
    assert game.registry.food_id != first_id
    assert sum(1 for item in game.render_items() if item.kind == "food") == 1


def test_seeded_sessions_spawn_food_identically():
    a = SnakeGame(GameConfig(seed=42))
    b = SnakeGame(GameConfig(seed=42))
    foods_a = [a.frame(NO_KEYS, 1.0).food for _ in range(5)]
    foods_b = [b.frame(NO_KEYS, 1.0).food for _ in range(5)]
    assert foods_a == foods_b


def test_reduced_profile_clamps_at_edges():
    game = SnakeGame(GameConfig.reduced())
    assert game.grid.policy is MovementPolicy.CLAMPED
    for _ in range(5):
        result = game.frame(frozenset({Direction.LEFT}), 0.15)
    assert result.snake == [(0, 3)]


def test_reset_restores_initial_snake():
    game = SnakeGame(GameConfig(seed=1))
    for _ in range(10):
        game.frame(frozenset({Direction.RIGHT}), 0.15)
    result = game.reset()
    assert result.snake == [(3, 3), (3, 2)]
    assert result.direction is Direction.UP
    assert result.food is None


def test_render_items_report_footprints():
    game = SnakeGame()
    game.registry.spawn_food(Position(0, 0))
    sizes = {item.kind: item.size for item in game.render_items()}
    assert sizes == {"head": 0.8, "segment": 0.65, "food": 0.8}


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0},
        {"height": -3},
        {"move_period": 0},
        {"spawn_period": -1.0},
        {"initial_snake": ()},
        {"initial_snake": ((10, 0),)},
    ],
)
def test_invalid_config_is_rejected(overrides):
    with pytest.raises(ValueError):
        GameConfig(**overrides)
