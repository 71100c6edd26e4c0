"""
Tests for the grid model: movement, collisions, food and spawning.
"""
from config import UP, DOWN, LEFT, RIGHT, OBSTACLE_COUNT, SCORE_FOR_GOLDEN
from env import SnakeEnv, opposite


class FixedRandom:
    """Generator stand-in: fixed random() value, real integers()"""

    def __init__(self, value, rng):
        self.value = value
        self.rng = rng

    def random(self):
        return self.value

    def integers(self, *args, **kwargs):
        return self.rng.integers(*args, **kwargs)


def make_env(**kwargs):
    env = SnakeEnv(20, 15, seed=7, **kwargs)
    env.apple = (0, 0)
    env.golden_apple = None
    env.obstacles = set()
    return env


class TestReset:
    def test_initial_snake(self):
        """Snake starts with 3 cells in the middle, heading right."""
        env = SnakeEnv(20, 15, seed=1)
        assert env.snake == [(10, 7), (9, 7), (8, 7)]
        assert env.direction == RIGHT
        assert env.score == 0

    def test_apple_not_on_snake(self):
        for seed in range(20):
            env = SnakeEnv(10, 10, seed=seed)
            assert env.apple not in env.snake
            assert env.in_bounds(env.apple)

    def test_obstacles_disjoint_from_snake_and_apple(self):
        for seed in range(10):
            env = SnakeEnv(20, 20, obstacles_enabled=True, seed=seed)
            assert 0 < len(env.obstacles) <= OBSTACLE_COUNT
            assert not env.obstacles & set(env.snake)
            assert env.apple not in env.obstacles

    def test_no_obstacle_right_in_front_of_head(self):
        for seed in range(10):
            env = SnakeEnv(20, 20, obstacles_enabled=True, seed=seed)
            hx, hy = env.snake[0]
            assert (hx + 1, hy) not in env.obstacles
            assert (hx + 2, hy) not in env.obstacles

    def test_obstacles_disabled(self):
        env = SnakeEnv(20, 20, obstacles_enabled=False, seed=3)
        assert env.obstacles == set()


class TestStep:
    def test_move_keeps_length(self):
        env = make_env()
        before = list(env.snake)
        result = env.step()
        assert result.collision is None
        assert not result.grew
        assert len(env.snake) == len(before)
        assert env.snake[0] == (before[0][0] + 1, before[0][1])
        assert env.snake[1:] == before[:-1]

    def test_eat_apple_grows(self):
        env = make_env()
        hx, hy = env.snake[0]
        env.apple = (hx + 1, hy)
        result = env.step()
        assert result.ate
        assert env.score == 1
        assert len(env.snake) == 4
        assert env.apple is not None
        assert env.apple not in env.snake

    def test_eat_golden_apple(self):
        env = make_env()
        hx, hy = env.snake[0]
        env.golden_apple = (hx + 1, hy)
        result = env.step()
        assert result.golden
        assert env.score == SCORE_FOR_GOLDEN
        assert env.golden_apple is None
        assert len(env.snake) == 4

    def test_wall_collision_right_edge(self):
        env = make_env()
        env.snake = [(19, 5), (18, 5), (17, 5)]
        result = env.step()
        assert result.collision == 'wall'
        assert env.snake == [(19, 5), (18, 5), (17, 5)]

    def test_wall_collision_left_edge(self):
        env = make_env()
        env.snake = [(0, 5), (1, 5), (2, 5)]
        env.direction = env.next_direction = LEFT
        result = env.step()
        assert result.collision == 'wall'

    def test_wrap_right_edge(self):
        """With wrap on, crossing x == width lands on x == 0."""
        env = make_env(wrap_walls=True)
        env.snake = [(19, 5), (18, 5), (17, 5)]
        result = env.step()
        assert result.collision is None
        assert env.snake[0] == (0, 5)

    def test_wrap_top_edge(self):
        env = make_env(wrap_walls=True)
        env.snake = [(4, 0), (4, 1), (4, 2)]
        env.direction = env.next_direction = UP
        env.step()
        assert env.snake[0] == (4, 14)

    def test_self_collision(self):
        env = make_env()
        env.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        env.direction = LEFT
        assert env.turn(DOWN)
        result = env.step()
        assert result.collision == 'self'

    def test_obstacle_collision(self):
        env = make_env()
        hx, hy = env.snake[0]
        env.obstacles = {(hx + 1, hy)}
        result = env.step()
        assert result.collision == 'obstacle'

    def test_wall_checked_before_obstacle(self):
        env = make_env()
        env.snake = [(19, 5), (18, 5), (17, 5)]
        env.obstacles = {(0, 5)}
        assert env.step().collision == 'wall'

    def test_length_invariant_over_many_ticks(self):
        env = SnakeEnv(20, 20, wrap_walls=True, seed=11)
        for _ in range(200):
            before = len(env.snake)
            result = env.step()
            if result.collision is not None:
                break
            assert len(env.snake) == before + (1 if result.grew else 0)
            assert len(set(env.snake)) == len(env.snake)


class TestTurn:
    def test_opposite(self):
        assert opposite(LEFT, RIGHT)
        assert opposite(UP, DOWN)
        assert not opposite(UP, RIGHT)

    def test_reverse_is_ignored(self):
        env = make_env()
        assert not env.turn(LEFT)
        assert env.next_direction == RIGHT

    def test_no_reverse_with_two_quick_turns(self):
        """Up then Left inside one tick must not reverse into the neck."""
        env = make_env()
        assert env.turn(UP)
        assert not env.turn(LEFT)
        env.step()
        assert env.direction == UP


class TestSpawning:
    def test_fallback_finds_last_free_cell(self):
        env = SnakeEnv(4, 4, seed=0)
        everything = {(x, y) for x in range(4) for y in range(4)}
        env.golden_apple = None
        env.obstacles = everything - set(env.snake) - {(3, 3)}
        assert env.spawn_apple() == (3, 3)

    def test_full_board_returns_none(self):
        env = SnakeEnv(4, 4, seed=0)
        everything = {(x, y) for x in range(4) for y in range(4)}
        env.obstacles = everything - set(env.snake)
        assert env.spawn_apple() is None

    def test_golden_apple_spawns_on_lucky_roll(self):
        env = make_env()
        env.rng = FixedRandom(0.0, env.rng)
        golden = env.maybe_spawn_golden()
        assert golden is not None
        assert golden != env.apple
        assert golden not in env.snake

    def test_golden_apple_skipped_on_unlucky_roll(self):
        env = make_env()
        env.rng = FixedRandom(0.5, env.rng)
        assert env.maybe_spawn_golden() is None
        assert env.golden_apple is None

    def test_only_one_golden_apple(self):
        env = make_env()
        env.golden_apple = (3, 3)
        env.rng = FixedRandom(0.0, env.rng)
        assert env.maybe_spawn_golden() is None
        assert env.golden_apple == (3, 3)

    def test_golden_apple_avoids_obstacles(self):
        env = SnakeEnv(4, 4, seed=0)
        everything = {(x, y) for x in range(4) for y in range(4)}
        env.apple = (0, 0)
        env.golden_apple = None
        env.obstacles = everything - set(env.snake) - {(0, 0), (3, 3)}
        env.rng = FixedRandom(0.0, env.rng)
        assert env.maybe_spawn_golden() == (3, 3)

    def test_free_cells_skips_blocked(self):
        env = make_env()
        free = env.free_cells({(0, 0), (1, 0), (99, 99)})
        assert len(free) == 20 * 15 - 2
        assert (0, 0) not in free
        assert (2, 0) in free


class TestGoldenAppleInStep:
    def test_rolled_after_eating_apple(self):
        env = make_env()
        env.rng = FixedRandom(0.0, env.rng)
        hx, hy = env.snake[0]
        env.apple = (hx + 1, hy)
        env.step()
        assert env.golden_apple is not None
        assert env.golden_apple != env.apple
        assert env.golden_apple not in env.snake

    def test_not_rolled_on_plain_move(self):
        env = make_env()
        env.rng = FixedRandom(0.0, env.rng)
        env.step()
        assert env.golden_apple is None

    def test_not_rolled_after_eating_golden(self):
        env = make_env()
        env.rng = FixedRandom(0.0, env.rng)
        hx, hy = env.snake[0]
        env.golden_apple = (hx + 1, hy)
        env.step()
        assert env.golden_apple is None
        assert env.apple == (0, 0)

    def test_rolled_golden_avoids_obstacles(self):
        env = make_env()
        env.rng = FixedRandom(0.0, env.rng)
        hx, hy = env.snake[0]
        env.apple = (hx + 1, hy)
        env.obstacles = {(x, y) for x in range(20) for y in range(10)} - set(env.snake) - {(hx + 1, hy)}
        env.step()
        assert env.golden_apple is not None
        assert env.golden_apple not in env.obstacles

    def test_golden_on_last_free_cell_keeps_game_going(self):
        """Eating the apple when only the golden apple's cell is left is not a win yet."""
        env = SnakeEnv(4, 4, seed=0)
        env.snake = [(2, 0), (1, 0), (0, 0), (0, 1), (1, 1), (2, 1), (2, 2),
                     (3, 2), (3, 3), (2, 3), (1, 3), (0, 3), (0, 2), (1, 2)]
        env.direction = env.next_direction = RIGHT
        env.apple = (3, 0)
        env.golden_apple = (3, 1)
        env.obstacles = set()

        result = env.step()
        assert result.ate
        assert not result.won
        assert env.apple is None
        assert env.golden_apple == (3, 1)

        assert env.turn(DOWN)
        result = env.step()
        assert result.golden
        assert result.won
        assert len(env.snake) == 16
