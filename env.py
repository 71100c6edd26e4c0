"""
Поле и сущности змейки: тело, яблоко, золотое яблоко, препятствия.

Клетка: кортеж (x, y). Голова змейки: snake[0].
"""
import logging

import numpy as np

from config import (
    GRID_WIDTH, GRID_HEIGHT, INITIAL_SNAKE_LENGTH, RIGHT,
    GOLDEN_APPLE_CHANCE, OBSTACLE_COUNT, OBSTACLE_ATTEMPTS, SAFE_ZONE,
    SPAWN_ATTEMPTS, SCORE_FOR_FOOD, SCORE_FOR_GOLDEN,
)

logger = logging.getLogger(__name__)


def opposite(a, b):
    """True если направление a противоположно b"""
    return a[0] == -b[0] and a[1] == -b[1]


class StepResult:
    """Итог одного тика"""

    def __init__(self, collision=None, ate=False, golden=False, won=False):
        self.collision = collision  # 'wall' / 'self' / 'obstacle' или None
        self.ate = ate
        self.golden = golden
        self.won = won

    @property
    def grew(self):
        return self.ate or self.golden


class SnakeEnv:
    def __init__(self, width=None, height=None, wrap_walls=False,
                 obstacles_enabled=False, seed=None):
        self.width = width or GRID_WIDTH
        self.height = height or GRID_HEIGHT
        self.wrap_walls = wrap_walls
        self.obstacles_enabled = obstacles_enabled
        self.rng = np.random.default_rng(seed)
        self.reset()

    def reset(self):
        """Сброс игры"""
        # Змейка в центре, смотрит вправо (голова первая)
        cx, cy = self.width // 2, self.height // 2
        self.snake = [(cx - i, cy) for i in range(INITIAL_SNAKE_LENGTH)]
        self.direction = RIGHT
        self.next_direction = RIGHT

        self.obstacles = set()
        self.golden_apple = None
        self.apple = self.spawn_apple()
        if self.obstacles_enabled:
            self.obstacles = self._generate_obstacles()

        self.score = 0

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def free_cells(self, blocked):
        """Клетки (x, y) поля, не входящие в blocked"""
        taken = np.zeros((self.height, self.width), dtype=bool)
        for cell in blocked:
            if self.in_bounds(cell):
                taken[cell[1], cell[0]] = True
        return [(int(x), int(y)) for y, x in np.argwhere(~taken)]

    def _random_free_cell(self, blocked):
        """
        Случайная клетка не из blocked.
        Сначала SPAWN_ATTEMPTS случайных попыток, потом перебор свободных клеток.
        """
        for _ in range(SPAWN_ATTEMPTS):
            pos = (int(self.rng.integers(self.width)), int(self.rng.integers(self.height)))
            if pos not in blocked:
                return pos

        empty = self.free_cells(blocked)
        logger.debug("Spawn fallback: %d free cells", len(empty))
        if not empty:
            return None  # места нет
        return empty[int(self.rng.integers(len(empty)))]

    def spawn_apple(self):
        """Новое яблоко: не на змейке, не на препятствии и не на золотом яблоке"""
        blocked = set(self.snake) | self.obstacles
        if self.golden_apple is not None:
            blocked.add(self.golden_apple)
        return self._random_free_cell(blocked)

    def maybe_spawn_golden(self):
        """Золотое яблоко с шансом 1/8, если его ещё нет"""
        if self.golden_apple is not None or self.apple is None:
            return None
        if self.rng.random() >= GOLDEN_APPLE_CHANCE:
            return None
        blocked = set(self.snake) | self.obstacles | {self.apple}
        self.golden_apple = self._random_free_cell(blocked)
        return self.golden_apple

    def _generate_obstacles(self):
        """Препятствия: не на змейке, не на яблоке и не прямо перед головой"""
        hx, hy = self.snake[0]
        dx, dy = self.direction
        blocked = set(self.snake)
        if self.apple is not None:
            blocked.add(self.apple)
        for i in range(1, SAFE_ZONE + 1):
            blocked.add((hx + dx * i, hy + dy * i))

        obstacles = set()
        attempts = 0
        while len(obstacles) < OBSTACLE_COUNT and attempts < OBSTACLE_ATTEMPTS:
            attempts += 1
            pos = (int(self.rng.integers(self.width)), int(self.rng.integers(self.height)))
            if pos not in blocked and pos not in obstacles:
                obstacles.add(pos)

        if len(obstacles) < OBSTACLE_COUNT:
            logger.debug("Placed %d of %d obstacles", len(obstacles), OBSTACLE_COUNT)
        return obstacles

    def turn(self, direction):
        """
        Запомнить новое направление до следующего тика.
        Разворот на 180° относительно последнего хода игнорируется.
        """
        if opposite(direction, self.direction):
            return False
        self.next_direction = direction
        return True

    def step(self):
        """Один тик: движение, столкновения, еда"""
        self.direction = self.next_direction

        head_x, head_y = self.snake[0]
        dx, dy = self.direction
        new_x, new_y = head_x + dx, head_y + dy

        # Проверки строго по порядку: граница, тело, препятствие
        if self.wrap_walls:
            new_x %= self.width
            new_y %= self.height
        elif not self.in_bounds((new_x, new_y)):
            return StepResult(collision='wall')

        new_head = (new_x, new_y)
        if new_head in self.snake:
            return StepResult(collision='self')
        if new_head in self.obstacles:
            return StepResult(collision='obstacle')

        self.snake.insert(0, new_head)

        result = StepResult()
        if self.apple is not None and new_head == self.apple:
            self.score += SCORE_FOR_FOOD
            result.ate = True
            self.apple = self.spawn_apple()
            self.maybe_spawn_golden()
        elif self.golden_apple is not None and new_head == self.golden_apple:
            self.score += SCORE_FOR_GOLDEN
            result.golden = True
            self.golden_apple = None
            # Последняя свободная клетка была под золотым яблоком
            if self.apple is None:
                self.apple = self.spawn_apple()

        if not result.grew:
            self.snake.pop()

        # Победа: есть нечего и положить еду некуда
        result.won = self.apple is None and self.golden_apple is None
        return result
