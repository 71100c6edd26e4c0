"""
Игровая сессия: состояние (меню / игра / пауза / конец), счёт, скорость,
настройки и таймер тиков.

Окно, отрисовка и клавиатура живут снаружи и получают SnakeGame явно.
"""
import enum
import logging

from config import DELAY_MIN, DELAY_MAX, DELAY_STEP, SPEED_UP_EVERY, THEMES
from database import SnakeDatabase
from env import SnakeEnv
from scheduler import Scheduler

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    MENU = 'menu'
    RUNNING = 'running'
    PAUSED = 'paused'
    GAME_OVER = 'game_over'


class SnakeGame:
    def __init__(self, db=None, scheduler=None, width=None, height=None, seed=None):
        self.db = db if db is not None else SnakeDatabase(':memory:')
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.settings = self.db.load_settings()

        self.env = SnakeEnv(width, height,
                            wrap_walls=self.settings.wrap_walls,
                            obstacles_enabled=self.settings.obstacles_enabled,
                            seed=seed)
        self.state = GameState.MENU
        self.delay = self.settings.delay
        self.timer = None
        self.show_help = False
        self.won = False
        self.collision = None
        self.new_record = False
        self.status_listener = None

    # --- Свойства для отрисовки и строки статуса ---

    @property
    def score(self):
        return self.env.score

    @property
    def high_score(self):
        return self.settings.high_score

    @property
    def theme(self):
        return THEMES[self.settings.theme]

    @property
    def running(self):
        return self.state == GameState.RUNNING

    def set_status_listener(self, listener):
        self.status_listener = listener
        self._emit_status()

    def status_text(self):
        s = self.settings
        flags = (f"Speed: {self.delay}ms | Grid: {'ON' if s.grid_visible else 'OFF'} | "
                 f"Wrap: {'ON' if s.wrap_walls else 'OFF'} | "
                 f"Obstacles: {'ON' if s.obstacles_enabled else 'OFF'}")
        if self.state == GameState.MENU:
            return f"Ready. Press SPACE to start. H for help. | High: {self.high_score} | {flags}"
        if self.state == GameState.PAUSED:
            return f"Paused. Press P to resume. | Score: {self.score} | High: {self.high_score}"
        if self.state == GameState.GAME_OVER:
            head = "You win!" if self.won else "Game over!"
            record = " New high score!" if self.new_record else ""
            return (f"{head} Score: {self.score} | High: {self.high_score}.{record} "
                    f"Press R to restart.")
        return f"Score: {self.score} | High: {self.high_score} | {flags}"

    def _emit_status(self):
        if self.status_listener is not None:
            self.status_listener(self.status_text())

    # --- Таймер ---

    def _start_timer(self):
        self._stop_timer()
        self.timer = self.scheduler.schedule(self.delay, self.tick)

    def _stop_timer(self):
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None

    def _set_delay(self, delay):
        self.delay = min(DELAY_MAX, max(DELAY_MIN, delay))
        if self.timer is not None:
            self.timer.set_interval(self.delay)

    # --- Переходы состояний ---

    def init_game(self):
        """Новые змейка, яблоко и препятствия, скорость с базовой"""
        self._stop_timer()
        self.env.wrap_walls = self.settings.wrap_walls
        self.env.obstacles_enabled = self.settings.obstacles_enabled
        self.env.reset()
        self.delay = self.settings.delay
        self.won = False
        self.collision = None
        self.new_record = False

    def start(self):
        if self.state == GameState.GAME_OVER:
            self.restart()
            return
        if self.state != GameState.MENU:
            return
        self.state = GameState.RUNNING
        self._start_timer()
        logger.info("Game started (delay %dms)", self.delay)
        self._emit_status()

    def toggle_pause(self):
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
            self._stop_timer()
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING
            self._start_timer()
        else:
            return
        self._emit_status()

    def restart(self):
        self.init_game()
        self.state = GameState.MENU
        self.start()

    def game_over(self, won=False):
        self._stop_timer()
        self.state = GameState.GAME_OVER
        self.won = won
        if self.score > self.settings.high_score:
            self.settings.high_score = self.score
            self.new_record = True
            self.db.set('high_score', self.score)
            logger.info("New high score: %d", self.score)
        logger.info("Game over: score %d (%s)", self.score,
                    'win' if won else self.collision)
        self._emit_status()

    def tick(self):
        """Один шаг игры; вне RUNNING ничего не делает"""
        if self.state != GameState.RUNNING:
            return None

        result = self.env.step()
        if result.collision is not None:
            self.collision = result.collision
            self.game_over()
            return result

        if result.ate and self.score % SPEED_UP_EVERY == 0:
            self.speed_up()
        elif result.golden:
            self.speed_up()

        if result.won:
            self.game_over(won=True)
            return result

        self._emit_status()
        return result

    def speed_up(self):
        self._set_delay(self.delay - DELAY_STEP)

    # --- Управление ---

    def change_direction(self, direction):
        """Поворот только во время игры и не назад"""
        if self.state != GameState.RUNNING:
            return False
        return self.env.turn(direction)

    def faster(self):
        self._change_base_delay(-DELAY_STEP)

    def slower(self):
        self._change_base_delay(DELAY_STEP)

    def _change_base_delay(self, step):
        base = min(DELAY_MAX, max(DELAY_MIN, self.settings.delay + step))
        self.settings.delay = base
        self.db.set('delay', base)
        self._set_delay(self.delay + step)
        self._emit_status()

    def toggle_grid(self):
        self.settings.grid_visible = not self.settings.grid_visible
        self.db.set('grid_visible', self.settings.grid_visible)
        self._emit_status()

    def toggle_wrap_walls(self):
        self.settings.wrap_walls = not self.settings.wrap_walls
        self.env.wrap_walls = self.settings.wrap_walls
        self.db.set('wrap_walls', self.settings.wrap_walls)
        self._emit_status()

    def toggle_obstacles(self):
        self.settings.obstacles_enabled = not self.settings.obstacles_enabled
        self.db.set('obstacles_enabled', self.settings.obstacles_enabled)
        # Законченная партия остаётся на экране до рестарта
        if self.state != GameState.GAME_OVER:
            running = self.timer is not None
            self.init_game()
            if running:
                self._start_timer()
        self._emit_status()

    def cycle_theme(self):
        self.settings.theme = (self.settings.theme + 1) % len(THEMES)
        self.db.set('theme', self.settings.theme)
        self._emit_status()

    def toggle_help(self):
        self.show_help = not self.show_help
