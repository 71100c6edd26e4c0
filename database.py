"""
SQLite база данных для настроек и рекорда.

Ошибки базы не роняют игру: пишем предупреждение в лог
и работаем со значениями по умолчанию.
"""
import logging
import sqlite3
from dataclasses import dataclass

from config import DB_PATH, DELAY_START, DELAY_MIN, DELAY_MAX, THEMES

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    high_score: int = 0
    theme: int = 0
    grid_visible: bool = True
    wrap_walls: bool = False
    obstacles_enabled: bool = False
    delay: int = DELAY_START


class SnakeDatabase:
    def __init__(self, db_path=DB_PATH):
        self.db_path = db_path
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        try:
            self.conn = sqlite3.connect(self.db_path)
            cursor = self.conn.cursor()

            # Таблица настроек: ключ -> значение
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Settings database %s unavailable: %s", self.db_path, e)
            self.conn = None

    def get(self, key, default=None):
        """Значение по ключу (строка) или default"""
        if self.conn is None:
            return default
        try:
            cursor = self.conn.cursor()
            cursor.execute('SELECT value FROM settings WHERE key = ?', (key,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning("Failed to read setting %r: %s", key, e)
            return default
        if row is None:
            return default
        return row[0]

    def get_int(self, key, default=0):
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Bad value for %r: %r, using %r", key, value, default)
            return default

    def get_bool(self, key, default=False):
        value = self.get(key)
        if value is None:
            return default
        return value == '1'

    def set(self, key, value):
        """Сохранить значение (bool -> '0'/'1')"""
        if isinstance(value, bool):
            value = '1' if value else '0'
        if self.conn is None:
            return False
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                INSERT INTO settings (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            ''', (key, str(value)))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Failed to save setting %r: %s", key, e)
            return False
        return True

    def load_settings(self):
        """Все настройки с проверкой диапазонов"""
        defaults = Settings()
        theme = self.get_int('theme', defaults.theme)
        if not 0 <= theme < len(THEMES):
            theme = defaults.theme
        delay = self.get_int('delay', defaults.delay)
        delay = min(DELAY_MAX, max(DELAY_MIN, delay))
        return Settings(
            high_score=max(0, self.get_int('high_score', defaults.high_score)),
            theme=theme,
            grid_visible=self.get_bool('grid_visible', defaults.grid_visible),
            wrap_walls=self.get_bool('wrap_walls', defaults.wrap_walls),
            obstacles_enabled=self.get_bool('obstacles_enabled', defaults.obstacles_enabled),
            delay=delay,
        )

    def save_settings(self, settings):
        """Сохранить все настройки разом"""
        for key in ('high_score', 'theme', 'grid_visible', 'wrap_walls',
                    'obstacles_enabled', 'delay'):
            self.set(key, getattr(settings, key))

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
            self.conn = None
