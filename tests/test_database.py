"""
Tests for the settings database.

Uses temporary SQLite files; broken paths and bad values must fall back
to defaults instead of raising.
"""
import sqlite3

from config import DELAY_START, DELAY_MIN, DELAY_MAX
from database import SnakeDatabase, Settings


class TestSnakeDatabase:
    def test_defaults_on_empty_db(self):
        db = SnakeDatabase(':memory:')
        assert db.load_settings() == Settings()

    def test_values_survive_reopen(self, tmp_path):
        path = str(tmp_path / "settings.db")
        db = SnakeDatabase(path)
        db.set('high_score', 42)
        db.set('wrap_walls', True)
        db.set('grid_visible', False)
        db.close()

        settings = SnakeDatabase(path).load_settings()
        assert settings.high_score == 42
        assert settings.wrap_walls is True
        assert settings.grid_visible is False

    def test_overwrite_value(self):
        db = SnakeDatabase(':memory:')
        db.set('high_score', 5)
        db.set('high_score', 8)
        assert db.get_int('high_score') == 8

    def test_save_settings(self, tmp_path):
        path = str(tmp_path / "all.db")
        settings = Settings(high_score=3, theme=2, grid_visible=False,
                            wrap_walls=True, obstacles_enabled=True, delay=80)
        SnakeDatabase(path).save_settings(settings)
        assert SnakeDatabase(path).load_settings() == settings

    def test_bad_int_falls_back(self):
        db = SnakeDatabase(':memory:')
        db.set('high_score', 'lots')
        assert db.load_settings().high_score == 0

    def test_out_of_range_values_are_clamped(self):
        db = SnakeDatabase(':memory:')
        db.set('theme', 99)
        db.set('delay', 1)
        settings = db.load_settings()
        assert settings.theme == 0
        assert settings.delay == DELAY_MIN
        db.set('delay', 10000)
        assert db.load_settings().delay == DELAY_MAX

    def test_unavailable_file_uses_defaults(self, tmp_path):
        db = SnakeDatabase(str(tmp_path / "missing" / "dir" / "settings.db"))
        assert db.conn is None
        assert db.set('high_score', 10) is False
        settings = db.load_settings()
        assert settings.high_score == 0
        assert settings.delay == DELAY_START

    def test_closed_connection_is_not_fatal(self):
        db = SnakeDatabase(':memory:')
        db.conn.close()
        assert db.get('theme', 'x') == 'x'
        assert db.set('theme', 1) is False

    def test_table_created(self, tmp_path):
        path = str(tmp_path / "schema.db")
        SnakeDatabase(path).close()
        conn = sqlite3.connect(path)
        rows = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='settings'"
        ).fetchall()
        conn.close()
        assert rows == [('settings',)]
