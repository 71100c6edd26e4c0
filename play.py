"""
Змейка в окне pygame.

Использование:
    python play.py                       # настройки в snake_settings.db
    python play.py --db other.db         # другой файл настроек
    python play.py --seed 42             # повторяемые яблоки и препятствия
"""
import argparse
import logging

import pygame

from config import WIDTH, HEIGHT, STATUS_HEIGHT, FPS, DB_PATH
from controls import handle_events
from database import SnakeDatabase
from game import SnakeGame
from renderer import Renderer
from scheduler import Scheduler

logger = logging.getLogger(__name__)


class SnakeApp:
    def __init__(self, db_path=DB_PATH, seed=None, fps=FPS):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT + STATUS_HEIGHT))
        pygame.display.set_caption('Snake - Enhanced')
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.db = SnakeDatabase(db_path)
        self.scheduler = Scheduler()
        self.game = SnakeGame(self.db, self.scheduler, seed=seed)
        self.renderer = Renderer()

        self.status = ""
        self.game.set_status_listener(self.on_status)

    def on_status(self, text):
        self.status = text

    def draw(self):
        self.renderer.draw(self.screen, self.game)
        self.renderer.draw_status(self.screen, self.status)
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(self.fps)
            running = handle_events(self.game)
            if not running:
                break
            self.scheduler.advance(dt)
            self.draw()

        self.scheduler.cancel_all()
        self.db.save_settings(self.game.settings)
        self.db.close()
        pygame.quit()
        logger.info("Bye! High score: %d", self.game.high_score)


def main():
    parser = argparse.ArgumentParser(description="Snake - Enhanced")
    parser.add_argument("--db", type=str, default=DB_PATH,
                        help="SQLite file for settings and high score")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for apples and obstacles")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Frames per second")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    SnakeApp(args.db, seed=args.seed, fps=args.fps).run()


if __name__ == "__main__":
    main()
