"""
Отрисовка игры в pygame. Только читает SnakeGame, ничего не меняет.
"""
import pygame

from config import (
    WIDTH, HEIGHT, GRID_SIZE, GOLD, SCORE_BG_COLOR, OVERLAY_COLOR,
    STATUS_HEIGHT, STATUS_BG, STATUS_TEXT, WHITE,
)
from controls import HELP_LINES
from game import GameState

BANNERS = {
    GameState.MENU: ("SNAKE", "Press SPACE to start"),
    GameState.PAUSED: ("PAUSED", "Press P to resume"),
}


def cell_rect(cell):
    """Клетка (x, y) -> pygame.Rect в пикселях"""
    x, y = cell
    return pygame.Rect(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE, GRID_SIZE)


class Renderer:
    def __init__(self):
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 48, bold=True)
        self.small_font = pygame.font.SysFont('arial', 15)

    def draw(self, surface, game):
        theme = game.theme
        surface.fill(theme['background'])

        if game.settings.grid_visible:
            self.draw_grid(surface, theme)
        self.draw_obstacles(surface, game, theme)
        self.draw_food(surface, game, theme)
        self.draw_snake(surface, game, theme)
        self.draw_hud(surface, game, theme)
        self.draw_banner(surface, game)
        if game.show_help:
            self.draw_help(surface)

    def draw_grid(self, surface, theme):
        """Рисуем сетку"""
        for x in range(0, WIDTH, GRID_SIZE):
            pygame.draw.line(surface, theme['grid'], (x, 0), (x, HEIGHT))
        for y in range(0, HEIGHT, GRID_SIZE):
            pygame.draw.line(surface, theme['grid'], (0, y), (WIDTH, y))

    def draw_obstacles(self, surface, game, theme):
        for cell in game.env.obstacles:
            rect = cell_rect(cell).inflate(-2, -2)
            pygame.draw.rect(surface, theme['obstacle'], rect, border_radius=3)

    def draw_food(self, surface, game, theme):
        """Яблоко и золотое яблоко с кольцом"""
        if game.env.apple is not None:
            rect = cell_rect(game.env.apple).inflate(-4, -4)
            pygame.draw.ellipse(surface, theme['food'], rect)

        if game.env.golden_apple is not None:
            rect = cell_rect(game.env.golden_apple)
            pygame.draw.ellipse(surface, GOLD, rect.inflate(-6, -6))
            pygame.draw.circle(surface, WHITE, rect.center, GRID_SIZE // 2, 2)

    def draw_snake(self, surface, game, theme):
        """Тело, потом голова с глазами по направлению"""
        snake = game.env.snake
        for cell in snake[1:]:
            rect = cell_rect(cell).inflate(-2, -2)
            pygame.draw.rect(surface, theme['snake'], rect, border_radius=4)

        if not snake:
            return
        head = cell_rect(snake[0]).inflate(-2, -2)
        pygame.draw.rect(surface, theme['head'], head, border_radius=6)

        dx, dy = game.env.direction
        cx, cy = head.center
        # Глаза: сдвиг вперёд по направлению и в стороны поперёк
        forward = GRID_SIZE // 5
        side = GRID_SIZE // 4
        for sign in (-1, 1):
            ex = cx + dx * forward + (-dy) * side * sign
            ey = cy + dy * forward + dx * side * sign
            pygame.draw.circle(surface, WHITE, (ex, ey), 3)
            pygame.draw.circle(surface, (0, 0, 0), (ex + dx, ey + dy), 1)

    def draw_hud(self, surface, game, theme):
        """Счёт и рекорд в полупрозрачной плашке"""
        lines = [f"Score: {game.score}", f"High: {game.high_score}"]
        texts = [self.font.render(line, True, WHITE) for line in lines]
        w = max(t.get_width() for t in texts) + 16
        h = sum(t.get_height() for t in texts) + 10

        box = pygame.Surface((w, h), pygame.SRCALPHA)
        box.fill(SCORE_BG_COLOR)
        surface.blit(box, (8, 8))
        y = 13
        for text in texts:
            surface.blit(text, (16, y))
            y += text.get_height()

    def draw_banner(self, surface, game):
        if game.state == GameState.RUNNING:
            return
        if game.state == GameState.GAME_OVER:
            title = "YOU WIN!" if game.won else "GAME OVER"
            hint = f"Score: {game.score}   Press R to restart"
        else:
            title, hint = BANNERS[game.state]

        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))
        self._centered(surface, self.big_font.render(title, True, WHITE), HEIGHT // 2 - 24)
        self._centered(surface, self.font.render(hint, True, WHITE), HEIGHT // 2 + 24)
        if game.state == GameState.GAME_OVER and game.new_record:
            self._centered(surface, self.font.render("New high score!", True, GOLD),
                           HEIGHT // 2 + 52)

    def draw_help(self, surface):
        """Оверлей со списком клавиш"""
        line_h = 22
        w, h = 360, len(HELP_LINES) * line_h + 50
        panel = pygame.Surface((w, h), pygame.SRCALPHA)
        panel.fill((20, 20, 20, 220))
        left = (WIDTH - w) // 2
        top = (HEIGHT - h) // 2
        surface.blit(panel, (left, top))

        title = self.font.render("Controls", True, GOLD)
        surface.blit(title, (left + 16, top + 12))
        y = top + 40
        for key, action in HELP_LINES:
            surface.blit(self.small_font.render(key, True, WHITE), (left + 16, y))
            surface.blit(self.small_font.render(action, True, WHITE), (left + 140, y))
            y += line_h

    def draw_status(self, surface, text):
        """Строка статуса под полем"""
        bar = pygame.Rect(0, HEIGHT, WIDTH, STATUS_HEIGHT)
        pygame.draw.rect(surface, STATUS_BG, bar)
        label = self.small_font.render(text, True, STATUS_TEXT)
        surface.blit(label, (8, HEIGHT + (STATUS_HEIGHT - label.get_height()) // 2))

    def _centered(self, surface, text, y):
        surface.blit(text, text.get_rect(center=(WIDTH // 2, y)))
