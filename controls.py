"""
Клавиатура: стрелки и WASD меняют направление, остальные клавиши вызывают команды.
"""
import pygame

from config import UP, DOWN, LEFT, RIGHT
from game import GameState

# Стрелки работают всегда, WASD только во время игры (W вне игры = wrap)
ARROW_KEYS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

WASD_KEYS = {
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

COMMAND_KEYS = {
    pygame.K_SPACE: 'start',
    pygame.K_p: 'toggle_pause',
    pygame.K_r: 'restart',
    pygame.K_g: 'toggle_grid',
    pygame.K_t: 'cycle_theme',
    pygame.K_w: 'toggle_wrap_walls',
    pygame.K_o: 'toggle_obstacles',
    pygame.K_h: 'toggle_help',
    pygame.K_PLUS: 'faster',
    pygame.K_EQUALS: 'faster',
    pygame.K_KP_PLUS: 'faster',
    pygame.K_MINUS: 'slower',
    pygame.K_KP_MINUS: 'slower',
}

# Подсказка для help-оверлея
HELP_LINES = [
    ("Arrows / WASD", "Move"),
    ("SPACE", "Start"),
    ("P", "Pause / resume"),
    ("R", "Restart"),
    ("G", "Grid on/off"),
    ("T", "Next theme"),
    ("W", "Wrap walls (when not playing)"),
    ("O", "Obstacles on/off"),
    ("+ / -", "Speed"),
    ("H", "Hide help"),
    ("ESC", "Quit"),
]


def handle_key(game, key):
    """Применить нажатие к игре. Возвращает имя действия или None"""
    if key in ARROW_KEYS:
        game.change_direction(ARROW_KEYS[key])
        return 'turn'
    if key in WASD_KEYS and game.state == GameState.RUNNING:
        game.change_direction(WASD_KEYS[key])
        return 'turn'

    command = COMMAND_KEYS.get(key)
    if command is None:
        return None
    getattr(game, command)()
    return command


def handle_events(game, events=None):
    """Обработка событий pygame. False = выход"""
    if events is None:
        events = pygame.event.get()
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            handle_key(game, event.key)
    return True
