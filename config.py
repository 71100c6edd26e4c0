# Настройки игры
# Поле 600x600: 24x24 клетки по 25 пикселей
WIDTH = 600
HEIGHT = 600

# Сетка
GRID_SIZE = 25
GRID_WIDTH = WIDTH // GRID_SIZE    # 24 клетки
GRID_HEIGHT = HEIGHT // GRID_SIZE  # 24 клетки

# Строка статуса под полем
STATUS_HEIGHT = 28

# Цвета
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GOLD = (255, 215, 0)
SCORE_BG_COLOR = (0, 0, 0, 150)
OVERLAY_COLOR = (0, 0, 0, 140)
STATUS_BG = (30, 30, 30)
STATUS_TEXT = (220, 220, 220)

# Темы: фон, сетка, тело, голова, яблоко, препятствие, текст
THEMES = [
    {
        'name': 'Classic',
        'background': (0, 139, 139),
        'grid': (102, 205, 170),
        'snake': (124, 252, 0),
        'head': (255, 0, 255),
        'food': (255, 0, 0),
        'obstacle': (90, 90, 90),
        'text': WHITE,
    },
    {
        'name': 'Midnight',
        'background': (18, 18, 28),
        'grid': (35, 37, 49),
        'snake': (80, 200, 120),
        'head': (144, 238, 144),
        'food': (235, 64, 52),
        'obstacle': (110, 110, 140),
        'text': (240, 240, 240),
    },
    {
        'name': 'Desert',
        'background': (237, 201, 175),
        'grid': (214, 176, 140),
        'snake': (160, 82, 45),
        'head': (101, 67, 33),
        'food': (200, 30, 30),
        'obstacle': (120, 100, 80),
        'text': BLACK,
    },
    {
        'name': 'Neon',
        'background': (10, 0, 20),
        'grid': (40, 0, 60),
        'snake': (0, 255, 200),
        'head': (255, 0, 170),
        'food': (255, 255, 0),
        'obstacle': (120, 0, 255),
        'text': (0, 255, 200),
    },
]

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Скорость: интервал между тиками в мс (меньше = быстрее)
DELAY_START = 110
DELAY_MIN = 50
DELAY_MAX = 250
DELAY_STEP = 10
SPEED_UP_EVERY = 5  # ускорение каждые N яблок

# Частота отрисовки окна
FPS = 60

# Начальная длина змейки
INITIAL_SNAKE_LENGTH = 3

# Очки за еду
SCORE_FOR_FOOD = 1
SCORE_FOR_GOLDEN = 5

# Золотое яблоко
GOLDEN_APPLE_CHANCE = 1 / 8

# Препятствия
OBSTACLE_COUNT = 12
OBSTACLE_ATTEMPTS = 200
SAFE_ZONE = 2  # клеток перед головой без препятствий

# Лимит случайных попыток перед перебором свободных клеток
SPAWN_ATTEMPTS = 64

# Файл настроек
DB_PATH = "snake_settings.db"
