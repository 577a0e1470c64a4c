# Настройки игры
# Поле 20x20 клеток, как в консольной версии
GRID_SIZE = 24   # размер клетки в пикселях
GRID_WIDTH = 20
GRID_HEIGHT = 20

# Ширина боковой панели со статистикой
PANEL_WIDTH = 200

# Цвета
BLUE = (0, 139, 139)
GREEN = (124, 252, 0)
DARK_GREEN = (34, 139, 34)
RED = (255, 0, 0)
GRAY = (102, 205, 170)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
PANEL_COLOR = (40, 40, 40)

SNAKE = DARK_GREEN
HEAD = GREEN
FOOD = RED
GRID = GRAY
BACKGROUND = BLUE

# Направления (значение = сдвиг за один тик)
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Скорость (обновлений в секунду)
FPS = 8
MIN_FPS = 2
MAX_FPS = 60

# Начальная длина змейки
INITIAL_SNAKE_LENGTH = 3

# Консоль
CONSOLE_CELLS = {
    'head': '🐍',
    'body': '🟢',
    'food': '🍎',
    'empty': '⬛',
}
