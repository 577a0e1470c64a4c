"""
Ядро игры "Змейка" на торе (края поля склеены).

Матрица мира:
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова

Одно состояние на обе визуализации (pygame и консоль):
они получают только снимок (snapshot) и ничего не меняют.
"""
from collections import deque, namedtuple

import numpy as np

from config import GRID_WIDTH, GRID_HEIGHT, RIGHT, DIRECTIONS, INITIAL_SNAKE_LENGTH

EMPTY = 0
BODY = 1
FOOD = 2
HEAD = 7

# Состояния игры
PLAYING = 'playing'
GAME_OVER = 'game_over'
WON = 'won'  # поле заполнено целиком

# Результаты шага
MOVED = 'moved'
GREW = 'grew'


Snapshot = namedtuple(
    'Snapshot',
    ['snake', 'food', 'score', 'state', 'width', 'height', 'direction', 'steps']
)


class GameError(Exception):
    """Базовая ошибка игры"""


class CollisionError(GameError):
    """Голова врезалась в собственное тело"""

    def __init__(self, cell):
        super().__init__(f"Self collision at {cell}")
        self.cell = cell


class GameOverError(GameError):
    """advance() вызван после конца игры (нужен reset())"""


def opposite(direction):
    return (-direction[0], -direction[1])


class SnakeGame:
    def __init__(self, width=None, height=None, snake=None, direction=RIGHT,
                 food=None, rng=None, seed=None):
        """
        snake: клетки тела, голова первой (по умолчанию — стартовая змейка в центре)
        direction: начальное направление
        food: позиция еды (по умолчанию — случайная свободная клетка)
        rng: numpy.random.Generator для размещения еды
        seed: зерно, если rng не передан
        """
        self.width = width or GRID_WIDTH
        self.height = height or GRID_HEIGHT
        # Стартовая змейка должна помещаться и оставлять место для еды
        if (self.width < INITIAL_SNAKE_LENGTH or self.height < 1 or
                self.width * self.height <= INITIAL_SNAKE_LENGTH):
            raise ValueError(f"Grid {self.width}x{self.height} is too small")

        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.reset()

        # Произвольная позиция (для тестов и продолжения партии)
        self._place(snake, direction, food)

    def _initial_snake(self):
        """Горизонтальная змейка в центре, голова справа"""
        cx, cy = self.width // 2, self.height // 2
        cx = max(cx, INITIAL_SNAKE_LENGTH - 1)
        return [(cx - i, cy) for i in range(INITIAL_SNAKE_LENGTH)]

    def reset(self):
        """Сброс игры"""
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

        self.snake = deque(self._initial_snake())
        self._mark_snake()

        self.direction = RIGHT
        self.next_direction = RIGHT

        self.score = 0
        self.steps = 0
        self.state = PLAYING

        self.food = None
        self.spawn_food()

    def _place(self, snake, direction, food):
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction!r}")

        self.direction = direction
        self.next_direction = direction

        if snake is None and food is None:
            return

        # Случайную еду из reset() убираем, дальше ставим заново
        if self.food is not None:
            fx, fy = self.food
            self.grid[fy, fx] = EMPTY
            self.food = None
        self.state = PLAYING

        if snake is not None:
            cells = [tuple(cell) for cell in snake]
            if not cells:
                raise ValueError("Snake must have at least one cell")
            for x, y in cells:
                if not (0 <= x < self.width and 0 <= y < self.height):
                    raise ValueError(f"Cell {(x, y)} is outside the grid")
            if len(set(cells)) != len(cells):
                raise ValueError("Snake cells must be distinct")

            self.grid[:] = EMPTY
            self.snake = deque(cells)
            self._mark_snake()

        if food is not None:
            food = tuple(food)
            fx, fy = food
            if not (0 <= fx < self.width and 0 <= fy < self.height):
                raise ValueError(f"Food {food} is outside the grid")
            if self.grid[fy, fx] != EMPTY:
                raise ValueError(f"Food {food} is on the snake")
            self.food = food
            self.grid[fy, fx] = FOOD
        else:
            self.spawn_food()

    def _mark_snake(self):
        for x, y in self.snake:
            self.grid[y, x] = BODY
        hx, hy = self.snake[0]
        self.grid[hy, hx] = HEAD

    def spawn_food(self, rng=None):
        """
        Случайная свободная клетка (равномерно среди всех свободных).
        Если свободных клеток нет — поле заполнено, возвращает None.
        """
        rng = rng if rng is not None else self.rng

        if self.food is not None:
            fx, fy = self.food
            self.grid[fy, fx] = EMPTY
            self.food = None

        empty = np.flatnonzero(self.grid == EMPTY)
        if empty.size == 0:
            self.state = WON
            return None

        idx = empty[rng.integers(empty.size)]
        y, x = divmod(int(idx), self.width)
        self.food = (x, y)
        self.grid[y, x] = FOOD
        return self.food

    def change_direction(self, requested):
        """Разворот на 180° игнорируется молча"""
        if self.state != PLAYING:
            raise GameOverError(f"Game is {self.state}, call reset()")
        if requested not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {requested!r}")
        if requested == opposite(self.direction):
            return
        self.next_direction = requested

    def advance(self):
        """
        Один тик игры.
        Возвращает MOVED или GREW, при столкновении с собой бросает CollisionError.
        """
        if self.state != PLAYING:
            raise GameOverError(f"Game is {self.state}, call reset()")

        dx, dy = self.next_direction
        head_x, head_y = self.snake[0]
        new_head = ((head_x + dx) % self.width, (head_y + dy) % self.height)
        new_x, new_y = new_head

        grow = new_head == self.food

        # Хвост освобождается на этом же тике, если змейка не растёт
        cell = self.grid[new_y, new_x]
        if cell in (BODY, HEAD):
            if grow or new_head != self.snake[-1]:
                self.state = GAME_OVER
                raise CollisionError(new_head)

        self.direction = self.next_direction
        self.steps += 1

        # Старая голова становится телом (до снятия хвоста: у змейки из
        # одной клетки это одна и та же клетка)
        self.grid[head_y, head_x] = BODY

        if not grow:
            tail_x, tail_y = self.snake.pop()
            self.grid[tail_y, tail_x] = EMPTY

        self.snake.appendleft(new_head)
        self.grid[new_y, new_x] = HEAD

        if grow:
            self.score += 1
            self.food = None
            self.spawn_food()
            return GREW

        return MOVED

    def snapshot(self):
        """Неизменяемый снимок для отрисовки"""
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            state=self.state,
            width=self.width,
            height=self.height,
            direction=self.direction,
            steps=self.steps,
        )

    @property
    def head(self):
        return self.snake[0]

    @property
    def done(self):
        return self.state != PLAYING

    def get_score(self):
        return self.score

    def is_win(self):
        """Победа = змейка заполнила всё поле"""
        return self.state == WON
