"""
Консольная версия змейки.
WASD — управление, Q — выход. Столкновение с собой завершает игру.
"""
import os
import sys
import time
import select

from config import UP, DOWN, LEFT, RIGHT, FPS, CONSOLE_CELLS
from game import SnakeGame, CollisionError, WON

KEYS = {
    'w': UP,
    's': DOWN,
    'a': LEFT,
    'd': RIGHT,
}

QUIT = 'q'


def clear_screen():
    os.system('clear' if os.name == 'posix' else 'cls')


def direction_for_char(char):
    """Символ → направление (None, если клавиша не управляющая)"""
    if not char:
        return None
    return KEYS.get(char.lower())


def render_board(snap, cells=CONSOLE_CELLS):
    """Поле в виде строки: счёт сверху, дальше строки клеток"""
    board = [[cells['empty']] * snap.width for _ in range(snap.height)]

    for x, y in snap.snake[1:]:
        board[y][x] = cells['body']
    hx, hy = snap.snake[0]
    board[hy][hx] = cells['head']

    if snap.food is not None:
        fx, fy = snap.food
        board[fy][fx] = cells['food']

    lines = [f"Score: {snap.score}"]
    lines.extend(''.join(row) for row in board)
    return '\n'.join(lines)


def read_char(timeout):
    """Неблокирующее чтение одного символа из stdin"""
    if select.select([sys.stdin], [], [], timeout)[0]:
        return sys.stdin.read(1)
    return None


def play(width=None, height=None, fps=FPS, seed=None):
    game = SnakeGame(width, height, seed=seed)
    interval = 1.0 / fps

    print("Snake Game! Use WASD to move, Q to quit.")
    print("Press Enter to start.")
    input()

    while True:
        clear_screen()
        print(render_board(game.snapshot()))

        started = time.monotonic()
        char = read_char(interval)
        if char and char.lower() == QUIT:
            break

        direction = direction_for_char(char)
        if direction:
            game.change_direction(direction)

        try:
            game.advance()
        except CollisionError as e:
            clear_screen()
            print(render_board(game.snapshot()))
            print(f"Game Over! Hit self at {e.cell}.")
            break

        if game.state == WON:
            clear_screen()
            print(render_board(game.snapshot()))
            print("Board is full. You win!")
            break

        # Досыпаем остаток тика, если клавишу нажали раньше
        remaining = interval - (time.monotonic() - started)
        if remaining > 0:
            time.sleep(remaining)

    print(f"Final Score: {game.get_score()}")
    return game.get_score()
