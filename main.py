"""
Змейка на торе.

Использование:
    python main.py                        # Окно pygame
    python main.py --console              # Консольная версия
    python main.py --width 30 --height 15 # Свой размер поля
    python main.py --fps 12 --seed 42     # Скорость и зерно для еды
"""
import argparse

from config import GRID_WIDTH, GRID_HEIGHT, FPS, MIN_FPS, MAX_FPS, INITIAL_SNAKE_LENGTH


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description='Snake on a toroidal grid')
    parser.add_argument('--width', type=positive_int, default=GRID_WIDTH,
                        help=f'Ширина поля в клетках (по умолчанию {GRID_WIDTH})')
    parser.add_argument('--height', type=positive_int, default=GRID_HEIGHT,
                        help=f'Высота поля в клетках (по умолчанию {GRID_HEIGHT})')
    parser.add_argument('--fps', type=positive_int, default=FPS,
                        help=f'Обновлений в секунду (по умолчанию {FPS})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Зерно генератора для еды')
    parser.add_argument('--console', action='store_true',
                        help='Консольная версия вместо окна')
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width < INITIAL_SNAKE_LENGTH:
        parser.error(f"--width must be at least {INITIAL_SNAKE_LENGTH}")
    if args.width * args.height <= INITIAL_SNAKE_LENGTH:
        parser.error(f"grid {args.width}x{args.height} leaves no room for food")
    args.fps = min(MAX_FPS, max(MIN_FPS, args.fps))
    return args


def main(argv=None):
    args = parse_args(argv)

    print(f"Grid: {args.width}x{args.height}, speed: {args.fps} ticks/s")

    if args.console:
        from console import play
        play(args.width, args.height, args.fps, args.seed)
    else:
        from play import SnakePlayer
        SnakePlayer(args.width, args.height, args.fps, args.seed).play()


if __name__ == "__main__":
    main()
