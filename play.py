"""
Графическая версия змейки (pygame).

Управление:
    стрелки / WASD  — направление
    SPACE           — пауза
    R               — рестарт
    +/-             — скорость
    ESC             — выход

Столкновение с собой — новая игра (счёт сбрасывается).
"""
import pygame

from config import (GRID_SIZE, PANEL_WIDTH, FPS, MIN_FPS, MAX_FPS,
                    UP, DOWN, LEFT, RIGHT,
                    BACKGROUND, SNAKE, HEAD, FOOD, GRID, BLACK, WHITE, PANEL_COLOR)
from game import SnakeGame, CollisionError, WON

KEYS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}


def direction_for_key(key):
    """Код клавиши pygame → направление (None для остальных клавиш)"""
    return KEYS.get(key)


class SnakePlayer:
    def __init__(self, width=None, height=None, fps=FPS, seed=None):
        pygame.init()

        self.game = SnakeGame(width, height, seed=seed)

        # Размер окна из размера поля
        self.field_w = self.game.width * GRID_SIZE
        self.field_h = self.game.height * GRID_SIZE

        self.screen = pygame.display.set_mode((self.field_w + PANEL_WIDTH, self.field_h))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 24)

        self.fps = fps
        self.paused = False
        self.games = 0
        self.best = 0
        self.wins = 0

    def draw(self, snap):
        self.screen.fill(BACKGROUND)

        # Сетка
        for x in range(0, self.field_w, GRID_SIZE):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, self.field_h))
        for y in range(0, self.field_h, GRID_SIZE):
            pygame.draw.line(self.screen, GRID, (0, y), (self.field_w, y))

        # Змейка
        for i, (x, y) in enumerate(snap.snake):
            rect = pygame.Rect(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE - 1, GRID_SIZE - 1)
            color = HEAD if i == 0 else SNAKE  # Голова ярче
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        # Еда
        if snap.food is not None:
            fx, fy = snap.food
            rect = pygame.Rect(fx * GRID_SIZE, fy * GRID_SIZE, GRID_SIZE - 1, GRID_SIZE - 1)
            pygame.draw.rect(self.screen, FOOD, rect)

        if self.paused:
            text = self.big_font.render("PAUSE", True, WHITE)
            self.screen.blit(text, (self.field_w // 2 - 40, self.field_h // 2))

        self.draw_stats(snap)
        pygame.display.flip()

    def draw_stats(self, snap):
        """Панель статистики"""
        panel = pygame.Rect(self.field_w, 0, PANEL_WIDTH, self.field_h)
        pygame.draw.rect(self.screen, PANEL_COLOR, panel)

        stats = [
            f"Score: {snap.score}",
            f"Length: {len(snap.snake)}",
            f"Steps: {snap.steps}",
            f"Speed: {self.fps}",
            "",
            f"Games: {self.games}",
            f"Best: {self.best}",
            f"Wins: {self.wins}",
            "",
            "Controls:",
            "Arrows/WASD Move",
            "SPACE Pause",
            "+/- Speed",
            "R Restart",
            "ESC Quit"
        ]

        for i, text in enumerate(stats):
            surf = self.font.render(text, True, WHITE)
            self.screen.blit(surf, (self.field_w + 10, 20 + i * 25))

    def handle_events(self):
        """Обработка событий, False = выход"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                direction = direction_for_key(event.key)
                if direction:
                    self.game.change_direction(direction)
                elif event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_r:
                    self.game.reset()
                elif event.key == pygame.K_EQUALS or event.key == pygame.K_PLUS:
                    self.fps = min(MAX_FPS, self.fps + 2)
                elif event.key == pygame.K_MINUS:
                    self.fps = max(MIN_FPS, self.fps - 2)

        return True

    def finish_game(self):
        """Учёт результата и новая партия"""
        self.games += 1
        score = self.game.get_score()
        self.best = max(self.best, score)

        if self.game.is_win():
            self.wins += 1
            print(f"Game {self.games}: WIN! Score {score}")
        else:
            print(f"Game {self.games}: Score {score}")

        self.game.reset()

    def tick(self):
        """Один шаг игры с политикой "столкновение = рестарт" """
        try:
            self.game.advance()
        except CollisionError:
            self.draw(self.game.snapshot())
            pygame.time.wait(300)
            self.finish_game()
            return

        if self.game.state == WON:
            self.draw(self.game.snapshot())
            pygame.time.wait(1000)
            self.finish_game()

    def play(self):
        running = True

        while running:
            running = self.handle_events()
            if not running:
                break

            if not self.paused:
                self.tick()

            self.draw(self.game.snapshot())
            self.clock.tick(self.fps)

        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Best: {self.best}")
            print(f"Wins: {self.wins}")
