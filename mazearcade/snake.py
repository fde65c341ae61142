"""Snake: eat five pieces of food without hitting a wall or yourself."""

from __future__ import annotations

import random
import time
from collections import deque
from typing import Deque, Optional, Tuple

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console, getch, kbhit, non_blocking_input, sleep_ms

Position = Tuple[int, int]

WIDTH = 40
HEIGHT = 20
TARGET_SCORE = 5
MOVE_INTERVAL = 1.0

_MOVES = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}
_OPPOSITE = {"w": "s", "s": "w", "a": "d", "d": "a"}


class SnakeBoard:
    """The snake, its food and the walled field around them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        cx, cy = WIDTH // 2, HEIGHT // 2
        self.snake: Deque[Position] = deque([(cx, cy), (cx - 1, cy), (cx - 2, cy)])
        self.direction = "d"
        self.score = 0
        self.game_over = False
        self.food = self._place_food()

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def won(self) -> bool:
        return self.score >= TARGET_SCORE

    def _place_food(self) -> Position:
        while True:
            pos = (self.rng.randint(1, WIDTH - 2), self.rng.randint(1, HEIGHT - 2))
            if pos not in self.snake:
                return pos

    def turn(self, direction: str) -> bool:
        """Change heading unless the key is unknown or points straight back."""
        key = direction.lower()
        if key in _MOVES and _OPPOSITE[key] != self.direction:
            self.direction = key
            return True
        return False

    def step(self) -> None:
        """Advance the snake one square in its current direction."""
        if self.game_over:
            return
        dx, dy = _MOVES[self.direction]
        x, y = self.head
        new_head = (x + dx, y + dy)
        nx, ny = new_head
        if not (0 < nx < WIDTH - 1 and 0 < ny < HEIGHT - 1) or new_head in self.snake:
            self.game_over = True
            return
        self.snake.appendleft(new_head)
        if new_head == self.food:
            self.score += 1
            if self.won:
                self.game_over = True
                return
            self.food = self._place_food()
        else:
            self.snake.pop()

    def _cell(self, pos: Position) -> str:
        x, y = pos
        if y in (0, HEIGHT - 1) or x in (0, WIDTH - 1):
            return "#"
        if pos == self.head:
            return "O"
        if pos in self.snake:
            return "o"
        if pos == self.food:
            return "*"
        return " "

    def render(self) -> str:
        return "".join(
            "".join(self._cell((x, y)) for x in range(WIDTH)) + "\n"
            for y in range(HEIGHT)
        )


class SnakeGame(MiniGame):
    """Real-time snake on a terminal; one line per tick when scripted."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("贪吃蛇", console)

    def _draw(self, board: SnakeBoard) -> None:
        self.console.clear()
        self._say("=== 贪吃蛇游戏 ===", Color.MAGENTA)
        self._say(f"分数: {board.score} | 用 w/a/s/d 控制方向", Color.MAGENTA)
        self.console.write(board.render())
        self._say(f"\n目标：吃到{TARGET_SCORE}个食物就赢！当前：{board.score}/{TARGET_SCORE}")

    def _run_live(self, board: SnakeBoard) -> None:
        with non_blocking_input():
            last_move = time.monotonic()
            while not board.game_over:
                self._draw(board)
                if kbhit():
                    board.turn(getch())
                now = time.monotonic()
                if now - last_move >= MOVE_INTERVAL:
                    board.step()
                    last_move = now
                sleep_ms(50)
            while kbhit():
                getch()

    def _run_scripted(self, board: SnakeBoard) -> None:
        while not board.game_over:
            self._draw(board)
            for key in self.console.read_line():
                board.turn(key)
            board.step()

    def play(self) -> None:
        board = SnakeBoard(self.rng)
        self._say("贪吃蛇游戏开始！", Color.YELLOW)
        self._say("蛇会自动移动，使用 w/a/s/d 改变方向", Color.YELLOW)
        self._ask("按回车开始...")

        if self.console.interactive:
            self._run_live(board)
        else:
            self._run_scripted(board)

        self.console.clear()
        if board.won:
            self._say("恭喜！你赢了！🎉", Color.CYAN)
            self._say(f"最终分数：{board.score}", Color.CYAN)
        else:
            self._say("游戏结束！😢", Color.RED)
            self._say(f"最终分数：{board.score}/{TARGET_SCORE}", Color.RED)
        self.console.pause(2)