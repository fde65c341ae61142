"""Randomly carved maze with mini-game squares and a finish flag."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from mazearcade.utils import Color

if TYPE_CHECKING:
    from mazearcade.manager import MiniGameManager

WALL = "🔲"
PATH = "  "
GAME = "!!"
FINISH = "🏁"

_CARVE_STEPS = ((0, 2), (0, -2), (2, 0), (-2, 0))
_DIRECTIONS = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}


@dataclass
class Player:
    """The player's avatar and grid position (row, column)."""

    avatar: str
    y: int = 1
    x: int = 1

    @property
    def position(self) -> Tuple[int, int]:
        return (self.y, self.x)


class Maze:
    """A grid of ``2*height+1`` rows by ``2*width+1`` columns of cells."""

    def __init__(
        self,
        width: int,
        height: int,
        avatar: str,
        density: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"maze must be at least 1x1, not {width}x{height}")
        self.width = width
        self.height = height
        self.avatar = avatar
        self.density = density
        self.rng = rng if rng is not None else random.Random()
        self.player = Player(avatar, *self.start_position())
        self.grid: List[List[str]] = self._generate()
        self._add_mini_games()

    def _shuffled_steps(self) -> Iterator[Tuple[int, int]]:
        steps = list(_CARVE_STEPS)
        self.rng.shuffle(steps)
        return iter(steps)

    def _generate(self) -> List[List[str]]:
        rows, cols = self.height * 2 + 1, self.width * 2 + 1
        grid = [[WALL] * cols for _ in range(rows)]
        stack = [(1, 1, self._shuffled_steps())]
        while stack:
            x, y, steps = stack[-1]
            for dx, dy in steps:
                nx, ny = x + dx, y + dy
                if 0 < nx < cols - 1 and 0 < ny < rows - 1 and grid[ny][nx] == WALL:
                    grid[y + dy // 2][x + dx // 2] = PATH
                    grid[ny][nx] = PATH
                    stack.append((nx, ny, self._shuffled_steps()))
                    break
            else:
                stack.pop()
        grid[1][1] = self.avatar
        grid[rows - 2][cols - 2] = FINISH
        return grid

    def _add_mini_games(self) -> None:
        for row in self.grid:
            for j, cell in enumerate(row):
                if cell == PATH and self.rng.randint(1, 20) <= self.density:
                    row[j] = GAME

    @staticmethod
    def _paint(cell: str) -> str:
        if cell == WALL:
            color = Color.GREEN
        elif cell == GAME:
            color = Color.RED
        else:
            color = Color.YELLOW
        return f"{color}{cell}{Color.RESET}"

    def render(self) -> str:
        return "".join(
            "".join(self._paint(cell) for cell in row) + "\n" for row in self.grid
        )

    def _step_to(self, y: int, x: int) -> None:
        self.grid[self.player.y][self.player.x] = PATH
        self.grid[y][x] = self.avatar
        self.player.y, self.player.x = y, x

    def move(self, direction: str, manager: "MiniGameManager") -> bool:
        """Move one square; True once the finish flag is reached.

        Stepping onto a mini-game square starts a random game from ``manager``.
        """
        step = _DIRECTIONS.get(direction)
        if step is None:
            return False
        ny, nx = self.player.y + step[0], self.player.x + step[1]
        if not (0 <= ny < len(self.grid) and 0 <= nx < len(self.grid[0])):
            return False

        target = self.grid[ny][nx]
        console = manager.console
        if target == WALL:
            console.write(f"{Color.RED}哎呀！你撞墙了{Color.RESET}\n")
            return False

        self._step_to(ny, nx)
        if target == FINISH:
            return True
        if target == GAME:
            console.write(self.render())
            console.write(f"{Color.YELLOW}小游戏时间！{Color.RESET}\n")
            console.pause(1.5)
            manager.play_random()
        return False

    def start_position(self) -> Tuple[int, int]:
        return (1, 1)