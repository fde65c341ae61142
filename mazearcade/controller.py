"""Runs one maze game from settings to the finish flag."""

from __future__ import annotations

import random
from typing import Optional

from mazearcade.manager import MiniGameManager
from mazearcade.maze import Maze, Player
from mazearcade.menu import MenuSystem
from mazearcade.utils import Color, Console, trim

VALID_KEYS = frozenset("wasd")


class GameController:
    """Asks for settings, builds a maze and moves the player through it."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()
        self.menu = MenuSystem(self.console)
        self.manager = MiniGameManager(self.console)
        self.rng = random.Random()
        self.maze: Optional[Maze] = None
        self.player: Optional[Player] = None

    def _say(self, text: str, color: Color) -> None:
        self.console.write(f"{color}{text}{Color.RESET}\n")

    def _redraw(self, maze: Maze) -> None:
        self.console.clear()
        self.console.write(maze.render())

    def run(self) -> None:
        settings = self.menu.show_maze_game_menu()
        maze = Maze(
            settings.maze_size,
            settings.maze_size,
            settings.player_avatar,
            settings.minigame_density,
            self.rng,
        )
        self.maze = maze
        self.player = maze.player
        self._redraw(maze)

        while True:
            keys = trim(self.console.read_line("请输入移动方向 (wasd)："))
            if not keys:
                continue
            if not set(keys) <= VALID_KEYS:
                self._say("输入无效。请输入移动方向 (wasd)：", Color.RED)
                continue
            for key in keys:
                reached = maze.move(key, self.manager)
                self._redraw(maze)
                if reached:
                    self._say("游戏结束！", Color.RED)
                    self._say("恭喜你！你成功走出了迷宫！", Color.CYAN)
                    self._say("\n感谢您的游玩！", Color.MAGENTA)
                    self.console.pause(2)
                    return