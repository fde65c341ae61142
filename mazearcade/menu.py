"""Main menu, maze settings and mini-game selection screens."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from mazearcade.manager import MiniGameManager
from mazearcade.utils import Color, Console, is_digit, trim

BANNER = r"""
[]           []     [][][] []    [] [][][] [] []     [] [][][][][] []    []
[]          [][]    []  []  []  []  []  [] [] [][]   []     []     []    []
[]         []  []   [][]      []    [][]   [] [] []  []     []     [][][][]
[]        [][][][]  []  []    []    [] []  [] []  [] []     []     []    []
[][][][] []      [] [][][]    []    []  [] [] []   [][]     []     []    []
"""

AVATARS: Dict[int, str] = {1: "😋", 2: "🤓", 3: "😎", 4: "🤩", 5: "😊"}
QUICK_DENSITY = 2


class MenuChoice(Enum):
    MAZE_GAME = "maze"
    MINI_GAME = "mini"
    EXIT = "exit"


@dataclass
class GameSettings:
    maze_size: int
    minigame_density: int
    player_avatar: str


def _leading_int(text: str) -> int:
    match = re.match(r"\d+", text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return int(match.group())


class MenuSystem:
    """Interactive menus read from and written to a console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()
        self.avatars = dict(AVATARS)
        self.rng = random.Random()
        self.game_names: List[str] = [
            game.name for game in MiniGameManager(self.console).games
        ]

    def _say(self, text: str, color: Optional[Color] = None) -> None:
        if color is None:
            self.console.write(f"{text}\n")
        else:
            self.console.write(f"{color}{text}{Color.RESET}\n")

    def _ask(self, prompt: str) -> str:
        return trim(self.console.read_line(prompt))

    def _ask_in_range(self, low: str, high: str) -> int:
        # Values are checked as strings, as the menus always have been.
        text = self._ask("=> ")
        while text < low or text > high:
            self._say(f"无效输入。请输入{low}到{high}之间的数字", Color.RED)
            text = self._ask("=> ")
        return _leading_int(text)

    def select_avatar(self) -> str:
        while True:
            self._say("按指定的数字选择你的头像：", Color.MAGENTA)
            for number, avatar in self.avatars.items():
                self._say(f"        {number}-->{avatar}", Color.MAGENTA)
            text = self._ask("")
            if is_digit(text) and int(text) in self.avatars:
                return self.avatars[int(text)]
            self._say("无效输入。请按1-5之间的数字。", Color.RED)

    def show_main_menu(self) -> MenuChoice:
        choices = {"1": MenuChoice.MAZE_GAME, "2": MenuChoice.MINI_GAME, "3": MenuChoice.EXIT}
        while True:
            self.console.clear()
            self._say(BANNER, Color.MAGENTA)
            self._say("欢迎来到迷宫游戏 - 完整版（包含全部7个小游戏）", Color.YELLOW)
            self._say("请选择你想玩的模式：", Color.YELLOW)
            self._say("        1 --> 迷宫游戏（带小游戏）", Color.YELLOW)
            self._say("        2 --> 单独玩小游戏", Color.YELLOW)
            self._say("        3 --> 退出游戏", Color.YELLOW)
            choice = choices.get(self._ask("==> "))
            if choice is not None:
                return choice
            self._say("无效输入。请输入 '1', '2' 或 '3'", Color.RED)
            self.console.pause(1)

    def show_maze_game_menu(self) -> GameSettings:
        while True:
            self.console.clear()
            self._say("迷宫游戏设置", Color.YELLOW)
            self._say("请选择游戏模式：", Color.YELLOW)
            self._say("        1-->快速游戏", Color.YELLOW)
            self._say("        2-->自定义游戏", Color.YELLOW)
            mode = self._ask("==> ")
            while mode not in ("1", "2"):
                self._say("无效输入。请输入 '1' 或 '2'", Color.RED)
                mode = self._ask("==> ")

            avatar = self.select_avatar()
            self._say(f"你选择了：{avatar}", Color.CYAN)

            if mode == "2":
                self._say("选择迷宫大小：", Color.CYAN)
                for level in range(1, 6):
                    side = (level + 10) * 2 + 1
                    self._say(f"                    {level}-->等级 {level}({side}x{side})", Color.CYAN)
                size = self._ask_in_range("1", "5") + 10
                self._say("选择小游戏密度：", Color.CYAN)
                for level in range(1, 4):
                    self._say(f"                    {level}-->等级 {level}", Color.CYAN)
                density = self._ask_in_range("1", "3") * 2
            else:
                size = self.rng.randint(11, 15)
                density = QUICK_DENSITY

            self._say("准备好开始了吗？", Color.CYAN)
            self._say("            1-->开始  2-->返回菜单", Color.CYAN)
            if self._ask("=> ") == "1":
                return GameSettings(size, density, avatar)

    def show_mini_game_menu(self) -> int:
        """Return the chosen game's index, or -1 to go back."""
        count = len(self.game_names)
        while True:
            self.console.clear()
            self._say("========== 小游戏选择 ==========", Color.CYAN)
            self._say("请选择你想玩的小游戏：", Color.YELLOW)
            for number, name in enumerate(self.game_names, 1):
                self._say(f"        {number} --> {name}", Color.YELLOW)
            self._say("        0 --> 返回主菜单", Color.YELLOW)
            text = self._ask("==> ")
            if is_digit(text):
                index = int(text)
                if index == 0:
                    return -1
                if 1 <= index <= count:
                    return index - 1
            self._say(f"无效输入。请输入0到{count}之间的数字", Color.RED)
            self.console.pause(1)