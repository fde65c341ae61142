"""Holds the collection of mini games and starts them."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from mazearcade.guess_number import GuessNumberGame
from mazearcade.hangman import HangmanGame
from mazearcade.minigame import MiniGame
from mazearcade.rock_paper_scissors import RockPaperScissorsGame
from mazearcade.snake import SnakeGame
from mazearcade.sokoban import SokobanGame
from mazearcade.text_adventure import TextAdventureGame
from mazearcade.tictactoe import TicTacToeGame
from mazearcade.utils import Color, Console

START_BANNER = "\n========== 小游戏时间！=========="
END_BANNER = "========== 小游戏结束 =========="


def _default_games(console: Console) -> List[MiniGame]:
    return [
        TicTacToeGame(console),
        GuessNumberGame(console),
        RockPaperScissorsGame(console),
        HangmanGame(console),
        SokobanGame(console),
        SnakeGame(console),
        TextAdventureGame(console),
    ]


class MiniGameManager:
    """An ordered set of mini games sharing one console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        games: Optional[Iterable[MiniGame]] = None,
    ) -> None:
        self.console = console if console is not None else Console()
        self.games: List[MiniGame] = (
            list(games) if games is not None else _default_games(self.console)
        )
        self.rng = random.Random()

    def __len__(self) -> int:
        return len(self.games)

    def _say(self, text: str, color: Color) -> None:
        self.console.write(f"{color}{text}{Color.RESET}\n")

    def play_random(self) -> None:
        """Play one game chosen with equal chance."""
        if not self.games:
            raise ValueError("there are no games to play")
        count = len(self.games)
        index = self.rng.randrange(count)
        game = self.games[index]
        self._say(START_BANNER, Color.CYAN)
        self._say(f"游戏：{game.name} (第{index + 1}个，共{count}个)", Color.CYAN)
        self._say(f"提示：所有游戏都有相等的出现几率（各1/{count}）", Color.YELLOW)
        self.console.pause(1)
        game.play()
        self._say(END_BANNER, Color.CYAN)
        self.console.pause(1)

    def play_by_index(self, index: int) -> bool:
        """Play the game at ``index``; an index out of range does nothing."""
        if not 0 <= index < len(self.games):
            return False
        game = self.games[index]
        self._say(START_BANNER, Color.CYAN)
        self._say(f"游戏：{game.name}", Color.CYAN)
        game.play()
        self._say(END_BANNER, Color.CYAN)
        self.console.pause(1)
        return True

    def game_name(self, index: int) -> str:
        """Name of the game at ``index``, or an empty string if there is none."""
        if 0 <= index < len(self.games):
            return self.games[index].name
        return ""