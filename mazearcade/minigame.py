"""Base class shared by all mini games."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from mazearcade.utils import Color, Console


class MiniGame(ABC):
    """A named game that talks to the player through a console."""

    def __init__(self, name: str, console: Optional[Console] = None) -> None:
        self.name = name
        self.console = console if console is not None else Console()
        self.rng = random.Random()

    @abstractmethod
    def play(self) -> None:
        """Run one full session of the game."""

    def __str__(self) -> str:
        return self.name

    def _say(self, text: str = "", color: Optional[Color] = None) -> None:
        if color is None:
            self.console.write(f"{text}\n")
        else:
            self.console.write(f"{color}{text}{Color.RESET}\n")

    def _ask(self, prompt: str, color: Optional[Color] = None) -> str:
        if color is not None:
            prompt = f"{color}{prompt}{Color.RESET}"
        return self.console.read_line(prompt)