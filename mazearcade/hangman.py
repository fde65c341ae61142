"""Hangman: guess the five-letter word before the figure is complete."""

from __future__ import annotations

from typing import List, Optional

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console, is_alpha, to_upper, trim

HANGMAN_IMAGES = (
    "    /-------\n    |\n    |\n    |\n    |\n    ^^^\n",
    "    /-------]\n    |\n    |\n    |\n    |\n    ^^^\n",
    "    /-------]\n    |       O\n    |\n    |\n    |\n    ^^^\n",
    "    /-------]\n    |       O\n    |       |\n    |       |\n    |\n    ^^^\n",
    "    /-------]\n    |       O\n    |      \\|\n    |       |\n    |\n    ^^^\n",
    "    /------]\n    |      O\n    |     \\|/\n    |      |\n    |\n    ^^^\n",
    "    /-------]\n    |       O\n    |      \\|/\n    |       | \n    |      /\n    ^^^\n",
    "    /-------]\n    |       O\n    |      \\|/\n    |       |\n    |      / \\\n    ^^^\n",
)

WORDS = (
    "APPLE", "TABLE", "CHAIR", "LIGHT", "HOUSE", "WATER",
    "BREAD", "PLANT", "SMILE", "TRAIN", "MONEY", "PIANO",
    "STONE", "CANDY", "CLOUD", "PEACE", "MOUSE", "GLASS",
    "BEACH", "HEART", "PEACH", "DANCE", "FRUIT", "TIGER",
)

MAX_WRONG = len(HANGMAN_IMAGES) - 1
WON = "恭喜！你赢了 🥳"


class HangmanState:
    """Progress of one hangman round."""

    def __init__(self, word: str) -> None:
        if not is_alpha(word):
            raise ValueError(f"word must consist of letters only: {word!r}")
        self.word = to_upper(word)
        self._revealed: List[str] = ["_"] * len(self.word)
        self.wrong: List[str] = []
        self.attempts = 0

    @property
    def progress(self) -> str:
        return "".join(self._revealed)

    def guess(self, letter: str) -> bool:
        """Apply a one-letter guess; return whether the letter is in the word."""
        if len(letter) != 1 or not is_alpha(letter):
            raise ValueError(f"a guess must be a single letter: {letter!r}")
        letter = to_upper(letter)
        self.attempts += 1
        found = letter in self.word
        if found:
            self._revealed = [
                ch if ch == letter else shown
                for ch, shown in zip(self.word, self._revealed)
            ]
        elif letter not in self.wrong:
            self.wrong.append(letter)
        return found

    def is_won(self) -> bool:
        return self.progress == self.word

    def is_lost(self) -> bool:
        return len(self.wrong) >= MAX_WRONG

    def picture(self) -> str:
        return HANGMAN_IMAGES[min(len(self.wrong), MAX_WRONG)]


class HangmanGame(MiniGame):
    """Guess letters one at a time until the word is found or the man hangs."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("Hangman猜词", console)
        self.words: List[str] = list(WORDS)

    def _read_letter(self) -> str:
        text = trim(self._ask("请输入你的猜测：", Color.YELLOW))
        while len(text) != 1 or not is_alpha(text):
            text = trim(self._ask("无效输入。请再次输入你的猜测：", Color.RED))
        return text

    def play(self) -> None:
        state = HangmanState(self.rng.choice(self.words))
        self._say(f"单词：{state.progress}", Color.RED)

        while not state.is_lost() and not state.is_won():
            state.guess(self._read_letter())
            self._say(state.picture())
            letters = "".join(f"{c} " for c in state.wrong)
            self.console.write(f"{Color.CYAN}错误的字母：{Color.RESET}{letters}\n")
            self._say(f"尝试次数：{state.attempts}", Color.MAGENTA)
            self._say(f"单词：{state.progress}", Color.RED)

        if state.is_won():
            self._say(WON, Color.BLUE)
        else:
            self._say(f"哦不！你输了 🥺\n单词是：{state.word}。再试一次！", Color.RED)