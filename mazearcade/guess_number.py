"""Guess a number between 1 and 100 with graded hints."""

from __future__ import annotations

from typing import Optional

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console, is_digit, trim

LOW = 1
HIGH = 100
CORRECT = "答对了！恭喜你！"
INVALID = "无效输入。请输入1到100之间的整数。"


def hint(guess: int, target: int) -> str:
    """Describe how far ``guess`` is from ``target``."""
    diff = guess - target
    if diff == 0:
        return CORRECT
    gap = abs(diff)
    if diff < 0:
        if gap >= 90:
            return "太小了！比正确值小90以上。"
        if gap >= 10:
            return f"太小了！比正确值小{gap // 10 * 10}以上。"
        return "非常接近了！比正确值小不到10！"
    if gap >= 90:
        return "太大了！比正确值大90以上。"
    if gap >= 10:
        return f"太大了！比正确值大{gap // 10 * 10}以上。"
    return "非常接近了！比正确值大不到10！"


class GuessNumberGame(MiniGame):
    """Keep guessing until the secret number is found."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("猜数字游戏", console)

    def play(self) -> None:
        target = self.rng.randint(LOW, HIGH)
        self._say("欢迎来到猜数字游戏！", Color.MAGENTA)
        self._say("请猜一个1到100之间的整数。", Color.MAGENTA)

        while True:
            text = trim(self._ask("请输入你的猜测（1-100之间的整数）：", Color.MAGENTA))
            if not is_digit(text) or not LOW <= int(text) <= HIGH:
                self._say(INVALID, Color.RED)
                continue
            guess = int(text)
            if guess == target:
                self._say(CORRECT, Color.CYAN)
                return
            self._say(hint(guess, target), Color.YELLOW)