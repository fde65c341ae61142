"""Rock, paper, scissors against the computer, best of five."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console, trim

ROUNDS = 5
CHOICES = ("P", "S", "R")
_BEATS = {"S": "P", "P": "R", "R": "S"}

RULE = "-" * 100
MATCH_WON = "太棒了！你赢得了游戏！你击败了电脑！恭喜！"
MATCH_LOST = "哦不！电脑赢了！再试一次！我相信你这次能赢！"
MATCH_TIED = "啊哈！这次是平局！再试一次！加油！我相信你这次能赢！"
INVALID = '无效输入。请输入 "P"、"S" 或 "R"。'


class Outcome(Enum):
    WIN = "win"
    TIE = "tie"
    LOSE = "lose"


def round_outcome(player: str, computer: str) -> Outcome:
    """Result of one round from the player's side; letters are P, S or R."""
    mine, theirs = player.upper(), computer.upper()
    if mine not in _BEATS or theirs not in _BEATS:
        raise ValueError(f"invalid choice: {player!r} vs {computer!r}")
    if mine == theirs:
        return Outcome.TIE
    if _BEATS[mine] == theirs:
        return Outcome.WIN
    return Outcome.LOSE


class RockPaperScissorsGame(MiniGame):
    """Five-round matches repeated until the player wins one."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("石头剪刀布", console)

    def computer_choice(self) -> str:
        return self.rng.choice(CHOICES)

    def _intro(self) -> None:
        for line in (
            RULE,
            "欢迎来到石头剪刀布游戏！",
            "游戏共5轮，五局三胜制。",
            '"P" 代表布, "S" 代表剪刀, "R" 代表石头。',
            "如果输了或平局，你将有机会重试，直到击败电脑。",
            "让我们试着击败电脑吧！",
            RULE,
        ):
            self._say(line, Color.MAGENTA)

    def play(self) -> None:
        self._intro()
        player_score = computer_score = 0
        round_no = 1

        while True:
            if round_no > ROUNDS:
                if player_score > computer_score:
                    self._say(MATCH_WON, Color.CYAN)
                    return
                self._say(MATCH_LOST if computer_score > player_score else MATCH_TIED, Color.RED)
                player_score = computer_score = 0
                round_no = 1
                continue

            self._say(f"第 {round_no} / {ROUNDS} 轮")
            self._say(RULE)
            self._say("选择板：", Color.BLUE)
            text = trim(self._ask(
                '布、剪刀还是石头？请输入 "P"、"S" 或 "R" 来表示 "布"、"剪刀" 或 "石头"：',
                Color.BLUE,
            ))
            if not text:
                continue
            choice = text[0].upper()
            if choice not in _BEATS:
                self._say(INVALID, Color.RED)
                continue

            computer = self.computer_choice()
            outcome = round_outcome(choice, computer)
            if outcome is Outcome.WIN:
                player_score += 1
                color, message = Color.CYAN, "啊哈！你赢了这一轮！恭喜！"
            elif outcome is Outcome.TIE:
                player_score += 1
                computer_score += 1
                color, message = Color.CYAN, "啊哈！平局！继续！"
            else:
                computer_score += 1
                color, message = Color.RED, "哦不！电脑赢了！但别担心！我相信你会赢下一轮！"
            self._say(f"电脑的选择：{computer}")
            self._say(message, color)
            self._say(f"分数板：你 {player_score} : {computer_score} 电脑", color)
            round_no += 1