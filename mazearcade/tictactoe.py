"""Tic-tac-toe against a computer that plays random free squares."""

from __future__ import annotations

from typing import List, Optional

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console, is_digit, trim

PLAYER = "😊"
COMPUTER = "🐱"
_MARKS = (PLAYER, COMPUTER)
_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

RULE = "-" * 90
WON = "恭喜！你赢了！"
LOST = "哦不！你输了！加油！再试一次！！你这次一定会赢！"
DRAW = "没有人赢！再试一次！我相信你这次会赢！"
INVALID = "错误：无效输入。请输入1到9之间的整数。"
TAKEN = "错误：该位置已被选择。请选择另一个位置。"


class Board:
    """A 3x3 board whose squares are numbered 1 to 9."""

    def __init__(self) -> None:
        self._cells = [str(n) for n in range(1, 10)]

    @staticmethod
    def _index(position: int) -> int:
        if not 1 <= position <= 9:
            raise ValueError(f"position must be between 1 and 9, not {position}")
        return position - 1

    def is_taken(self, position: int) -> bool:
        return self._cells[self._index(position)] in _MARKS

    def place(self, position: int, symbol: str) -> None:
        if self.is_taken(position):
            raise ValueError(f"position {position} is already taken")
        self._cells[self._index(position)] = symbol

    def free_positions(self) -> List[int]:
        return [n for n, cell in enumerate(self._cells, 1) if cell not in _MARKS]

    def has_won(self, symbol: str) -> bool:
        return any(all(self._cells[i] == symbol for i in line) for line in _LINES)

    def is_full(self) -> bool:
        return not self.free_positions()

    def render(self) -> str:
        rows = (self._cells[start:start + 3] for start in range(0, 9, 3))
        return "".join("".join(f"| {cell} |" for cell in row) + "\n" for row in rows)


class TicTacToeGame(MiniGame):
    """Rounds repeat until the player beats the computer."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("井字棋", console)
        self.board = Board()

    def _print_board(self) -> None:
        self._say(RULE, Color.YELLOW)
        self._say("加油！我们一定能击败电脑！", Color.YELLOW)
        self._say(RULE, Color.YELLOW)
        self.console.write(self.board.render())

    def _intro(self) -> None:
        for line in (
            RULE,
            "欢迎来到井字棋游戏！",
            RULE,
            f"在这个游戏中，你将是笑脸{PLAYER}，电脑将是猫{COMPUTER}。",
            "你将先走棋，电脑将在你走后移动。",
            "你的任务是击败电脑。",
            RULE,
            "你可以通过输入1到9之间的整数来选择和占据一个位置，",
            "未选择的剩余位置的序列号显示在下面的棋盘中。",
        ):
            self._say(line, Color.MAGENTA)

    def _player_move(self) -> None:
        while True:
            text = trim(self._ask(f"{PLAYER}: "))
            if not is_digit(text) or not 1 <= int(text) <= 9:
                self._say(INVALID, Color.RED)
                self._print_board()
                continue
            position = int(text)
            if self.board.is_taken(position):
                self._say(TAKEN, Color.RED)
                self._print_board()
                continue
            self.board.place(position, PLAYER)
            return

    def _computer_move(self) -> None:
        self.board.place(self.rng.choice(self.board.free_positions()), COMPUTER)

    def _restart(self, message: str) -> None:
        self._print_board()
        self._say(message, Color.RED)
        self.board = Board()

    def play(self) -> None:
        self.board = Board()
        self._intro()
        self._print_board()

        first_round = True
        while True:
            if not first_round:
                self._print_board()
            first_round = False

            self._player_move()
            if self.board.has_won(PLAYER):
                self._print_board()
                self._say(WON, Color.CYAN)
                return
            if self.board.is_full():
                self._restart(DRAW)
                continue

            self._computer_move()
            if self.board.has_won(COMPUTER):
                self._restart(LOST)
                continue
            if self.board.is_full():
                self._restart(DRAW)