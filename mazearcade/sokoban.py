"""Sokoban: push every box onto a target square."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Set, Tuple

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console

Position = Tuple[int, int]

LEVEL = (
    "#########",
    "#       #",
    "# $   $ #",
    "#   P   #",
    "# B   B #",
    "#       #",
    "#########",
)

_DIRECTIONS = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


@dataclass
class SokobanBoard:
    """Positions of the player, boxes, targets and walls on a level."""

    level: Tuple[str, ...]
    player: Position
    boxes: Set[Position] = field(default_factory=set)
    targets: Set[Position] = field(default_factory=set)
    walls: Set[Position] = field(default_factory=set)
    moves: int = 0

    @classmethod
    def parse(cls, level: Iterable[str]) -> "SokobanBoard":
        """Build a board from rows using P, B, $ and # for the pieces."""
        rows = tuple(level)
        player: Optional[Position] = None
        boxes: Set[Position] = set()
        targets: Set[Position] = set()
        walls: Set[Position] = set()
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                pos = (x, y)
                if ch == "P":
                    player = pos
                elif ch == "B":
                    boxes.add(pos)
                elif ch == "$":
                    targets.add(pos)
                elif ch == "#":
                    walls.add(pos)
        if player is None:
            raise ValueError("level has no player")
        return cls(rows, player, boxes, targets, walls)

    def move(self, dx: int, dy: int) -> bool:
        """Step the player, pushing a box if there is one; True if it moved."""
        x, y = self.player
        target = (x + dx, y + dy)
        if target in self.walls:
            return False
        if target in self.boxes:
            beyond = (target[0] + dx, target[1] + dy)
            if beyond in self.walls or beyond in self.boxes:
                return False
            self.boxes.remove(target)
            self.boxes.add(beyond)
        self.player = target
        self.moves += 1
        return True

    def is_solved(self) -> bool:
        return self.boxes <= self.targets

    def _cell(self, pos: Position) -> str:
        on_target = pos in self.targets
        if pos == self.player:
            return "P* " if on_target else "P  "
        if pos in self.boxes:
            return "*  " if on_target else "B  "
        if on_target:
            return "$  "
        if pos in self.walls:
            return "#  "
        return ".  "

    def render(self) -> str:
        return "".join(
            "".join(self._cell((x, y)) for x in range(len(row))) + "\n"
            for y, row in enumerate(self.level)
        )


class SokobanGame(MiniGame):
    """Play the built-in level until solved or the player quits."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("推箱子", console)
        self.board = SokobanBoard.parse(LEVEL)

    def _draw(self) -> None:
        self.console.clear()
        self._say("\n=== 推箱子游戏 ===", Color.MAGENTA)
        self._say("移动: (w)上 (s)下 (a)左 (d)右", Color.MAGENTA)
        self._say(f"移动次数: {self.board.moves}\n", Color.MAGENTA)
        self.console.write(self.board.render())

    def play(self) -> None:
        self.board = SokobanBoard.parse(LEVEL)
        while True:
            self._draw()
            if self.board.is_solved():
                self._say("\n恭喜！你赢了！", Color.CYAN)
                self._say(f"你用了 {self.board.moves} 步完成！", Color.CYAN)
                self.console.pause(2)
                return

            text = self._ask("\n输入移动 (w/a/s/d) 或 q 退出: ", Color.MAGENTA)
            if not text:
                continue
            key = text[0].lower()
            if key == "q":
                return
            step = _DIRECTIONS.get(key)
            if step is not None:
                self.board.move(*step)