"""A three-room text adventure: find the key and open the chest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console, trim

SEPARATOR = "\n" + "-" * 50 + "\n"
Reply = Tuple[str, Optional[Color]]

WIN = "你打开了箱子，找到了一顶金冠！你赢了！"
INVALID = "无效命令！请输入：north, south, east, west, take, unlock, inventory, quit"


@dataclass
class Room:
    description: str
    exits: Dict[str, str] = field(default_factory=dict)
    item: str = ""
    has_chest: bool = False
    chest_locked: bool = False


def _initial_rooms() -> Dict[str, Room]:
    return {
        "start": Room(
            "🕯️ 你在一个被闪烁烛光照亮的黑暗房间里。\n北边有一扇门，东边有一扇窗户。",
            {"north": "corridor", "east": "garden"},
        ),
        "corridor": Room(
            "🚪 你在一条狭长的走廊里。空气感觉很冷。\n南边有一扇门，地板上有一把闪闪发光的钥匙。",
            {"south": "start"},
            "key",
        ),
        "garden": Room(
            "🌸 你在一个开满鲜花的美丽花园里。\n这里有一个上锁的箱子。西边的窗户通向室内。",
            {"west": "start"},
            "",
            True,
            True,
        ),
    }


class Adventure:
    """World state and command handling for one playthrough."""

    def __init__(self) -> None:
        self.rooms = _initial_rooms()
        self.current = "start"
        self.inventory: List[str] = []
        self.finished = False
        self.won = False

    @property
    def room(self) -> Room:
        return self.rooms[self.current]

    def handle(self, command: str) -> List[Reply]:
        """Carry out a command and return the lines to show with their colours."""
        command = trim(command).lower()
        room = self.room

        if command == "quit":
            self.finished = True
            return [("感谢游玩！", Color.CYAN)]
        if command == "inventory":
            if self.inventory:
                body: Reply = ("你有：" + "".join(f"{item} " for item in self.inventory), Color.CYAN)
            else:
                body = ("你的背包是空的。", Color.YELLOW)
            return [(SEPARATOR, None), body, (SEPARATOR, None)]
        if command in room.exits:
            self.current = room.exits[command]
            return [(f"你移动到了 {self.current}！", Color.BLUE)]
        if command == "take":
            if not room.item:
                return [("这里没有东西可拿！", Color.YELLOW)]
            item, room.item = room.item, ""
            self.inventory.append(item)
            return [(f"你拿起了 {item}。", Color.GREEN)]
        if command == "unlock":
            if self.current != "garden":
                return [("这里没有东西可以解锁！", Color.RED)]
            if "key" not in self.inventory:
                return [("你需要一把钥匙来打开箱子！", Color.RED)]
            if room.chest_locked:
                self.finished = True
                self.won = True
                return [(WIN, Color.GREEN)]
            return [("箱子已经打开了！", Color.YELLOW)]
        return [(INVALID, Color.YELLOW)]


class TextAdventureGame(MiniGame):
    """Read commands until the chest is opened or the player quits."""

    def __init__(self, console: Optional[Console] = None) -> None:
        super().__init__("文字冒险", console)

    def _intro(self) -> None:
        self._say(SEPARATOR)
        self._say("欢迎来到迷你文字冒险游戏！", Color.MAGENTA)
        self._say("\n如何游玩：", Color.CYAN)
        for line in (
            "- 使用命令移动：north, south, east, west",
            "- 收集物品：take",
            "- 解锁物品：unlock",
            "- 查看背包：inventory",
            "- 退出游戏：quit",
        ):
            self._say(line)
        self._say(SEPARATOR)

    def play(self) -> None:
        adventure = Adventure()
        self._intro()
        while True:
            self._say(adventure.room.description, Color.GREEN)
            command = self._ask("\n你想做什么？", Color.BLUE)
            for text, color in adventure.handle(command):
                self._say(text, color)
            if adventure.finished:
                if adventure.won:
                    self.console.pause(2)
                return