"""Command-line entry point: main menu loop for the maze and mini games."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from mazearcade.controller import GameController
from mazearcade.manager import MiniGameManager
from mazearcade.menu import MenuChoice, MenuSystem
from mazearcade.utils import Color, Console

FAREWELL = "\n感谢游玩！再见！"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazearcade",
        description="A terminal maze game with seven mini games.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="do not clear the screen or pause between screens",
    )
    return parser


def _mini_game_loop(menu: MenuSystem, manager: MiniGameManager) -> None:
    while True:
        index = menu.show_mini_game_menu()
        if index == -1:
            return
        manager.play_by_index(index)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    console = Console(interactive=not args.plain)
    try:
        console.write(f"{Color.CYAN}正在启动迷宫游戏（完整版 - 7个小游戏）...{Color.RESET}\n")
        console.write(
            f"{Color.YELLOW}包含：井字棋、猜数字、石头剪刀布、Hangman、推箱子、贪吃蛇、文字冒险{Color.RESET}\n"
        )
        console.pause(2)

        menu = MenuSystem(console)
        manager = MiniGameManager(console)
        while True:
            choice = menu.show_main_menu()
            if choice is MenuChoice.MAZE_GAME:
                GameController(console).run()
            elif choice is MenuChoice.MINI_GAME:
                _mini_game_loop(menu, manager)
            else:
                break
    except (EOFError, KeyboardInterrupt):
        pass
    except Exception as exc:
        sys.stderr.write(f"{Color.RED}错误：{exc}{Color.RESET}\n")
        return 1

    console.write(f"{Color.MAGENTA}{FAREWELL}{Color.RESET}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())