import io

import pytest

from mazearcade.sokoban import LEVEL, SokobanBoard, SokobanGame
from mazearcade.utils import Console

SOLUTION = "ssaawwssddddww"
_STEPS = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


def _play(lines):
    out = io.StringIO()
    console = Console(io.StringIO("".join(f"{line}\n" for line in lines)), out, interactive=False)
    SokobanGame(console).play()
    return out.getvalue()


def test_parse_places_pieces_where_the_level_says():
    board = SokobanBoard.parse(LEVEL)
    px, py = board.player
    assert LEVEL[py][px] == "P"
    assert all(LEVEL[y][x] == "B" for x, y in board.boxes)
    assert all(LEVEL[y][x] == "$" for x, y in board.targets)
    assert all(LEVEL[y][x] == "#" for x, y in board.walls)
    assert len(board.boxes) == len(board.targets)
    assert not board.is_solved()


def test_parse_without_player_raises():
    with pytest.raises(ValueError):
        SokobanBoard.parse(["###", "#B#", "###"])


def test_wall_blocks_player():
    board = SokobanBoard.parse(["###", "#P#", "###"])
    start = board.player
    assert board.move(1, 0) is False
    assert board.player == start
    assert board.moves == 0


def test_push_box_onto_target_solves():
    board = SokobanBoard.parse(["#####", "#PB$#", "#####"])
    assert board.move(1, 0) is True
    assert board.boxes == board.targets
    assert board.is_solved()
    assert "*  " in board.render()


def test_box_against_wall_does_not_move():
    board = SokobanBoard.parse(["####", "#PB#", "####"])
    boxes = set(board.boxes)
    start = board.player
    assert board.move(1, 0) is False
    assert board.boxes == boxes
    assert board.player == start


def test_two_boxes_in_a_row_do_not_move():
    board = SokobanBoard.parse(["######", "#PBB.#", "######"])
    boxes = set(board.boxes)
    assert board.move(1, 0) is False
    assert board.boxes == boxes


def test_player_on_target_is_marked():
    board = SokobanBoard.parse(["####", "#P$#", "####"])
    board.move(1, 0)
    assert "P* " in board.render()


def test_render_has_one_line_per_row():
    board = SokobanBoard.parse(LEVEL)
    lines = board.render().splitlines()
    assert len(lines) == len(LEVEL)
    assert all(len(line) == 3 * len(row) for line, row in zip(lines, LEVEL))


def test_known_solution_solves_builtin_level():
    board = SokobanBoard.parse(LEVEL)
    for key in SOLUTION:
        assert board.move(*_STEPS[key])
    assert board.is_solved()
    assert board.moves == len(SOLUTION)


def test_game_quit():
    output = _play(["q"])
    assert "=== 推箱子游戏 ===" in output
    assert "恭喜！你赢了！" not in output


def test_game_ignores_empty_and_unknown_input():
    output = _play(["", "x", "q"])
    assert "移动次数: 0" in output
    assert "移动次数: 1" not in output


def test_game_solved():
    output = _play(list(SOLUTION))
    assert "恭喜！你赢了！" in output
    assert "你用了 14 步完成！" in output