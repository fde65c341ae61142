import io

import pytest

from mazearcade.tictactoe import (
    COMPUTER,
    INVALID,
    LOST,
    PLAYER,
    TAKEN,
    WON,
    Board,
    TicTacToeGame,
)
from mazearcade.utils import Console


class HighestRng:
    def choice(self, options):
        return max(options)


def make(text):
    out = io.StringIO()
    game = TicTacToeGame(Console(io.StringIO(text), out, False))
    game.rng = HighestRng()
    return game, out


def test_new_board_render():
    assert Board().render() == "| 1 || 2 || 3 |\n| 4 || 5 || 6 |\n| 7 || 8 || 9 |\n"


def test_place_marks_square_and_updates_free_positions():
    board = Board()
    board.place(5, PLAYER)
    assert board.is_taken(5)
    assert not board.is_taken(1)
    assert 5 not in board.free_positions()
    assert len(board.free_positions()) == 8
    assert PLAYER in board.render()


def test_place_on_taken_square_raises():
    board = Board()
    board.place(1, COMPUTER)
    with pytest.raises(ValueError):
        board.place(1, PLAYER)


@pytest.mark.parametrize("position", [0, 10, -1])
def test_out_of_range_positions_raise(position):
    with pytest.raises(ValueError):
        Board().is_taken(position)


@pytest.mark.parametrize(
    "positions",
    [(1, 2, 3), (4, 5, 6), (7, 8, 9), (1, 4, 7), (2, 5, 8), (3, 6, 9), (1, 5, 9), (3, 5, 7)],
)
def test_every_line_wins(positions):
    board = Board()
    for position in positions:
        board.place(position, COMPUTER)
    assert board.has_won(COMPUTER)
    assert not board.has_won(PLAYER)


def test_no_win_without_a_line():
    board = Board()
    for position in (1, 2, 4):
        board.place(position, PLAYER)
    assert not board.has_won(PLAYER)


def test_full_board():
    board = Board()
    for position in range(1, 10):
        assert not board.is_full()
        board.place(position, PLAYER if position % 2 else COMPUTER)
    assert board.is_full()
    assert board.free_positions() == []


def test_player_wins_with_top_row():
    game, out = make("x\n10\n1\n1\n2\n3\n")
    game.play()
    text = out.getvalue()
    assert text.count(INVALID) == 2
    assert text.count(TAKEN) == 1
    assert text.rstrip().endswith(f"{WON}\033[0m")
    assert game.board.has_won(PLAYER)


def test_loss_resets_board_and_game_continues():
    game, out = make("1\n2\n4\n1\n2\n3\n")
    game.play()
    text = out.getvalue()
    assert text.index(LOST) < text.index(WON)
    assert game.board.free_positions() == [4, 5, 6, 7]


def test_running_out_of_input_raises():
    game, _ = make("1\n")
    with pytest.raises(EOFError):
        game.play()