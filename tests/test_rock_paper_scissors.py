import io

import pytest

from mazearcade.rock_paper_scissors import (
    CHOICES,
    INVALID,
    MATCH_LOST,
    MATCH_TIED,
    MATCH_WON,
    Outcome,
    RockPaperScissorsGame,
    round_outcome,
)
from mazearcade.utils import Console


class ScriptedRng:
    def __init__(self, picks):
        self.picks = iter(picks)

    def choice(self, options):
        pick = next(self.picks)
        assert pick in options
        return pick


def make(text, picks):
    out = io.StringIO()
    game = RockPaperScissorsGame(Console(io.StringIO(text), out, False))
    game.rng = ScriptedRng(picks)
    return game, out


@pytest.mark.parametrize(
    "player, computer, expected",
    [
        ("S", "P", Outcome.WIN),
        ("P", "R", Outcome.WIN),
        ("R", "S", Outcome.WIN),
        ("P", "S", Outcome.LOSE),
        ("R", "P", Outcome.LOSE),
        ("S", "R", Outcome.LOSE),
        ("r", "R", Outcome.TIE),
    ],
)
def test_round_outcome(player, computer, expected):
    assert round_outcome(player, computer) is expected


def test_round_outcome_rejects_unknown_letters():
    with pytest.raises(ValueError):
        round_outcome("x", "P")


def test_each_choice_beats_exactly_one_other():
    for mine in CHOICES:
        wins = [c for c in CHOICES if round_outcome(mine, c) is Outcome.WIN]
        losses = [c for c in CHOICES if round_outcome(mine, c) is Outcome.LOSE]
        assert len(wins) == 1 and len(losses) == 1


def test_computer_choice_is_valid():
    game, _ = make("", [])
    game.rng.choice = lambda options: options[1]
    assert game.computer_choice() in CHOICES


def test_straight_win_ends_the_game():
    game, out = make("p\n" * 5, ["R"] * 5)
    game.play()
    text = out.getvalue()
    assert MATCH_WON in text
    assert MATCH_TIED not in text


def test_tied_match_restarts_then_win():
    game, out = make("paper\n" * 10, ["P"] * 5 + ["R"] * 5)
    game.play()
    text = out.getvalue()
    assert text.index(MATCH_TIED) < text.index(MATCH_WON)


def test_lost_match_restarts():
    game, out = make("r\n" * 10, ["P"] * 5 + ["S"] * 5)
    game.play()
    text = out.getvalue()
    assert text.index(MATCH_LOST) < text.index(MATCH_WON)


def test_invalid_and_empty_input_do_not_use_a_round():
    game, out = make("\nx\n" + "s\n" * 5, ["P"] * 5)
    game.play()
    text = out.getvalue()
    assert text.count(INVALID) == 1
    assert MATCH_WON in text


def test_endless_losing_needs_more_input():
    game, _ = make("p\n" * 3, ["S"] * 3)
    with pytest.raises(EOFError):
        game.play()