"""Unit tests for src/api/models.py"""

import pytest

from src.api.models import MoveInput, PlayAgainInput, ScoreboardResponse
from src.core.exceptions import InvalidSquareError
from src.core.shared_types import Mark
from src.tictactoe.position import SquarePosition


# -- Validation - MoveInput --
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("5\n", 5),
        ("  9  ", 9),
        ("05", 5),
        ("0" * 5000 + "3", 3),
        (7, 7),
    ],
)
def test_valid_square(raw: str | int, expected: int) -> None:
    move = MoveInput(square=raw)
    assert move.square == expected


@pytest.mark.parametrize(
    "raw",
    [
        "0",  # squares are numbered from 1
        "10",  # ... up to 9
        "-3",
        "abc",
        "",
        "\n",
        "4.5",
        "5 5",
        "٥",  # arabic-indic five: a digit, but not a base 10 ascii number
        "1" * 5000,  # longer than int() is willing to convert
    ],
)
def test_invalid_square(raw: str) -> None:
    """The domain exception is raised straight from the validator, so callers can catch it directly."""
    with pytest.raises(InvalidSquareError):
        _ = MoveInput(square=raw)


def test_move_input_to_position() -> None:
    move = MoveInput(square="5")
    assert move.to_position() == SquarePosition.CENTER_MIDDLE


# -- Validation - PlayAgainInput --
@pytest.mark.parametrize("raw", ["y", "y\n", "  y  "])
def test_play_again_yes(raw: str) -> None:
    assert PlayAgainInput(answer=raw).wants_another_round


@pytest.mark.parametrize("raw", ["n", "Y", "yes", "", "\n", "y y"])
def test_play_again_anything_else_is_no(raw: str) -> None:
    assert not PlayAgainInput(answer=raw).wants_another_round


# -- Responses --
def test_scoreboard_response() -> None:
    response = ScoreboardResponse(
        rounds_played=3, wins={Mark.X: 2, Mark.O: 0}, draws=1
    )
    assert response.wins[Mark.X] == 2
    assert response.model_dump()["draws"] == 1
