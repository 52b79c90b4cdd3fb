"""Unit tests for /src/tictactoe/position.py"""

import pytest

from src.core.exceptions import InvalidSquareError
from src.tictactoe.position import SquarePosition, legend


@pytest.mark.parametrize(
    "number, expected",
    [
        (1, SquarePosition.TOP_LEFT),
        (2, SquarePosition.TOP_MIDDLE),
        (3, SquarePosition.TOP_RIGHT),
        (4, SquarePosition.CENTER_LEFT),
        (5, SquarePosition.CENTER_MIDDLE),
        (6, SquarePosition.CENTER_RIGHT),
        (7, SquarePosition.BOTTOM_LEFT),
        (8, SquarePosition.BOTTOM_MIDDLE),
        (9, SquarePosition.BOTTOM_RIGHT),
    ],
)
def test_from_index(number: int, expected: SquarePosition) -> None:
    """1 is top left, reading order up to 9 at the bottom right"""
    position = SquarePosition.from_index(number)
    assert position == expected
    assert position.number == number
    assert position.index == number - 1


@pytest.mark.parametrize("number", [0, 10, -1, 100])
def test_from_index_out_of_range(number: int) -> None:
    with pytest.raises(InvalidSquareError):
        _ = SquarePosition.from_index(number)


def test_rows() -> None:
    assert [position.row for position in SquarePosition] == [0, 0, 0, 1, 1, 1, 2, 2, 2]


def test_label() -> None:
    assert SquarePosition.CENTER_MIDDLE.label == "center middle"


def test_legend_lists_every_square_in_grid_order() -> None:
    lines = legend().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("1=top left")
    assert "5=center middle" in lines[1]
    assert lines[2].endswith("9=bottom right")
