"""
The nine named squares of the grid.

Players address squares with the numbers 1-9 (reading order, starting top left).
Internally the board stores them in a flat list, so every position also knows its 0-based index.
"""

from enum import Enum
from typing import Self

from src.core.exceptions import InvalidSquareError

GRID_SIZE = 3
NUM_SQUARES = GRID_SIZE * GRID_SIZE


class SquarePosition(Enum):
    """Values are the 0-based index into the board's list of squares."""

    TOP_LEFT = 0
    TOP_MIDDLE = 1
    TOP_RIGHT = 2
    CENTER_LEFT = 3
    CENTER_MIDDLE = 4
    CENTER_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_MIDDLE = 7
    BOTTOM_RIGHT = 8

    @classmethod
    def from_index(cls, number: int) -> Self:
        """User facing numbering: 1 is top left, 9 is bottom right. Anything else is rejected."""
        if not 1 <= number <= NUM_SQUARES:
            raise InvalidSquareError(
                f"Square {number!r} does not exist. Pick a number from 1 to {NUM_SQUARES}."
            )
        return cls(number - 1)

    @property
    def index(self) -> int:
        return self.value

    @property
    def number(self) -> int:
        return self.value + 1

    @property
    def row(self) -> int:
        return self.value // GRID_SIZE

    @property
    def label(self) -> str:
        """ex) CENTER_MIDDLE -> 'center middle'"""
        return self.name.replace("_", " ").lower()


def legend() -> str:
    """Three lines mapping each number to its square, laid out like the grid itself."""
    rows: list[str] = []
    for row in range(GRID_SIZE):
        cells = [
            f"{position.number}={position.label:<13}"
            for position in SquarePosition
            if position.row == row
        ]
        rows.append("  ".join(cells).rstrip())
    return "\n".join(rows)
