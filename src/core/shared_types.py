"""
Type definitions used across layers
"""

from enum import StrEnum


class Mark(StrEnum):
    """The two symbols players place on the grid. X always opens a round."""

    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        return Mark.O if self == Mark.X else Mark.X


STARTING_MARK = Mark.X


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    COMPLETE = "complete"
    DRAW = "draw"
