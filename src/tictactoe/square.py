"""
A single square on the grid

(placed in its own module so the board and its tests can import it without the rest of the domain)
"""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import SquareAlreadyTaken
from src.core.shared_types import Mark


@dataclass
class Square:
    mark: Optional[Mark] = None

    def is_empty(self) -> bool:
        return self.mark is None

    def place(self, mark: Mark) -> None:
        """A square is written exactly once. Afterwards it can never be changed or cleared."""
        if self.mark is not None:
            raise SquareAlreadyTaken(f"Square already taken by {self.mark}!")
        self.mark = mark

    def to_char(self, empty: str = " ") -> str:
        return empty if self.mark is None else self.mark.value
