"""Input and summary models (what the console layer reads in / prints out)"""

from typing import Any

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidSquareError
from src.core.shared_types import Mark
from src.tictactoe.position import NUM_SQUARES, SquarePosition

PLAY_AGAIN_TOKEN = "y"


# --- INPUT MODELS ---
class MoveInput(BaseModel):
    """A single line typed by the player whose turn it is."""

    square: int

    @field_validator("square", mode="before")
    @classmethod
    def validate_square(cls, value: Any) -> int:
        # leading zeros are allowed, but only a single significant digit is ever converted
        text = str(value).strip()
        digits = text.lstrip("0") if text.isascii() and text.isdigit() else ""
        if len(digits) != 1:
            raise InvalidSquareError(
                f"Cannot interpret {value!r} as a square. Choose a number from 1 to {NUM_SQUARES}."
            )
        return int(digits)

    def to_position(self) -> SquarePosition:
        return SquarePosition.from_index(self.square)


class PlayAgainInput(BaseModel):
    answer: str

    @field_validator("answer", mode="before")
    @classmethod
    def strip_answer(cls, value: Any) -> str:
        return str(value).strip()

    @property
    def wants_another_round(self) -> bool:
        return self.answer == PLAY_AGAIN_TOKEN


# --- SUMMARY MODELS ---
class ScoreboardResponse(BaseModel):
    rounds_played: int
    wins: dict[Mark, int]
    draws: int
