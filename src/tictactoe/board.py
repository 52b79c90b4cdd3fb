"""The Board implements all rules of a single round: placing marks, alternating turns, and deciding the outcome."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import RoundModel
from src.core.shared_types import STARTING_MARK, Mark, Status
from src.tictactoe.position import GRID_SIZE, NUM_SQUARES, SquarePosition
from src.tictactoe.square import Square

Line = tuple[SquarePosition, SquarePosition, SquarePosition]

WINNING_LINES: tuple[Line, ...] = (
    # rows
    (SquarePosition.TOP_LEFT, SquarePosition.TOP_MIDDLE, SquarePosition.TOP_RIGHT),
    (SquarePosition.CENTER_LEFT, SquarePosition.CENTER_MIDDLE, SquarePosition.CENTER_RIGHT),
    (SquarePosition.BOTTOM_LEFT, SquarePosition.BOTTOM_MIDDLE, SquarePosition.BOTTOM_RIGHT),
    # columns
    (SquarePosition.TOP_LEFT, SquarePosition.CENTER_LEFT, SquarePosition.BOTTOM_LEFT),
    (SquarePosition.TOP_MIDDLE, SquarePosition.CENTER_MIDDLE, SquarePosition.BOTTOM_MIDDLE),
    (SquarePosition.TOP_RIGHT, SquarePosition.CENTER_RIGHT, SquarePosition.BOTTOM_RIGHT),
    # diagonals
    (SquarePosition.TOP_LEFT, SquarePosition.CENTER_MIDDLE, SquarePosition.BOTTOM_RIGHT),
    (SquarePosition.BOTTOM_LEFT, SquarePosition.CENTER_MIDDLE, SquarePosition.TOP_RIGHT),
)

ROW_SEPARATOR = "---+---+---"
EMPTY_CHAR_MODEL = "-"


@dataclass
class Board:
    # state only ever changes through make_move
    squares: list[Square] = field(
        default_factory=lambda: [Square() for _ in range(NUM_SQUARES)], init=False
    )
    player_turn: Mark = field(default=STARTING_MARK, init=False)
    turn_count: int = field(default=0, init=False)
    status: Status = field(default=Status.IN_PROGRESS, init=False)
    winner: Optional[Mark] = field(default=None, init=False)
    moves: list[SquarePosition] = field(default_factory=list, init=False)

    @classmethod
    def new(cls) -> Self:
        """Empty grid, nobody has moved yet, X to play."""
        return cls()

    def current_turn(self) -> Mark:
        return self.player_turn

    def mark_at(self, position: SquarePosition) -> Optional[Mark]:
        return self.squares[position.index].mark

    def occupied_count(self) -> int:
        return sum(1 for square in self.squares if not square.is_empty())

    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def make_move(self, position: SquarePosition) -> Status:
        """
        Place the mark of the player to move on the given square.
        ----

        1. place the mark (raises SquareAlreadyTaken and leaves the board untouched if the square is occupied)
        2. count the turn and hand it to the opponent
        3. re-evaluate the outcome

        Returns the status of the round after the move.
        """
        if self.is_over():
            raise GameStateError(f"Round is already over. status: {self.status}")

        mark = self.player_turn
        self.squares[position.index].place(mark)

        self.turn_count += 1
        self.moves.append(position)
        self.player_turn = mark.opponent()

        self._update_status(mark)
        return self.status

    def to_model(self) -> RoundModel:
        """Encode into the format the Service layer uses"""
        return RoundModel(
            squares="".join(
                square.to_char(EMPTY_CHAR_MODEL) for square in self.squares
            ),
            moves=[position.number for position in self.moves],
            status=self.status.value,
            winner=self.winner.value if self.winner else None,
        )

    def render(self) -> str:
        """Fixed width text grid, one line per row with separators in between."""
        return f"\n{ROW_SEPARATOR}\n".join(
            self._row_to_text(row) for row in range(GRID_SIZE)
        )

    def __str__(self) -> str:
        return self.render()

    # -- PRIVATE HELPERS ---
    def _row_to_text(self, row: int) -> str:
        """ex) ' X | O |   '"""
        cells = self.squares[row * GRID_SIZE : (row + 1) * GRID_SIZE]
        return " " + " | ".join(square.to_char() for square in cells) + " "

    def _update_status(self, mark_that_moved: Mark) -> None:
        """NOTE a winning line on the ninth move is a win, so the line check must come before the draw check."""
        if self._has_winner():
            self.status = Status.COMPLETE
            self.winner = mark_that_moved
        elif self.turn_count == NUM_SQUARES:
            self.status = Status.DRAW

    def _has_winner(self) -> bool:
        return any(self._has_winner_in(line) for line in WINNING_LINES)

    def _has_winner_in(self, line: Line) -> bool:
        marks = [self.mark_at(position) for position in line]
        if None in marks:
            return False
        return marks[0] == marks[1] == marks[2]
