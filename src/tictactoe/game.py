"""
The Game drives rounds of tic-tac-toe.
It owns exactly one Board at a time and talks to the outside world only through the collaborators it is given
(where the moves come from, where the output goes, and who gets told about finished rounds).
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from src.core.exceptions import SquareAlreadyTaken
from src.core.models import RoundModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.position import SquarePosition

logger = logging.getLogger(__name__)

RoundRecorder = Callable[[RoundModel], object]


class MoveSource(Protocol):
    """Produces a square for the player to move. Malformed input must be filtered out before returning."""

    def next_position(self, mark: Mark) -> SquarePosition: ...


class Display(Protocol):
    """Output sink for everything the players get to see."""

    def show_board(self, board: Board) -> None: ...

    def show_message(self, message: str) -> None: ...


def outcome_message(board: Board) -> str:
    if board.status == Status.COMPLETE:
        return f'Player "{board.winner}" wins!'
    if board.status == Status.DRAW:
        return "It's a draw!"
    return f'Player "{board.current_turn()}" to move!'


@dataclass
class Game:
    move_source: MoveSource
    display: Display
    play_again: Callable[[], bool]
    record_round: Optional[RoundRecorder] = None
    board: Board = field(default_factory=Board.new)
    rounds_played: int = 0

    def run(self) -> None:
        """Keep playing rounds until the players decline another one."""
        while True:
            self.play_round()
            if not self.play_again():
                logger.debug("Stopping after %d round(s)", self.rounds_played)
                break

    def play_round(self) -> RoundModel:
        """
        One round, from an empty grid until somebody wins or the grid is full.
        ----

        A square that is already taken is reported back and the same player is asked again.
        """
        self.board = Board.new()
        status = Status.IN_PROGRESS

        while status == Status.IN_PROGRESS:
            self.display.show_board(self.board)
            mark = self.board.current_turn()
            position = self.move_source.next_position(mark)
            try:
                status = self.board.make_move(position)
            except SquareAlreadyTaken as err:
                logger.debug("%s tried occupied square %s", mark, position.label)
                self.display.show_message(str(err))

        self.display.show_board(self.board)
        self.display.show_message(outcome_message(self.board))
        return self._finish_round()

    # -- PRIVATE HELPERS ---
    def _finish_round(self) -> RoundModel:
        self.rounds_played += 1
        round_model = self.board.to_model()
        logger.info(
            "Round %d finished: %s (moves: %s)",
            self.rounds_played,
            round_model.status,
            round_model.moves,
        )
        if self.record_round is not None:
            self.record_round(round_model)
        return round_model
