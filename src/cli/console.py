"""
Console front end: reads moves from a text stream, prints the board, and wires all layers together in main().
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.api.models import MoveInput, PlayAgainInput, ScoreboardResponse
from src.core.config import Settings
from src.core.exceptions import InputClosedError, InvalidSquareError
from src.core.models import RoundModel
from src.core.shared_types import Mark
from src.db.database import create_db_engine, get_db
from src.db.sql_repository import SQLRoundRepository
from src.services.scoreboard_service import ScoreboardService
from src.tictactoe.board import Board
from src.tictactoe.game import Game
from src.tictactoe.position import SquarePosition, legend

logger = logging.getLogger(__name__)

INVALID_SQUARE_MESSAGE = "\nChoose a valid square!\n"
PLAY_AGAIN_PROMPT = "Play again? (y/n)"


def read_line(stream: TextIO) -> str:
    """readline() returns an empty string only at EOF (a blank line still has its newline)"""
    line = stream.readline()
    if line == "":
        raise InputClosedError("Input stream closed.")
    return line


class ConsoleDisplay:
    def __init__(self, out: TextIO = sys.stdout) -> None:
        self.out = out

    def show_board(self, board: Board) -> None:
        print(f"\n{board.render()}\n", file=self.out)

    def show_message(self, message: str) -> None:
        print(message, file=self.out)

    def show_scoreboard(self, score: ScoreboardResponse) -> None:
        print(
            f"Rounds played: {score.rounds_played} | "
            f"X: {score.wins[Mark.X]} | O: {score.wins[Mark.O]} | draws: {score.draws}",
            file=self.out,
        )


class ConsoleMoveSource:
    """Asks the player to move until a line names one of the squares 1-9."""

    def __init__(self, stream: TextIO = sys.stdin, out: TextIO = sys.stdout) -> None:
        self.stream = stream
        self.out = out

    def next_position(self, mark: Mark) -> SquarePosition:
        print(f'Player "{mark}" to move!\n\n{legend()}\n', file=self.out)
        while True:
            line = read_line(self.stream)
            try:
                move = MoveInput(square=line)
            except InvalidSquareError as err:
                logger.debug("Rejected move input %r: %s", line, err)
                print(INVALID_SQUARE_MESSAGE, file=self.out)
                continue
            return move.to_position()


def ask_play_again(stream: TextIO = sys.stdin, out: TextIO = sys.stdout) -> bool:
    print(PLAY_AGAIN_PROMPT, file=out)
    return PlayAgainInput(answer=read_line(stream)).wants_another_round


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    parser = argparse.ArgumentParser(
        prog="tictactoe", description="Tic-tac-toe for two players at one keyboard."
    )
    parser.add_argument(
        "--scoreboard",
        action="store_true",
        help="print the session scoreboard after each round",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=list(logging.getLevelNamesMapping()),
        help="logging level (logs go to stderr)",
    )
    parser.add_argument(
        "--echo-sql", action="store_true", help="log the SQL sent to the scoreboard"
    )
    args = parser.parse_args(argv)
    return Settings(
        show_scoreboard=args.scoreboard,
        log_level=args.log_level,
        echo_sql=args.echo_sql,
    )


def run_game(
    settings: Settings, stream: TextIO = sys.stdin, out: TextIO = sys.stdout
) -> ScoreboardResponse:
    """Wire the layers together and play until the players stop. Returns the final score."""
    engine = create_db_engine(settings)
    sessions = get_db(engine)
    db = next(sessions)
    try:
        service = ScoreboardService(SQLRoundRepository(db))
        display = ConsoleDisplay(out)

        def record_round(round_model: RoundModel) -> None:
            service.record_round(round_model)
            if settings.show_scoreboard:
                display.show_scoreboard(service.scoreboard())

        game = Game(
            move_source=ConsoleMoveSource(stream, out),
            display=display,
            play_again=lambda: ask_play_again(stream, out),
            record_round=record_round,
        )
        try:
            game.run()
        except InputClosedError:
            logger.info("Input closed after %d round(s)", game.rounds_played)
        return service.scoreboard()
    finally:
        sessions.close()
        engine.dispose()


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_game(settings, sys.stdin, sys.stdout)
    return 0
