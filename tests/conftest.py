"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.tictactoe.board import Board
from src.tictactoe.position import SquarePosition

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# X takes the top row on its third move, O never lines up
X_WINS_TOP_ROW = [1, 4, 2, 9, 3]
# X O X / X O O / O X X : full grid, no three in a row anywhere
DRAW_SEQUENCE = [1, 2, 3, 5, 4, 6, 8, 7, 9]
# Ninth move completes the left column for X while filling the grid
X_WINS_ON_LAST_MOVE = [1, 2, 3, 5, 4, 6, 8, 9, 7]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def play_moves() -> Callable[[list[int]], Board]:
    """Call the inner function with 1-based square numbers to get a fresh board with those moves made."""

    def _play(numbers: list[int]) -> Board:
        board = Board.new()
        for number in numbers:
            board.make_move(SquarePosition.from_index(number))
        return board

    return _play
