"""Custom exceptions. Everything raised on purpose by this project derives from TicTacToeError."""


class TicTacToeError(Exception):
    """Top-level exception for the game."""


class SquareAlreadyTaken(TicTacToeError):
    """A mark was placed on a square that already holds one. Recoverable: ask for another square."""

    def __init__(self, message: str = "Square already taken!") -> None:
        super().__init__(message)


class InvalidSquareError(TicTacToeError):
    """Input could not be interpreted as one of the squares 1-9."""


class GameStateError(TicTacToeError):
    """Operation not allowed given the current state of the round."""


class InputClosedError(TicTacToeError):
    """The input stream ran dry while waiting for a player."""
