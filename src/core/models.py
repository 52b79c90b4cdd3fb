"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The domain layer produces them when a round ends, the db layer stores them, and the service tallies them.
(Decouples the SQLAlchemy schema and the Board internals from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make RoundModel easier to read
SquaresString = str
PositionNumber = int


@dataclass
class RoundModel:
    """Transport-safe representation of a round of tic-tac-toe."""

    squares: SquaresString
    moves: list[PositionNumber]
    status: str
    winner: Optional[str]
