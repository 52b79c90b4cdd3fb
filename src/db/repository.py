"""Protocol repository (the SQLAlchemy version lives in sql_repository.py, tests use a dictionary)"""

from typing import Protocol
from uuid import UUID

from src.core.models import RoundModel


class RoundRepository(Protocol):
    """Persistence layer orchestration"""

    def add_round(self, round_model: RoundModel) -> UUID:
        """Store a finished round and return its newly created ID."""
        ...

    def list_rounds(self) -> list[RoundModel]:
        """All rounds in the order they were played."""
        ...
