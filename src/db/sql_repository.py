"""Implementation of (Round)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.core.models import RoundModel
from src.db.schema import DBRound


class SQLRoundRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add_round(self, round_model: RoundModel) -> UUID:
        """Store a finished round and return its newly created ID."""
        new_id = uuid4()
        round_db = DBRound(
            id=new_id,
            round_number=self._count_rounds() + 1,
            squares=round_model.squares,
            moves=list(round_model.moves),
            status=round_model.status,
            winner=round_model.winner,
        )
        self.db.add(round_db)
        self.db.commit()
        return new_id

    def list_rounds(self) -> list[RoundModel]:
        query = select(DBRound).order_by(DBRound.round_number)
        return [self._to_model(round_db) for round_db in self.db.scalars(query)]

    def _count_rounds(self) -> int:
        return self.db.scalar(select(func.count()).select_from(DBRound)) or 0

    def _to_model(self, round_db: DBRound) -> RoundModel:
        """Convert SQLAlchemy model to data transfer model."""
        return RoundModel(
            squares=round_db.squares,
            moves=list(round_db.moves),
            status=round_db.status,
            winner=round_db.winner,
        )
