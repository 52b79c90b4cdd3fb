"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBRound(Base):
    __tablename__ = "rounds"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    squares: Mapped[str]
    moves: Mapped[list[int]] = mapped_column(JSON, default=list)
    round_number: Mapped[int]
    status: Mapped[str]
    winner: Mapped[Optional[str]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
