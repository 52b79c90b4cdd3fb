"""Generate database sessions"""

from typing import Generator

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def create_db_engine(settings: Settings) -> Engine:
    """The in-memory SQLite database only exists on a single connection, hence the StaticPool."""
    engine = create_engine(
        settings.database_url,
        echo=settings.echo_sql,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return engine


def get_db(engine: Engine) -> Generator[Session, None, None]:
    session_factory = sessionmaker(bind=engine)
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
