"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite (for local runs without Docker).
Sync usage; one session per save.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from quizgen.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    is_sqlite = "sqlite" in database_url
    return create_engine(
        database_url,
        pool_pre_ping=not is_sqlite,
        connect_args={"check_same_thread": False} if is_sqlite else {},
        echo=False,  # Set True for SQL logging during development
    )


engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None) -> None:
    """Create tables if missing. Call once at app startup."""
    from quizgen.models import quiz  # noqa: F401  (register models with Base)
    Base.metadata.create_all(bind=bind or engine)
