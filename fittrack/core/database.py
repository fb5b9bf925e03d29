"""
Database engine setup for the local SQLite key-value store.
"""
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from fittrack.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""
    pass


def create_db_engine(database_url: str) -> Engine:
    """
    Create a synchronous engine, making sure the SQLite directory exists.

    The data directory is created owner-only (0700) since it holds
    personal health data.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        db_dir = os.path.dirname(os.path.abspath(url.database))
        os.makedirs(db_dir, mode=0o700, exist_ok=True)

    return create_engine(database_url)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to the given engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables if they do not exist."""
    # Import models so they register on Base.metadata
    from fittrack.models import kv  # noqa: F401

    Base.metadata.create_all(engine)
    logger.debug("Database tables ensured", url=str(engine.url))
