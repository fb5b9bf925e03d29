"""
Key-value backends behind the StorageAdapter.

- MemoryBackend: process-local dict, never fails
- SQLiteBackend: durable SQLite file via SQLAlchemy
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Generator, Optional

from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fittrack.core.database import create_db_engine, create_session_factory, init_db
from fittrack.core.exceptions import StorageBackendError
from fittrack.core.logging import get_logger
from fittrack.models.kv import KeyValueItem

logger = get_logger(__name__)


class KeyValueBackend(ABC):
    """Abstract string-to-string store."""

    name: str = "unknown"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None. An empty string is a value."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class MemoryBackend(KeyValueBackend):
    """In-memory mapping. Used as the fallback store."""

    name = "memory"

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


class SQLiteBackend(KeyValueBackend):
    """
    Durable backend storing each key as a row of the kv_store table.

    The engine and schema are set up on first use so that an unusable
    database path surfaces as a StorageBackendError from the first
    operation rather than from the constructor.
    """

    name = "sqlite"

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._engine: Optional[Engine] = None
        self._session_factory = None

    def _ensure_ready(self) -> None:
        if self._engine is not None:
            return
        engine = create_db_engine(self.database_url)
        init_db(engine)
        self._session_factory = create_session_factory(engine)
        self._engine = engine
        logger.info("SQLite storage ready", url=self.database_url)

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        try:
            self._ensure_ready()
            with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            raise StorageBackendError(f"{type(e).__name__}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        with self._session() as session:
            item = session.get(KeyValueItem, key)
            return item.value if item is not None else None

    def set(self, key: str, value: str) -> None:
        with self._session() as session:
            session.merge(KeyValueItem(key=key, value=value))
            session.commit()

    def remove(self, key: str) -> None:
        with self._session() as session:
            session.execute(delete(KeyValueItem).where(KeyValueItem.key == key))
            session.commit()

    def clear(self) -> None:
        with self._session() as session:
            session.execute(delete(KeyValueItem))
            session.commit()

    def dispose(self) -> None:
        """Release pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
