"""
Storage Adapter - get/set/remove/clear over a durable backend with an
in-memory fallback.

Callers never see backend failures: a failed probe at construction
switches the adapter to the fallback for its lifetime, and a failure of
any single call is served by the fallback for that call only.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from fittrack.core.logging import get_logger
from fittrack.services.storage.backends import KeyValueBackend, MemoryBackend

logger = get_logger(__name__)


class StorageEventKind:
    """Kinds of fallback transitions."""
    PROBE_FAILED = "probe_failed"
    OPERATION_FAILED = "operation_failed"


@dataclass
class StorageEvent:
    """A fallback transition reported by the adapter."""
    kind: str
    operation: str
    backend: str
    error: str
    key: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


StorageListener = Callable[[StorageEvent], None]


class StorageAdapter:
    """
    Uniform key-value interface with transparent fallback.

    Usage:
        storage = StorageAdapter(SQLiteBackend(settings.get_database_url()))
        storage.set("weightData", "[]")
        storage.get("weightData")
    """

    PROBE_KEY = "__storage_test__"

    def __init__(
        self,
        backend: Optional[KeyValueBackend],
        fallback: Optional[MemoryBackend] = None,
        listeners: Iterable[StorageListener] = ()
    ):
        """
        Initialize the adapter and probe the durable backend.

        Args:
            backend: Durable backend, or None to run on the fallback only
            fallback: In-memory backend, created if not given
            listeners: Callables receiving StorageEvents
        """
        self._backend = backend
        self._fallback = fallback if fallback is not None else MemoryBackend()
        self._listeners: List[StorageListener] = list(listeners)
        self.durable_available = self._probe()

    @property
    def backend_name(self) -> str:
        """Name of the backend chosen at probe time."""
        if self.durable_available:
            return self._backend.name
        return self._fallback.name

    def add_listener(self, listener: StorageListener) -> None:
        self._listeners.append(listener)

    def _probe(self) -> bool:
        if self._backend is None:
            logger.warning("No durable storage configured, using fallback storage")
            return False

        try:
            self._backend.set(self.PROBE_KEY, self.PROBE_KEY)
            self._backend.remove(self.PROBE_KEY)
            return True
        except Exception as e:
            logger.warning(
                "Durable storage not available, using fallback storage",
                backend=self._backend.name,
                error=str(e)
            )
            self._emit(StorageEvent(
                kind=StorageEventKind.PROBE_FAILED,
                operation="probe",
                backend=self._backend.name,
                error=str(e),
            ))
            return False

    def _report(self, operation: str, key: Optional[str], error: Exception) -> None:
        logger.error(
            "Storage operation failed, serving from fallback",
            operation=operation,
            key=key,
            backend=self._backend.name,
            error=str(error)
        )
        self._emit(StorageEvent(
            kind=StorageEventKind.OPERATION_FAILED,
            operation=operation,
            backend=self._backend.name,
            error=str(error),
            key=key,
        ))

    def _emit(self, event: StorageEvent) -> None:
        for listener in self._listeners:
            try:
                listener(event)
            except Exception as e:
                logger.warning("Storage listener failed", kind=event.kind, error=str(e))

    def get(self, key: str) -> Optional[str]:
        """Value stored under key, or None if absent."""
        try:
            if self.durable_available:
                return self._backend.get(key)
            return self._fallback.get(key)
        except Exception as e:
            self._report("get", key, e)
            return self._fallback.get(key)

    def set(self, key: str, value: str) -> None:
        try:
            if self.durable_available:
                self._backend.set(key, value)
            else:
                self._fallback.set(key, value)
        except Exception as e:
            self._report("set", key, e)
            self._fallback.set(key, value)

    def remove(self, key: str) -> None:
        try:
            if self.durable_available:
                self._backend.remove(key)
            else:
                self._fallback.remove(key)
        except Exception as e:
            self._report("remove", key, e)
            self._fallback.remove(key)

    def clear(self) -> None:
        try:
            if self.durable_available:
                self._backend.clear()
            else:
                self._fallback.clear()
        except Exception as e:
            self._report("clear", None, e)
            self._fallback.clear()
