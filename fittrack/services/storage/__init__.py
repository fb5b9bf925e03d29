"""
Storage module - key-value persistence with in-memory fallback.

Components:
- KeyValueBackend: backend interface
- MemoryBackend / SQLiteBackend: concrete backends
- StorageAdapter: no-throw facade choosing between them
"""
from fittrack.services.storage.backends import (
    KeyValueBackend,
    MemoryBackend,
    SQLiteBackend,
)
from fittrack.services.storage.adapter import (
    StorageAdapter,
    StorageEvent,
    StorageEventKind,
    StorageListener,
)

__all__ = [
    "KeyValueBackend",
    "MemoryBackend",
    "SQLiteBackend",
    "StorageAdapter",
    "StorageEvent",
    "StorageEventKind",
    "StorageListener",
]
