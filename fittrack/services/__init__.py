"""
Services module - Application business logic layer.

Modules:
- storage: key-value persistence with in-memory fallback
- records: the weight and workout collections
- analytics: pure aggregation and merge functions
- backup: JSON export/import
"""
from fittrack.services.storage import StorageAdapter, SQLiteBackend, MemoryBackend
from fittrack.services.records import RecordStore
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.backup import BackupService

__all__ = [
    "StorageAdapter",
    "SQLiteBackend",
    "MemoryBackend",
    "RecordStore",
    "AnalyticsCalculator",
    "BackupService",
]
