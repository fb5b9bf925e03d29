"""
Backup module - JSON export and merge-on-import.
"""
from fittrack.services.backup.service import (
    BACKUP_VERSION,
    BackupData,
    BackupFile,
    BackupService,
    ImportResult,
)

__all__ = [
    "BACKUP_VERSION",
    "BackupData",
    "BackupFile",
    "BackupService",
    "ImportResult",
]
