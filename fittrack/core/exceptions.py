"""
Exception hierarchy for FitTrack.
"""


class FitTrackError(Exception):
    """Base class for all FitTrack errors."""


class StorageBackendError(FitTrackError):
    """A durable key-value backend failed. Always absorbed by the StorageAdapter."""


class CorruptDataError(FitTrackError):
    """A persisted collection could not be decoded."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored data under '{key}' is corrupt: {reason}")


class EntryNotFoundError(FitTrackError):
    """No entry with the given id exists in the collection."""

    def __init__(self, kind: str, entry_id: str):
        self.kind = kind
        self.entry_id = entry_id
        super().__init__(f"{kind} entry '{entry_id}' not found")


class BackupImportError(FitTrackError):
    """A backup file could not be imported. Nothing was written."""


class BackupParseError(BackupImportError):
    """The backup file is not valid JSON."""


class BackupFormatError(BackupImportError):
    """The backup file is JSON but does not have the expected shape."""
