"""
Backup Service - export all data to a JSON backup and merge one back in.

Backup format:
    {
      "version": "1.0",
      "exportDate": "<ISO 8601 instant>",
      "data": {"weightData": [...], "workoutData": [...]}
    }
"""
import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from fittrack.core.exceptions import BackupFormatError, BackupParseError
from fittrack.core.logging import get_logger
from fittrack.models import WeightEntry, WorkoutEntry
from fittrack.models.weight import utc_now
from fittrack.services.analytics.merge import merge_by_id
from fittrack.services.records import RecordStore

logger = get_logger(__name__)

BACKUP_VERSION = "1.0"


class BackupData(BaseModel):
    """Both collections as stored."""
    weightData: List[WeightEntry] = Field(..., description="Weight entries")
    workoutData: List[WorkoutEntry] = Field(..., description="Workout entries")


class BackupFile(BaseModel):
    """Backup file envelope."""
    version: str = BACKUP_VERSION
    exportDate: datetime
    data: BackupData


@dataclass
class ImportResult:
    """Outcome of a successful import."""
    imported_weights: int
    imported_workouts: int
    weight_entries: int
    total_workouts: int
    data_size_kb: float


class BackupService:
    """
    Service for exporting and importing backup files.
    """

    def __init__(self, store: RecordStore, clock: Callable[[], datetime] = utc_now):
        self.store = store
        self._clock = clock

    def export_backup(self) -> BackupFile:
        """Snapshot of all stored data."""
        backup = BackupFile(
            version=BACKUP_VERSION,
            exportDate=self._clock(),
            data=BackupData(
                weightData=self.store.load_weights(),
                workoutData=self.store.load_workouts(),
            ),
        )

        logger.info(
            "Exported backup",
            weights=len(backup.data.weightData),
            workouts=len(backup.data.workoutData)
        )
        return backup

    def export_json(self) -> str:
        """Backup rendered as indented JSON text."""
        return self.export_backup().model_dump_json(indent=2)

    def backup_filename(self, today: Optional[date] = None) -> str:
        today = today or self._clock().date()
        return f"fitness-tracker-backup-{today.isoformat()}.json"

    def get_content_type(self) -> str:
        return "application/json"

    def parse_backup(self, text: Union[str, bytes]) -> BackupData:
        """
        Parse and validate backup file contents.

        Raises:
            BackupParseError: If the text is not JSON
            BackupFormatError: If data.weightData / data.workoutData are missing,
                not arrays, or contain invalid records
        """
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise BackupParseError("Error importing data. Please check the file format.") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if (
            not isinstance(data, dict)
            or not isinstance(data.get("weightData"), list)
            or not isinstance(data.get("workoutData"), list)
        ):
            raise BackupFormatError("Invalid file format. Please select a valid backup file.")

        try:
            return BackupData.model_validate(data)
        except ValidationError as e:
            logger.warning("Backup contains invalid records", error_count=e.error_count())
            raise BackupFormatError("Invalid file format. Please select a valid backup file.") from e

    def import_backup(self, text: Union[str, bytes]) -> ImportResult:
        """
        Merge a backup into the stored data.

        Existing entries win over imported ones with the same id. Nothing
        is written unless the whole file is valid.
        """
        incoming = self.parse_backup(text)

        weights = merge_by_id(self.store.load_weights(), incoming.weightData)
        workouts = merge_by_id(self.store.load_workouts(), incoming.workoutData)

        self.store.save_weights(weights)
        self.store.save_workouts(workouts)

        result = ImportResult(
            imported_weights=len(incoming.weightData),
            imported_workouts=len(incoming.workoutData),
            weight_entries=len(weights),
            total_workouts=len(workouts),
            data_size_kb=self.store.data_size_kb(),
        )

        logger.info(
            "Imported backup",
            imported_weights=result.imported_weights,
            imported_workouts=result.imported_workouts,
            weight_entries=result.weight_entries,
            total_workouts=result.total_workouts
        )
        return result
