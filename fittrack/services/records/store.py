"""
Record Store - the weight and workout collections as persisted JSON.

Each collection lives under its own key as a JSON array. Every mutation
reads the collection, changes it and writes the whole collection back.
"""
import datetime as dt
import math
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from fittrack.core.config import settings
from fittrack.core.exceptions import CorruptDataError, EntryNotFoundError
from fittrack.core.logging import get_logger
from fittrack.models import Exercise, WeightEntry, WorkoutEntry, WorkoutType
from fittrack.services.analytics.series import sort_by_date
from fittrack.services.storage import StorageAdapter

logger = get_logger(__name__)

WEIGHT_KEY = "weightData"
WORKOUT_KEY = "workoutData"

weight_list_adapter = TypeAdapter(List[WeightEntry])
workout_list_adapter = TypeAdapter(List[WorkoutEntry])


class RecordStore:
    """
    Load, save and mutate the two record collections.

    Usage:
        store = RecordStore(storage)
        entry = store.add_weight(80.5, date(2024, 1, 1))
        weights = store.load_weights()
    """

    def __init__(self, storage: StorageAdapter, corrupt_policy: Optional[str] = None):
        """
        Args:
            storage: Storage adapter holding the JSON blobs
            corrupt_policy: "reset" or "raise", defaults to CORRUPT_DATA_POLICY
        """
        self.storage = storage
        self.corrupt_policy = corrupt_policy or settings.CORRUPT_DATA_POLICY

    # ========================================
    # Raw collections
    # ========================================

    def _load(self, key: str, adapter: TypeAdapter) -> list:
        raw = self.storage.get(key)
        if raw is None:
            return []

        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            if self.corrupt_policy == "raise":
                raise CorruptDataError(key, f"{e.error_count()} validation errors") from e
            logger.error(
                "Stored collection is corrupt, treating it as empty",
                key=key,
                error_count=e.error_count()
            )
            return []

    def _save(self, key: str, adapter: TypeAdapter, entries: list) -> None:
        self.storage.set(key, adapter.dump_json(entries).decode("utf-8"))
        logger.debug("Saved collection", key=key, count=len(entries))

    def load_weights(self) -> List[WeightEntry]:
        return self._load(WEIGHT_KEY, weight_list_adapter)

    def load_workouts(self) -> List[WorkoutEntry]:
        return self._load(WORKOUT_KEY, workout_list_adapter)

    def save_weights(self, entries: List[WeightEntry]) -> None:
        self._save(WEIGHT_KEY, weight_list_adapter, entries)

    def save_workouts(self, entries: List[WorkoutEntry]) -> None:
        self._save(WORKOUT_KEY, workout_list_adapter, entries)

    # ========================================
    # Weight entries
    # ========================================

    def add_weight(
        self,
        weight: float,
        date: dt.date,
        notes: Optional[str] = None
    ) -> WeightEntry:
        entry = WeightEntry.create(weight=weight, date=date, notes=notes)
        updated = sort_by_date([*self.load_weights(), entry], descending=True)
        self.save_weights(updated)

        logger.info("Weight entry added", entry_id=entry.id, count=len(updated))
        return entry

    def update_weight(
        self,
        entry_id: str,
        weight: float,
        notes: Optional[str] = None
    ) -> WeightEntry:
        """
        Change the weight and notes of an existing entry.

        Raises:
            EntryNotFoundError: If no entry has this id
            ValueError: If the weight is not a positive finite number
        """
        if weight is None or not math.isfinite(weight) or weight <= 0:
            raise ValueError("Weight must be a positive number")

        entries = self.load_weights()
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                updated = entry.model_copy(update={"weight": weight, "notes": notes or ""})
                entries[index] = updated
                self.save_weights(entries)
                logger.info("Weight entry updated", entry_id=entry_id)
                return updated

        raise EntryNotFoundError("weight", entry_id)

    def delete_weight(self, entry_id: str) -> None:
        entries = self.load_weights()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            raise EntryNotFoundError("weight", entry_id)

        self.save_weights(remaining)
        logger.info("Weight entry deleted", entry_id=entry_id)

    # ========================================
    # Workout entries
    # ========================================

    def add_workout(
        self,
        workout_type: WorkoutType,
        date: dt.date,
        exercises: Iterable[Exercise],
        duration: Optional[int] = None,
        notes: Optional[str] = None
    ) -> WorkoutEntry:
        workout = WorkoutEntry.create(
            workout_type=workout_type,
            date=date,
            exercises=exercises,
            duration=duration,
            notes=notes,
        )
        updated = sort_by_date([workout, *self.load_workouts()], descending=True)
        self.save_workouts(updated)

        logger.info(
            "Workout added",
            entry_id=workout.id,
            type=workout.type,
            exercises=len(workout.exercises)
        )
        return workout

    def replace_workout(self, workout: WorkoutEntry) -> WorkoutEntry:
        """
        Replace a saved workout with a full new version of it.

        Raises:
            EntryNotFoundError: If no workout has this id
        """
        workouts = self.load_workouts()
        for index, existing in enumerate(workouts):
            if existing.id == workout.id:
                workouts[index] = workout
                self.save_workouts(sort_by_date(workouts, descending=True))
                logger.info("Workout replaced", entry_id=workout.id)
                return workout

        raise EntryNotFoundError("workout", workout.id)

    def delete_workout(self, entry_id: str) -> None:
        workouts = self.load_workouts()
        remaining = [workout for workout in workouts if workout.id != entry_id]
        if len(remaining) == len(workouts):
            raise EntryNotFoundError("workout", entry_id)

        self.save_workouts(remaining)
        logger.info("Workout deleted", entry_id=entry_id)

    # ========================================
    # Whole store
    # ========================================

    def clear_all(self) -> None:
        """Delete both collections."""
        self.storage.remove(WEIGHT_KEY)
        self.storage.remove(WORKOUT_KEY)
        logger.info("All data cleared")

    def data_size_kb(self) -> float:
        """Size of both stored collections in KB, two decimals."""
        size = sum(
            len((self.storage.get(key) or "[]").encode("utf-8"))
            for key in (WEIGHT_KEY, WORKOUT_KEY)
        )
        return round(size / 1024, 2)
