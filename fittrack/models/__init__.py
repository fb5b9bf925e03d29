from fittrack.models.kv import KeyValueItem
from fittrack.models.weight import WeightEntry, new_entry_id
from fittrack.models.workout import (
    EXERCISE_SUGGESTIONS,
    WORKOUT_TYPE_LABELS,
    Exercise,
    WorkoutEntry,
    WorkoutSet,
    WorkoutType,
)

__all__ = [
    "KeyValueItem",
    "WeightEntry",
    "WorkoutEntry",
    "Exercise",
    "WorkoutSet",
    "WorkoutType",
    "WORKOUT_TYPE_LABELS",
    "EXERCISE_SUGGESTIONS",
    "new_entry_id",
]
