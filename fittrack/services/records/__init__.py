from fittrack.services.records.store import WEIGHT_KEY, WORKOUT_KEY, RecordStore

__all__ = [
    "RecordStore",
    "WEIGHT_KEY",
    "WORKOUT_KEY",
]
