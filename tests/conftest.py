from datetime import date, timedelta

import pytest

from fittrack.models import WeightEntry, WorkoutEntry
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.records import RecordStore
from fittrack.services.storage import MemoryBackend, StorageAdapter

TODAY = date(2024, 3, 15)  # a Friday


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def storage():
    return StorageAdapter(MemoryBackend())


@pytest.fixture
def store(storage):
    return RecordStore(storage, corrupt_policy="reset")


@pytest.fixture
def calculator():
    return AnalyticsCalculator(frequency_days=30, rollup_weeks=8, recent_days=7, clock=lambda: TODAY)


@pytest.fixture
def make_weight():
    def _make(entry_id, weight, day, notes=""):
        return WeightEntry.model_validate({
            "id": entry_id,
            "weight": weight,
            "date": day,
            "notes": notes,
            "timestamp": "2024-01-01T08:00:00.000Z",
        })
    return _make


@pytest.fixture
def make_workout():
    def _make(entry_id, workout_type, day, duration=0, exercises=1):
        return WorkoutEntry.model_validate({
            "id": entry_id,
            "type": workout_type,
            "date": day,
            "duration": duration,
            "notes": "",
            "exercises": [
                {"id": f"{entry_id}-ex{i}", "name": f"Exercise {i}", "sets": [{"reps": 10, "weight": 20}]}
                for i in range(exercises)
            ],
            "timestamp": "2024-01-01T08:00:00.000Z",
        })
    return _make


def days_ago(n: int) -> str:
    return (TODAY - timedelta(days=n)).isoformat()
