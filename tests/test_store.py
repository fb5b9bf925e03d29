"""
Record store tests.
"""
import json
from datetime import date

import pytest

from fittrack.core.exceptions import CorruptDataError, EntryNotFoundError
from fittrack.models import Exercise, WorkoutSet, WorkoutType
from fittrack.services.analytics import weight_summary
from fittrack.services.records import WEIGHT_KEY, WORKOUT_KEY, RecordStore


class TestWeights:
    def test_add_to_empty_collection(self, store, storage):
        storage.set(WEIGHT_KEY, "[]")
        store.add_weight(80.5, date(2024, 1, 1))

        weights = store.load_weights()
        summary = weight_summary(weights)
        assert len(weights) == 1
        assert (summary.latest, summary.minimum, summary.maximum) == (80.5, 80.5, 80.5)

    def test_missing_key_loads_empty(self, store):
        assert store.load_weights() == []
        assert store.load_workouts() == []

    def test_kept_newest_first(self, store):
        store.add_weight(80, date(2024, 1, 1))
        store.add_weight(81, date(2024, 1, 5))
        store.add_weight(82, date(2024, 1, 3))
        assert [e.weight for e in store.load_weights()] == [81, 82, 80]

    def test_stored_as_json_array(self, store, storage):
        entry = store.add_weight(80, date(2024, 1, 1), notes="after run")
        stored = json.loads(storage.get(WEIGHT_KEY))
        assert stored[0]["id"] == entry.id
        assert stored[0]["notes"] == "after run"
        assert stored[0]["date"] == "2024-01-01"

    def test_update(self, store):
        entry = store.add_weight(80, date(2024, 1, 1))
        store.update_weight(entry.id, 79.2, "new scale")

        updated = store.load_weights()[0]
        assert updated.weight == 79.2
        assert updated.notes == "new scale"
        assert updated.date == date(2024, 1, 1)

    def test_update_rejects_non_positive(self, store):
        entry = store.add_weight(80, date(2024, 1, 1))
        with pytest.raises(ValueError):
            store.update_weight(entry.id, 0)

    def test_update_unknown_id(self, store):
        with pytest.raises(EntryNotFoundError):
            store.update_weight("nope", 80)

    def test_delete(self, store):
        keep = store.add_weight(80, date(2024, 1, 1))
        drop = store.add_weight(81, date(2024, 1, 2))
        store.delete_weight(drop.id)
        assert [e.id for e in store.load_weights()] == [keep.id]

    def test_delete_unknown_id(self, store):
        with pytest.raises(EntryNotFoundError):
            store.delete_weight("nope")


class TestWorkouts:
    def add(self, store, day, workout_type=WorkoutType.GYM):
        return store.add_workout(
            workout_type,
            day,
            [Exercise.create("Squat", [WorkoutSet(reps=5, weight=100)])],
            duration=45,
        )

    def test_add_and_load(self, store):
        workout = self.add(store, date(2024, 1, 1))
        loaded = store.load_workouts()
        assert loaded == [workout]
        assert loaded[0].exercises[0].sets[0].weight == 100

    def test_kept_newest_first(self, store):
        self.add(store, date(2024, 1, 1))
        self.add(store, date(2024, 1, 3))
        self.add(store, date(2024, 1, 2))
        assert [w.date.day for w in store.load_workouts()] == [3, 2, 1]

    def test_replace(self, store):
        workout = self.add(store, date(2024, 1, 1))
        edited = workout.model_copy(update={"duration": 60, "notes": "longer"})

        store.replace_workout(edited)

        loaded = store.load_workouts()
        assert len(loaded) == 1
        assert loaded[0].duration == 60
        assert loaded[0].notes == "longer"

    def test_replace_unknown_id(self, store):
        workout = self.add(store, date(2024, 1, 1))
        with pytest.raises(EntryNotFoundError):
            store.replace_workout(workout.model_copy(update={"id": "other"}))

    def test_delete(self, store):
        workout = self.add(store, date(2024, 1, 1))
        store.delete_workout(workout.id)
        assert store.load_workouts() == []

    def test_delete_unknown_id(self, store):
        with pytest.raises(EntryNotFoundError):
            store.delete_workout("nope")


class TestWholeStore:
    def test_clear_all(self, store, storage):
        store.add_weight(80, date(2024, 1, 1))
        storage.set("otherKey", "kept")

        store.clear_all()

        assert storage.get(WEIGHT_KEY) is None
        assert storage.get(WORKOUT_KEY) is None
        assert storage.get("otherKey") == "kept"

    def test_data_size_empty(self, store):
        # Two empty arrays: "[]" + "[]"
        assert store.data_size_kb() == round(4 / 1024, 2)

    def test_data_size_grows(self, store):
        before = store.data_size_kb()
        for day in range(1, 28):
            store.add_weight(80, date(2024, 1, day), notes="x" * 40)
        assert store.data_size_kb() > before


class TestCorruptData:
    def test_reset_policy_returns_empty(self, storage):
        storage.set(WEIGHT_KEY, "{not json")
        store = RecordStore(storage, corrupt_policy="reset")
        assert store.load_weights() == []

    def test_reset_policy_on_wrong_shape(self, storage):
        storage.set(WORKOUT_KEY, '{"id": "1"}')
        store = RecordStore(storage, corrupt_policy="reset")
        assert store.load_workouts() == []

    def test_raise_policy(self, storage):
        storage.set(WEIGHT_KEY, "{not json")
        store = RecordStore(storage, corrupt_policy="raise")
        with pytest.raises(CorruptDataError) as exc_info:
            store.load_weights()
        assert exc_info.value.key == WEIGHT_KEY
