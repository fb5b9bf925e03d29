"""
HTTP API tests.
"""
import json

import pytest
from fastapi.testclient import TestClient

from conftest import TODAY, days_ago

from fittrack.main import create_app
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.storage import MemoryBackend, StorageAdapter


@pytest.fixture
def client():
    app = create_app(
        storage=StorageAdapter(MemoryBackend()),
        calculator=AnalyticsCalculator(frequency_days=30, rollup_weeks=8, recent_days=7, clock=lambda: TODAY),
    )
    with TestClient(app) as test_client:
        yield test_client


def workout_payload(day=None, workout_type="gym"):
    return {
        "type": workout_type,
        "date": day or days_ago(1),
        "duration": 45,
        "notes": "",
        "exercises": [
            {"name": "Bench Press", "sets": [{"reps": 8, "weight": 60}, {"reps": 8, "weight": 60}]},
            {"name": "", "sets": []},
        ],
    }


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestWeightsApi:
    def test_create_and_list(self, client):
        response = client.post("/api/weights", json={"weight": 80.5, "date": "2024-01-01"})
        assert response.status_code == 200
        created = response.json()
        assert created["weight"] == 80.5

        listed = client.get("/api/weights").json()
        assert [e["id"] for e in listed] == [created["id"]]

    def test_rejects_non_positive_weight(self, client):
        response = client.post("/api/weights", json={"weight": 0, "date": "2024-01-01"})
        assert response.status_code == 422

    @pytest.mark.parametrize("number", ["1e309", "NaN", "Infinity"])
    def test_rejects_non_finite_weight(self, client, number):
        entry = client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"}).json()
        headers = {"Content-Type": "application/json"}

        created = client.post(
            "/api/weights",
            content='{"weight": ' + number + ', "date": "2024-01-02"}',
            headers=headers,
        )
        updated = client.put(
            f"/api/weights/{entry['id']}",
            content='{"weight": ' + number + '}',
            headers=headers,
        )

        assert created.status_code == 422
        assert updated.status_code == 422
        assert [e["weight"] for e in client.get("/api/weights").json()] == [80]

    def test_update_and_delete(self, client):
        entry = client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"}).json()

        updated = client.put(f"/api/weights/{entry['id']}", json={"weight": 79, "notes": "edit"})
        assert updated.status_code == 200
        assert updated.json()["weight"] == 79

        assert client.delete(f"/api/weights/{entry['id']}").status_code == 200
        assert client.get("/api/weights").json() == []

    def test_unknown_id(self, client):
        assert client.put("/api/weights/nope", json={"weight": 79}).status_code == 404
        assert client.delete("/api/weights/nope").status_code == 404

    def test_history(self, client):
        client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"})
        client.post("/api/weights", json={"weight": 81, "date": "2024-01-02"})

        history = client.get("/api/weights/history").json()
        assert history[0]["change"] == 1
        assert history[1]["change"] is None


class TestWorkoutsApi:
    def test_create_drops_blank_exercises(self, client):
        response = client.post("/api/workouts", json=workout_payload())
        assert response.status_code == 200
        workout = response.json()
        assert [ex["name"] for ex in workout["exercises"]] == ["Bench Press"]
        assert len(workout["exercises"][0]["sets"]) == 2

    def test_create_without_exercises(self, client):
        payload = workout_payload()
        payload["exercises"] = [{"name": " ", "sets": []}]
        assert client.post("/api/workouts", json=payload).status_code == 400

    def test_unknown_type_rejected(self, client):
        assert client.post("/api/workouts", json=workout_payload(workout_type="yoga")).status_code == 422

    def test_rejects_non_finite_set_weight(self, client):
        body = json.dumps(workout_payload()).replace('"weight": 60', '"weight": 1e309', 1)
        response = client.post("/api/workouts", content=body, headers={"Content-Type": "application/json"})
        assert response.status_code == 422
        assert client.get("/api/workouts").json() == []

    def test_replace(self, client):
        workout = client.post("/api/workouts", json=workout_payload()).json()

        payload = workout_payload(workout_type="home")
        response = client.put(f"/api/workouts/{workout['id']}", json=payload)

        assert response.status_code == 200
        replaced = response.json()
        assert replaced["id"] == workout["id"]
        assert replaced["type"] == "home"
        assert replaced["exercises"][0]["sets"][0]["weight"] is None
        assert len(client.get("/api/workouts").json()) == 1

    def test_replace_unknown(self, client):
        assert client.put("/api/workouts/nope", json=workout_payload()).status_code == 404

    def test_delete(self, client):
        workout = client.post("/api/workouts", json=workout_payload()).json()
        assert client.delete(f"/api/workouts/{workout['id']}").status_code == 200
        assert client.delete(f"/api/workouts/{workout['id']}").status_code == 404

    def test_types_and_suggestions(self, client):
        types = client.get("/api/workouts/types").json()
        assert [t["type"] for t in types] == ["gym", "home", "kettlebell"]
        assert types[1]["label"] == "Home Workout"

        suggestions = client.get("/api/workouts/types/home/exercises").json()
        assert "Push-ups" in suggestions
        assert client.get("/api/workouts/types/yoga/exercises").status_code == 422


class TestAnalyticsApi:
    def test_dashboard(self, client):
        client.post("/api/weights", json={"weight": 80.5, "date": days_ago(0)})
        client.post("/api/workouts", json=workout_payload(day=days_ago(2)))

        dashboard = client.get("/api/analytics/dashboard").json()

        assert dashboard["weight"]["latest"] == 80.5
        assert dashboard["workouts"]["total"] == 1
        assert dashboard["workouts"]["this_week"] == 1
        assert dashboard["workouts"]["average_duration"] == 45
        assert len(dashboard["recent_activity"]) == 2

    def test_empty_dashboard(self, client):
        dashboard = client.get("/api/analytics/dashboard").json()
        assert dashboard["weight"]["latest"] is None
        assert dashboard["workouts"]["average_duration"] == 0

    def test_frequency(self, client):
        client.post("/api/workouts", json=workout_payload(day=days_ago(0)))

        buckets = client.get("/api/analytics/frequency").json()
        assert len(buckets) == 30
        assert buckets[-1]["workouts"] == 1
        assert buckets[-1]["date"] == TODAY.isoformat()

        assert len(client.get("/api/analytics/frequency", params={"days": 7}).json()) == 7
        assert client.get("/api/analytics/frequency", params={"days": 0}).status_code == 422

    def test_types_weekly_series(self, client):
        client.post("/api/workouts", json=workout_payload(day=days_ago(0)))
        client.post("/api/workouts", json=workout_payload(day=days_ago(1), workout_type="kettlebell"))
        client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"})

        types = client.get("/api/analytics/types").json()
        assert [(t["type"], t["value"]) for t in types] == [("gym", 1), ("kettlebell", 1)]

        weekly = client.get("/api/analytics/weekly").json()
        assert weekly[-1]["workouts"] == 2

        series = client.get("/api/analytics/weight-series").json()
        assert series == [{"date": "2024-01-01", "weight": 80.0, "label": "Jan 1"}]

        recent = client.get("/api/analytics/recent").json()
        assert len(recent) == 3


class TestBackupApi:
    def test_export_download(self, client):
        client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"})

        response = client.get("/api/backup/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert "fitness-tracker-backup-" in response.headers["content-disposition"]
        assert len(response.json()["data"]["weightData"]) == 1

    def test_import_merges(self, client):
        client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"})
        backup = client.get("/api/backup/export").text
        payload = json.loads(backup)
        payload["data"]["weightData"].append({"id": "imported", "weight": 70, "date": "2024-02-01"})

        response = client.post("/api/backup/import", content=json.dumps(payload))

        assert response.status_code == 200
        assert response.json()["weightEntries"] == 2
        assert response.json()["message"] == "Data imported successfully!"

    def test_import_rejects_bad_files(self, client):
        not_json = client.post("/api/backup/import", content="nope")
        assert not_json.status_code == 400
        assert "check the file format" in not_json.json()["detail"]

        wrong_shape = client.post("/api/backup/import", content=json.dumps({"data": {}}))
        assert wrong_shape.status_code == 400
        assert "Invalid file format" in wrong_shape.json()["detail"]

    def test_profile_and_clear(self, client):
        client.post("/api/weights", json={"weight": 80, "date": "2024-01-01"})
        client.post("/api/workouts", json=workout_payload())

        profile = client.get("/api/backup/profile").json()
        assert profile["weightEntries"] == 1
        assert profile["totalWorkouts"] == 1
        assert profile["dataSizeKb"] > 0
        assert profile["storageBackend"] == "memory"

        assert client.delete("/api/backup/data").status_code == 200
        profile = client.get("/api/backup/profile").json()
        assert profile["weightEntries"] == 0
        assert profile["totalWorkouts"] == 0
