"""Tests for the demo data loaded at startup."""
from fastapi.testclient import TestClient

from fittracker.main import create_app
from fittracker.seed import DEMO_EMAIL, DEMO_PASSWORD, seed_demo_data

from conftest import auth_headers, make_settings


def demo_login(client):
    response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()


class TestSeedData:
    """The demo account matches the original sample data."""

    def test_demo_account_can_log_in(self):
        """The demo user exists with its profile."""
        app = create_app(make_settings(seed_demo_data=True))

        with TestClient(app) as client:
            data = demo_login(client)

        assert data["user"] == {
            "id": 1,
            "email": DEMO_EMAIL,
            "name": "John Doe",
            "age": 28,
            "height": 175,
            "weight": 70,
            "fitnessGoal": "Build Muscle",
            "activityLevel": "Moderate",
        }

    def test_demo_dashboard(self):
        """Stats over the sample workouts and meals."""
        app = create_app(make_settings(seed_demo_data=True))

        with TestClient(app) as client:
            headers = auth_headers(demo_login(client)["token"])
            stats = client.get("/api/dashboard/stats", headers=headers).json()
            progress = client.get("/api/progress", headers=headers).json()

        assert stats["totalWorkouts"] == 2
        assert stats["totalCaloriesBurned"] == 770
        assert stats["totalCaloriesConsumed"] == 702
        assert stats["avgWorkoutDuration"] == 38  # 37.5 rounds up
        assert [w["name"] for w in stats["recentWorkouts"]] == ["Upper Body Strength", "Cardio Run"]
        assert [p["date"] for p in progress] == ["2024-01-01", "2024-01-08", "2024-01-15"]

    def test_new_users_start_empty(self):
        """Seeded records belong to the demo user only."""
        app = create_app(make_settings(seed_demo_data=True))

        with TestClient(app) as client:
            response = client.post("/api/auth/register", json={"email": "new@example.com", "password": "pw"})
            headers = auth_headers(response.json()["token"])

            assert response.json()["user"]["id"] == 2
            assert client.get("/api/workouts", headers=headers).json() == []
            assert client.get("/api/progress", headers=headers).json() == []

    def test_seeding_twice_is_skipped(self):
        """A second seed run leaves the store unchanged."""
        app = create_app(make_settings(seed_demo_data=True))

        with TestClient(app) as client:
            store = app.state.store
            loaded_again = client.portal.call(seed_demo_data, store, app.state.auth_service)

            assert loaded_again is False
            assert len(store.users) == 1
            assert len(store.workouts) == 2
