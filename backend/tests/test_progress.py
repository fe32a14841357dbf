"""Tests for the progress routes."""
import pytest

from fittracker.utils.dates import today_iso


def add_sample(client, headers, **fields):
    response = client.post("/api/progress", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestProgress:
    """Tests for GET/POST /api/progress."""

    def test_add_and_list(self, client, alice):
        """Samples get an id and owner and are listed in order."""
        first = add_sample(client, alice, date="2024-01-01", weight=72, bodyFat=15, muscle=58)
        second = add_sample(client, alice, date="2024-01-08", weight=71.5, bodyFat=14.8, muscle=58.2)

        assert first == {
            "id": 1, "userId": 1, "date": "2024-01-01", "weight": 72, "bodyFat": 15, "muscle": 58,
        }
        assert client.get("/api/progress", headers=alice).json() == [first, second]

    def test_date_defaults_to_today(self, client, alice):
        """A sample without a date is recorded for today."""
        sample = add_sample(client, alice, weight=70)

        assert sample["date"] == today_iso()

    def test_samples_are_per_user(self, client, alice, bob):
        """Each user only sees their own measurements."""
        add_sample(client, alice, weight=72)
        add_sample(client, bob, weight=90)

        assert [s["weight"] for s in client.get("/api/progress", headers=alice).json()] == [72]
        assert [s["weight"] for s in client.get("/api/progress", headers=bob).json()] == [90]

    def test_requires_token(self, client):
        """Posting without a token answers 401."""
        assert client.post("/api/progress", json={"weight": 70}).status_code == 401


class TestProgressTrends:
    """Tests for GET /api/progress/trends."""

    def test_trend_between_last_two_samples(self, client, alice):
        """Deltas compare the latest sample with the one before it."""
        add_sample(client, alice, date="2024-01-01", weight=72, bodyFat=15, muscle=58)
        add_sample(client, alice, date="2024-01-08", weight=71.5, bodyFat=14.8, muscle=58.2)
        latest = add_sample(client, alice, date="2024-01-15", weight=71, bodyFat=14.5, muscle=58.5)

        trends = client.get("/api/progress/trends", headers=alice).json()

        assert trends["weight"] == pytest.approx(-0.5)
        assert trends["bodyFat"] == pytest.approx(-0.3)
        assert trends["muscle"] == pytest.approx(0.3)
        assert trends["latest"] == latest

    def test_trend_with_single_sample(self, client, alice):
        """With one sample every delta is zero."""
        only = add_sample(client, alice, weight=72, bodyFat=15, muscle=58)

        trends = client.get("/api/progress/trends", headers=alice).json()

        assert trends == {"weight": 0, "bodyFat": 0, "muscle": 0, "latest": only}

    def test_trend_without_samples(self, client, alice):
        """No samples gives zero deltas and no latest sample."""
        trends = client.get("/api/progress/trends", headers=alice).json()

        assert trends == {"weight": 0, "bodyFat": 0, "muscle": 0, "latest": None}
