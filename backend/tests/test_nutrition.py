"""Tests for the nutrition CRUD and summary routes."""
from fittracker.utils.dates import today_iso

BREAKFAST = {
    "date": "2024-01-15",
    "meal": "Breakfast",
    "foods": [
        {"name": "Oatmeal", "quantity": 1, "unit": "cup", "calories": 150, "protein": 5, "carbs": 27, "fat": 3},
        {"name": "Banana", "quantity": 1, "unit": "piece", "calories": 105, "protein": 1, "carbs": 27, "fat": 0},
    ],
    "totalCalories": 255,
    "totalProtein": 6,
    "totalCarbs": 54,
    "totalFat": 3,
}


def create_entry(client, headers, **overrides):
    response = client.post("/api/nutrition", json={**BREAKFAST, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestNutritionCrud:
    """Tests for /api/nutrition list, create, update and delete."""

    def test_create_and_list(self, client, alice):
        """Created entries are listed for their owner."""
        entry = create_entry(client, alice)

        assert entry["id"] == 1
        assert entry["userId"] == 1
        assert entry["meal"] == "Breakfast"
        assert [f["name"] for f in entry["foods"]] == ["Oatmeal", "Banana"]
        assert client.get("/api/nutrition", headers=alice).json() == [entry]

    def test_owner_isolation(self, client, alice, bob):
        """Nobody sees or changes another user's entries."""
        entry = create_entry(client, alice)
        create_entry(client, bob, meal="Lunch")

        assert [e["meal"] for e in client.get("/api/nutrition", headers=alice).json()] == ["Breakfast"]
        assert client.put(f"/api/nutrition/{entry['id']}", json={"meal": "x"}, headers=bob).status_code == 404
        assert client.delete(f"/api/nutrition/{entry['id']}", headers=bob).status_code == 404
        assert client.get("/api/nutrition", headers=alice).json() == [entry]

    def test_date_defaults_to_today(self, client, alice):
        """A missing date becomes today's date."""
        body = {k: v for k, v in BREAKFAST.items() if k != "date"}

        entry = client.post("/api/nutrition", json=body, headers=alice).json()

        assert entry["date"] == today_iso()

    def test_update_merges_fields(self, client, alice):
        """Only the fields sent change."""
        entry = create_entry(client, alice)

        updated = client.put(
            f"/api/nutrition/{entry['id']}", json={"meal": "Brunch"}, headers=alice
        ).json()

        assert updated["meal"] == "Brunch"
        assert updated["foods"] == entry["foods"]
        assert updated["totalCalories"] == 255

    def test_delete_twice(self, client, alice):
        """The second delete of an id is 404."""
        entry = create_entry(client, alice)

        first = client.delete(f"/api/nutrition/{entry['id']}", headers=alice)
        second = client.delete(f"/api/nutrition/{entry['id']}", headers=alice)

        assert first.status_code == 204
        assert second.status_code == 404
        assert second.json() == {"error": "Nutrition entry not found"}
        assert client.get("/api/nutrition", headers=alice).json() == []


class TestNutritionTotals:
    """Totals follow the food list."""

    def test_totals_recomputed_from_foods(self, client, alice):
        """Client-sent totals are replaced by sums over the foods."""
        entry = create_entry(
            client, alice, totalCalories=9999, totalProtein=0, totalCarbs=0, totalFat=0
        )

        assert entry["totalCalories"] == 255
        assert entry["totalProtein"] == 6
        assert entry["totalCarbs"] == 54
        assert entry["totalFat"] == 3

    def test_entry_without_foods_keeps_totals(self, client, alice):
        """With no foods listed, the submitted totals are stored as sent."""
        entry = create_entry(client, alice, foods=[], totalCalories=400, totalProtein=20)

        assert entry["totalCalories"] == 400
        assert entry["totalProtein"] == 20

    def test_cleared_food_numbers_count_as_zero(self, client, alice):
        """Null food numbers are stored as sent and add nothing to the totals."""
        entry = create_entry(
            client,
            alice,
            foods=[
                {"name": "Apple", "quantity": None, "unit": "piece", "calories": 95, "protein": None, "carbs": 25, "fat": None},
                {"name": None, "calories": None},
            ],
        )

        assert entry["foods"][0]["protein"] is None
        assert entry["foods"][1]["name"] is None
        assert entry["totalCalories"] == 95
        assert entry["totalProtein"] == 0
        assert entry["totalCarbs"] == 25
        assert entry["totalFat"] == 0

    def test_null_totals_without_foods(self, client, alice):
        """Null totals are kept and read as zero by the dashboard."""
        entry = create_entry(client, alice, foods=[], totalCalories=None)
        stats = client.get("/api/dashboard/stats", headers=alice).json()

        assert entry["totalCalories"] is None
        assert stats["totalCaloriesConsumed"] == 0

    def test_replacing_foods_recomputes_totals(self, client, alice):
        """An update with new foods brings the totals along."""
        entry = create_entry(client, alice)

        updated = client.put(
            f"/api/nutrition/{entry['id']}",
            json={"foods": [{"name": "Egg", "quantity": 2, "unit": "piece", "calories": 140, "protein": 12, "carbs": 1, "fat": 10}]},
            headers=alice,
        ).json()

        assert updated["totalCalories"] == 140
        assert updated["totalProtein"] == 12
        assert updated["totalCarbs"] == 1
        assert updated["totalFat"] == 10

    def test_totals_follow_foods_on_partial_update(self, client, alice):
        """Totals sent without foods cannot drift from the stored foods."""
        entry = create_entry(client, alice)

        updated = client.put(
            f"/api/nutrition/{entry['id']}", json={"totalCalories": 1}, headers=alice
        ).json()

        assert updated["totalCalories"] == 255


class TestDailySummary:
    """Tests for GET /api/nutrition/summary."""

    def test_summary_for_date(self, client, alice, bob):
        """Totals cover only the caller's entries on that date."""
        create_entry(client, alice)
        create_entry(
            client, alice, meal="Lunch",
            foods=[{"name": "Chicken Breast", "quantity": 150, "unit": "g", "calories": 231, "protein": 43, "carbs": 0, "fat": 5}],
        )
        create_entry(client, alice, date="2024-01-16")
        create_entry(client, bob)

        response = client.get("/api/nutrition/summary", params={"date": "2024-01-15"}, headers=alice)

        assert response.status_code == 200
        assert response.json() == {
            "date": "2024-01-15",
            "entries": 2,
            "calories": 486,
            "protein": 49,
            "carbs": 54,
            "fat": 8,
            "macroCalories": {"protein": 196, "carbs": 216, "fat": 72},
        }

    def test_summary_defaults_to_today(self, client, alice):
        """Without a date the summary covers today."""
        create_entry(client, alice, date=None)

        data = client.get("/api/nutrition/summary", headers=alice).json()

        assert data["date"] == today_iso()
        assert data["entries"] == 1
        assert data["calories"] == 255
