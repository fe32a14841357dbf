"""Dashboard aggregation over a user's workouts and meals."""
import math
from typing import Any, Iterable, Sequence

RECENT_LIMIT = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (45.5 -> 46, 44.5 -> 45)."""
    return math.floor(value + 0.5)


def _total(records: Iterable[dict[str, Any]], field: str) -> float:
    return sum(record.get(field) or 0 for record in records)


def build_dashboard_stats(
    workouts: Sequence[dict[str, Any]],
    nutrition: Sequence[dict[str, Any]],
) -> dict[str, Any]:
    """
    Summarize one user's records.

    Both sequences must already be filtered to the user and be in storage
    order; "recent" means the last entries of that order, not the latest dates.
    """
    total_duration = _total(workouts, "duration")

    return {
        "total_workouts": len(workouts),
        "total_calories_burned": _total(workouts, "calories_burned"),
        "total_calories_consumed": _total(nutrition, "total_calories"),
        "avg_workout_duration": round_half_up(total_duration / len(workouts)) if workouts else 0,
        "recent_workouts": list(workouts[-RECENT_LIMIT:]),
        "recent_nutrition": list(nutrition[-RECENT_LIMIT:]),
    }
