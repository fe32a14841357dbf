"""Nutrition totals and daily summaries."""
from typing import Any, Iterable, Sequence

# kcal per gram
PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


def food_totals(foods: Iterable[dict[str, Any]]) -> dict[str, float]:
    """Sum calories and macros over a list of foods."""
    foods = list(foods)
    return {
        "total_calories": sum(food.get("calories") or 0 for food in foods),
        "total_protein": sum(food.get("protein") or 0 for food in foods),
        "total_carbs": sum(food.get("carbs") or 0 for food in foods),
        "total_fat": sum(food.get("fat") or 0 for food in foods),
    }


def apply_food_totals(data: dict[str, Any]) -> dict[str, Any]:
    """
    Replace the submitted totals with sums over ``data["foods"]``.

    Entries sent without foods keep whatever totals they carry.
    """
    foods = data.get("foods")
    if foods:
        data.update(food_totals(foods))
    return data


def daily_summary(entries: Sequence[dict[str, Any]], day: str) -> dict[str, Any]:
    """Totals over the entries logged on ``day`` (YYYY-MM-DD)."""
    todays = [entry for entry in entries if entry.get("date") == day]

    protein = sum(entry.get("total_protein") or 0 for entry in todays)
    carbs = sum(entry.get("total_carbs") or 0 for entry in todays)
    fat = sum(entry.get("total_fat") or 0 for entry in todays)

    return {
        "date": day,
        "entries": len(todays),
        "calories": sum(entry.get("total_calories") or 0 for entry in todays),
        "protein": protein,
        "carbs": carbs,
        "fat": fat,
        "macro_calories": {
            "protein": protein * PROTEIN_KCAL_PER_G,
            "carbs": carbs * CARBS_KCAL_PER_G,
            "fat": fat * FAT_KCAL_PER_G,
        },
    }
