"""Body metrics derived from profile and progress data."""
from typing import Any, Optional, Sequence

# Upper bounds (exclusive) for each BMI category
BMI_CATEGORIES = [
    (18.5, "Underweight"),
    (25.0, "Normal"),
    (30.0, "Overweight"),
]

TREND_FIELDS = ("weight", "body_fat", "muscle")


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """
    Calculate body mass index.

    BMI = weight (kg) / height (m)^2, rounded to one decimal.
    Returns None when either measurement is missing or zero.
    """
    if not weight_kg or not height_cm:
        return None

    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi: Optional[float]) -> str:
    """Map a BMI value to its category label."""
    if bmi is None:
        return "Unknown"

    for upper, label in BMI_CATEGORIES:
        if bmi < upper:
            return label
    return "Obese"


def progress_trends(samples: Sequence[dict[str, Any]]) -> dict[str, Any]:
    """
    Change between the last two samples, in storage order.

    Every delta is 0 when there are fewer than two samples; a measurement
    missing from either sample counts as 0.
    """
    latest = samples[-1] if samples else None
    previous = samples[-2] if len(samples) >= 2 else None

    trends: dict[str, Any] = {}
    for field in TREND_FIELDS:
        if latest and previous:
            trends[field] = round((latest.get(field) or 0) - (previous.get(field) or 0), 2)
        else:
            trends[field] = 0.0

    trends["latest"] = latest
    return trends
