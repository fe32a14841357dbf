"""Backend services."""
from fittracker.services.auth_service import AuthService
from fittracker.services.body_metrics import bmi_category, calculate_bmi, progress_trends
from fittracker.services.dashboard import build_dashboard_stats, round_half_up
from fittracker.services.nutrition import apply_food_totals, daily_summary, food_totals

__all__ = [
    "AuthService",
    "bmi_category",
    "calculate_bmi",
    "progress_trends",
    "build_dashboard_stats",
    "round_half_up",
    "apply_food_totals",
    "daily_summary",
    "food_totals",
]
