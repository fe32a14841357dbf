"""Dashboard schemas."""
from typing import List

from fittracker.schemas.base import CamelModel
from fittracker.schemas.nutrition import NutritionResponse
from fittracker.schemas.workout import WorkoutResponse


class DashboardStats(CamelModel):
    """Aggregates over the caller's workouts and meals."""
    total_workouts: int
    total_calories_burned: float
    total_calories_consumed: float
    avg_workout_duration: int
    recent_workouts: List[WorkoutResponse]
    recent_nutrition: List[NutritionResponse]
