"""Database models."""
from fittracker.models.base import Base
from fittracker.models.user import User
from fittracker.models.workout import Workout
from fittracker.models.nutrition import NutritionEntry
from fittracker.models.progress import ProgressSample

__all__ = [
    "Base",
    "User",
    "Workout",
    "NutritionEntry",
    "ProgressSample",
]
