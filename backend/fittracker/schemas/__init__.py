"""Pydantic schemas for API validation."""
from fittracker.schemas.user import (
    UserUpdate,
    UserResponse,
    BMIResponse,
)
from fittracker.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    AuthResponse,
    TokenPayload,
)
from fittracker.schemas.workout import (
    Exercise,
    WorkoutCreate,
    WorkoutUpdate,
    WorkoutResponse,
)
from fittracker.schemas.nutrition import (
    Food,
    NutritionCreate,
    NutritionUpdate,
    NutritionResponse,
    DailyNutritionSummary,
)
from fittracker.schemas.progress import (
    ProgressCreate,
    ProgressResponse,
    ProgressTrends,
)
from fittracker.schemas.dashboard import DashboardStats

__all__ = [
    # User
    "UserUpdate",
    "UserResponse",
    "BMIResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "AuthResponse",
    "TokenPayload",
    # Workout
    "Exercise",
    "WorkoutCreate",
    "WorkoutUpdate",
    "WorkoutResponse",
    # Nutrition
    "Food",
    "NutritionCreate",
    "NutritionUpdate",
    "NutritionResponse",
    "DailyNutritionSummary",
    # Progress
    "ProgressCreate",
    "ProgressResponse",
    "ProgressTrends",
    # Dashboard
    "DashboardStats",
]
