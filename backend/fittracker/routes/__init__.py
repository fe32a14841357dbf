"""API routes."""
from fittracker.routes.auth import router as auth_router
from fittracker.routes.profile import router as profile_router
from fittracker.routes.workouts import router as workouts_router
from fittracker.routes.nutrition import router as nutrition_router
from fittracker.routes.progress import router as progress_router
from fittracker.routes.dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "profile_router",
    "workouts_router",
    "nutrition_router",
    "progress_router",
    "dashboard_router",
]
