"""Dashboard routes."""
from fastapi import APIRouter, Depends

from fittracker.repositories import DataStore, get_store
from fittracker.schemas.auth import TokenPayload
from fittracker.schemas.dashboard import DashboardStats
from fittracker.services.dashboard import build_dashboard_stats
from fittracker.utils.auth import get_current_user

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Workout and nutrition totals plus the most recent entries."""
    workouts = await store.workouts.list(user_id=current_user.id)
    nutrition = await store.nutrition.list(user_id=current_user.id)

    return build_dashboard_stats(workouts, nutrition)
