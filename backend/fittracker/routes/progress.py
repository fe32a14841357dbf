"""Body-composition progress routes."""
from typing import List

from fastapi import APIRouter, Depends, status

from fittracker.repositories import DataStore, get_store
from fittracker.schemas.auth import TokenPayload
from fittracker.schemas.progress import ProgressCreate, ProgressResponse, ProgressTrends
from fittracker.services.body_metrics import progress_trends
from fittracker.utils.auth import get_current_user
from fittracker.utils.dates import date_or_today

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get("", response_model=List[ProgressResponse])
async def list_progress(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """List the user's measurements in the order they were recorded."""
    return await store.progress.list(user_id=current_user.id)


@router.post("", response_model=ProgressResponse, status_code=status.HTTP_201_CREATED)
async def add_progress(
    sample: ProgressCreate,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Record a measurement. The date defaults to today."""
    data = sample.model_dump()
    data["user_id"] = current_user.id
    data["date"] = date_or_today(data["date"])

    return await store.progress.create(data)


@router.get("/trends", response_model=ProgressTrends)
async def get_progress_trends(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Change in weight, body fat and muscle since the previous measurement."""
    samples = await store.progress.list(user_id=current_user.id)
    return progress_trends(samples)
