"""Workout logging routes."""
from typing import List

from fastapi import APIRouter, Depends, status

from fittracker.errors import NotFound
from fittracker.repositories import DataStore, get_store
from fittracker.schemas.auth import TokenPayload
from fittracker.schemas.workout import WorkoutCreate, WorkoutResponse, WorkoutUpdate
from fittracker.utils.auth import get_current_user
from fittracker.utils.dates import date_or_today

router = APIRouter(prefix="/workouts", tags=["Workouts"])

# Fields that an update may replace but never set to null
REQUIRED_FIELDS = ("date", "exercises")


@router.get("", response_model=List[WorkoutResponse])
async def list_workouts(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """List the user's workouts in the order they were logged."""
    return await store.workouts.list(user_id=current_user.id)


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
async def create_workout(
    workout_data: WorkoutCreate,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Log a workout. The date defaults to today."""
    data = workout_data.model_dump()
    data["user_id"] = current_user.id
    data["date"] = date_or_today(data["date"])

    return await store.workouts.create(data)


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: int,
    updates: WorkoutUpdate,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Update a workout."""
    update_data = updates.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in update_data and update_data[field] is None:
            del update_data[field]

    workout = await store.workouts.update(workout_id, update_data, user_id=current_user.id)

    if not workout:
        raise NotFound("Workout not found")

    return workout


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(
    workout_id: int,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Delete a workout."""
    deleted = await store.workouts.delete(workout_id, user_id=current_user.id)

    if not deleted:
        raise NotFound("Workout not found")
