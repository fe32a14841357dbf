"""Nutrition logging routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from fittracker.errors import NotFound
from fittracker.repositories import DataStore, get_store
from fittracker.schemas.auth import TokenPayload
from fittracker.schemas.nutrition import (
    DailyNutritionSummary,
    NutritionCreate,
    NutritionResponse,
    NutritionUpdate,
)
from fittracker.services.nutrition import apply_food_totals, daily_summary, food_totals
from fittracker.utils.auth import get_current_user
from fittracker.utils.dates import date_or_today

router = APIRouter(prefix="/nutrition", tags=["Nutrition"])

# Fields that an update may replace but never set to null
REQUIRED_FIELDS = ("date", "foods")


@router.get("", response_model=List[NutritionResponse])
async def list_nutrition_entries(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """List the user's meals in the order they were logged."""
    return await store.nutrition.list(user_id=current_user.id)


@router.get("/summary", response_model=DailyNutritionSummary)
async def get_daily_summary(
    day: Optional[str] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Calorie and macro totals for one day."""
    entries = await store.nutrition.list(user_id=current_user.id)
    return daily_summary(entries, date_or_today(day))


@router.post("", response_model=NutritionResponse, status_code=status.HTTP_201_CREATED)
async def create_nutrition_entry(
    entry_data: NutritionCreate,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """
    Log a meal. The date defaults to today.

    Totals are recalculated from the foods whenever any are listed.
    """
    data = apply_food_totals(entry_data.model_dump())
    data["user_id"] = current_user.id
    data["date"] = date_or_today(data["date"])

    return await store.nutrition.create(data)


@router.put("/{entry_id}", response_model=NutritionResponse)
async def update_nutrition_entry(
    entry_id: int,
    updates: NutritionUpdate,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Update a meal, keeping its totals in step with its foods."""
    entry = await store.nutrition.get(entry_id, user_id=current_user.id)

    if not entry:
        raise NotFound("Nutrition entry not found")

    update_data = updates.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in update_data and update_data[field] is None:
            del update_data[field]

    foods = update_data.get("foods", entry.get("foods"))
    if foods:
        update_data.update(food_totals(foods))

    updated = await store.nutrition.update(entry_id, update_data, user_id=current_user.id)

    if not updated:
        raise NotFound("Nutrition entry not found")

    return updated


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_nutrition_entry(
    entry_id: int,
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Delete a meal."""
    deleted = await store.nutrition.delete(entry_id, user_id=current_user.id)

    if not deleted:
        raise NotFound("Nutrition entry not found")
