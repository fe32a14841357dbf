"""Nutrition schemas."""
from typing import List, Optional

from pydantic import Field

from fittracker.schemas.base import CamelModel


class Food(CamelModel):
    """Single food item in a meal."""
    name: Optional[str] = None
    quantity: Optional[float] = 0
    unit: Optional[str] = None
    calories: Optional[float] = 0
    protein: Optional[float] = 0  # g
    carbs: Optional[float] = 0  # g
    fat: Optional[float] = 0  # g


class NutritionBase(CamelModel):
    """Fields a client may send for a nutrition entry."""
    date: Optional[str] = None  # YYYY-MM-DD
    meal: Optional[str] = None  # Breakfast, Lunch, Dinner, Snack...
    foods: List[Food] = Field(default_factory=list)
    total_calories: Optional[float] = 0
    total_protein: Optional[float] = 0
    total_carbs: Optional[float] = 0
    total_fat: Optional[float] = 0


class NutritionCreate(NutritionBase):
    """Schema for logging a meal."""


class NutritionUpdate(CamelModel):
    """Schema for updating a meal; unset fields are left alone."""
    date: Optional[str] = None
    meal: Optional[str] = None
    foods: Optional[List[Food]] = None
    total_calories: Optional[float] = None
    total_protein: Optional[float] = None
    total_carbs: Optional[float] = None
    total_fat: Optional[float] = None


class NutritionResponse(NutritionBase):
    """Stored nutrition entry."""
    id: int
    user_id: int
    date: str


class MacroCalories(CamelModel):
    """Energy contributed by each macro, in kcal."""
    protein: float
    carbs: float
    fat: float


class DailyNutritionSummary(CamelModel):
    """Totals over one day's nutrition entries."""
    date: str
    entries: int
    calories: float
    protein: float
    carbs: float
    fat: float
    macro_calories: MacroCalories
