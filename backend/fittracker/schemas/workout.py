"""Workout schemas."""
from typing import List, Optional

from pydantic import Field

from fittracker.schemas.base import CamelModel


class Exercise(CamelModel):
    """One exercise within a workout."""
    name: Optional[str] = None
    sets: Optional[int] = 0
    reps: Optional[int] = 0
    weight: Optional[float] = 0
    distance: Optional[float] = None  # km


class WorkoutBase(CamelModel):
    """Fields a client may send for a workout."""
    name: Optional[str] = None
    date: Optional[str] = None  # YYYY-MM-DD
    duration: Optional[float] = None  # minutes
    exercises: List[Exercise] = Field(default_factory=list)
    notes: Optional[str] = None
    category: Optional[str] = None
    calories_burned: Optional[float] = None


class WorkoutCreate(WorkoutBase):
    """Schema for logging a workout."""


class WorkoutUpdate(WorkoutBase):
    """Schema for updating a workout; unset fields are left alone."""
    exercises: Optional[List[Exercise]] = None


class WorkoutResponse(WorkoutBase):
    """Stored workout."""
    id: int
    user_id: int
    date: str
