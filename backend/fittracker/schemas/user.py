"""User and profile schemas."""
from typing import Optional

from fittracker.schemas.base import CamelModel


class UserBase(CamelModel):
    """Profile fields shared by registration, update and response."""
    name: Optional[str] = None
    age: Optional[int] = None
    height: Optional[float] = None  # cm
    weight: Optional[float] = None  # kg
    fitness_goal: Optional[str] = None
    activity_level: Optional[str] = None


class UserUpdate(UserBase):
    """Partial profile update; only the fields sent are applied."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(UserBase):
    """Public user projection (never includes the password)."""
    id: int
    email: str


class BMIResponse(CamelModel):
    """Body mass index derived from the stored profile."""
    bmi: Optional[float] = None
    category: str
    height: Optional[float] = None
    weight: Optional[float] = None
