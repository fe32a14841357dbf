"""Body-composition progress schemas."""
from typing import Optional

from fittracker.schemas.base import CamelModel


class ProgressBase(CamelModel):
    """A body-composition measurement."""
    date: Optional[str] = None  # YYYY-MM-DD
    weight: Optional[float] = None  # kg
    body_fat: Optional[float] = None  # percent
    muscle: Optional[float] = None  # kg


class ProgressCreate(ProgressBase):
    """Schema for recording a measurement."""


class ProgressResponse(ProgressBase):
    """Stored measurement."""
    id: int
    user_id: int
    date: str


class ProgressTrends(CamelModel):
    """Change between the two most recent measurements."""
    weight: float
    body_fat: float
    muscle: float
    latest: Optional[ProgressResponse] = None
