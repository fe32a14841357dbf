"""Workout log model."""
from typing import Any, Optional

from sqlalchemy import JSON, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fittracker.models.base import Base


class Workout(Base):
    """A logged workout session with its exercises."""

    __tablename__ = "workouts"
    __table_args__ = {"sqlite_autoincrement": True}

    user_id: Mapped[int] = mapped_column(Integer, index=True)

    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    date: Mapped[str] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    duration: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # minutes
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    calories_burned: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # [{name, sets, reps, weight, distance}]
    exercises: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
