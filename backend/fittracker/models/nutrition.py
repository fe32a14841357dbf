"""Nutrition log model."""
from typing import Any, Optional

from sqlalchemy import JSON, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fittracker.models.base import Base


class NutritionEntry(Base):
    """A meal made of one or more foods."""

    __tablename__ = "nutrition_entries"
    __table_args__ = {"sqlite_autoincrement": True}

    user_id: Mapped[int] = mapped_column(Integer, index=True)

    date: Mapped[str] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    meal: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # [{name, quantity, unit, calories, protein, carbs, fat}]
    foods: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    # Aggregated totals (denormalized for quick queries)
    total_calories: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=0.0)
    total_protein: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=0.0)
    total_carbs: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=0.0)
    total_fat: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=0.0)
