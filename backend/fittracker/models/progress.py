"""Body-composition progress model."""
from typing import Optional

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fittracker.models.base import Base


class ProgressSample(Base):
    """Body weight, body fat and muscle mass measured on a date."""

    __tablename__ = "progress_samples"
    __table_args__ = {"sqlite_autoincrement": True}

    user_id: Mapped[int] = mapped_column(Integer, index=True)

    date: Mapped[str] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # kg
    body_fat: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # percent
    muscle: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # kg
