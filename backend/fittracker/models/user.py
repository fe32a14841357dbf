"""User account model."""
from typing import Optional

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fittracker.models.base import Base


class User(Base):
    """Registered user with body metrics and goals."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    # Authentication
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    # Profile
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    height: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # cm
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # kg
    fitness_goal: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    activity_level: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # ISO-8601 UTC timestamp
    created_at: Mapped[str] = mapped_column(String(40))
