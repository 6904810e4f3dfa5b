"""SQLAlchemy declarative base for all ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON


class Base(DeclarativeBase):
    """Base class for all database models."""


class PlayerProgressModel(Base):
    """One PlayerProgress document per user."""

    __tablename__ = "player_progress"

    user_id: Mapped[str] = mapped_column(String, primary_key=True)
    document: Mapped[dict] = mapped_column(JSON, nullable=False)

    # denormalized for listing / ordering
    total_fl_score: Mapped[int] = mapped_column(Integer, default=0)
    game_version: Mapped[str] = mapped_column(String, default="1.0.0")
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
