"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class SavedLocationModel(Base):
    """SQLAlchemy model for saved_locations table.

    created_at is filled by the database clock at insert time and is
    never written by the application. It is read back in the same flush.
    """

    __tablename__ = "saved_locations"
    __table_args__ = (Index("ix_saved_locations_created_at", "created_at"),)
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
