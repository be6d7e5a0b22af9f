"""BodyData model — one row per daily measurement."""

from __future__ import annotations

import datetime as dt
from datetime import datetime, timezone

from sqlalchemy import Date, DateTime, Float, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from bodytrack.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BodyData(Base):
    """A single day's body-composition reading.

    Only date and weight are required; everything else is whatever the
    scale reported. Rows are append-only.
    """

    __tablename__ = "body_data"
    __table_args__ = (Index("ix_body_data_date", "date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    bmi: Mapped[float | None] = mapped_column(Float, nullable=True)
    body_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    muscle_mass: Mapped[float | None] = mapped_column(Float, nullable=True)
    visceral_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    calories: Mapped[float | None] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )
