"""Body data Pydantic schemas — records, stats, app info and the response envelope."""

from __future__ import annotations

import datetime as dt
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


# ── Envelope ─────────────────────────────────────────────────────────────

class ApiResponse(BaseModel, Generic[T]):
    """Every endpoint answers with this shape, success or not."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    errors: Optional[list[str]] = Field(None, description="Field-level messages on validation failure")


# ── BodyData ─────────────────────────────────────────────────────────────

class BodyDataCreate(BaseModel):
    """Form submission. Everything is optional here; validate_body_data decides what is acceptable."""

    # NaN/Infinity are valid JSON tokens for Starlette; reject them at parse time
    model_config = ConfigDict(allow_inf_nan=False)

    date: Optional[dt.date] = None
    weight: Optional[float] = Field(None, description="Body weight in kg")
    bmi: Optional[float] = None
    body_fat: Optional[float] = Field(None, description="Body fat %")
    muscle_mass: Optional[float] = Field(None, description="Muscle mass in kg")
    visceral_fat: Optional[float] = Field(None, description="Visceral fat level")
    calories: Optional[float] = Field(None, description="Calories in kcal")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_missing(cls, v):
        # HTML forms post untouched inputs as empty strings
        if isinstance(v, str) and not v.strip():
            return None
        return v


class BodyDataRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    date: dt.date
    weight: float
    bmi: Optional[float] = None
    body_fat: Optional[float] = None
    muscle_mass: Optional[float] = None
    visceral_fat: Optional[float] = None
    calories: Optional[float] = None
    created_at: Optional[dt.datetime] = None


# ── Derived ──────────────────────────────────────────────────────────────

class StatsSummary(BaseModel):
    avg_weight: float = 0
    avg_bmi: float = 0
    total_records: int = 0
    latest_record: Optional[BodyDataRead] = None


class AppInfo(BaseModel):
    version: str
    build_number: str
    last_updated: str


class HealthStatus(BaseModel):
    status: str
    timestamp: str
    backend: str
    database: Optional[str] = None


# ── Charts ───────────────────────────────────────────────────────────────

class ChartPoint(BaseModel):
    x: str  # ISO date
    y: float


class ChartDataset(BaseModel):
    label: str
    data: list[ChartPoint]
    border_color: str
    background_color: str
    tension: float = 0.4


class ChartData(BaseModel):
    labels: list[str]
    datasets: list[ChartDataset]
