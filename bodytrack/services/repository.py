"""Body data storage backends.

``MemoryBodyDataStore`` keeps demo records in-process (single user, not safe
for concurrent writers). ``SqlBodyDataRepository`` talks to Postgres through
an async session; Supabase is used this way via its Postgres connection.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import desc, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bodytrack.models.body_data import BodyData
from bodytrack.schemas.body_data import BodyDataCreate, BodyDataRead

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("bmi", "body_fat", "muscle_mass", "visceral_fat", "calories")


def storable_values(payload: BodyDataCreate) -> dict:
    """Column values for a validated submission; optional zeros are stored as NULL."""
    values = payload.model_dump()
    for field in OPTIONAL_FIELDS:
        if not values[field]:
            values[field] = None
    return values


class BodyDataRepository(ABC):
    backend: str

    @abstractmethod
    async def list_all(self) -> list[BodyDataRead]:
        """All records, newest date first."""

    @abstractmethod
    async def insert(self, payload: BodyDataCreate) -> BodyDataRead:
        """Persist an already validated submission and return the stored record."""

    async def ping(self) -> Optional[str]:
        """Connectivity check; returns a status string for the health probe."""
        return None


def demo_records() -> list[BodyDataRead]:
    """Sample data the memory backend starts with."""
    rows = [
        (1, date(2024, 1, 15), 70.5, 22.1, 15.2, 55.8, 8, 2200),
        (2, date(2024, 1, 14), 70.8, 22.2, 15.5, 55.5, 8, 2150),
        (3, date(2024, 1, 13), 71.0, 22.3, 15.8, 55.2, 9, 2180),
    ]
    return [
        BodyDataRead(
            id=id_,
            date=day,
            weight=weight,
            bmi=bmi,
            body_fat=body_fat,
            muscle_mass=muscle_mass,
            visceral_fat=visceral_fat,
            calories=calories,
            created_at=datetime(day.year, day.month, day.day, 9, tzinfo=timezone.utc),
        )
        for id_, day, weight, bmi, body_fat, muscle_mass, visceral_fat, calories in rows
    ]


class MemoryBodyDataStore(BodyDataRepository):
    backend = "memory"

    def __init__(self, records: Optional[list[BodyDataRead]] = None):
        self._records: list[BodyDataRead] = list(records) if records is not None else demo_records()

    async def list_all(self) -> list[BodyDataRead]:
        # Stable sort: same-day entries keep newest-insert-first order
        return sorted(self._records, key=lambda r: r.date, reverse=True)

    async def insert(self, payload: BodyDataCreate) -> BodyDataRead:
        next_id = max((r.id or 0 for r in self._records), default=0) + 1
        record = BodyDataRead(
            id=next_id,
            created_at=datetime.now(timezone.utc),
            **storable_values(payload),
        )
        self._records.insert(0, record)
        logger.debug("Stored body data %s for %s in memory", record.id, record.date)
        return record


class SqlBodyDataRepository(BodyDataRepository):
    backend = "database"

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _rollback_on_error(self):
        # Leave the session clean so the request-scoped commit doesn't fail afterwards
        try:
            yield
        except SQLAlchemyError:
            await self.session.rollback()
            raise

    async def list_all(self) -> list[BodyDataRead]:
        async with self._rollback_on_error():
            result = await self.session.execute(
                select(BodyData).order_by(desc(BodyData.date), desc(BodyData.id))
            )
            rows = result.scalars().all()
        return [BodyDataRead.model_validate(row) for row in rows]

    async def insert(self, payload: BodyDataCreate) -> BodyDataRead:
        row = BodyData(**storable_values(payload))
        async with self._rollback_on_error():
            self.session.add(row)
            await self.session.flush()
            await self.session.refresh(row)
            # Commit here so a failed commit reaches the handler as an error
            await self.session.commit()
        logger.info("Inserted body data %s for %s", row.id, row.date)
        return BodyDataRead.model_validate(row)

    async def ping(self) -> Optional[str]:
        async with self._rollback_on_error():
            await self.session.execute(text("SELECT 1"))
        return "connected"
