"""Shared route dependencies."""

from collections.abc import AsyncGenerator

from fastapi import Request

from bodytrack.db.session import get_session_maker
from bodytrack.services.repository import BodyDataRepository, SqlBodyDataRepository


async def get_repository(request: Request) -> AsyncGenerator[BodyDataRepository, None]:
    """Memory store when the app holds one, otherwise a DB-backed repository.

    Inserts commit themselves; the session also commits after the handler
    returns and rolls back if it raises.
    """
    store = request.app.state.body_data_store
    if store is not None:
        yield store
        return

    async with get_session_maker()() as session:
        try:
            yield SqlBodyDataRepository(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
