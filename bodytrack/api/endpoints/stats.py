"""Aggregate statistics endpoint."""

import logging

from fastapi import APIRouter, Depends

from bodytrack.api.deps import get_repository
from bodytrack.api.responses import failure
from bodytrack.schemas.body_data import ApiResponse, StatsSummary
from bodytrack.services.repository import BodyDataRepository
from bodytrack.services.stats import calculate_stats

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[StatsSummary])
async def get_stats(repo: BodyDataRepository = Depends(get_repository)):
    try:
        records = await repo.list_all()
    except Exception as e:
        logger.exception("GET /stats failed: %s", e)
        return failure(500, "Failed to fetch stats")
    return ApiResponse[StatsSummary](success=True, data=calculate_stats(records))
