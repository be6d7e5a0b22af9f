"""Health check endpoint for load balancers and monitoring."""

import logging

from fastapi import APIRouter, Depends

from bodytrack.api.deps import get_repository
from bodytrack.api.responses import failure
from bodytrack.schemas.body_data import ApiResponse, HealthStatus
from bodytrack.services.repository import BodyDataRepository
from bodytrack.services.timezone import now_in_timezone

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[HealthStatus])
async def health(repo: BodyDataRepository = Depends(get_repository)):
    """Liveness check. With the database backend this also pings the DB."""
    try:
        database = await repo.ping()
    except Exception as e:
        logger.exception("Health check failed: %s", e)
        return failure(500, "Health check failed")
    status = HealthStatus(
        status="ok",
        timestamp=now_in_timezone().isoformat(),
        backend=repo.backend,
        database=database,
    )
    return ApiResponse[HealthStatus](success=True, data=status)
