"""Body data endpoints — list and create."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from bodytrack.api.deps import get_repository
from bodytrack.api.responses import failure
from bodytrack.schemas.body_data import ApiResponse, BodyDataCreate, BodyDataRead
from bodytrack.services.repository import BodyDataRepository
from bodytrack.services.validation import validate_body_data

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[list[BodyDataRead]])
async def list_body_data(repo: BodyDataRepository = Depends(get_repository)):
    """All records, newest date first."""
    try:
        records = await repo.list_all()
    except Exception as e:
        logger.exception("GET /body-data failed: %s", e)
        return failure(500, "Failed to fetch body data")
    return ApiResponse[list[BodyDataRead]](success=True, data=records)


@router.post("", response_model=ApiResponse[BodyDataRead])
async def create_body_data(payload: BodyDataCreate, repo: BodyDataRepository = Depends(get_repository)):
    """Validate and store one day's reading. 400 lists every violated constraint."""
    errors = validate_body_data(payload)
    if errors:
        logger.info("Rejected body data submission: %s", errors)
        return failure(400, "; ".join(errors), errors)

    try:
        record = await repo.insert(payload)
    except Exception as e:
        logger.exception("POST /body-data failed: %s", e)
        return failure(500, "Failed to save body data")
    return ApiResponse[BodyDataRead](success=True, data=record)
