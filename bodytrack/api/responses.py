"""Helpers for failure envelopes with a non-200 status."""

from typing import Optional

from fastapi.responses import JSONResponse

from bodytrack.schemas.body_data import ApiResponse


def failure(status_code: int, error: str, errors: Optional[list[str]] = None) -> JSONResponse:
    body = ApiResponse[None](success=False, error=error, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
