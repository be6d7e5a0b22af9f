"""Static version / build metadata."""

import os

from fastapi import APIRouter, Request

from bodytrack.schemas.body_data import ApiResponse, AppInfo
from bodytrack.services.timezone import today_in_timezone

router = APIRouter()


@router.get("", response_model=ApiResponse[AppInfo])
async def get_app_info(request: Request):
    """Version and build number from settings. last_updated is BACKEND_BUILT_AT when set, else today."""
    settings = request.app.state.settings
    last_updated = os.environ.get("BACKEND_BUILT_AT") or today_in_timezone().isoformat()
    info = AppInfo(
        version=settings.app_version,
        build_number=settings.build_number,
        last_updated=last_updated,
    )
    return ApiResponse[AppInfo](success=True, data=info)
