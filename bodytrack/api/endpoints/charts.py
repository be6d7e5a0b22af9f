"""Chart series endpoint — one tab of the dashboard at a time."""

import logging

from fastapi import APIRouter, Depends

from bodytrack.api.deps import get_repository
from bodytrack.api.responses import failure
from bodytrack.core.enums import ChartTab
from bodytrack.schemas.body_data import ApiResponse, ChartData
from bodytrack.services.charts import build_chart
from bodytrack.services.repository import BodyDataRepository

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{tab}", response_model=ApiResponse[ChartData])
async def get_chart(tab: str, repo: BodyDataRepository = Depends(get_repository)):
    """Series for ``weight``, ``composition`` or ``calories``, oldest point first."""
    try:
        chart_tab = ChartTab(tab)
    except ValueError:
        return failure(404, f"Unknown chart: {tab}")

    try:
        records = await repo.list_all()
    except Exception as e:
        logger.exception("GET /charts/%s failed: %s", tab, e)
        return failure(500, "Failed to fetch chart data")
    return ApiResponse[ChartData](success=True, data=build_chart(records, chart_tab))
