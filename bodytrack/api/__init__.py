"""API router aggregation."""

from fastapi import APIRouter

from bodytrack.api.endpoints import app_info, body_data, charts, health, stats

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(body_data.router, prefix="/body-data", tags=["body-data"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
api_router.include_router(charts.router, prefix="/charts", tags=["charts"])
api_router.include_router(app_info.router, prefix="/app-info", tags=["app-info"])
