"""Async HTTP client for the body data REST API.

Every call is a single attempt. Transport errors, non-2xx statuses and
unparseable bodies all come back as ``ApiResponse(success=False, error=...)``
rather than raising; the ``fetch_*`` / ``submit_*`` helpers raise instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional, TypeVar, Union

import httpx

from bodytrack.core.constants import UNKNOWN_APP_INFO
from bodytrack.schemas.body_data import (
    ApiResponse,
    AppInfo,
    BodyDataCreate,
    BodyDataRead,
    HealthStatus,
    StatsSummary,
)
from bodytrack.services.stats import calculate_stats

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "http://localhost:8000/api"


class BodyTrackerClientError(Exception):
    """Raised by the convenience helpers when the API reports a failure."""


class BodyTrackerClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "BodyTrackerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        model: type[ApiResponse[T]],
        method: str,
        endpoint: str,
        json: Any = None,
    ) -> ApiResponse[T]:
        try:
            response = await self._http.request(method, endpoint, json=json)
            if response.is_error:
                raise httpx.HTTPStatusError(
                    f"HTTP error! status: {response.status_code}",
                    request=response.request,
                    response=response,
                )
            return model.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers bad JSON and pydantic ValidationError
            logger.error("API request failed: %s %s: %s", method, endpoint, e)
            return model(success=False, error=str(e) or type(e).__name__)

    # ── Endpoints ────────────────────────────────────────────────────────

    async def save_body_data(
        self, data: Union[BodyDataCreate, dict[str, Any]]
    ) -> ApiResponse[BodyDataRead]:
        if isinstance(data, dict):
            try:
                data = BodyDataCreate.model_validate(data)
            except ValueError as e:
                return ApiResponse[BodyDataRead](success=False, error=str(e))
        return await self._request(
            ApiResponse[BodyDataRead],
            "POST",
            "/body-data",
            json=data.model_dump(mode="json", exclude_none=True),
        )

    async def get_body_data(self) -> ApiResponse[list[BodyDataRead]]:
        return await self._request(ApiResponse[list[BodyDataRead]], "GET", "/body-data")

    async def get_stats(self) -> ApiResponse[StatsSummary]:
        return await self._request(ApiResponse[StatsSummary], "GET", "/stats")

    async def get_app_info(self) -> ApiResponse[AppInfo]:
        return await self._request(ApiResponse[AppInfo], "GET", "/app-info")

    async def health_check(self) -> ApiResponse[HealthStatus]:
        return await self._request(ApiResponse[HealthStatus], "GET", "/health")

    def calculate_stats(self, records: Sequence[BodyDataRead]) -> StatsSummary:
        """Local reduction; no request is made."""
        return calculate_stats(records)

    # ── Convenience helpers ──────────────────────────────────────────────

    async def submit_body_data(self, data: Union[BodyDataCreate, dict[str, Any]]) -> BodyDataRead:
        response = await self.save_body_data(data)
        if not response.success or response.data is None:
            raise BodyTrackerClientError(response.error or "Failed to save data")
        return response.data

    async def fetch_body_data(self) -> list[BodyDataRead]:
        response = await self.get_body_data()
        if not response.success:
            raise BodyTrackerClientError(response.error or "Failed to get data")
        return response.data or []

    async def fetch_app_info(self) -> AppInfo:
        response = await self.get_app_info()
        if not response.success:
            raise BodyTrackerClientError(response.error or "Failed to get app info")
        return response.data or AppInfo(
            version=UNKNOWN_APP_INFO,
            build_number=UNKNOWN_APP_INFO,
            last_updated=UNKNOWN_APP_INFO,
        )
