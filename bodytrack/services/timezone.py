"""Timezone helpers for "today" defaults and display timestamps."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bodytrack.core.config import get_settings

logger = logging.getLogger(__name__)

# Zones offered in the settings dropdown: (IANA name, label)
COMMON_TIMEZONES: tuple[tuple[str, str], ...] = (
    ("Asia/Tokyo", "Japan Standard Time (JST)"),
    ("America/New_York", "Eastern Time (EST/EDT)"),
    ("America/Los_Angeles", "Pacific Time (PST/PDT)"),
    ("Europe/London", "Greenwich Mean Time (GMT/BST)"),
    ("Europe/Paris", "Central European Time (CET/CEST)"),
    ("Asia/Shanghai", "China Standard Time (CST)"),
    ("Asia/Seoul", "Korea Standard Time (KST)"),
    ("Australia/Sydney", "Australian Eastern Time (AEST/AEDT)"),
)


def is_valid_timezone(name: Optional[str]) -> bool:
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def resolve_timezone(name: Optional[str] = None) -> timezone | ZoneInfo:
    """Requested zone, else the configured display zone, else UTC."""
    if is_valid_timezone(name):
        return ZoneInfo(name)
    configured = get_settings().display_timezone
    if is_valid_timezone(configured):
        return ZoneInfo(configured)
    logger.warning("Invalid display timezone %r, falling back to UTC", configured)
    return timezone.utc


def now_in_timezone(name: Optional[str] = None) -> datetime:
    return datetime.now(resolve_timezone(name))


def today_in_timezone(name: Optional[str] = None) -> date:
    """Calendar day in the given zone; what the entry form pre-fills."""
    return now_in_timezone(name).date()
