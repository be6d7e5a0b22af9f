"""Input validation for body data submissions.

Collects every violation instead of stopping at the first one, so the form
can show all problems at once. Optional fields equal to 0 count as not
provided, the same way the stats reduction treats them. NaN and infinity
are always violations.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from bodytrack.core.constants import (
    BMI_RANGE,
    BODY_FAT_RANGE,
    CALORIES_RANGE,
    MSG_BMI_RANGE,
    MSG_BODY_FAT_RANGE,
    MSG_CALORIES_RANGE,
    MSG_DATE_REQUIRED,
    MSG_MUSCLE_MASS_RANGE,
    MSG_VISCERAL_FAT_RANGE,
    MSG_WEIGHT_RANGE,
    MSG_WEIGHT_REQUIRED,
    MUSCLE_MASS_RANGE,
    VISCERAL_FAT_RANGE,
    WEIGHT_RANGE,
)
from bodytrack.schemas.body_data import BodyDataCreate

# (field, (low, high), message): checked in this order after the date/weight presence checks
RANGE_CHECKS: tuple[tuple[str, tuple[float, float], str], ...] = (
    ("weight", WEIGHT_RANGE, MSG_WEIGHT_RANGE),
    ("bmi", BMI_RANGE, MSG_BMI_RANGE),
    ("body_fat", BODY_FAT_RANGE, MSG_BODY_FAT_RANGE),
    ("muscle_mass", MUSCLE_MASS_RANGE, MSG_MUSCLE_MASS_RANGE),
    ("visceral_fat", VISCERAL_FAT_RANGE, MSG_VISCERAL_FAT_RANGE),
    ("calories", CALORIES_RANGE, MSG_CALORIES_RANGE),
)


def _out_of_range(value: float | None, bounds: tuple[float, float]) -> bool:
    if value is None:
        return False
    if not math.isfinite(value):
        return True
    if not value:
        return False
    low, high = bounds
    return value < low or value > high


def missing_field_messages(raw: Mapping[str, Any]) -> list[str]:
    """Presence checks on an unparsed body, for submissions that fail type parsing."""
    errors: list[str] = []
    for field, message in (("date", MSG_DATE_REQUIRED), ("weight", MSG_WEIGHT_REQUIRED)):
        value = raw.get(field)
        if not value or (isinstance(value, str) and not value.strip()):
            errors.append(message)
    return errors


def validate_body_data(data: BodyDataCreate) -> list[str]:
    """Return human-readable errors for ``data``; empty list means valid."""
    errors: list[str] = []

    if not data.date:
        errors.append(MSG_DATE_REQUIRED)

    weight = data.weight
    if not weight or not math.isfinite(weight) or weight <= 0:
        errors.append(MSG_WEIGHT_REQUIRED)

    for field, bounds, message in RANGE_CHECKS:
        if _out_of_range(getattr(data, field), bounds):
            errors.append(message)

    return errors
