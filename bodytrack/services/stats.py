"""Aggregate statistics over body data records.

Recomputed from the full record set on every read; nothing here is stored.
"""

from __future__ import annotations

from collections.abc import Sequence

from bodytrack.schemas.body_data import BodyDataRead, StatsSummary


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0


def calculate_stats(records: Sequence[BodyDataRead]) -> StatsSummary:
    """Average weight / BMI, record count and latest record.

    ``records`` must already be sorted by date descending; the first one is
    reported as the latest. A weight or BMI of 0 is skipped like a missing one.
    """
    if not records:
        return StatsSummary()

    weights = [r.weight for r in records if r.weight]
    bmis = [r.bmi for r in records if r.bmi]

    return StatsSummary(
        avg_weight=_mean(weights),
        avg_bmi=_mean(bmis),
        total_records=len(records),
        latest_record=records[0],
    )
