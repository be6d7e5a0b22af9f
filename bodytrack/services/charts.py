"""Chart series for the dashboard tabs.

Records arrive newest first; charts read left to right, so points are
emitted oldest first. Missing optional values plot as 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Optional

from bodytrack.core.enums import ChartTab
from bodytrack.schemas.body_data import BodyDataRead, ChartData, ChartDataset, ChartPoint

# (label, accessor, border colour, background colour) per series
SeriesSpec = tuple[str, Callable[[BodyDataRead], Optional[float]], str, str]

CHART_SERIES: dict[ChartTab, tuple[SeriesSpec, ...]] = {
    ChartTab.WEIGHT: (
        ("Weight (kg)", lambda r: r.weight, "rgba(255, 255, 255, 0.8)", "rgba(255, 255, 255, 0.1)"),
    ),
    ChartTab.COMPOSITION: (
        ("Body fat (%)", lambda r: r.body_fat, "#ff6b9d", "rgba(255, 107, 157, 0.1)"),
        ("Muscle mass (kg)", lambda r: r.muscle_mass, "#6bcf7f", "rgba(107, 207, 127, 0.1)"),
        ("Visceral fat (level)", lambda r: r.visceral_fat, "#4ecdc4", "rgba(78, 205, 196, 0.1)"),
    ),
    ChartTab.CALORIES: (
        ("Calories (kcal)", lambda r: r.calories, "#ffd93d", "rgba(255, 211, 61, 0.6)"),
    ),
}


def build_chart(records: Sequence[BodyDataRead], tab: ChartTab) -> ChartData:
    ordered = sorted(records, key=lambda r: r.date)
    labels = [r.date.isoformat() for r in ordered]

    datasets = []
    for label, value_of, border, background in CHART_SERIES[tab]:
        points = [
            ChartPoint(x=r.date.isoformat(), y=value_of(r) or 0)
            for r in ordered
        ]
        datasets.append(
            ChartDataset(
                label=label,
                data=points,
                border_color=border,
                background_color=background,
            )
        )
    return ChartData(labels=labels, datasets=datasets)
