"""Shared enums for models and API."""

from enum import Enum


class ChartTab(str, Enum):
    """Which chart the dashboard is showing."""

    WEIGHT = "weight"
    COMPOSITION = "composition"  # Body fat, muscle mass, visceral fat
    CALORIES = "calories"
