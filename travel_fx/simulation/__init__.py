"""Synthetic rate series: generation, trend summary and optimal point."""

from .analysis import find_minimum, summarize_trend
from .generator import BoundedRandomWalkGenerator
from .models import (
    HISTORICAL_BOUNDS,
    PREDICTION_BOUNDS,
    OptimalPoint,
    RatePoint,
    TimeSeries,
    TrendDirection,
    TrendSummary,
    WalkBounds,
    WalkDirection,
)

__all__ = [
    "BoundedRandomWalkGenerator",
    "HISTORICAL_BOUNDS",
    "PREDICTION_BOUNDS",
    "OptimalPoint",
    "RatePoint",
    "TimeSeries",
    "TrendDirection",
    "TrendSummary",
    "WalkBounds",
    "WalkDirection",
    "find_minimum",
    "summarize_trend",
]
