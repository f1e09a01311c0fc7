"""Trend and optimal-point analysis over rate series."""
from typing import Sequence

from travel_fx.simulation.models import OptimalPoint, RatePoint, TrendDirection, TrendSummary
from travel_fx.utils.errors import EmptySeriesError, InvalidArgument


def summarize_trend(series: Sequence[RatePoint]) -> TrendSummary:
    """
    Compare the first and last points of a series.

    Returns:
        TrendSummary with the absolute percentage change (2 dp) and whether
        the series ended at or above where it started ("up") or below ("down").

    Raises:
        EmptySeriesError: if the series has fewer than 2 points
    """
    if len(series) < 2:
        raise EmptySeriesError(f"Trend needs at least 2 points (got {len(series)})")

    first = series[0].value
    last = series[-1].value
    if first == 0:
        raise InvalidArgument("Trend is undefined for a series starting at 0")

    percent_change = round(abs((last - first) / first) * 100, 2)
    direction = TrendDirection.UP if last >= first else TrendDirection.DOWN
    return TrendSummary(percent_change=percent_change, direction=direction)


def find_minimum(series: Sequence[RatePoint]) -> OptimalPoint:
    """Return the lowest point; ties go to the earliest one."""
    if not series:
        raise EmptySeriesError("Cannot find the minimum of an empty series")

    best = series[0]
    for point in series[1:]:
        if point.value < best.value:
            best = point
    return OptimalPoint(label=best.label, value=best.value)
