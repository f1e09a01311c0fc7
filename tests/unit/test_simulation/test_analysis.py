"""Tests for trend summary and optimal point analysis."""
import pytest

from travel_fx.simulation.analysis import find_minimum, summarize_trend
from travel_fx.simulation.models import OptimalPoint, RatePoint, TrendDirection, TrendSummary
from travel_fx.utils.errors import EmptySeriesError


def _series(*values):
    return tuple(RatePoint(label=f"d{i + 1}", value=v) for i, v in enumerate(values))


def test_summarize_scenario():
    assert summarize_trend(_series(1300, 1400)) == TrendSummary(
        percent_change=7.69, direction=TrendDirection.UP
    )


def test_summarize_down_is_absolute():
    summary = summarize_trend(_series(1400, 1350, 1300))
    assert summary.direction is TrendDirection.DOWN
    assert summary.percent_change == 7.14


def test_summarize_flat_is_up():
    summary = summarize_trend(_series(1300, 1200, 1300))
    assert summary.direction is TrendDirection.UP
    assert summary.percent_change == 0.0


def test_summarize_direction_serializes_as_text():
    assert summarize_trend(_series(1, 2)).direction == "up"
    assert summarize_trend(_series(2, 1)).direction == "down"


@pytest.mark.parametrize("series", [(), _series(1300)])
def test_summarize_needs_two_points(series):
    with pytest.raises(EmptySeriesError):
        summarize_trend(series)


def test_find_minimum_scenario():
    series = (
        RatePoint("d1", 5),
        RatePoint("d2", 3),
        RatePoint("d3", 3),
    )
    assert find_minimum(series) == OptimalPoint(label="d2", value=3)


def test_find_minimum_matches_min():
    series = _series(10.5, 9.75, 11.0, 9.74, 12.0)
    assert find_minimum(series).value == min(p.value for p in series)
    assert find_minimum(series).label == "d4"


def test_find_minimum_single_point():
    assert find_minimum(_series(7.0)) == OptimalPoint(label="d1", value=7.0)


def test_find_minimum_empty():
    with pytest.raises(EmptySeriesError):
        find_minimum(())
