"""Human-readable text for session results."""
from typing import Optional

from travel_fx.data_collection.models import Instrument
from travel_fx.simulation.models import OptimalPoint, TrendDirection, TrendSummary

NOT_AVAILABLE = "N/A"
LOAD_FAILED_MESSAGE = "Could not load exchange rate information. Please try again shortly."


def _months(n: int) -> str:
    return f"{n} month" if n == 1 else f"{n} months"


def describe_anchor(instrument: Instrument, rate: Optional[float], quote_currency: str) -> str:
    """e.g. ``1 USD = 1300.00 KRW`` or ``100 JPY = 912.30 KRW``."""
    if rate is None:
        return NOT_AVAILABLE
    return f"{instrument.unit} {instrument.code} = {rate:.2f} {quote_currency}"


def describe_trend(summary: Optional[TrendSummary], months: int) -> str:
    if summary is None:
        return NOT_AVAILABLE
    verb = "Up" if summary.direction is TrendDirection.UP else "Down"
    return f"{verb} {summary.percent_change:.2f}% over the last {_months(months)}"


def describe_prediction(months: int) -> str:
    return f"Simulated outlook for the next {_months(months)}"


def describe_optimal_point(point: Optional[OptimalPoint], quote_currency: str) -> str:
    if point is None:
        return NOT_AVAILABLE
    return f"{point.label} ({point.value:.2f} {quote_currency})"
