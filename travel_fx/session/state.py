"""Session state snapshot owned by the series orchestrator."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from travel_fx.data_collection.models import Instrument
from travel_fx.simulation.models import OptimalPoint, TimeSeries, TrendSummary


@dataclass(frozen=True)
class LoadingFlags:
    fetching_anchor: bool = False
    regenerating_historical: bool = False
    regenerating_prediction: bool = False

    @property
    def any(self) -> bool:
        return self.fetching_anchor or self.regenerating_historical or self.regenerating_prediction


@dataclass(frozen=True)
class SessionState:
    """
    Everything the UI needs to render one planning session.

    Instances are immutable; the orchestrator publishes a new snapshot for
    every change so a series always travels with its matching summary.
    """

    selected_instrument: Optional[Instrument] = None
    anchor_rate: Optional[float] = None
    historical_months: int = 1
    prediction_months: int = 1
    historical_series: TimeSeries = ()
    prediction_series: TimeSeries = ()
    historical_summary: Optional[TrendSummary] = None
    optimal_point: Optional[OptimalPoint] = None
    loading: LoadingFlags = field(default_factory=LoadingFlags)
    last_error: Optional[str] = None

    @classmethod
    def empty(cls, default_window_months: int = 1) -> "SessionState":
        return cls(historical_months=default_window_months, prediction_months=default_window_months)

    @property
    def has_data(self) -> bool:
        return self.anchor_rate is not None and bool(self.historical_series or self.prediction_series)
