"""
Series orchestrator: owns the session state and reacts to user triggers.
"""
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from travel_fx.config import SimulationSettings
from travel_fx.data_collection.models import Instrument
from travel_fx.data_collection.rate_fetcher import ResilientFetcher
from travel_fx.session.formatting import LOAD_FAILED_MESSAGE
from travel_fx.session.state import LoadingFlags, SessionState
from travel_fx.simulation.analysis import find_minimum, summarize_trend
from travel_fx.simulation.generator import BoundedRandomWalkGenerator
from travel_fx.simulation.models import OptimalPoint, TimeSeries, TrendSummary, WalkDirection
from travel_fx.utils.errors import InvalidArgument, RemoteError, TravelFxError
from travel_fx.utils.logging import get_logger

logger = get_logger(__name__)

StateListener = Callable[[SessionState], None]


class SeriesOrchestrator:
    """
    Coordinates anchor fetching, series generation and analysis for one session.

    Three triggers mutate the session: ``select_instrument``,
    ``set_historical_window_months`` and ``set_prediction_window_months``.
    Each publishes whole ``SessionState`` snapshots, so readers never observe
    a series without its matching summary.

    Every selection takes a new generation number. When its fetch resolves,
    the result is applied only if no later selection has started since;
    otherwise it is dropped (last request wins).
    """

    def __init__(
        self,
        fetcher: ResilientFetcher,
        generator: Optional[BoundedRandomWalkGenerator] = None,
        settings: Optional[SimulationSettings] = None,
    ):
        self.fetcher = fetcher
        self.settings = settings or SimulationSettings.default()
        self.generator = generator or BoundedRandomWalkGenerator(
            backward_label_format=self.settings.historical.label_format,
            forward_label_format=self.settings.prediction.label_format,
        )
        self._state = SessionState.empty(self.settings.default_window_months)
        self._generation = 0
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def get_session_state(self) -> SessionState:
        """Return the current immutable snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every published snapshot; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    async def select_instrument(self, instrument: Optional[Instrument]) -> SessionState:
        """Select a destination currency (or clear the selection with ``None``)."""
        self._generation += 1
        generation = self._generation
        default_months = self.settings.default_window_months
        log_extra = {"correlation_id": f"select-{generation}"}

        if instrument is None:
            logger.info("Selection cleared", extra=log_extra)
            self._publish(SessionState.empty(default_months))
            return self._state

        logger.info(f"Selected {instrument.code}, fetching anchor rate", extra=log_extra)
        self._publish(SessionState(
            selected_instrument=instrument,
            historical_months=default_months,
            prediction_months=default_months,
            loading=LoadingFlags(fetching_anchor=True),
        ))

        try:
            rate = await self.fetcher.fetch_anchor_rate(instrument.code, self.settings.quote_currency)
        except RemoteError as e:
            if generation != self._generation:
                logger.debug(f"Dropping failed fetch for superseded selection {instrument.code}", extra=log_extra)
                return self._state
            logger.error(f"Failed to load anchor rate for {instrument.code}: {e} ({e.reason})", extra=log_extra)
            self._publish(SessionState(
                selected_instrument=instrument,
                historical_months=self._state.historical_months,
                prediction_months=self._state.prediction_months,
                last_error=LOAD_FAILED_MESSAGE,
            ))
            return self._state

        if generation != self._generation:
            logger.debug(f"Dropping rate for superseded selection {instrument.code}", extra=log_extra)
            return self._state

        # Windows may have been changed while the fetch was in flight
        historical_months = self._state.historical_months
        prediction_months = self._state.prediction_months

        anchor = rate * instrument.unit
        try:
            historical, summary = self._build_historical(anchor, historical_months)
            prediction, optimal = self._build_prediction(anchor, prediction_months)
        except TravelFxError as e:
            logger.error(f"Could not build series for {instrument.code} from anchor {anchor!r}: {e}", extra=log_extra)
            self._publish(SessionState(
                selected_instrument=instrument,
                historical_months=historical_months,
                prediction_months=prediction_months,
                last_error=LOAD_FAILED_MESSAGE,
            ))
            return self._state

        self._publish(SessionState(
            selected_instrument=instrument,
            anchor_rate=anchor,
            historical_months=historical_months,
            prediction_months=prediction_months,
            historical_series=historical,
            prediction_series=prediction,
            historical_summary=summary,
            optimal_point=optimal,
        ))
        logger.info(
            f"Published series for {instrument.code} (anchor {anchor:.2f} {self.settings.quote_currency})",
            extra=log_extra,
        )
        return self._state

    def set_historical_window_months(self, months: int) -> SessionState:
        """Regenerate only the historical series and its trend summary."""
        self._check_window(months)
        state = self._state
        if state.selected_instrument is None or state.anchor_rate is None:
            self._publish(replace(state, historical_months=months))
            return self._state

        self._publish(replace(
            state,
            historical_months=months,
            loading=replace(state.loading, regenerating_historical=True),
        ))
        try:
            series, summary = self._build_historical(state.anchor_rate, months)
        except Exception:
            self._publish(replace(
                self._state, loading=replace(self._state.loading, regenerating_historical=False)
            ))
            raise

        self._publish(replace(
            self._state,
            historical_series=series,
            historical_summary=summary,
            loading=replace(self._state.loading, regenerating_historical=False),
        ))
        return self._state

    def set_prediction_window_months(self, months: int) -> SessionState:
        """Regenerate only the prediction series and its optimal point."""
        self._check_window(months)
        state = self._state
        if state.selected_instrument is None or state.anchor_rate is None:
            self._publish(replace(state, prediction_months=months))
            return self._state

        self._publish(replace(
            state,
            prediction_months=months,
            loading=replace(state.loading, regenerating_prediction=True),
        ))
        try:
            series, optimal = self._build_prediction(state.anchor_rate, months)
        except Exception:
            self._publish(replace(
                self._state, loading=replace(self._state.loading, regenerating_prediction=False)
            ))
            raise

        self._publish(replace(
            self._state,
            prediction_series=series,
            optimal_point=optimal,
            loading=replace(self._state.loading, regenerating_prediction=False),
        ))
        return self._state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_window(self, months: int) -> None:
        if months not in self.settings.window_choices:
            raise InvalidArgument(
                f"Window must be one of {list(self.settings.window_choices)} months (got {months!r})"
            )

    def _build_historical(self, anchor: float, months: int) -> Tuple[TimeSeries, TrendSummary]:
        series = self.generator.generate(
            anchor,
            months * self.settings.days_per_month,
            WalkDirection.BACKWARD,
            self.settings.historical.bounds,
            label_format=self.settings.historical.label_format,
        )
        return series, summarize_trend(series)

    def _build_prediction(self, anchor: float, months: int) -> Tuple[TimeSeries, OptimalPoint]:
        series = self.generator.generate(
            anchor,
            months * self.settings.days_per_month,
            WalkDirection.FORWARD,
            self.settings.prediction.bounds,
            label_format=self.settings.prediction.label_format,
        )
        return series, find_minimum(series)
