"""
Rich rendering of a planning session for the terminal
"""

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from travel_fx.data_collection.models import Instrument
from travel_fx.session.formatting import (
    describe_anchor,
    describe_optimal_point,
    describe_prediction,
    describe_trend,
)
from travel_fx.session.state import SessionState
from travel_fx.simulation.models import RatePoint, TrendDirection


class DisplayManager:
    """Renders catalog listings and session snapshots using Rich"""

    def __init__(self, console: Console = None, max_rows: int = 12):
        self.console = console or Console(width=100)
        self.max_rows = max_rows

    def show_catalog(self, instruments: Iterable[Instrument]) -> None:
        table = Table(title="Destination currencies", box=box.SIMPLE_HEAVY)
        table.add_column("Code", style="bold cyan")
        table.add_column("Destination")
        table.add_column("Quoted per", justify="right")
        for instrument in instruments:
            table.add_row(instrument.code, instrument.display_name, str(instrument.unit))
        self.console.print(table)

    def show_session(self, state: SessionState, quote_currency: str) -> None:
        """Display the current rate, trend, outlook and optimal exchange point"""
        instrument = state.selected_instrument
        if instrument is None:
            self.console.print("[dim]No destination selected.[/dim]")
            return

        if state.last_error:
            self.show_error(state.last_error)
            return

        if state.loading.any:
            self.console.print(f"[dim]Loading {instrument.code}...[/dim]")
            return

        trend_color = "green"
        if state.historical_summary and state.historical_summary.direction is TrendDirection.DOWN:
            trend_color = "red"

        lines = [
            f"[bold]Current rate:[/bold] {describe_anchor(instrument, state.anchor_rate, quote_currency)}",
            f"[bold]Trend:[/bold]        [{trend_color}]"
            f"{describe_trend(state.historical_summary, state.historical_months)}[/{trend_color}]",
            f"[bold]Outlook:[/bold]      {describe_prediction(state.prediction_months)}",
            f"[bold]Best time:[/bold]    [yellow]"
            f"{describe_optimal_point(state.optimal_point, quote_currency)}[/yellow]",
        ]
        self.console.print(Panel("\n".join(lines), title=str(instrument), border_style="blue"))

        self.console.print(self._series_table("Historical (simulated)", state.historical_series))
        self.console.print(self._series_table("Prediction (simulated)", state.prediction_series))
        self.console.print("[dim]Simulated demo data; actual rates will differ.[/dim]")

    def show_error(self, message: str) -> None:
        self.console.print(Panel(message, title="Error", border_style="red"))

    def _series_table(self, title: str, series) -> Table:
        table = Table(title=title, box=box.MINIMAL)
        table.add_column("Date")
        table.add_column("Rate", justify="right")
        for point in self._sample(series):
            table.add_row(point.label, f"{point.value:.2f}")
        return table

    def _sample(self, series) -> Iterable[RatePoint]:
        # Evenly thin long series, always keeping both ends
        if len(series) <= self.max_rows:
            return series
        stride = (len(series) - 1) / (self.max_rows - 1)
        return [series[round(i * stride)] for i in range(self.max_rows)]
