from __future__ import annotations

import asyncio
import random
from typing import Optional

import typer

from travel_fx.config import load_config
from travel_fx.data_collection.models import CURRENCY_CATALOG, get_instrument
from travel_fx.data_collection.providers import GeminiRateEstimator
from travel_fx.data_collection.rate_fetcher import ResilientFetcher
from travel_fx.cli.display import DisplayManager
from travel_fx.session.orchestrator import SeriesOrchestrator
from travel_fx.simulation.generator import BoundedRandomWalkGenerator
from travel_fx.utils.errors import TravelFxError


app = typer.Typer(add_completion=False, help="Travel FX exchange planner CLI")


@app.command("currencies")
def currencies():
    """List the destination currencies that can be planned for."""
    DisplayManager().show_catalog(CURRENCY_CATALOG)


@app.command("outlook")
def outlook(
    code: str = typer.Argument(..., help="Destination currency code, e.g., USD"),
    historical: int = typer.Option(1, "--historical", "-H", help="Historical window in months (1, 3, 6, 9, 12)"),
    prediction: int = typer.Option(1, "--prediction", "-P", help="Prediction window in months (1, 3, 6, 9, 12)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for reproducible simulated series"),
    config_path: str = typer.Option("config.yaml", "--config", "-c", help="Path to YAML configuration"),
):
    """Fetch the current rate for a destination and show simulated history and outlook."""
    display = DisplayManager()

    instrument = get_instrument(code)
    if instrument is None:
        typer.secho(f"Unknown currency: {code}", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    try:
        cfg = load_config(config_path)
        settings = cfg.simulation
        for label, months in (("historical", historical), ("prediction", prediction)):
            if months not in settings.window_choices:
                typer.secho(
                    f"Invalid {label} window: {months} (choose from {list(settings.window_choices)})",
                    fg=typer.colors.RED,
                )
                raise typer.Exit(code=2)

        fetcher = ResilientFetcher(GeminiRateEstimator(cfg.estimator), policy=cfg.retry_policy)
        generator = BoundedRandomWalkGenerator(
            rng=random.Random(seed),
            backward_label_format=settings.historical.label_format,
            forward_label_format=settings.prediction.label_format,
        )
        orchestrator = SeriesOrchestrator(fetcher, generator=generator, settings=settings)

        state = asyncio.run(orchestrator.select_instrument(instrument))
        if state.last_error is None:
            if historical != settings.default_window_months:
                orchestrator.set_historical_window_months(historical)
            if prediction != settings.default_window_months:
                orchestrator.set_prediction_window_months(prediction)
    except TravelFxError as e:
        typer.secho(f"Failed to build outlook: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    state = orchestrator.get_session_state()
    display.show_session(state, settings.quote_currency)
    if state.last_error:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
