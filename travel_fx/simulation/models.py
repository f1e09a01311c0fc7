"""Value types for simulated exchange-rate series."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from travel_fx.utils.errors import InvalidArgument


class WalkDirection(Enum):
    """Which end of the series is pinned to the anchor rate."""
    BACKWARD = "backward"  # last point is the anchor (historical view)
    FORWARD = "forward"  # first point is the anchor (prediction view)


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class RatePoint:
    """A single labelled rate; ``label`` is display text, not a parsed date."""
    label: str
    value: float


TimeSeries = Tuple[RatePoint, ...]


@dataclass(frozen=True)
class TrendSummary:
    percent_change: float  # absolute percentage, 2 dp
    direction: TrendDirection


@dataclass(frozen=True)
class OptimalPoint:
    label: str
    value: float


@dataclass(frozen=True)
class WalkBounds:
    """Clamp band and step size, all relative to the anchor rate."""
    lower_factor: float
    upper_factor: float
    step_fraction: float

    def __post_init__(self):
        if not self.lower_factor < 1 <= self.upper_factor:
            raise InvalidArgument(
                f"Bounds must satisfy lower_factor < 1 <= upper_factor "
                f"(got {self.lower_factor}, {self.upper_factor})"
            )
        if self.step_fraction < 0:
            raise InvalidArgument(f"step_fraction must be >= 0 (got {self.step_fraction})")


HISTORICAL_BOUNDS = WalkBounds(lower_factor=0.8, upper_factor=1.2, step_fraction=0.005)
PREDICTION_BOUNDS = WalkBounds(lower_factor=0.95, upper_factor=1.05, step_fraction=0.003)
