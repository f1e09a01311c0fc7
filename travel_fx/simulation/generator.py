"""Bounded random-walk generator for synthetic exchange-rate series."""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Callable, List, Optional

from travel_fx.simulation.models import RatePoint, TimeSeries, WalkBounds, WalkDirection
from travel_fx.utils.errors import InvalidArgument
from travel_fx.utils.logging import get_logger

logger = get_logger(__name__)


class BoundedRandomWalkGenerator:
    """Generate demo rate series pinned to an anchor rate.

    Each step moves by ``uniform(-0.5, 0.5) * anchor * step_fraction`` from the
    previously stored (2 dp rounded) value and is clamped into
    ``[anchor * lower_factor, anchor * upper_factor]``.

    Args:
        rng: Source of uniform random numbers; pass a seeded
            ``random.Random`` for reproducible series.
        today: Returns the date labels are counted from.
        backward_label_format: strftime format for BACKWARD labels.
        forward_label_format: strftime format for FORWARD labels.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = date.today,
        backward_label_format: str = "%m/%d",
        forward_label_format: str = "%Y-%m-%d",
    ):
        self.rng = rng or random.Random()
        self.today = today
        self.label_formats = {
            WalkDirection.BACKWARD: backward_label_format,
            WalkDirection.FORWARD: forward_label_format,
        }

    def generate(
        self,
        anchor: float,
        days: int,
        direction: WalkDirection,
        bounds: WalkBounds,
        label_format: Optional[str] = None,
    ) -> TimeSeries:
        """Build a BACKWARD series of ``days`` points or a FORWARD one of ``days + 1``."""
        if not anchor > 0:
            raise InvalidArgument(f"anchor must be positive (got {anchor!r})")
        if isinstance(days, bool) or not isinstance(days, int) or days < 0:
            raise InvalidArgument(f"days must be a non-negative integer (got {days!r})")

        fmt = label_format or self.label_formats[direction]
        start = self.today()

        if direction is WalkDirection.BACKWARD:
            values = self._walk(anchor, days, bounds)
            values.reverse()
            dates = [start - timedelta(days=days - 1 - i) for i in range(days)]
        else:
            values = self._walk(anchor, days + 1, bounds)
            dates = [start + timedelta(days=i) for i in range(days + 1)]

        logger.debug(
            f"Generated {direction.value} series of {len(values)} points around anchor {anchor}"
        )
        return tuple(RatePoint(label=d.strftime(fmt), value=v) for d, v in zip(dates, values))

    def _walk(self, anchor: float, count: int, bounds: WalkBounds) -> List[float]:
        """Walk ``count`` values outward from the anchor, anchor first."""
        if count == 0:
            return []

        floor = anchor * bounds.lower_factor
        ceiling = anchor * bounds.upper_factor
        step = anchor * bounds.step_fraction

        values = [round(anchor, 2)]
        while len(values) < count:
            nxt = values[-1] + (self.rng.random() - 0.5) * step
            nxt = min(max(nxt, floor), ceiling)
            values.append(round(nxt, 2))
        return values
