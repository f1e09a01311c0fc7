"""Estimator base class for remote exchange-rate sources."""
from __future__ import annotations

from abc import ABC, abstractmethod

from travel_fx.utils.errors import InvalidArgument


class BaseRateEstimator(ABC):
    """Abstract base class for remote numeric rate estimators.

    Implementations raise ``RateLimitError`` when the transport signals a rate
    limit and ``RemoteError`` for every other transport or parse failure.
    """

    NAME: str = "base"

    @abstractmethod
    async def estimate_rate(self, base: str, quote: str) -> float:
        """Return how many ``quote`` units one ``base`` unit buys."""

    @staticmethod
    def validate_currency_code(code: str) -> None:
        """Reject empty or blank currency codes."""
        if not code or not code.strip():
            raise InvalidArgument(f"Invalid currency code: {code!r}")
