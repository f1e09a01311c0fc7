"""Anchor-rate collection: currency catalog, remote estimators and the resilient fetcher."""

from .models import CURRENCY_CATALOG, Instrument, get_instrument
from .rate_fetcher import ResilientFetcher

__all__ = [
    "CURRENCY_CATALOG",
    "Instrument",
    "ResilientFetcher",
    "get_instrument",
]
