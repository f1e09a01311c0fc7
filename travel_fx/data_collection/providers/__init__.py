"""Estimator factory and exports."""

from .base import BaseRateEstimator
from .gemini_estimator import GeminiRateEstimator


def get_estimator(name: str, settings=None) -> BaseRateEstimator:
    """Get estimator by canonical name.

    Canonical names:
    - "gemini"
    """
    if name == "gemini":
        return GeminiRateEstimator(settings)
    raise ValueError(f"Unknown estimator: {name}")


__all__ = [
    "BaseRateEstimator",
    "GeminiRateEstimator",
    "get_estimator",
]
