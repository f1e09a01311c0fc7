"""
Currency catalog for travel destinations.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Instrument:
    """
    A destination currency the user can plan an exchange for.
    """
    code: str  # e.g., "USD"
    display_name: str  # e.g., "United States"
    unit: int = 1  # Displayed rates refer to this many units (JPY is quoted per 100)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.code})"


CURRENCY_CATALOG: Tuple[Instrument, ...] = (
    Instrument("USD", "United States"),
    Instrument("JPY", "Japan", unit=100),
    Instrument("EUR", "Europe"),
    Instrument("GBP", "United Kingdom"),
    Instrument("CAD", "Canada"),
    Instrument("CNY", "China"),
    Instrument("THB", "Thailand"),
    Instrument("VND", "Vietnam"),
    Instrument("AUD", "Australia"),
    Instrument("CHF", "Switzerland"),
    Instrument("SGD", "Singapore"),
    Instrument("HKD", "Hong Kong"),
)

_BY_CODE: Dict[str, Instrument] = {i.code: i for i in CURRENCY_CATALOG}


def get_instrument(code: str) -> Optional[Instrument]:
    """Look up a catalog instrument by currency code (case-insensitive)."""
    return _BY_CODE.get((code or "").strip().upper())
