"""
Travel FX - exchange planning for travellers.

Fetches the current exchange rate for a destination currency and builds
simulated historical and prediction series around it, with a trend summary
and the cheapest predicted exchange date.
"""

__version__ = "0.1.0"
