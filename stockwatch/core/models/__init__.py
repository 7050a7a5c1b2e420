"""Data models module."""

from stockwatch.core.models.market import ALPHA_PROBE_MARKETS, NUMERIC_PROBE_MARKETS, MarketCode
from stockwatch.core.models.quote import Quote, RawQuoteRecord, RefreshResult, WatchlistEntry

__all__ = [
    "MarketCode",
    "NUMERIC_PROBE_MARKETS",
    "ALPHA_PROBE_MARKETS",
    "Quote",
    "RawQuoteRecord",
    "RefreshResult",
    "WatchlistEntry",
]
