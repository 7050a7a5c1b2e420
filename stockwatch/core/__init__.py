"""stockwatch core: symbol resolution, quote fetching, refresh scheduling and the watchlist."""

from stockwatch.core.app import AppState, WatchApp
from stockwatch.core.data import QuoteFetcher, WatchlistStorage
from stockwatch.core.models import Quote, RawQuoteRecord, RefreshResult, WatchlistEntry
from stockwatch.core.services import RefreshScheduler, WatchlistStore, match_key, merge, normalize, resolve

__all__ = [
    "AppState",
    "Quote",
    "QuoteFetcher",
    "RawQuoteRecord",
    "RefreshResult",
    "RefreshScheduler",
    "WatchApp",
    "WatchlistEntry",
    "WatchlistStorage",
    "WatchlistStore",
    "match_key",
    "merge",
    "normalize",
    "resolve",
]
