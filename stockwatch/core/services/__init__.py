"""Core services."""

from stockwatch.core.services.normalizer import normalize, price_divisor
from stockwatch.core.services.scheduler import RefreshScheduler
from stockwatch.core.services.symbols import match_key, resolve, resolve_many
from stockwatch.core.services.watchlist import WatchlistStore, merge

__all__ = [
    "RefreshScheduler",
    "WatchlistStore",
    "match_key",
    "merge",
    "normalize",
    "price_divisor",
    "resolve",
    "resolve_many",
]
