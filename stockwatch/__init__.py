"""
stockwatch - 终端自选股行情

Polls the Eastmoney batch-quote API for a handful of user-chosen codes and
keeps them in a user-ordered watchlist.
"""

__version__ = "0.1.0"

from stockwatch.core import (  # noqa: E402
    Quote,
    QuoteFetcher,
    RefreshScheduler,
    WatchApp,
    WatchlistStorage,
    WatchlistStore,
    match_key,
    merge,
    normalize,
    resolve,
)

__all__ = [
    "__version__",
    "Quote",
    "QuoteFetcher",
    "RefreshScheduler",
    "WatchApp",
    "WatchlistStorage",
    "WatchlistStore",
    "match_key",
    "merge",
    "normalize",
    "resolve",
]
