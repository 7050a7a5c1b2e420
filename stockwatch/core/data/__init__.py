"""Data access: quote providers and watchlist storage."""

from stockwatch.core.data.providers import QuoteFetcher
from stockwatch.core.data.storage import WatchlistStorage

__all__ = ["QuoteFetcher", "WatchlistStorage"]
