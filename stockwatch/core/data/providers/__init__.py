"""Quote providers."""

from stockwatch.core.data.providers.eastmoney import FIELDS, PROVIDER_NAME, QuoteFetcher

__all__ = ["FIELDS", "PROVIDER_NAME", "QuoteFetcher"]
