"""
Eastmoney batch-quote client.

One ``fetch`` call is one GET against ``ulist.np/get``: every user code is
resolved into its ``secid`` candidates, the candidates are joined into a
single query, and the ``data.diff`` array of the response is decoded into
:class:`RawQuoteRecord` objects and normalized. The batch either succeeds as
a whole or raises a :class:`FetchError`; there is no retry at this level.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from stockwatch.core.config import ProviderConfig
from stockwatch.core.exceptions import ResponseFormatError, TransportError
from stockwatch.core.logging import get_logger
from stockwatch.core.models.quote import Quote, RawQuoteRecord
from stockwatch.core.services.normalizer import normalize
from stockwatch.core.services.symbols import resolve_many

logger = get_logger(__name__)

PROVIDER_NAME = "eastmoney"

# every field consumed by RawQuoteRecord, f12/f13/f14 included
FIELDS = ",".join(f"f{n}" for n in (*range(2, 19), *range(20, 26)))


class QuoteFetcher:
    """Synchronous batch-quote fetcher, meant to run on the refresh worker."""

    def __init__(self, config: ProviderConfig | None = None, client: httpx.Client | None = None) -> None:
        self.config = config or ProviderConfig()
        self._client = client
        self._owns_client = client is None

    def __enter__(self) -> "QuoteFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.config.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def fetch(self, codes: Sequence[str]) -> list[Quote]:
        """Fetch and normalize quotes for ``codes`` in a single request."""
        if not codes:
            return []

        params = {"secids": resolve_many(codes), "fields": FIELDS}
        logger.debug(f"Fetching {len(codes)} codes from {PROVIDER_NAME}")
        try:
            response = self._ensure_client().get(self.config.endpoint, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Quote request failed: {e}")
            raise TransportError(f"request failed: {e}", PROVIDER_NAME) from e

        if not response.is_success:
            logger.warning(f"Quote request returned HTTP {response.status_code}")
            raise TransportError(
                f"HTTP {response.status_code} from quote endpoint",
                PROVIDER_NAME,
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"response is not valid JSON: {e}", PROVIDER_NAME) from e

        return [normalize(raw) for raw in self._parse_records(body)]

    def _parse_records(self, body: Any) -> list[RawQuoteRecord]:
        data = body.get("data") if isinstance(body, dict) else None
        diff = data.get("diff") if isinstance(data, dict) else None
        if not isinstance(diff, list):
            raise ResponseFormatError("response has no data.diff array", PROVIDER_NAME)

        try:
            return [RawQuoteRecord.model_validate(item) for item in diff]
        except ValidationError as e:
            raise ResponseFormatError(
                "unexpected quote record shape",
                PROVIDER_NAME,
                details={"errors": e.errors(include_url=False)},
            ) from e


__all__ = ["FIELDS", "PROVIDER_NAME", "QuoteFetcher"]
