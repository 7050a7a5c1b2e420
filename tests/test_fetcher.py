"""Tests for the Eastmoney batch-quote fetcher, using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from stockwatch.core.config import ProviderConfig
from stockwatch.core.data.providers.eastmoney import FIELDS, QuoteFetcher
from stockwatch.core.exceptions import ResponseFormatError, TransportError


def _fetcher(handler) -> QuoteFetcher:
    config = ProviderConfig()
    client = httpx.Client(base_url=config.base_url, transport=httpx.MockTransport(handler))
    return QuoteFetcher(config, client=client)


class TestQuoteFetcher:
    def test_empty_input_makes_no_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        assert _fetcher(handler).fetch([]) == []

    def test_single_batched_request(self, raw_record):
        seen: list[httpx.Request] = []

        def handler(request):
            seen.append(request)
            return httpx.Response(
                200,
                json={"data": {"total": 2, "diff": [raw_record(), raw_record(f12="NVDA", f13=105, f14="NVIDIA")]}},
            )

        quotes = _fetcher(handler).fetch(["00700", "x105.NVDA"])

        assert len(seen) == 1
        request = seen[0]
        assert request.url.path == "/api/qt/ulist.np/get"
        assert request.url.params["secids"] == "1.00700,0.00700,116.00700,105.NVDA"
        assert request.url.params["fields"] == FIELDS
        assert [quote.provider_code for quote in quotes] == ["00700", "NVDA"]
        assert quotes[0].price == 123.0

    def test_field_selector_covers_every_record_field(self):
        fields = FIELDS.split(",")
        assert "f12" in fields and "f13" in fields and "f14" in fields
        assert "f19" not in fields
        assert fields[0] == "f2" and fields[-1] == "f25"

    def test_connection_failure_is_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as exc_info:
            _fetcher(handler).fetch(["600519"])
        assert exc_info.value.error_code == "NETWORK_ERROR"

    def test_non_2xx_is_transport_error(self):
        fetcher = _fetcher(lambda request: httpx.Response(503, text="busy"))

        with pytest.raises(TransportError) as exc_info:
            fetcher.fetch(["600519"])
        assert exc_info.value.status_code == 503
        assert exc_info.value.details["status_code"] == 503

    def test_invalid_json_is_format_error(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, text="{not json"))

        with pytest.raises(ResponseFormatError):
            fetcher.fetch(["600519"])

    @pytest.mark.parametrize("body", [{"data": None}, {"data": {"total": 0}}, {"rc": 0}, [1, 2]])
    def test_missing_diff_array_is_format_error(self, body):
        fetcher = _fetcher(lambda request: httpx.Response(200, json=body))

        with pytest.raises(ResponseFormatError):
            fetcher.fetch(["600519"])

    def test_malformed_record_fails_whole_batch(self, raw_record):
        body = {"data": {"diff": [raw_record(), {"f14": "no code"}]}}
        fetcher = _fetcher(lambda request: httpx.Response(200, json=body))

        with pytest.raises(ResponseFormatError):
            fetcher.fetch(["00700", "600519"])

    def test_injected_client_is_not_closed(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        with QuoteFetcher(client=client):
            pass
        assert not client.is_closed


@pytest.mark.integration
def test_live_provider_returns_quotes():
    with QuoteFetcher() as fetcher:
        quotes = fetcher.fetch(["600519"])
    assert any(quote.provider_code == "600519" for quote in quotes)
