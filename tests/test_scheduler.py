"""Tests for the background refresh worker and its channels."""

from __future__ import annotations

import threading
import time

import pytest

from stockwatch.core.exceptions import TransportError, WorkerUnavailableError
from stockwatch.core.models import Quote
from stockwatch.core.services.scheduler import RefreshScheduler


class FakeFetcher:
    """Records calls; blocks inside ``fetch`` until ``gate`` is set."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.error = error
        self.gate = threading.Event()
        self.gate.set()
        self.started = threading.Event()
        self.closed = False

    def fetch(self, codes):
        self.calls.append(tuple(codes))
        self.started.set()
        self.gate.wait(5)
        if self.error is not None:
            raise self.error
        return [Quote.placeholder(code) for code in codes]

    def close(self):
        self.closed = True


def wait_for_results(scheduler: RefreshScheduler, count: int, timeout: float = 5.0):
    results = []
    deadline = time.monotonic() + timeout
    while len(results) < count and time.monotonic() < deadline:
        results.extend(scheduler.drain_results())
        time.sleep(0.01)
    return results


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def scheduler(fetcher):
    scheduler = RefreshScheduler(fetcher)
    yield scheduler
    fetcher.gate.set()
    scheduler.close(timeout=2)


class TestRefreshScheduler:
    def test_single_worker_thread_started_once(self, scheduler):
        assert scheduler.is_alive
        names = [thread.name for thread in threading.enumerate()]
        assert names.count("stockwatch-refresh") >= 1

    def test_drain_without_results_returns_immediately(self, scheduler):
        start = time.monotonic()
        assert scheduler.drain_results() == []
        assert time.monotonic() - start < 0.5

    def test_successful_refresh_publishes_quotes(self, scheduler, fetcher):
        scheduler.request_refresh(["600519", "NVDA"])

        results = wait_for_results(scheduler, 1)

        assert len(results) == 1
        assert results[0].ok
        assert [quote.provider_code for quote in results[0].quotes] == ["600519", "NVDA"]
        assert fetcher.calls == [("600519", "NVDA")]

    def test_request_does_not_block_while_fetching(self, scheduler, fetcher):
        fetcher.gate.clear()
        scheduler.request_refresh(["A"])
        assert fetcher.started.wait(2)

        start = time.monotonic()
        scheduler.request_refresh(["B"])
        scheduler.request_refresh(["C"])
        assert time.monotonic() - start < 0.5

    def test_burst_coalesces_into_one_extra_fetch(self, scheduler, fetcher):
        fetcher.gate.clear()
        scheduler.request_refresh(["A"])
        assert fetcher.started.wait(2)
        scheduler.request_refresh(["B"])
        scheduler.request_refresh(["C"])
        fetcher.gate.set()

        results = wait_for_results(scheduler, 2)
        time.sleep(0.1)
        results.extend(scheduler.drain_results())

        assert fetcher.calls == [("A",), ("C",)]
        assert len(results) == 2

    def test_fetch_error_is_published_as_failure(self):
        fetcher = FakeFetcher(error=TransportError("connection refused", "eastmoney"))
        scheduler = RefreshScheduler(fetcher)
        try:
            scheduler.request_refresh(["600519"])
            results = wait_for_results(scheduler, 1)
        finally:
            scheduler.close(timeout=2)

        assert not results[0].ok
        assert results[0].error_code == "NETWORK_ERROR"
        assert "connection refused" in results[0].error

    def test_unexpected_error_keeps_worker_alive(self):
        fetcher = FakeFetcher(error=RuntimeError("boom"))
        scheduler = RefreshScheduler(fetcher)
        try:
            scheduler.request_refresh(["600519"])
            results = wait_for_results(scheduler, 1)
            assert scheduler.is_alive
        finally:
            scheduler.close(timeout=2)

        assert not results[0].ok
        assert "boom" in results[0].error

    def test_closed_worker_rejects_requests(self, fetcher):
        scheduler = RefreshScheduler(fetcher)
        scheduler.close(timeout=2)

        assert not scheduler.is_alive
        assert fetcher.closed
        with pytest.raises(WorkerUnavailableError):
            scheduler.request_refresh(["600519"])

    def test_close_is_idempotent(self, scheduler):
        scheduler.close(timeout=2)
        scheduler.close(timeout=2)
        assert not scheduler.is_alive
