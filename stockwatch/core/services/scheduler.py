"""
Background refresh scheduling.

The foreground thread talks to a single long-lived worker through two
queues. The request queue holds at most one pending request and a newer
request replaces a pending one, so bursts of triggers collapse into one
in-flight fetch plus one queued fetch. The result queue is unbounded and is
drained without blocking. The worker produces immutable ``RefreshResult``
messages only; it never sees the watchlist.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Sequence
from typing import Protocol

from stockwatch.core.exceptions import StockWatchError, WorkerUnavailableError, format_error_message
from stockwatch.core.logging import get_logger
from stockwatch.core.models.quote import Quote, RefreshResult

logger = get_logger(__name__)

_STOP = object()


class Fetcher(Protocol):
    def fetch(self, codes: Sequence[str]) -> list[Quote]: ...


class RefreshScheduler:
    """Owns the refresh worker and its request/result channels."""

    def __init__(self, fetcher: Fetcher, *, name: str = "stockwatch-refresh") -> None:
        self.fetcher = fetcher
        self._requests: queue.Queue[object] = queue.Queue(maxsize=1)
        self._results: queue.Queue[RefreshResult] = queue.Queue()
        self._closed = False
        self._worker = threading.Thread(target=self._run, name=name, daemon=True)
        self._worker.start()

    @property
    def is_alive(self) -> bool:
        return not self._closed and self._worker.is_alive()

    def request_refresh(self, codes: Sequence[str]) -> None:
        """Queue a refresh of ``codes`` without blocking.

        A request still waiting for the worker is replaced by this one.
        Raises :class:`WorkerUnavailableError` once the worker has stopped.
        """
        if not self.is_alive:
            raise WorkerUnavailableError()
        self._offer(tuple(codes))

    def drain_results(self) -> list[RefreshResult]:
        """Return every result published so far, possibly none."""
        results: list[RefreshResult] = []
        while True:
            try:
                results.append(self._results.get_nowait())
            except queue.Empty:
                return results

    def close(self, timeout: float | None = None) -> None:
        """Ask the worker to stop; an in-flight fetch is not interrupted.

        With ``timeout`` the call waits up to that long for the worker to exit.
        """
        if self._closed:
            return
        self._closed = True
        self._offer(_STOP)
        if timeout is not None:
            self._worker.join(timeout)

    def _offer(self, item: object) -> None:
        try:
            self._requests.put_nowait(item)
            return
        except queue.Full:
            pass
        try:
            self._requests.get_nowait()
        except queue.Empty:
            pass
        try:
            self._requests.put_nowait(item)
        except queue.Full:
            # the worker picked up the stale request and another producer refilled the slot
            logger.debug("Refresh request dropped, one is already pending")

    def _run(self) -> None:
        logger.info("Refresh worker started")
        try:
            while True:
                item = self._requests.get()
                if item is _STOP:
                    break
                self._results.put(self._fetch(item))  # type: ignore[arg-type]
        finally:
            close = getattr(self.fetcher, "close", None)
            if callable(close):
                close()
            logger.info("Refresh worker stopped")

    def _fetch(self, codes: tuple[str, ...]) -> RefreshResult:
        try:
            return RefreshResult.success(self.fetcher.fetch(codes))
        except StockWatchError as e:
            return RefreshResult.failure(format_error_message(e), e.error_code)
        except Exception as e:
            # keep the worker alive; the next tick retries
            logger.exception("Unexpected error during refresh")
            return RefreshResult.failure(format_error_message(e))


__all__ = ["Fetcher", "RefreshScheduler"]
