"""Foreground controller: owns the watchlist, the UI state and the refresh cadence."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from stockwatch.core.data.storage import WatchlistStorage
from stockwatch.core.exceptions import StockWatchError, format_error_message
from stockwatch.core.logging import get_logger
from stockwatch.core.models.quote import WatchlistEntry
from stockwatch.core.services.scheduler import RefreshScheduler
from stockwatch.core.services.watchlist import WatchlistStore

logger = get_logger(__name__)

DEFAULT_REFRESH_INTERVAL = 60


class AppState(str, Enum):
    """界面状态."""

    NORMAL = "normal"
    ADDING = "adding"


class WatchApp:
    """Everything the terminal front end drives.

    All methods are meant to be called from the foreground thread only.
    Errors never propagate out of the interaction methods; they end up in
    :attr:`error` for display.
    """

    def __init__(
        self,
        scheduler: RefreshScheduler,
        storage: WatchlistStorage,
        store: WatchlistStore | None = None,
        refresh_interval: int = DEFAULT_REFRESH_INTERVAL,
    ) -> None:
        self.scheduler = scheduler
        self.storage = storage
        self.store = store or WatchlistStore()
        self.refresh_interval = refresh_interval
        self.state = AppState.NORMAL
        self.input = ""
        self.error = ""
        self.selected: int | None = None
        self.tick_count = 0
        self.last_refresh: datetime | None = None
        self.should_exit = False

    @property
    def entries(self) -> list[WatchlistEntry]:
        return self.store.entries

    def load(self) -> None:
        """Load the saved list and request the first refresh."""
        try:
            codes = self.storage.load()
        except StockWatchError as e:
            self._report(e)
            return
        skipped = self.store.replace(codes)
        if skipped:
            self.error = f"Skipped duplicate codes: {', '.join(skipped)}"
        self.refresh()

    def save(self) -> None:
        try:
            self.storage.save(self.store.codes())
        except StockWatchError as e:
            self._report(e)

    def refresh(self) -> None:
        """Ask the worker for fresh quotes of the whole list."""
        if not len(self.store):
            return
        try:
            self.scheduler.request_refresh(self.store.codes())
        except StockWatchError as e:
            self._report(e)

    def drain_events(self) -> None:
        """Apply every finished refresh without advancing the tick counter."""
        for result in self.scheduler.drain_results():
            if result.ok:
                self.store.merge(result.quotes)
                self.last_refresh = datetime.now()
                self.error = ""
            else:
                self.error = result.error or ""

    def on_tick(self) -> None:
        self.tick_count += 1
        self.drain_events()
        if self.tick_count % self.refresh_interval == 0 and self.state is AppState.NORMAL:
            self.refresh()

    # 新增股票
    def begin_add(self) -> None:
        self.state = AppState.ADDING
        self.input = ""

    def type_text(self, text: str) -> None:
        if self.state is AppState.ADDING:
            self.input += text

    def backspace(self) -> None:
        if self.state is AppState.ADDING:
            self.input = self.input[:-1]

    def cancel_add(self) -> None:
        self.state = AppState.NORMAL
        self.input = ""

    def submit_add(self) -> bool:
        """Add the typed code; returns True when the list changed."""
        code = self.input.strip()
        self.state = AppState.NORMAL
        self.input = ""
        if not code:
            return False
        return self.add(code)

    def add(self, code: str) -> bool:
        try:
            self.store.add(code)
        except StockWatchError as e:
            self._report(e)
            return False
        self.refresh()
        self.save()
        return True

    # 选择与排序
    def select(self, index: int) -> None:
        if 0 <= index < len(self.store):
            self.selected = index

    def select_previous(self) -> None:
        if not len(self.store):
            return
        current = self.selected or 0
        self.selected = max(current - 1, 0)

    def select_next(self) -> None:
        if not len(self.store):
            return
        if self.selected is None:
            self.selected = 0
            return
        self.selected = min(self.selected + 1, len(self.store) - 1)

    def selected_entry(self) -> WatchlistEntry | None:
        if self.selected is None or not 0 <= self.selected < len(self.store):
            return None
        return self.store[self.selected]

    def delete_selected(self) -> None:
        if self.selected_entry() is None:
            return
        self.store.remove(self.selected)  # type: ignore[arg-type]
        self.selected = None
        self.save()

    def move_selected_up(self) -> None:
        if self.selected_entry() is None or self.selected == 0:
            return
        self.selected = self.store.move_up(self.selected)  # type: ignore[arg-type]
        self.save()

    def move_selected_down(self) -> None:
        if self.selected_entry() is None or self.selected == len(self.store) - 1:
            return
        self.selected = self.store.move_down(self.selected)  # type: ignore[arg-type]
        self.save()

    def quit(self) -> None:
        self.should_exit = True
        self.scheduler.close()

    def _report(self, error: StockWatchError) -> None:
        logger.bind(error_code=error.error_code).warning(error.message)
        self.error = format_error_message(error)


__all__ = ["AppState", "DEFAULT_REFRESH_INTERVAL", "WatchApp"]
