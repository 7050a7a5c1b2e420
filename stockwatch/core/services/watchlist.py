"""Ordered, user-owned watchlist and the merge of fetched quotes into it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from stockwatch.core.exceptions import DuplicateSymbolError
from stockwatch.core.logging import get_logger
from stockwatch.core.models.quote import Quote, WatchlistEntry
from stockwatch.core.services.symbols import match_key

logger = get_logger(__name__)


def merge(entries: list[WatchlistEntry], fetched: Sequence[Quote]) -> list[WatchlistEntry]:
    """按归一化代码把新行情写回现有列表, 保留顺序和用户输入的代码.

    Each entry takes the first quote whose provider code normalizes to the
    entry's match key; unmatched entries keep their previous quote.
    """
    by_key: dict[str, Quote] = {}
    for quote in fetched:
        by_key.setdefault(match_key(quote.provider_code, manual_marker=False), quote)

    for entry in entries:
        quote = by_key.get(match_key(entry.user_code))
        if quote is not None:
            entry.quote = quote
    return entries


class WatchlistStore:
    """In-memory ordered collection of :class:`WatchlistEntry`.

    Owned by the foreground thread; the refresh worker never touches it.
    """

    def __init__(self, codes: Iterable[str] = ()) -> None:
        self._entries: list[WatchlistEntry] = []
        for code in codes:
            self.add(code)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WatchlistEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> WatchlistEntry:
        return self._entries[index]

    @property
    def entries(self) -> list[WatchlistEntry]:
        return self._entries

    def codes(self) -> list[str]:
        """User codes in display order."""
        return [entry.user_code for entry in self._entries]

    def index_of(self, code: str) -> int | None:
        """Position of the entry whose match key equals that of ``code``."""
        key = match_key(code)
        for index, entry in enumerate(self._entries):
            if match_key(entry.user_code) == key:
                return index
        return None

    def contains(self, code: str) -> bool:
        return self.index_of(code) is not None

    def add(self, code: str) -> WatchlistEntry:
        """Append ``code``; raises :class:`DuplicateSymbolError` on a normalized duplicate."""
        if self.contains(code):
            raise DuplicateSymbolError(code, match_key(code))
        entry = WatchlistEntry(user_code=code)
        self._entries.append(entry)
        logger.debug(f"Added {code} to watchlist")
        return entry

    def replace(self, codes: Iterable[str]) -> list[str]:
        """Swap the whole list for ``codes``.

        Later codes that normalize to an already-kept key are dropped and
        returned, so a hand-edited file with duplicates still loads.
        """
        replacement = WatchlistStore()
        skipped: list[str] = []
        for code in codes:
            try:
                replacement.add(code)
            except DuplicateSymbolError as e:
                logger.warning(e.message)
                skipped.append(code)
        self._entries = replacement.entries
        return skipped

    def remove(self, index: int) -> WatchlistEntry | None:
        if not 0 <= index < len(self._entries):
            return None
        return self._entries.pop(index)

    def move_up(self, index: int) -> int:
        """Swap the entry at ``index`` with its predecessor; returns its new index."""
        if not 0 < index < len(self._entries):
            return index
        self._entries[index - 1], self._entries[index] = self._entries[index], self._entries[index - 1]
        return index - 1

    def move_down(self, index: int) -> int:
        if not 0 <= index < len(self._entries) - 1:
            return index
        self._entries[index + 1], self._entries[index] = self._entries[index], self._entries[index + 1]
        return index + 1

    def merge(self, fetched: Sequence[Quote]) -> list[WatchlistEntry]:
        return merge(self._entries, fetched)


__all__ = ["WatchlistStore", "merge"]
