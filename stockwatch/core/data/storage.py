"""JSON persistence of the watchlist (``{"stocks": [{"code": ...}]}``)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ValidationError

from stockwatch.core.config import default_db_path
from stockwatch.core.exceptions import PersistenceError
from stockwatch.core.logging import get_logger

logger = get_logger(__name__)


class StoredCode(BaseModel):
    code: str


class StoredWatchlist(BaseModel):
    stocks: list[StoredCode] = []


class WatchlistStorage:
    """Reads and writes the ordered list of user codes."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path or default_db_path()).expanduser()

    def load(self) -> list[str]:
        """Load user codes in saved order. A missing file is an empty watchlist."""
        if not self.path.exists():
            return []
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"cannot read {self.path}: {e}", path=str(self.path)) from e

        try:
            data = StoredWatchlist.model_validate_json(content)
        except ValidationError as e:
            raise PersistenceError(f"invalid storage data: {e.errors()[0]['msg']}", path=str(self.path)) from e

        codes = [item.code for item in data.stocks]
        logger.debug(f"Loaded {len(codes)} codes from {self.path}")
        return codes

    def save(self, codes: Sequence[str]) -> None:
        data = StoredWatchlist(stocks=[StoredCode(code=code) for code in codes])
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(data.model_dump_json(), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"cannot write {self.path}: {e}", path=str(self.path)) from e
        logger.debug(f"Saved {len(codes)} codes to {self.path}")


__all__ = ["StoredCode", "StoredWatchlist", "WatchlistStorage"]
