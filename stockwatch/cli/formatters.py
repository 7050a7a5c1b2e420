"""Quote table and JSON Lines output for CLI commands."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Mapping, Sequence, TextIO, Union

from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table
from rich.text import Text

Row = Mapping[str, object]


@dataclass(slots=True)
class TableFormatter:
    """Rich table; ``percent_change`` is signed and coloured (red up, green down)."""

    no_color: bool = False

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str]) -> None:
        console = Console(file=stream, color_system=None if self.no_color else "auto", no_color=self.no_color)
        console.print(self.build_table(rows, columns))
        if not rows:
            console.print("Watchlist is empty.")

    def build_table(self, rows: Sequence[Row], columns: Sequence[str], title: str | None = None) -> Table:
        table = Table(box=SIMPLE, title=title)
        header_style = "" if self.no_color else "bold"
        for column in columns:
            table.add_column(column, header_style=header_style)
        for row in rows:
            table.add_row(*(self._format_cell(column, row.get(column)) for column in columns))
        return table

    def _format_cell(self, column: str, value: object) -> Text | str:
        if value is None:
            return "-"
        if isinstance(value, float):
            text = f"{value:+.2f}%" if column == "percent_change" else f"{value:.2f}"
            if column == "percent_change" and not self.no_color:
                # 涨红跌绿
                return Text(text, style="red" if value > 0 else "green" if value < 0 else "")
            return text
        return str(value)


@dataclass(slots=True)
class JSONLFormatter:
    """One JSON object per row, restricted to ``columns``."""

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str]) -> None:
        for row in rows:
            json.dump({column: row.get(column) for column in columns}, stream, ensure_ascii=False, default=str)
            stream.write("\n")
        stream.flush()


OutputFormatter = Union[TableFormatter, JSONLFormatter]


def create_formatter(name: str, *, no_color: bool = False) -> OutputFormatter:
    normalized = name.strip().lower()
    if normalized == "table":
        return TableFormatter(no_color=no_color)
    if normalized == "jsonl":
        return JSONLFormatter()
    raise ValueError(f"Unsupported format '{name}'. Available formats: table, jsonl.")


__all__ = ["OutputFormatter", "TableFormatter", "JSONLFormatter", "create_formatter"]
