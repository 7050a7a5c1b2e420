"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence, TextIO

import typer

from stockwatch.core.config import StockWatchConfig
from stockwatch.core.data import QuoteFetcher, WatchlistStorage
from stockwatch.core.exceptions import StockWatchError, format_error_response
from stockwatch.core.models import WatchlistEntry

from .constants import VALIDATION_EXIT_CODE
from .formatters import OutputFormatter, create_formatter

QUOTE_COLUMNS = [
    "code",
    "title",
    "price",
    "percent_change",
    "absolute_change",
    "open",
    "high",
    "low",
    "previous_close",
    "volume",
    "turnover_value",
]


@dataclass(slots=True)
class CLIOptions:
    """Resolved options derived from the Typer context."""

    format: str = "table"
    output_path: Path | None = None
    no_color: bool = False
    config: StockWatchConfig = field(default_factory=StockWatchConfig)
    version: str = ""


def get_cli_options(ctx: typer.Context) -> CLIOptions:
    """Extract :class:`CLIOptions` from the Typer context object."""

    ctx.ensure_object(dict)
    data = ctx.obj or {}
    return CLIOptions(
        format=str(data.get("format", "table")),
        output_path=data.get("output_path"),
        no_color=bool(data.get("no_color", False)),
        config=data.get("config") or StockWatchConfig(),
        version=str(data.get("version", "")),
    )


def get_storage(ctx: typer.Context) -> WatchlistStorage:
    """Factory hook returning the configured :class:`WatchlistStorage`."""

    return WatchlistStorage(get_cli_options(ctx).config.storage.path)


def get_fetcher(ctx: typer.Context) -> QuoteFetcher:
    """Factory hook returning a :class:`QuoteFetcher` for the configured provider."""

    return QuoteFetcher(get_cli_options(ctx).config.provider)


def prepare_output(ctx: typer.Context) -> tuple[OutputFormatter, TextIO, ExitStack, CLIOptions]:
    """Resolve formatter and writable stream for the current command."""

    options = get_cli_options(ctx)
    try:
        formatter = create_formatter(options.format, no_color=options.no_color)
    except ValueError as exc:  # pragma: no cover - validated at callback
        emit_error(str(exc), "INVALID_FORMAT")
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc

    stack = ExitStack()
    stream: TextIO
    if options.output_path is not None:
        try:
            stream = stack.enter_context(open(options.output_path, "w", encoding="utf-8"))
        except OSError as exc:
            stack.close()
            emit_error(f"Unable to open '{options.output_path}': {exc}", "OUTPUT_WRITE_ERROR")
            raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
    else:
        stream = sys.stdout

    return formatter, stream, stack, options


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = _sanitize_details(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def fail(error: StockWatchError, exit_code: int) -> typer.Exit:
    """Report ``error`` on stderr and build the matching :class:`typer.Exit`."""

    payload = format_error_response(error)
    emit_error(payload["message"], payload["code"], details=payload.get("details"))
    return typer.Exit(code=exit_code)


def entry_to_row(entry: WatchlistEntry) -> dict[str, object]:
    row: dict[str, object] = {"code": entry.user_code}
    row.update(entry.quote.model_dump(exclude={"provider_code"}))
    return row


def _sanitize_details(details: Mapping[str, object]) -> Mapping[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in details.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            sanitized[key] = [str(item) for item in value]
        else:
            sanitized[key] = str(value)
    return sanitized


__all__ = [
    "CLIOptions",
    "QUOTE_COLUMNS",
    "emit_error",
    "entry_to_row",
    "fail",
    "get_cli_options",
    "get_fetcher",
    "get_storage",
    "prepare_output",
]
