"""Symbol resolution and one-shot quote commands."""

from __future__ import annotations

import typer

from stockwatch.core.exceptions import FetchError, StockWatchError
from stockwatch.core.services import WatchlistStore, resolve

from .constants import FETCH_ERROR_EXIT_CODE, VALIDATION_EXIT_CODE
from .utils import QUOTE_COLUMNS, entry_to_row, fail, get_fetcher, prepare_output


def register(app: typer.Typer) -> None:
    """Register quote commands on the root CLI application."""

    app.command("resolve")(resolve_command)
    app.command("quote")(quote_command)


def resolve_command(code: str = typer.Argument(..., help="Code as you would type it, e.g. 600519 or x105.NVDA.")) -> None:
    """Print the provider query string a code resolves to."""

    typer.echo(resolve(code))


def quote_command(
    ctx: typer.Context,
    codes: list[str] = typer.Argument(..., help="One or more codes to fetch."),
) -> None:
    """Fetch quotes once and print them."""

    try:
        store = WatchlistStore(codes)
    except StockWatchError as error:
        raise fail(error, VALIDATION_EXIT_CODE) from error

    formatter, stream, stack, _ = prepare_output(ctx)
    fetcher = get_fetcher(ctx)
    try:
        with fetcher:
            store.merge(fetcher.fetch(store.codes()))
    except FetchError as error:
        stack.close()
        raise fail(error, FETCH_ERROR_EXIT_CODE) from error

    try:
        formatter.render([entry_to_row(entry) for entry in store], stream=stream, columns=QUOTE_COLUMNS)
    finally:
        stack.close()


__all__ = ["register", "resolve_command", "quote_command"]
