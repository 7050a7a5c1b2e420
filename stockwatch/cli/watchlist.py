"""Commands editing the persisted watchlist."""

from __future__ import annotations

import typer

from stockwatch.core.exceptions import ErrorCode, StockWatchError
from stockwatch.core.services import WatchlistStore

from .constants import VALIDATION_EXIT_CODE
from .utils import emit_error, fail, get_storage, prepare_output

LIST_COLUMNS = ["index", "code"]


def register(app: typer.Typer) -> None:
    """Register watchlist commands on the root CLI application."""

    app.command("list")(list_command)
    app.command("add")(add_command)
    app.command("remove")(remove_command)


def _load_store(ctx: typer.Context) -> WatchlistStore:
    try:
        return WatchlistStore(get_storage(ctx).load())
    except StockWatchError as error:
        raise fail(error, VALIDATION_EXIT_CODE) from error


def _save_store(ctx: typer.Context, store: WatchlistStore) -> None:
    try:
        get_storage(ctx).save(store.codes())
    except StockWatchError as error:
        raise fail(error, VALIDATION_EXIT_CODE) from error


def list_command(ctx: typer.Context) -> None:
    """Show the saved codes in display order."""

    store = _load_store(ctx)
    formatter, stream, stack, _ = prepare_output(ctx)
    rows = [{"index": index, "code": code} for index, code in enumerate(store.codes())]
    try:
        formatter.render(rows, stream=stream, columns=LIST_COLUMNS)
    finally:
        stack.close()


def add_command(ctx: typer.Context, code: str = typer.Argument(..., help="Code to append.")) -> None:
    """Append a code to the saved watchlist."""

    store = _load_store(ctx)
    try:
        store.add(code)
    except StockWatchError as error:
        raise fail(error, VALIDATION_EXIT_CODE) from error
    _save_store(ctx, store)
    typer.echo(f"Added {code}")


def remove_command(ctx: typer.Context, code: str = typer.Argument(..., help="Code to remove.")) -> None:
    """Remove a code (matched by its normalized form) from the saved watchlist."""

    store = _load_store(ctx)
    index = store.index_of(code)
    if index is None:
        emit_error(f"{code} is not in the watchlist", ErrorCode.NOT_FOUND.value)
        raise typer.Exit(code=VALIDATION_EXIT_CODE)
    removed = store.remove(index)
    _save_store(ctx, store)
    typer.echo(f"Removed {removed.user_code}")


__all__ = ["register", "list_command", "add_command", "remove_command"]
