"""Live watchlist view."""

from __future__ import annotations

import time

import typer
from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from stockwatch.core.app import WatchApp
from stockwatch.core.services import RefreshScheduler

from .formatters import TableFormatter
from .utils import QUOTE_COLUMNS, entry_to_row, get_cli_options, get_fetcher, get_storage


def register(app: typer.Typer) -> None:
    """Register the watch command on the root CLI application."""

    app.command("watch")(watch_command)


def render(watch_app: WatchApp, *, version: str = "", no_color: bool = False) -> Group:
    """Build the renderable for one frame: title, quote table and status line."""

    formatter = TableFormatter(no_color=no_color)
    title = f"stockwatch {version}".strip()
    table = formatter.build_table([entry_to_row(entry) for entry in watch_app.entries], QUOTE_COLUMNS, title=title)
    if watch_app.error:
        status = Text(watch_app.error, style="" if no_color else "red")
    elif watch_app.last_refresh is not None:
        status = Text(f"updated {watch_app.last_refresh:%H:%M:%S}")
    else:
        status = Text("waiting for quotes...")
    return Group(table, status)


def watch_command(
    ctx: typer.Context,
    ticks: int | None = typer.Option(None, "--ticks", help="Stop after this many ticks (default: run until Ctrl+C)."),
) -> None:
    """Poll the saved watchlist and keep a live table on screen."""

    options = get_cli_options(ctx)
    refresh = options.config.refresh
    scheduler = RefreshScheduler(get_fetcher(ctx))
    watch_app = WatchApp(scheduler, get_storage(ctx), refresh_interval=refresh.refresh_interval_ticks)
    watch_app.load()

    console = Console(no_color=options.no_color)
    try:
        with Live(render(watch_app, version=options.version, no_color=options.no_color), console=console) as live:
            while not watch_app.should_exit:
                time.sleep(refresh.tick_rate)
                watch_app.on_tick()
                live.update(render(watch_app, version=options.version, no_color=options.no_color))
                if ticks is not None and watch_app.tick_count >= ticks:
                    break
    except KeyboardInterrupt:
        pass
    finally:
        watch_app.quit()


__all__ = ["register", "render", "watch_command"]
