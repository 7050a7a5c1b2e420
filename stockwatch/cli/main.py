"""Main entry point for the stockwatch command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from stockwatch import __version__
from stockwatch.core.config import ConfigManager
from stockwatch.core.logging import configure_logging

from .formatters import create_formatter
from .quote import register as register_quote_commands
from .watch import register as register_watch_commands
from .watchlist import register as register_watchlist_commands


def create_app(version: str = __version__) -> typer.Typer:
    """Create a Typer application instance for stockwatch."""

    app = typer.Typer(add_completion=False, help="Terminal stock watchlist")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level (defaults to the configured level).",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
        db_path: Path | None = typer.Option(
            None,
            "--db-path",
            help="Watchlist file (defaults to $STOCKWATCH_DB_PATH or ~/.stocks.json).",
        ),
        config_path: Path | None = typer.Option(
            None,
            "--config",
            help="TOML configuration file.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            # Validate formatter eagerly for immediate feedback on invalid options
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        manager = ConfigManager(config_path)
        if db_path is not None:
            manager.update_config(storage={"path": str(db_path)})
        if log_level is not None:
            manager.update_config(logging={"level": log_level.upper()})
        config = manager.get_config()
        _configure_logging(config.logging.level, config.logging.file)

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "no_color": no_color,
                "config": config,
                "version": version,
            }
        )

    @app.command("version")
    def version_command() -> None:
        """Print the stockwatch version."""
        typer.echo(f"stockwatch version: {version}")

    register_quote_commands(app)
    register_watchlist_commands(app)
    register_watch_commands(app)
    return app


def _configure_logging(level: str, file_path: str | None) -> None:
    try:
        configure_logging(level, file_output=file_path is not None, file_path=file_path)
    except ValueError:
        # unknown level name
        configure_logging("WARNING", file_output=file_path is not None, file_path=file_path)


app = create_app()
