"""Logging utilities."""

from stockwatch.core.logging.config import LogConfig
from stockwatch.core.logging.logger import configure_logging, get_logger, log_context, logger

__all__ = [
    "LogConfig",
    "configure_logging",
    "get_logger",
    "log_context",
    "logger",
]
