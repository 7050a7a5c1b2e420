"""Structured JSON logging on top of loguru."""

from __future__ import annotations

import json
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import IO, Any, Iterator

from loguru import logger

from stockwatch.core.logging.config import LogConfig

_CONTEXT_VAR: ContextVar[dict[str, Any]] = ContextVar("stockwatch_log_context", default={})


def _patch_record(record: dict[str, Any]) -> None:
    extra = record.setdefault("extra", {})
    for key, value in _CONTEXT_VAR.get({}).items():
        extra.setdefault(key, value)
    extra.setdefault("error_code", None)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    extra = record.get("extra", {})
    context = {k: v for k, v in extra.items() if k not in {"error_code", "logger_name"}}
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": extra.get("logger_name") or record.get("name"),
        "message": record.get("message"),
        "error_code": extra.get("error_code"),
    }
    if context:
        payload["context"] = context
    exception = record.get("exception")
    if exception:
        payload["exception"] = str(exception.value)
    return payload


class _StreamJsonSink:
    """Sink writing structured JSON payloads to a text stream."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        # resolved per call so redirected stderr (tests, CLI runners) is honoured
        stream = self._stream or sys.stderr
        stream.write(json.dumps(_format_payload(message.record), default=_json_default, ensure_ascii=False))
        stream.write("\n")
        stream.flush()


class _FileJsonSink:
    """Sink persisting JSON lines to a file path."""

    def __init__(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._path = path

    def __call__(self, message: Any) -> None:
        with open(self._path, "a", encoding="utf-8") as file:
            file.write(json.dumps(_format_payload(message.record), default=_json_default, ensure_ascii=False))
            file.write("\n")


def _configure_from_config(config: LogConfig) -> None:
    handlers: list[dict[str, Any]] = []
    level = config.level.upper()
    if config.console_output:
        handlers.append({"sink": _StreamJsonSink(config.console_stream), "level": level})
    if config.file_output and config.file_path:
        handlers.append({"sink": _FileJsonSink(config.file_path), "level": level})

    configure_kwargs: dict[str, Any] = {"handlers": handlers, "patcher": _patch_record}
    if config.extra:
        configure_kwargs["extra"] = config.extra
    logger.configure(**configure_kwargs)


def configure_logging(level: str = "WARNING", **kwargs: Any) -> LogConfig:
    """Configure structured logging with the provided level and options."""

    config = LogConfig(level=level, **kwargs)
    _configure_from_config(config)
    return config


def get_logger(name: str | None = None):
    """Return the global logger, optionally bound to ``name``."""

    if name:
        return logger.bind(logger_name=name)
    return logger


@contextmanager
def log_context(**extra: Any) -> Iterator[dict[str, Any]]:
    """Attach ``extra`` to every record emitted inside the block."""

    previous_context = _CONTEXT_VAR.get({})
    new_context = {**previous_context, **extra}
    token = _CONTEXT_VAR.set(new_context)
    try:
        yield new_context
    finally:
        _CONTEXT_VAR.reset(token)


configure_logging()


__all__ = [
    "configure_logging",
    "get_logger",
    "log_context",
    "logger",
]
