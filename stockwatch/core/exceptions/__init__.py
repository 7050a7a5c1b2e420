"""Exception handling module."""

from stockwatch.core.exceptions.base import (
    DuplicateSymbolError,
    FetchError,
    PersistenceError,
    ResponseFormatError,
    StockWatchError,
    TransportError,
    WorkerUnavailableError,
)
from stockwatch.core.exceptions.codes import ErrorCode
from stockwatch.core.exceptions.messages import format_error_message, format_error_response

__all__ = [
    "StockWatchError",
    "FetchError",
    "TransportError",
    "ResponseFormatError",
    "WorkerUnavailableError",
    "DuplicateSymbolError",
    "PersistenceError",
    "ErrorCode",
    "format_error_message",
    "format_error_response",
]
