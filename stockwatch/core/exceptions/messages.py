"""User facing error message formatting."""

from typing import Any

from stockwatch.core.exceptions.base import StockWatchError


def format_error_message(error: BaseException) -> str:
    """Render ``error`` as a single status line."""

    if isinstance(error, StockWatchError):
        return f"[{error.error_code}] {error.message}"
    return f"[GENERAL_ERROR] {error}"


def format_error_response(error: StockWatchError) -> dict[str, Any]:
    """格式化错误响应."""

    payload: dict[str, Any] = {"code": error.error_code, "message": error.message}
    if error.details:
        payload["details"] = dict(error.details)
    return payload
