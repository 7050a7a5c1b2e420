"""Standardised error codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举."""

    GENERAL_ERROR = "GENERAL_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    DATA_FORMAT_ERROR = "DATA_FORMAT_ERROR"
    WORKER_UNAVAILABLE = "WORKER_UNAVAILABLE"
    DUPLICATE_SYMBOL = "DUPLICATE_SYMBOL"
    STORAGE_ERROR = "STORAGE_ERROR"
    NOT_FOUND = "NOT_FOUND"
