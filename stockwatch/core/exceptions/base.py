"""stockwatch核心异常类."""

from typing import Any

from stockwatch.core.exceptions.codes import ErrorCode


class StockWatchError(Exception):
    """stockwatch基础异常类."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        """初始化异常.

        Args:
            message: 错误消息
            error_code: 错误代码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class FetchError(StockWatchError):
    """行情抓取失败."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        error_code: str = ErrorCode.PROVIDER_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)
        self.provider_name = provider_name


class TransportError(FetchError):
    """网络异常: 连接失败或非2xx响应."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, provider_name, ErrorCode.NETWORK_ERROR.value, super_details)
        self.status_code = status_code


class ResponseFormatError(FetchError):
    """响应体无法解析或结构不符合预期."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, provider_name, ErrorCode.DATA_FORMAT_ERROR.value, details)


class WorkerUnavailableError(StockWatchError):
    """后台刷新线程已退出."""

    def __init__(self, message: str = "refresh worker disconnected", details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.WORKER_UNAVAILABLE.value, details)


class DuplicateSymbolError(StockWatchError):
    """重复添加同一股票."""

    def __init__(self, code: str, match_key: str, details: dict[str, Any] | None = None):
        super_details = details or {}
        super_details.update({"code": code, "match_key": match_key})
        super().__init__(f"{code} is already in the watchlist", ErrorCode.DUPLICATE_SYMBOL.value, super_details)
        self.code = code
        self.match_key = match_key


class PersistenceError(StockWatchError):
    """自选列表读写失败."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if path:
            super_details["path"] = path
        super().__init__(message, ErrorCode.STORAGE_ERROR.value, super_details)
        self.path = path
