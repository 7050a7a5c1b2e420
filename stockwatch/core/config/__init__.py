"""Configuration management module."""

from stockwatch.core.config.settings import (
    ConfigManager,
    LoggingConfig,
    ProviderConfig,
    RefreshConfig,
    StockWatchConfig,
    StorageConfig,
    default_db_path,
    load_config_from_env,
)

__all__ = [
    "ConfigManager",
    "StockWatchConfig",
    "ProviderConfig",
    "StorageConfig",
    "RefreshConfig",
    "LoggingConfig",
    "default_db_path",
    "load_config_from_env",
]
