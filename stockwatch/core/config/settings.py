"""配置管理模块 - 处理stockwatch的配置"""

import os
import tomllib
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from stockwatch.core.logging import get_logger

logger = get_logger(__name__)

DB_PATH = ".stocks.json"
DB_PATH_ENV = "STOCKWATCH_DB_PATH"


def default_db_path() -> str:
    """自选列表文件路径: 环境变量优先, 否则为用户主目录下的 .stocks.json"""
    return os.getenv(DB_PATH_ENV) or str(Path.home() / DB_PATH)


@dataclass
class ProviderConfig:
    """行情源配置"""

    base_url: str = "https://push2.eastmoney.com"
    endpoint: str = "/api/qt/ulist.np/get"
    timeout: float = 10.0
    user_agent: str = "stockwatch/0.1.0"


@dataclass
class StorageConfig:
    """自选列表存储配置"""

    path: str = field(default_factory=default_db_path)


@dataclass
class RefreshConfig:
    """刷新节奏配置"""

    refresh_interval_ticks: int = 60
    tick_rate: float = 1.0

    def __post_init__(self) -> None:
        if self.refresh_interval_ticks <= 0:
            raise ValueError("refresh_interval_ticks must be positive")
        if self.tick_rate <= 0:
            raise ValueError("tick_rate must be positive")


@dataclass
class LoggingConfig:
    """日志配置"""

    level: str = "WARNING"
    file: str | None = None


@dataclass
class StockWatchConfig:
    """stockwatch主配置"""

    provider: ProviderConfig = field(default_factory=ProviderConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "StockWatchConfig":
        """从字典创建配置"""
        return cls(
            provider=ProviderConfig(**config_dict.get("provider", {})),
            storage=StorageConfig(**config_dict.get("storage", {})),
            refresh=RefreshConfig(**config_dict.get("refresh", {})),
            logging=LoggingConfig(**config_dict.get("logging", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "provider": asdict(self.provider),
            "storage": asdict(self.storage),
            "refresh": asdict(self.refresh),
            "logging": asdict(self.logging),
        }


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
        """
        self.config_path = config_path or Path.home() / ".stockwatch" / "config.toml"
        self.config = self._load_config()

    def _load_config(self) -> StockWatchConfig:
        """加载配置文件并叠加环境变量"""
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                # 配置文件有问题时使用默认配置
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                config_dict = {}

        deep_update(config_dict, load_config_from_env())
        try:
            return StockWatchConfig.from_dict(config_dict)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid configuration in {self.config_path}: {e}")
            return StockWatchConfig()

    def get_config(self) -> StockWatchConfig:
        """获取当前配置"""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """更新配置"""
        config_dict = self.config.to_dict()
        deep_update(config_dict, updates)
        self.config = StockWatchConfig.from_dict(config_dict)


def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    """深度更新字典"""
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = deep_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def _env_number(name: str, parse: Callable[[str], Any]) -> Any:
    """读取数值型环境变量, 无法解析时告警并忽略"""
    value = os.getenv(name)
    if value is None:
        return None
    try:
        return parse(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not a valid {parse.__name__}")
        return None


def load_config_from_env() -> dict[str, Any]:
    """从环境变量加载配置"""
    config: dict[str, Any] = {}

    provider_config: dict[str, Any] = {}
    if os.getenv("STOCKWATCH_PROVIDER_URL"):
        provider_config["base_url"] = os.getenv("STOCKWATCH_PROVIDER_URL")
    provider_timeout = _env_number("STOCKWATCH_PROVIDER_TIMEOUT", float)
    if provider_timeout is not None:
        provider_config["timeout"] = provider_timeout
    if provider_config:
        config["provider"] = provider_config

    db_path = os.getenv(DB_PATH_ENV)
    if db_path:
        config["storage"] = {"path": db_path}

    refresh_config: dict[str, Any] = {}
    refresh_interval = _env_number("STOCKWATCH_REFRESH_INTERVAL", int)
    if refresh_interval is not None:
        refresh_config["refresh_interval_ticks"] = refresh_interval
    tick_rate = _env_number("STOCKWATCH_TICK_RATE", float)
    if tick_rate is not None:
        refresh_config["tick_rate"] = tick_rate
    if refresh_config:
        config["refresh"] = refresh_config

    logging_config: dict[str, Any] = {}
    logging_level = os.getenv("STOCKWATCH_LOGGING_LEVEL")
    if logging_level is not None:
        logging_config["level"] = logging_level
    logging_file = os.getenv("STOCKWATCH_LOGGING_FILE")
    if logging_file is not None:
        logging_config["file"] = logging_file
    if logging_config:
        config["logging"] = logging_config

    return config
