"""Quote models: the wire DTO, the canonical snapshot and watchlist entries."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawQuoteRecord(BaseModel):
    """Eastmoney ``data.diff`` 单条记录, 字段名为接口的 fNN 编码."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    code: str = Field(alias="f12")
    market: int = Field(alias="f13")
    title: str = Field(default="", alias="f14")
    price: float | None = Field(default=None, alias="f2")
    percent_change: float | None = Field(default=None, alias="f3")
    absolute_change: float | None = Field(default=None, alias="f4")
    volume: float | None = Field(default=None, alias="f5")
    turnover_value: float | None = Field(default=None, alias="f6")
    amplitude: float | None = Field(default=None, alias="f7")
    turnover_rate: float | None = Field(default=None, alias="f8")
    price_earnings: float | None = Field(default=None, alias="f9")
    volume_ratio: float | None = Field(default=None, alias="f10")
    five_minute_percent: float | None = Field(default=None, alias="f11")
    high: float | None = Field(default=None, alias="f15")
    low: float | None = Field(default=None, alias="f16")
    open: float | None = Field(default=None, alias="f17")
    previous_close: float | None = Field(default=None, alias="f18")
    total_market_value: float | None = Field(default=None, alias="f20")
    circulating_market_value: float | None = Field(default=None, alias="f21")
    speed: float | None = Field(default=None, alias="f22")
    price_book: float | None = Field(default=None, alias="f23")
    sixty_day_percent: float | None = Field(default=None, alias="f24")
    year_to_date_percent: float | None = Field(default=None, alias="f25")

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_text(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("title", mode="before")
    @classmethod
    def _title_or_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator(
        "price",
        "percent_change",
        "absolute_change",
        "volume",
        "turnover_value",
        "amplitude",
        "turnover_rate",
        "price_earnings",
        "volume_ratio",
        "five_minute_percent",
        "high",
        "low",
        "open",
        "previous_close",
        "total_market_value",
        "circulating_market_value",
        "speed",
        "price_book",
        "sixty_day_percent",
        "year_to_date_percent",
        mode="before",
    )
    @classmethod
    def _dash_as_missing(cls, value: Any) -> Any:
        # 停牌或无数据时接口返回 "-"
        if value == "-":
            return None
        return value


class Quote(BaseModel):
    """标准化后的行情快照, 所有数值已按市场缩放."""

    model_config = ConfigDict(frozen=True)

    provider_code: str
    title: str
    price: float = 0.0
    percent_change: float = 0.0
    absolute_change: float = 0.0
    amplitude: float = 0.0
    open: float = 0.0
    previous_close: float = 0.0
    high: float = 0.0
    low: float = 0.0
    volume: float = 0.0
    turnover_value: float = 0.0
    turnover_rate: float = 0.0
    price_earnings: float = 0.0
    price_book: float = 0.0
    volume_ratio: float = 0.0
    five_minute_percent: float = 0.0
    total_market_value: float = 0.0
    circulating_market_value: float = 0.0
    speed: float = 0.0
    sixty_day_percent: float = 0.0
    year_to_date_percent: float = 0.0

    @classmethod
    def placeholder(cls, code: str) -> "Quote":
        """Zero-valued quote shown before the first successful fetch."""
        return cls(provider_code=code, title=code)


@dataclass(slots=True)
class WatchlistEntry:
    """One user-tracked ticker. ``user_code`` is kept exactly as typed."""

    user_code: str
    initial_quote: InitVar[Quote | None] = None
    quote: Quote = field(init=False)

    def __post_init__(self, initial_quote: Quote | None) -> None:
        self.quote = initial_quote or Quote.placeholder(self.user_code)


@dataclass(frozen=True, slots=True)
class RefreshResult:
    """Message published by the refresh worker: quotes or an error description."""

    quotes: tuple[Quote, ...] = ()
    error: str | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, quotes: list[Quote]) -> "RefreshResult":
        return cls(quotes=tuple(quotes))

    @classmethod
    def failure(cls, message: str, error_code: str | None = None) -> "RefreshResult":
        return cls(error=message, error_code=error_code)
