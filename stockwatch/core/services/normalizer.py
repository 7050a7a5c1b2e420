"""Raw Eastmoney records to canonical quotes."""

from __future__ import annotations

from stockwatch.core.models.market import MarketCode
from stockwatch.core.models.quote import Quote, RawQuoteRecord

PERCENT_DIVISOR = 100.0

# 港股、美股、英股价格精度为三位小数, 其余市场两位
_THOUSANDTHS_MARKETS = frozenset(
    {MarketCode.HK, MarketCode.US_NASDAQ, MarketCode.US_NYSE, MarketCode.US_AMEX, MarketCode.UK}
)


def price_divisor(market: int) -> float:
    """Fixed-point scale of price-like fields for ``market``."""
    if market in _THOUSANDTHS_MARKETS:
        return 1000.0
    return 100.0


def _scaled(value: float | None, divisor: float) -> float:
    if value is None:
        return 0.0
    return value / divisor


def normalize(raw: RawQuoteRecord) -> Quote:
    """Apply the market-dependent scaling to one raw record."""
    divisor = price_divisor(raw.market)
    return Quote(
        provider_code=raw.code,
        title=raw.title,
        price=_scaled(raw.price, divisor),
        percent_change=_scaled(raw.percent_change, PERCENT_DIVISOR),
        absolute_change=_scaled(raw.absolute_change, divisor),
        amplitude=_scaled(raw.amplitude, PERCENT_DIVISOR),
        open=_scaled(raw.open, divisor),
        previous_close=_scaled(raw.previous_close, divisor),
        high=_scaled(raw.high, divisor),
        low=_scaled(raw.low, divisor),
        volume=raw.volume or 0.0,
        turnover_value=raw.turnover_value or 0.0,
        turnover_rate=_scaled(raw.turnover_rate, PERCENT_DIVISOR),
        price_earnings=_scaled(raw.price_earnings, PERCENT_DIVISOR),
        price_book=_scaled(raw.price_book, PERCENT_DIVISOR),
        volume_ratio=_scaled(raw.volume_ratio, PERCENT_DIVISOR),
        five_minute_percent=_scaled(raw.five_minute_percent, PERCENT_DIVISOR),
        total_market_value=raw.total_market_value or 0.0,
        circulating_market_value=raw.circulating_market_value or 0.0,
        speed=_scaled(raw.speed, PERCENT_DIVISOR),
        sixty_day_percent=_scaled(raw.sixty_day_percent, PERCENT_DIVISOR),
        year_to_date_percent=_scaled(raw.year_to_date_percent, PERCENT_DIVISOR),
    )


__all__ = ["PERCENT_DIVISOR", "normalize", "price_divisor"]
