"""Market prefixes used by the Eastmoney quote API."""

from enum import IntEnum


class MarketCode(IntEnum):
    """东方财富市场代码 (secid 前缀 / f13 字段)."""

    SZ = 0  # 深圳、北京
    SH = 1  # 上海
    US_NASDAQ = 105
    US_NYSE = 106
    US_AMEX = 107
    HK = 116
    UK = 155


# 数字代码: 沪, 深北, 港
NUMERIC_PROBE_MARKETS: tuple[MarketCode, ...] = (MarketCode.SH, MarketCode.SZ, MarketCode.HK)
# 字母代码: 美股三个板块, 英股
ALPHA_PROBE_MARKETS: tuple[MarketCode, ...] = (
    MarketCode.US_NASDAQ,
    MarketCode.US_NYSE,
    MarketCode.US_AMEX,
    MarketCode.UK,
)
