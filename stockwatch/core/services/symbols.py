"""Symbol resolution: user-typed codes to Eastmoney ``secid`` query strings."""

from __future__ import annotations

from collections.abc import Iterable

from stockwatch.core.models.market import ALPHA_PROBE_MARKETS, NUMERIC_PROBE_MARKETS

MANUAL_MARKER = "x"
MARKET_SEPARATOR = "."


def is_manual(code: str) -> bool:
    """True when ``code`` carries the manual-mode marker (``x``/``X``)."""
    return code[:1].lower() == MANUAL_MARKER


def resolve(code: str) -> str:
    """根据用户输入生成 secid 查询串.

    手动模式 (``x`` 开头) 去掉一个前缀字符后原样透传, 例如 ``x105.NVDA`` -> ``105.NVDA``.
    否则按盲试模式组合多个市场: 纯数字代码尝试沪/深北/港, 其余尝试美股三个板块和英股.
    """
    if is_manual(code):
        return code[1:]

    if code.isascii() and code.isdigit():
        markets = NUMERIC_PROBE_MARKETS
    else:
        markets = ALPHA_PROBE_MARKETS
    return ",".join(f"{int(market)}.{code}" for market in markets)


def resolve_many(codes: Iterable[str]) -> str:
    """Resolve every code and join the results into one batched query."""
    return ",".join(resolve(code) for code in codes)


def match_key(code: str, *, manual_marker: bool = True) -> str:
    """Normalize a code for matching user entries against provider quotes.

    Strips one manual marker (user codes only), drops a leading numeric market
    prefix and upper-cases the rest: ``x1.600519`` -> ``600519``,
    ``nvda`` -> ``NVDA``. A separator that belongs to the ticker itself
    (``RR.``, ``BRK.B``) is kept.

    Provider codes never carry the marker, so pass ``manual_marker=False`` for
    them; otherwise ``XOM`` would lose its first letter.
    """
    stripped = code[1:] if manual_marker and is_manual(code) else code
    market, separator, rest = stripped.partition(MARKET_SEPARATOR)
    if separator and market.isdigit():
        stripped = rest
    return stripped.upper()


__all__ = ["MANUAL_MARKER", "MARKET_SEPARATOR", "is_manual", "resolve", "resolve_many", "match_key"]
