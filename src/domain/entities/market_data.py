"""
Domain entities for market snapshot data.
Zero external dependencies: pure Python dataclasses only.

Numeric fields the provider sends as unparseable strings are carried as NaN
(floats) or None (volume) so a single bad field never fails the request.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Quote:
    symbol: str
    open: float
    high: float
    low: float
    price: float
    volume: Optional[int]
    latest_day: str
    previous_close: float
    change: float
    change_percent: str


@dataclass(frozen=True)
class DailyBar:
    date: str
    open: float
    high: float
    low: float
    close: float
    volume: Optional[int]


@dataclass(frozen=True)
class IndicatorSet:
    """Indicators derived from the retrieved series.

    high52w / low52w span whatever history was retrieved (up to 100 daily bars),
    not a true 52-week window. The names are kept for API compatibility.
    """

    sma10: Optional[float]
    sma20: Optional[float]
    sma50: Optional[float]
    volatility: Optional[float]
    high52w: float
    low52w: float
