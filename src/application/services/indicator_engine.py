"""
Application service: technical indicators over a daily price series.
Pure and deterministic: no I/O, no clock, no provider knowledge.

Closes that failed to parse (NaN) are dropped before any computation, so a bad
bar shrinks the sample instead of being read as zero.
"""

from typing import Optional

import pandas as pd

from src.domain.entities.market_data import DailyBar, IndicatorSet, Quote

SMA_PERIODS = (10, 20, 50)

# Number of day-over-day returns in the volatility sample
RETURN_WINDOW = 20


def closing_prices(bars: list[DailyBar]) -> pd.Series:
    """Numeric closes of *bars* in series order, NaN entries removed."""
    closes = pd.Series([bar.close for bar in bars], dtype=float)
    return closes.dropna().reset_index(drop=True)


def sma(closes: pd.Series, period: int) -> Optional[float]:
    """Simple Moving Average of the last *period* closes, or None if too few."""
    if len(closes) < period:
        return None
    return float(closes.iloc[-period:].mean())


def volatility(closes: pd.Series) -> Optional[float]:
    """Population standard deviation of the last 20 daily % returns.

    Needs 21 closes. A step whose prior close is exactly zero is skipped, which
    shrinks the sample; None is returned if nothing is left.
    """
    if len(closes) < RETURN_WINDOW + 1:
        return None
    window = closes.iloc[-(RETURN_WINDOW + 1):].reset_index(drop=True)
    previous = window.iloc[:-1].reset_index(drop=True)
    current = window.iloc[1:].reset_index(drop=True)

    valid = previous != 0
    returns = (current[valid] - previous[valid]) / previous[valid] * 100
    if returns.empty:
        return None
    return float(returns.std(ddof=0))


def range_extremes(bars: list[DailyBar], quote: Quote) -> tuple[float, float]:
    """Highest high and lowest low over *bars*, falling back to the quote's day range."""
    highest = pd.Series([bar.high for bar in bars], dtype=float).max()
    lowest = pd.Series([bar.low for bar in bars], dtype=float).min()
    return (
        quote.high if pd.isna(highest) else float(highest),
        quote.low if pd.isna(lowest) else float(lowest),
    )


def compute_indicators(bars: list[DailyBar], quote: Quote) -> IndicatorSet:
    """Build the full IndicatorSet from an oldest-to-newest series."""
    closes = closing_prices(bars)
    sma10, sma20, sma50 = (sma(closes, period) for period in SMA_PERIODS)
    high, low = range_extremes(bars, quote)
    return IndicatorSet(
        sma10=sma10,
        sma20=sma20,
        sma50=sma50,
        volatility=volatility(closes),
        high52w=high,
        low52w=low,
    )


def degraded_indicators(quote: Quote) -> IndicatorSet:
    """Quote-only indicators used when no history could be fetched."""
    return IndicatorSet(
        sma10=None,
        sma20=None,
        sma50=None,
        volatility=None,
        high52w=quote.high,
        low52w=quote.low,
    )
