"""Shared builders for domain objects and raw Alpha Vantage payloads."""

from datetime import date, timedelta

from src.domain.entities.market_data import DailyBar, Quote


def make_quote(**overrides) -> Quote:
    fields = dict(
        symbol="IBM",
        open=180.0,
        high=184.5,
        low=179.25,
        price=183.1,
        volume=4_200_000,
        latest_day="2024-05-31",
        previous_close=181.0,
        change=2.1,
        change_percent="1.1602%",
    )
    fields.update(overrides)
    return Quote(**fields)


def make_bars(closes, start=date(2024, 1, 1)) -> list[DailyBar]:
    """Oldest-first bars with high/low one point around each close."""
    return [
        DailyBar(
            date=(start + timedelta(days=i)).isoformat(),
            open=close,
            high=close + 1,
            low=close - 1,
            close=close,
            volume=1000 + i,
        )
        for i, close in enumerate(closes)
    ]


def global_quote_payload(symbol="IBM") -> dict:
    return {
        "Global Quote": {
            "01. symbol": symbol,
            "02. open": "180.0000",
            "03. high": "184.5000",
            "04. low": "179.2500",
            "05. price": "183.1000",
            "06. volume": "4200000",
            "07. latest trading day": "2024-05-31",
            "08. previous close": "181.0000",
            "09. change": "2.1000",
            "10. change percent": "1.1602%",
        }
    }


def daily_series_payload(closes, start=date(2024, 1, 1)) -> dict:
    """TIME_SERIES_DAILY payload, newest date first as the provider sends it.

    *closes* are given oldest first; entries may be strings to simulate bad data.
    """
    entries = {}
    for i, close in reversed(list(enumerate(closes))):
        day = (start + timedelta(days=i)).isoformat()
        entries[day] = {
            "1. open": str(close),
            "2. high": str(float(close) + 1) if _numeric(close) else "n/a",
            "3. low": str(float(close) - 1) if _numeric(close) else "n/a",
            "4. close": str(close),
            "5. volume": str(1000 + i),
        }
    return {
        "Meta Data": {"1. Information": "Daily Prices", "2. Symbol": "IBM"},
        "Time Series (Daily)": entries,
    }


def _numeric(value) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True
