"""
SnapshotResult → HTTP status code and JSON body.
Shared by the Lambda handler and the FastAPI app so both expose one contract.

Keys are camelCase for the browser client. Non-finite numbers never reach the
body: NaN (unparseable fields) and infinities are emitted as null, including
inside the raw provider payload echoed as `debug`, keeping the payload strict JSON.
"""

import math
from typing import Any, Optional

from src.domain.entities.market_data import DailyBar, IndicatorSet, Quote
from src.domain.entities.snapshot_result import SnapshotFailure, SnapshotResult

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def _number(value: Optional[float]) -> Optional[float]:
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        return None
    return value


def _json_safe(value: Any) -> Any:
    """Copy of a decoded JSON value with non-finite floats replaced by None."""
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    if isinstance(value, float):
        return _number(value)
    return value


def quote_body(quote: Quote) -> dict:
    return {
        "symbol": quote.symbol,
        "price": _number(quote.price),
        "open": _number(quote.open),
        "high": _number(quote.high),
        "low": _number(quote.low),
        "volume": quote.volume,
        "latestDay": quote.latest_day,
        "previousClose": _number(quote.previous_close),
        "change": _number(quote.change),
        "changePercent": quote.change_percent,
    }


def bar_body(bar: DailyBar) -> dict:
    return {
        "date": bar.date,
        "open": _number(bar.open),
        "high": _number(bar.high),
        "low": _number(bar.low),
        "close": _number(bar.close),
        "volume": bar.volume,
    }


def indicators_body(indicators: IndicatorSet) -> dict:
    return {
        "sma10": _number(indicators.sma10),
        "sma20": _number(indicators.sma20),
        "sma50": _number(indicators.sma50),
        "volatility": _number(indicators.volatility),
        "high52w": _number(indicators.high52w),
        "low52w": _number(indicators.low52w),
    }


def to_http_response(result: SnapshotResult) -> tuple[int, dict[str, Any]]:
    """Map *result* to (status_code, body)."""
    if isinstance(result, SnapshotFailure):
        body: dict[str, Any] = {"success": False, "error": result.error}
        if result.hint is not None:
            body["hint"] = result.hint
        if result.debug is not None:
            body["debug"] = _json_safe(result.debug)
        return result.status_code, body

    body = {
        "success": True,
        "current": quote_body(result.current),
        "historical": [bar_body(bar) for bar in result.historical],
        "indicators": indicators_body(result.indicators),
        "lastUpdated": result.last_updated,
    }
    warning = getattr(result, "warning", None)
    if warning:
        body["warning"] = warning
    return 200, body
