"""
Infrastructure adapter: Alpha Vantage REST API → IStockDataProvider.
All Alpha Vantage specifics (query functions, numbered field labels, throttling
notices) are confined here; the rest of the codebase depends only on IStockDataProvider.
"""

import logging
import math
from itertools import islice
from typing import Any, Optional

import httpx

from src.domain.entities.market_data import DailyBar, Quote
from src.domain.errors import ProviderNoDataError, ProviderRateLimitedError
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.stock_data.provider_response import (
    ResponseKind,
    classify_provider_response,
)

logger = logging.getLogger(__name__)

ALPHA_VANTAGE_URL = "https://www.alphavantage.co"

QUOTE_KEY = "Global Quote"
SERIES_KEY = "Time Series (Daily)"

# outputsize=compact returns the latest 100 bars; the cap also guards larger payloads
MAX_BARS = 100


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class AlphaVantageStockDataProvider(IStockDataProvider):
    """Fetches quotes and daily bars from Alpha Vantage over HTTP."""

    def __init__(
        self,
        api_key: str,
        client: Optional[httpx.Client] = None,
        base_url: str = ALPHA_VANTAGE_URL,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._base_url = base_url.rstrip("/")

    def get_quote(self, symbol: str) -> Quote:
        payload = self._query(function="GLOBAL_QUOTE", symbol=symbol)
        response = classify_provider_response(payload, QUOTE_KEY)

        if response.kind is ResponseKind.RATE_LIMITED:
            raise ProviderRateLimitedError(response.message)
        if response.kind is ResponseKind.NO_DATA:
            raise ProviderNoDataError(payload)

        fields = response.data
        return Quote(
            symbol=fields.get("01. symbol", symbol),
            open=_to_float(fields.get("02. open")),
            high=_to_float(fields.get("03. high")),
            low=_to_float(fields.get("04. low")),
            price=_to_float(fields.get("05. price")),
            volume=_to_int(fields.get("06. volume")),
            latest_day=fields.get("07. latest trading day", ""),
            previous_close=_to_float(fields.get("08. previous close")),
            change=_to_float(fields.get("09. change")),
            change_percent=fields.get("10. change percent", ""),
        )

    def get_daily_series(self, symbol: str) -> list[DailyBar]:
        payload = self._query(function="TIME_SERIES_DAILY", symbol=symbol, outputsize="compact")
        response = classify_provider_response(payload, SERIES_KEY)

        if response.kind is ResponseKind.RATE_LIMITED:
            raise ProviderRateLimitedError(response.message)
        if response.kind is ResponseKind.NO_DATA:
            logger.info("No daily series returned for %s", symbol)
            return []

        # Provider order is newest first
        bars = [
            _to_bar(date, values)
            for date, values in islice(response.data.items(), MAX_BARS)
        ]
        bars.reverse()
        return bars

    def _query(self, **params: str) -> Any:
        logger.debug("Alpha Vantage request: %s", params)
        resp = self._client.get(
            f"{self._base_url}/query",
            params={**params, "apikey": self._api_key},
        )
        resp.raise_for_status()
        return resp.json()


def _to_bar(date: str, values: Any) -> DailyBar:
    if not isinstance(values, dict):
        values = {}
    return DailyBar(
        date=date,
        open=_to_float(values.get("1. open")),
        high=_to_float(values.get("2. high")),
        low=_to_float(values.get("3. low")),
        close=_to_float(values.get("4. close")),
        volume=_to_int(values.get("5. volume")),
    )
