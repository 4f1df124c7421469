"""
Use-case: build the market snapshot for one symbol (quote, history, indicators).
Depends only on Domain ports, entities and application services: no infrastructure imports.

The two provider calls are strictly sequential. A throttled quote call fails the
request; a throttled series call degrades it to a quote-only partial success.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from src.application.services.indicator_engine import compute_indicators, degraded_indicators
from src.domain.entities.snapshot_result import (
    SnapshotFailure,
    SnapshotPartialSuccess,
    SnapshotResult,
    SnapshotSuccess,
)
from src.domain.errors import ProviderNoDataError, ProviderRateLimitedError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)

RATE_LIMIT_ERROR = "API rate limit reached"
RATE_LIMIT_HINT = (
    "Alpha Vantage free tier allows 25 requests/day and 5/minute. "
    "Please wait a minute and try again."
)
NO_DATA_ERROR = "No data returned from Alpha Vantage"
PARTIAL_WARNING = "Historical data unavailable due to API rate limit. Showing current quote only."


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class GetMarketSnapshotUseCase:
    def __init__(
        self,
        provider: IStockDataProvider,
        series_delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        """
        Args:
            provider:     IStockDataProvider implementation (e.g. AlphaVantageStockDataProvider).
            series_delay: Seconds to pause between the quote and series calls; 0 disables.
            sleep:        Blocking sleep used for the pause (injectable for tests).
            clock:        Returns the lastUpdated timestamp string.
        """
        self._provider = provider
        self._series_delay = series_delay
        self._sleep = sleep
        self._clock = clock

    def execute(self, symbol: str) -> SnapshotResult:
        """Fetch and assemble the snapshot for *symbol* (uppercased).

        Never raises: every failure is returned as a SnapshotFailure.
        """
        try:
            return self._build(symbol.upper().strip())
        except Exception as exc:
            logger.exception("Snapshot for %s failed", symbol)
            return SnapshotFailure(status_code=500, error=str(exc))

    def _build(self, symbol: str) -> SnapshotResult:
        if not symbol:
            raise ValueError("symbol must be a non-empty string")

        try:
            quote = self._provider.get_quote(symbol)
        except ProviderRateLimitedError as exc:
            logger.warning("Quote request for %s rate limited: %s", symbol, exc.message)
            return SnapshotFailure(status_code=429, error=RATE_LIMIT_ERROR, hint=RATE_LIMIT_HINT)
        except ProviderNoDataError as exc:
            logger.warning("Quote request for %s returned no data", symbol)
            return SnapshotFailure(status_code=500, error=NO_DATA_ERROR, debug=exc.payload)

        if self._series_delay > 0:
            self._sleep(self._series_delay)

        try:
            bars = self._provider.get_daily_series(symbol)
        except ProviderRateLimitedError as exc:
            logger.warning("Series request for %s rate limited: %s", symbol, exc.message)
            return SnapshotPartialSuccess(
                current=quote,
                indicators=degraded_indicators(quote),
                last_updated=self._clock(),
                warning=PARTIAL_WARNING,
            )

        logger.info("Snapshot for %s built from %d daily bars", symbol, len(bars))
        return SnapshotSuccess(
            current=quote,
            historical=bars,
            indicators=compute_indicators(bars, quote),
            last_updated=self._clock(),
        )
