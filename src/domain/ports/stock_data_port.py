"""
Port (interface) for stock data providers.
Infrastructure adapters (e.g. AlphaVantageStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.market_data import DailyBar, Quote


class IStockDataProvider(ABC):
    @abstractmethod
    def get_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for *symbol*.

        Raises:
            ProviderRateLimitedError: the provider throttled the request.
            ProviderNoDataError:      the response carried no quote object.
        """
        ...

    @abstractmethod
    def get_daily_series(self, symbol: str) -> list[DailyBar]:
        """Fetch up to 100 daily bars for *symbol*, oldest first.

        Returns an empty list when the provider sends no series.

        Raises:
            ProviderRateLimitedError: the provider throttled the request.
        """
        ...
