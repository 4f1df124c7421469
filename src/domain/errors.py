"""
Domain exceptions raised by stock data providers.
Transport and parse failures are not wrapped: they surface as whatever the
HTTP client or JSON decoder raises and are handled generically.
"""

from typing import Any


class ProviderRateLimitedError(Exception):
    """The provider answered with a throttling/informational notice instead of data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProviderNoDataError(Exception):
    """The provider answered without the expected data object."""

    def __init__(self, payload: Any) -> None:
        super().__init__("No data returned from provider")
        self.payload = payload
