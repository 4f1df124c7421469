"""
Domain entities for the outcome of one snapshot request.
Exactly one of these is produced per request and mapped to an HTTP response
by the entrypoint layer.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from src.domain.entities.market_data import DailyBar, IndicatorSet, Quote


@dataclass(frozen=True)
class SnapshotSuccess:
    current: Quote
    historical: list[DailyBar]
    indicators: IndicatorSet
    last_updated: str


@dataclass(frozen=True)
class SnapshotPartialSuccess:
    """Quote-only snapshot: the series call was throttled, history is empty."""

    current: Quote
    indicators: IndicatorSet
    last_updated: str
    warning: str
    historical: list[DailyBar] = field(default_factory=list)


@dataclass(frozen=True)
class SnapshotFailure:
    status_code: int
    error: str
    hint: Optional[str] = None
    debug: Optional[Any] = None


SnapshotResult = Union[SnapshotSuccess, SnapshotPartialSuccess, SnapshotFailure]
