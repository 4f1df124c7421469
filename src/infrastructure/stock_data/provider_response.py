"""
Classification of raw Alpha Vantage payloads.

Alpha Vantage answers throttled requests with HTTP 200 and a body holding a
"Note" (per-minute limit) or "Information" (daily limit, premium endpoints)
field instead of data. Both clients share this single policy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

RATE_LIMIT_MARKERS = ("Note", "Information")


class ResponseKind(str, Enum):
    RATE_LIMITED = "rate_limited"
    NO_DATA = "no_data"
    DATA = "data"


@dataclass(frozen=True)
class ProviderResponse:
    kind: ResponseKind
    data: Optional[dict] = None
    message: Optional[str] = None


def classify_provider_response(payload: Any, data_key: str) -> ProviderResponse:
    """Tag *payload* as rate limited, empty, or carrying a non-empty *data_key* object."""
    if not isinstance(payload, dict):
        return ProviderResponse(ResponseKind.NO_DATA)

    for marker in RATE_LIMIT_MARKERS:
        if marker in payload:
            return ProviderResponse(ResponseKind.RATE_LIMITED, message=str(payload[marker]))

    data = payload.get(data_key)
    if not isinstance(data, dict) or not data:
        return ProviderResponse(ResponseKind.NO_DATA)
    return ProviderResponse(ResponseKind.DATA, data=data)
