"""
Serverless entry point: AWS Lambda behind an API Gateway / function URL proxy.

Secrets are pulled from AWS Secrets Manager at cold start (when
ALPHA_VANTAGE_SECRET_ARN is set) before the Composition Root reads its settings.
The route takes no parameters and accepts any method.

Deploy with handler: src.infrastructure.entrypoints.lambda_handler.handler
"""

import json
import logging

from src.infrastructure.entrypoints.composition import (
    build_snapshot_use_case,
    configure_logging,
    load_settings,
)
from src.infrastructure.entrypoints.responses import JSON_HEADERS, to_http_response

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once per container
# ---------------------------------------------------------------------------
_settings = load_settings()
configure_logging(_settings)
_snapshot_use_case = build_snapshot_use_case(_settings)

logger = logging.getLogger(__name__)


def handler(event: dict, context=None) -> dict:
    """Lambda proxy handler returning {statusCode, headers, body}."""
    method = (event or {}).get("httpMethod") or _request_context_method(event)
    logger.info("Snapshot requested (method=%s, symbol=%s)", method, _settings.symbol)

    result = _snapshot_use_case.execute(_settings.symbol)
    status_code, body = to_http_response(result)
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, allow_nan=False),
    }


def _request_context_method(event) -> str | None:
    """HTTP API (payload v2) events carry the method under requestContext.http."""
    try:
        return event["requestContext"]["http"]["method"]
    except (KeyError, TypeError):
        return None
