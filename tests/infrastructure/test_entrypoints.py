"""End-to-end tests for the Lambda handler and the FastAPI app.

The Composition Root's use case is swapped for one whose provider talks to an
httpx.MockTransport, so each scenario exercises the full adapter → use case →
response path without network access.
"""

import json
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from src.application.use_cases.get_market_snapshot import GetMarketSnapshotUseCase
from src.infrastructure.entrypoints import composition, fastapi_app, lambda_handler
from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageStockDataProvider
from tests.helpers import daily_series_payload, global_quote_payload

CLOSES_60 = [100.0 + (i % 7) - i * 0.25 for i in range(60)]


def _use_case(quote_payload, series_payload) -> GetMarketSnapshotUseCase:
    def handler(request: httpx.Request) -> httpx.Response:
        function = request.url.params["function"]
        payload = quote_payload if function == "GLOBAL_QUOTE" else series_payload
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, bytes):
            return httpx.Response(200, content=payload, headers={"Content-Type": "application/json"})
        return httpx.Response(200, json=payload)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    provider = AlphaVantageStockDataProvider(api_key="demo", client=client)
    return GetMarketSnapshotUseCase(provider, series_delay=0)


@pytest.fixture
def invoke(monkeypatch):
    """Run the Lambda handler against the given provider payloads; returns (status, body, headers)."""

    def _invoke(quote_payload, series_payload=None, event=None):
        monkeypatch.setattr(lambda_handler, "_snapshot_use_case", _use_case(quote_payload, series_payload))
        response = lambda_handler.handler(event or {"httpMethod": "GET"})
        return response["statusCode"], json.loads(response["body"]), response["headers"]

    return _invoke


def test_scenario_a_quote_rate_limited(invoke):
    status, body, _ = invoke({"Note": "Thank you for using Alpha Vantage!"})

    assert status == 429
    assert body["success"] is False
    assert "free tier allows 25 requests/day" in body["hint"]


def test_scenario_b_quote_empty(invoke):
    status, body, _ = invoke({"Global Quote": {}})

    assert status == 500
    assert body["success"] is False
    assert body["debug"] == {"Global Quote": {}}


def test_scenario_c_series_rate_limited(invoke):
    status, body, _ = invoke(global_quote_payload(), {"Information": "daily limit reached"})

    assert status == 200
    assert body["success"] is True
    assert body["historical"] == []
    assert body["indicators"]["sma10"] is None
    assert body["indicators"]["high52w"] == body["current"]["high"]
    assert body["indicators"]["low52w"] == body["current"]["low"]
    assert body["warning"]


def test_scenario_d_full_success(invoke):
    status, body, headers = invoke(global_quote_payload(), daily_series_payload(CLOSES_60))

    assert status == 200
    assert headers["Content-Type"] == "application/json"
    assert "warning" not in body
    indicators = body["indicators"]
    assert indicators["sma10"] == pytest.approx(sum(CLOSES_60[-10:]) / 10)
    assert indicators["sma20"] == pytest.approx(sum(CLOSES_60[-20:]) / 20)
    assert indicators["sma50"] is not None
    assert indicators["volatility"] is not None
    dates = [bar["date"] for bar in body["historical"]]
    assert len(dates) <= 60
    assert dates == sorted(dates)
    assert body["lastUpdated"].endswith("Z")


def test_scenario_e_non_numeric_close(invoke):
    closes = [float(i) for i in range(1, 12)] + ["bad"]
    status, body, _ = invoke(global_quote_payload(), daily_series_payload(closes))

    assert status == 200
    assert len(body["historical"]) == 12
    assert body["historical"][-1]["close"] is None
    assert body["indicators"]["sma10"] == pytest.approx(sum(range(2, 12)) / 10)


def test_transport_failure_is_500(invoke):
    status, body, _ = invoke(httpx.ConnectError("dns failure"))

    assert status == 500
    assert body == {"success": False, "error": "dns failure"}


def test_overflowing_quote_number_is_null(invoke):
    quote = global_quote_payload()
    quote["Global Quote"]["05. price"] = "1e999"

    status, body, _ = invoke(quote, daily_series_payload(CLOSES_60))

    assert status == 200
    assert body["current"]["price"] is None


def test_non_finite_debug_payload_is_serializable(invoke):
    status, body, _ = invoke(b'{"Global Quote": {}, "x": NaN, "y": Infinity}')

    assert status == 500
    assert body["success"] is False
    assert body["debug"] == {"Global Quote": {}, "x": None, "y": None}


def test_handler_accepts_http_api_events(invoke):
    event = {"requestContext": {"http": {"method": "POST"}}}
    status, _, _ = invoke({"Note": "limit"}, event=event)
    assert status == 429


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(
        fastapi_app,
        "_snapshot_use_case",
        _use_case(global_quote_payload(), daily_series_payload(CLOSES_60)),
    )
    return TestClient(fastapi_app.app)


@pytest.mark.parametrize("method", ["get", "post"])
def test_fastapi_stock_data(client, method):
    resp = getattr(client, method)("/stock-data")

    assert resp.status_code == 200
    assert resp.json()["current"]["symbol"] == "IBM"
    assert len(resp.json()["historical"]) == 60


def test_fastapi_non_finite_values(monkeypatch):
    quote = global_quote_payload()
    quote["Global Quote"]["03. high"] = "inf"
    monkeypatch.setattr(fastapi_app, "_snapshot_use_case", _use_case(quote, {"Note": "limit"}))

    resp = TestClient(fastapi_app.app).get("/stock-data")

    assert resp.status_code == 200
    assert resp.json()["current"]["high"] is None
    assert resp.json()["indicators"]["high52w"] is None


def test_fastapi_health(client):
    assert client.get("/health").json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Composition Root
# ---------------------------------------------------------------------------


def test_load_settings_pulls_secret_first(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_SECRET_ARN", "arn:secret")
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "demo")

    def fake_load(self, secret_id):
        assert secret_id == "arn:secret"
        monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "from-secret")

    with patch(
        "src.infrastructure.secrets.secrets_manager_adapter.SecretsManagerAdapter.__init__",
        return_value=None,
    ), patch(
        "src.infrastructure.secrets.secrets_manager_adapter.SecretsManagerAdapter.load_into_env",
        fake_load,
    ):
        settings = composition.load_settings()

    assert settings.api_key == "from-secret"
