"""
FastAPI entry point: local development server.

This module is the Composition Root for local runs. `.env` is loaded first so
ALPHA_VANTAGE_API_KEY and friends can live outside the shell.

Run locally (pip install -e ".[local]" for uvicorn):
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv()

from src.infrastructure.entrypoints.composition import (  # noqa: E402
    build_snapshot_use_case,
    configure_logging,
    load_settings,
)
from src.infrastructure.entrypoints.responses import to_http_response  # noqa: E402

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_settings = load_settings()
configure_logging(_settings)
_snapshot_use_case = build_snapshot_use_case(_settings)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title="Market Snapshot API")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"])


@app.api_route(
    "/stock-data",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
)
def stock_data():
    """Quote, daily history and indicators for the configured symbol."""
    status_code, body = to_http_response(_snapshot_use_case.execute(_settings.symbol))
    return JSONResponse(status_code=status_code, content=body)


@app.get("/health")
async def health():
    return {"status": "ok"}
