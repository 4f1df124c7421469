"""
Runtime configuration read from the process environment.
Entrypoints build Settings once at startup; nothing else reads these variables.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.infrastructure.stock_data.alpha_vantage_adapter import ALPHA_VANTAGE_URL

# Shared key accepted by Alpha Vantage for its documented sample symbol
DEMO_API_KEY = "demo"
DEFAULT_SYMBOL = "IBM"


class Settings(BaseSettings):
    api_key: str = Field(DEMO_API_KEY, validation_alias="ALPHA_VANTAGE_API_KEY")
    symbol: str = Field(DEFAULT_SYMBOL, validation_alias="SNAPSHOT_SYMBOL")
    base_url: str = Field(ALPHA_VANTAGE_URL, validation_alias="ALPHA_VANTAGE_BASE_URL")
    series_delay_seconds: float = Field(
        1.5, ge=0, allow_inf_nan=False, validation_alias="SERIES_DELAY_SECONDS"
    )
    http_timeout_seconds: float = Field(
        10.0, ge=0, allow_inf_nan=False, validation_alias="HTTP_TIMEOUT_SECONDS"
    )
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    secret_arn: Optional[str] = Field(None, validation_alias="ALPHA_VANTAGE_SECRET_ARN")

    # Empty variables (e.g. ALPHA_VANTAGE_API_KEY=) fall back to the defaults
    model_config = SettingsConfigDict(env_ignore_empty=True, frozen=True)

    @field_validator("symbol", "log_level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()
