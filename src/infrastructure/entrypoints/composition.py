"""
Composition Root shared by every entrypoint: wires infrastructure adapters into
the snapshot use case from a Settings instance.
"""

import logging
import os

from src.application.use_cases.get_market_snapshot import GetMarketSnapshotUseCase
from src.infrastructure.config.settings import Settings
from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageStockDataProvider


def load_settings() -> Settings:
    """Resolve Settings, pulling secrets from AWS Secrets Manager first when configured.

    ALPHA_VANTAGE_SECRET_ARN must point at a JSON secret, typically
    {"ALPHA_VANTAGE_API_KEY": "..."}.
    """
    secret_arn = os.environ.get("ALPHA_VANTAGE_SECRET_ARN")
    if secret_arn:
        from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
        SecretsManagerAdapter().load_into_env(secret_arn)
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_snapshot_use_case(settings: Settings) -> GetMarketSnapshotUseCase:
    provider = AlphaVantageStockDataProvider(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.http_timeout_seconds,
    )
    return GetMarketSnapshotUseCase(provider, series_delay=settings.series_delay_seconds)
