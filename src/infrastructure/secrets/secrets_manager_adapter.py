"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

The snapshot function keeps its Alpha Vantage key in a JSON secret, e.g.
{"ALPHA_VANTAGE_API_KEY": "..."}. The Composition Root copies it into the
environment on cold start, before Settings is built, so the stored key
replaces the shared demo key.
"""

import json
import logging
import os

import boto3

from src.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger(__name__)


class SecretsManagerAdapter(ISecretStore):
    """Reads JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None) -> None:
        self._client = boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str) -> None:
        """Export every entry of the secret as an environment variable (values stringified)."""
        secrets = self.get_secret(secret_id)
        for key, value in secrets.items():
            os.environ[key] = str(value)
        logger.info("Exported %d secret value(s) from %s", len(secrets), secret_id)
