"""
Port (interface) for looking up deployment secrets such as the Alpha Vantage API key.
The Composition Root only needs "read a named secret"; where it lives is an adapter concern.
"""

from abc import ABC, abstractmethod


class ISecretStore(ABC):
    @abstractmethod
    def get_secret(self, secret_id: str) -> dict:
        """Return the key-value pairs stored under *secret_id*."""
        ...
