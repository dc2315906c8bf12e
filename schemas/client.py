"""Immutable client configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, SecretStr

DISCOVERY_API_URL = "https://app.ticketmaster.com/discovery/v2"


class ClientConfig(BaseModel):
    """Base URL + API key for the Discovery API. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    api_url: str = DISCOVERY_API_URL
    api_key: SecretStr = SecretStr("")
    timeout: float = 10.0

    @property
    def key(self) -> str:
        """Cleartext API key, only for placing on outgoing URLs."""
        return self.api_key.get_secret_value()
