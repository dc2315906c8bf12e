"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from schemas.client import DISCOVERY_API_URL, ClientConfig


class Settings(BaseSettings):
    """All configuration comes from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Discovery API ---
    discovery_api_url: str = DISCOVERY_API_URL
    discovery_api_key: SecretStr = SecretStr("")
    http_timeout_seconds: float = 10.0

    # --- Observability ---
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @property
    def has_api_key(self) -> bool:
        return bool(self.discovery_api_key.get_secret_value())

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            api_url=self.discovery_api_url,
            api_key=self.discovery_api_key,
            timeout=self.http_timeout_seconds,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
