"""Shared fixtures for tests, all HTTP traffic mocked with respx."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import SecretStr

from discovery.client import DiscoveryClient
from schemas.client import ClientConfig
from factories import API_KEY, BASE_URL


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_url=BASE_URL, api_key=SecretStr(API_KEY))


@pytest.fixture
def client(config) -> DiscoveryClient:
    return DiscoveryClient(config)


@pytest.fixture
def anonymous_client() -> DiscoveryClient:
    return DiscoveryClient(ClientConfig(api_url=BASE_URL))


@pytest.fixture
def sample_events() -> list[dict[str, Any]]:
    return [
        {
            "id": "vvG1zZ4pJ3xKoQ",
            "name": "Blue Note Jazz Night",
            "dates": {"start": {"localDate": "2026-11-02"}},
            "_embedded": {"venues": [{"name": "Village Vanguard"}]},
        },
        {
            "id": "G5diZf3Ek9Tp1",
            "name": "Symphony No. 9",
            "dates": {"start": {"localDate": "2026-11-05"}},
            "_embedded": {"venues": [{"name": "Carnegie Hall"}]},
        },
    ]
