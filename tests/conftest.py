from typing import Callable, List

import httpx
import pytest

from dashboard_client.clients import http_client
from dashboard_client.clients.http_client import DashboardClient
from dashboard_client.core.config import ClientConfig, get_settings

BASE_URL = "https://api.test.local/api/v1"


def make_client(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> DashboardClient:
    """Client whose transport answers every request with ``handler``."""
    config = ClientConfig(base_url=BASE_URL, api_key="test-key", **overrides)
    return DashboardClient(config, transport=httpx.MockTransport(handler))


@pytest.fixture
def sleeps(monkeypatch) -> List[float]:
    """Record backoff delays instead of actually sleeping."""
    recorded: List[float] = []

    async def _fake_wait(self, delay: float) -> None:
        recorded.append(delay)

    monkeypatch.setattr(DashboardClient, "_wait", _fake_wait)
    return recorded


@pytest.fixture(autouse=True)
def clear_cached_settings():
    get_settings.cache_clear()
    http_client.get_client.cache_clear()
    yield
    get_settings.cache_clear()
    http_client.get_client.cache_clear()


@pytest.fixture
def client_for():
    """Factory fixture wrapping :func:`make_client`."""
    return make_client
