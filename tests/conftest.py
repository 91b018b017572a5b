"""Shared fixtures for the test suite."""

import httpx
import pytest

from prophet_connector.client import SECClient
from prophet_connector.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from connector settings in the environment."""
    for name in (
        "ALPHA_VANTAGE_API_KEY",
        "ALPHA_VANTAGE_BASE_URL",
        "SEC_BASE_URL",
        "SEC_USER_AGENT",
        "SEC_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(sec_user_agent="test-agent (tests@example.com)")


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def make_client(settings, recorded_requests):
    """Factory for an SECClient whose requests are answered by a handler."""
    def _make(handler):
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)
        return SECClient(settings=settings, transport=httpx.MockTransport(_record))
    return _make
