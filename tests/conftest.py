"""
Shared fixtures
---------------
HolidayAPI is never contacted: every client gets an `httpx.MockTransport`
that records the requests it receives.
"""

import httpx
import pytest

from holidayapi.adapters.holidayapi_client import HolidayAPI
from holidayapi.core.config import AppSettings

API_KEY = "123e4567-e89b-12d3-a456-426614174000"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, status_code=200, json=None, content=None):
        self.requests = []
        self._status_code = status_code
        self._json = json
        self._content = content
        super().__init__(self._handle)

    def _handle(self, request):
        self.requests.append(request)
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(self._status_code, json=self._json if self._json is not None else {})


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep HOLIDAYAPI_* variables from the developer's shell out of tests."""
    for name in ("HOLIDAYAPI_API_KEY", "HOLIDAYAPI_API_VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, http_timeout_seconds=5.0)


@pytest.fixture
def make_client(settings):
    def _make(transport=None, key=API_KEY):
        return HolidayAPI(key=key, settings=settings, transport=transport)

    return _make
