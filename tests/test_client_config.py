"""
Client Construction Tests
-------------------------
Key/version checks and the derived base URL. No network involved.
"""

import pytest

from conftest import API_KEY, RecordingTransport
from holidayapi import ClientConfig, ConfigurationError, HolidayAPI
from holidayapi.core.config import AppSettings
from holidayapi.core.services import build_client_config, is_api_key


class TestBuildClientConfig:
    """Tests for build_client_config()."""

    def test_missing_key(self):
        with pytest.raises(ConfigurationError, match="missing API key"):
            build_client_config(None)

    def test_empty_key_is_missing(self):
        with pytest.raises(ConfigurationError, match="missing API key"):
            build_client_config("")

    def test_invalid_key(self):
        with pytest.raises(ConfigurationError, match="invalid API key"):
            build_client_config("not-a-uuid")

    def test_key_with_surrounding_text_is_invalid(self):
        with pytest.raises(ConfigurationError, match="invalid API key"):
            build_client_config(f"x{API_KEY}x")

    def test_uppercase_hex_is_accepted(self):
        config = build_client_config(API_KEY.upper())
        assert config.api_key == API_KEY.upper()

    def test_default_version(self):
        config = build_client_config(API_KEY)

        assert config.version == 1
        assert config.base_url == "https://holidayapi.com/v1/"

    def test_invalid_version(self):
        with pytest.raises(ConfigurationError, match="invalid version"):
            build_client_config(API_KEY, version=2)

    def test_bool_version_rejected(self):
        with pytest.raises(ConfigurationError, match="invalid version"):
            build_client_config(API_KEY, version=True)

    def test_key_checked_before_version(self):
        with pytest.raises(ConfigurationError, match="invalid API key"):
            build_client_config("not-a-uuid", version=2)

    def test_config_is_frozen(self):
        config = build_client_config(API_KEY)

        with pytest.raises(Exception):
            config.api_key = "other"

    def test_is_api_key(self):
        assert is_api_key(API_KEY)
        assert not is_api_key("123e4567-e89b-12d3-a456")


class TestHolidayAPIConstruction:
    """Tests for HolidayAPI.__init__ / from_settings."""

    def test_missing_key(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            HolidayAPI(settings=settings)

        assert str(exc_info.value) == "missing API key"

    def test_valid_key(self, settings):
        client = HolidayAPI(key=API_KEY, settings=settings)

        assert client.key == API_KEY
        assert client.base_url == "https://holidayapi.com/v1/"
        assert isinstance(client.config, ClientConfig)

    def test_invalid_version(self, settings):
        with pytest.raises(ConfigurationError, match="invalid version"):
            HolidayAPI(key=API_KEY, version=2, settings=settings)

    def test_construction_makes_no_request(self, settings):
        transport = RecordingTransport()

        HolidayAPI(key=API_KEY, settings=settings, transport=transport)

        assert transport.requests == []

    def test_from_settings(self):
        settings = AppSettings(_env_file=None, api_key=API_KEY)

        client = HolidayAPI.from_settings(settings)

        assert client.key == API_KEY

    def test_from_settings_without_key(self):
        with pytest.raises(ConfigurationError, match="missing API key"):
            HolidayAPI.from_settings(AppSettings(_env_file=None))

    def test_from_settings_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYAPI_API_KEY", API_KEY)

        client = HolidayAPI.from_settings(AppSettings(_env_file=None))

        assert client.key == API_KEY


class TestBrokenSettings:
    """Bad HOLIDAYAPI_* values surface as ConfigurationError."""

    def test_bad_timeout_in_environment(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYAPI_HTTP_TIMEOUT_SECONDS", "abc")

        with pytest.raises(ConfigurationError, match="http_timeout_seconds") as exc_info:
            HolidayAPI(key=API_KEY)

        assert exc_info.value.__cause__ is not None

    def test_from_settings_with_bad_environment(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYAPI_API_VERSION", "one")

        with pytest.raises(ConfigurationError, match="api_version"):
            HolidayAPI.from_settings()

    def test_explicit_settings_skip_environment(self, monkeypatch, settings):
        monkeypatch.setenv("HOLIDAYAPI_HTTP_TIMEOUT_SECONDS", "abc")

        client = HolidayAPI(key=API_KEY, settings=settings)

        assert client.key == API_KEY
