"""Construction checks for `ClientConfig`."""

from __future__ import annotations

import re

from holidayapi.core.domain.models import ClientConfig
from holidayapi.core.errors import ConfigurationError

SUPPORTED_VERSION = 1

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_api_key(value: str) -> bool:
    return _UUID_RE.fullmatch(value) is not None


def build_client_config(key: str | None, version: int = SUPPORTED_VERSION) -> ClientConfig:
    """Validate the key and version and return a frozen `ClientConfig`.

    Raises `ConfigurationError` with one of:
    - "missing API key"
    - "invalid API key"
    - "invalid version"
    """

    if not key:
        raise ConfigurationError("missing API key")
    if not isinstance(key, str) or not is_api_key(key):
        raise ConfigurationError("invalid API key")
    # bool is an int subclass: True == 1 must not pass.
    if isinstance(version, bool) or version != SUPPORTED_VERSION:
        raise ConfigurationError("invalid version")

    return ClientConfig(api_key=key, version=version)
