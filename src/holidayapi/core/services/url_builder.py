"""Query-string and URL construction.

Pure functions: no I/O, same input gives the same URL.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any
from urllib.parse import urlencode, urljoin

from holidayapi.core.domain.endpoint import Endpoint
from holidayapi.core.domain.models import ClientConfig


def serialize_value(value: Any) -> str:
    """Textual form of a query parameter value."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return serialize_value(value.value)
    if isinstance(value, date):
        # datetime is a date subclass; both render as ISO 8601.
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(serialize_value(item) for item in value)
    return str(value)


def serialize_params(api_key: str, params: Mapping[str, Any] | None = None) -> dict[str, str]:
    """Merge the API key with the request fields.

    `key` always comes first and always carries `api_key`, whatever the
    request says. `None` values are dropped.
    """

    out: dict[str, str] = {"key": api_key}
    for name, value in (params or {}).items():
        if name == "key" or value is None:
            continue
        out[name] = serialize_value(value)
    return out


def build_url(config: ClientConfig, endpoint: Endpoint, params: Mapping[str, Any] | None = None) -> str:
    """Resolve `endpoint` against the base URL and attach the encoded query."""

    base = urljoin(config.base_url, Endpoint(endpoint).value)
    query = urlencode(serialize_params(config.api_key, params))
    return f"{base}?{query}"
