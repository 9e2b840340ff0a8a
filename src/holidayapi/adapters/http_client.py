"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers (JSON) de todas las llamadas al servicio.
- Facilita testeo: acepta un transport propio (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from holidayapi.core.config import AppSettings, load_settings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with JSON defaults."""

    settings = settings or load_settings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
