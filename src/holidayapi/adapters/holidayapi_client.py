"""Adaptador para HolidayAPI.com.

Responsabilidad:
- Guardar la `ClientConfig` inmutable (key + base URL).
- Exponer una corrutina por recurso remoto, validando el request antes.
- Hacer el GET y normalizar el payload: JSON decodificado si hay éxito,
  `RemoteError` si no.

Sin reintentos ni caché: una llamada, un request.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from holidayapi.adapters.http_client import build_async_client
from holidayapi.core.config import AppSettings, load_settings
from holidayapi.core.domain.endpoint import Endpoint
from holidayapi.core.domain.models import (
    ClientConfig,
    CountriesRequest,
    HolidaysRequest,
    LanguagesRequest,
    WorkdayRequest,
)
from holidayapi.core.errors import RemoteError
from holidayapi.core.services import (
    build_client_config,
    build_url,
    coerce_request,
    validate_holidays_request,
    validate_workday_request,
)

_logger = logging.getLogger("holidayapi.client")

Payload = dict[str, Any]


def _redact(url: str, key: str) -> str:
    return url.replace(key, "****")


def _decode_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}


def _error_message(payload: Any, response: httpx.Response) -> str:
    error = payload.get("error") if isinstance(payload, dict) else None
    if error:
        return str(error)
    return response.reason_phrase or httpx.codes.get_reason_phrase(response.status_code)


class HolidayAPI:
    """Client for https://holidayapi.com.

    Usage:
        client = HolidayAPI(key="...")
        payload = await client.holidays({"country": "US", "year": 2020})
    """

    def __init__(
        self,
        key: str | None = None,
        version: int = 1,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = build_client_config(key, version)
        self._settings = settings or load_settings()
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HolidayAPI":
        """Build a client from `HOLIDAYAPI_API_KEY` / `HOLIDAYAPI_API_VERSION`."""

        settings = settings or load_settings()
        return cls(
            key=settings.api_key,
            version=settings.api_version,
            settings=settings,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def key(self) -> str:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def create_url(self, endpoint: Endpoint | str, request: Any = None) -> str:
        """URL for `endpoint` with the key and the request fields as query."""

        params: Mapping[str, Any] | None
        if request is None:
            params = None
        elif isinstance(request, Mapping):
            params = request
        else:
            params = request.model_dump(exclude_none=True, warnings=False)
        return build_url(self._config, Endpoint(endpoint), params)

    async def _request(self, endpoint: Endpoint, request: Any = None) -> Payload:
        url = self.create_url(endpoint, request)
        _logger.debug("GET %s", _redact(url, self.key))

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            _logger.warning("%s request failed: %s", endpoint.value, exc)
            raise RemoteError(str(exc) or type(exc).__name__) from exc

        payload = _decode_payload(response)

        if not response.is_success:
            message = _error_message(payload, response)
            _logger.warning(
                "%s returned HTTP %s: %s", endpoint.value, response.status_code, message
            )
            raise RemoteError(message, status_code=response.status_code)

        return payload

    async def countries(self, request: CountriesRequest | Mapping[str, Any] | None = None) -> Payload:
        return await self._request(Endpoint.COUNTRIES, coerce_request(CountriesRequest, request))

    async def holidays(self, request: HolidaysRequest | Mapping[str, Any] | None = None) -> Payload:
        parsed = coerce_request(HolidaysRequest, request)
        validate_holidays_request(parsed)
        return await self._request(Endpoint.HOLIDAYS, parsed)

    async def languages(self, request: LanguagesRequest | Mapping[str, Any] | None = None) -> Payload:
        return await self._request(Endpoint.LANGUAGES, coerce_request(LanguagesRequest, request))

    async def workday(self, request: WorkdayRequest | Mapping[str, Any] | None = None) -> Payload:
        parsed = coerce_request(WorkdayRequest, request)
        validate_workday_request(parsed)
        return await self._request(Endpoint.WORKDAY, parsed)
