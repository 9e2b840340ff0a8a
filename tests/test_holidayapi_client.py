"""
Request Dispatch Tests
----------------------
Response normalization and per-call independence, against httpx.MockTransport.
"""

import asyncio

import httpx
import pytest

from conftest import API_KEY, RecordingTransport
from holidayapi import CountriesRequest, HolidaysResponse, RemoteError


class TestSuccess:
    """2xx payloads are returned unmodified."""

    @pytest.mark.asyncio
    async def test_holidays_payload(self, make_client):
        client = make_client(RecordingTransport(json={"holidays": []}))

        payload = await client.holidays({"country": "US", "year": 2020})

        assert payload == {"holidays": []}

    @pytest.mark.asyncio
    async def test_unparseable_success_body_is_empty(self, make_client):
        client = make_client(RecordingTransport(content=b"country,name\nUS,United States\n"))

        payload = await client.countries({"format": "csv"})

        assert payload == {}

    @pytest.mark.asyncio
    async def test_typed_view(self, make_client):
        body = {
            "status": 200,
            "requests": {"used": 3, "available": 9997, "resets": "2020-02-01 00:00:00"},
            "holidays": [
                {
                    "name": "New Year's Day",
                    "date": "2020-01-01",
                    "observed": "2020-01-01",
                    "public": True,
                    "country": "US",
                    "uuid": "82f78b8a-019e-479e-a19f-99040275f9bf",
                    "weekday": {
                        "date": {"name": "Wednesday", "numeric": "3"},
                        "observed": {"name": "Wednesday", "numeric": "3"},
                    },
                }
            ],
        }
        client = make_client(RecordingTransport(json=body))

        response = HolidaysResponse.model_validate(await client.holidays({"country": "US", "year": 2020}))

        assert response.requests.used == 3
        assert response.holidays[0].name == "New Year's Day"
        assert response.holidays[0].weekday.date.name == "Wednesday"

    @pytest.mark.asyncio
    async def test_request_is_a_get_with_json_accept(self, make_client):
        transport = RecordingTransport(json={"languages": []})
        client = make_client(transport)

        await client.languages()

        request = transport.requests[0]
        assert request.method == "GET"
        assert request.headers["accept"] == "application/json"
        assert request.url.path == "/v1/languages"
        assert request.url.params["key"] == API_KEY


class TestErrors:
    """Non-2xx and transport failures surface as RemoteError."""

    @pytest.mark.asyncio
    async def test_error_field_is_the_message(self, make_client):
        client = make_client(RecordingTransport(status_code=401, json={"error": "Invalid key"}))

        with pytest.raises(RemoteError) as exc_info:
            await client.countries()

        assert str(exc_info.value) == "Invalid key"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_unparseable_error_uses_reason_phrase(self, make_client):
        client = make_client(RecordingTransport(status_code=500, content=b"<html>oops</html>"))

        with pytest.raises(RemoteError) as exc_info:
            await client.languages()

        assert str(exc_info.value) == "Internal Server Error"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_empty_error_field_uses_reason_phrase(self, make_client):
        client = make_client(RecordingTransport(status_code=429, json={"error": ""}))

        with pytest.raises(RemoteError, match="Too Many Requests"):
            await client.countries()

    @pytest.mark.asyncio
    async def test_transport_failure(self, make_client):
        def _refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(httpx.MockTransport(_refuse))

        with pytest.raises(RemoteError, match="connection refused") as exc_info:
            await client.countries()

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_error_is_logged(self, make_client, caplog):
        client = make_client(RecordingTransport(status_code=401, json={"error": "Invalid key"}))

        with caplog.at_level("WARNING", logger="holidayapi.client"):
            with pytest.raises(RemoteError):
                await client.countries()

        assert "Invalid key" in caplog.text
        assert API_KEY not in caplog.text


class TestIndependence:
    """No caching, no state between calls."""

    @pytest.mark.asyncio
    async def test_countries_twice(self, make_client):
        transport = RecordingTransport(json={"countries": []})
        client = make_client(transport)

        first = await client.countries()
        second = await client.countries()

        assert first == second == {"countries": []}
        assert len(transport.requests) == 2
        assert str(transport.requests[0].url) == str(transport.requests[1].url)

    @pytest.mark.asyncio
    async def test_concurrent_calls(self, make_client):
        transport = RecordingTransport(json={"countries": []})
        client = make_client(transport)

        results = await asyncio.gather(
            client.countries(CountriesRequest(country="US")),
            client.countries(CountriesRequest(country="CA")),
        )

        assert results == [{"countries": []}, {"countries": []}]
        assert sorted(r.url.params["country"] for r in transport.requests) == ["CA", "US"]

    @pytest.mark.asyncio
    async def test_debug_log_redacts_key(self, make_client, caplog):
        client = make_client(RecordingTransport(json={"countries": []}))

        with caplog.at_level("DEBUG", logger="holidayapi.client"):
            await client.countries()

        assert "GET https://holidayapi.com/v1/countries" in caplog.text
        assert API_KEY not in caplog.text
