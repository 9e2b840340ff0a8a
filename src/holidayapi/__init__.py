"""Python client for the HolidayAPI.com web service."""

from holidayapi.adapters.holidayapi_client import HolidayAPI
from holidayapi.core.domain.endpoint import Endpoint
from holidayapi.core.domain.models import (
    ClientConfig,
    CountriesRequest,
    CountriesResponse,
    HolidaysRequest,
    HolidaysResponse,
    LanguagesRequest,
    LanguagesResponse,
    WorkdayRequest,
    WorkdayResponse,
)
from holidayapi.core.errors import (
    ConfigurationError,
    HolidayAPIError,
    RemoteError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "CountriesRequest",
    "CountriesResponse",
    "Endpoint",
    "HolidayAPI",
    "HolidayAPIError",
    "HolidaysRequest",
    "HolidaysResponse",
    "LanguagesRequest",
    "LanguagesResponse",
    "RemoteError",
    "ValidationError",
    "WorkdayRequest",
    "WorkdayResponse",
]
