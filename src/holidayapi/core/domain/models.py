"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Documentación autocontenida (Field) sin acoplar el Core a librerías de I/O.
- Un modelo por endpoint (variantes tipadas) en vez de dicts arbitrarios.

Nota:
- Los campos de los requests son opcionales y aceptan cualquier valor de
  query; las reglas obligatorias viven en los validadores pre-flight.
- Los modelos de respuesta son *vistas* tipadas: el cliente devuelve el JSON
  sin modificar y quien llama opta por `model_validate`.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Any value the query string can carry.
QueryValue = bool | int | float | str | date | list[Any]


class ClientConfig(BaseModel):
    """Immutable client setup. Build it with `build_client_config`."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(
        ...,
        min_length=1,
        description="HolidayAPI.com key (UUID textual shape).",
    )
    version: int = Field(
        default=1,
        description="API version, only 1 is supported.",
    )

    @property
    def base_url(self) -> str:
        return f"https://holidayapi.com/v{self.version}/"


class _BaseRequest(BaseModel):
    # Unknown service parameters are forwarded as-is.
    model_config = ConfigDict(extra="allow")

    format: QueryValue | None = Field(
        default=None,
        description="Response format (csv, json, php, tsv, xml, yaml), JSON when omitted.",
    )
    pretty: QueryValue | None = Field(
        default=None,
        description="Ask the service to pretty-print the payload.",
    )


class CountriesRequest(_BaseRequest):
    country: QueryValue | None = Field(default=None, description="Return a single country by code.")
    search: QueryValue | None = Field(default=None, description="Search countries by code and name.")
    public: QueryValue | None = Field(default=None, description="Only countries with public holidays.")


class HolidaysRequest(_BaseRequest):
    country: QueryValue | None = Field(default=None, description="ISO 3166-1 alpha-2/alpha-3 or subdivision code.")
    year: QueryValue | None = Field(default=None, description="Year to query.")
    month: QueryValue | None = Field(default=None, description="Month (1-12).")
    day: QueryValue | None = Field(default=None, description="Day of month.")
    previous: QueryValue | None = Field(default=None, description="Holidays before the given date.")
    upcoming: QueryValue | None = Field(default=None, description="Holidays after the given date.")
    public: QueryValue | None = Field(default=None, description="Only public holidays.")
    subdivisions: QueryValue | None = Field(default=None, description="Include subdivision holidays.")
    search: QueryValue | None = Field(default=None, description="Search holidays by name.")
    language: QueryValue | None = Field(default=None, description="ISO 639-1 language code for names.")


class LanguagesRequest(_BaseRequest):
    language: QueryValue | None = Field(default=None, description="Return a single language by code.")
    search: QueryValue | None = Field(default=None, description="Search languages by code and name.")


class WorkdayRequest(_BaseRequest):
    country: QueryValue | None = Field(default=None, description="ISO 3166-1 alpha-2/alpha-3 code.")
    start: QueryValue | None = Field(default=None, description="Start date (YYYY-MM-DD).")
    days: QueryValue | None = Field(default=None, description="Number of business days to add.")


# --- Responses -------------------------------------------------------------


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Requests(_Payload):
    """Quota information attached to every successful response."""

    used: int | None = None
    available: int | None = None
    resets: str | None = None


class Weekday(_Payload):
    name: str | None = None
    numeric: int | str | None = None


class HolidayWeekdays(_Payload):
    date: Weekday | None = None
    observed: Weekday | None = None


class CountryCodes(_Payload):
    alpha_2: str | None = Field(default=None, alias="alpha-2")
    alpha_3: str | None = Field(default=None, alias="alpha-3")
    numeric: int | str | None = None


class Subdivision(_Payload):
    code: str
    name: str
    languages: list[str] = Field(default_factory=list)


class Country(_Payload):
    code: str
    name: str
    codes: CountryCodes | None = None
    languages: list[str] = Field(default_factory=list)
    flag: str | None = None
    subdivisions: list[Subdivision] = Field(default_factory=list)
    weekend: list[Weekday] = Field(default_factory=list)


class Holiday(_Payload):
    name: str
    date: str
    observed: str | None = None
    public: bool | None = None
    country: str | None = None
    uuid: str | None = None
    weekday: HolidayWeekdays | None = None
    subdivisions: list[str] = Field(default_factory=list)


class Language(_Payload):
    code: str
    name: str


class Workday(_Payload):
    date: str
    weekday: Weekday | None = None


class _Response(_Payload):
    status: int | None = None
    warning: str | None = None
    requests: Requests | None = None


class CountriesResponse(_Response):
    countries: list[Country] = Field(default_factory=list)


class HolidaysResponse(_Response):
    holidays: list[Holiday] = Field(default_factory=list)


class LanguagesResponse(_Response):
    languages: list[Language] = Field(default_factory=list)


class WorkdayResponse(_Response):
    workday: Workday | None = None
