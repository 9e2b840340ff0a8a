"""Command line interface (Typer).

One command per remote resource plus the `doctor` sub-app. Commands only
parse options, call the client and render; all request rules live in the
library.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from holidayapi.adapters.holidayapi_client import HolidayAPI
from holidayapi.adapters.json_exporter import export_payload_json
from holidayapi.cli import doctor
from holidayapi.cli.ui_components import (
    build_countries_table,
    build_holidays_table,
    build_languages_table,
    build_quota_text,
    build_workday_panel,
)
from holidayapi.core.config import load_settings
from holidayapi.core.domain.models import (
    CountriesRequest,
    CountriesResponse,
    HolidaysRequest,
    HolidaysResponse,
    LanguagesRequest,
    LanguagesResponse,
    WorkdayRequest,
    WorkdayResponse,
)
from holidayapi.core.errors import HolidayAPIError

app = typer.Typer(no_args_is_help=True, help="Query holidays, countries, languages and workdays from HolidayAPI.com.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

KeyOption = typer.Option(None, "--key", help="API key (defaults to HOLIDAYAPI_API_KEY).")
JsonOption = typer.Option(False, "--json", help="Print the raw JSON payload.")
OutputOption = typer.Option(None, "--output", "-o", help="Also write the payload to this JSON file.")


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_client(key: str | None) -> HolidayAPI:
    settings = load_settings()
    return HolidayAPI(key=key or settings.api_key, version=settings.api_version, settings=settings)


def _call(key: str | None, operation: Callable[[HolidayAPI], Awaitable[dict[str, Any]]]) -> dict[str, Any]:
    try:
        client = _build_client(key)
        return asyncio.run(operation(client))
    except HolidayAPIError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _emit(
    payload: dict[str, Any],
    *,
    as_json: bool,
    output: Path | None,
    render: Callable[[dict[str, Any]], None],
) -> None:
    if output is not None:
        path = export_payload_json(payload=payload, output_path=output)
        _console.print(f"[green]Saved payload to:[/green] {path}")
    if as_json:
        _console.print_json(data=payload)
    else:
        render(payload)


def _flag(value: bool) -> bool | None:
    # Unset flags are omitted from the query.
    return True if value else None


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests (key redacted).")) -> None:
    _configure_logging(verbose)


@app.command()
def countries(
    country: Optional[str] = typer.Option(None, "--country", help="Single country code."),
    search: Optional[str] = typer.Option(None, "--search", help="Search by code or name."),
    public: bool = typer.Option(False, "--public", help="Only countries with public holidays."),
    key: Optional[str] = KeyOption,
    as_json: bool = JsonOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """List supported countries."""

    request = CountriesRequest(country=country, search=search, public=_flag(public))
    payload = _call(key, lambda client: client.countries(request))

    def render(data: dict[str, Any]) -> None:
        response = CountriesResponse.model_validate(data)
        _console.print(build_countries_table(response))
        quota = build_quota_text(response.requests)
        if quota is not None:
            _console.print(quota)

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command()
def holidays(
    country: Optional[str] = typer.Option(None, "--country", help="Country or subdivision code."),
    year: Optional[int] = typer.Option(None, "--year", help="Year to query."),
    month: Optional[int] = typer.Option(None, "--month", min=1, max=12),
    day: Optional[int] = typer.Option(None, "--day", min=1, max=31),
    previous: bool = typer.Option(False, "--previous", help="Holidays before the given date."),
    upcoming: bool = typer.Option(False, "--upcoming", help="Holidays after the given date."),
    public: bool = typer.Option(False, "--public", help="Only public holidays."),
    subdivisions: bool = typer.Option(False, "--subdivisions", help="Include subdivision holidays."),
    search: Optional[str] = typer.Option(None, "--search", help="Search by holiday name."),
    language: Optional[str] = typer.Option(None, "--language", help="Language for holiday names."),
    key: Optional[str] = KeyOption,
    as_json: bool = JsonOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """List holidays for a country and year."""

    request = HolidaysRequest(
        country=country,
        year=year,
        month=month,
        day=day,
        previous=_flag(previous),
        upcoming=_flag(upcoming),
        public=_flag(public),
        subdivisions=_flag(subdivisions),
        search=search,
        language=language,
    )
    payload = _call(key, lambda client: client.holidays(request))

    def render(data: dict[str, Any]) -> None:
        response = HolidaysResponse.model_validate(data)
        _console.print(build_holidays_table(response))
        quota = build_quota_text(response.requests)
        if quota is not None:
            _console.print(quota)

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command()
def languages(
    language: Optional[str] = typer.Option(None, "--language", help="Single language code."),
    search: Optional[str] = typer.Option(None, "--search", help="Search by code or name."),
    key: Optional[str] = KeyOption,
    as_json: bool = JsonOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """List supported languages."""

    request = LanguagesRequest(language=language, search=search)
    payload = _call(key, lambda client: client.languages(request))

    def render(data: dict[str, Any]) -> None:
        response = LanguagesResponse.model_validate(data)
        _console.print(build_languages_table(response))

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command()
def workday(
    country: Optional[str] = typer.Option(None, "--country", help="Country code."),
    start: Optional[str] = typer.Option(None, "--start", help="Start date (YYYY-MM-DD)."),
    days: Optional[int] = typer.Option(None, "--days", help="Business days to add."),
    key: Optional[str] = KeyOption,
    as_json: bool = JsonOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Compute the workday N business days after a start date."""

    request = WorkdayRequest(country=country, start=start, days=days)
    payload = _call(key, lambda client: client.workday(request))

    def render(data: dict[str, Any]) -> None:
        _console.print(build_workday_panel(WorkdayResponse.model_validate(data)))

    _emit(payload, as_json=as_json, output=output, render=render)


def run() -> None:
    app()
