"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Convierte las vistas tipadas de respuesta en tablas y paneles reutilizables.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from holidayapi.core.domain.models import (
    CountriesResponse,
    HolidaysResponse,
    LanguagesResponse,
    Requests,
    WorkdayResponse,
)


def build_countries_table(response: CountriesResponse) -> Table:
    table = Table(title="Countries")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Languages", style="magenta")
    table.add_column("Subdivisions", style="green", justify="right")
    for country in response.countries:
        table.add_row(
            country.code,
            country.name,
            ", ".join(country.languages),
            str(len(country.subdivisions)),
        )
    return table


def build_holidays_table(response: HolidaysResponse) -> Table:
    table = Table(title="Holidays")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Observed", style="dim", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Public", style="green")
    table.add_column("Country", style="magenta")
    for holiday in response.holidays:
        public = "" if holiday.public is None else ("yes" if holiday.public else "no")
        table.add_row(
            holiday.date,
            holiday.observed or "",
            holiday.name,
            public,
            holiday.country or "",
        )
    return table


def build_languages_table(response: LanguagesResponse) -> Table:
    table = Table(title="Languages")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for language in response.languages:
        table.add_row(language.code, language.name)
    return table


def build_workday_panel(response: WorkdayResponse) -> Panel:
    body = Text()
    if response.workday is None:
        body.append("No workday in response.", style="dim")
    else:
        body.append(response.workday.date, style="bold")
        if response.workday.weekday and response.workday.weekday.name:
            body.append(f" ({response.workday.weekday.name})")
    return Panel(body, title=Text("Workday", style="bold yellow"), border_style="yellow")


def build_quota_text(requests: Requests | None) -> Text | None:
    """One-line summary of the key's quota, if the service sent it."""

    if requests is None or requests.used is None:
        return None
    text = Text(f"Requests used: {requests.used}", style="dim")
    if requests.available is not None:
        text.append(f" / available: {requests.available}")
    if requests.resets:
        text.append(f" / resets: {requests.resets}")
    return text
