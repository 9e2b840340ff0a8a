"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from holidayapi.adapters.http_client import build_async_client
from holidayapi.core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars
from holidayapi.core.errors import ConfigurationError
from holidayapi.core.services import build_client_config

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(title="holidayapi doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    config = None
    config_error: ConfigurationError | None = None
    try:
        config = build_client_config(settings.api_key, settings.api_version)
        table.add_row("API key", "OK", "HOLIDAYAPI_API_KEY is a valid key")
    except ConfigurationError as exc:
        config_error = exc
        table.add_row("API key", "FAIL", str(exc))

    if config is not None:
        table.add_row("Base URL", "OK", config.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:.1f}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    if not offline:
        ok_http, detail_http = asyncio.run(_check_http("https://holidayapi.com", settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if config_error is not None:
        _console.print(f"\n[yellow]Note:[/yellow] {config_error}. Run `holidayapi doctor setup` to store a key.")
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive key setup (stores config in the user config .env)."""

    api_key = typer.prompt("HolidayAPI key", hide_input=True, confirmation_prompt=False).strip()

    try:
        build_client_config(api_key)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars({"HOLIDAYAPI_API_KEY": api_key})
    _console.print(f"[green]Saved API key to:[/green] {env_path}")
