"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) para la CLI y los adaptadores.
- La API key se pasa explícitamente al cliente; `AppSettings` solo aporta
  defaults de transporte (ver `HolidayAPI.from_settings`).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from holidayapi.core.errors import ConfigurationError


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "holidayapi"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "holidayapi"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "holidayapi"
    return Path.home() / ".config" / "holidayapi"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# holidayapi user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central settings for the client and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAYAPI_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user's global one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="HolidayAPI.com key (UUID), get yours at https://holidayapi.com.",
    )
    api_version: int = Field(
        default=1,
        description="API version used to build the base URL.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="holidayapi-python/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )


def load_settings() -> AppSettings:
    """Read `AppSettings`, reporting bad values as `ConfigurationError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(f"invalid setting {location}: {first.get('msg')}") from exc
