"""Remote resources exposed by HolidayAPI.

Kept in the domain layer so the URL builder, the validators and the adapters
share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    """Path segment of each remote resource."""

    COUNTRIES = "countries"
    HOLIDAYS = "holidays"
    LANGUAGES = "languages"
    WORKDAY = "workday"
