"""Adapters: everything that performs I/O (HTTP, files)."""

from holidayapi.adapters.holidayapi_client import HolidayAPI

__all__ = ["HolidayAPI"]
