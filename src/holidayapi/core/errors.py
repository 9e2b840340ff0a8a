"""Error types raised by the client.

Every failed call raises exactly one of:
- `ConfigurationError`: bad or missing client setup, raised at construction.
- `ValidationError`: the request object is incomplete or contradictory,
  raised before any network call.
- `RemoteError`: the service answered with a non-2xx status or could not be
  reached.
"""

from __future__ import annotations


class HolidayAPIError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(HolidayAPIError):
    pass


class ValidationError(HolidayAPIError):
    pass


class RemoteError(HolidayAPIError):
    """The service reported a failure.

    `status_code` is `None` when the request never got an HTTP answer.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
