"""Pure request-building logic: configuration checks, validation and URLs."""

from holidayapi.core.services.client_config import build_client_config, is_api_key
from holidayapi.core.services.request_validation import (
    coerce_request,
    validate_holidays_request,
    validate_workday_request,
)
from holidayapi.core.services.url_builder import build_url, serialize_params, serialize_value

__all__ = [
    "build_client_config",
    "build_url",
    "coerce_request",
    "is_api_key",
    "serialize_params",
    "serialize_value",
    "validate_holidays_request",
    "validate_workday_request",
]
