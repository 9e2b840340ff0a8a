"""Pre-flight request validation.

Runs before any URL is built. Rules are checked in a fixed order and the first
violation wins. Only these rules may reject a request: field values the
models cannot type are kept as given and forwarded to the service.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from holidayapi.core.domain.models import HolidaysRequest, WorkdayRequest
from holidayapi.core.errors import ValidationError

RequestT = TypeVar("RequestT", bound=pydantic.BaseModel)


def coerce_request(model: type[RequestT], request: RequestT | Mapping[str, Any] | None) -> RequestT:
    """Turn `None`, a mapping or a model instance into `model`."""

    if request is None:
        return model()
    if isinstance(request, model):
        return request
    if isinstance(request, pydantic.BaseModel):
        request = request.model_dump(exclude_none=True, warnings=False)
    if not isinstance(request, Mapping):
        raise ValidationError(f"expected {model.__name__} or a mapping, got {type(request).__name__}")

    fields = {str(name): value for name, value in request.items()}
    try:
        return model.model_validate(fields)
    except pydantic.ValidationError:
        return model.model_construct(**fields)


def _as_number(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_holidays_request(request: HolidaysRequest) -> None:
    if not request.country:
        raise ValidationError("missing country")
    if not request.year:
        raise ValidationError("missing year")
    if request.previous and request.upcoming:
        raise ValidationError("previous and upcoming are mutually exclusive")


def validate_workday_request(request: WorkdayRequest) -> None:
    if not request.country:
        raise ValidationError("missing country")
    if not request.start:
        raise ValidationError("missing start date")
    if request.days is None or request.days == "":
        raise ValidationError("missing days")
    days = _as_number(request.days)
    # Non-numeric counts are left for the service to reject.
    if days is not None and days < 1:
        raise ValidationError("days must be 1 or more")
