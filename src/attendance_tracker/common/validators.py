from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_time_of_day


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def require_time_of_day(value: Optional[str], field_name: str) -> str:
    """Validate a cutoff and return it normalized to HH:MM:SS."""
    value = require_non_empty(value, field_name)
    try:
        return parse_time_of_day(value).strftime("%H:%M:%S")
    except ValueError:
        raise ValidationError(f"{field_name} must use HH:MM:SS format")


def require_json_object(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def optional_iso_date(value: Optional[str], field_name: str):
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must use YYYY-MM-DD format")


def optional_positive_int(value: Optional[str], field_name: str) -> Optional[int]:
    """Query-string ids: empty or 0 means "no filter"."""
    if value is None or value == "" or value == "0":
        return None
    return require_positive_int(value, field_name)


def optional_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip()
