from __future__ import annotations

from typing import Any, Optional

from ..core.enums import Collection
from ..core.exceptions import ValidationError
from .datetime_utils import format_date_key, parse_iso_date


def require_date_key(value: Optional[str], field_name: str = "date") -> str:
    """Normalize a caller supplied date into the canonical YYYY-MM-DD key."""
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return format_date_key(parse_iso_date(str(value).strip()))
    except ValueError:
        raise ValidationError(f"{field_name} must be formatted as YYYY-MM-DD")


def require_collection(value: Any) -> Collection:
    try:
        return Collection(value)
    except ValueError:
        raise ValidationError("collection must be 'students' or 'teachers'")


def require_positions(value: Any) -> list[int]:
    if not isinstance(value, list):
        raise ValidationError("positions must be a list of integers")
    out = []
    for item in value:
        # bool is an int subclass; reject it explicitly
        if isinstance(item, bool) or not isinstance(item, int):
            raise ValidationError("positions must be a list of integers")
        out.append(item)
    return out


def optional_text(payload: dict, field_name: str) -> str:
    value = payload.get(field_name, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value
