from __future__ import annotations

from datetime import datetime

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value:
        raise ValidationError(f"{field_name} must not be empty")
    return value


def require_ordered_range(start: datetime, end: datetime) -> None:
    if start > end:
        raise ValidationError("range start must not be later than range end")
