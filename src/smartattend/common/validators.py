from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import is_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_iso_date(value: object, field_name: str = "date") -> str:
    if not is_iso_date(value):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}")
    return value  # type: ignore[return-value]


def require_status(value: object) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}") from None
