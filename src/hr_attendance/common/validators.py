from __future__ import annotations

import re
from datetime import date
from typing import Any

from ..core.constants import DATE_PATTERN, EMAIL_PATTERN, MONTH_PATTERN
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import month_bounds, parse_iso_date

_DATE_RE = re.compile(DATE_PATTERN)
_MONTH_RE = re.compile(MONTH_PATTERN)
_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Any, field_name: str) -> str:
    if is_blank(value) or not isinstance(value, str):
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Any, field_name: str = "date") -> date:
    """Validate a YYYY-MM-DD string that is also a real calendar date."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid calendar date: {value}") from None


def require_month(value: Any, field_name: str = "month") -> tuple[date, date]:
    if not isinstance(value, str) or not _MONTH_RE.match(value):
        raise ValidationError(f"{field_name} must be in YYYY-MM format")
    try:
        return month_bounds(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid month: {value}") from None


def require_status(value: Any, field_name: str = "status") -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be either Present or Absent") from None


def require_email(value: Any, field_name: str = "email") -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} is not a valid email address")
    return email.lower()
