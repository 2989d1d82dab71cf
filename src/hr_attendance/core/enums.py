from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status values, stored verbatim in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"


class ErrorKind(str, Enum):
    """Machine-checkable error kinds returned to API clients."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal_error"
