from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status on one calendar day."""

    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "date": format_iso_date(self.work_date),
            "status": self.status.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class AttendanceFilters:
    """Validated filters for the per-employee history query.

    ``work_date`` and ``month_start``/``month_end`` are never both set: an
    exact date overrides the month.
    """

    month_start: Optional[date] = None
    month_end: Optional[date] = None
    work_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None


@dataclass(frozen=True)
class MarkResult:
    record: AttendanceRecord
    was_update: bool


@dataclass(frozen=True)
class AttendanceTotals:
    total_present: int = 0
    total_absent: int = 0

    @property
    def total_marked(self) -> int:
        return self.total_present + self.total_absent

    def to_dict(self) -> dict:
        return {
            "totalPresent": self.total_present,
            "totalAbsent": self.total_absent,
            "totalMarked": self.total_marked,
        }


@dataclass(frozen=True)
class DailyOverview:
    """Read-model for the dashboard cards of one day."""

    work_date: date
    total_employees: int
    present: int
    absent: int

    @property
    def unmarked(self) -> int:
        return max(0, self.total_employees - self.present - self.absent)

    def to_dict(self) -> dict:
        return {
            "date": format_iso_date(self.work_date),
            "totalEmployees": self.total_employees,
            "present": self.present,
            "absent": self.absent,
            "unmarked": self.unmarked,
        }
