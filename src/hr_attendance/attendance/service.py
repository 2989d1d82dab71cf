from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import today_local
from ..common.validators import is_blank, require_iso_date, require_month, require_non_empty, require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, DuplicateRecordError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceFilters, AttendanceRecord, AttendanceTotals, DailyOverview, MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: mark attendance, history queries and aggregation."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark_attendance(self, employee_id: Any, work_date: Any, status: Any) -> MarkResult:
        """Create or overwrite the record for ``(employee_id, work_date)``.

        Validation happens before any read or write, so a failed mark never
        touches stored state.
        """
        if is_blank(employee_id) or is_blank(work_date) or is_blank(status):
            raise ValidationError("employeeId, date, and status are required")

        employee_id = require_non_empty(employee_id, "employeeId")
        new_status = require_status(status)
        day = require_iso_date(work_date)

        if not self._employees.exists(employee_id):
            raise NotFoundError(f"Employee with ID '{employee_id}' not found")

        existing = self._attendance.get_for_employee_and_date(employee_id, day)
        if existing:
            return MarkResult(record=self._update(employee_id, day, new_status), was_update=True)

        try:
            record = self._attendance.create(employee_id=employee_id, work_date=day, status=new_status)
        except DuplicateRecordError:
            # Another request inserted the same key first, take the update path.
            logger.warning("Concurrent first mark for %s on %s, retrying as update", employee_id, day)
            return MarkResult(record=self._update(employee_id, day, new_status), was_update=True)

        logger.info("Marked %s %s on %s", employee_id, new_status.value, day)
        return MarkResult(record=record, was_update=False)

    def _update(self, employee_id: str, day: date, status: AttendanceStatus) -> AttendanceRecord:
        record = self._attendance.update_status(employee_id=employee_id, work_date=day, status=status)
        if record is None:
            raise ConflictError("Attendance already marked for this employee on this date")
        logger.info("Updated %s to %s on %s", employee_id, status.value, day)
        return record

    def build_filters(
        self,
        *,
        month: Optional[str] = None,
        work_date: Optional[str] = None,
        status: Optional[str] = None,
    ) -> AttendanceFilters:
        """Validate raw query values; an exact date overrides the month."""
        day = None if is_blank(work_date) else require_iso_date(work_date)
        month_start = month_end = None
        if not is_blank(month):
            month_start, month_end = require_month(month)
        if day is not None:
            month_start = month_end = None

        return AttendanceFilters(
            month_start=month_start,
            month_end=month_end,
            work_date=day,
            status=None if is_blank(status) else require_status(status),
        )

    def list_by_employee(self, employee_id: str, filters: Optional[AttendanceFilters] = None) -> list[AttendanceRecord]:
        rows = self._attendance.list_for_employee(employee_id, filters or AttendanceFilters())
        return sorted(rows, key=lambda r: r.work_date, reverse=True)

    def list_by_date(self, work_date: Any) -> list[AttendanceRecord]:
        if is_blank(work_date):
            raise ValidationError("date query parameter is required")
        return list(self._attendance.list_for_date(require_iso_date(work_date)))

    def summarize(self) -> dict[str, AttendanceTotals]:
        return dict(self._attendance.totals_by_employee())

    def daily_overview(self, work_date: Any = None) -> DailyOverview:
        day = today_local() if is_blank(work_date) else require_iso_date(work_date)
        records = self._attendance.list_for_date(day)
        return DailyOverview(
            work_date=day,
            total_employees=self._employees.count(),
            present=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
            absent=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
        )
