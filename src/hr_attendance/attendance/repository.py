from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceFilters, AttendanceRecord, AttendanceTotals


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        """Insert the record for ``(employee_id, work_date)``.

        Raises DuplicateRecordError when the unique key is already taken.
        """

        raise NotImplementedError

    def update_status(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> Optional[AttendanceRecord]:
        """Overwrite the status in place; None when no such record exists."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str, filters: AttendanceFilters) -> Sequence[AttendanceRecord]:
        """Records of one employee, most recent date first."""

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def totals_by_employee(self) -> Mapping[str, AttendanceTotals]:
        raise NotImplementedError
