from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from hr_attendance import create_app
from hr_attendance.attendance.model import AttendanceFilters, AttendanceRecord, AttendanceTotals
from hr_attendance.container import build_services
from hr_attendance.core.enums import AttendanceStatus
from hr_attendance.core.exceptions import DuplicateRecordError
from hr_attendance.employees.model import Employee

FIXED_NOW = datetime(2024, 1, 10, 9, 0, 0)


class InMemoryEmployees:
    def __init__(self, employees: Optional[list[Employee]] = None, attendance: Optional["InMemoryAttendance"] = None):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees or []}
        self._attendance = attendance

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.email == email), None)

    def exists(self, employee_id: str) -> bool:
        return employee_id in self._by_id

    def count(self) -> int:
        return len(self._by_id)

    def list_all(self):
        return [self._by_id[k] for k in sorted(self._by_id)]

    def create(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        if employee_id in self._by_id or self.get_by_email(email):
            raise DuplicateRecordError("Employee ID or email already exists", status_code=409)
        employee = Employee(employee_id, full_name, email, department, created_at=FIXED_NOW)
        self._by_id[employee_id] = employee
        return employee

    def delete_with_attendance(self, employee_id: str) -> Optional[int]:
        if employee_id not in self._by_id:
            return None
        keys = []
        if self._attendance is not None:
            keys = [k for k in self._attendance.by_key if k[0] == employee_id]
        for k in keys:
            del self._attendance.by_key[k]
        del self._by_id[employee_id]
        return len(keys)


class InMemoryAttendance:
    """Keyed by (employee_id, work_date), like the UNIQUE KEY in MySQL."""

    def __init__(self):
        self.by_key: dict[tuple[str, date], AttendanceRecord] = {}

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self.by_key.get((employee_id, work_date))

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        key = (employee_id, work_date)
        if key in self.by_key:
            raise DuplicateRecordError("Attendance already marked for this employee on this date")
        record = AttendanceRecord(employee_id, work_date, status, created_at=FIXED_NOW, updated_at=FIXED_NOW)
        self.by_key[key] = record
        return record

    def update_status(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> Optional[AttendanceRecord]:
        key = (employee_id, work_date)
        if key not in self.by_key:
            return None
        self.by_key[key] = replace(self.by_key[key], status=status)
        return self.by_key[key]

    def list_for_employee(self, employee_id: str, filters: AttendanceFilters):
        rows = [r for r in self.by_key.values() if r.employee_id == employee_id]
        if filters.work_date is not None:
            rows = [r for r in rows if r.work_date == filters.work_date]
        elif filters.month_start is not None:
            rows = [r for r in rows if filters.month_start <= r.work_date <= filters.month_end]
        if filters.status is not None:
            rows = [r for r in rows if r.status == filters.status]
        return sorted(rows, key=lambda r: r.work_date, reverse=True)

    def list_for_date(self, work_date: date):
        return [r for r in self.by_key.values() if r.work_date == work_date]

    def totals_by_employee(self):
        totals: dict[str, AttendanceTotals] = {}
        for r in self.by_key.values():
            t = totals.get(r.employee_id, AttendanceTotals())
            if r.status == AttendanceStatus.PRESENT:
                t = replace(t, total_present=t.total_present + 1)
            else:
                t = replace(t, total_absent=t.total_absent + 1)
            totals[r.employee_id] = t
        return totals


def make_employee(employee_id: str = "EMP-001", **overrides) -> Employee:
    fields = dict(
        full_name="Alice Nguyen",
        email=f"{employee_id.lower()}@example.com",
        department="Engineering",
        created_at=FIXED_NOW,
    )
    fields.update(overrides)
    return Employee(employee_id=employee_id, **fields)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def employees_repo(attendance_repo):
    return InMemoryEmployees(
        [make_employee("EMP-001"), make_employee("EMP-002", full_name="Bao Tran")],
        attendance=attendance_repo,
    )


@pytest.fixture
def container(employees_repo, attendance_repo):
    return build_services(employees_repo=employees_repo, attendance_repo=attendance_repo)


@pytest.fixture
def attendance_service(container):
    return container.attendance_service


@pytest.fixture
def employee_service(container):
    return container.employee_service


@pytest.fixture
def app(container):
    return create_app(container, settings_module="hr_attendance.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


class FakeCursor:
    def __init__(self, *, rows=None, fail_with=None, fail_on=None, rowcount=0):
        self.rows = list(rows or [])
        self.fail_with = fail_with
        # index of the execute() call that raises; None means every call
        self.fail_on = fail_on
        self.rowcount = rowcount
        self.executed: list[tuple[str, tuple]] = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))
        if self.fail_with is not None and self.fail_on in (None, len(self.executed) - 1):
            raise self.fail_with

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.cursor)
        self.connections.append(conn)
        return conn


@pytest.fixture
def make_conn_factory():
    """Build a fake mysql connection factory around one scripted cursor."""

    def _make(**cursor_kwargs) -> FakeConnFactory:
        return FakeConnFactory(FakeCursor(**cursor_kwargs))

    return _make
