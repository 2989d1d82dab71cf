from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateRecordError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceFilters, AttendanceRecord, AttendanceTotals
from .repository import AttendanceRepository

_COLUMNS = "employee_id, work_date, status, created_at, updated_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=r["employee_id"],
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_one(self, cur, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        cur.execute(
            f"""
            SELECT {_COLUMNS}
            FROM attendance_records
            WHERE employee_id=%s AND work_date=%s
            """,
            (employee_id, work_date),
        )
        r = fetchone(cur)
        return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_one(cur, employee_id, work_date)

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, work_date, status)
                    VALUES(%s,%s,%s)
                    """,
                    (employee_id, work_date, status.value),
                )
                return self._select_one(cur, employee_id, work_date)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateRecordError("Attendance already marked for this employee on this date") from e
            raise

    def update_status(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET status=%s
                WHERE employee_id=%s AND work_date=%s
                """,
                (status.value, employee_id, work_date),
            )
            # rowcount is 0 both for "no row" and "same status", so re-read.
            return self._select_one(cur, employee_id, work_date)

    def list_for_employee(self, employee_id: str, filters: AttendanceFilters) -> Sequence[AttendanceRecord]:
        clauses = ["employee_id=%s"]
        params: list[object] = [employee_id]

        if filters.work_date is not None:
            clauses.append("work_date=%s")
            params.append(filters.work_date)
        elif filters.month_start is not None and filters.month_end is not None:
            clauses.append("work_date BETWEEN %s AND %s")
            params.extend([filters.month_start, filters.month_end])
        if filters.status is not None:
            clauses.append("status=%s")
            params.append(filters.status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE work_date=%s
                ORDER BY employee_id ASC
                """,
                (work_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def totals_by_employee(self) -> Mapping[str, AttendanceTotals]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    employee_id,
                    SUM(CASE WHEN status='Present' THEN 1 ELSE 0 END) AS total_present,
                    SUM(CASE WHEN status='Absent' THEN 1 ELSE 0 END) AS total_absent
                FROM attendance_records
                GROUP BY employee_id
                """
            )
            return {
                r["employee_id"]: AttendanceTotals(
                    total_present=int(r["total_present"] or 0),
                    total_absent=int(r["total_absent"] or 0),
                )
                for r in fetchall(cur)
            }
