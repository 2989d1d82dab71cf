from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import DuplicateRecordError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, email, department, created_at"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=r["employee_id"],
        full_name=r["full_name"],
        email=r["email"],
        department=r["department"],
        created_at=r.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def exists(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees")
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(employee_id, full_name, email, department)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (employee_id, full_name, email, department),
                )
                cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
                return _to_employee(fetchone(cur))
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateRecordError("Employee ID or email already exists", status_code=409) from e
            raise

    def delete_with_attendance(self, employee_id: str) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id FROM employees WHERE employee_id=%s FOR UPDATE", (employee_id,))
            if fetchone(cur) is None:
                return None
            cur.execute("DELETE FROM attendance_records WHERE employee_id=%s", (employee_id,))
            removed = int(cur.rowcount)
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return removed
