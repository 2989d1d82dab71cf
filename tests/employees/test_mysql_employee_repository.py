from __future__ import annotations

import mysql.connector
import pytest

from hr_attendance.core.exceptions import DuplicateRecordError
from hr_attendance.employees.mysql_employee_repository import MySQLEmployeeRepository


def test_delete_with_attendance_is_one_transaction(make_conn_factory):
    factory = make_conn_factory(rows=[{"employee_id": "EMP-001"}], rowcount=3)
    repo = MySQLEmployeeRepository(factory)

    removed = repo.delete_with_attendance("EMP-001")

    assert removed == 3
    assert [sql for sql, _ in factory.cursor.executed] == [
        "SELECT employee_id FROM employees WHERE employee_id=%s FOR UPDATE",
        "DELETE FROM attendance_records WHERE employee_id=%s",
        "DELETE FROM employees WHERE employee_id=%s",
    ]
    assert len(factory.connections) == 1
    assert factory.connections[0].committed is True


def test_delete_with_attendance_unknown_employee(make_conn_factory):
    factory = make_conn_factory(rows=[])
    repo = MySQLEmployeeRepository(factory)

    assert repo.delete_with_attendance("EMP-404") is None
    assert len(factory.cursor.executed) == 1


def test_failed_employee_delete_rolls_back_attendance_delete(make_conn_factory):
    factory = make_conn_factory(
        rows=[{"employee_id": "EMP-001"}],
        rowcount=2,
        fail_with=mysql.connector.OperationalError(msg="Lock wait timeout exceeded", errno=1205),
        fail_on=2,
    )
    repo = MySQLEmployeeRepository(factory)

    with pytest.raises(mysql.connector.OperationalError):
        repo.delete_with_attendance("EMP-001")

    conn = factory.connections[0]
    assert conn.rolled_back is True
    assert conn.committed is False
    assert conn.closed is True


def test_create_duplicate_is_conflict(make_conn_factory):
    dup = mysql.connector.IntegrityError(msg="Duplicate entry", errno=1062)
    repo = MySQLEmployeeRepository(make_conn_factory(fail_with=dup))

    with pytest.raises(DuplicateRecordError) as exc:
        repo.create(employee_id="EMP-001", full_name="A", email="a@example.com", department="HR")
    assert exc.value.status_code == 409
