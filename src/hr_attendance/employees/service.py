from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_email, require_non_empty
from ..core.constants import RESERVED_EMPLOYEE_IDS
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def exists(self, employee_id: str) -> bool:
        return self._employees.exists(employee_id)

    def register_employee(self, *, employee_id: Any, full_name: Any, email: Any, department: Any) -> Employee:
        employee_id = require_non_empty(employee_id, "employeeId")
        full_name = require_non_empty(full_name, "fullName")
        email = require_email(email)
        department = require_non_empty(department, "department")

        if employee_id.lower() in RESERVED_EMPLOYEE_IDS:
            raise ValidationError(f"employeeId '{employee_id}' is reserved")
        if self._employees.exists(employee_id):
            raise ConflictError(f"Employee with ID '{employee_id}' already exists", status_code=409)
        if self._employees.get_by_email(email):
            raise ConflictError(f"Email '{email}' is already registered", status_code=409)

        employee = self._employees.create(
            employee_id=employee_id,
            full_name=full_name,
            email=email,
            department=department,
        )
        logger.info("Registered employee %s (%s)", employee_id, department)
        return employee

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_all())

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee with ID '{employee_id}' not found")
        return employee

    def delete_employee(self, employee_id: str) -> int:
        """Delete the employee together with their attendance records.

        Both go in one transaction, so a failure leaves both in place.
        Returns the number of attendance records removed.
        """
        removed = self._employees.delete_with_attendance(employee_id)
        if removed is None:
            raise NotFoundError(f"Employee with ID '{employee_id}' not found")
        logger.info("Deleted employee %s and %d attendance records", employee_id, removed)
        return removed
