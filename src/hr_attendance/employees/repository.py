from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Services depend on this protocol, never on a concrete database.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        """Insert a new employee.

        Raises DuplicateRecordError when the id or email is already taken.
        """

        raise NotImplementedError

    def delete_with_attendance(self, employee_id: str) -> Optional[int]:
        """Delete the employee and all of their attendance records atomically.

        Returns the number of attendance records removed, None when the
        employee does not exist.
        """

        raise NotImplementedError
