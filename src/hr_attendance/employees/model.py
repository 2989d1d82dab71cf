from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a registered employee.

    Note: plain data object, no database access here.
    """

    employee_id: str
    full_name: str
    email: str
    department: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "fullName": self.full_name,
            "email": self.email,
            "department": self.department,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
