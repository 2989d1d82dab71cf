from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dotenv import load_dotenv

from hr_attendance.config import get_settings_module
from hr_attendance.container import build_container
from hr_attendance.core.exceptions import ConflictError

DEMO_EMPLOYEES = [
    ("EMP-001", "Alice Nguyen", "alice@example.com", "Engineering"),
    ("EMP-002", "Bao Tran", "bao@example.com", "Human Resources"),
    ("EMP-003", "Chi Le", "chi@example.com", "Finance"),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    created = 0
    for employee_id, full_name, email, department in DEMO_EMPLOYEES:
        try:
            container.employee_service.register_employee(
                employee_id=employee_id,
                full_name=full_name,
                email=email,
                department=department,
            )
            created += 1
        except ConflictError:
            print(f"skip: {employee_id} already registered")

    print(f"OK: Seeded {created} demo employees")


if __name__ == "__main__":
    main()
