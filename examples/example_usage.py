"""Example: call the service layer directly (no Flask).

Controllers are a thin layer, the business rules live in the services.
"""

import importlib

from dotenv import load_dotenv

from hr_attendance.config import get_settings_module
from hr_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    result = container.attendance_service.mark_attendance("EMP-001", "2024-01-10", "Present")
    print("updated" if result.was_update else "created", result.record.to_dict())

    for employee_id, totals in container.attendance_service.summarize().items():
        print(employee_id, totals.to_dict())


if __name__ == "__main__":
    main()
