from __future__ import annotations

from flask import Flask

from ..common.responses import json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route(f"{API_PREFIX}/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = service.list_employees()
        return ok({"count": len(employees), "data": [e.to_dict() for e in employees]})

    @app.route(f"{API_PREFIX}/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = json_body()
        employee = service.register_employee(
            employee_id=data.get("employeeId"),
            full_name=data.get("fullName"),
            email=data.get("email"),
            department=data.get("department"),
        )
        return ok({"data": employee.to_dict()}, 201)

    @app.route(f"{API_PREFIX}/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return ok({"data": service.get_employee(employee_id).to_dict()})

    @app.route(f"{API_PREFIX}/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        removed = service.delete_employee(employee_id)
        return ok({"data": {"employeeId": employee_id, "attendanceRemoved": removed}})
