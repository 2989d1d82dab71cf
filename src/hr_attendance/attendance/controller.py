from __future__ import annotations

import csv
import io

from flask import Flask, request

from ..common.responses import json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _filters_from_query():
        return service.build_filters(
            month=request.args.get("month"),
            work_date=request.args.get("date"),
            status=request.args.get("status"),
        )

    def _write_records_csv(*, records, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["employee_id", "date", "status", "created_at", "updated_at"])
        writer.writeheader()
        for r in records:
            d = r.to_dict()
            writer.writerow(
                {
                    "employee_id": d["employeeId"],
                    "date": d["date"],
                    "status": d["status"],
                    "created_at": d["createdAt"] or "",
                    "updated_at": d["updatedAt"] or "",
                }
            )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route(f"{API_PREFIX}/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = json_body()
        result = service.mark_attendance(data.get("employeeId"), data.get("date"), data.get("status"))
        return ok(
            {"data": result.record.to_dict(), "updated": result.was_update},
            200 if result.was_update else 201,
        )

    @app.route(f"{API_PREFIX}/attendance", methods=["GET"], endpoint="attendance_by_date")
    def attendance_by_date():
        records = service.list_by_date(request.args.get("date"))
        return ok({"count": len(records), "data": [r.to_dict() for r in records]})

    @app.route(f"{API_PREFIX}/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        totals = service.summarize()
        return ok({"data": {employee_id: t.to_dict() for employee_id, t in totals.items()}})

    @app.route(f"{API_PREFIX}/attendance/overview", methods=["GET"], endpoint="attendance_overview")
    def attendance_overview():
        overview = service.daily_overview(request.args.get("date"))
        return ok({"data": overview.to_dict()})

    @app.route(f"{API_PREFIX}/attendance/<employee_id>", methods=["GET"], endpoint="attendance_by_employee")
    def attendance_by_employee(employee_id: str):
        records = service.list_by_employee(employee_id, _filters_from_query())
        return ok({"count": len(records), "data": [r.to_dict() for r in records]})

    @app.route(f"{API_PREFIX}/attendance/<employee_id>/export.csv", methods=["GET"], endpoint="attendance_export_csv")
    def attendance_export_csv(employee_id: str):
        records = service.list_by_employee(employee_id, _filters_from_query())
        return _write_records_csv(records=records, filename=f"attendance_{employee_id}.csv")
