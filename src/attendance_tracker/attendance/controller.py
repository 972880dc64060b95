from __future__ import annotations

from pathlib import Path

from flask import Flask, jsonify, request

from ..common.responses import csv_attachment
from ..common.validators import optional_iso_date, optional_positive_int, require_json_object
from ..container import Container
from ..core.constants import API_PREFIX
from .model import LogFilter


def register(app: Flask, container: Container) -> None:
    prefix = f"{API_PREFIX}/attendance"

    def _log_filter() -> LogFilter:
        return LogFilter(
            work_date=optional_iso_date(request.args.get("date"), "date"),
            department_id=optional_positive_int(request.args.get("department_id"), "department_id"),
        )

    @app.route(f"{prefix}/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        payload = require_json_object(request.get_json(silent=True))
        result = container.attendance_service.clock_in(payload.get("employee_id"))
        return jsonify({"message": "Clock in successful", **result.to_dict()}), 200

    @app.route(f"{prefix}/clock-out", methods=["PUT"], endpoint="clock_out")
    def clock_out():
        payload = require_json_object(request.get_json(silent=True))
        result = container.attendance_service.clock_out(payload.get("employee_id"))
        return jsonify({"message": "Clock out successful", **result.to_dict()}), 200

    @app.route(f"{prefix}/logs", methods=["GET"], endpoint="attendance_logs")
    def attendance_logs():
        log_filter = _log_filter()
        logs = container.attendance_service.list_logs(
            work_date=log_filter.work_date,
            department_id=log_filter.department_id,
        )
        return jsonify(
            {
                "attendance_logs": [log.to_dict() for log in logs],
                "count": len(logs),
                "filters": log_filter.to_dict(),
            }
        )

    @app.route(f"{prefix}/export/csv", methods=["GET"], endpoint="export_attendance_csv")
    def export_attendance_csv():
        log_filter = _log_filter()
        logs = container.attendance_service.list_logs(
            work_date=log_filter.work_date,
            department_id=log_filter.department_id,
        )

        filename = container.csv_export.generate_filename("attendance_logs")
        path = Path(container.export_dir) / filename
        container.csv_export.export_attendance_logs(logs, path)
        return csv_attachment(path, filename)
