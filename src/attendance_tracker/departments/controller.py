from __future__ import annotations

from pathlib import Path

from flask import Flask, jsonify, request

from ..common.responses import csv_attachment
from ..common.validators import require_json_object
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    prefix = f"{API_PREFIX}/departments"

    @app.route(f"{prefix}/", methods=["POST"], endpoint="create_department")
    def create_department():
        payload = require_json_object(request.get_json(silent=True))
        department = container.department_service.create(
            department_name=payload.get("departement_name"),
            max_clock_in_time=payload.get("max_clock_in_time"),
            max_clock_out_time=payload.get("max_clock_out_time"),
        )
        return jsonify({"message": "Department created successfully", "department": department.to_dict()}), 201

    @app.route(f"{prefix}/", methods=["GET"], endpoint="list_departments")
    def list_departments():
        departments = container.department_service.list_all()
        return jsonify({"departments": [d.to_dict() for d in departments], "count": len(departments)})

    @app.route(f"{prefix}/<int:department_id>", methods=["GET"], endpoint="get_department")
    def get_department(department_id: int):
        return jsonify({"department": container.department_service.get(department_id).to_dict()})

    @app.route(f"{prefix}/<int:department_id>", methods=["PUT"], endpoint="update_department")
    def update_department(department_id: int):
        payload = require_json_object(request.get_json(silent=True))
        department = container.department_service.update(
            department_id,
            department_name=payload.get("departement_name"),
            max_clock_in_time=payload.get("max_clock_in_time"),
            max_clock_out_time=payload.get("max_clock_out_time"),
        )
        return jsonify({"message": "Department updated successfully", "department": department.to_dict()})

    @app.route(f"{prefix}/<int:department_id>", methods=["DELETE"], endpoint="delete_department")
    def delete_department(department_id: int):
        container.department_service.delete(department_id)
        return jsonify({"message": "Department deleted successfully"})

    @app.route(f"{prefix}/export/csv", methods=["GET"], endpoint="export_departments_csv")
    def export_departments_csv():
        departments = container.department_service.list_all()

        filename = container.csv_export.generate_filename("departments")
        path = Path(container.export_dir) / filename
        container.csv_export.export_departments(departments, path)
        return csv_attachment(path, filename)
