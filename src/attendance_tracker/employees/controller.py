from __future__ import annotations

from pathlib import Path

from flask import Flask, jsonify, request

from ..common.responses import csv_attachment
from ..common.validators import require_json_object
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    prefix = f"{API_PREFIX}/employees"

    @app.route(f"{prefix}/", methods=["POST"], endpoint="create_employee")
    def create_employee():
        payload = require_json_object(request.get_json(silent=True))
        employee = container.employee_service.create(
            employee_id=payload.get("employee_id"),
            department_id=payload.get("departement_id"),
            name=payload.get("name"),
            address=payload.get("address"),
        )
        return jsonify({"message": "Employee created successfully", "employee": employee.to_dict()}), 201

    @app.route(f"{prefix}/", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_all()
        return jsonify({"employees": [e.to_dict() for e in employees], "count": len(employees)})

    @app.route(f"{prefix}/<int:id>", methods=["GET"], endpoint="get_employee")
    def get_employee(id: int):
        return jsonify({"employee": container.employee_service.get(id).to_dict()})

    @app.route(f"{prefix}/<int:id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(id: int):
        payload = require_json_object(request.get_json(silent=True))
        employee = container.employee_service.update(
            id,
            department_id=payload.get("departement_id"),
            name=payload.get("name"),
            address=payload.get("address"),
        )
        return jsonify({"message": "Employee updated successfully", "employee": employee.to_dict()})

    @app.route(f"{prefix}/<int:id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(id: int):
        container.employee_service.delete(id)
        return jsonify({"message": "Employee deleted successfully"})

    @app.route(f"{prefix}/export/csv", methods=["GET"], endpoint="export_employees_csv")
    def export_employees_csv():
        employees = container.employee_service.list_all()

        filename = container.csv_export.generate_filename("employees")
        path = Path(container.export_dir) / filename
        container.csv_export.export_employees(employees, path)
        return csv_attachment(path, filename)
