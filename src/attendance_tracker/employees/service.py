from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty, require_positive_int
from ..core.exceptions import ConflictError, DeleteBlockedError, NotFoundError, ValidationError
from ..departments.repository import DepartmentRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository):
        self._employees = employees
        self._departments = departments

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, id: int) -> Employee:
        employee = self._employees.get_by_id(int(id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _require_department(self, department_id: Any):
        department = self._departments.get_by_id(require_positive_int(department_id, "departement_id"))
        if not department:
            raise ValidationError("Department not found")
        return department

    def create(
        self,
        *,
        employee_id: Optional[str],
        department_id: Any,
        name: Optional[str],
        address: Optional[str] = None,
    ) -> Employee:
        employee_id = require_non_empty(employee_id, "employee_id")
        name = require_non_empty(name, "name")
        address = optional_text(address, "address")

        if self._employees.get_by_employee_id(employee_id):
            raise ConflictError("Employee ID already exists")

        department = self._require_department(department_id)

        now = now_local()
        new_id = self._employees.create(
            employee_id=employee_id,
            department_id=department.department_id,
            name=name,
            address=address,
            created_at=now,
        )
        logger.info("Employee %s created (id=%s, department=%s)", employee_id, new_id, department.department_id)
        return Employee(
            id=new_id,
            employee_id=employee_id,
            department_id=department.department_id,
            name=name,
            address=address,
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        id: int,
        *,
        department_id: Any,
        name: Optional[str],
        address: Optional[str] = None,
    ) -> Employee:
        current = self.get(id)

        name = require_non_empty(name, "name")
        address = optional_text(address, "address")
        department = self._require_department(department_id)

        now = now_local()
        self._employees.update(
            id=current.id,
            department_id=department.department_id,
            name=name,
            address=address,
            updated_at=now,
        )
        return Employee(
            id=current.id,
            employee_id=current.employee_id,
            department_id=department.department_id,
            name=name,
            address=address,
            created_at=current.created_at,
            updated_at=now,
            department=department,
        )

    def delete(self, id: int) -> None:
        employee = self.get(id)

        if self._employees.count_attendance(employee.employee_id) > 0:
            logger.warning("Refusing to delete employee %s: attendance records exist", employee.employee_id)
            raise DeleteBlockedError("Cannot delete employee with attendance records")

        if not self._employees.delete_by_id(employee.id):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s deleted", employee.employee_id)
