from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import ConflictError, DeleteBlockedError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    is_duplicate_key,
    is_missing_parent,
    is_row_referenced,
    normalize_mysql_time,
)
from ..departments.model import Department
from .model import Employee
from .repository import EmployeeRepository

_SELECT_WITH_DEPARTMENT = """
    SELECT e.id, e.employee_id, e.departement_id, e.name, e.address,
           e.created_at, e.updated_at,
           d.id AS dept_id, d.departement_name, d.max_clock_in_time, d.max_clock_out_time
    FROM employee e
    LEFT JOIN departement d ON e.departement_id = d.id
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    department = None
    if r.get("dept_id") is not None:
        department = Department(
            department_id=int(r["dept_id"]),
            department_name=r["departement_name"],
            max_clock_in_time=normalize_mysql_time(r.get("max_clock_in_time")),
            max_clock_out_time=normalize_mysql_time(r.get("max_clock_out_time")),
        )
    return Employee(
        id=int(r["id"]),
        employee_id=r["employee_id"],
        department_id=int(r["departement_id"]),
        name=r["name"],
        address=r.get("address") or "",
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        department=department,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_DEPARTMENT + " ORDER BY e.created_at DESC, e.id DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_DEPARTMENT + " WHERE e.id=%s", (int(id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_DEPARTMENT + " WHERE e.employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(
        self,
        *,
        employee_id: str,
        department_id: int,
        name: str,
        address: str,
        created_at: datetime,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employee(employee_id, departement_id, name, address, created_at, updated_at)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (employee_id, int(department_id), name, address, created_at, created_at),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if is_duplicate_key(e):
                raise ConflictError("Employee ID already exists") from e
            if is_missing_parent(e):
                raise ValidationError("Department not found") from e
            raise

    def update(self, *, id: int, department_id: int, name: str, address: str, updated_at: datetime) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE employee
                    SET departement_id=%s, name=%s, address=%s, updated_at=%s
                    WHERE id=%s
                    """,
                    (int(department_id), name, address, updated_at, int(id)),
                )
        except IntegrityError as e:
            if is_missing_parent(e):
                raise ValidationError("Department not found") from e
            raise

    def delete_by_id(self, id: int) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM employee WHERE id=%s", (int(id),))
                return cur.rowcount > 0
        except IntegrityError as e:
            if is_row_referenced(e):
                raise DeleteBlockedError("Cannot delete employee with attendance records") from e
            raise

    def count_attendance(self, employee_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM attendance WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return int(r["total"]) if r else 0
