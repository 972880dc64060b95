from __future__ import annotations

from datetime import time
from typing import Any, Dict, Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DeleteBlockedError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_row_referenced, normalize_mysql_time
from .model import Department
from .repository import DepartmentRepository


def _to_department(r: Dict[str, Any]) -> Department:
    return Department(
        department_id=int(r["id"]),
        department_name=r["departement_name"],
        max_clock_in_time=normalize_mysql_time(r.get("max_clock_in_time")),
        max_clock_out_time=normalize_mysql_time(r.get("max_clock_out_time")),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, departement_name, max_clock_in_time, max_clock_out_time
                FROM departement
                ORDER BY departement_name
                """
            )
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, department_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, departement_name, max_clock_in_time, max_clock_out_time
                FROM departement
                WHERE id=%s
                """,
                (int(department_id),),
            )
            r = fetchone(cur)
            return _to_department(r) if r else None

    def create(self, *, department_name: str, max_clock_in_time: time, max_clock_out_time: time) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO departement(departement_name, max_clock_in_time, max_clock_out_time)
                VALUES(%s,%s,%s)
                """,
                (department_name, max_clock_in_time, max_clock_out_time),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        department_id: int,
        department_name: str,
        max_clock_in_time: time,
        max_clock_out_time: time,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE departement
                SET departement_name=%s, max_clock_in_time=%s, max_clock_out_time=%s
                WHERE id=%s
                """,
                (department_name, max_clock_in_time, max_clock_out_time, int(department_id)),
            )

    def delete_by_id(self, department_id: int) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM departement WHERE id=%s", (int(department_id),))
                return cur.rowcount > 0
        except IntegrityError as e:
            if is_row_referenced(e):
                raise DeleteBlockedError("Cannot delete department with employees") from e
            raise

    def count_employees(self, department_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employee WHERE departement_id=%s", (int(department_id),))
            r = fetchone(cur)
            return int(r["total"]) if r else 0
