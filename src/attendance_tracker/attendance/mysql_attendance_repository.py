from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, normalize_mysql_time
from .model import Attendance, AttendanceHistory, AttendanceLogRow, EmployeePolicy
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _insert_history(cur, history: AttendanceHistory) -> None:
    cur.execute(
        """
        INSERT INTO attendance_history(
            employee_id, attendance_id, date_attendance, attendance_type, description, created_at, updated_at
        )
        VALUES(%s,%s,%s,%s,%s,%s,%s)
        """,
        (
            history.employee_id,
            history.attendance_id,
            history.date_attendance,
            int(history.attendance_type),
            history.description,
            history.date_attendance,
            history.date_attendance,
        ),
    )


def _to_attendance(r: Dict[str, Any]) -> Attendance:
    return Attendance(
        id=int(r["id"]),
        employee_id=r["employee_id"],
        attendance_id=r["attendance_id"],
        work_date=r["work_date"],
        clock_in=r["clock_in"],
        clock_out=r.get("clock_out"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_employee_policy(self, employee_id: str) -> Optional[EmployeePolicy]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.name, e.departement_id,
                       d.max_clock_in_time, d.max_clock_out_time
                FROM employee e
                LEFT JOIN departement d ON e.departement_id = d.id
                WHERE e.employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return EmployeePolicy(
                employee_id=r["employee_id"],
                name=r["name"],
                department_id=r.get("departement_id"),
                max_clock_in_time=normalize_mysql_time(r.get("max_clock_in_time")),
                max_clock_out_time=normalize_mysql_time(r.get("max_clock_out_time")),
            )

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[Attendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, attendance_id, work_date, clock_in, clock_out
                FROM attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_attendance(r) if r else None

    def create_clock_in(self, *, attendance: Attendance, history: AttendanceHistory) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(employee_id, attendance_id, work_date, clock_in, created_at, updated_at)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        attendance.employee_id,
                        attendance.attendance_id,
                        attendance.work_date,
                        attendance.clock_in,
                        attendance.clock_in,
                        attendance.clock_in,
                    ),
                )
                _insert_history(cur, history)
        except IntegrityError as e:
            if is_duplicate_key(e):
                logger.warning("Concurrent clock-in rejected for %s on %s", attendance.employee_id, attendance.work_date)
                raise ConflictError("Already clocked in today") from e
            raise

    def record_clock_out(
        self,
        *,
        attendance_id: str,
        clock_out_time: datetime,
        history: AttendanceHistory,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET clock_out=%s, updated_at=%s
                WHERE attendance_id=%s AND clock_out IS NULL
                """,
                (clock_out_time, clock_out_time, attendance_id),
            )
            if cur.rowcount == 0:
                return False
            _insert_history(cur, history)
            return True

    def list_logs(
        self,
        *,
        work_date: Optional[date] = None,
        department_id: Optional[int] = None,
    ) -> Sequence[AttendanceLogRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if work_date is not None:
            day_start = datetime.combine(work_date, datetime.min.time())
            clauses.append("ah.date_attendance >= %s AND ah.date_attendance < %s")
            params.extend([day_start, day_start + timedelta(days=1)])
        if department_id is not None:
            clauses.append("e.departement_id=%s")
            params.append(int(department_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ah.id, ah.employee_id,
                    e.name AS employee_name,
                    e.departement_id AS department_id,
                    d.departement_name AS department_name,
                    ah.attendance_id, ah.date_attendance, ah.attendance_type, ah.description,
                    d.max_clock_in_time, d.max_clock_out_time,
                    ah.created_at
                FROM attendance_history ah
                LEFT JOIN employee e ON ah.employee_id = e.employee_id
                LEFT JOIN departement d ON e.departement_id = d.id
                WHERE {where}
                ORDER BY ah.date_attendance DESC, ah.id DESC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                AttendanceLogRow(
                    id=int(r["id"]),
                    employee_id=r["employee_id"],
                    employee_name=r.get("employee_name") or "",
                    department_id=int(r.get("department_id") or 0),
                    department_name=r.get("department_name") or "",
                    attendance_id=r["attendance_id"],
                    date_attendance=r["date_attendance"],
                    attendance_type=int(r["attendance_type"]),
                    description=r.get("description") or "",
                    max_clock_in_time=normalize_mysql_time(r.get("max_clock_in_time")),
                    max_clock_out_time=normalize_mysql_time(r.get("max_clock_out_time")),
                    created_at=r["created_at"],
                )
                for r in rows
            ]
