from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .config.settings import Settings
from .database.connection import DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .exports.csv_export import CSVExportService
from .health.service import HealthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    department_service: DepartmentService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    health_service: HealthService

    csv_export: CSVExportService
    export_dir: str


def build_container(settings: Settings) -> Container:
    conn = DatabaseConnection(settings.db)

    departments_repo = MySQLDepartmentRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(employees_repo, departments_repo),
        attendance_service=AttendanceService(attendance_repo, strategy_factory=AttendanceStrategyFactory()),
        health_service=HealthService(conn),
        csv_export=CSVExportService(),
        export_dir=settings.export_dir,
    )
