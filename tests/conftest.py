from __future__ import annotations

import itertools
from datetime import datetime, time

import pytest

from attendance_tracker.attendance.factory import AttendanceStrategyFactory
from attendance_tracker.attendance.service import AttendanceService
from attendance_tracker.config.settings import Settings
from attendance_tracker.container import Container
from attendance_tracker.database.connection import DBConfig
from attendance_tracker.departments.service import DepartmentService
from attendance_tracker.employees.service import EmployeeService
from attendance_tracker.exports.csv_export import CSVExportService
from attendance_tracker.health.service import HealthService
from attendance_tracker.main import create_app

from .fakes import FakePing, InMemoryAttendance, InMemoryDb, InMemoryDepartments, InMemoryEmployees


class MutableClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 8, 45, 0)


@pytest.fixture
def db() -> InMemoryDb:
    store = InMemoryDb()
    engineering = store.add_department("Engineering", time(9, 0, 0), time(17, 0, 0))
    store.add_department("Operations", time(8, 0, 0), time(16, 0, 0))
    store.add_employee("EMP001", "Alice", engineering.department_id, address="12 Main St")
    return store


@pytest.fixture
def clock(fixed_now) -> MutableClock:
    return MutableClock(fixed_now)


@pytest.fixture
def attendance_service(db, clock) -> AttendanceService:
    ids = itertools.count(1)
    return AttendanceService(
        InMemoryAttendance(db),
        strategy_factory=AttendanceStrategyFactory(),
        id_factory=lambda: f"att-{next(ids)}",
        clock=clock,
    )


@pytest.fixture
def container(db, attendance_service, clock, tmp_path) -> Container:
    departments = InMemoryDepartments(db)
    employees = InMemoryEmployees(db)
    return Container(
        conn=None,
        departments_repo=departments,
        employees_repo=employees,
        attendance_repo=InMemoryAttendance(db),
        department_service=DepartmentService(departments),
        employee_service=EmployeeService(employees, departments),
        attendance_service=attendance_service,
        health_service=HealthService(FakePing(True), clock=clock),
        csv_export=CSVExportService(clock=clock),
        export_dir=str(tmp_path / "exports"),
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        db=DBConfig(host="localhost", port=3306, user="test", password="", database="attendance_test"),
        testing=True,
        export_dir=str(tmp_path / "exports"),
    )


@pytest.fixture
def app(settings, container):
    return create_app(settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()
