from __future__ import annotations

import csv
from datetime import datetime, time

from attendance_tracker.attendance.model import AttendanceLog, AttendanceLogRow
from attendance_tracker.core.enums import AttendanceType
from attendance_tracker.departments.model import Department
from attendance_tracker.employees.model import Employee
from attendance_tracker.exports.csv_export import (
    ATTENDANCE_LOG_HEADER,
    CSV_ENCODING,
    DEPARTMENT_HEADER,
    EMPLOYEE_HEADER,
    CSVExportService,
    attendance_type_text,
    status_text,
)


def _read(path):
    with open(path, newline="", encoding=CSV_ENCODING) as fh:
        return list(csv.reader(fh))


def _log(n: int, kind: AttendanceType, at: datetime, on_time: bool) -> AttendanceLog:
    row = AttendanceLogRow(
        id=n,
        employee_id="EMP001",
        employee_name="Alice",
        department_id=1,
        department_name="Engineering",
        attendance_id="att-1",
        date_attendance=at,
        attendance_type=kind,
        description=kind.label,
        max_clock_in_time=time(9, 0),
        max_clock_out_time=time(17, 0),
        created_at=at,
    )
    return AttendanceLog(row=row, is_on_time=on_time)


def test_export_attendance_logs_keeps_order(tmp_path):
    logs = [
        _log(2, AttendanceType.OUT, datetime(2026, 3, 2, 16, 30, 5), False),
        _log(1, AttendanceType.IN, datetime(2026, 3, 2, 8, 45, 0), True),
    ]
    path = tmp_path / "nested" / "logs.csv"

    CSVExportService().export_attendance_logs(logs, path)

    rows = _read(path)
    assert rows[0] == ATTENDANCE_LOG_HEADER
    assert len(rows) == 3
    assert rows[1] == [
        "1", "EMP001", "Alice", "Engineering", "2026-03-02", "16:30:05",
        "Clock Out", "Clock Out", "Late/Early", "09:00:00", "17:00:00",
    ]
    assert rows[2][0] == "2"
    assert rows[2][6] == "Clock In"
    assert rows[2][8] == "On Time"


def test_export_empty_list_writes_header_only(tmp_path):
    path = tmp_path / "empty.csv"
    CSVExportService().export_departments([], path)
    assert _read(path) == [DEPARTMENT_HEADER]


def test_export_employees_and_departments(tmp_path):
    dept = Department(1, "Engineering", time(9, 0), time(17, 0))
    stamp = datetime(2026, 1, 5, 9, 0, 0)
    employees = [
        Employee(1, "EMP001", 1, "Alice", "12 Main St", stamp, stamp, department=dept),
        Employee(2, "EMP002", 1, "Bob, Jr.", "", stamp, stamp, department=None),
    ]

    svc = CSVExportService()
    svc.export_employees(employees, tmp_path / "employees.csv")
    svc.export_departments([dept], tmp_path / "departments.csv")

    emp_rows = _read(tmp_path / "employees.csv")
    assert emp_rows[0] == EMPLOYEE_HEADER
    assert emp_rows[1] == ["1", "EMP001", "Alice", "Engineering", "12 Main St", "09:00:00", "17:00:00", "2026-01-05 09:00:00"]
    assert emp_rows[2][2] == "Bob, Jr."
    assert emp_rows[2][3] == ""

    assert _read(tmp_path / "departments.csv")[1] == ["1", "Engineering", "09:00:00", "17:00:00"]


def test_file_starts_with_bom(tmp_path):
    path = tmp_path / "bom.csv"
    CSVExportService().export_departments([], path)
    assert path.read_bytes().startswith(b"\xef\xbb\xbf")


def test_generate_filename():
    name = CSVExportService().generate_filename("attendance_logs", now=datetime(2026, 3, 2, 8, 5, 9))
    assert name == "attendance_logs_20260302_080509.csv"


def test_text_helpers():
    assert attendance_type_text(1) == "Clock In"
    assert attendance_type_text(2) == "Clock Out"
    assert attendance_type_text(7) == "Unknown"
    assert status_text(True) == "On Time"
    assert status_text(False) == "Late/Early"
