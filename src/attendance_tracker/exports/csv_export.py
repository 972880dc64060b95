"""CSV export of attendance logs, employees and departments.

Each ``export_*`` method writes a header row followed by one row per record,
numbered from 1 in the order given.
"""
from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import format_time_of_day, now_local
from ..core.constants import DATE_FORMAT, DATETIME_FORMAT, FILENAME_TIMESTAMP_FORMAT, TIME_FORMAT
from ..core.enums import AttendanceType
from ..departments.model import Department
from ..employees.model import Employee
from ..attendance.model import AttendanceLog

ATTENDANCE_LOG_HEADER = [
    "No",
    "Employee ID",
    "Employee Name",
    "Department",
    "Date",
    "Time",
    "Type",
    "Description",
    "Status",
    "Max Clock In",
    "Max Clock Out",
]

EMPLOYEE_HEADER = [
    "No",
    "Employee ID",
    "Name",
    "Department",
    "Address",
    "Max Clock In",
    "Max Clock Out",
    "Created At",
]

DEPARTMENT_HEADER = [
    "No",
    "Department Name",
    "Max Clock In Time",
    "Max Clock Out Time",
]

# Excel opens UTF-8 CSV correctly only with a BOM.
CSV_ENCODING = "utf-8-sig"


def attendance_type_text(value: int) -> str:
    kind = AttendanceType.from_value(value)
    return kind.label if kind is not None else "Unknown"


def status_text(is_on_time: bool) -> str:
    return "On Time" if is_on_time else "Late/Early"


class CSVExportService:
    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._clock = clock

    def _write(self, path: str | Path, header: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding=CSV_ENCODING) as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            writer.writerows(rows)

    def export_attendance_logs(self, logs: Sequence[AttendanceLog], path: str | Path) -> None:
        rows = (
            [
                str(i),
                log.row.employee_id,
                log.row.employee_name,
                log.row.department_name,
                log.row.date_attendance.strftime(DATE_FORMAT),
                log.row.date_attendance.strftime(TIME_FORMAT),
                attendance_type_text(log.row.attendance_type),
                log.row.description,
                status_text(log.is_on_time),
                format_time_of_day(log.row.max_clock_in_time),
                format_time_of_day(log.row.max_clock_out_time),
            ]
            for i, log in enumerate(logs, start=1)
        )
        self._write(path, ATTENDANCE_LOG_HEADER, rows)

    def export_employees(self, employees: Sequence[Employee], path: str | Path) -> None:
        def row(i: int, emp: Employee) -> list[str]:
            dept = emp.department
            return [
                str(i),
                emp.employee_id,
                emp.name,
                dept.department_name if dept else "",
                emp.address,
                format_time_of_day(dept.max_clock_in_time) if dept else "",
                format_time_of_day(dept.max_clock_out_time) if dept else "",
                emp.created_at.strftime(DATETIME_FORMAT),
            ]

        self._write(path, EMPLOYEE_HEADER, (row(i, emp) for i, emp in enumerate(employees, start=1)))

    def export_departments(self, departments: Sequence[Department], path: str | Path) -> None:
        rows = (
            [
                str(i),
                dept.department_name,
                format_time_of_day(dept.max_clock_in_time),
                format_time_of_day(dept.max_clock_out_time),
            ]
            for i, dept in enumerate(departments, start=1)
        )
        self._write(path, DEPARTMENT_HEADER, rows)

    def generate_filename(self, prefix: str, *, now: Optional[datetime] = None) -> str:
        now = now or self._clock()
        return f"{prefix}_{now.strftime(FILENAME_TIMESTAMP_FORMAT)}.csv"
