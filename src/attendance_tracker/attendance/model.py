from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import format_datetime, format_time_of_day
from ..core.constants import DATE_FORMAT
from ..core.enums import AttendanceType


def new_attendance_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class EmployeePolicy:
    """Employee joined with the cutoffs of their department."""

    employee_id: str
    name: str
    department_id: Optional[int]
    max_clock_in_time: Optional[time]
    max_clock_out_time: Optional[time]


@dataclass(frozen=True)
class Attendance:
    """One row per employee per calendar day."""

    employee_id: str
    attendance_id: str
    work_date: date
    clock_in: datetime
    clock_out: Optional[datetime] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceHistory:
    """Append-only clock event log entry."""

    employee_id: str
    attendance_id: str
    date_attendance: datetime
    attendance_type: AttendanceType
    description: str
    id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceLogRow:
    """Read-model: history entry joined with employee and department."""

    id: int
    employee_id: str
    employee_name: str
    department_id: int
    department_name: str
    attendance_id: str
    date_attendance: datetime
    attendance_type: int
    description: str
    max_clock_in_time: Optional[time]
    max_clock_out_time: Optional[time]
    created_at: datetime


@dataclass(frozen=True)
class AttendanceLog:
    row: AttendanceLogRow
    is_on_time: bool

    def to_dict(self) -> dict:
        r = self.row
        return {
            "id": r.id,
            "employee_id": r.employee_id,
            "employee_name": r.employee_name,
            "department_id": r.department_id,
            "department_name": r.department_name,
            "attendance_id": r.attendance_id,
            "date_attendance": r.date_attendance.isoformat(),
            "attendance_type": int(r.attendance_type),
            "description": r.description,
            "max_clock_in_time": format_time_of_day(r.max_clock_in_time),
            "max_clock_out_time": format_time_of_day(r.max_clock_out_time),
            "is_on_time": self.is_on_time,
            "created_at": r.created_at.isoformat(),
        }


@dataclass(frozen=True)
class LogFilter:
    work_date: Optional[date] = None
    department_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime(DATE_FORMAT) if self.work_date else "",
            "department_id": self.department_id or 0,
        }


@dataclass(frozen=True)
class ClockInResult:
    attendance_id: str
    clock_in_time: datetime
    is_on_time: bool

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "clock_in_time": format_datetime(self.clock_in_time),
            "is_on_time": self.is_on_time,
        }


@dataclass(frozen=True)
class ClockOutResult:
    attendance_id: str
    clock_in_time: datetime
    clock_out_time: datetime
    is_on_time: bool

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "clock_in_time": format_datetime(self.clock_in_time),
            "clock_out_time": format_datetime(self.clock_out_time),
            "is_on_time": self.is_on_time,
        }
