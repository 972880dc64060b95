from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Attendance, AttendanceHistory, AttendanceLogRow, EmployeePolicy


class AttendanceRepository(Protocol):
    """Exactly the queries the clock-in/clock-out workflow needs.

    ``work_date`` is always supplied by the caller from the same clock reading
    that stamps the rows, so the uniqueness check and the insert agree on what
    "today" is.
    """

    def get_employee_policy(self, employee_id: str) -> Optional[EmployeePolicy]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[Attendance]:
        raise NotImplementedError

    def create_clock_in(self, *, attendance: Attendance, history: AttendanceHistory) -> None:
        """Insert both rows atomically; ConflictError if the day already has a row."""

        raise NotImplementedError

    def record_clock_out(
        self,
        *,
        attendance_id: str,
        clock_out_time: datetime,
        history: AttendanceHistory,
    ) -> bool:
        """Set clock_out (only if still NULL) and append history atomically.

        Returns False, writing nothing, when clock_out was already set.
        """

        raise NotImplementedError

    def list_logs(
        self,
        *,
        work_date: Optional[date] = None,
        department_id: Optional[int] = None,
    ) -> Sequence[AttendanceLogRow]:
        raise NotImplementedError
