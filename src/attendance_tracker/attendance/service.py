from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceType
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .factory import AttendanceStrategyFactory
from .model import (
    Attendance,
    AttendanceHistory,
    AttendanceLog,
    ClockInResult,
    ClockOutResult,
    EmployeePolicy,
    new_attendance_id,
)
from .policy import is_on_time
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock-in / clock-out workflow.

    One clock reading (``now``) drives the whole operation: the "today"
    lookup, the on-time evaluation and the stored timestamps.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        id_factory: Callable[[], str] = new_attendance_id,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._new_id = id_factory
        self._clock = clock

    def _require_employee(self, employee_id: Optional[str]) -> EmployeePolicy:
        employee_id = require_non_empty(employee_id, "employee_id")
        policy = self._attendance.get_employee_policy(employee_id)
        if not policy:
            raise NotFoundError("Employee not found")
        return policy

    def clock_in(self, employee_id: Optional[str], *, now: datetime | None = None) -> ClockInResult:
        now = (now or self._clock()).replace(microsecond=0)
        today = now.date()

        employee = self._require_employee(employee_id)

        if self._attendance.get_for_employee_and_date(employee.employee_id, today):
            raise ConflictError("Already clocked in today")

        attendance_id = self._new_id()
        decision = self._factory.evaluate(now=now, cutoff=employee.max_clock_in_time, direction=AttendanceType.IN)

        self._attendance.create_clock_in(
            attendance=Attendance(
                employee_id=employee.employee_id,
                attendance_id=attendance_id,
                work_date=today,
                clock_in=now,
            ),
            history=AttendanceHistory(
                employee_id=employee.employee_id,
                attendance_id=attendance_id,
                date_attendance=now,
                attendance_type=AttendanceType.IN,
                description=decision.description,
            ),
        )
        logger.info("Clock in: employee=%s attendance=%s status=%s", employee.employee_id, attendance_id, decision.status.value)

        return ClockInResult(attendance_id=attendance_id, clock_in_time=now, is_on_time=decision.is_on_time)

    def clock_out(self, employee_id: Optional[str], *, now: datetime | None = None) -> ClockOutResult:
        now = (now or self._clock()).replace(microsecond=0)
        today = now.date()

        employee = self._require_employee(employee_id)

        record = self._attendance.get_for_employee_and_date(employee.employee_id, today)
        if not record:
            raise ValidationError("No active clock in found for today")
        if record.clock_out is not None:
            raise ConflictError("Already clocked out today")

        decision = self._factory.evaluate(now=now, cutoff=employee.max_clock_out_time, direction=AttendanceType.OUT)

        updated = self._attendance.record_clock_out(
            attendance_id=record.attendance_id,
            clock_out_time=now,
            history=AttendanceHistory(
                employee_id=employee.employee_id,
                attendance_id=record.attendance_id,
                date_attendance=now,
                attendance_type=AttendanceType.OUT,
                description=decision.description,
            ),
        )
        if not updated:
            logger.warning("Concurrent clock-out rejected for %s (attendance=%s)", employee.employee_id, record.attendance_id)
            raise ConflictError("Already clocked out today")

        logger.info(
            "Clock out: employee=%s attendance=%s status=%s",
            employee.employee_id,
            record.attendance_id,
            decision.status.value,
        )
        return ClockOutResult(
            attendance_id=record.attendance_id,
            clock_in_time=record.clock_in,
            clock_out_time=now,
            is_on_time=decision.is_on_time,
        )

    def list_logs(self, *, work_date: date | None = None, department_id: int | None = None) -> List[AttendanceLog]:
        rows = self._attendance.list_logs(work_date=work_date, department_id=department_id)
        out: List[AttendanceLog] = []
        for r in rows:
            kind = AttendanceType.from_value(r.attendance_type)
            if kind is None:
                logger.warning("History row %s has unknown attendance_type %r", r.id, r.attendance_type)
                out.append(AttendanceLog(row=r, is_on_time=False))
                continue
            cutoff = r.max_clock_in_time if kind is AttendanceType.IN else r.max_clock_out_time
            out.append(AttendanceLog(row=r, is_on_time=is_on_time(r.date_attendance, cutoff, kind)))
        return out
