from __future__ import annotations

from ...core.enums import AttendanceStatus, AttendanceType
from .base import AttendanceStrategy, StatusDecision


class OnTimeStrategy(AttendanceStrategy):
    """On-time clock-in or clock-out."""

    def decide(self, *, direction: AttendanceType) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME, description=direction.label)
