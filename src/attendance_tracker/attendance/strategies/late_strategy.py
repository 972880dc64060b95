from __future__ import annotations

from ...core.enums import AttendanceStatus, AttendanceType
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Clock-in after the department cutoff."""

    def decide(self, *, direction: AttendanceType) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, description=f"{direction.label} (Late)")
