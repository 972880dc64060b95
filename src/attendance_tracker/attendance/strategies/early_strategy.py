from __future__ import annotations

from ...core.enums import AttendanceStatus, AttendanceType
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """Clock-out before the department cutoff."""

    def decide(self, *, direction: AttendanceType) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE, description=f"{direction.label} (Early)")
