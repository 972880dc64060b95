from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional


class AttendanceType(IntEnum):
    """Clock event type as stored in attendance_history.attendance_type."""

    IN = 1
    OUT = 2

    @classmethod
    def from_value(cls, value: Any) -> Optional["AttendanceType"]:
        """Stored value as an AttendanceType, or None when it is not one."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return None

    @property
    def label(self) -> str:
        return "Clock In" if self is AttendanceType.IN else "Clock Out"


class AttendanceStatus(str, Enum):
    """Outcome of evaluating a clock event against the department cutoff."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
