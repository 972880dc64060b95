from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceType
from .policy import Cutoff, is_on_time
from .strategies.base import AttendanceStrategy, StatusDecision
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the cutoff rules."""

    def for_clock_in(self, *, now: datetime, cutoff: Cutoff) -> AttendanceStrategy:
        if is_on_time(now, cutoff, AttendanceType.IN):
            return OnTimeStrategy()
        return LateStrategy()

    def for_clock_out(self, *, now: datetime, cutoff: Cutoff) -> AttendanceStrategy:
        if is_on_time(now, cutoff, AttendanceType.OUT):
            return OnTimeStrategy()
        return EarlyLeaveStrategy()

    def evaluate(self, *, now: datetime, cutoff: Cutoff, direction: AttendanceType) -> StatusDecision:
        if direction is AttendanceType.IN:
            strategy = self.for_clock_in(now=now, cutoff=cutoff)
        else:
            strategy = self.for_clock_out(now=now, cutoff=cutoff)
        return strategy.decide(direction=direction)
