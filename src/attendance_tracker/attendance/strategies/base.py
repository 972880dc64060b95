from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import AttendanceStatus, AttendanceType


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    description: str

    @property
    def is_on_time(self) -> bool:
        return self.status is AttendanceStatus.ON_TIME


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a clock event is labelled."""

    @abstractmethod
    def decide(self, *, direction: AttendanceType) -> StatusDecision:
        raise NotImplementedError
