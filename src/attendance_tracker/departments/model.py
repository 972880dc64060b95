from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.datetime_utils import format_time_of_day


@dataclass(frozen=True)
class Department:
    """Department with its on-time cutoffs (time-of-day, no date)."""

    department_id: int
    department_name: str
    max_clock_in_time: Optional[time]
    max_clock_out_time: Optional[time]

    def to_dict(self) -> dict:
        return {
            "id": self.department_id,
            "departement_name": self.department_name,
            "max_clock_in_time": format_time_of_day(self.max_clock_in_time),
            "max_clock_out_time": format_time_of_day(self.max_clock_out_time),
        }
