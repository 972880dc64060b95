from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Protocol

from ..common.datetime_utils import now_local


class Pingable(Protocol):
    def ping(self) -> bool:
        raise NotImplementedError


class HealthService:
    """Liveness report. Owns the process start instant used for uptime."""

    def __init__(
        self,
        database: Pingable,
        *,
        started_at: Optional[datetime] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._database = database
        self._clock = clock
        self.started_at = started_at or clock()

    def uptime_seconds(self, now: Optional[datetime] = None) -> int:
        now = now or self._clock()
        return max(0, int((now - self.started_at).total_seconds()))

    def check(self) -> dict:
        now = self._clock()
        return {
            "status": "ok",
            "message": "Attendance System API is running",
            "uptime": f"{self.uptime_seconds(now)}s",
            "database": "connected" if self._database.ping() else "disconnected",
            "timestamp": now.astimezone().isoformat(timespec="seconds"),
        }
