from __future__ import annotations

from datetime import datetime, timedelta

from attendance_tracker.health.service import HealthService

from .fakes import FakePing


def test_health_reports_uptime_and_database():
    started = datetime(2026, 3, 2, 8, 0, 0)
    now = started + timedelta(minutes=2, seconds=5)
    svc = HealthService(FakePing(True), started_at=started, clock=lambda: now)

    report = svc.check()

    assert report["status"] == "ok"
    assert report["uptime"] == "125s"
    assert report["database"] == "connected"
    assert report["timestamp"].startswith("2026-03-02T08:02:05")


def test_health_is_ok_when_database_is_down():
    started = datetime(2026, 3, 2, 8, 0, 0)
    svc = HealthService(FakePing(False), started_at=started, clock=lambda: started)

    report = svc.check()

    assert report["status"] == "ok"
    assert report["database"] == "disconnected"
    assert report["uptime"] == "0s"


def test_uptime_never_negative():
    started = datetime(2026, 3, 2, 8, 0, 0)
    svc = HealthService(FakePing(), started_at=started)
    assert svc.uptime_seconds(started - timedelta(seconds=30)) == 0
