from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import DATE_FORMAT, DATETIME_FORMAT, TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_time_of_day(value: str) -> time:
    """Parse 'HH:MM:SS' (or 'HH:MM') into a time-of-day."""
    value = value.strip()
    for fmt in (TIME_FORMAT, "%H:%M"):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: {value!r}")


def format_time_of_day(value: Optional[time]) -> str:
    return value.strftime(TIME_FORMAT) if value is not None else ""


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(DATETIME_FORMAT) if value is not None else None


def now_local() -> datetime:
    """Current local time, second precision.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now().replace(microsecond=0)
