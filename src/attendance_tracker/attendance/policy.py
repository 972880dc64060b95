"""On-time evaluation of clock events against a department cutoff."""
from __future__ import annotations

from datetime import datetime, time
from typing import Optional, Union

from ..common.datetime_utils import parse_time_of_day
from ..core.enums import AttendanceType

Cutoff = Union[time, str, None]


def parse_cutoff(cutoff: Cutoff) -> Optional[time]:
    """Return the cutoff as a time, or None when no usable policy is configured."""
    if cutoff is None:
        return None
    if isinstance(cutoff, time):
        return cutoff
    if isinstance(cutoff, str) and cutoff.strip():
        try:
            return parse_time_of_day(cutoff)
        except ValueError:
            return None
    return None


def is_on_time(event_time: datetime, cutoff: Cutoff, direction: AttendanceType) -> bool:
    """Compare ``event_time`` with the cutoff on the same calendar day.

    Clock-in is on time up to and including the cutoff; clock-out is on time
    from the cutoff onwards. A missing or unparsable cutoff is always on time.
    Cutoffs past midnight are not supported.
    """
    cutoff_time = parse_cutoff(cutoff)
    if cutoff_time is None:
        return True

    event_time = event_time.replace(microsecond=0)
    cutoff_at = datetime.combine(event_time.date(), cutoff_time.replace(microsecond=0), tzinfo=event_time.tzinfo)

    if direction is AttendanceType.IN:
        return event_time <= cutoff_at
    return event_time >= cutoff_at
