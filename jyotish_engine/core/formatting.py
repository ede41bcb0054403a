"""
formatting.py
=============
Decimal-hour <-> "HH:MM" conversion and wall-clock window checks.
"""

import math
import re
from datetime import datetime
from typing import Optional

from .errors import InvalidTimeFormatError

_HHMM = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def decimal_to_time(decimal: float) -> str:
    """Decimal hours to "HH:MM", rounded to the minute; hours wrap at 24."""
    total_minutes = int(math.floor(decimal * 60 + 0.5))
    hours = (total_minutes // 60) % 24
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"


def time_to_decimal(value: str) -> float:
    match = _HHMM.match(value or "")
    if not match:
        raise InvalidTimeFormatError(f"Expected HH:MM, got {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormatError(f"Expected HH:MM, got {value!r}")
    return hours + minutes / 60.0


def is_within_muhurat(start: str, end: str, now: Optional[datetime] = None) -> bool:
    """True when the wall-clock time `now` lies in [start, end], minute resolution."""
    if now is None:
        now = datetime.now()
    current = now.hour + now.minute / 60.0
    return time_to_decimal(start) <= current <= time_to_decimal(end)


def time_ranges_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    return (time_to_decimal(start1) < time_to_decimal(end2)
            and time_to_decimal(start2) < time_to_decimal(end1))


def format_degrees(value: float) -> str:
    """Format decimal degrees as D°M'."""
    d = int(value)
    m = int(round((value - d) * 60))
    if m == 60:
        d, m = d + 1, 0
    return f"{d}°{m:02d}'"
