"""Utility helpers shared across the engine.

Time-of-day parsing lives here because every stage (normalization, sorting,
overlap detection, next-shift lookup) needs the same interpretation of a
display string like ``"9:00AM"`` or ``"17:30"``.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Any, Optional


TIME_RE = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)?", flags=re.IGNORECASE)

MINUTES_PER_DAY = 24 * 60


def parse_time(text: Any) -> Optional[dt.time]:
    """Parse ``H:MM`` / ``HH:MM`` with an optional AM/PM marker.

    Returns None for empty or non-matching input instead of raising. Without a
    marker the hour is taken as 24-hour.
    """
    if not text or not isinstance(text, str):
        return None
    m = TIME_RE.search(text)
    if not m:
        return None

    hour, minute = int(m.group(1)), int(m.group(2))
    marker = (m.group(3) or "").upper()
    if marker == "PM" and hour < 12:
        hour += 12
    elif marker == "AM" and hour == 12:
        hour = 0

    if hour > 23 or minute > 59:
        return None
    return dt.time(hour, minute)


def time_to_minutes(value: dt.time) -> int:
    return value.hour * 60 + value.minute


def hours_between(start: Any, end: Any) -> float:
    """Elapsed hours from ``start`` to ``end``; wraps past midnight.

    Either side failing to parse contributes nothing (0.0).
    """
    s = parse_time(start)
    e = parse_time(end)
    if s is None or e is None:
        return 0.0
    diff = time_to_minutes(e) - time_to_minutes(s)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return diff / 60.0


def format_clock(value: dt.datetime) -> str:
    """Render a datetime as a compact 12-hour clock, e.g. ``9:05AM``."""
    hour12 = value.hour % 12 or 12
    marker = "AM" if value.hour < 12 else "PM"
    return f"{hour12}:{value.minute:02d}{marker}"


def iso_week(day: dt.date) -> int:
    """ISO-8601 week number (week 1 holds the year's first Thursday)."""
    return day.isocalendar()[1]
