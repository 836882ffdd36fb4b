"""Find the upcoming shift relative to a caller-supplied "now"."""

from __future__ import annotations

import datetime as dt
from typing import Iterable, Optional, Tuple

from .models import Shift


def _as_local_naive(now: dt.datetime) -> dt.datetime:
    # Shift instants are naive local times; compare like with like.
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def find_next_shift(shifts: Iterable[Shift], now: dt.datetime) -> Optional[Shift]:
    """Return the first shift in list order that starts strictly after `now`.

    Shifts whose start time cannot be parsed are skipped. The list is expected
    to be sorted already; no reordering happens here.
    """
    now = _as_local_naive(now)
    for shift in shifts:
        start = shift.start_datetime()
        if start is not None and start > now:
            return shift
    return None


def time_until(shift: Shift, now: dt.datetime) -> Optional[Tuple[int, int]]:
    """Whole (hours, minutes) from `now` until the shift starts, minutes rounded."""
    start = shift.start_datetime()
    if start is None:
        return None
    total_minutes = round((start - _as_local_naive(now)).total_seconds() / 60)
    hours, minutes = divmod(total_minutes, 60)
    return hours, minutes
