"""Same-day overlap detection.

This is the only place that writes `Shift.has_overlap`.
"""

from __future__ import annotations

import datetime as dt
from collections import defaultdict
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Shift
from .utils import MINUTES_PER_DAY, time_to_minutes


def _interval(shift: Shift) -> Optional[Tuple[int, int]]:
    """Half-open [start, end) in minutes; an end before the start runs past midnight."""
    start, end = shift.start_time(), shift.end_time()
    if start is None or end is None:
        return None
    s, e = time_to_minutes(start), time_to_minutes(end)
    if e < s:
        e += MINUTES_PER_DAY
    return s, e


def detect_overlaps(shifts: Iterable[Shift]) -> int:
    """Flag every shift that intersects another shift on the same date.

    All pairs are compared, not just neighbours. Flags are cleared first so a
    rerun reflects only the current list. Shifts without parseable times are
    never flagged and never cause a flag. Returns the number of flagged shifts.

    Unlike a plain time-of-day comparison, an end earlier than its start is
    read as running past midnight, so 22:00-2:00 overlaps 23:00-23:30.
    """
    by_date: Dict[dt.date, List[Tuple[Shift, Tuple[int, int]]]] = defaultdict(list)
    for shift in shifts:
        shift.has_overlap = False
        interval = _interval(shift)
        if interval is not None:
            by_date[shift.date].append((shift, interval))

    flagged = 0
    for day_shifts in by_date.values():
        for (a, (sa, ea)), (b, (sb, eb)) in combinations(day_shifts, 2):
            if sa < eb and sb < ea:
                for s in (a, b):
                    if not s.has_overlap:
                        s.has_overlap = True
                        flagged += 1
    return flagged
