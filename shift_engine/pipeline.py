"""End-to-end processing of one combined payload.

A run is stateless: the shift list is rebuilt from the payload every time, and
`has_overlap` is recomputed from scratch.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, List, Optional, Sequence

from .aggregate import daily_totals, period_totals, summarize, weekly_totals
from .config import PayConfig
from .models import ScheduleReport, Shift
from .next_shift import find_next_shift
from .normalize import sort_shifts
from .overlap import detect_overlaps
from .sources.base import ShiftSource
from .sources.canes import CanesSource
from .sources.walmart import WalmartSource


logger = logging.getLogger(__name__)


def default_sources(tz: Optional[dt.tzinfo] = None) -> List[ShiftSource]:
    return [WalmartSource(tz=tz), CanesSource()]


def build_shifts(
    payload: Any,
    config: PayConfig,
    today: dt.date,
    tz: Optional[dt.tzinfo] = None,
    sources: Optional[Sequence[ShiftSource]] = None,
) -> List[Shift]:
    """Normalize every source, merge, sort, and flag overlaps."""
    shifts: List[Shift] = []
    for source in sources if sources is not None else default_sources(tz):
        found = source.normalize(payload, config, today)
        logger.debug("%s: %d shifts", source.name, len(found))
        shifts.extend(found)

    shifts = sort_shifts(shifts)
    flagged = detect_overlaps(shifts)
    if flagged:
        logger.info("%d shifts overlap another shift on the same day", flagged)
    return shifts


def build_report(
    payload: Any,
    config: PayConfig,
    now: dt.datetime,
    tz: Optional[dt.tzinfo] = None,
) -> ScheduleReport:
    """Build the shift list plus every derived total for display.

    An aware `now` is moved into `tz` (system local when None), the same zone
    retail shifts are placed in, before any date or instant is taken from it.
    """
    if now.tzinfo is not None:
        now = now.astimezone(tz).replace(tzinfo=None)

    shifts = build_shifts(payload, config, now.date(), tz=tz)
    return ScheduleReport(
        shifts=shifts,
        summary=summarize(shifts),
        daily=daily_totals(shifts),
        weekly=weekly_totals(shifts),
        period=period_totals(shifts, now, config),
        next_shift=find_next_shift(shifts, now),
    )
