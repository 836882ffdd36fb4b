"""Totals over a shift list.

Every function here is a pure fold: shifts in, totals out, nothing mutated.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Optional

from .config import PayConfig
from .models import DayTotals, PeriodTotals, ScheduleSummary, Shift, WeekTotals
from .utils import iso_week


def filter_shifts(
    shifts: Iterable[Shift],
    source: str = "all",
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> List[Shift]:
    """Keep shifts matching a source ("all" for any) and, optionally, a month."""
    out: List[Shift] = []
    for s in shifts:
        if source != "all" and s.source != source:
            continue
        if year is not None and s.date.year != year:
            continue
        if month is not None and s.date.month != month:
            continue
        out.append(s)
    return out


def daily_totals(shifts: Iterable[Shift]) -> List[DayTotals]:
    """Per-date paid hours and pay, ordered by date."""
    days: Dict[dt.date, DayTotals] = {}
    for s in shifts:
        day = days.get(s.date)
        if day is None:
            day = days[s.date] = DayTotals(date=s.date)
        day.paid_hours += s.paid_hours
        day.gross_pay += s.gross_pay
        day.net_pay += s.net_pay
        if s.source not in day.sources:
            day.sources.append(s.source)
    return [days[d] for d in sorted(days)]


def weekly_totals(shifts: Iterable[Shift]) -> List[WeekTotals]:
    """Per-ISO-week totals in order of first appearance.

    Weeks are keyed by week number alone, so the same number in two different
    years is merged into one bucket.
    """
    weeks: Dict[int, WeekTotals] = {}
    for s in shifts:
        n = iso_week(s.date)
        week = weeks.get(n)
        if week is None:
            week = weeks[n] = WeekTotals(week=n)
        week.paid_hours += s.paid_hours
        week.gross_pay += s.gross_pay
        week.net_pay += s.net_pay
    return list(weeks.values())


def period_totals(shifts: Iterable[Shift], now: dt.datetime, config: PayConfig) -> PeriodTotals:
    """Next-paycheck estimate from the current and previous ISO week.

    The previous week is plain ``current - 1``; in ISO week 1 that gives 0,
    which matches no shift.
    """
    current = iso_week(now.date())
    last = current - 1

    gross = 0.0
    count = 0
    for s in shifts:
        if iso_week(s.date) in (current, last):
            gross += s.gross_pay
            count += 1

    return PeriodTotals(
        current_week=current,
        last_week=last,
        shift_count=count,
        gross_pay=gross,
        net_pay=gross * config.take_home_multiplier,
    )


def summarize(shifts: Iterable[Shift]) -> ScheduleSummary:
    summary = ScheduleSummary()
    for s in shifts:
        if summary.first_date is None or s.date < summary.first_date:
            summary.first_date = s.date
        if summary.last_date is None or s.date > summary.last_date:
            summary.last_date = s.date
        summary.shift_count += 1
        summary.paid_hours += s.paid_hours
        summary.gross_pay += s.gross_pay
        summary.net_pay += s.net_pay
    return summary
