"""Data models for the shift engine.

Every source is mapped onto the same `Shift` record so the rest of the
pipeline (overlaps, totals, next-shift lookup, export) never needs to know
where a shift came from. The original record is kept in `raw` so it can be
re-parsed without re-fetching.

This file uses Pydantic v2.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .utils import parse_time


SourceName = Literal["walmart", "canes"]

NOT_AVAILABLE = "N/A"


class Shift(BaseModel):
    """One scheduled block of work at one job on one calendar date.

    `has_overlap` is the only field written after construction, and only by
    `overlap.detect_overlaps`.
    """

    date: dt.date = Field(..., description="Local calendar date of the shift (YYYY-MM-DD).")
    start: str = Field(default=NOT_AVAILABLE, description="Start time as displayed, e.g. '9:00AM'.")
    end: str = Field(default=NOT_AVAILABLE, description="End time as displayed, e.g. '5:00PM'.")

    duration_hours: float = 0.0
    paid_hours: float = Field(default=0.0, description="Duration minus unpaid break.")
    gross_pay: float = 0.0
    net_pay: float = 0.0

    job: str
    source: SourceName
    has_overlap: bool = False

    raw: Dict[str, Any] = Field(default_factory=dict, description="Original record.")

    def start_time(self) -> Optional[dt.time]:
        return parse_time(self.start)

    def end_time(self) -> Optional[dt.time]:
        return parse_time(self.end)

    def start_datetime(self) -> Optional[dt.datetime]:
        """Date and start time combined into a naive local datetime."""
        t = self.start_time()
        if t is None:
            return None
        return dt.datetime.combine(self.date, t)


class DayTotals(BaseModel):
    date: dt.date
    paid_hours: float = 0.0
    gross_pay: float = 0.0
    net_pay: float = 0.0
    sources: List[SourceName] = Field(default_factory=list, description="Distinct sources worked that day.")


class WeekTotals(BaseModel):
    week: int = Field(..., description="ISO-8601 week number.")
    paid_hours: float = 0.0
    gross_pay: float = 0.0
    net_pay: float = 0.0


class PeriodTotals(BaseModel):
    """Estimate for the next paycheck: current ISO week plus the one before."""

    current_week: int
    last_week: int
    shift_count: int = 0
    gross_pay: float = 0.0
    net_pay: float = 0.0


class ScheduleSummary(BaseModel):
    """Header figures for the whole shift list."""

    first_date: Optional[dt.date] = None
    last_date: Optional[dt.date] = None
    shift_count: int = 0
    paid_hours: float = 0.0
    gross_pay: float = 0.0
    net_pay: float = 0.0


class ScheduleReport(BaseModel):
    shifts: List[Shift] = Field(default_factory=list)
    summary: ScheduleSummary = Field(default_factory=ScheduleSummary)
    daily: List[DayTotals] = Field(default_factory=list)
    weekly: List[WeekTotals] = Field(default_factory=list)
    period: PeriodTotals
    next_shift: Optional[Shift] = None
