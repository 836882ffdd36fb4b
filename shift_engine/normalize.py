"""Normalization rules shared by every source.

This module contains the deterministic pay and ordering logic:
- unpaid-break deduction for long shifts
- gross/net pay from the configured rate and take-home percentage
- the total order used to sort a merged shift list

Source connectors call into these helpers so each rule lives in one place.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Iterable, List, Tuple

from .config import PayConfig
from .models import Shift
from .utils import parse_time, time_to_minutes


# Shifts strictly longer than this get one unpaid hour deducted.
BREAK_THRESHOLD_HOURS = 5.5
UNPAID_BREAK_HOURS = 1.0


def paid_hours_after_break(duration_hours: float) -> float:
    """Apply the unpaid-break rule; never returns more than the duration."""
    if duration_hours > BREAK_THRESHOLD_HOURS:
        return duration_hours - UNPAID_BREAK_HOURS
    return duration_hours


def compute_pay(paid_hours: float, source: str, config: PayConfig) -> Tuple[float, float]:
    """Return (gross, net) pay for the given paid hours at the source's rate."""
    gross = paid_hours * config.rate_for(source)
    return gross, gross * config.take_home_multiplier


def clean_text(value: Any, default: str) -> str:
    if isinstance(value, str):
        value = value.strip()
        if value:
            return value
    return default


def shift_sort_key(shift: Shift) -> Tuple[dt.date, int, int]:
    """Sort by date, then start time; unparseable starts go last within a date."""
    t = parse_time(shift.start)
    if t is None:
        return (shift.date, 1, 0)
    return (shift.date, 0, time_to_minutes(t))


def sort_shifts(shifts: Iterable[Shift]) -> List[Shift]:
    """Stable ascending sort by (date, start time)."""
    return sorted(shifts, key=shift_sort_key)
