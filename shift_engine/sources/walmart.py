"""Retail scheduling API source connector.

The payload branch looks like::

    {"walmart": {"payload": {"weeks": [{"schedules": [
        {"shiftStartTime": "...", "shiftEndTime": "...",
         "events": [{"jobDescription": "..."}]}
    ]}]}}}

Start/end are absolute timestamps. We convert them to local wall-clock time,
derive the calendar date from the start, and apply the unpaid-break rule.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List, Optional

from ..config import PayConfig
from ..models import NOT_AVAILABLE, Shift
from ..normalize import clean_text, compute_pay, paid_hours_after_break
from ..utils import format_clock, hours_between
from .base import ShiftSource


logger = logging.getLogger(__name__)


class WalmartSource(ShiftSource):
    """Normalize shifts from the retail scheduling API."""

    name = "walmart"
    default_job = "Walmart Shift"

    def __init__(self, tz: Optional[dt.tzinfo] = None) -> None:
        # None means the system's local time zone.
        self._tz = tz

    def _parse_timestamp(self, value: Any) -> Optional[dt.datetime]:
        """Parse an ISO string or epoch number into local wall-clock time."""
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            try:
                parsed = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
        elif isinstance(value, (int, float)):
            ts = float(value)
            # Epoch may be in ms; convert if so.
            if ts > 1e12:
                ts /= 1000.0
            try:
                parsed = dt.datetime.fromtimestamp(ts, tz=dt.timezone.utc)
            except (OverflowError, OSError, ValueError):
                return None
        else:
            return None

        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(self._tz)
            except (OverflowError, ValueError):
                return None
        return parsed

    @staticmethod
    def _extract_job(record: Dict[str, Any]) -> Optional[str]:
        events = record.get("events")
        if isinstance(events, list) and events and isinstance(events[0], dict):
            return events[0].get("jobDescription")
        return None

    @staticmethod
    def _iter_schedules(payload: Any) -> List[Dict[str, Any]]:
        branch = payload.get("walmart") if isinstance(payload, dict) else None
        inner = branch.get("payload") if isinstance(branch, dict) else None
        weeks = inner.get("weeks") if isinstance(inner, dict) else None
        if not isinstance(weeks, list):
            return []

        out: List[Dict[str, Any]] = []
        for week in weeks:
            schedules = week.get("schedules") if isinstance(week, dict) else None
            if not isinstance(schedules, list):
                continue
            out.extend(s for s in schedules if isinstance(s, dict))
        return out

    def normalize(self, payload: Any, config: PayConfig, today: dt.date) -> List[Shift]:
        out: List[Shift] = []

        for record in self._iter_schedules(payload):
            start_dt = self._parse_timestamp(record.get("shiftStartTime"))
            if start_dt is None:
                logger.warning("Dropping %s shift with unparseable start: %r", self.name, record.get("shiftStartTime"))
                continue
            end_dt = self._parse_timestamp(record.get("shiftEndTime"))

            start = format_clock(start_dt)
            end = format_clock(end_dt) if end_dt is not None else ""

            duration = hours_between(start, end)
            paid = paid_hours_after_break(duration)
            gross, net = compute_pay(paid, self.name, config)

            out.append(
                Shift(
                    date=start_dt.date(),
                    start=start,
                    end=end or NOT_AVAILABLE,
                    duration_hours=duration,
                    paid_hours=paid,
                    gross_pay=gross,
                    net_pay=net,
                    job=clean_text(self._extract_job(record), self.default_job),
                    source=self.name,
                    raw=record,
                )
            )

        return out
