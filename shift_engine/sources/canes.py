"""Restaurant schedule feed source connector.

The feed is a flat list under ``"canes"``::

    [{"day": 14, "duration": "4:00 PM - 10:30 PM", "job": "Cashier"}, ...]

`day` is a day of the current month (taken from the caller's `today`), and
`duration` is a ``start-end`` pair. No break is deducted for this source.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, List, Optional, Tuple

from ..config import PayConfig
from ..models import NOT_AVAILABLE, Shift
from ..normalize import clean_text, compute_pay
from ..utils import hours_between
from .base import ShiftSource


logger = logging.getLogger(__name__)


class CanesSource(ShiftSource):
    """Normalize shifts from the restaurant schedule feed."""

    name = "canes"
    default_job = "Cane's Shift"

    @staticmethod
    def _resolve_date(day: Any, today: dt.date) -> Optional[dt.date]:
        """Map a day-of-month onto `today`'s month; None if it doesn't exist there."""
        if isinstance(day, bool):
            return None
        if isinstance(day, float) and day.is_integer():
            day = int(day)
        try:
            n = int(str(day).strip())
        except (TypeError, ValueError):
            return None
        try:
            return today.replace(day=n)
        except (OverflowError, ValueError):
            return None

    @staticmethod
    def _split_duration(duration: Any) -> Tuple[str, str]:
        if not isinstance(duration, str):
            return "", ""
        start, _, end = duration.partition("-")
        return start.strip(), end.strip()

    def normalize(self, payload: Any, config: PayConfig, today: dt.date) -> List[Shift]:
        entries = payload.get("canes") if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            return []

        out: List[Shift] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue

            date = self._resolve_date(entry.get("day"), today)
            if date is None:
                logger.warning("Dropping %s shift with invalid day %r for %s", self.name, entry.get("day"), today.strftime("%Y-%m"))
                continue

            start, end = self._split_duration(entry.get("duration"))
            paid = hours_between(start, end)
            gross, net = compute_pay(paid, self.name, config)

            out.append(
                Shift(
                    date=date,
                    start=start or NOT_AVAILABLE,
                    end=end or NOT_AVAILABLE,
                    duration_hours=paid,
                    paid_hours=paid,
                    gross_pay=gross,
                    net_pay=net,
                    job=clean_text(entry.get("job"), self.default_job),
                    source=self.name,
                    raw=entry,
                )
            )

        return out
