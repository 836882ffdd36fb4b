"""Serialization of a shift list for download or archiving."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Iterable, Union

from .models import ScheduleReport, Shift


CSV_HEADER = ["Date", "Job", "Start", "End", "Paid Hours", "Gross Pay", "Net Pay"]


def to_csv(shifts: Iterable[Shift]) -> str:
    """One row per shift; hours and money rounded to two decimals."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for s in shifts:
        writer.writerow([
            s.date.isoformat(),
            s.job,
            s.start,
            s.end,
            f"{s.paid_hours:.2f}",
            f"{s.gross_pay:.2f}",
            f"{s.net_pay:.2f}",
        ])
    return buf.getvalue()


def _prepare(path: Union[str, Path]) -> Path:
    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    return out_path


def write_csv(shifts: Iterable[Shift], path: Union[str, Path]) -> Path:
    out_path = _prepare(path)
    out_path.write_text(to_csv(shifts), encoding="utf-8")
    return out_path


def write_json(report: ScheduleReport, path: Union[str, Path]) -> Path:
    out_path = _prepare(path)
    # json mode turns dates into YYYY-MM-DD strings
    data = report.model_dump(mode="json", exclude={"shifts": {"__all__": {"raw"}}, "next_shift": {"raw"}})
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return out_path
