"""CLI entry point.

This script loads a combined schedule payload, normalizes it, and prints the
schedule with its totals. Optionally writes CSV and/or JSON.

Examples:
    python run_report.py --payload combined_schedule.json
    python run_report.py --settings settings.json --csv my_schedule.csv
    python run_report.py --server-url http://192.168.1.20:5000 --json report.json

The JSON output is the serialized report (Pydantic models).
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
from pathlib import Path

from shift_engine.client import load_schedule
from shift_engine.config import load_settings
from shift_engine.export import write_csv, write_json
from shift_engine.models import ScheduleReport
from shift_engine.next_shift import time_until
from shift_engine.pipeline import build_report


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Normalize shifts from multiple schedules and report pay.")
    p.add_argument("--payload", type=str, default="combined_schedule.json", help="Fallback payload JSON file.")
    p.add_argument("--cache", type=str, default="~/.shift_engine/schedule_cache.json", help="Cached payload path.")
    p.add_argument("--settings", type=str, default="~/.shift_engine/settings.json", help="Settings JSON path.")
    p.add_argument("--server-url", type=str, default=None, help="Schedule server URL (overrides settings).")
    p.add_argument("--csv", type=str, default=None, help="Write the shift list as CSV to this path.")
    p.add_argument("--json", type=str, default=None, help="Write the full report as JSON to this path.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args()


def print_report(report: ScheduleReport, now: dt.datetime) -> None:
    summary = report.summary
    if not report.shifts:
        print("No shifts found! Enjoy your time off.")
        return

    fmt = "%b %d"
    print(f"{summary.first_date.strftime(fmt)} - {summary.last_date.strftime(fmt)}")
    print(f"{summary.paid_hours:.1f}h Paid, ~${summary.gross_pay:.2f} gross, ~${summary.net_pay:.2f} take-home")
    print()

    for day in report.daily:
        print(f"{day.date:%a %Y-%m-%d}  {day.paid_hours:.2f}h  ~${day.net_pay:.2f}")
        for s in (x for x in report.shifts if x.date == day.date):
            badge = "  Overlap!" if s.has_overlap else ""
            print(f"    [{s.source}] {s.job}: {s.start} - {s.end} ({s.paid_hours:.2f}h paid){badge}")
    print()

    for week in report.weekly:
        print(f"Week {week.week} Total: {week.paid_hours:.2f}h Paid, ~${week.net_pay:.2f} Take-Home")
    print()

    period = report.period
    print(f"Next Paycheck Estimate (Week {period.last_week} & {period.current_week})")
    print(f"    Gross Pay: ~${period.gross_pay:.2f}")
    print(f"    Take-Home Pay: ~${period.net_pay:.2f}")

    if report.next_shift is not None:
        hours, minutes = time_until(report.next_shift, now)
        print()
        print(f"Next shift ({report.next_shift.job}) starts in {hours}h {minutes}m.")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_settings(args.settings)
    server_url = args.server_url if args.server_url is not None else config.server_url

    payload = load_schedule(server_url=server_url, cache_path=args.cache, fallback_path=args.payload)
    if payload is None:
        print("No schedule found. Refresh or check settings.")
        return

    now = dt.datetime.now()
    report = build_report(payload, config, now)
    print_report(report, now)

    if args.csv:
        out_path = write_csv(report.shifts, args.csv)
        print(f"Wrote {len(report.shifts)} shifts to: {out_path}")
    if args.json:
        out_path = write_json(report, Path(args.json))
        print(f"Wrote report to: {out_path}")


if __name__ == "__main__":
    main()
