import datetime as dt

import pytest

from shift_engine.config import PayConfig
from shift_engine.normalize import paid_hours_after_break, sort_shifts
from shift_engine.pipeline import build_report, build_shifts


NOW = dt.datetime(2025, 10, 14, 7, 0)


@pytest.fixture()
def payload():
    return {
        "walmart": {
            "payload": {
                "weeks": [
                    {
                        "schedules": [
                            {
                                "shiftStartTime": "2025-10-15T09:00:00",
                                "shiftEndTime": "2025-10-15T17:00:00",
                                "events": [{"jobDescription": "Cashier"}],
                            },
                            {
                                "shiftStartTime": "2025-10-14T09:00:00",
                                "shiftEndTime": "2025-10-14T17:00:00",
                            },
                        ]
                    }
                ]
            }
        },
        "canes": [
            {"day": 14, "duration": "4:00 PM - 10:00 PM", "job": "Fry Cook"},
            {"day": 14, "duration": ""},
            {"day": 13, "duration": "10:00 AM-2:00 PM"},
        ],
    }


def test_end_to_end_single_walmart_shift():
    payload = {
        "walmart": {
            "payload": {
                "weeks": [{"schedules": [{"shiftStartTime": "2025-10-14T09:00:00", "shiftEndTime": "2025-10-14T17:00:00"}]}]
            }
        }
    }
    config = PayConfig(pay_rates={"walmart": 13.87}, take_home_percent=87)
    shifts = build_shifts(payload, config, NOW.date())
    assert len(shifts) == 1
    s = shifts[0]
    assert s.duration_hours == 8.0
    assert s.paid_hours == 7.0
    assert s.gross_pay == pytest.approx(97.09)
    assert s.net_pay == pytest.approx(84.4683)


def test_shifts_sorted_by_date_then_start(payload, config):
    shifts = build_shifts(payload, config, NOW.date())
    assert [(s.date.day, s.start) for s in shifts] == [
        (13, "10:00 AM"),
        (14, "9:00AM"),
        (14, "4:00 PM"),
        (14, "N/A"),
        (15, "9:00AM"),
    ]


def test_overlaps_flagged_across_sources(payload, config):
    shifts = build_shifts(payload, config, NOW.date())
    flagged = [(s.date.day, s.source) for s in shifts if s.has_overlap]
    assert flagged == [(14, "walmart"), (14, "canes")]


def test_config_applies_only_to_the_run_it_was_passed_to(payload):
    config = PayConfig()
    before = build_shifts(payload, config, NOW.date())
    config.pay_rates["walmart"] = 20.0
    after = build_shifts(payload, config, NOW.date())
    assert before[1].gross_pay == pytest.approx(7 * 13.87)
    assert after[1].gross_pay == pytest.approx(7 * 20.0)


def test_report_bundles_totals(payload, config):
    report = build_report(payload, config, NOW)
    assert report.summary.shift_count == 5
    assert report.summary.first_date == dt.date(2025, 10, 13)
    assert report.summary.last_date == dt.date(2025, 10, 15)
    assert report.next_shift == report.shifts[1]
    assert sum(w.paid_hours for w in report.weekly) == pytest.approx(report.summary.paid_hours)
    assert report.period.current_week == 42


def test_aware_now_is_read_in_the_report_time_zone(config):
    plus_ten = dt.timezone(dt.timedelta(hours=10))
    payload = {
        "walmart": {
            "payload": {
                "weeks": [{"schedules": [{"shiftStartTime": "2025-10-14T09:00:00+10:00", "shiftEndTime": "2025-10-14T13:00:00+10:00"}]}]
            }
        },
        "canes": [{"day": 1, "duration": "9:00-13:00"}],
    }

    started = build_report(payload, config, dt.datetime(2025, 10, 14, 9, 30, tzinfo=plus_ten), tz=plus_ten)
    assert started.next_shift is None

    # 20:00 UTC on Oct 31 is already Nov 1 at UTC+10.
    report = build_report(payload, config, dt.datetime(2025, 10, 31, 20, 0, tzinfo=dt.timezone.utc), tz=plus_ten)
    canes = [s for s in report.shifts if s.source == "canes"]
    assert canes[0].date == dt.date(2025, 11, 1)
    assert report.next_shift == canes[0]
    assert report.period.current_week == 44


def test_empty_payload_is_a_valid_empty_report(config):
    report = build_report({}, config, NOW)
    assert report.shifts == []
    assert report.summary.shift_count == 0
    assert report.next_shift is None


def test_paid_hours_never_exceed_duration():
    for hours in (0.0, 4.0, 5.5, 5.51, 8.0, 12.0):
        assert paid_hours_after_break(hours) <= hours


def test_sort_is_stable_for_equal_keys(make_shift):
    day = dt.date(2025, 10, 14)
    a = make_shift(day, "N/A", "N/A")
    b = make_shift(day, "", "")
    c = make_shift(day, "9:00", "10:00")
    assert sort_shifts([a, b, c]) == [c, a, b]
