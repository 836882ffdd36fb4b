import datetime as dt

from shift_engine.next_shift import find_next_shift, time_until


DAY = dt.date(2025, 10, 14)


def test_returns_first_shift_starting_after_now(make_shift):
    shifts = [
        make_shift(DAY, "9:00AM", "1:00PM"),
        make_shift(DAY, "5:00PM", "9:00PM", source="canes"),
        make_shift(DAY + dt.timedelta(days=1), "9:00AM", "1:00PM"),
    ]
    assert find_next_shift(shifts, dt.datetime(2025, 10, 14, 12, 0)) is shifts[1]


def test_start_equal_to_now_is_not_next(make_shift):
    shifts = [make_shift(DAY, "9:00AM", "1:00PM"), make_shift(DAY, "5:00PM", "9:00PM")]
    assert find_next_shift(shifts, dt.datetime(2025, 10, 14, 9, 0)) is shifts[1]


def test_none_when_everything_has_started(make_shift):
    shifts = [make_shift(DAY, "9:00AM", "1:00PM"), make_shift(DAY, "5:00PM", "9:00PM")]
    assert find_next_shift(shifts, dt.datetime(2025, 10, 14, 18, 0)) is None
    assert find_next_shift([], dt.datetime(2025, 10, 14, 18, 0)) is None


def test_unparseable_starts_are_skipped(make_shift):
    shifts = [make_shift(DAY, "N/A", "N/A", source="canes")]
    assert find_next_shift(shifts, dt.datetime(2025, 10, 1)) is None


def test_time_until(make_shift):
    shift = make_shift(DAY, "5:00PM", "9:00PM")
    assert time_until(shift, dt.datetime(2025, 10, 14, 14, 20)) == (2, 40)
    assert time_until(make_shift(DAY, "N/A", "N/A"), dt.datetime(2025, 10, 14)) is None
