from datetime import date, time

import pytz

from src.wage_calculator.wage_calculator.shifts.intervals import LocalInterval
from src.wage_calculator.wage_calculator.shifts.model import ShiftRecord, WorkShift

HELSINKI = pytz.timezone("Europe/Helsinki")


def _shift(begin: time, end: time, *, day=date(2000, 1, 1), person_id="1", name="John Doe") -> WorkShift:
    return WorkShift(ShiftRecord(person_id, name, day, begin, end), HELSINKI)


def test_shift_past_midnight_ends_next_day():
    shift = _shift(time(22), time(2))

    assert shift.crosses_midnight
    assert shift.interval.end.date() == date(2000, 1, 2)
    assert shift.overlap_minutes(LocalInterval(time(0), time(0))) == 4 * 60


def test_shift_with_equal_begin_and_end_is_empty():
    shift = _shift(time(9), time(9))

    assert not shift.crosses_midnight
    assert shift.overlap_minutes(LocalInterval(time(0), time(0))) == 0


def test_minutes_after_midnight_use_next_dates_periods_not_only_own_date():
    shift = _shift(time(22), time(2))

    assert shift.overlap_minutes(LocalInterval(time(0), time(6))) == 2 * 60
    assert shift.overlap_minutes(LocalInterval(time(6), time(18))) == 0
    assert shift.overlap_minutes(LocalInterval(time(18), time(0))) == 2 * 60


def test_shift_ending_at_midnight():
    shift = _shift(time(18), time(0))

    assert shift.overlap_minutes(LocalInterval(time(18), time(0))) == 6 * 60
    assert shift.overlap_minutes(LocalInterval(time(0), time(6))) == 0


def test_interval_is_computed_once():
    shift = _shift(time(8), time(16))

    assert shift.interval is shift.interval


def test_month_is_first_day_of_month():
    assert _shift(time(8), time(16), day=date(2014, 3, 17)).month == date(2014, 3, 1)


def test_sort_key_orders_by_year_then_month():
    # year + month would give 2003 for both and fall back to the name
    march_2000 = _shift(time(8), time(9), day=date(2000, 3, 1), person_id="1", name="Alice")
    april_1999 = _shift(time(8), time(9), day=date(1999, 4, 1), person_id="2", name="Bob")

    ordered = sorted([march_2000, april_1999], key=WorkShift.sort_key)

    assert [s.person_name for s in ordered] == ["Bob", "Alice"]


def test_sort_key_orders_by_name_id_date_and_start():
    shifts = [
        _shift(time(14), time(15), day=date(2000, 1, 2), person_id="2", name="Bob"),
        _shift(time(12), time(13), day=date(2000, 1, 2), person_id="2", name="Bob"),
        _shift(time(12), time(13), day=date(2000, 1, 1), person_id="2", name="Bob"),
        _shift(time(12), time(13), day=date(2000, 1, 5), person_id="3", name="Alice"),
        _shift(time(12), time(13), day=date(2000, 1, 5), person_id="1", name="Alice"),
    ]

    ordered = sorted(shifts, key=WorkShift.sort_key)

    assert [(s.person_id, s.date.day, s.record.begin.hour) for s in ordered] == [
        ("1", 5, 12),
        ("3", 5, 12),
        ("2", 1, 12),
        ("2", 2, 12),
        ("2", 2, 14),
    ]
