from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytz

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR


def parse_shift_date(value: str) -> date:
    """Parse a timesheet date written as day.month.year (e.g. 3.3.2014)."""
    return datetime.strptime(value.strip(), "%d.%m.%Y").date()


def parse_shift_time(value: str) -> time:
    """Parse a timesheet time written as hour:minute (e.g. 9:30 or 0:0)."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def parse_clock(value: str) -> int:
    """Parse HH:MM into minutes after midnight."""
    t = parse_shift_time(value)
    return t.hour * MINUTES_PER_HOUR + t.minute


def minute_of_day(value: time) -> int:
    return value.hour * MINUTES_PER_HOUR + value.minute


def time_of_day(minutes: int) -> time:
    minutes %= MINUTES_PER_DAY
    return time(minutes // MINUTES_PER_HOUR, minutes % MINUTES_PER_HOUR)


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def localize(time_zone: pytz.BaseTzInfo, day: date, at: time) -> datetime:
    """Anchor a wall-clock time to a date in a time zone.

    Note: Ambiguous wall times resolve to the later offset; wall times inside a
    spring-forward gap are pushed forward by the length of the gap.
    """
    return time_zone.localize(datetime.combine(day, at), is_dst=False)


def next_day(day: date) -> date:
    return day + timedelta(days=1)
