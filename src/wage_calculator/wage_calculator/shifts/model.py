from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from functools import cached_property

import pytz

from ..common.datetime_utils import first_of_month, localize, next_day
from .intervals import LocalInterval, ZonedInterval


@dataclass(frozen=True)
class ShiftRecord:
    """Domain entity: one work shift as written in a timesheet.

    An end that is before the begin runs past midnight into the next day; an
    end equal to the begin is an empty shift.
    """

    person_id: str
    person_name: str
    date: date
    begin: time
    end: time


class WorkShift:
    """A shift record anchored to the configured time zone.

    The zoned interval is computed on first use and reused for every rate
    period the shift is matched against.
    """

    def __init__(self, record: ShiftRecord, time_zone: pytz.BaseTzInfo):
        self.record = record
        self._time_zone = time_zone

    @property
    def person_id(self) -> str:
        return self.record.person_id

    @property
    def person_name(self) -> str:
        return self.record.person_name

    @property
    def date(self) -> date:
        return self.record.date

    @property
    def month(self) -> date:
        return first_of_month(self.record.date)

    @property
    def crosses_midnight(self) -> bool:
        return self.record.end < self.record.begin

    @cached_property
    def interval(self) -> ZonedInterval:
        r = self.record
        begin = localize(self._time_zone, r.date, r.begin)
        if r.end == r.begin:
            return ZonedInterval(begin=begin, end=begin)
        end_day = next_day(r.date) if self.crosses_midnight else r.date
        return ZonedInterval(begin=begin, end=localize(self._time_zone, end_day, r.end))

    @property
    def start(self) -> datetime:
        return self.interval.begin.astimezone(pytz.utc)

    def overlap_minutes(self, period: LocalInterval) -> int:
        """Minutes of this shift that fall into the given daily period.

        Minutes worked after midnight are matched against the period as it
        recurs on the following date; they still count toward this shift's day.
        """
        minutes = self.interval.overlap(period.locate(self.record.date, self._time_zone))
        # not own-date-only: a 22:00-02:00 shift is paid 4h, not 2h
        if self.crosses_midnight:
            minutes += self.interval.overlap(period.locate(next_day(self.record.date), self._time_zone))
        return int(minutes.total_seconds()) // 60

    def sort_key(self) -> tuple:
        # (year, month) as two fields: an additive year + month key would put
        # 2000-03 and 1999-04 into the same bucket.
        d = self.record.date
        return ((d.year, d.month), self.person_name, self.person_id, d, self.start)

    def __repr__(self) -> str:
        r = self.record
        return f"WorkShift({r.person_id!r}, {r.person_name!r}, {r.date.isoformat()}, {r.begin:%H:%M}-{r.end:%H:%M})"
