from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

import pytz

from ..common.datetime_utils import localize, next_day


@dataclass(frozen=True)
class ZonedInterval:
    """A span between two absolute instants, each carrying its zone offset."""

    begin: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return _whole_minutes(self.end.astimezone(pytz.utc) - self.begin.astimezone(pytz.utc))

    def overlap(self, other: "ZonedInterval") -> timedelta:
        """DST-aware length of the overlap, truncated to whole minutes.

        Symmetric: a.overlap(b) == b.overlap(a). Disjoint intervals give zero.
        """
        begin = max(self.begin.astimezone(pytz.utc), other.begin.astimezone(pytz.utc))
        end = min(self.end.astimezone(pytz.utc), other.end.astimezone(pytz.utc))
        if begin >= end:
            return timedelta(0)
        return _whole_minutes(end - begin)


@dataclass(frozen=True)
class LocalInterval:
    """A wall-clock [begin, end) pair without a date.

    An end that is not after the begin wraps to the following day, so
    LocalInterval(time(0), time(0)) covers a whole day.
    """

    begin: time
    end: time

    @property
    def wraps(self) -> bool:
        return not self.end > self.begin

    def locate(self, day: date, time_zone: pytz.BaseTzInfo) -> ZonedInterval:
        end_day = next_day(day) if self.wraps else day
        return ZonedInterval(begin=localize(time_zone, day, self.begin), end=localize(time_zone, end_day, self.end))

    def overlap(self, other: "LocalInterval", day: date, time_zone: pytz.BaseTzInfo) -> timedelta:
        return self.locate(day, time_zone).overlap(other.locate(day, time_zone))


def _whole_minutes(span: timedelta) -> timedelta:
    return timedelta(minutes=int(span.total_seconds() // 60))
