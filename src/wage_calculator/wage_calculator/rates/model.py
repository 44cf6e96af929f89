from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import time_of_day
from ..shifts.intervals import LocalInterval


@dataclass(frozen=True)
class RegularRate:
    """Configuration entry: an extra hourly rate starting at a minute of the day.

    The rate applies until the next entry's start minute.
    """

    from_minute: int
    rate_by_100: int

    @property
    def begin(self) -> time:
        return time_of_day(self.from_minute)


@dataclass(frozen=True)
class RegularRatePeriod:
    """Domain entity: an hourly rate (hundredths) and the daily interval it covers."""

    rate_by_100: int
    interval: LocalInterval

    @classmethod
    def of(cls, rate_by_100: int, begin: time, end: time) -> "RegularRatePeriod":
        return cls(rate_by_100=rate_by_100, interval=LocalInterval(begin, end))


@dataclass(frozen=True)
class OvertimeTier:
    """Domain entity: bonus percent of the base rate after some minutes of work in a day."""

    threshold_minutes: int
    percent: int

    @classmethod
    def after(cls, hours: int, minutes: int = 0, *, percent: int) -> "OvertimeTier":
        return cls(threshold_minutes=hours * 60 + minutes, percent=percent)
