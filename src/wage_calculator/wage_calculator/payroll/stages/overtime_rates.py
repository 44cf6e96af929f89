from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from ...common.money import round_half_up
from ...core.constants import MINUTES_PER_HOUR
from ...rates.model import OvertimeTier
from ...rates.schedule import RateSchedule
from ..model import ShiftSegment
from .base import BatchStage


@dataclass
class _DayState:
    tiers: Iterator[OvertimeTier]

    # next threshold to watch; None once all tiers are in effect
    tier: Optional[OvertimeTier] = None

    # bonus percent in effect, starting at regular rates
    percent: int = 0

    total_minutes: int = 0

    # amount scaled by 60 (minutes per hour) * 100 (cents)
    amount_by_6000: int = field(default=0)

    @classmethod
    def start(cls, tiers: Sequence[OvertimeTier]) -> "_DayState":
        it = iter(tiers)
        return cls(tiers=it, tier=next(it, None))

    def advance(self) -> None:
        assert self.tier is not None
        self.percent = self.tier.percent
        self.tier = next(self.tiers, None)


class OvertimeRatesStage(BatchStage[ShiftSegment, int]):
    """Prices one day of shift segments, applying overtime tiers.

    Segments must arrive in the schedule's period order so that the day's
    minute count grows monotonically. On flush the day's amount is rounded
    once, half up, to hundredths.
    """

    def __init__(self, schedule: RateSchedule, base_rate_by_100: int):
        self._tiers = schedule.tiers
        self._base_rate = base_rate_by_100
        self._day: Optional[_DayState] = None

    def accept(self, item: ShiftSegment) -> None:
        if self._day is None:
            self._day = _DayState.start(self._tiers)
        day = self._day

        payable = item.minutes
        day.total_minutes += payable

        while payable > 0:
            excess = 0 if day.tier is None else max(0, day.total_minutes - day.tier.threshold_minutes)
            paid = max(0, payable - excess)

            day.amount_by_6000 += paid * self._hourly_rate(item, day.percent)
            payable -= paid

            if excess > 0:
                day.advance()

    def flush(self) -> list[int]:
        if self._day is None:
            return []
        day, self._day = self._day, None
        return [round_half_up(day.amount_by_6000, MINUTES_PER_HOUR)]

    def _hourly_rate(self, segment: ShiftSegment, percent: int) -> int:
        return self._base_rate + segment.rate_by_100 + round_half_up(self._base_rate * percent, 100)
