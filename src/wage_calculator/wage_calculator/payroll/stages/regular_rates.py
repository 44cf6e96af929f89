from __future__ import annotations

from typing import Optional

from ...rates.schedule import RateSchedule
from ...shifts.model import WorkShift
from ..model import ShiftSegment
from .base import BatchStage


class RegularRatesStage(BatchStage[WorkShift, ShiftSegment]):
    """Splits a day's shifts over the regular rate periods.

    Keeps one minute counter per period, in the schedule's midnight-anchored
    order. The counters are created on the first shift of a day and dropped on
    flush.
    """

    def __init__(self, schedule: RateSchedule):
        self._periods = schedule.periods
        self._minutes: Optional[list[int]] = None

    def accept(self, item: WorkShift) -> None:
        if self._minutes is None:
            self._minutes = [0] * len(self._periods)
        for i, period in enumerate(self._periods):
            self._minutes[i] += item.overlap_minutes(period.interval)

    def flush(self) -> list[ShiftSegment]:
        if self._minutes is None:
            return []
        minutes, self._minutes = self._minutes, None
        return [
            ShiftSegment(period=period, minutes=count)
            for period, count in zip(self._periods, minutes)
            if count > 0
        ]
