from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..core.enums import CalculatorState
from ..core.exceptions import InvalidStateError
from ..rates.schedule import WageSettings
from ..shifts.model import ShiftRecord, WorkShift
from .model import MonthlySalary, PersonMonth
from .stages.base import MultiStagePipeline
from .stages.overtime_rates import OvertimeRatesStage
from .stages.regular_rates import RegularRatesStage

logger = logging.getLogger(__name__)

SalaryConsumer = Callable[[MonthlySalary], None]


class SalaryCalculator:
    """Computes monthly salaries from a stream of shift records.

    Shifts are collected by accept(); flush() sorts them by month, person and
    start, walks them once and sends one MonthlySalary per person and month to
    the consumer. close() flushes and refuses further input.

    Not thread-safe: one instance serves one calculation.
    """

    def __init__(self, settings: WageSettings, consumer: SalaryConsumer):
        self._settings = settings
        self._consumer = consumer
        self._shifts: list[WorkShift] = []
        self._state = CalculatorState.OPEN

        self._person: Optional[PersonMonth] = None
        self._day: Optional[date] = None

    @property
    def state(self) -> CalculatorState:
        return self._state

    def accept(self, shift: ShiftRecord) -> None:
        self._require_open("accept")
        self._shifts.append(WorkShift(shift, self._settings.time_zone))

    def flush(self) -> None:
        self._require_open("flush")

        shifts = sorted(self._shifts, key=WorkShift.sort_key)
        self._shifts = []
        if not shifts:
            return

        pipeline = self._create_pipeline()
        emitted = 0

        for shift in shifts:
            # a new person or month is always a new day as well
            if self._person is None or not self._person.matches(shift):
                emitted += self._finish_person(pipeline)
                self._person = PersonMonth(shift)
                self._start_day(shift.date)
            elif shift.date != self._day:
                self._finish_day(pipeline)
                self._start_day(shift.date)

            pipeline.accept(shift)

        emitted += self._finish_person(pipeline)
        self._state = CalculatorState.OPEN

        logger.debug(
            "Salary batch processed",
            extra={"shifts": len(shifts), "salaries": emitted, "action": "calculator_flushed"},
        )

    def close(self) -> None:
        if self._state == CalculatorState.CLOSED:
            return
        self.flush()
        self._state = CalculatorState.CLOSED

    def __enter__(self) -> "SalaryCalculator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            # abandoned: salaries already handed out stay valid
            self._shifts = []
            self._state = CalculatorState.CLOSED

    def _create_pipeline(self) -> MultiStagePipeline:
        schedule = self._settings.schedule
        return MultiStagePipeline(
            RegularRatesStage(schedule),
            OvertimeRatesStage(schedule, self._settings.base_rate_by_100),
        )

    def _start_day(self, day: date) -> None:
        self._day = day
        self._state = CalculatorState.DAY_OPEN

    def _finish_day(self, pipeline: MultiStagePipeline) -> None:
        for amount_by_100 in pipeline.flush():
            self._person.add(amount_by_100)
        self._day = None

    def _finish_person(self, pipeline: MultiStagePipeline) -> int:
        if self._person is None:
            return 0

        self._finish_day(pipeline)
        salary = self._person.salary()
        self._person = None

        logger.debug(
            "Salary emitted",
            extra={"person_id": salary.person_id, "month": salary.month.isoformat(), "action": "salary_emitted"},
        )
        self._consumer(salary)
        return 1

    def _require_open(self, operation: str) -> None:
        if self._state == CalculatorState.CLOSED:
            raise InvalidStateError(f"Cannot {operation} shifts: the salary calculator is closed")
