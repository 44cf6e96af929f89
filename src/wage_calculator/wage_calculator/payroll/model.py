from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.money import format_amount
from ..rates.model import RegularRatePeriod
from ..shifts.model import WorkShift


@dataclass(frozen=True)
class ShiftSegment:
    """Minutes worked in one regular rate period during one day."""

    period: RegularRatePeriod
    minutes: int

    @property
    def rate_by_100(self) -> int:
        return self.period.rate_by_100


@dataclass(frozen=True)
class MonthlySalary:
    """Output: the salary of one person for one month, in hundredths."""

    person_id: str
    person_name: str
    month: date
    amount_by_100: int

    def amount(self) -> str:
        return format_amount(self.amount_by_100)


class PersonMonth:
    """Running salary total of the person and month being processed."""

    def __init__(self, shift: WorkShift):
        self.person_id = shift.person_id
        self.person_name = shift.person_name
        self.month = shift.month
        self.amount_by_100 = 0

    def matches(self, shift: WorkShift) -> bool:
        return self.person_id == shift.person_id and self.month == shift.month

    def add(self, amount_by_100: int) -> None:
        self.amount_by_100 += amount_by_100

    def salary(self) -> MonthlySalary:
        return MonthlySalary(
            person_id=self.person_id,
            person_name=self.person_name,
            month=self.month,
            amount_by_100=self.amount_by_100,
        )
