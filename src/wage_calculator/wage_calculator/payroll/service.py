from __future__ import annotations

from typing import Iterable

from ..timesheets.parser import TimesheetParser
from .calculator import SalaryConsumer
from .factory import SalaryCalculatorFactory
from .model import MonthlySalary


class PayrollService:
    """Reads timesheet lines and produces monthly salaries."""

    def __init__(self, calculators: SalaryCalculatorFactory, parser: TimesheetParser):
        self._calculators = calculators
        self._parser = parser

    def process(self, lines: Iterable[str], consumer: SalaryConsumer) -> None:
        with self._calculators.create(consumer) as calculator:
            self._parser.parse(lines, calculator.accept)

    def calculate(self, lines: Iterable[str]) -> list[MonthlySalary]:
        salaries: list[MonthlySalary] = []
        self.process(lines, salaries.append)
        return salaries


def group_by_month(salaries: Iterable[MonthlySalary]) -> list[dict]:
    """Shape salaries, already in pipeline order, as one entry per month."""
    months: list[dict] = []
    current = None

    for s in salaries:
        if current is None or current["_month"] != s.month:
            current = {"_month": s.month, "year": s.month.year, "month": s.month.month, "people": []}
            months.append(current)
        current["people"].append({"id": s.person_id, "name": s.person_name, "salary": s.amount()})

    for m in months:
        del m["_month"]
    return months
