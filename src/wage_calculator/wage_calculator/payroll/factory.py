from __future__ import annotations

from dataclasses import dataclass

from ..rates.schedule import WageSettings
from .calculator import SalaryCalculator, SalaryConsumer


@dataclass(frozen=True)
class SalaryCalculatorFactory:
    """Creates independent calculators sharing one validated configuration."""

    settings: WageSettings

    def create(self, consumer: SalaryConsumer) -> SalaryCalculator:
        return SalaryCalculator(self.settings, consumer)
