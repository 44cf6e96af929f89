from __future__ import annotations

from dataclasses import dataclass

from .payroll.factory import SalaryCalculatorFactory
from .payroll.service import PayrollService
from .rates.schedule import WageSettings, csv_fields_from_config
from .timesheets.parser import TimesheetParser


@dataclass(frozen=True)
class Container:
    wage_settings: WageSettings

    calculator_factory: SalaryCalculatorFactory
    timesheet_parser: TimesheetParser

    payroll_service: PayrollService


def build_container(*, settings) -> Container:
    """Validate the settings module once and wire the services around it.

    Raises ConfigurationError before anything else is created.
    """
    wage_settings = WageSettings.from_settings(settings)

    calculator_factory = SalaryCalculatorFactory(wage_settings)
    timesheet_parser = TimesheetParser(csv_fields_from_config(getattr(settings, "CSV_FIELDS", None)))
    payroll_service = PayrollService(calculator_factory, timesheet_parser)

    return Container(
        wage_settings=wage_settings,
        calculator_factory=calculator_factory,
        timesheet_parser=timesheet_parser,
        payroll_service=payroll_service,
    )
