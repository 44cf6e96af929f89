from __future__ import annotations

import argparse
import importlib
import logging.config
import sys
from datetime import date
from typing import Optional, Sequence, TextIO

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .core.exceptions import DomainError
from .payroll.model import MonthlySalary
from .timesheets.reader import open_timesheet

NAME = "Monthly salary calculator"

EPILOG = """\
The first line of the CSV is its header; subsequent lines have the format:

  name (text), ID (text), day (date), start (time), end (time)

Dates are formatted as day.month.year, times as hour:minute.
"""


class SalaryPrinter:
    """Prints salaries under a header line for each month."""

    def __init__(self, out: TextIO):
        self._out = out
        self._month: Optional[date] = None

    def __call__(self, salary: MonthlySalary) -> None:
        if salary.month != self._month:
            self._month = salary.month
            print(f"Salaries for {salary.month.month}/{salary.month.year}:", file=self._out)
        print(f" {salary.person_id}, {salary.person_name}, {salary.amount()}", file=self._out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wage-calculator",
        description=NAME,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("csv", metavar="CSV", help="timesheet CSV file name or http(s) URL")
    parser.add_argument("encoding", nargs="?", default=None, help="character encoding of the CSV (default: UTF-8)")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, out: TextIO = sys.stdout, err: TextIO = sys.stderr) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv(override=False)

    try:
        settings = importlib.import_module(get_settings_module())
        logging_settings = getattr(settings, "LOGGING", None)
        if logging_settings:
            logging.config.dictConfig(logging_settings)

        container = build_container(settings=settings)
        with open_timesheet(args.csv, args.encoding) as lines:
            container.payroll_service.process(lines, SalaryPrinter(out))
    except DomainError as e:
        print(f"{NAME} error: {e}", file=err)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
