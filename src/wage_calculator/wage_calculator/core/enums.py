from __future__ import annotations

from enum import Enum


class CalculatorState(str, Enum):
    """Lifecycle of a salary calculator."""

    OPEN = "OPEN"
    DAY_OPEN = "DAY_OPEN"
    CLOSED = "CLOSED"


class TimesheetField(str, Enum):
    """Logical fields of a timesheet CSV line."""

    ID = "id"
    NAME = "name"
    DATE = "date"
    START = "start"
    STOP = "stop"
