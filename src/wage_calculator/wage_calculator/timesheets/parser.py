from __future__ import annotations

import csv
import logging
from typing import Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_shift_date, parse_shift_time
from ..common.validators import require_non_empty
from ..core.enums import TimesheetField
from ..core.exceptions import ValidationError
from ..shifts.model import ShiftRecord

logger = logging.getLogger(__name__)

ShiftConsumer = Callable[[ShiftRecord], None]


class TimesheetParser:
    """Turns timesheet CSV lines into shift records.

    The first line is the header. Its names are matched, ignoring case,
    against the configured header text of each field; every field must appear
    exactly once. Dates are day.month.year, times hour:minute.
    """

    def __init__(self, fields: Mapping[str, str]):
        self._fields: dict[str, TimesheetField] = {}
        for key, header in fields.items():
            try:
                field = TimesheetField(key.lower())
            except ValueError:
                raise ValidationError(f"Unknown timesheet field: {key}") from None
            self._fields[header.strip().upper()] = field

    def parse(self, lines: Iterable[str], consumer: ShiftConsumer) -> int:
        """Send every shift found in lines to consumer; returns the shift count."""
        columns: Optional[dict[TimesheetField, int]] = None
        count = 0

        for number, row in enumerate(csv.reader(lines), start=1):
            if not row or not any(value.strip() for value in row):
                continue
            if columns is None:
                columns = self._columns(row)
                continue

            consumer(self._record(row, columns, number))
            count += 1

        return count

    def records(self, lines: Iterable[str]) -> list[ShiftRecord]:
        out: list[ShiftRecord] = []
        self.parse(lines, out.append)
        return out

    def _columns(self, names: list[str]) -> dict[TimesheetField, int]:
        expected = list(TimesheetField)
        if len(names) != len(expected):
            raise ValidationError(
                f"Unexpected CSV field count: {len(names)} (expecting {len(expected)}: "
                f"{', '.join(f.value for f in expected)})"
            )

        names = [name.lstrip("\ufeff") for name in names]
        columns: dict[TimesheetField, int] = {}
        for index, name in enumerate(names):
            field = self._fields.get(name.strip().upper())
            if field is None:
                logger.warning("Unrecognised CSV header", extra={"header": name, "action": "csv_rejected"})
                raise ValidationError(f"CSV header '{name.strip()}' not recognized")
            if field in columns:
                raise ValidationError(f"CSV header '{name.strip()}' encountered twice")
            columns[field] = index
        return columns

    def _record(self, row: list[str], columns: dict[TimesheetField, int], number: int) -> ShiftRecord:
        if len(row) != len(columns):
            raise ValidationError(f"Line {number}: expected {len(columns)} values, found {len(row)}")

        def value(field: TimesheetField) -> str:
            return require_non_empty(row[columns[field]], f"Line {number}: {field.value}")

        try:
            return ShiftRecord(
                person_id=value(TimesheetField.ID),
                person_name=value(TimesheetField.NAME),
                date=parse_shift_date(value(TimesheetField.DATE)),
                begin=parse_shift_time(value(TimesheetField.START)),
                end=parse_shift_time(value(TimesheetField.STOP)),
            )
        except ValueError as e:
            raise ValidationError(f"Line {number}: {e}") from None
