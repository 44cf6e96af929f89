from datetime import date, time

import pytest

from src.wage_calculator.wage_calculator.core.constants import DEFAULT_CSV_FIELDS
from src.wage_calculator.wage_calculator.core.exceptions import ValidationError
from src.wage_calculator.wage_calculator.shifts.model import ShiftRecord
from src.wage_calculator.wage_calculator.timesheets.parser import TimesheetParser


def _parser() -> TimesheetParser:
    return TimesheetParser(DEFAULT_CSV_FIELDS)


def test_parse_shift_lines():
    lines = [
        "Person Name,Person ID,Date,Start,End",
        "Janet Lind,1,3.3.2014,3:00,9:30",
        "Scott Salo,2,14.12.2014,22:15,0:0",
    ]

    assert _parser().records(lines) == [
        ShiftRecord("1", "Janet Lind", date(2014, 3, 3), time(3, 0), time(9, 30)),
        ShiftRecord("2", "Scott Salo", date(2014, 12, 14), time(22, 15), time(0, 0)),
    ]


def test_headers_ignore_case_and_order():
    lines = ["end,START,date,person id,PERSON NAME", "9:30,3:00,3.3.2014,1,Janet Lind"]

    assert _parser().records(lines) == [ShiftRecord("1", "Janet Lind", date(2014, 3, 3), time(3), time(9, 30))]


def test_blank_lines_and_byte_order_mark_are_skipped():
    lines = ["", "\ufeffPerson Name,Person ID,Date,Start,End", " , , , , ", "Janet Lind,1,3.3.2014,3:00,9:30", ""]
    received = []

    count = _parser().parse(lines, received.append)

    assert count == 1
    assert received[0].person_name == "Janet Lind"


def test_quoted_values():
    lines = ["Person Name,Person ID,Date,Start,End", '"Lind, Janet",1,3.3.2014,3:00,9:30']

    assert _parser().records(lines)[0].person_name == "Lind, Janet"


def test_header_only_yields_nothing():
    assert _parser().records(["Person Name,Person ID,Date,Start,End"]) == []


def test_wrong_header_field_count():
    with pytest.raises(ValidationError, match="Unexpected CSV field count"):
        _parser().records(["Person Name,Person ID,Date,Start"])


def test_unknown_header():
    with pytest.raises(ValidationError, match="'Shoe Size' not recognized"):
        _parser().records(["Person Name,Person ID,Date,Start,Shoe Size"])


def test_repeated_header():
    with pytest.raises(ValidationError, match="encountered twice"):
        _parser().records(["Person Name,Person ID,Date,Start,start"])


def test_bad_values_report_line_number():
    header = "Person Name,Person ID,Date,Start,End"

    with pytest.raises(ValidationError, match="Line 2"):
        _parser().records([header, "Janet Lind,1,31.2.2014,3:00,9:30"])

    with pytest.raises(ValidationError, match="Line 3"):
        _parser().records([header, "Janet Lind,1,3.3.2014,3:00,9:30", "Janet Lind,1,3.3.2014,25:00,9:30"])

    with pytest.raises(ValidationError, match="Line 2"):
        _parser().records([header, "Janet Lind,1,3.3.2014,3:00"])

    with pytest.raises(ValidationError, match="Line 2"):
        _parser().records([header, " ,1,3.3.2014,3:00,9:30"])


def test_unknown_field_key_in_configuration():
    with pytest.raises(ValidationError):
        TimesheetParser({"shoe": "Shoe Size"})
