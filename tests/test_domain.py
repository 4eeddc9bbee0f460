import dataclasses
from datetime import date

import pytest

from student_records.domain import StudentRecord


def test_report_line_uses_display_date_format(ann):
    assert ann.report_line() == (
        "Name: Ann, Student ID: 1, Email: ann@x.com, Date of Birth: 01/01/2000"
    )
    assert str(ann) == ann.report_line()


def test_formatted_date_is_zero_padded():
    r = StudentRecord("Bo", 2, "bo@x.com", date(1995, 3, 7))
    assert r.formatiertes_geburtsdatum() == "07/03/1995"


def test_record_is_immutable(ann):
    with pytest.raises(dataclasses.FrozenInstanceError):
        ann.name = "Other"  # type: ignore[misc]
