from datetime import date

from student_records.parsing import parse_date, parse_int, parse_text


def test_parse_int_ok():
    result = parse_int(" 42 ")
    assert result.ok
    assert result.value == 42


def test_parse_int_failure_does_not_raise():
    result = parse_int("abc")
    assert not result.ok
    assert result.value is None
    assert "abc" in result.error


def test_parse_date_default_format():
    assert parse_date("01/01/2000").value == date(2000, 1, 1)


def test_parse_date_custom_format():
    assert parse_date("2000-01-31", "%Y-%m-%d").value == date(2000, 1, 31)


def test_parse_date_invalid():
    assert not parse_date("31/02/2000").ok
    assert not parse_date("2000-01-01").ok


def test_parse_text():
    assert parse_text("  Ann ").value == "Ann"
    assert not parse_text("   ").ok
