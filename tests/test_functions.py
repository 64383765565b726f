from __future__ import annotations

from datetime import date, datetime

import pytest

from datepicker_app.functions import format_date, input_kind, is_in_range, normalize_date


@pytest.mark.parametrize("text,expected", [
    ("5.3.2024", date(2024, 3, 5)),
    ("05.03.2024", date(2024, 3, 5)),
    ("5. 3. 2024", date(2024, 3, 5)),
    ("5-3-2024", date(2024, 3, 5)),
    ("5 3 2024", date(2024, 3, 5)),
    ("29.2.2024", date(2024, 2, 29)),
    ("31.12.1999", date(1999, 12, 31)),
])
def test_text_with_year(text, expected):
    value, raw = normalize_date(text)
    assert value == expected
    assert raw == text


@pytest.mark.parametrize("text", ["5.3", "5.3.", "5. 3. ", "5-3"])
def test_year_defaults_to_current_year(text):
    value, raw = normalize_date(text, today=date(2030, 6, 1))
    assert value == date(2030, 3, 5)
    assert raw == text


def test_year_defaults_to_today_without_override():
    value, _ = normalize_date("1.1")
    assert value == date(date.today().year, 1, 1)


@pytest.mark.parametrize("text", ["32.13.2024", "29.2.2023", "0.1.2024", "abc", "5/3/2024", "5.3.24", "2024"])
def test_malformed_text_is_absent_but_raw_kept(text):
    value, raw = normalize_date(text)
    assert value is None
    assert raw == text


def test_iso_text_falls_through_to_strict_coercion():
    assert normalize_date("2024-03-05") == (date(2024, 3, 5), "2024-03-05")


@pytest.mark.parametrize("empty", [None, "", False])
def test_empty_input(empty):
    value, raw = normalize_date(empty)
    assert value is None
    assert raw == empty


def test_structured_date_is_copied_and_raw_derived():
    original = date(2024, 3, 5)
    value, raw = normalize_date(original)
    assert value == original
    assert raw == "5. 3. 2024"


def test_datetime_drops_time_part():
    value, raw = normalize_date(datetime(2024, 12, 1, 23, 59))
    assert type(value) is date
    assert value == date(2024, 12, 1)
    assert raw == "1. 12. 2024"


def test_timestamp():
    # 2024-03-05 12:00:00 UTC
    value, raw = normalize_date(1709640000)
    assert value == date(2024, 3, 5)
    assert raw == "5. 3. 2024"


def test_zero_timestamp_is_epoch_not_empty():
    assert normalize_date(0).value == date(1970, 1, 1)


def test_out_of_range_timestamp_is_absent():
    assert normalize_date(10 ** 20) == (None, None)


@pytest.mark.parametrize("bad", [1.5, True, [1, 2], {"day": 1}, object()])
def test_unsupported_type_raises(bad):
    with pytest.raises(TypeError):
        normalize_date(bad)


def test_input_kind():
    assert input_kind(date(2024, 1, 1)) == 'date'
    assert input_kind(5) == 'timestamp'
    assert input_kind("x") == 'text'
    assert input_kind(None) == 'empty'
    assert input_kind(False) == 'empty'


def test_format_date_is_not_zero_padded():
    assert format_date(date(2024, 3, 5)) == "5. 3. 2024"
    assert format_date(date(987, 10, 15)) == "15. 10. 0987"


def test_is_in_range():
    low, high = date(2020, 1, 1), date(2025, 12, 31)
    assert is_in_range(date(2020, 1, 1), (low, high))
    assert is_in_range(date(2025, 12, 31), (low, high))
    assert not is_in_range(date(2019, 12, 31), (low, high))
    assert is_in_range(date(1900, 1, 1), (None, high))
    assert is_in_range(date(2100, 1, 1), (low, None))
    assert not is_in_range(None, (low, high))
    assert not is_in_range(date(2024, 1, 1), (None, None))


def test_lone_zero_is_empty():
    assert input_kind("0") == 'empty'
    assert normalize_date("0") == (None, "0")
