"""Unit tests for the tolerant raw value readers."""

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from pressdesk.application.services.raw_values import (
    as_list,
    as_mapping,
    first_present,
    to_date,
    to_datetime,
    to_int,
    to_number,
    to_text,
)


class TestToNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0.0),
            (3, 3.0),
            (-1.5, -1.5),
            (Decimal("12.34"), 12.34),
            ("7.25", 7.25),
            (" 8 ", 8.0),
        ],
    )
    def test_readable(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, True, False, "", "n/a", "nan", "inf", float("nan"), float("inf"), [1], {}],
    )
    def test_unreadable(self, value):
        assert to_number(value) is None


class TestToInt:
    def test_rounds(self):
        assert to_int(3.6) == 4
        assert to_int("10.2") == 10

    def test_unreadable(self):
        assert to_int("x") is None


class TestToText:
    def test_strips(self):
        assert to_text("  hello ") == "hello"

    def test_integer_identifier(self):
        assert to_text(42) == "42"

    @pytest.mark.parametrize("value", [None, "", "   ", True, 1.5, {}])
    def test_unreadable(self, value):
        assert to_text(value) is None


class TestToDate:
    def test_iso_date(self):
        assert to_date("2025-06-01") == date(2025, 6, 1)

    def test_iso_datetime_string(self):
        assert to_date("2025-06-01T23:59:00Z") == date(2025, 6, 1)

    def test_date_and_datetime_objects(self):
        assert to_date(date(2025, 6, 1)) == date(2025, 6, 1)
        assert to_date(datetime(2025, 6, 1, 12, 0)) == date(2025, 6, 1)

    @pytest.mark.parametrize("value", [None, "", "June 1st", 20250601])
    def test_unreadable(self, value):
        assert to_date(value) is None


class TestToDatetime:
    def test_naive_string_is_utc(self):
        assert to_datetime("2025-06-01T12:00:00") == datetime(
            2025, 6, 1, 12, 0, tzinfo=UTC
        )

    def test_offset_is_preserved(self):
        parsed = to_datetime("2025-06-01T12:00:00+02:00")

        assert parsed.utcoffset() == timedelta(hours=2)

    def test_aware_datetime_passthrough(self):
        value = datetime(2025, 6, 1, tzinfo=timezone(timedelta(hours=-5)))
        assert to_datetime(value) is value

    @pytest.mark.parametrize("value", [None, "", "yesterday", 1717243200])
    def test_unreadable(self, value):
        assert to_datetime(value) is None


class TestContainers:
    def test_as_mapping(self):
        assert as_mapping({"a": 1}) == {"a": 1}
        assert as_mapping([("a", 1)]) == {}
        assert as_mapping(None) == {}

    def test_as_list(self):
        assert as_list([1, 2]) == [1, 2]
        assert as_list((1, 2)) == [1, 2]
        assert as_list("ab") == []
        assert as_list({"a": 1}) == []

    def test_first_present_skips_none_only(self):
        record = {"a": None, "b": 0, "c": 5}

        assert first_present(record, "a", "b", "c") == 0
        assert first_present(record, "missing", "c") == 5
        assert first_present(record, "missing") is None
