"""
Unit tests for the ISO date helpers.
"""

from datetime import date

import pytest

from lens_tracker.domain import InvalidDateFormatError, add_days, format_iso_date, parse_iso_date, today_in


class TestParse:
    def test_parses_components_as_local_date(self):
        assert parse_iso_date("2024-01-01") == date(2024, 1, 1)

    @pytest.mark.parametrize(
        "value",
        ["not-a-date", "2024-01", "2024-01-01-01", "2024/01/01", "", "2024-13-40", "2023-02-29", "2024-00-10"],
    )
    def test_rejects_malformed_or_impossible_dates(self, value):
        with pytest.raises(InvalidDateFormatError):
            parse_iso_date(value)

    def test_invalid_format_is_also_a_value_error(self):
        with pytest.raises(ValueError):
            parse_iso_date("abc")

    @pytest.mark.parametrize("value", ["2024-01-01", "2024-02-29", "1999-12-31", "2030-07-04"])
    def test_round_trip(self, value):
        assert format_iso_date(parse_iso_date(value)) == value


class TestAddDays:
    def test_rolls_over_month_in_leap_year(self):
        assert add_days(parse_iso_date("2024-02-20"), 14) == parse_iso_date("2024-03-05")

    def test_rolls_over_month_in_common_year(self):
        assert add_days(parse_iso_date("2023-02-20"), 14) == parse_iso_date("2023-03-06")

    def test_rolls_over_year(self):
        assert add_days(parse_iso_date("2024-12-25"), 14) == parse_iso_date("2025-01-08")

    def test_is_additive(self):
        start = parse_iso_date("2024-01-30")
        stepped = start
        for _ in range(14):
            stepped = add_days(stepped, 1)
        assert stepped == add_days(start, 14)
        assert add_days(add_days(start, 5), 9) == add_days(start, 14)

    def test_zero_days_is_identity(self):
        start = parse_iso_date("2024-06-15")
        assert add_days(start, 0) == start


class TestFormat:
    def test_zero_pads(self):
        assert format_iso_date(date(2024, 3, 5)) == "2024-03-05"
        assert format_iso_date(date(5, 1, 2)) == "0005-01-02"


class TestToday:
    def test_returns_a_date(self):
        assert isinstance(today_in("Asia/Tokyo"), date)

    def test_unknown_zone_falls_back_to_utc(self):
        assert today_in("Not/AZone") == today_in("UTC")
