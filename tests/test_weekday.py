"""Tests for weekday ordinals and name parsing."""

from datetime import date

import pytest

from timetype.errors import InvalidWeekdayError
from timetype.weekday import WEEKDAY_NAMES, Weekday, parse_weekday


class TestParseWeekday:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Sunday", 0),
            ("Monday", 1),
            ("Tuesday", 2),
            ("Wednesday", 3),
            ("Thursday", 4),
            ("Friday", 5),
            ("Saturday", 6),
        ],
    )
    def test_canonical_names(self, name: str, expected: int) -> None:
        assert parse_weekday(name) == expected
        assert parse_weekday(name) is Weekday(expected)

    @pytest.mark.parametrize(
        "name",
        ["Workday", "sunday", "SUNDAY", "Sun", " Sunday", "Sunday ", ""],
    )
    def test_rejects_everything_else(self, name: str) -> None:
        with pytest.raises(InvalidWeekdayError) as exc_info:
            parse_weekday(name)
        assert str(exc_info.value) == "timetype: invalid weekday"


class TestWeekday:
    def test_str_is_canonical_name(self) -> None:
        assert str(Weekday.FRIDAY) == "Friday"

    def test_names_cover_all_days(self) -> None:
        assert set(WEEKDAY_NAMES.values()) == set(Weekday)
        assert len(WEEKDAY_NAMES) == 7

    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2024, 1, 7), Weekday.SUNDAY),
            (date(2024, 1, 8), Weekday.MONDAY),
            (date(2024, 1, 13), Weekday.SATURDAY),
        ],
    )
    def test_of_date(self, day: date, expected: Weekday) -> None:
        assert Weekday.of(day) is expected
