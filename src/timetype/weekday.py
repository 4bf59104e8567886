"""Weekday ordinals and exact-match name parsing (Sunday=0 .. Saturday=6)."""

from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer
from pydantic_core import PydanticCustomError

from timetype.errors import InvalidWeekdayError


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def of(cls, day: date) -> Weekday:
        """Weekday of *day* (``date.weekday()`` counts from Monday)."""
        return cls((day.weekday() + 1) % 7)


WEEKDAY_NAMES: dict[str, Weekday] = {str(day): day for day in Weekday}


def parse_weekday(name: str) -> Weekday:
    """Look up a capitalized English weekday name.

    Only the exact names ``"Sunday"`` .. ``"Saturday"`` are accepted: no
    abbreviations, no case folding.

    Examples:
        >>> parse_weekday("Monday")
        <Weekday.MONDAY: 1>

    Raises:
        InvalidWeekdayError: If *name* is not one of the seven names.
    """
    weekday = WEEKDAY_NAMES.get(name)
    if weekday is None:
        raise InvalidWeekdayError
    return weekday


def _validate_name(value: Any) -> Any:
    if isinstance(value, Weekday):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("invalid_weekday", InvalidWeekdayError.message)
    try:
        return parse_weekday(value)
    except InvalidWeekdayError as exc:
        raise PydanticCustomError("invalid_weekday", str(exc)) from exc


WeekdayName = Annotated[
    Weekday,
    BeforeValidator(_validate_name),
    PlainSerializer(str, return_type=str, when_used="json"),
]
"""Pydantic field type reading and writing weekdays by name."""
