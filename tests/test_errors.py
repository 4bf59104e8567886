"""Tests for the sentinel error hierarchy."""

import pytest

from timetype.errors import (
    InvalidClockError,
    InvalidDurationError,
    InvalidWeekdayError,
    TimetypeError,
)

SENTINELS = [
    (InvalidClockError, "timetype: invalid clock"),
    (InvalidDurationError, "timetype: invalid duration"),
    (InvalidWeekdayError, "timetype: invalid weekday"),
]


@pytest.mark.parametrize(
    "error_cls,message",
    SENTINELS,
    ids=[cls.__name__ for cls, _ in SENTINELS],
)
def test_default_message(error_cls: type[TimetypeError], message: str) -> None:
    assert str(error_cls()) == message
    assert issubclass(error_cls, TimetypeError)


@pytest.mark.parametrize("error_cls", [cls for cls, _ in SENTINELS])
def test_not_a_value_error(error_cls: type[TimetypeError]) -> None:
    """Sentinels stay distinguishable from parser ValueErrors."""
    assert not issubclass(error_cls, ValueError)


def test_sentinels_are_distinct() -> None:
    classes = [cls for cls, _ in SENTINELS]
    for cls in classes:
        others = [other for other in classes if other is not cls]
        assert not any(issubclass(cls, other) for other in others)


def test_custom_message() -> None:
    assert str(InvalidClockError("clock column is corrupt")) == "clock column is corrupt"
