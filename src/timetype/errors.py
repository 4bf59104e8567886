"""Sentinel errors for timetype values.

Each error class signals that a value had the wrong *shape* for the target
type (e.g. a JSON number where a clock string was expected).  Malformed
content of the right shape is reported by the underlying parser instead:
``json.JSONDecodeError`` for bad JSON, ``ValueError`` for bad clock or
duration text.  The sentinels intentionally do not derive from
``ValueError`` so the two classes of failure never collide.
"""

from __future__ import annotations

from typing import ClassVar


class TimetypeError(Exception):
    """Base class for all timetype sentinel errors."""

    message: ClassVar[str] = "timetype: invalid value"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidClockError(TimetypeError):
    """Value cannot be interpreted as a clock."""

    message = "timetype: invalid clock"


class InvalidDurationError(TimetypeError):
    """Value cannot be interpreted as a duration."""

    message = "timetype: invalid duration"


class InvalidWeekdayError(TimetypeError):
    """Name is not one of the seven canonical weekday names."""

    message = "timetype: invalid weekday"
