"""timetype: time-of-day, duration, and weekday values for JSON and SQL.

The value types depend only on stdlib and pydantic.  SQLAlchemy column
types live in :mod:`timetype.sql`; structlog setup in
:mod:`timetype.config.logging`.
"""

from timetype.clock import Clock
from timetype.duration import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    Duration,
    format_duration,
    parse_duration,
)
from timetype.errors import (
    InvalidClockError,
    InvalidDurationError,
    InvalidWeekdayError,
    TimetypeError,
)
from timetype.weekday import Weekday, WeekdayName, parse_weekday

__all__ = [
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "NANOSECOND",
    "SECOND",
    "Clock",
    "Duration",
    "InvalidClockError",
    "InvalidDurationError",
    "InvalidWeekdayError",
    "TimetypeError",
    "Weekday",
    "WeekdayName",
    "format_duration",
    "parse_duration",
    "parse_weekday",
]
