"""Clock: a wall-clock time of day with a location.

A :class:`Clock` stores ``(hour, minute, second, location)`` and nothing
else; there is no calendar date behind it.  Its only text form is
``HH:MM:SS`` (24-hour, zero padded), used both for JSON and for database
parameters.  The location is *not* part of the text form, so decoding
always yields a UTC clock.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import UTC, datetime, time, tzinfo
from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError, core_schema

from timetype.errors import InvalidClockError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

logger = logging.getLogger(__name__)

# Fractional seconds are accepted and dropped.
CLOCK_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2}):([0-9]{2})(?:[.,][0-9]+)?")

_SECONDS_PER_DAY = 24 * 60 * 60


class Clock:
    """Time of day in a given location.

    Components are not range-checked: they are rolled over the way
    date-time arithmetic would, so ``Clock(25, 0, 0)`` is ``01:00:00`` and
    ``Clock(0, 0, -1)`` is ``23:59:59``.  Instances are immutable.
    """

    __slots__ = ("_hour", "_minute", "_second", "_location")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        location: tzinfo = UTC,
    ) -> None:
        total = (hour * 3600 + minute * 60 + second) % _SECONDS_PER_DAY
        self._hour, rest = divmod(total, 3600)
        self._minute, self._second = divmod(rest, 60)
        self._location = location

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def location(self) -> tzinfo:
        return self._location

    def _key(self) -> tuple[int, int, int, tzinfo]:
        return (self._hour, self._minute, self._second, self._location)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clock):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @classmethod
    def utc(cls, hour: int, minute: int, second: int) -> Clock:
        """Build a clock in UTC."""
        return cls(hour, minute, second, UTC)

    @classmethod
    def from_datetime(cls, value: datetime | time) -> Clock:
        """Take the time of day and tzinfo of *value*; naive values become UTC."""
        return cls(value.hour, value.minute, value.second, value.tzinfo or UTC)

    @classmethod
    def parse(cls, text: str) -> Clock:
        """Parse strict ``HH:MM:SS`` text into a UTC clock.

        The hour may have one or two digits; minutes and seconds need
        exactly two.  A trailing fraction of a second (``.5`` or ``,5``) is
        accepted and discarded.

        Raises:
            ValueError: If *text* is not a valid ``HH:MM:SS`` time.
        """
        match = CLOCK_PATTERN.fullmatch(text)
        if match is None:
            msg = f"Invalid clock {text!r}: expected HH:MM:SS"
            raise ValueError(msg)

        hour, minute, second = (int(group) for group in match.groups())
        if hour > 23 or minute > 59 or second > 59:
            msg = f"Invalid clock {text!r}: field out of range"
            raise ValueError(msg)
        return cls(hour, minute, second, UTC)

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> Clock:
        """Decode a JSON string literal such as ``"19:24:00"``.

        Raises:
            json.JSONDecodeError: If *data* is not valid JSON.
            InvalidClockError: If the JSON value is not a string.
            ValueError: If the string is not valid ``HH:MM:SS``.
        """
        value = json.loads(data)
        if not isinstance(value, str):
            raise InvalidClockError
        return cls.parse(value)

    @classmethod
    def scan(cls, value: Any) -> Clock:
        """Convert a value read from a database driver into a clock.

        ``None`` gives the zero clock; native ``datetime``/``time`` values
        keep their location; text and bytes are decoded as JSON.

        Raises:
            InvalidClockError: If *value* has an unsupported type.
        """
        match value:
            case None:
                return cls()
            case Clock():
                return value
            case datetime() | time():
                return cls.from_datetime(value)
            case str() | bytes() | bytearray():
                return cls.from_json(value)
            case memoryview():
                return cls.from_json(value.tobytes())
            case _:
                logger.debug("Rejected clock source of type %s", type(value).__name__)
                raise InvalidClockError

    def isoformat(self) -> str:
        """Return ``HH:MM:SS``, ignoring the location."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second, tzinfo=self.location)

    def to_json(self) -> bytes:
        """Encode as a JSON string literal, e.g. ``b'"19:24:00"'``."""
        return json.dumps(self.isoformat()).encode("utf-8")

    def to_db(self) -> bytes:
        """Database parameter form; identical to :meth:`to_json`."""
        return self.to_json()

    def __str__(self) -> str:
        return f"{self.isoformat()} {self.location}"

    def __repr__(self) -> str:
        return f"Clock({self.hour}, {self.minute}, {self.second}, {self.location})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    def _serialize(self, info: core_schema.SerializationInfo) -> Clock | str:
        if info.mode_is_json():
            return self.isoformat()
        return self

    @classmethod
    def _validate(cls, value: Any) -> Clock:
        match value:
            case Clock():
                return value
            case datetime() | time():
                return cls.from_datetime(value)
            case str():
                return cls.parse(value)
            case _:
                raise PydanticCustomError("invalid_clock", InvalidClockError.message)
