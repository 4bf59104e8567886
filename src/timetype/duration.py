"""Duration: a signed count of elapsed nanoseconds.

Text form is the unit-suffixed notation ``72h3m0.5s`` / ``1.5µs`` / ``0s``.
Decoding accepts either that text or a raw numeric nanosecond count, so
producers that store durations numerically and hand-written configuration
files both work.

Numeric inputs with a fractional part are truncated toward zero without
error; this is the only lossy path.
"""

from __future__ import annotations

import functools
import json
import logging
import math
import re
from datetime import timedelta
from typing import TYPE_CHECKING, Any, NoReturn

from pydantic_core import PydanticCustomError, core_schema

from timetype.errors import InvalidDurationError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

logger = logging.getLogger(__name__)

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Magnitudes must fit a signed 64-bit nanosecond count.
_LIMIT = 1 << 63

_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def _fraction(value: int, precision: int) -> tuple[int, str]:
    """Split *value* into a whole part and a trimmed ``.ddd`` suffix."""
    whole, rest = divmod(value, 10**precision)
    digits = f"{rest:0{precision}d}".rstrip("0")
    return whole, f".{digits}" if digits else ""


def format_duration(nanoseconds: int) -> str:
    """Render *nanoseconds* in unit-suffixed form.

    Examples:
        >>> format_duration(0)
        '0s'
        >>> format_duration(3903 * SECOND)
        '1h5m3s'
        >>> format_duration(1500)
        '1.5µs'
        >>> format_duration(-90 * SECOND)
        '-1m30s'
    """
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    magnitude = abs(nanoseconds)

    if magnitude < MICROSECOND:
        return f"{sign}{magnitude}ns"
    if magnitude < MILLISECOND:
        whole, frac = _fraction(magnitude, 3)
        return f"{sign}{whole}{frac}µs"
    if magnitude < SECOND:
        whole, frac = _fraction(magnitude, 6)
        return f"{sign}{whole}{frac}ms"

    seconds, frac = _fraction(magnitude, 9)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{seconds}{frac}s"
    if minutes or hours:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


def parse_duration(text: str) -> Duration:
    """Parse unit-suffixed duration text such as ``"1h5m3s"`` or ``"-1.5ms"``.

    The grammar is an optional sign followed by one or more
    ``<decimal><unit>`` pairs.  A lone ``"0"`` needs no unit.

    Raises:
        ValueError: If *text* does not follow the grammar or overflows a
            signed 64-bit nanosecond count.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return Duration(0)
    if not rest:
        _invalid(text)

    total = 0
    while rest:
        match = _COMPONENT.match(rest)
        # _COMPONENT always matches, possibly empty.
        assert match is not None
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            _invalid(text)
        if not unit:
            msg = f'missing unit in duration "{text}"'
            raise ValueError(msg)
        scale = UNITS.get(unit)
        if scale is None:
            msg = f'unknown unit "{unit}" in duration "{text}"'
            raise ValueError(msg)

        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > _LIMIT:
            _invalid(text)
        rest = rest[match.end() :]

    if negative:
        return Duration(-total)
    if total == _LIMIT:
        _invalid(text)
    return Duration(total)


def _invalid(text: str) -> NoReturn:
    msg = f'invalid duration "{text}"'
    raise ValueError(msg)


def _reject_constant(name: str) -> NoReturn:
    msg = f"Invalid JSON constant {name!r} for duration"
    raise ValueError(msg)


@functools.total_ordering
class Duration:
    """Elapsed time as a signed integer number of nanoseconds. Immutable."""

    __slots__ = ("_nanoseconds",)

    def __init__(self, nanoseconds: int = 0) -> None:
        self._nanoseconds = nanoseconds

    @property
    def nanoseconds(self) -> int:
        return self._nanoseconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds == other._nanoseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds < other._nanoseconds

    def __hash__(self) -> int:
        return hash(self._nanoseconds)

    def __repr__(self) -> str:
        return f"Duration({self._nanoseconds})"

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        seconds = value.days * 86400 + value.seconds
        return cls(seconds * SECOND + value.microseconds * MICROSECOND)

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> Duration:
        """Decode a JSON number of nanoseconds or a JSON duration string.

        Raises:
            json.JSONDecodeError: If *data* is not valid JSON.
            ValueError: If *data* holds ``NaN``/``Infinity``, a number too
                large for a float, or a string that is not duration text.
            InvalidDurationError: If the JSON value is neither a number nor
                a string.
        """
        value = json.loads(data, parse_constant=_reject_constant)
        match value:
            case bool():
                raise InvalidDurationError
            case float() if not math.isfinite(value):
                msg = f"Duration number out of range: {data!r}"
                raise ValueError(msg)
            case int() | float():
                return cls(int(value))
            case str():
                return parse_duration(value)
            case _:
                raise InvalidDurationError

    @classmethod
    def scan(cls, value: Any) -> Duration:
        """Convert a value read from a database driver into a duration.

        ``None`` gives the zero duration; numbers are nanosecond counts;
        ``timedelta`` is converted; text and bytes are decoded as JSON.

        Raises:
            InvalidDurationError: If *value* has an unsupported type or is a
                non-finite float.
        """
        match value:
            case None:
                return cls()
            case Duration():
                return value
            case timedelta():
                return cls.from_timedelta(value)
            case bool():
                pass
            case float() if not math.isfinite(value):
                pass
            case int() | float():
                return cls(int(value))
            case str() | bytes() | bytearray():
                return cls.from_json(value)
            case memoryview():
                return cls.from_json(value.tobytes())
        logger.debug("Rejected duration source %r of type %s", value, type(value).__name__)
        raise InvalidDurationError

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``, flooring to whole microseconds."""
        return timedelta(microseconds=self.nanoseconds // MICROSECOND)

    def total_seconds(self) -> float:
        return self.nanoseconds / SECOND

    def to_json(self) -> bytes:
        """Encode as a JSON string literal, e.g. ``b'"1h5m3s"'``."""
        return json.dumps(str(self), ensure_ascii=False).encode("utf-8")

    def to_db(self) -> bytes:
        """Database parameter form; identical to :meth:`to_json`."""
        return self.to_json()

    def __str__(self) -> str:
        return format_duration(self.nanoseconds)

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

    def _serialize(self, info: core_schema.SerializationInfo) -> Duration | str:
        if info.mode_is_json():
            return str(self)
        return self

    @classmethod
    def _validate(cls, value: Any) -> Duration:
        match value:
            case Duration():
                return value
            case timedelta():
                return cls.from_timedelta(value)
            case str():
                return parse_duration(value)
            case bool():
                pass
            case int():
                return cls(value)
            case float() if math.isfinite(value):
                return cls(int(value))
        raise PydanticCustomError("invalid_duration", InvalidDurationError.message)
