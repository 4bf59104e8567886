"""SQLAlchemy column types for :class:`Clock` and :class:`Duration`.

Both store the JSON-quoted text form (``b'"19:24:00"'``, ``b'"1h5m3s"'``)
in a binary column and decode results with the value type's ``scan``, so
rows written by other producers in any scan-supported shape still load.
SQL ``NULL`` maps to ``None`` in both directions.

Usage::

    schedules = Table(
        "schedules",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("opens_at", ClockType),
        Column("timeout", DurationType),
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import LargeBinary
from sqlalchemy.types import TypeDecorator

from timetype.clock import Clock
from timetype.duration import Duration

if TYPE_CHECKING:
    from sqlalchemy.engine import Dialect


class ClockType(TypeDecorator[Clock]):
    """Column type persisting a :class:`Clock` as ``"HH:MM:SS"`` bytes."""

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        if value is None:
            return None
        return Clock.scan(value).to_db()

    def process_result_value(self, value: Any, dialect: Dialect) -> Clock | None:
        if value is None:
            return None
        return Clock.scan(value)


class DurationType(TypeDecorator[Duration]):
    """Column type persisting a :class:`Duration` as unit-suffixed bytes."""

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        if value is None:
            return None
        return Duration.scan(value).to_db()

    def process_result_value(self, value: Any, dialect: Dialect) -> Duration | None:
        if value is None:
            return None
        return Duration.scan(value)
