"""Core date-time value types.

This module provides the value types:
    - LocalDate: Calendar date in the ISO calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: Date and time without an offset
    - OffsetDateTime: Date-time with a fixed offset from UTC
    - OffsetDate: Date with a fixed offset from UTC
    - OffsetTime: Time with a fixed offset from UTC
    - ZonedDateTime: Date-time in a time-zone
    - Instant: Point on the time-line
    - Period: Amount of calendar and clock time
"""

from __future__ import annotations

from isochron.core.date import LocalDate
from isochron.core.datetime import LocalDateTime
from isochron.core.instant import Instant
from isochron.core.offset_date import OffsetDate
from isochron.core.offset_datetime import OffsetDateTime
from isochron.core.offset_time import OffsetTime
from isochron.core.period import Period
from isochron.core.time import LocalTime
from isochron.core.zoned import ZonedDateTime

__all__: list[str] = [
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDate",
    "OffsetDateTime",
    "OffsetTime",
    "Period",
    "ZonedDateTime",
]
