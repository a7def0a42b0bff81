"""Isochron: offset-aware date-time values and composable formatters.

Isochron provides immutable ISO-calendar values with nanosecond
precision, and a formatter engine that prints them to, and parses them
from, ISO-8601-family text.

Core Types:
    LocalDate, LocalTime, LocalDateTime: Values without an offset
    OffsetDateTime: Date-time with a fixed offset from UTC
    OffsetDate, OffsetTime: Date or time with an offset
    ZonedDateTime: Date-time in a time-zone
    Instant: Point on the time-line
    Period: Amount of calendar and clock time

Units:
    ZoneOffset: Fixed offset from UTC
    DayOfWeek: ISO day of week
    TimeZone: Fixed offset or IANA region

Formatting:
    DateTimeFormatter, DateTimeFormatterBuilder, formatters

Exceptions:
    CalendricalError: Base exception
    PreconditionError: Missing required argument
    FieldRangeError: Field outside its bounds
    InvalidFieldError: Invalid field combination
    ArithmeticRangeError: Result outside the supported range
    ParseError: Failed to parse text
    UnsupportedFieldError: Field not available for printing
    TimezoneError: Bad offset or unknown zone
    ZoneResolutionError: Rejected gap or overlap

Example:
    >>> from isochron import OffsetDateTime, ZoneOffset
    >>> dt = OffsetDateTime.parse("2007-12-03T10:15:30+01:00")
    >>> str(dt.with_offset_same_instant(ZoneOffset.UTC))
    '2007-12-03T09:15:30Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from isochron.core.date import LocalDate
from isochron.core.datetime import LocalDateTime
from isochron.core.instant import Instant
from isochron.core.offset_date import OffsetDate
from isochron.core.offset_datetime import OffsetDateTime
from isochron.core.offset_time import OffsetTime
from isochron.core.period import Period
from isochron.core.time import LocalTime
from isochron.core.zoned import ZonedDateTime

# Units
from isochron.units.dayofweek import DayOfWeek
from isochron.units.offset import ZoneOffset
from isochron.zone import TimeZone, ZoneOffsetInfo, ZoneOffsetTransition

# Exceptions
from isochron.errors import (
    ArithmeticRangeError,
    CalendricalError,
    FieldRangeError,
    InvalidFieldError,
    ParseError,
    PreconditionError,
    TimezoneError,
    UnsupportedFieldError,
    ZoneResolutionError,
)

# Formatting
from isochron.format import (
    DateTimeFormatter,
    DateTimeFormatterBuilder,
    FormatStyle,
    SignStyle,
    TextStyle,
    formatters,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDate",
    "OffsetDateTime",
    "OffsetTime",
    "Period",
    "ZonedDateTime",
    # Units
    "DayOfWeek",
    "TimeZone",
    "ZoneOffset",
    "ZoneOffsetInfo",
    "ZoneOffsetTransition",
    # Exceptions
    "ArithmeticRangeError",
    "CalendricalError",
    "FieldRangeError",
    "InvalidFieldError",
    "ParseError",
    "PreconditionError",
    "TimezoneError",
    "UnsupportedFieldError",
    "ZoneResolutionError",
    # Formatting
    "DateTimeFormatter",
    "DateTimeFormatterBuilder",
    "FormatStyle",
    "SignStyle",
    "TextStyle",
    "formatters",
]
