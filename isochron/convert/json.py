"""JSON serialization and deserialization for date-time values.

This module provides functions for converting values to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

The JSON format uses the canonical ISO formatters with a type tag for
polymorphic deserialization:

    {"_type": "OffsetDateTime", "value": "2024-01-15T14:30:00.123456789Z"}
    {"_type": "ZonedDateTime", "value": "2024-01-15T14:30:00+01:00[Europe/Paris]"}
    {"_type": "LocalDate", "value": "2024-01-15"}
    {"_type": "Period", "value": "P1M2D", "years": 0, "months": 1, ...}

Examples:
    >>> from isochron import OffsetDateTime, ZoneOffset
    >>> from isochron.convert import to_json, from_json

    >>> dt = OffsetDateTime(2024, 1, 15, 14, 30, 45, offset=ZoneOffset.UTC)
    >>> data = to_json(dt)
    >>> data["_type"]
    'OffsetDateTime'

    >>> restored = from_json(data)
    >>> restored == dt
    True
"""

from __future__ import annotations

from typing import Any, Callable

from isochron.errors import ParseError

_PERIOD_FIELDS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds", "nanos")


def _codecs() -> dict[str, tuple[type, Callable[[], Any]]]:
    # Import here to avoid circular imports
    from isochron.core.date import LocalDate
    from isochron.core.datetime import LocalDateTime
    from isochron.core.instant import Instant
    from isochron.core.offset_date import OffsetDate
    from isochron.core.offset_datetime import OffsetDateTime
    from isochron.core.offset_time import OffsetTime
    from isochron.core.time import LocalTime
    from isochron.core.zoned import ZonedDateTime
    from isochron.format import formatters

    # Subclass-free types, so lookup by exact type is enough
    return {
        "LocalDate": (LocalDate, formatters.iso_local_date),
        "LocalTime": (LocalTime, formatters.iso_local_time),
        "LocalDateTime": (LocalDateTime, formatters.iso_local_date_time),
        "OffsetDate": (OffsetDate, formatters.iso_offset_date),
        "OffsetTime": (OffsetTime, formatters.iso_offset_time),
        "OffsetDateTime": (OffsetDateTime, formatters.iso_offset_date_time),
        "ZonedDateTime": (ZonedDateTime, formatters.iso_zoned_date_time),
        "Instant": (Instant, formatters.iso_offset_date_time),
    }


def to_json(value: Any) -> dict[str, Any]:
    """Convert a value to a JSON-serializable dictionary.

    The returned dictionary includes a ``_type`` field for polymorphic
    deserialization and a ``value`` field with the ISO representation.

    Args:
        value: A LocalDate, LocalTime, LocalDateTime, OffsetDate,
            OffsetTime, OffsetDateTime, ZonedDateTime, Instant or Period.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from isochron import LocalDate, Period
        >>> to_json(LocalDate(2024, 1, 15))
        {'_type': 'LocalDate', 'value': '2024-01-15'}

        >>> to_json(Period(months=1, days=2))["value"]
        'P1M2D'
    """
    from isochron.core.period import Period
    from isochron.units.offset import ZoneOffset

    if isinstance(value, Period):
        data: dict[str, Any] = {"_type": "Period", "value": str(value)}
        for name in _PERIOD_FIELDS:
            data[name] = getattr(value, name)
        return data

    type_name = type(value).__name__
    codec = _codecs().get(type_name)
    if codec is None or type(value) is not codec[0]:
        raise TypeError(f"expected a date-time value or Period, got {type_name}")
    if type_name == "Instant":
        value = value.at_offset(ZoneOffset.UTC)
    return {"_type": type_name, "value": codec[1]().print(value)}


def from_json(data: dict[str, Any]) -> Any:
    """Create a value from a JSON dictionary.

    The dictionary must include a ``_type`` field naming the type to create.

    Raises:
        ParseError: If the data is missing required fields or has an
            invalid format.
        TypeError: If ``_type`` is not a recognized type.

    Examples:
        >>> from_json({"_type": "LocalTime", "value": "14:30:45"})
        LocalTime(14, 30, 45)

        >>> from_json({"_type": "ZonedDateTime", "value": "2024-07-01T12:00+02:00[Europe/Paris]"}).zone
        TimeZone('Europe/Paris')
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data", str(data), 0)

    if type_name == "Period":
        from isochron.core.period import Period

        return Period(**{name: int(data.get(name, 0)) for name in _PERIOD_FIELDS})

    codec = _codecs().get(type_name)
    if codec is None:
        raise TypeError(f"unknown date-time type: {type_name!r}")
    value = data.get("value")
    if not isinstance(value, str) or not value:
        raise ParseError(f"missing 'value' field for {type_name}", str(data), 0)
    return codec[1]().parse(value, codec[0])


__all__ = ["to_json", "from_json"]
