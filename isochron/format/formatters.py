"""Canonical ISO-8601 and RFC-1123 formatters, and localized style factories.

The canonical formatters are built together the first time any of them
is requested. The table is assembled under a lock and published with a
single assignment as a read-only mapping, so a reader never sees a
partly built table.

Formats:
    ISO_LOCAL_DATE          2007-12-03
    ISO_OFFSET_DATE         2007-12-03+01:00
    ISO_DATE                2007-12-03, 2007-12-03+01:00[Europe/Paris]
    ISO_LOCAL_TIME          10:15, 10:15:30, 10:15:30.5
    ISO_OFFSET_TIME         10:15:30+01:00
    ISO_TIME                10:15:30, 10:15:30+01:00[Europe/Paris]
    ISO_LOCAL_DATE_TIME     2007-12-03T10:15:30
    ISO_OFFSET_DATE_TIME    2007-12-03T10:15:30+01:00
    ISO_ZONED_DATE_TIME     2007-12-03T10:15:30+01:00[Europe/Paris]
    ISO_DATE_TIME           any of the three above
    ISO_ORDINAL_DATE        2007-337
    ISO_WEEK_DATE           2007-W49-1
    BASIC_ISO_DATE          20071203, 20071203+0100
    RFC_1123_DATE_TIME      Mon, 03 Dec 2007 10:15:30 +0100

Every canonical formatter is also available as a module attribute:

    >>> from isochron.format import formatters
    >>> formatters.ISO_LOCAL_DATE is formatters.iso_local_date()
    True
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Mapping

from isochron._internal.validation import require
from isochron.config.logging import get_logger
from isochron.fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_YEAR,
    HOUR_OF_DAY,
    MINUTE_OF_HOUR,
    MONTH_OF_YEAR,
    NANO_OF_SECOND,
    SECOND_OF_MINUTE,
    WEEK_BASED_YEAR,
    WEEK_OF_WEEK_BASED_YEAR,
    YEAR,
)
from isochron.format.builder import DateTimeFormatterBuilder
from isochron.format.elements import SignStyle
from isochron.format.formatter import DateTimeFormatter
from isochron.format.locale import FormatStyle, TextStyle

logger = get_logger(__name__)

CANONICAL_LOCALE = "en"

_lock = threading.Lock()
_registry: Mapping[str, DateTimeFormatter] | None = None


def _optional_offset_and_zone(builder: DateTimeFormatterBuilder) -> DateTimeFormatterBuilder:
    return (
        builder.optional_start()
        .append_offset_id()
        .optional_start()
        .append_literal("[")
        .append_zone_id()
        .append_literal("]")
    )


def _build() -> dict[str, DateTimeFormatter]:
    def new() -> DateTimeFormatterBuilder:
        return DateTimeFormatterBuilder()

    def done(builder: DateTimeFormatterBuilder) -> DateTimeFormatter:
        return builder.to_formatter(CANONICAL_LOCALE)

    table: dict[str, DateTimeFormatter] = {}

    local_date = done(
        new()
        .append_value(YEAR, 4, 10, SignStyle.EXCEEDS_PAD)
        .append_literal("-")
        .append_value(MONTH_OF_YEAR, 2)
        .append_literal("-")
        .append_value(DAY_OF_MONTH, 2)
    )
    table["ISO_LOCAL_DATE"] = local_date
    table["ISO_OFFSET_DATE"] = done(
        new().parse_case_insensitive().append(local_date).append_offset_id()
    )
    table["ISO_DATE"] = done(
        _optional_offset_and_zone(new().parse_case_insensitive().append(local_date))
    )

    local_time = done(
        new()
        .append_value(HOUR_OF_DAY, 2)
        .append_literal(":")
        .append_value(MINUTE_OF_HOUR, 2)
        .optional_start()
        .append_literal(":")
        .append_value(SECOND_OF_MINUTE, 2)
        .optional_start()
        .append_fraction(NANO_OF_SECOND, 0, 9)
    )
    table["ISO_LOCAL_TIME"] = local_time
    table["ISO_OFFSET_TIME"] = done(
        new().parse_case_insensitive().append(local_time).append_offset_id()
    )
    table["ISO_TIME"] = done(
        _optional_offset_and_zone(new().parse_case_insensitive().append(local_time))
    )

    local_date_time = done(
        new()
        .parse_case_insensitive()
        .append(local_date)
        .append_literal("T")
        .append(local_time)
    )
    table["ISO_LOCAL_DATE_TIME"] = local_date_time
    table["ISO_OFFSET_DATE_TIME"] = done(
        new().append(local_date_time).append_offset_id()
    )
    table["ISO_ZONED_DATE_TIME"] = done(
        new()
        .append(local_date_time)
        .append_offset_id()
        .append_literal("[")
        .append_zone_id()
        .append_literal("]")
    )
    table["ISO_DATE_TIME"] = done(_optional_offset_and_zone(new().append(local_date_time)))

    table["ISO_ORDINAL_DATE"] = done(
        _optional_offset_and_zone(
            new()
            .parse_case_insensitive()
            .append_value(YEAR, 4, 10, SignStyle.EXCEEDS_PAD)
            .append_literal("-")
            .append_value(DAY_OF_YEAR, 3)
        )
    )
    table["ISO_WEEK_DATE"] = done(
        _optional_offset_and_zone(
            new()
            .parse_case_insensitive()
            .append_value(WEEK_BASED_YEAR, 4, 10, SignStyle.EXCEEDS_PAD)
            .append_literal("-W")
            .append_value(WEEK_OF_WEEK_BASED_YEAR, 2)
            .append_literal("-")
            .append_value(DAY_OF_WEEK, 1)
        )
    )
    table["BASIC_ISO_DATE"] = done(
        new()
        .parse_case_insensitive()
        .append_value(YEAR, 4)
        .append_value(MONTH_OF_YEAR, 2)
        .append_value(DAY_OF_MONTH, 2)
        .optional_start()
        .append_offset("Z", False, False)
        .optional_start()
        .append_literal("[")
        .append_zone_id()
        .append_literal("]")
    )
    table["RFC_1123_DATE_TIME"] = done(
        new()
        .append_text(DAY_OF_WEEK, TextStyle.SHORT)
        .append_literal(", ")
        .append_value(DAY_OF_MONTH, 2)
        .append_literal(" ")
        .append_text(MONTH_OF_YEAR, TextStyle.SHORT)
        .append_literal(" ")
        .append_value(YEAR, 4, 4, SignStyle.NOT_NEGATIVE)
        .append_literal(" ")
        .append_value(HOUR_OF_DAY, 2)
        .append_literal(":")
        .append_value(MINUTE_OF_HOUR, 2)
        .append_literal(":")
        .append_value(SECOND_OF_MINUTE, 2)
        .append_literal(" ")
        .append_offset("Z", False, False)
    )
    return table


def _table() -> Mapping[str, DateTimeFormatter]:
    global _registry
    table = _registry
    if table is None:
        with _lock:
            if _registry is None:
                _registry = MappingProxyType(_build())
                logger.debug("canonical formatters published", count=len(_registry))
            table = _registry
    return table


def canonical_names() -> tuple[str, ...]:
    return tuple(_table())


def canonical(name: str) -> DateTimeFormatter:
    """Return a canonical formatter by name, such as "ISO_LOCAL_DATE".

    Raises:
        KeyError: If no canonical formatter has that name.
    """
    try:
        return _table()[name]
    except KeyError:
        raise KeyError(f"unknown canonical formatter: {name!r}") from None


def iso_local_date() -> DateTimeFormatter:
    """Return the formatter for dates such as "2007-12-03"."""
    return _table()["ISO_LOCAL_DATE"]


def iso_offset_date() -> DateTimeFormatter:
    """Return the formatter for dates with an offset, such as "2007-12-03+01:00"."""
    return _table()["ISO_OFFSET_DATE"]


def iso_date() -> DateTimeFormatter:
    """Return the formatter for dates with an optional offset and zone."""
    return _table()["ISO_DATE"]


def iso_local_time() -> DateTimeFormatter:
    """Return the formatter for times such as "10:15" or "10:15:30.5"."""
    return _table()["ISO_LOCAL_TIME"]


def iso_offset_time() -> DateTimeFormatter:
    return _table()["ISO_OFFSET_TIME"]


def iso_time() -> DateTimeFormatter:
    return _table()["ISO_TIME"]


def iso_local_date_time() -> DateTimeFormatter:
    return _table()["ISO_LOCAL_DATE_TIME"]


def iso_offset_date_time() -> DateTimeFormatter:
    """Return the formatter for values such as "2007-12-03T10:15:30+01:00"."""
    return _table()["ISO_OFFSET_DATE_TIME"]


def iso_zoned_date_time() -> DateTimeFormatter:
    """Return the formatter for values such as "2007-12-03T10:15:30+01:00[Europe/Paris]"."""
    return _table()["ISO_ZONED_DATE_TIME"]


def iso_date_time() -> DateTimeFormatter:
    return _table()["ISO_DATE_TIME"]


def iso_ordinal_date() -> DateTimeFormatter:
    """Return the formatter for year and day-of-year, such as "2007-337"."""
    return _table()["ISO_ORDINAL_DATE"]


def iso_week_date() -> DateTimeFormatter:
    """Return the formatter for ISO week dates, such as "2007-W49-1"."""
    return _table()["ISO_WEEK_DATE"]


def basic_iso_date() -> DateTimeFormatter:
    """Return the formatter for compact dates, such as "20071203".

    The year must have exactly four digits.
    """
    return _table()["BASIC_ISO_DATE"]


def rfc_1123() -> DateTimeFormatter:
    """Return the formatter for HTTP dates, such as "Mon, 03 Dec 2007 10:15:30 +0100"."""
    return _table()["RFC_1123_DATE_TIME"]


# -- Localized styles -----------------------------------------------------------


def date(style: FormatStyle, locale: str | None = None) -> DateTimeFormatter:
    """Return a localized date formatter.

    Examples:
        >>> from isochron import LocalDate
        >>> date(FormatStyle.LONG, "fr").print(LocalDate(2007, 12, 3))
        '3 décembre 2007'
    """
    require(style, "style")
    return DateTimeFormatterBuilder().append_localized(style, None).to_formatter(locale)


def time(style: FormatStyle, locale: str | None = None) -> DateTimeFormatter:
    """Return a localized time formatter."""
    require(style, "style")
    return DateTimeFormatterBuilder().append_localized(None, style).to_formatter(locale)


def date_time(
    date_style: FormatStyle,
    time_style: FormatStyle | None = None,
    locale: str | None = None,
) -> DateTimeFormatter:
    """Return a localized date-time formatter.

    Args:
        date_style: Style of the date part.
        time_style: Style of the time part, the date style by default.
        locale: The locale, the ``default_locale`` setting by default.
    """
    require(date_style, "date_style")
    return (
        DateTimeFormatterBuilder()
        .append_localized(date_style, time_style or date_style)
        .to_formatter(locale)
    )


def full_date(locale: str | None = None) -> DateTimeFormatter:
    return date(FormatStyle.FULL, locale)


def long_date(locale: str | None = None) -> DateTimeFormatter:
    return date(FormatStyle.LONG, locale)


def medium_date(locale: str | None = None) -> DateTimeFormatter:
    return date(FormatStyle.MEDIUM, locale)


def short_date(locale: str | None = None) -> DateTimeFormatter:
    return date(FormatStyle.SHORT, locale)


def full_time(locale: str | None = None) -> DateTimeFormatter:
    return time(FormatStyle.FULL, locale)


def long_time(locale: str | None = None) -> DateTimeFormatter:
    return time(FormatStyle.LONG, locale)


def medium_time(locale: str | None = None) -> DateTimeFormatter:
    return time(FormatStyle.MEDIUM, locale)


def short_time(locale: str | None = None) -> DateTimeFormatter:
    return time(FormatStyle.SHORT, locale)


def full_date_time(locale: str | None = None) -> DateTimeFormatter:
    return date_time(FormatStyle.FULL, locale=locale)


def long_date_time(locale: str | None = None) -> DateTimeFormatter:
    return date_time(FormatStyle.LONG, locale=locale)


def medium_date_time(locale: str | None = None) -> DateTimeFormatter:
    return date_time(FormatStyle.MEDIUM, locale=locale)


def short_date_time(locale: str | None = None) -> DateTimeFormatter:
    return date_time(FormatStyle.SHORT, locale=locale)


def __getattr__(name: str) -> DateTimeFormatter:
    if name.isupper() and name in _table():
        return _table()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CANONICAL_LOCALE",
    "basic_iso_date",
    "canonical",
    "canonical_names",
    "date",
    "date_time",
    "full_date",
    "full_date_time",
    "full_time",
    "iso_date",
    "iso_date_time",
    "iso_local_date",
    "iso_local_date_time",
    "iso_local_time",
    "iso_offset_date",
    "iso_offset_date_time",
    "iso_offset_time",
    "iso_ordinal_date",
    "iso_time",
    "iso_week_date",
    "iso_zoned_date_time",
    "long_date",
    "long_date_time",
    "long_time",
    "medium_date",
    "medium_date_time",
    "medium_time",
    "rfc_1123",
    "short_date",
    "short_date_time",
    "short_time",
]
