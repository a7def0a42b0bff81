"""Formatting and parsing of date-time values.

This package provides:
    - DateTimeFormatterBuilder: composes literals, numeric and text fields,
      offsets, zone ids and optional sections into a formatter
    - DateTimeFormatter: immutable print/parse pipeline
    - Parsed: the fields read by a formatter, before resolution
    - formatters: the canonical ISO-8601 and RFC-1123 formatters and the
      localized style factories

Examples:
    >>> from isochron import OffsetDateTime
    >>> from isochron.format import formatters
    >>> dt = OffsetDateTime.parse("2007-12-03T10:15:30+01:00")
    >>> formatters.rfc_1123().print(dt)
    'Mon, 03 Dec 2007 10:15:30 +0100'

    >>> from isochron.format import DateTimeFormatterBuilder
    >>> f = DateTimeFormatterBuilder().append_pattern("dd MMMM yyyy").to_formatter("de")
    >>> f.print(dt)
    '03 Dezember 2007'
"""

from __future__ import annotations

from isochron.format import formatters
from isochron.format.builder import DateTimeFormatterBuilder
from isochron.format.elements import SignStyle
from isochron.format.formatter import DateTimeFormatter
from isochron.format.locale import FormatStyle, TextStyle
from isochron.format.parsed import Parsed

__all__: list[str] = [
    "DateTimeFormatter",
    "DateTimeFormatterBuilder",
    "FormatStyle",
    "Parsed",
    "SignStyle",
    "TextStyle",
    "formatters",
]
