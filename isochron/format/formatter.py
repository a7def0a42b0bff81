"""DateTimeFormatter: prints values to text and parses text back.

Formatters are immutable. They are built with DateTimeFormatterBuilder
or taken from isochron.format.formatters, and are safe to share between
threads.
"""

from __future__ import annotations

from typing import IO, Any, TypeVar

from isochron._internal.validation import require
from isochron.config.logging import get_logger
from isochron.errors import ParseError
from isochron.format.context import ParseContext, PrintContext
from isochron.format.elements import CompositeElement, ParseMismatch
from isochron.format.parsed import Parsed

logger = get_logger(__name__)

T = TypeVar("T")


class DateTimeFormatter:
    """An immutable, locale-bound formatter for date-time values.

    Printing asks the value for each field the formatter contains; a
    field the value does not carry raises UnsupportedFieldError.

    Parsing first matches the whole text, recording fields into a Parsed
    object, and then hands it to the target type's ``from_parsed``.

    Examples:
        >>> from isochron.format.formatters import iso_local_date
        >>> from isochron import LocalDate
        >>> iso_local_date().print(LocalDate(2024, 1, 15))
        '2024-01-15'
        >>> iso_local_date().parse("2024-01-15", LocalDate)
        LocalDate(2024, 1, 15)
    """

    __slots__ = ("_element", "_locale")

    def __init__(self, element: CompositeElement, locale: str) -> None:
        self._element = require(element, "element")
        self._locale = require(locale, "locale")

    @property
    def element(self) -> CompositeElement:
        """The root element of this formatter."""
        return self._element

    @property
    def locale(self) -> str:
        return self._locale

    def with_locale(self, locale: str) -> DateTimeFormatter:
        """Return a copy of this formatter using another locale."""
        require(locale, "locale")
        if locale == self._locale:
            return self
        return DateTimeFormatter(self._element, locale)

    def print(self, value: Any) -> str:
        """Print a value.

        Raises:
            PreconditionError: If value is None.
            UnsupportedFieldError: If the value lacks a field the
                formatter needs.
            FieldRangeError: If a value does not fit its field width or
                sign style.
        """
        buf: list[str] = []
        self._print(value, buf)
        return "".join(buf)

    def print_to(self, value: Any, stream: IO[str]) -> None:
        """Print a value to a text stream."""
        require(stream, "stream")
        buf: list[str] = []
        self._print(value, buf)
        stream.write("".join(buf))

    def _print(self, value: Any, buf: list[str]) -> None:
        require(value, "value")
        self._element.print_to(PrintContext(value, self._locale), buf)

    def parse(self, text: str, target: type[T] | None = None) -> T | Parsed:
        """Parse text, optionally resolving it into a value.

        Args:
            text: The text to parse. It must be matched completely.
            target: A type with a ``from_parsed`` class method, such as
                OffsetDateTime. Without one the Parsed fields are returned.

        Raises:
            PreconditionError: If text is None.
            ParseError: If the text does not match.
            FieldRangeError: If a parsed field is out of range.
            InvalidFieldError: If the parsed fields are inconsistent.
            CalendricalError: If the fields do not describe the target.
        """
        parsed, end = self._parse(text, 0)
        if end != len(text):
            logger.debug("parse incomplete", text=text, index=end)
            raise ParseError(
                f"Text {text!r} could not be parsed, unparsed text found at index {end}",
                text,
                end,
            )
        if target is None:
            return parsed
        return target.from_parsed(parsed)

    def parse_unresolved(self, text: str, position: int = 0) -> tuple[Parsed, int]:
        """Match text from position without requiring it to be consumed.

        Returns:
            The Parsed fields and the index after the matched text.

        Raises:
            ParseError: If the text does not match.
        """
        if position < 0 or position > len(require(text, "text")):
            raise IndexError(f"position {position} is outside the text")
        return self._parse(text, position)

    def _parse(self, text: str, position: int) -> tuple[Parsed, int]:
        require(text, "text")
        context = ParseContext(text, self._locale)
        try:
            end = self._element.parse(context, position)
        except ParseMismatch as exc:
            logger.debug(
                "parse failed", text=text, index=exc.index, element=str(exc.element)
            )
            raise ParseError(
                f"Text {text!r} could not be parsed at index {exc.index}",
                text,
                exc.index,
                str(exc.element),
            ) from None
        return context.to_parsed(), end

    def __repr__(self) -> str:
        return f"DateTimeFormatter({self._element}, locale={self._locale!r})"

    def __str__(self) -> str:
        return str(self._element)


__all__ = ["DateTimeFormatter"]
