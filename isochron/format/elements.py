"""Formatter elements: the building blocks of a DateTimeFormatter.

Every element can print a part of a value and parse the same part back:

    print_to(context, buf)     appends text for the value in context
    parse(context, position)   matches text at position and returns the
                               position after it, or raises ParseMismatch

Elements are immutable and shared freely between formatters. A formatter
is a tree of elements rooted at a CompositeElement; optional sections are
CompositeElements with ``optional=True``.

Parsing is strict. Numeric fields accept only the widths and signs their
SignStyle allows, and an optional section that fails anywhere inside is
rolled back completely before parsing continues after it.
"""

from __future__ import annotations

import enum
import functools
from typing import TYPE_CHECKING

from isochron.errors import FieldRangeError, InvalidFieldError, TimezoneError
from isochron.format.locale import FormatStyle, TextStyle, get_locale_data
from isochron.units.offset import ZoneOffset

if TYPE_CHECKING:
    from isochron.fields import FieldRule
    from isochron.format.context import ParseContext, PrintContext

MAX_WIDTH = 19

# Characters that may appear in a time-zone id
_ZONE_ID_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789~/._+:-"
)


class SignStyle(enum.Enum):
    """When a numeric field prints a sign, and which signs it parses.

    Attributes:
        NORMAL: Sign printed and parsed only for negative values.
        NEVER: Never printed or parsed; the absolute value is printed.
        ALWAYS: Always printed and required when parsing.
        NOT_NEGATIVE: Never printed or parsed; negative values fail to print.
        EXCEEDS_PAD: '+' printed, and required when parsing, only when the
            value has more digits than the minimum width; '-' for negatives.
    """

    NORMAL = "NORMAL"
    NEVER = "NEVER"
    ALWAYS = "ALWAYS"
    NOT_NEGATIVE = "NOT_NEGATIVE"
    EXCEEDS_PAD = "EXCEEDS_PAD"


class ParseMismatch(Exception):
    """Raised by an element whose text does not match.

    Attributes:
        index: Position in the text where the element failed.
        element: The element that failed.
    """

    def __init__(self, index: int, element: FormatElement) -> None:
        super().__init__(index, element)
        self.index = index
        self.element = element


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _count_digits(text: str, position: int, limit: int) -> int:
    end = position
    stop = min(len(text), position + limit)
    while end < stop and _is_digit(text[end]):
        end += 1
    return end - position


class FormatElement:
    """Base class of all formatter elements."""

    __slots__ = ()

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        raise NotImplementedError

    def parse(self, context: ParseContext, position: int) -> int:
        raise NotImplementedError


class LiteralElement(FormatElement):
    """Fixed text, matched case-insensitively when the context says so."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        buf.append(self._text)

    def parse(self, context: ParseContext, position: int) -> int:
        if not context.matches(position, self._text):
            raise ParseMismatch(position, self)
        return position + len(self._text)

    def __str__(self) -> str:
        return "'" + self._text.replace("'", "''") + "'"


class NumericElement(FormatElement):
    """A field printed and parsed as decimal digits.

    Attributes:
        rule: The field.
        min_width: Minimum digits; shorter values are zero padded.
        max_width: Maximum digits.
        sign_style: The SignStyle.
        subsequent_width: Digits to leave for fixed-width numeric fields
            that directly follow this one, as in "yyyyMMdd".
    """

    __slots__ = ("_rule", "_min_width", "_max_width", "_sign_style", "_subsequent_width")

    def __init__(
        self,
        rule: FieldRule,
        min_width: int,
        max_width: int,
        sign_style: SignStyle,
        subsequent_width: int = 0,
    ) -> None:
        self._rule = rule
        self._min_width = min_width
        self._max_width = max_width
        self._sign_style = sign_style
        self._subsequent_width = subsequent_width

    @property
    def rule(self) -> FieldRule:
        return self._rule

    @property
    def min_width(self) -> int:
        return self._min_width

    @property
    def max_width(self) -> int:
        return self._max_width

    @property
    def sign_style(self) -> SignStyle:
        return self._sign_style

    @property
    def is_fixed_width(self) -> bool:
        return (
            self._min_width == self._max_width
            and self._sign_style is SignStyle.NOT_NEGATIVE
        )

    def with_subsequent_width(self, width: int) -> NumericElement:
        return NumericElement(
            self._rule,
            self._min_width,
            self._max_width,
            self._sign_style,
            self._subsequent_width + width,
        )

    def _value_to_print(self, context: PrintContext) -> int:
        return context.field(self._rule)

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        value = self._value_to_print(context)
        digits = str(abs(value))
        limit = 10**self._max_width - 1
        if len(digits) > self._max_width:
            raise FieldRangeError(self._rule.name, value, -limit, limit)

        style = self._sign_style
        sign = ""
        if value >= 0:
            if style is SignStyle.ALWAYS:
                sign = "+"
            elif style is SignStyle.EXCEEDS_PAD and len(digits) > self._min_width:
                sign = "+"
        elif style is SignStyle.NOT_NEGATIVE:
            raise FieldRangeError(self._rule.name, value, 0, limit)
        elif style is not SignStyle.NEVER:
            sign = "-"
        buf.append(sign + digits.zfill(self._min_width))

    def parse(self, context: ParseContext, position: int) -> int:
        text = context.text
        if position >= len(text):
            raise ParseMismatch(position, self)

        style = self._sign_style
        positive = negative = False
        char = text[position]
        if char == "+":
            if style not in (SignStyle.ALWAYS, SignStyle.EXCEEDS_PAD):
                raise ParseMismatch(position, self)
            positive = True
        elif char == "-":
            if style in (SignStyle.NEVER, SignStyle.NOT_NEGATIVE):
                raise ParseMismatch(position, self)
            negative = True
        elif style is SignStyle.ALWAYS:
            raise ParseMismatch(position, self)

        start = position + 1 if positive or negative else position
        count = _count_digits(text, start, self._max_width + self._subsequent_width)
        if self._subsequent_width:
            count = min(self._max_width, count - self._subsequent_width)
        if count < self._min_width or count < 1:
            raise ParseMismatch(start, self)

        value = int(text[start : start + count])
        if negative:
            if value == 0:
                raise ParseMismatch(position, self)
            value = -value
        elif style is SignStyle.EXCEEDS_PAD:
            if positive and count <= self._min_width:
                raise ParseMismatch(position, self)
            if not positive and count > self._min_width:
                raise ParseMismatch(position, self)

        self._store(context, value)
        return start + count

    def _store(self, context: ParseContext, value: int) -> None:
        context.set_field(self._rule, value)

    def __str__(self) -> str:
        if (
            self._min_width == 1
            and self._max_width == MAX_WIDTH
            and self._sign_style is SignStyle.NORMAL
        ):
            return f"Value({self._rule})"
        if self.is_fixed_width:
            return f"Value({self._rule},{self._min_width})"
        return (
            f"Value({self._rule},{self._min_width},{self._max_width},"
            f"{self._sign_style.value})"
        )


class ReducedElement(NumericElement):
    """A field printed as its last few digits, such as a two-digit year.

    Parsed values are placed in the range ``base_value`` to
    ``base_value + 10**width - 1``, so with a base of 2000 "99" parses as
    2099 and "05" as 2005.
    """

    __slots__ = ("_base_value",)

    def __init__(self, rule: FieldRule, width: int, base_value: int) -> None:
        super().__init__(rule, width, width, SignStyle.NOT_NEGATIVE)
        self._base_value = base_value

    @property
    def base_value(self) -> int:
        return self._base_value

    def with_subsequent_width(self, width: int) -> NumericElement:
        return self

    def _value_to_print(self, context: PrintContext) -> int:
        return abs(context.field(self._rule)) % 10**self._max_width

    def _store(self, context: ParseContext, value: int) -> None:
        span = 10**self._max_width
        base = self._base_value
        base_part = base - base % span
        value = base_part + value if base > 0 else base_part - value
        if value < base:
            value += span
        context.set_field(self._rule, value)

    def __str__(self) -> str:
        return f"ReducedValue({self._rule},{self._max_width},{self._base_value})"


class FractionElement(FormatElement):
    """A field printed as the decimal fraction of its range, such as ".5" for 500ms.

    The field must range from 0 to 10**n - 1. With ``min_width`` 0 a zero
    value prints nothing at all, not even the decimal point.
    """

    __slots__ = ("_rule", "_min_width", "_max_width", "_decimal_point", "_scale")

    def __init__(
        self, rule: FieldRule, min_width: int, max_width: int, decimal_point: bool = True
    ) -> None:
        self._rule = rule
        self._min_width = min_width
        self._max_width = max_width
        self._decimal_point = decimal_point
        self._scale = len(str(rule.maximum))

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        value = context.field(self._rule)
        digits = f"{value:0{self._scale}d}"[: self._max_width].rstrip("0")
        digits = digits.ljust(self._min_width, "0")
        if not digits:
            return
        if self._decimal_point:
            buf.append(".")
        buf.append(digits)

    def parse(self, context: ParseContext, position: int) -> int:
        text = context.text
        minimum = self._min_width
        if self._decimal_point:
            if position >= len(text) or text[position] != ".":
                if minimum > 0:
                    raise ParseMismatch(position, self)
                return position
            position += 1
            minimum = max(minimum, 1)

        count = _count_digits(text, position, self._max_width)
        if count < minimum:
            raise ParseMismatch(position, self)
        if count == 0:
            return position
        digits = text[position : position + count]
        context.set_field(self._rule, int(digits.ljust(self._scale, "0")))
        return position + count

    def __str__(self) -> str:
        point = ",DecimalPoint" if self._decimal_point else ""
        return f"Fraction({self._rule},{self._min_width},{self._max_width}{point})"


class TextElement(FormatElement):
    """A field printed as locale text, such as "January" or "Mon".

    Fields without locale text, and values missing from the text table,
    are printed and parsed as plain numbers.
    """

    __slots__ = ("_rule", "_style")

    def __init__(self, rule: FieldRule, style: TextStyle) -> None:
        self._rule = rule
        self._style = style

    def _numeric(self) -> NumericElement:
        return NumericElement(self._rule, 1, MAX_WIDTH, SignStyle.NORMAL)

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        value = context.field(self._rule)
        kind = self._rule.text_kind
        text = None
        if kind is not None:
            text = context.locale_data.texts(kind, self._style).get(value)
        buf.append(text if text is not None else str(value))

    def parse(self, context: ParseContext, position: int) -> int:
        kind = self._rule.text_kind
        if kind is not None:
            texts = context.locale_data.texts(kind, self._style)
            for value, text in sorted(texts.items(), key=lambda item: -len(item[1])):
                if context.matches(position, text):
                    context.set_field(self._rule, value)
                    return position + len(text)
        try:
            return self._numeric().parse(context, position)
        except ParseMismatch:
            raise ParseMismatch(position, self) from None

    def __str__(self) -> str:
        if self._style is TextStyle.FULL:
            return f"Text({self._rule})"
        return f"Text({self._rule},{self._style.name})"


class OffsetElement(FormatElement):
    """The offset of the value, such as "+01:00", "-0530" or "Z".

    Attributes:
        no_offset_text: Text printed for a zero offset, and accepted for
            it when parsing.
        include_colon: Separate hours, minutes and seconds with ':'.
        allow_seconds: Print seconds when non-zero and accept them when
            parsing; otherwise seconds are dropped.
    """

    __slots__ = ("_no_offset_text", "_include_colon", "_allow_seconds")

    def __init__(self, no_offset_text: str, include_colon: bool, allow_seconds: bool) -> None:
        self._no_offset_text = no_offset_text
        self._include_colon = include_colon
        self._allow_seconds = allow_seconds

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        total = context.offset().total_seconds
        if total == 0:
            buf.append(self._no_offset_text)
            return
        sign = "-" if total < 0 else "+"
        hours, remainder = divmod(abs(total), 3600)
        minutes, seconds = divmod(remainder, 60)
        separator = ":" if self._include_colon else ""
        text = f"{sign}{hours:02d}{separator}{minutes:02d}"
        if self._allow_seconds and seconds:
            text += f"{separator}{seconds:02d}"
        buf.append(text)

    def _two_digits(self, text: str, position: int) -> int | None:
        if _count_digits(text, position, 2) == 2:
            return int(text[position : position + 2])
        return None

    def parse(self, context: ParseContext, position: int) -> int:
        text = context.text
        if self._no_offset_text and context.matches(position, self._no_offset_text):
            context.offset = ZoneOffset.UTC
            return position + len(self._no_offset_text)

        if position >= len(text) or text[position] not in "+-":
            raise ParseMismatch(position, self)
        sign = -1 if text[position] == "-" else 1
        separator = ":" if self._include_colon else ""
        cursor = position + 1

        hours = self._two_digits(text, cursor)
        if hours is None:
            raise ParseMismatch(position, self)
        cursor += 2
        if not text.startswith(separator, cursor):
            raise ParseMismatch(position, self)
        minutes = self._two_digits(text, cursor + len(separator))
        if minutes is None:
            raise ParseMismatch(position, self)
        cursor += len(separator) + 2

        seconds = 0
        if self._allow_seconds and text.startswith(separator, cursor):
            value = self._two_digits(text, cursor + len(separator))
            if value is not None:
                seconds = value
                cursor += len(separator) + 2

        if minutes > 59 or seconds > 59:
            raise ParseMismatch(position, self)
        try:
            offset = ZoneOffset.of_total_seconds(
                sign * (hours * 3600 + minutes * 60 + seconds)
            )
        except TimezoneError:
            raise ParseMismatch(position, self) from None
        context.offset = offset
        return cursor

    def __str__(self) -> str:
        separator = ":" if self._include_colon else ""
        pattern = f"+HH{separator}MM"
        if self._allow_seconds:
            pattern += f"{separator}ss"
        return f"Offset({pattern},'{self._no_offset_text}')"


class ZoneIdElement(FormatElement):
    """The time-zone id of the value, such as "Europe/Paris" or "UTC+01:00".

    Parsing reads as many id characters as possible and then takes the
    longest prefix that names a known zone.
    """

    __slots__ = ()

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        buf.append(context.zone().id)

    def parse(self, context: ParseContext, position: int) -> int:
        # Import here to avoid circular imports
        from isochron.zone import TimeZone

        text = context.text
        end = position
        while end < len(text) and text[end] in _ZONE_ID_CHARS:
            end += 1
        for stop in range(end, position, -1):
            try:
                zone = TimeZone.of(text[position:stop])
            except TimezoneError:
                continue
            context.zone = zone
            return stop
        raise ParseMismatch(position, self)

    def __str__(self) -> str:
        return "ZoneId()"


class CaseSensitivityElement(FormatElement):
    """Switches case-sensitive matching on or off for the rest of the parse."""

    __slots__ = ("_sensitive",)

    def __init__(self, sensitive: bool) -> None:
        self._sensitive = sensitive

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        pass

    def parse(self, context: ParseContext, position: int) -> int:
        context.case_sensitive = self._sensitive
        return position

    def __str__(self) -> str:
        return f"ParseCaseSensitive({str(self._sensitive).lower()})"


class CompositeElement(FormatElement):
    """A sequence of elements, optionally forming an optional section.

    An optional section is always printed. When parsing, any mismatch
    inside it, including a field that conflicts with one already parsed,
    restores the position and the fields to what they were on entry, and
    parsing continues after the section.
    """

    __slots__ = ("_elements", "_optional")

    def __init__(self, elements: tuple[FormatElement, ...], optional: bool = False) -> None:
        self._elements = tuple(elements)
        self._optional = optional

    @property
    def elements(self) -> tuple[FormatElement, ...]:
        return self._elements

    @property
    def optional(self) -> bool:
        return self._optional

    def with_optional(self, optional: bool) -> CompositeElement:
        if optional == self._optional:
            return self
        return CompositeElement(self._elements, optional)

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        for element in self._elements:
            element.print_to(context, buf)

    def parse(self, context: ParseContext, position: int) -> int:
        if not self._optional:
            for element in self._elements:
                position = element.parse(context, position)
            return position

        snapshot = context.snapshot()
        current = position
        try:
            for element in self._elements:
                current = element.parse(context, current)
        except (ParseMismatch, InvalidFieldError):
            context.restore(snapshot)
            return position
        return current

    def __str__(self) -> str:
        inner = "".join(str(element) for element in self._elements)
        return f"[{inner}]" if self._optional else f"({inner})"


class LocalizedElement(FormatElement):
    """A date and/or time in a locale style, resolved from the context locale."""

    __slots__ = ("_date_style", "_time_style")

    def __init__(
        self, date_style: FormatStyle | None, time_style: FormatStyle | None
    ) -> None:
        self._date_style = date_style
        self._time_style = time_style

    def _element(self, locale: str) -> CompositeElement:
        language = get_locale_data(locale).language
        return _localized_element(language, self._date_style, self._time_style)

    def print_to(self, context: PrintContext, buf: list[str]) -> None:
        self._element(context.locale).print_to(context, buf)

    def parse(self, context: ParseContext, position: int) -> int:
        return self._element(context.locale).parse(context, position)

    def __str__(self) -> str:
        date = self._date_style.name if self._date_style else ""
        time = self._time_style.name if self._time_style else ""
        return f"Localized({date},{time})"


@functools.lru_cache(maxsize=None)
def _localized_element(
    language: str, date_style: FormatStyle | None, time_style: FormatStyle | None
) -> CompositeElement:
    # Import here to avoid circular imports
    from isochron.format.builder import DateTimeFormatterBuilder

    pattern = get_locale_data(language).pattern(date_style, time_style)
    return DateTimeFormatterBuilder().append_pattern(pattern).to_formatter(language).element


__all__ = [
    "CaseSensitivityElement",
    "CompositeElement",
    "FormatElement",
    "FractionElement",
    "LiteralElement",
    "LocalizedElement",
    "NumericElement",
    "OffsetElement",
    "ParseMismatch",
    "ReducedElement",
    "SignStyle",
    "TextElement",
    "ZoneIdElement",
]
