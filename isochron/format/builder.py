"""DateTimeFormatterBuilder: composes formatter elements into a DateTimeFormatter.

Examples:
    >>> from isochron import fields
    >>> formatter = (
    ...     DateTimeFormatterBuilder()
    ...     .append_value(fields.HOUR_OF_DAY, 2)
    ...     .append_literal(":")
    ...     .append_value(fields.MINUTE_OF_HOUR, 2)
    ...     .optional_start()
    ...     .append_literal(":")
    ...     .append_value(fields.SECOND_OF_MINUTE, 2)
    ...     .to_formatter()
    ... )
    >>> str(formatter)
    "(Value(HourOfDay,2)':'Value(MinuteOfHour,2)[':'Value(SecondOfMinute,2)])"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.validation import require
from isochron.fields import (
    AMPM_OF_DAY,
    CLOCK_HOUR_OF_AMPM,
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
    FieldRule,
)
from isochron.format.elements import (
    MAX_WIDTH,
    CaseSensitivityElement,
    CompositeElement,
    FormatElement,
    FractionElement,
    LiteralElement,
    LocalizedElement,
    NumericElement,
    OffsetElement,
    ReducedElement,
    SignStyle,
    TextElement,
    ZoneIdElement,
)
from isochron.format.locale import FormatStyle, TextStyle

if TYPE_CHECKING:
    from isochron.format.formatter import DateTimeFormatter


class _Section:
    """Elements collected for the root or for one open optional section."""

    __slots__ = ("elements", "value_index")

    def __init__(self) -> None:
        self.elements: list[FormatElement] = []
        # Index of the numeric element that adjacent fixed-width fields
        # reserve digits from, or -1
        self.value_index = -1


class DateTimeFormatterBuilder:
    """Builder of DateTimeFormatter instances.

    Every append method returns the builder so calls can be chained.
    Optional sections are opened with optional_start() and closed with
    optional_end(); to_formatter() closes any that are still open.
    """

    def __init__(self) -> None:
        self._sections: list[_Section] = [_Section()]

    @property
    def _active(self) -> _Section:
        return self._sections[-1]

    def _append(self, element: FormatElement) -> DateTimeFormatterBuilder:
        section = self._active
        section.elements.append(element)
        section.value_index = -1
        return self

    def _append_numeric(self, element: NumericElement) -> DateTimeFormatterBuilder:
        section = self._active
        if section.value_index >= 0 and element.is_fixed_width:
            base = section.elements[section.value_index]
            section.elements[section.value_index] = base.with_subsequent_width(
                element.max_width
            )
            section.elements.append(element)
        else:
            section.elements.append(element)
            section.value_index = len(section.elements) - 1
        return self

    # -- Elements -----------------------------------------------------------

    def append_literal(self, text: str) -> DateTimeFormatterBuilder:
        """Append fixed text. Empty text is ignored."""
        require(text, "text")
        if text:
            self._append(LiteralElement(text))
        return self

    def append_value(
        self,
        rule: FieldRule,
        min_width: int | None = None,
        max_width: int | None = None,
        sign_style: SignStyle | None = None,
    ) -> DateTimeFormatterBuilder:
        """Append a numeric field.

        Args:
            rule: The field.
            min_width: Minimum number of digits, 1-19. Given alone it is
                also the maximum and no sign is allowed.
            max_width: Maximum number of digits, 1-19.
            sign_style: Sign handling, NORMAL by default. A fixed width
                takes only NOT_NEGATIVE.

        Raises:
            ValueError: If the widths are out of range or inconsistent, or
                a fixed width is given another sign style.

        Examples:
            >>> from isochron.fields import YEAR
            >>> b = DateTimeFormatterBuilder().append_value(YEAR, 4, 10, SignStyle.EXCEEDS_PAD)
        """
        require(rule, "rule")
        if min_width is None and max_width is None:
            return self._append_numeric(
                NumericElement(rule, 1, MAX_WIDTH, sign_style or SignStyle.NORMAL)
            )
        if max_width is None:
            _check_width("width", min_width, 1, MAX_WIDTH)
            if sign_style not in (None, SignStyle.NOT_NEGATIVE):
                raise ValueError(
                    f"a fixed width field takes no sign style, got {sign_style.name}"
                )
            return self._append_numeric(
                NumericElement(rule, min_width, min_width, SignStyle.NOT_NEGATIVE)
            )
        if min_width is None:
            min_width = 1
        _check_width("min_width", min_width, 1, MAX_WIDTH)
        _check_width("max_width", max_width, 1, MAX_WIDTH)
        if max_width < min_width:
            raise ValueError(
                f"max_width must be greater than or equal to min_width, "
                f"got {max_width} < {min_width}"
            )
        return self._append_numeric(
            NumericElement(rule, min_width, max_width, sign_style or SignStyle.NORMAL)
        )

    def append_value_reduced(
        self, rule: FieldRule, width: int, base_value: int
    ) -> DateTimeFormatterBuilder:
        """Append a field printed as its last ``width`` digits, such as "yy".

        Parsed values land in ``base_value`` to ``base_value + 10**width - 1``.
        """
        require(rule, "rule")
        _check_width("width", width, 1, 10)
        return self._append_numeric(ReducedElement(rule, width, base_value))

    def append_fraction(
        self,
        rule: FieldRule,
        min_width: int,
        max_width: int,
        decimal_point: bool = True,
    ) -> DateTimeFormatterBuilder:
        """Append a field as a decimal fraction, such as the ".123" of a time.

        Args:
            rule: A field ranging from 0 to 10**n - 1, normally NANO_OF_SECOND.
            min_width: Minimum digits, 0-9. With 0 a zero value prints nothing.
            max_width: Maximum digits, 1-9.
            decimal_point: Print and require a leading '.'.

        Raises:
            ValueError: If the widths are out of range or the field is not
                a decimal range.
        """
        require(rule, "rule")
        if rule.minimum != 0 or rule.maximum + 1 != 10 ** len(str(rule.maximum)):
            raise ValueError(f"{rule} does not have a decimal range")
        _check_width("min_width", min_width, 0, 9)
        _check_width("max_width", max_width, 1, 9)
        if max_width < min_width:
            raise ValueError(
                f"max_width must be greater than or equal to min_width, "
                f"got {max_width} < {min_width}"
            )
        return self._append(FractionElement(rule, min_width, max_width, decimal_point))

    def append_text(
        self, rule: FieldRule, style: TextStyle = TextStyle.FULL
    ) -> DateTimeFormatterBuilder:
        """Append a field as locale text, such as the month name."""
        require(rule, "rule")
        require(style, "style")
        return self._append(TextElement(rule, style))

    def append_offset_id(self) -> DateTimeFormatterBuilder:
        """Append the offset as "Z" or "+HH:MM", with seconds when non-zero."""
        return self.append_offset("Z", True, True)

    def append_offset(
        self, no_offset_text: str, include_colon: bool, allow_seconds: bool
    ) -> DateTimeFormatterBuilder:
        """Append the offset.

        Args:
            no_offset_text: Text for a zero offset, such as "Z" or "+0000".
            include_colon: Use "+HH:MM" rather than "+HHMM".
            allow_seconds: Include seconds when they are non-zero.
        """
        require(no_offset_text, "no_offset_text")
        return self._append(OffsetElement(no_offset_text, include_colon, allow_seconds))

    def append_zone_id(self) -> DateTimeFormatterBuilder:
        """Append the time-zone id, such as "Europe/Paris"."""
        return self._append(ZoneIdElement())

    def append(self, formatter: DateTimeFormatter) -> DateTimeFormatterBuilder:
        """Append all the elements of another formatter."""
        require(formatter, "formatter")
        return self._append(formatter.element.with_optional(False))

    def append_localized(
        self, date_style: FormatStyle | None, time_style: FormatStyle | None
    ) -> DateTimeFormatterBuilder:
        """Append a date and/or time in a style chosen by the formatter locale.

        Raises:
            ValueError: If both styles are None.
        """
        if date_style is None and time_style is None:
            raise ValueError("either the date or the time style must be given")
        return self._append(LocalizedElement(date_style, time_style))

    def parse_case_sensitive(self) -> DateTimeFormatterBuilder:
        """Match the rest of the text case-sensitively (the default)."""
        return self._append(CaseSensitivityElement(True))

    def parse_case_insensitive(self) -> DateTimeFormatterBuilder:
        """Match the rest of the text ignoring case."""
        return self._append(CaseSensitivityElement(False))

    # -- Optional sections ----------------------------------------------------

    def optional_start(self) -> DateTimeFormatterBuilder:
        """Open an optional section. Sections can nest."""
        self._sections.append(_Section())
        return self

    def optional_end(self) -> DateTimeFormatterBuilder:
        """Close the innermost optional section.

        Raises:
            ValueError: If no optional section is open.
        """
        if len(self._sections) == 1:
            raise ValueError("optional_end() called without a matching optional_start()")
        section = self._sections.pop()
        if section.elements:
            self._append(CompositeElement(tuple(section.elements), optional=True))
        return self

    # -- Patterns -----------------------------------------------------------

    def append_pattern(self, pattern: str) -> DateTimeFormatterBuilder:
        """Append the elements described by a pattern such as "yyyy-MM-dd".

        Letters:
            y  year                       Y  week-based year
            M  month (MMM short, MMMM full text)
            d  day of month               D  day of year
            E  day of week text           e  day of week number
            w  week of week-based year    a  AM/PM marker
            H  hour of day (0-23)         h  clock hour of AM/PM (1-12)
            m  minute                     s  second
            S  fraction of second         z  time-zone id
            Z  offset ("+0000"; ZZZZZ gives "Z" or "+00:00")

        Text in single quotes is literal, '' is a single quote, and square
        brackets enclose optional sections. Other non-letters are literal.

        Raises:
            ValueError: If the pattern is invalid.
        """
        require(pattern, "pattern")
        position = 0
        length = len(pattern)
        while position < length:
            char = pattern[position]
            if _is_ascii_letter(char):
                end = position + 1
                while end < length and pattern[end] == char:
                    end += 1
                self._append_letter(char, end - position)
                position = end
            elif char == "'":
                position = self._append_quoted(pattern, position)
            elif char == "[":
                self.optional_start()
                position += 1
            elif char == "]":
                if len(self._sections) == 1:
                    raise ValueError(
                        f"pattern {pattern!r} contains ']' without a previous '['"
                    )
                self.optional_end()
                position += 1
            elif char in "{}#":
                raise ValueError(f"pattern {pattern!r} contains reserved character {char!r}")
            else:
                self.append_literal(char)
                position += 1
        return self

    def _append_quoted(self, pattern: str, start: int) -> int:
        position = start + 1
        while position < len(pattern):
            if pattern[position] == "'":
                if position + 1 < len(pattern) and pattern[position + 1] == "'":
                    position += 1
                else:
                    break
            position += 1
        if position >= len(pattern):
            raise ValueError(f"pattern {pattern!r} ends with an incomplete string literal")
        text = pattern[start + 1 : position]
        self.append_literal("'" if not text else text.replace("''", "'"))
        return position + 1

    def _append_letter(self, letter: str, count: int) -> None:
        if letter in "yY":
            rule = YEAR if letter == "y" else WEEK_BASED_YEAR
            if count == 2:
                self.append_value_reduced(rule, 2, 2000)
            elif count < 4:
                self.append_value(rule, count, MAX_WIDTH, SignStyle.NORMAL)
            else:
                self.append_value(rule, count, MAX_WIDTH, SignStyle.EXCEEDS_PAD)
        elif letter == "M":
            if count <= 2:
                self._append_short_value(MONTH_OF_YEAR, count)
            else:
                self.append_text(MONTH_OF_YEAR, _text_style(letter, count))
        elif letter in "Ee":
            if letter == "e" and count <= 2:
                self._append_short_value(DAY_OF_WEEK, count)
            else:
                style = TextStyle.SHORT if count <= 3 else _text_style(letter, count)
                self.append_text(DAY_OF_WEEK, style)
        elif letter == "D":
            if count == 1:
                self.append_value(DAY_OF_YEAR)
            elif count == 2:
                self.append_value(DAY_OF_YEAR, 2, 3, SignStyle.NOT_NEGATIVE)
            elif count == 3:
                self.append_value(DAY_OF_YEAR, 3)
            else:
                raise ValueError(f"too many pattern letters: {letter}")
        elif letter in _SHORT_VALUE_LETTERS:
            if count > 2:
                raise ValueError(f"too many pattern letters: {letter}")
            self._append_short_value(_SHORT_VALUE_LETTERS[letter], count)
        elif letter == "S":
            if count > 9:
                raise ValueError(f"too many pattern letters: {letter}")
            self.append_fraction(NANO_OF_SECOND, count, count, False)
        elif letter == "a":
            if count > 1:
                raise ValueError(f"too many pattern letters: {letter}")
            self.append_text(AMPM_OF_DAY, TextStyle.SHORT)
        elif letter == "Z":
            if count <= 3:
                self.append_offset("+0000", False, False)
            elif count == 5:
                self.append_offset("Z", True, True)
            else:
                raise ValueError(f"invalid number of pattern letters: {letter * count}")
        elif letter == "z":
            if count > 4:
                raise ValueError(f"too many pattern letters: {letter}")
            self.append_zone_id()
        else:
            raise ValueError(f"unknown pattern letter: {letter}")

    def _append_short_value(self, rule: FieldRule, count: int) -> None:
        if count == 1:
            self.append_value(rule)
        else:
            self.append_value(rule, 2)

    # -- Finishing ----------------------------------------------------------

    def to_formatter(self, locale: str | None = None) -> DateTimeFormatter:
        """Finish building, closing any open optional sections.

        Args:
            locale: Locale for text and localized styles. Defaults to
                the ``default_locale`` setting.
        """
        # Import here to avoid circular imports
        from isochron.format.formatter import DateTimeFormatter

        while len(self._sections) > 1:
            self.optional_end()
        if locale is None:
            from isochron.config.settings import get_settings

            locale = get_settings().default_locale
        root = CompositeElement(tuple(self._sections[0].elements))
        return DateTimeFormatter(root, locale)


_SHORT_VALUE_LETTERS: dict[str, FieldRule] = {
    "d": DAY_OF_MONTH,
    "w": WEEK_OF_WEEK_BASED_YEAR,
    "H": HOUR_OF_DAY,
    "h": CLOCK_HOUR_OF_AMPM,
    "m": MINUTE_OF_HOUR,
    "s": SECOND_OF_MINUTE,
}


def _is_ascii_letter(char: str) -> bool:
    return "A" <= char <= "Z" or "a" <= char <= "z"


def _text_style(letter: str, count: int) -> TextStyle:
    if count == 3:
        return TextStyle.SHORT
    if count == 4:
        return TextStyle.FULL
    if count == 5:
        return TextStyle.NARROW
    raise ValueError(f"too many pattern letters: {letter}")


def _check_width(name: str, value: int, minimum: int, maximum: int) -> None:
    if not isinstance(value, int) or value < minimum or value > maximum:
        raise ValueError(f"{name} must be from {minimum} to {maximum}, got {value}")


__all__ = ["DateTimeFormatterBuilder"]
