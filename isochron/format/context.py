"""Print and parse contexts shared by the formatter elements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron.errors import InvalidFieldError, UnsupportedFieldError
from isochron.format.locale import LocaleData, get_locale_data
from isochron.format.parsed import Parsed

if TYPE_CHECKING:
    from isochron.fields import FieldRule
    from isochron.units.offset import ZoneOffset
    from isochron.zone import TimeZone


class PrintContext:
    """The value being printed and the locale to print it in."""

    __slots__ = ("value", "locale")

    def __init__(self, value: Any, locale: str) -> None:
        self.value = value
        self.locale = locale

    @property
    def locale_data(self) -> LocaleData:
        return get_locale_data(self.locale)

    def field(self, rule: FieldRule) -> int:
        """Return a field of the value.

        Raises:
            UnsupportedFieldError: If the value does not carry the field.
        """
        return rule.get(self.value)

    def offset(self) -> ZoneOffset:
        offset = getattr(self.value, "offset", None)
        if offset is None:
            raise UnsupportedFieldError("OffsetId", type(self.value).__name__)
        return offset

    def zone(self) -> TimeZone:
        zone = getattr(self.value, "zone", None)
        if zone is None:
            raise UnsupportedFieldError("ZoneId", type(self.value).__name__)
        return zone


class ParseContext:
    """Mutable state of one parse: the text, the fields read so far and settings.

    Optional sections take a snapshot() on entry and restore() it when
    they fail to match, which drops every field recorded since.
    """

    __slots__ = ("text", "locale", "case_sensitive", "fields", "offset", "zone")

    def __init__(self, text: str, locale: str) -> None:
        self.text = text
        self.locale = locale
        self.case_sensitive = True
        self.fields: dict[FieldRule, int] = {}
        self.offset: ZoneOffset | None = None
        self.zone: TimeZone | None = None

    @property
    def locale_data(self) -> LocaleData:
        return get_locale_data(self.locale)

    def set_field(self, rule: FieldRule, value: int) -> None:
        """Record a parsed field.

        Raises:
            InvalidFieldError: If the field was already parsed with a
                different value.
        """
        current = self.fields.get(rule)
        if current is not None and current != value:
            raise InvalidFieldError(
                f"conflict found: {rule} {current} differs from {rule} {value}",
                rule.name,
            )
        self.fields[rule] = value

    def char_equals(self, a: str, b: str) -> bool:
        if self.case_sensitive:
            return a == b
        return a == b or a.upper() == b.upper() or a.lower() == b.lower()

    def matches(self, position: int, expected: str) -> bool:
        """Return True if expected appears in the text at position."""
        end = position + len(expected)
        if end > len(self.text):
            return False
        if self.case_sensitive:
            return self.text.startswith(expected, position)
        return all(
            self.char_equals(self.text[position + index], char)
            for index, char in enumerate(expected)
        )

    def snapshot(self) -> tuple:
        return (dict(self.fields), self.offset, self.zone, self.case_sensitive)

    def restore(self, snapshot: tuple) -> None:
        fields, self.offset, self.zone, self.case_sensitive = snapshot
        self.fields = dict(fields)

    def to_parsed(self) -> Parsed:
        return Parsed(self.fields, self.offset, self.zone)


__all__ = ["ParseContext", "PrintContext"]
