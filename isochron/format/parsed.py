"""Parsed field map produced by DateTimeFormatter.

A formatter first matches the text, recording each field it reads into
a Parsed object. Only then are the fields resolved into a value. Each
target type asks for the parts it needs through the resolve methods,
so the same Parsed can build a LocalDate, an OffsetDateTime or a
ZonedDateTime.

Examples:
    >>> from isochron.format.formatters import iso_offset_date_time
    >>> parsed = iso_offset_date_time().parse("2007-12-03T10:15:30+01:00")
    >>> parsed.resolve_local_date()
    LocalDate(2007, 12, 3)
    >>> parsed.offset
    ZoneOffset('+01:00')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from isochron.errors import CalendricalError, InvalidFieldError
from isochron.fields import (
    AMPM_OF_DAY,
    CLOCK_HOUR_OF_AMPM,
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_YEAR,
    HOUR_OF_AMPM,
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

if TYPE_CHECKING:
    from isochron.core.date import LocalDate
    from isochron.core.time import LocalTime
    from isochron.units.offset import ZoneOffset
    from isochron.zone import TimeZone


class Parsed:
    """The fields, offset and zone read from a piece of text.

    Field values are stored as read; range checks happen when the fields
    are resolved.

    Attributes:
        offset: The parsed offset, or None.
        zone: The parsed time-zone, or None.
    """

    __slots__ = ("_fields", "offset", "zone")

    def __init__(
        self,
        fields: dict[FieldRule, int] | None = None,
        offset: ZoneOffset | None = None,
        zone: TimeZone | None = None,
    ) -> None:
        self._fields: dict[FieldRule, int] = dict(fields or {})
        self.offset = offset
        self.zone = zone

    def get(self, rule: FieldRule) -> int | None:
        """Return the parsed value of a field, or None if it was not parsed."""
        return self._fields.get(rule)

    @property
    def fields(self) -> dict[FieldRule, int]:
        return dict(self._fields)

    def __contains__(self, rule: object) -> bool:
        return rule in self._fields

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _checked(self, rule: FieldRule) -> int | None:
        value = self._fields.get(rule)
        if value is not None:
            rule.check_value(value)
        return value

    def resolve_local_date(self) -> LocalDate:
        """Resolve the date fields into a LocalDate.

        A date is built from year, month and day, or year and day-of-year,
        or week-based-year, week and day-of-week, in that order. Any other
        parsed date field must agree with the result.

        Raises:
            CalendricalError: If the parsed fields do not describe a date.
            FieldRangeError: If a field is outside its bounds.
            InvalidFieldError: If the fields are inconsistent.
        """
        from isochron.core.date import LocalDate

        year = self._checked(YEAR)
        month = self._checked(MONTH_OF_YEAR)
        day = self._checked(DAY_OF_MONTH)
        day_of_year = self._checked(DAY_OF_YEAR)
        day_of_week = self._checked(DAY_OF_WEEK)
        week_year = self._checked(WEEK_BASED_YEAR)
        week = self._checked(WEEK_OF_WEEK_BASED_YEAR)

        if year is not None and month is not None and day is not None:
            date = LocalDate(year, month, day)
        elif year is not None and day_of_year is not None:
            date = LocalDate.of_year_day(year, day_of_year)
        elif week_year is not None and week is not None and day_of_week is not None:
            date = LocalDate.of_week_date(week_year, week, day_of_week)
        else:
            raise CalendricalError(
                f"unable to resolve a date from the parsed fields {self._describe()}"
            )

        self._cross_check(DAY_OF_YEAR, day_of_year, date.day_of_year)
        self._cross_check(DAY_OF_WEEK, day_of_week, int(date.day_of_week))
        self._cross_check(MONTH_OF_YEAR, month, date.month)
        self._cross_check(WEEK_BASED_YEAR, week_year, date.week_based_year)
        self._cross_check(WEEK_OF_WEEK_BASED_YEAR, week, date.week_of_week_based_year)
        return date

    def resolve_local_time(self) -> LocalTime:
        """Resolve the time fields into a LocalTime.

        The hour comes from hour-of-day, or from the AM/PM marker with
        the twelve-hour clock fields. Missing minutes, seconds and
        nanoseconds are zero.

        Raises:
            CalendricalError: If no hour was parsed.
            FieldRangeError: If a field is outside its bounds.
            InvalidFieldError: If the fields are inconsistent.
        """
        from isochron.core.time import LocalTime

        hour = self._checked(HOUR_OF_DAY)
        ampm = self._checked(AMPM_OF_DAY)
        clock_hour = self._checked(CLOCK_HOUR_OF_AMPM)
        hour_of_ampm = self._checked(HOUR_OF_AMPM)
        if clock_hour is not None:
            hour_of_ampm = self._merge(HOUR_OF_AMPM, hour_of_ampm, clock_hour % 12)

        if hour_of_ampm is not None and ampm is not None:
            hour = self._merge(HOUR_OF_DAY, hour, ampm * 12 + hour_of_ampm)
        if hour is None:
            raise CalendricalError(
                f"unable to resolve a time from the parsed fields {self._describe()}"
            )
        self._cross_check(AMPM_OF_DAY, ampm, hour // 12)
        self._cross_check(HOUR_OF_AMPM, hour_of_ampm, hour % 12)

        return LocalTime(
            hour,
            self._checked(MINUTE_OF_HOUR) or 0,
            self._checked(SECOND_OF_MINUTE) or 0,
            self._checked(NANO_OF_SECOND) or 0,
        )

    def resolve_offset(self) -> ZoneOffset:
        """Return the parsed offset, or the offset of a parsed fixed zone.

        Raises:
            CalendricalError: If neither was parsed.
        """
        if self.offset is not None:
            return self.offset
        if self.zone is not None and self.zone.is_fixed:
            return self.zone.fixed_offset
        raise CalendricalError("unable to resolve an offset: no offset was parsed")

    def resolve_zone(self) -> TimeZone:
        """Return the parsed zone, or the fixed zone of the parsed offset.

        Raises:
            CalendricalError: If neither was parsed.
        """
        from isochron.zone import TimeZone

        if self.zone is not None:
            return self.zone
        if self.offset is not None:
            return TimeZone.of_offset(self.offset)
        raise CalendricalError("unable to resolve a time-zone: no zone was parsed")

    @staticmethod
    def _cross_check(rule: FieldRule, parsed: int | None, derived: int) -> None:
        if parsed is not None and parsed != derived:
            raise InvalidFieldError(
                f"conflict found: {rule} {parsed} differs from {rule} {derived} "
                "derived from the other fields",
                rule.name,
            )

    @staticmethod
    def _merge(rule: FieldRule, current: int | None, value: int) -> int:
        if current is not None and current != value:
            raise InvalidFieldError(
                f"conflict found: {rule} {current} differs from {rule} {value}",
                rule.name,
            )
        return value

    def _describe(self) -> str:
        items = ", ".join(f"{rule}={value}" for rule, value in self._fields.items())
        return "{" + items + "}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parsed):
            return NotImplemented
        return (
            self._fields == other._fields
            and self.offset == other.offset
            and self.zone == other.zone
        )

    def __repr__(self) -> str:
        text = f"Parsed({self._describe()}"
        if self.offset is not None:
            text += f", offset={self.offset}"
        if self.zone is not None:
            text += f", zone={self.zone}"
        return text + ")"


__all__ = ["Parsed"]
