"""LocalDate class representing a calendar date.

This module provides the LocalDate class for representing calendar dates
in the proleptic ISO calendar, without a time or an offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from isochron._internal.calendar import (
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    days_before_month,
    days_in_month,
    days_in_year,
    epoch_day_to_day_of_week,
    epoch_day_to_week_date,
    epoch_day_to_ymd,
    is_leap_year,
    week_date_to_epoch_day,
    weeks_in_week_based_year,
    ymd_to_epoch_day,
)
from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron._internal.validation import (
    check_field,
    require,
    validate_day,
    validate_month,
    validate_year,
)
from isochron.errors import ArithmeticRangeError, FieldRangeError, InvalidFieldError
from isochron.units.dayofweek import DayOfWeek

if TYPE_CHECKING:
    from isochron.core.datetime import LocalDateTime
    from isochron.core.period import Period
    from isochron.core.time import LocalTime
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.resolvers import DateResolver


class LocalDate:
    """A date without a time or offset in the ISO calendar.

    LocalDate uses the proleptic Gregorian calendar with astronomical year
    numbering, so year 0 exists and equals 1 BCE. Years from -999,999,999
    to 999,999,999 are supported.

    Internally the date is stored as a single epoch day count, the number
    of days since 1970-01-01.

    Attributes:
        year: The year.
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = LocalDate(2024, 1, 15)
        >>> d.day_of_week
        <DayOfWeek.MONDAY: 1>

        >>> LocalDate(2024, 2, 30)
        Traceback (most recent call last):
        ...
        InvalidFieldError: DayOfMonth 30 is invalid for 2024-02, which has 29 days
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month, and day.

        Raises:
            PreconditionError: If a component is None.
            FieldRangeError: If a component is outside its absolute range.
            InvalidFieldError: If the day does not exist in the month.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days: int = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, days: int) -> LocalDate:
        """Create a LocalDate from an epoch day known to be in range."""
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from days since 1970-01-01.

        Raises:
            FieldRangeError: If the day lies outside the supported years.

        Examples:
            >>> LocalDate.of_epoch_day(-1)
            LocalDate(1969, 12, 31)
        """
        check_field("EpochDay", epoch_day, MIN_EPOCH_DAY, MAX_EPOCH_DAY)
        return cls._from_epoch_day(epoch_day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and a day-of-year.

        Raises:
            FieldRangeError: If year or day_of_year is outside its range.
            InvalidFieldError: If day_of_year is 366 in a non-leap year.

        Examples:
            >>> LocalDate.of_year_day(2024, 60)
            LocalDate(2024, 2, 29)
        """
        validate_year(year)
        check_field("DayOfYear", day_of_year, 1, 366)
        if day_of_year > days_in_year(year):
            raise InvalidFieldError(
                f"DayOfYear 366 is invalid for non-leap year {year}", "DayOfYear"
            )
        return cls._from_epoch_day(ymd_to_epoch_day(year, 1, 1) + day_of_year - 1)

    @classmethod
    def of_week_date(
        cls, week_based_year: int, week: int, day_of_week: int
    ) -> LocalDate:
        """Create a LocalDate from an ISO week date.

        Args:
            week_based_year: The ISO week-based year.
            week: The week of the week-based year (1-53).
            day_of_week: The ISO day of week (Monday=1).

        Raises:
            FieldRangeError: If a component is outside its range.
            InvalidFieldError: If week 53 does not exist in the year.

        Examples:
            >>> LocalDate.of_week_date(2009, 1, 1)
            LocalDate(2008, 12, 29)
        """
        check_field("WeekBasedYear", week_based_year, MIN_YEAR, MAX_YEAR)
        check_field("WeekOfWeekBasedYear", week, 1, 53)
        check_field("DayOfWeek", day_of_week, 1, 7)
        if week > weeks_in_week_based_year(week_based_year):
            raise InvalidFieldError(
                f"WeekOfWeekBasedYear 53 is invalid for week-based year "
                f"{week_based_year}",
                "WeekOfWeekBasedYear",
            )
        days = week_date_to_epoch_day(week_based_year, week, day_of_week)
        if days < MIN_EPOCH_DAY or days > MAX_EPOCH_DAY:
            raise FieldRangeError("Year", epoch_day_to_ymd(days)[0], MIN_YEAR, MAX_YEAR)
        return cls._from_epoch_day(days)

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> LocalDate:
        """Parse text such as "2007-12-03" into a LocalDate.

        Args:
            text: The text to parse.
            formatter: The formatter to use, ISO_LOCAL_DATE by default.

        Raises:
            ParseError: If the text does not match the formatter.
        """
        from isochron.format.formatters import iso_local_date

        return (formatter or iso_local_date()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> LocalDate:
        """Build a LocalDate from fields merged by a formatter."""
        return parsed.resolve_local_date()

    @property
    def year(self) -> int:
        return epoch_day_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return epoch_day_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return epoch_day_to_ymd(self._days)[2]

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the ISO day of week.

        Examples:
            >>> LocalDate(2024, 1, 21).day_of_week
            <DayOfWeek.SUNDAY: 7>
        """
        return DayOfWeek(epoch_day_to_day_of_week(self._days))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def week_based_year(self) -> int:
        """Return the ISO week-based year, which can differ from year near January 1.

        Examples:
            >>> LocalDate(2008, 12, 29).week_based_year
            2009
        """
        return epoch_day_to_week_date(self._days)[0]

    @property
    def week_of_week_based_year(self) -> int:
        """Return the ISO week number (1-53)."""
        return epoch_day_to_week_date(self._days)[1]

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    @property
    def length_of_year(self) -> int:
        return days_in_year(self.year)

    def to_epoch_day(self) -> int:
        """Return the number of days since 1970-01-01."""
        return self._days

    def to_local_date(self) -> LocalDate:
        return self

    def get(self, rule: FieldRule) -> int:
        """Return the value of a date field.

        Raises:
            UnsupportedFieldError: If rule is a time field.
        """
        return rule.get(self)

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a LocalTime to form a LocalDateTime."""
        from isochron.core.datetime import LocalDateTime

        return LocalDateTime.of(self, time)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> LocalDate:
        """Return a new LocalDate with the given components replaced.

        The result is validated strictly.

        Examples:
            >>> LocalDate(2024, 1, 15).replace(month=6)
            LocalDate(2024, 6, 15)
        """
        y, m, d = epoch_day_to_ymd(self._days)
        return LocalDate(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def with_year(self, year: int, resolver: DateResolver | None = None) -> LocalDate:
        """Return a copy with the year altered.

        If the day does not exist in the new year (February 29), the
        date resolver decides; the default clamps to the last valid day.

        Raises:
            FieldRangeError: If year is outside the supported range.
        """
        validate_year(year)
        _, month, day = epoch_day_to_ymd(self._days)
        return _resolve(year, month, day, resolver)

    def with_month(self, month: int, resolver: DateResolver | None = None) -> LocalDate:
        """Return a copy with the month altered.

        Examples:
            >>> LocalDate(2023, 1, 31).with_month(2)
            LocalDate(2023, 2, 28)
        """
        validate_month(month)
        year, _, day = epoch_day_to_ymd(self._days)
        return _resolve(year, month, day, resolver)

    def with_day_of_month(
        self, day: int, resolver: DateResolver | None = None
    ) -> LocalDate:
        """Return a copy with the day-of-month altered.

        Without a resolver the result is validated strictly, so Feb 30
        raises InvalidFieldError.
        """
        check_field("DayOfMonth", day, 1, 31)
        year, month, _ = epoch_day_to_ymd(self._days)
        if resolver is None:
            return LocalDate(year, month, day)
        return resolver(year, month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        """Return a copy with the day-of-year altered, validated strictly."""
        return LocalDate.of_year_day(self.year, day_of_year)

    def plus(self, period: Period, resolver: DateResolver | None = None) -> LocalDate:
        """Return a copy with the date part of a period added.

        Years and months are added together first, then weeks and days.

        Raises:
            ValueError: If the period has time components.
            ArithmeticRangeError: If the result is outside the supported years.
        """
        require(period, "period")
        if period.total_nanos != 0:
            raise ValueError(f"cannot add time components of {period} to a date")
        return self.plus_months(period.total_months, resolver).plus_days(
            period.total_days
        )

    def minus(self, period: Period, resolver: DateResolver | None = None) -> LocalDate:
        return self.plus(-period, resolver)

    def plus_years(self, years: int, resolver: DateResolver | None = None) -> LocalDate:
        """Return a copy with years added, resolving an invalid day.

        Examples:
            >>> LocalDate(2024, 2, 29).plus_years(1)
            LocalDate(2025, 2, 28)
        """
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        new_year = year + years
        _check_year_result(new_year)
        return _resolve(new_year, month, day, resolver)

    def plus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> LocalDate:
        """Return a copy with months added, resolving an invalid day.

        Examples:
            >>> LocalDate(2024, 1, 31).plus_months(1)
            LocalDate(2024, 2, 29)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        new_year, month0 = divmod(year * 12 + (month - 1) + months, 12)
        _check_year_result(new_year)
        return _resolve(new_year, month0 + 1, day, resolver)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(weeks * 7)

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy with days added.

        Raises:
            ArithmeticRangeError: If the result is outside the supported years.
        """
        if days == 0:
            return self
        new_days = self._days + days
        if new_days < MIN_EPOCH_DAY or new_days > MAX_EPOCH_DAY:
            raise ArithmeticRangeError(
                f"adding {days} days to {self} exceeds the supported range"
            )
        return LocalDate._from_epoch_day(new_days)

    def minus_years(self, years: int, resolver: DateResolver | None = None) -> LocalDate:
        return self.plus_years(-years, resolver)

    def minus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> LocalDate:
        return self.plus_months(-months, resolver)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string.

        Years beyond four digits carry an explicit sign.

        Examples:
            >>> LocalDate(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> LocalDate(-44, 3, 15).to_iso_format()
            '-0044-03-15'
            >>> LocalDate(12345, 1, 1).to_iso_format()
            '+12345-01-01'
        """
        year, month, day = epoch_day_to_ymd(self._days)
        return f"{_format_year(year)}-{month:02d}-{day:02d}"

    def __add__(self, other: object) -> LocalDate:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> LocalDate:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"LocalDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


def _format_year(year: int) -> str:
    if abs(year) > 9999:
        return f"{'-' if year < 0 else '+'}{abs(year)}"
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def _check_year_result(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ArithmeticRangeError(
            f"year {year} is outside the supported range {MIN_YEAR} to {MAX_YEAR}"
        )


def _resolve(
    year: int,
    month: int,
    day: int,
    resolver: Callable[[int, int, int], LocalDate] | None,
) -> LocalDate:
    if resolver is None:
        # Import here to avoid circular imports
        from isochron.resolvers import default_date_resolver

        resolver = default_date_resolver()
    return resolver(year, month, day)


__all__ = ["LocalDate"]
