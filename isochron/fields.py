"""Calendar field rules.

A FieldRule names one integer field of the ISO calendar (year,
month-of-year, hour-of-day, ...), knows its absolute bounds and how to
derive its value from any date-time value.

Derivation is duck-typed: a value exposes its date through
``to_local_date()`` and its time through ``to_local_time()``. A value
that lacks the method does not support the field, which is how the
formatter decides that, say, an hour cannot be printed from a date.

Examples:
    >>> from isochron import LocalDate
    >>> YEAR.get(LocalDate(2024, 1, 15))
    2024
    >>> HOUR_OF_DAY.derive(LocalDate(2024, 1, 15)) is None
    True
"""

from __future__ import annotations

from typing import Any, Callable

from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron._internal.validation import check_field
from isochron.errors import UnsupportedFieldError


class FieldRule:
    """One named integer field of the ISO calendar.

    Attributes:
        name: Field name, e.g. "MonthOfYear".
        minimum: Smallest value the field can ever take.
        maximum: Largest value the field can ever take.
        is_date_field: True if derived from the date, False if from the time.
        text_kind: Locale text table for the field ("month", "day_of_week",
            "ampm"), or None if the field has no text form.
    """

    __slots__ = ("_name", "_minimum", "_maximum", "_date_based", "_extract", "_text_kind")

    def __init__(
        self,
        name: str,
        minimum: int,
        maximum: int,
        date_based: bool,
        extract: Callable[[Any], int],
        text_kind: str | None = None,
    ) -> None:
        self._name = name
        self._minimum = minimum
        self._maximum = maximum
        self._date_based = date_based
        self._extract = extract
        self._text_kind = text_kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def maximum(self) -> int:
        return self._maximum

    @property
    def is_date_field(self) -> bool:
        return self._date_based

    @property
    def text_kind(self) -> str | None:
        return self._text_kind

    def derive(self, calendrical: object) -> int | None:
        """Return the field value of a date-time value, or None if unavailable.

        Args:
            calendrical: Any value offering to_local_date() or to_local_time().

        Returns:
            The field value, or None if the value carries no date (for
            date fields) or no time (for time fields).
        """
        getter = getattr(
            calendrical, "to_local_date" if self._date_based else "to_local_time", None
        )
        if getter is None:
            return None
        return self._extract(getter())

    def get(self, calendrical: object) -> int:
        """Return the field value of a date-time value.

        Raises:
            UnsupportedFieldError: If the value does not carry this field.
        """
        value = self.derive(calendrical)
        if value is None:
            raise UnsupportedFieldError(self._name, type(calendrical).__name__)
        return value

    def check_value(self, value: int) -> int:
        """Validate a value against the absolute bounds of the field.

        Raises:
            FieldRangeError: If value is out of bounds.
        """
        return check_field(self._name, value, self._minimum, self._maximum)

    def __repr__(self) -> str:
        return f"FieldRule({self._name!r})"

    def __str__(self) -> str:
        return self._name


YEAR = FieldRule("Year", MIN_YEAR, MAX_YEAR, True, lambda d: d.year)
MONTH_OF_YEAR = FieldRule("MonthOfYear", 1, 12, True, lambda d: d.month, "month")
DAY_OF_MONTH = FieldRule("DayOfMonth", 1, 31, True, lambda d: d.day)
DAY_OF_YEAR = FieldRule("DayOfYear", 1, 366, True, lambda d: d.day_of_year)
DAY_OF_WEEK = FieldRule(
    "DayOfWeek", 1, 7, True, lambda d: int(d.day_of_week), "day_of_week"
)
WEEK_BASED_YEAR = FieldRule(
    "WeekBasedYear", MIN_YEAR, MAX_YEAR, True, lambda d: d.week_based_year
)
WEEK_OF_WEEK_BASED_YEAR = FieldRule(
    "WeekOfWeekBasedYear", 1, 53, True, lambda d: d.week_of_week_based_year
)

HOUR_OF_DAY = FieldRule("HourOfDay", 0, 23, False, lambda t: t.hour)
MINUTE_OF_HOUR = FieldRule("MinuteOfHour", 0, 59, False, lambda t: t.minute)
SECOND_OF_MINUTE = FieldRule("SecondOfMinute", 0, 59, False, lambda t: t.second)
NANO_OF_SECOND = FieldRule(
    "NanoOfSecond", 0, 999_999_999, False, lambda t: t.nanosecond
)
AMPM_OF_DAY = FieldRule("AmPmOfDay", 0, 1, False, lambda t: t.hour // 12, "ampm")
CLOCK_HOUR_OF_AMPM = FieldRule(
    "ClockHourOfAmPm", 1, 12, False, lambda t: (t.hour % 12) or 12
)
HOUR_OF_AMPM = FieldRule("HourOfAmPm", 0, 11, False, lambda t: t.hour % 12)

DATE_RULES: tuple[FieldRule, ...] = (
    YEAR,
    MONTH_OF_YEAR,
    DAY_OF_MONTH,
    DAY_OF_YEAR,
    DAY_OF_WEEK,
    WEEK_BASED_YEAR,
    WEEK_OF_WEEK_BASED_YEAR,
)
TIME_RULES: tuple[FieldRule, ...] = (
    HOUR_OF_DAY,
    MINUTE_OF_HOUR,
    SECOND_OF_MINUTE,
    NANO_OF_SECOND,
    AMPM_OF_DAY,
    CLOCK_HOUR_OF_AMPM,
    HOUR_OF_AMPM,
)


__all__ = [
    "FieldRule",
    "YEAR",
    "MONTH_OF_YEAR",
    "DAY_OF_MONTH",
    "DAY_OF_YEAR",
    "DAY_OF_WEEK",
    "WEEK_BASED_YEAR",
    "WEEK_OF_WEEK_BASED_YEAR",
    "HOUR_OF_DAY",
    "MINUTE_OF_HOUR",
    "SECOND_OF_MINUTE",
    "NANO_OF_SECOND",
    "AMPM_OF_DAY",
    "CLOCK_HOUR_OF_AMPM",
    "HOUR_OF_AMPM",
    "DATE_RULES",
    "TIME_RULES",
]
