"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class, the offset-free date-time
that OffsetDateTime and ZonedDateTime delegate their field arithmetic to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from isochron._internal.validation import require
from isochron.core.date import LocalDate
from isochron.core.time import LocalTime

if TYPE_CHECKING:
    from isochron.core.offset_datetime import OffsetDateTime
    from isochron.core.period import Period
    from isochron.core.zoned import ZonedDateTime
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.resolvers import DateResolver, ZoneResolver
    from isochron.units.dayofweek import DayOfWeek
    from isochron.units.offset import ZoneOffset
    from isochron.zone import TimeZone


class LocalDateTime:
    """A date-time without an offset in the ISO calendar.

    LocalDateTime combines a LocalDate and a LocalTime. It is a
    description of a wall-clock reading and does not identify an instant
    on the time-line until an offset or zone is attached.

    Examples:
        >>> dt = LocalDateTime(2024, 1, 15, 14, 30)
        >>> str(dt)
        '2024-01-15T14:30'

        >>> dt.plus_hours(10)
        LocalDateTime(2024, 1, 16, 0, 30, 0)
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from component parts.

        Raises:
            PreconditionError: If a component is None.
            FieldRangeError: If any component is out of range.
            InvalidFieldError: If the day does not exist in the month.
        """
        self._date: LocalDate = LocalDate(year, month, day)
        self._time: LocalTime = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def _of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Create a LocalDateTime from parts without checking them."""
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a date and a time.

        Raises:
            PreconditionError: If date or time is None.
        """
        return cls._of(require(date, "date"), require(time, "time"))

    @classmethod
    def parse(
        cls, text: str, formatter: DateTimeFormatter | None = None
    ) -> LocalDateTime:
        """Parse text such as "2007-12-03T10:15:30" into a LocalDateTime."""
        from isochron.format.formatters import iso_local_date_time

        return (formatter or iso_local_date_time()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> LocalDateTime:
        """Build a LocalDateTime from fields merged by a formatter."""
        return cls._of(parsed.resolve_local_date(), parsed.resolve_local_time())

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    def get(self, rule: FieldRule) -> int:
        """Return the value of a date or time field."""
        return rule.get(self)

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date == self._date and time == self._time:
            return self
        return LocalDateTime._of(date, time)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> LocalDateTime:
        """Return a copy with the given components replaced, validated strictly.

        Examples:
            >>> LocalDateTime(2024, 1, 15, 9).replace(day=1, hour=0)
            LocalDateTime(2024, 1, 1, 0, 0, 0)
        """
        return self._with(
            self._date.replace(year, month, day),
            self._time.replace(hour, minute, second, nanosecond),
        )

    def with_year(
        self, year: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self._with(self._date.with_year(year, resolver), self._time)

    def with_month(
        self, month: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self._with(self._date.with_month(month, resolver), self._time)

    def with_day_of_month(
        self, day: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day, resolver), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_date(self, year: int, month: int, day: int) -> LocalDateTime:
        return self._with(LocalDate(year, month, day), self._time)

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nanosecond(self, nanosecond: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nanosecond(nanosecond))

    def with_time(
        self, hour: int, minute: int, second: int = 0, nanosecond: int = 0
    ) -> LocalDateTime:
        return self._with(self._date, LocalTime(hour, minute, second, nanosecond))

    def plus(
        self, period: Period, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        """Return a copy with a period added.

        Years and months are added first, resolving an invalid day with
        the date resolver, then weeks and days, then the time part.

        Examples:
            >>> from isochron.core.period import Period
            >>> LocalDateTime(2024, 1, 31, 23).plus(Period(months=1, hours=2))
            LocalDateTime(2024, 3, 1, 1, 0, 0)
        """
        require(period, "period")
        date = self._date.plus_months(period.total_months, resolver).plus_days(
            period.total_days
        )
        return LocalDateTime._of(date, self._time)._plus_nanos(period.total_nanos)

    def minus(
        self, period: Period, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self.plus(-period, resolver)

    def plus_years(
        self, years: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self._with(self._date.plus_years(years, resolver), self._time)

    def plus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self._with(self._date.plus_months(months, resolver), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self._plus_nanos(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_nanos(nanos)

    def _plus_nanos(self, nanos: int) -> LocalDateTime:
        if nanos == 0:
            return self
        days, time = self._time.plus_with_overflow(nanos)
        return LocalDateTime._of(self._date.plus_days(days), time)

    def minus_years(
        self, years: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self.plus_years(-years, resolver)

    def minus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> LocalDateTime:
        return self.plus_months(-months, resolver)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self.plus_nanos(-nanos)

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        """Attach an offset, forming an OffsetDateTime."""
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of(self, offset)

    def at_zone(
        self, zone: TimeZone, resolver: ZoneResolver | None = None
    ) -> ZonedDateTime:
        """Attach a time-zone, resolving gaps and overlaps with resolver."""
        from isochron.core.zoned import ZonedDateTime

        return ZonedDateTime.of(self, zone, resolver)

    def to_iso_format(self) -> str:
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def _key(self) -> tuple[int, int]:
        return (self._date._days, self._time._nanos)

    def __add__(self, other: object) -> LocalDateTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> LocalDateTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        text = (
            f"LocalDateTime({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}"
        )
        if self.nanosecond:
            text += f", {self.nanosecond}"
        return text + ")"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["LocalDateTime"]
