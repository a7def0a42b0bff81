"""OffsetDate class combining a date with a UTC offset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.constants import SECONDS_PER_DAY
from isochron._internal.validation import require
from isochron.core.date import LocalDate

if TYPE_CHECKING:
    from isochron.core.offset_datetime import OffsetDateTime
    from isochron.core.period import Period
    from isochron.core.time import LocalTime
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.resolvers import DateResolver
    from isochron.units.dayofweek import DayOfWeek
    from isochron.units.offset import ZoneOffset


class OffsetDate:
    """A date with an offset from UTC, such as 2007-12-03+01:00.

    Ordering follows OffsetDateTime: by the instant at the start of the
    day, then by the local date.

    Examples:
        >>> from isochron.units.offset import ZoneOffset
        >>> str(OffsetDate(2007, 12, 3, offset=ZoneOffset.of_hours(1)))
        '2007-12-03+01:00'
    """

    __slots__ = ("_date", "_offset")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        *,
        offset: ZoneOffset | None = None,
    ) -> None:
        require(offset, "offset")
        self._date: LocalDate = LocalDate(year, month, day)
        self._offset: ZoneOffset = offset

    @classmethod
    def of(cls, date: LocalDate, offset: ZoneOffset) -> OffsetDate:
        instance = object.__new__(cls)
        instance._date = require(date, "date")
        instance._offset = require(offset, "offset")
        return instance

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> OffsetDate:
        """Parse text such as "2007-12-03+01:00", using ISO_OFFSET_DATE by default."""
        from isochron.format.formatters import iso_offset_date

        return (formatter or iso_offset_date()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> OffsetDate:
        return cls.of(parsed.resolve_local_date(), parsed.resolve_offset())

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
    def offset(self) -> ZoneOffset:
        return self._offset

    def get(self, rule: FieldRule) -> int:
        return rule.get(self)

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_epoch_seconds(self) -> int:
        """Return the epoch-seconds of the start of this day at the offset."""
        return self._date.to_epoch_day() * SECONDS_PER_DAY - self._offset.total_seconds

    def _with(self, date: LocalDate, offset: ZoneOffset) -> OffsetDate:
        if date == self._date and offset == self._offset:
            return self
        return OffsetDate.of(date, offset)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDate:
        return self._with(self._date, require(offset, "offset"))

    def with_year(self, year: int, resolver: DateResolver | None = None) -> OffsetDate:
        return self._with(self._date.with_year(year, resolver), self._offset)

    def with_month(self, month: int, resolver: DateResolver | None = None) -> OffsetDate:
        return self._with(self._date.with_month(month, resolver), self._offset)

    def with_day_of_month(
        self, day: int, resolver: DateResolver | None = None
    ) -> OffsetDate:
        return self._with(self._date.with_day_of_month(day, resolver), self._offset)

    def with_day_of_year(self, day_of_year: int) -> OffsetDate:
        return self._with(self._date.with_day_of_year(day_of_year), self._offset)

    def plus(self, period: Period, resolver: DateResolver | None = None) -> OffsetDate:
        return self._with(self._date.plus(period, resolver), self._offset)

    def minus(self, period: Period, resolver: DateResolver | None = None) -> OffsetDate:
        return self._with(self._date.minus(period, resolver), self._offset)

    def plus_years(self, years: int, resolver: DateResolver | None = None) -> OffsetDate:
        return self._with(self._date.plus_years(years, resolver), self._offset)

    def plus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> OffsetDate:
        return self._with(self._date.plus_months(months, resolver), self._offset)

    def plus_weeks(self, weeks: int) -> OffsetDate:
        return self._with(self._date.plus_weeks(weeks), self._offset)

    def plus_days(self, days: int) -> OffsetDate:
        return self._with(self._date.plus_days(days), self._offset)

    def minus_years(self, years: int, resolver: DateResolver | None = None) -> OffsetDate:
        return self.plus_years(-years, resolver)

    def minus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> OffsetDate:
        return self.plus_months(-months, resolver)

    def minus_weeks(self, weeks: int) -> OffsetDate:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> OffsetDate:
        return self.plus_days(-days)

    def at_time(self, time: LocalTime) -> OffsetDateTime:
        """Combine with a time to form an OffsetDateTime at the same offset."""
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of_date_time(self._date, time, self._offset)

    def at_midnight(self) -> OffsetDateTime:
        from isochron.core.time import LocalTime

        return self.at_time(LocalTime.MIDNIGHT)

    def compare_to(self, other: OffsetDate) -> int:
        """Compare by the instant of the start of day, then by local date."""
        require(other, "other")
        this_key = (self.to_epoch_seconds(), self._date.to_epoch_day())
        other_key = (other.to_epoch_seconds(), other._date.to_epoch_day())
        return (this_key > other_key) - (this_key < other_key)

    def is_before(self, other: OffsetDate) -> bool:
        return self.to_epoch_seconds() < require(other, "other").to_epoch_seconds()

    def is_after(self, other: OffsetDate) -> bool:
        return self.to_epoch_seconds() > require(other, "other").to_epoch_seconds()

    def equal_instant(self, other: OffsetDate) -> bool:
        return self.to_epoch_seconds() == require(other, "other").to_epoch_seconds()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDate):
            return NotImplemented
        return self._date == other._date and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDate):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDate):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDate):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDate):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._date, self._offset))

    def __repr__(self) -> str:
        return (
            f"OffsetDate({self.year}, {self.month}, {self.day}, "
            f"offset={self._offset!r})"
        )

    def __str__(self) -> str:
        return f"{self._date}{self._offset}"


__all__ = ["OffsetDate"]
