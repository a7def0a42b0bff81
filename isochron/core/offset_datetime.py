"""OffsetDateTime class combining a local date-time with a UTC offset.

This module provides the OffsetDateTime class, the central value type of
Isochron. It pairs a LocalDateTime with a fixed ZoneOffset, which is
enough to identify a single instant on the time-line while still keeping
the wall-clock fields that were supplied.

Instant conversion uses exact integer arithmetic:

    epoch_seconds = epoch_day * 86400 + second_of_day - offset_seconds

and the inverse splits ``epoch_seconds + offset_seconds`` into a day and
a second-of-day with floor division, so instants before 1970 land on the
correct earlier day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from isochron._internal.calendar import MAX_EPOCH_DAY, MIN_EPOCH_DAY
from isochron._internal.constants import NANOS_PER_SECOND, SECONDS_PER_DAY
from isochron._internal.validation import check_field, require
from isochron.core.date import LocalDate
from isochron.core.datetime import LocalDateTime
from isochron.core.instant import Instant
from isochron.core.time import LocalTime
from isochron.errors import ArithmeticRangeError
from isochron.units.offset import ZoneOffset

if TYPE_CHECKING:
    from isochron.core.offset_date import OffsetDate
    from isochron.core.offset_time import OffsetTime
    from isochron.core.period import Period
    from isochron.core.zoned import ZonedDateTime
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.resolvers import DateResolver, ZoneResolver
    from isochron.units.dayofweek import DayOfWeek
    from isochron.zone import TimeZone


class OffsetDateTime:
    """A date-time with an offset from UTC, such as 2007-12-03T10:15:30+01:00.

    OffsetDateTime is immutable. Every "with" or "plus" operation returns
    a new value; the offset is never absent and the local fields are
    always calendar-valid.

    Equality compares the local date-time and the offset, so two values
    describing the same instant with different offsets are not equal.
    Use equal_instant() to compare only the position on the time-line.

    Ordering is by instant first and by local date-time as a tie-break,
    which keeps it consistent with equality:

        2008-12-03T10:30+01:00
        2008-12-03T11:00+01:00
        2008-12-03T12:00+02:00   (same instant as the line above)
        2008-12-03T11:30+01:00

    Attributes:
        year: The year.
        month: The month (1-12).
        day: The day of the month.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: The nanosecond (0-999,999,999).
        offset: The ZoneOffset.

    Examples:
        >>> dt = OffsetDateTime(2007, 12, 3, 10, 15, 30, offset=ZoneOffset.of_hours(1))
        >>> str(dt)
        '2007-12-03T10:15:30+01:00'
        >>> dt.to_epoch_seconds()
        1196673330

        >>> OffsetDateTime.of_epoch_seconds(-86400, ZoneOffset.UTC)
        OffsetDateTime(1969, 12, 31, 0, 0, 0, offset=ZoneOffset('Z'))
    """

    __slots__ = ("_date_time", "_offset")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        offset: ZoneOffset | None = None,
    ) -> None:
        """Create an OffsetDateTime from component parts.

        Args:
            year: The year, -999,999,999 to 999,999,999.
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999,999,999).
            offset: The offset from UTC. Required.

        Raises:
            PreconditionError: If offset or a component is None.
            FieldRangeError: If a component is outside its absolute range.
            InvalidFieldError: If the day does not exist in the month.
        """
        require(offset, "offset")
        self._date_time: LocalDateTime = LocalDateTime(
            year, month, day, hour, minute, second, nanosecond
        )
        self._offset: ZoneOffset = offset

    @classmethod
    def _from_internal(
        cls, date_time: LocalDateTime, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Create an OffsetDateTime from parts already known to be valid."""
        instance = object.__new__(cls)
        instance._date_time = date_time
        instance._offset = offset
        return instance

    @classmethod
    def of(cls, date_time: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        """Attach an offset to a local date-time.

        Raises:
            PreconditionError: If either argument is None.
        """
        return cls._from_internal(
            require(date_time, "date_time"), require(offset, "offset")
        )

    @classmethod
    def of_date_time(
        cls, date: LocalDate, time: LocalTime, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Combine a date, a time and an offset."""
        return cls.of(LocalDateTime.of(date, time), offset)

    @classmethod
    def midnight(
        cls, year: int, month: int, day: int, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Return the start of the given day at the given offset.

        Examples:
            >>> str(OffsetDateTime.midnight(2024, 1, 15, ZoneOffset.UTC))
            '2024-01-15T00:00Z'
        """
        date = LocalDate(year, month, day)
        return cls.of(LocalDateTime._of(date, LocalTime.MIDNIGHT), offset)

    @classmethod
    def of_instant(cls, instant: Instant, offset: ZoneOffset) -> OffsetDateTime:
        """Return the local fields seen at an instant under an offset.

        Args:
            instant: An Instant, or any value offering to_instant().
            offset: The offset to apply.

        Raises:
            PreconditionError: If an argument is None.
            ArithmeticRangeError: If the local date falls outside the
                supported years.
        """
        require(instant, "instant")
        if not isinstance(instant, Instant):
            instant = instant.to_instant()
        return cls.of_epoch_seconds(instant.epoch_seconds, offset, instant.nanosecond)

    @classmethod
    def of_epoch_seconds(
        cls, epoch_seconds: int, offset: ZoneOffset, nanosecond: int = 0
    ) -> OffsetDateTime:
        """Return the local fields seen at an epoch-second under an offset.

        Args:
            epoch_seconds: Seconds from 1970-01-01T00:00Z.
            offset: The offset to apply.
            nanosecond: The nanosecond-of-second (0-999,999,999).

        Raises:
            PreconditionError: If an argument is None.
            FieldRangeError: If nanosecond is out of range.
            ArithmeticRangeError: If the local date falls outside the
                supported years.

        Examples:
            >>> str(OffsetDateTime.of_epoch_seconds(-1, ZoneOffset.UTC))
            '1969-12-31T23:59:59Z'
        """
        require(epoch_seconds, "epoch_seconds")
        require(offset, "offset")
        check_field("NanoOfSecond", nanosecond, 0, NANOS_PER_SECOND - 1)

        local_seconds = epoch_seconds + offset.total_seconds
        epoch_day, second_of_day = divmod(local_seconds, SECONDS_PER_DAY)
        if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
            raise ArithmeticRangeError(
                f"epoch-seconds {epoch_seconds} at offset {offset} is outside "
                "the supported range"
            )
        date = LocalDate._from_epoch_day(epoch_day)
        time = LocalTime._from_nanos(second_of_day * NANOS_PER_SECOND + nanosecond)
        return cls._from_internal(LocalDateTime._of(date, time), offset)

    @classmethod
    def parse(
        cls, text: str, formatter: DateTimeFormatter | None = None
    ) -> OffsetDateTime:
        """Parse text such as "2007-12-03T10:15:30+01:00".

        Args:
            text: The text to parse.
            formatter: The formatter to use, ISO_OFFSET_DATE_TIME by default.

        Raises:
            ParseError: If the text does not match the formatter.
            FieldRangeError: If a parsed field is out of range.
            InvalidFieldError: If the parsed fields do not form a valid date.
        """
        from isochron.format.formatters import iso_offset_date_time

        return (formatter or iso_offset_date_time()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> OffsetDateTime:
        """Build an OffsetDateTime from fields merged by a formatter."""
        return cls._from_internal(
            LocalDateTime.from_parsed(parsed), parsed.resolve_offset()
        )

    # -- Accessors ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self._date_time.year

    @property
    def month(self) -> int:
        return self._date_time.month

    @property
    def day(self) -> int:
        return self._date_time.day

    @property
    def day_of_year(self) -> int:
        return self._date_time.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date_time.day_of_week

    @property
    def hour(self) -> int:
        return self._date_time.hour

    @property
    def minute(self) -> int:
        return self._date_time.minute

    @property
    def second(self) -> int:
        return self._date_time.second

    @property
    def nanosecond(self) -> int:
        return self._date_time.nanosecond

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    def get(self, rule: FieldRule) -> int:
        """Return the value of a date or time field.

        Examples:
            >>> from isochron.fields import DAY_OF_YEAR
            >>> OffsetDateTime(2024, 2, 1, offset=ZoneOffset.UTC).get(DAY_OF_YEAR)
            32
        """
        return rule.get(self)

    def to_local_date(self) -> LocalDate:
        return self._date_time.to_local_date()

    def to_local_time(self) -> LocalTime:
        return self._date_time.to_local_time()

    def to_local_date_time(self) -> LocalDateTime:
        return self._date_time

    def to_offset_date(self) -> OffsetDate:
        from isochron.core.offset_date import OffsetDate

        return OffsetDate.of(self.to_local_date(), self._offset)

    def to_offset_time(self) -> OffsetTime:
        from isochron.core.offset_time import OffsetTime

        return OffsetTime.of(self.to_local_time(), self._offset)

    def to_epoch_seconds(self) -> int:
        """Return the seconds from 1970-01-01T00:00Z, ignoring the nanosecond."""
        date = self._date_time.to_local_date()
        time = self._date_time.to_local_time()
        return (
            date.to_epoch_day() * SECONDS_PER_DAY
            + time.second_of_day
            - self._offset.total_seconds
        )

    def to_instant(self) -> Instant:
        return Instant(self.to_epoch_seconds(), self.nanosecond)

    # -- "with" transforms --------------------------------------------------

    def _with(self, date_time: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        if date_time == self._date_time and offset == self._offset:
            return self
        return OffsetDateTime._from_internal(date_time, offset)

    def with_date_time(self, date_time: LocalDateTime) -> OffsetDateTime:
        """Return a copy with the local date-time replaced and the offset kept."""
        return self._with(require(date_time, "date_time"), self._offset)

    def with_year(
        self, year: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        """Return a copy with the year altered.

        If the day-of-month becomes invalid (February 29), it is resolved
        with resolver, or the configured default which clamps to the last
        valid day.
        """
        return self._with(self._date_time.with_year(year, resolver), self._offset)

    def with_month(
        self, month: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        """Return a copy with the month altered, resolving an invalid day."""
        return self._with(self._date_time.with_month(month, resolver), self._offset)

    def with_day_of_month(
        self, day: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        """Return a copy with the day-of-month altered.

        Without a resolver an invalid day such as February 30 raises
        InvalidFieldError.
        """
        return self._with(
            self._date_time.with_day_of_month(day, resolver), self._offset
        )

    def with_day_of_year(self, day_of_year: int) -> OffsetDateTime:
        return self._with(self._date_time.with_day_of_year(day_of_year), self._offset)

    def with_date(self, year: int, month: int, day: int) -> OffsetDateTime:
        return self._with(self._date_time.with_date(year, month, day), self._offset)

    def with_hour(self, hour: int) -> OffsetDateTime:
        return self._with(self._date_time.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> OffsetDateTime:
        return self._with(self._date_time.with_minute(minute), self._offset)

    def with_second(self, second: int) -> OffsetDateTime:
        return self._with(self._date_time.with_second(second), self._offset)

    def with_nanosecond(self, nanosecond: int) -> OffsetDateTime:
        return self._with(self._date_time.with_nanosecond(nanosecond), self._offset)

    def with_time(
        self, hour: int, minute: int, second: int = 0, nanosecond: int = 0
    ) -> OffsetDateTime:
        return self._with(
            self._date_time.with_time(hour, minute, second, nanosecond), self._offset
        )

    def adjust_date(self, adjuster: Callable[[LocalDate], LocalDate]) -> OffsetDateTime:
        """Return a copy with the date replaced by adjuster(date).

        Examples:
            >>> dt = OffsetDateTime(2024, 1, 15, 9, offset=ZoneOffset.UTC)
            >>> str(dt.adjust_date(lambda d: d.with_day_of_month(1)))
            '2024-01-01T09:00Z'
        """
        date = require(adjuster(self.to_local_date()), "adjusted date")
        return self._with(LocalDateTime._of(date, self.to_local_time()), self._offset)

    def adjust_time(self, adjuster: Callable[[LocalTime], LocalTime]) -> OffsetDateTime:
        """Return a copy with the time replaced by adjuster(time)."""
        time = require(adjuster(self.to_local_time()), "adjusted time")
        return self._with(LocalDateTime._of(self.to_local_date(), time), self._offset)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
        offset: ZoneOffset | None = None,
    ) -> OffsetDateTime:
        """Return a copy with the given fields replaced, validated strictly.

        Replacing the offset keeps the local fields; see
        with_offset_same_instant() to keep the instant instead.
        """
        return self._with(
            self._date_time.replace(year, month, day, hour, minute, second, nanosecond),
            offset if offset is not None else self._offset,
        )

    # -- Period arithmetic --------------------------------------------------

    def plus(
        self, period: Period, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        """Return a copy with a period added to the local date-time.

        The offset does not take part in the calculation and is the same
        in the result.

        Examples:
            >>> from isochron.core.period import Period
            >>> dt = OffsetDateTime(2024, 1, 31, offset=ZoneOffset.UTC)
            >>> str(dt.plus(Period(months=1)))
            '2024-02-29T00:00Z'
        """
        return self._with(self._date_time.plus(period, resolver), self._offset)

    def minus(
        self, period: Period, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        return self._with(self._date_time.minus(period, resolver), self._offset)

    def plus_years(
        self, years: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        return self._with(self._date_time.plus_years(years, resolver), self._offset)

    def plus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        return self._with(self._date_time.plus_months(months, resolver), self._offset)

    def plus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_weeks(weeks), self._offset)

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_days(days), self._offset)

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_nanos(nanos), self._offset)

    def minus_years(
        self, years: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        return self._with(self._date_time.minus_years(years, resolver), self._offset)

    def minus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> OffsetDateTime:
        return self._with(self._date_time.minus_months(months, resolver), self._offset)

    def minus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_weeks(weeks), self._offset)

    def minus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_days(days), self._offset)

    def minus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_hours(hours), self._offset)

    def minus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_minutes(minutes), self._offset)

    def minus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_seconds(seconds), self._offset)

    def minus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_nanos(nanos), self._offset)

    # -- Offset and zone changes ---------------------------------------------

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return a copy with a different offset and the same local fields.

        The result represents a different instant unless the offsets
        are equal.

        Examples:
            >>> dt = OffsetDateTime(2008, 12, 3, 11, 30, offset=ZoneOffset.of_hours(2))
            >>> str(dt.with_offset_same_local(ZoneOffset.of_hours(3)))
            '2008-12-03T11:30+03:00'
        """
        return self._with(self._date_time, require(offset, "offset"))

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return a copy with a different offset and the same instant.

        The local date-time is moved by the difference between the
        offsets.

        Examples:
            >>> dt = OffsetDateTime(2008, 12, 3, 11, 30, offset=ZoneOffset.of_hours(2))
            >>> str(dt.with_offset_same_instant(ZoneOffset.of_hours(3)))
            '2008-12-03T12:30+03:00'
        """
        require(offset, "offset")
        if offset == self._offset:
            return self
        difference = offset.total_seconds - self._offset.total_seconds
        return OffsetDateTime._from_internal(
            self._date_time.plus_seconds(difference), offset
        )

    def at_zone_same_instant(self, zone: TimeZone) -> ZonedDateTime:
        """Return the ZonedDateTime at the same instant in a time-zone.

        The local fields are recomputed from the instant, so gaps and
        overlaps never arise.
        """
        from isochron.core.zoned import ZonedDateTime

        return ZonedDateTime.of_instant(self, require(zone, "zone"))

    def at_zone_similar_local(
        self, zone: TimeZone, resolver: ZoneResolver | None = None
    ) -> ZonedDateTime:
        """Return a ZonedDateTime keeping the local fields where possible.

        When the local date-time falls in a gap or an overlap of the zone,
        resolver chooses the result. The default comes from settings and
        is post_transition, which moves a gap to its end and takes the
        later offset in an overlap.
        """
        from isochron.core.zoned import ZonedDateTime

        return ZonedDateTime.of(self._date_time, require(zone, "zone"), resolver)

    # -- Comparison ---------------------------------------------------------

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_seconds(), self.nanosecond)

    def compare_to(self, other: OffsetDateTime) -> int:
        """Compare by instant, then by local date-time.

        Returns:
            -1, 0 or 1 as this value is less than, equal to or greater
            than other.
        """
        require(other, "other")
        if self._offset == other._offset:
            return _compare(self._date_time, other._date_time)
        result = _compare(self._instant_key(), other._instant_key())
        if result == 0:
            result = _compare(self._date_time, other._date_time)
        return result

    def is_before(self, other: OffsetDateTime) -> bool:
        """Return True if this instant is before the instant of other."""
        return self._instant_key() < require(other, "other")._instant_key()

    def is_after(self, other: OffsetDateTime) -> bool:
        """Return True if this instant is after the instant of other."""
        return self._instant_key() > require(other, "other")._instant_key()

    def equal_instant(self, other: OffsetDateTime) -> bool:
        """Return True if both values represent the same instant.

        Examples:
            >>> a = OffsetDateTime(2008, 12, 3, 11, offset=ZoneOffset.of_hours(1))
            >>> b = OffsetDateTime(2008, 12, 3, 12, offset=ZoneOffset.of_hours(2))
            >>> a.equal_instant(b), a == b
            (True, False)
        """
        return self._instant_key() == require(other, "other")._instant_key()

    def __add__(self, other: object) -> OffsetDateTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> OffsetDateTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._date_time == other._date_time and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._date_time, self._offset))

    def __repr__(self) -> str:
        dt = self._date_time
        text = (
            f"OffsetDateTime({dt.year}, {dt.month}, {dt.day}, "
            f"{dt.hour}, {dt.minute}, {dt.second}"
        )
        if dt.nanosecond:
            text += f", {dt.nanosecond}"
        return text + f", offset={self._offset!r})"

    def __str__(self) -> str:
        """Return the shortest ISO 8601 form, e.g. '2007-12-03T10:15:30+01:00'."""
        return f"{self._date_time}{self._offset}"


def _compare(a: object, b: object) -> int:
    if a < b:  # type: ignore[operator]
        return -1
    if a > b:  # type: ignore[operator]
        return 1
    return 0


__all__ = ["OffsetDateTime"]
