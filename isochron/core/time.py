"""LocalTime class representing a time of day.

This module provides the LocalTime class for representing time-of-day
values with nanosecond precision and no offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from isochron._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from isochron._internal.validation import check_field, require

if TYPE_CHECKING:
    from isochron.core.period import Period
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed


class LocalTime:
    """A time of day with nanosecond precision.

    LocalTime represents the time portion of a day, from midnight
    (00:00) to just before the next midnight (23:59:59.999999999).
    It does not include any date or offset information.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond component (0-999999999).

    Examples:
        >>> t = LocalTime(14, 30, 45)
        >>> t.minute
        30
        >>> str(LocalTime(12, 0, 0, 500_000_000))
        '12:00:00.500'
    """

    __slots__ = ("_nanos",)

    MIDNIGHT: ClassVar[LocalTime]
    NOON: ClassVar[LocalTime]

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalTime from component parts.

        Raises:
            PreconditionError: If a component is None.
            FieldRangeError: If any component is out of range.
        """
        check_field("HourOfDay", hour, 0, 23)
        check_field("MinuteOfHour", minute, 0, 59)
        check_field("SecondOfMinute", second, 0, 59)
        check_field("NanoOfSecond", nanosecond, 0, 999_999_999)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        This is an internal factory method that bypasses validation
        for use when the value is known to be valid.
        """
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        Raises:
            FieldRangeError: If nano_of_day is outside a single day.
        """
        check_field("NanoOfDay", nano_of_day, 0, NANOS_PER_DAY - 1)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def of_second_of_day(cls, second_of_day: int, nanosecond: int = 0) -> LocalTime:
        """Create a LocalTime from seconds since midnight.

        Examples:
            >>> LocalTime.of_second_of_day(3661)
            LocalTime(1, 1, 1)
        """
        check_field("SecondOfDay", second_of_day, 0, SECONDS_PER_DAY - 1)
        check_field("NanoOfSecond", nanosecond, 0, 999_999_999)
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND + nanosecond)

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> LocalTime:
        """Parse text such as "10:15:30" into a LocalTime.

        Args:
            text: The text to parse.
            formatter: The formatter to use, ISO_LOCAL_TIME by default.
        """
        from isochron.format.formatters import iso_local_time

        return (formatter or iso_local_time()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> LocalTime:
        """Build a LocalTime from fields merged by a formatter."""
        return parsed.resolve_local_time()

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos // NANOS_PER_MINUTE) % 60

    @property
    def second(self) -> int:
        return (self._nanos // NANOS_PER_SECOND) % 60

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    @property
    def nano_of_day(self) -> int:
        """Return the total nanoseconds since midnight."""
        return self._nanos

    @property
    def second_of_day(self) -> int:
        """Return the whole seconds since midnight."""
        return self._nanos // NANOS_PER_SECOND

    def to_local_time(self) -> LocalTime:
        return self

    def get(self, rule: FieldRule) -> int:
        """Return the value of a time field.

        Raises:
            UnsupportedFieldError: If rule is a date field.
        """
        return rule.get(self)

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> LocalTime:
        """Return a new LocalTime with the given components replaced.

        Examples:
            >>> LocalTime(14, 30).replace(minute=0)
            LocalTime(14, 0, 0)
        """
        return LocalTime(
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            nanosecond if nanosecond is not None else self.nanosecond,
        )

    def with_hour(self, hour: int) -> LocalTime:
        return self.replace(hour=hour)

    def with_minute(self, minute: int) -> LocalTime:
        return self.replace(minute=minute)

    def with_second(self, second: int) -> LocalTime:
        return self.replace(second=second)

    def with_nanosecond(self, nanosecond: int) -> LocalTime:
        return self.replace(nanosecond=nanosecond)

    def plus_with_overflow(self, nanos: int) -> tuple[int, LocalTime]:
        """Add nanoseconds and report how many days were crossed.

        Returns:
            Tuple of (days, time) where days is negative when the
            result wrapped backwards past midnight.

        Examples:
            >>> LocalTime(23, 0).plus_with_overflow(2 * 3_600_000_000_000)
            (1, LocalTime(1, 0, 0))
        """
        days, nanos = divmod(self._nanos + nanos, NANOS_PER_DAY)
        return days, LocalTime._from_nanos(nanos)

    def plus(self, period: Period) -> LocalTime:
        """Return a copy with the time part of a period added, wrapping at midnight.

        Raises:
            ValueError: If the period has date components.
        """
        require(period, "period")
        if period.total_months != 0 or period.total_days != 0:
            raise ValueError(f"cannot add date components of {period} to a time")
        return self.plus_nanos(period.total_nanos)

    def minus(self, period: Period) -> LocalTime:
        return self.plus(-period)

    def plus_hours(self, hours: int) -> LocalTime:
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy with nanoseconds added, wrapping around midnight."""
        if nanos == 0:
            return self
        return self.plus_with_overflow(nanos)[1]

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-nanos)

    def to_iso_format(self) -> str:
        """Return the shortest ISO 8601 form that keeps the full value.

        Seconds are omitted when they and the fraction are zero; the
        fraction is printed in groups of three digits.

        Examples:
            >>> LocalTime(10, 15).to_iso_format()
            '10:15'
            >>> LocalTime(10, 15, 30, 1000).to_iso_format()
            '10:15:30.000001'
        """
        text = f"{self.hour:02d}:{self.minute:02d}"
        second = self.second
        nano = self.nanosecond
        if second > 0 or nano > 0:
            text += f":{second:02d}"
            if nano > 0:
                if nano % 1_000_000 == 0:
                    text += f".{nano // 1_000_000:03d}"
                elif nano % 1_000 == 0:
                    text += f".{nano // 1_000:06d}"
                else:
                    text += f".{nano:09d}"
        return text

    def __add__(self, other: object) -> LocalTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> LocalTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'LocalTime(14, 30, 45)'; the nanosecond is shown
            only when non-zero.
        """
        text = f"LocalTime({self.hour}, {self.minute}, {self.second}"
        if self.nanosecond:
            text += f", {self.nanosecond}"
        return text + ")"

    def __str__(self) -> str:
        return self.to_iso_format()


LocalTime.MIDNIGHT = LocalTime._from_nanos(0)
LocalTime.NOON = LocalTime._from_nanos(12 * NANOS_PER_HOUR)


__all__ = ["LocalTime"]
