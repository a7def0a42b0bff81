"""OffsetTime class combining a time of day with a UTC offset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from isochron._internal.validation import require
from isochron.core.time import LocalTime

if TYPE_CHECKING:
    from isochron.core.date import LocalDate
    from isochron.core.offset_datetime import OffsetDateTime
    from isochron.core.period import Period
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.units.offset import ZoneOffset


class OffsetTime:
    """A time of day with an offset from UTC, such as 10:15:30+01:00.

    Time arithmetic wraps around midnight. Ordering compares the time
    converted to UTC first and the local time as a tie-break.

    Examples:
        >>> from isochron.units.offset import ZoneOffset
        >>> t = OffsetTime(10, 15, offset=ZoneOffset.of_hours(1))
        >>> str(t.with_offset_same_instant(ZoneOffset.UTC))
        '09:15Z'
    """

    __slots__ = ("_time", "_offset")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        offset: ZoneOffset | None = None,
    ) -> None:
        require(offset, "offset")
        self._time: LocalTime = LocalTime(hour, minute, second, nanosecond)
        self._offset: ZoneOffset = offset

    @classmethod
    def of(cls, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        instance = object.__new__(cls)
        instance._time = require(time, "time")
        instance._offset = require(offset, "offset")
        return instance

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> OffsetTime:
        """Parse text such as "10:15:30+01:00", using ISO_OFFSET_TIME by default."""
        from isochron.format.formatters import iso_offset_time

        return (formatter or iso_offset_time()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> OffsetTime:
        return cls.of(parsed.resolve_local_time(), parsed.resolve_offset())

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

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    def get(self, rule: FieldRule) -> int:
        return rule.get(self)

    def to_local_time(self) -> LocalTime:
        return self._time

    def _utc_nanos(self) -> int:
        return self._time.nano_of_day - self._offset.total_seconds * NANOS_PER_SECOND

    def _with(self, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        if time == self._time and offset == self._offset:
            return self
        return OffsetTime.of(time, offset)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetTime:
        return self._with(self._time, require(offset, "offset"))

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetTime:
        """Return a copy at another offset, moving the local time by the difference."""
        require(offset, "offset")
        difference = offset.total_seconds - self._offset.total_seconds
        return self._with(self._time.plus_seconds(difference), offset)

    def with_hour(self, hour: int) -> OffsetTime:
        return self._with(self._time.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> OffsetTime:
        return self._with(self._time.with_minute(minute), self._offset)

    def with_second(self, second: int) -> OffsetTime:
        return self._with(self._time.with_second(second), self._offset)

    def with_nanosecond(self, nanosecond: int) -> OffsetTime:
        return self._with(self._time.with_nanosecond(nanosecond), self._offset)

    def plus(self, period: Period) -> OffsetTime:
        return self._with(self._time.plus(period), self._offset)

    def minus(self, period: Period) -> OffsetTime:
        return self._with(self._time.minus(period), self._offset)

    def plus_hours(self, hours: int) -> OffsetTime:
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> OffsetTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> OffsetTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> OffsetTime:
        return self._with(self._time.plus_nanos(nanos), self._offset)

    def minus_hours(self, hours: int) -> OffsetTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> OffsetTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> OffsetTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> OffsetTime:
        return self.plus_nanos(-nanos)

    def at_date(self, date: LocalDate) -> OffsetDateTime:
        """Combine with a date to form an OffsetDateTime at the same offset."""
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of_date_time(date, self._time, self._offset)

    def compare_to(self, other: OffsetTime) -> int:
        """Compare by the equivalent UTC time, then by local time."""
        require(other, "other")
        this_key = (self._utc_nanos(), self._time.nano_of_day)
        other_key = (other._utc_nanos(), other._time.nano_of_day)
        return (this_key > other_key) - (this_key < other_key)

    def is_before(self, other: OffsetTime) -> bool:
        return self._utc_nanos() < require(other, "other")._utc_nanos()

    def is_after(self, other: OffsetTime) -> bool:
        return self._utc_nanos() > require(other, "other")._utc_nanos()

    def equal_instant(self, other: OffsetTime) -> bool:
        return self._utc_nanos() == require(other, "other")._utc_nanos()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._time == other._time and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._time, self._offset))

    def __repr__(self) -> str:
        text = f"OffsetTime({self.hour}, {self.minute}, {self.second}"
        if self.nanosecond:
            text += f", {self.nanosecond}"
        return text + f", offset={self._offset!r})"

    def __str__(self) -> str:
        return f"{self._time}{self._offset}"


__all__ = ["OffsetTime"]
