"""Instant class representing a point on the time-line.

This module provides the Instant class, a count of seconds and
nanoseconds from 1970-01-01T00:00Z with no calendar fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from isochron._internal.constants import NANOS_PER_MILLISECOND, NANOS_PER_SECOND
from isochron._internal.validation import check_field, require

if TYPE_CHECKING:
    from isochron.core.offset_datetime import OffsetDateTime
    from isochron.core.zoned import ZonedDateTime
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.units.offset import ZoneOffset
    from isochron.zone import TimeZone


class Instant:
    """An instantaneous point on the time-line.

    The value is stored as epoch-seconds plus a nanosecond adjustment in
    the range 0-999,999,999, so the instant one nanosecond before the
    epoch is (-1 seconds, 999,999,999 nanos).

    Examples:
        >>> Instant.of_epoch_seconds(-1, 500_000_000)
        Instant(-1, 500000000)

        >>> Instant.of_epoch_seconds(0, -1)
        Instant(-1, 999999999)
    """

    __slots__ = ("_seconds", "_nanos")

    EPOCH: ClassVar[Instant]

    def __init__(self, epoch_seconds: int, nanosecond: int = 0) -> None:
        """Create an Instant from epoch-seconds and nanosecond-of-second.

        Raises:
            PreconditionError: If epoch_seconds is None.
            FieldRangeError: If nanosecond is outside 0-999,999,999.
        """
        require(epoch_seconds, "epoch_seconds")
        check_field("NanoOfSecond", nanosecond, 0, NANOS_PER_SECOND - 1)
        self._seconds: int = epoch_seconds
        self._nanos: int = nanosecond

    @classmethod
    def of_epoch_seconds(cls, epoch_seconds: int, nano_adjustment: int = 0) -> Instant:
        """Create an Instant, normalizing any nanosecond adjustment.

        Args:
            epoch_seconds: Seconds from 1970-01-01T00:00Z.
            nano_adjustment: Nanoseconds to add, may be negative or exceed
                one second.
        """
        carry, nanos = divmod(nano_adjustment, NANOS_PER_SECOND)
        return cls(epoch_seconds + carry, nanos)

    @classmethod
    def of_epoch_millis(cls, epoch_millis: int) -> Instant:
        """Create an Instant from milliseconds since the epoch."""
        seconds, millis = divmod(epoch_millis, 1000)
        return cls(seconds, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> Instant:
        """Parse offset date-time text such as "2007-12-03T10:15:30Z"."""
        from isochron.format.formatters import iso_offset_date_time

        return (formatter or iso_offset_date_time()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> Instant:
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.from_parsed(parsed).to_instant()

    @property
    def epoch_seconds(self) -> int:
        return self._seconds

    @property
    def nanosecond(self) -> int:
        return self._nanos

    def to_instant(self) -> Instant:
        return self

    def to_epoch_millis(self) -> int:
        """Return the milliseconds since the epoch, rounding towards the past."""
        return self._seconds * 1000 + self._nanos // NANOS_PER_MILLISECOND

    def plus_seconds(self, seconds: int) -> Instant:
        if seconds == 0:
            return self
        return Instant(self._seconds + seconds, self._nanos)

    def plus_nanos(self, nanos: int) -> Instant:
        if nanos == 0:
            return self
        return Instant.of_epoch_seconds(self._seconds, self._nanos + nanos)

    def minus_seconds(self, seconds: int) -> Instant:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> Instant:
        return self.plus_nanos(-nanos)

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return the OffsetDateTime for this instant at an offset."""
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of_instant(self, offset)

    def at_zone(self, zone: TimeZone) -> ZonedDateTime:
        """Return the ZonedDateTime for this instant in a time-zone."""
        from isochron.core.zoned import ZonedDateTime

        return ZonedDateTime.of_instant(self, zone)

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Instant({self._seconds}, {self._nanos})"

    def __str__(self) -> str:
        """Return the instant in UTC, e.g. "1970-01-01T00:00Z"."""
        from isochron.units.offset import ZoneOffset

        return str(self.at_offset(ZoneOffset.UTC))


Instant.EPOCH = Instant(0, 0)


__all__ = ["Instant"]
