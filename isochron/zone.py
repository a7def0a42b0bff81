"""Time-zone rules on top of the IANA database.

This module provides TimeZone, which answers two questions for a zone:
which offset applies at an instant, and which offsets are valid for a
local date-time. The zone data itself is read by the standard library
``zoneinfo`` module (backed by the ``tzdata`` package where the system
has no database); nothing here parses it.

A local date-time is one of:
    - normal: exactly one valid offset
    - in a gap: no valid offset (clocks jumped forward past it)
    - in an overlap: two valid offsets (clocks were set back over it)

Gaps and overlaps are reported as a ZoneOffsetTransition and are turned
into a concrete OffsetDateTime by a zone resolver.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from isochron._internal.calendar import epoch_day_to_ymd, ymd_to_epoch_day
from isochron._internal.constants import DAYS_PER_CYCLE, SECONDS_PER_DAY
from isochron._internal.validation import require
from isochron.errors import TimezoneError
from isochron.units.offset import ZoneOffset

if TYPE_CHECKING:
    from isochron.core.datetime import LocalDateTime
    from isochron.core.instant import Instant
    from isochron.core.offset_datetime import OffsetDateTime

# zoneinfo works on datetime.datetime, which only spans years 1-9999.
# Other years are moved by whole 400 year cycles, which repeat the
# calendar exactly, into the supported window before querying.
_LOW_YEAR = 2
_HIGH_YEAR = 9998
_SECONDS_PER_CYCLE = DAYS_PER_CYCLE * SECONDS_PER_DAY
_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def _cycle_shift(year: int) -> int:
    """Return how many 400 year cycles to add to bring year into range."""
    if year < _LOW_YEAR:
        return -((year - _LOW_YEAR) // 400)
    if year > _HIGH_YEAR:
        return -((year - _HIGH_YEAR + 399) // 400)
    return 0


def _to_offset(delta: _datetime.timedelta | None) -> ZoneOffset:
    seconds = int(delta.total_seconds()) if delta is not None else 0
    return ZoneOffset.of_total_seconds(seconds)


class ZoneOffsetTransition:
    """A change of offset in a time-zone at a given instant.

    Attributes:
        epoch_seconds: The instant of the transition.
        offset_before: The offset in force before the transition.
        offset_after: The offset in force from the transition onwards.
    """

    __slots__ = ("_epoch_seconds", "_offset_before", "_offset_after")

    def __init__(
        self, epoch_seconds: int, offset_before: ZoneOffset, offset_after: ZoneOffset
    ) -> None:
        self._epoch_seconds = epoch_seconds
        self._offset_before = offset_before
        self._offset_after = offset_after

    @property
    def epoch_seconds(self) -> int:
        return self._epoch_seconds

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    @property
    def is_gap(self) -> bool:
        return self._offset_after.total_seconds > self._offset_before.total_seconds

    @property
    def is_overlap(self) -> bool:
        return self._offset_after.total_seconds < self._offset_before.total_seconds

    @property
    def length_seconds(self) -> int:
        """Return the size of the gap (positive) or overlap (negative)."""
        return self._offset_after.total_seconds - self._offset_before.total_seconds

    @property
    def date_time_before(self) -> OffsetDateTime:
        """Return the transition instant as seen with the offset before."""
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of_epoch_seconds(self._epoch_seconds, self._offset_before)

    @property
    def date_time_after(self) -> OffsetDateTime:
        """Return the transition instant as seen with the offset after."""
        from isochron.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of_epoch_seconds(self._epoch_seconds, self._offset_after)

    def to_instant(self) -> Instant:
        from isochron.core.instant import Instant

        return Instant(self._epoch_seconds)

    def is_valid_offset(self, offset: ZoneOffset) -> bool:
        """Return True if offset is valid for local times inside this transition.

        No offset is valid in a gap; both offsets are valid in an overlap.
        """
        if self.is_gap:
            return False
        return offset == self._offset_before or offset == self._offset_after

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return (
            self._epoch_seconds == other._epoch_seconds
            and self._offset_before == other._offset_before
            and self._offset_after == other._offset_after
        )

    def __hash__(self) -> int:
        return hash((self._epoch_seconds, self._offset_before, self._offset_after))

    def __repr__(self) -> str:
        kind = "Gap" if self.is_gap else "Overlap"
        return (
            f"ZoneOffsetTransition[{kind} at {self.date_time_before} "
            f"to {self._offset_after}]"
        )


class ZoneOffsetInfo:
    """The offsets valid for one local date-time in a zone.

    Exactly one of ``offset`` and ``transition`` is set.
    """

    __slots__ = ("_local_date_time", "_offset", "_transition")

    def __init__(
        self,
        local_date_time: LocalDateTime,
        offset: ZoneOffset | None,
        transition: ZoneOffsetTransition | None,
    ) -> None:
        self._local_date_time = local_date_time
        self._offset = offset
        self._transition = transition

    @property
    def local_date_time(self) -> LocalDateTime:
        return self._local_date_time

    @property
    def offset(self) -> ZoneOffset | None:
        """Return the single valid offset, or None at a transition."""
        return self._offset

    @property
    def transition(self) -> ZoneOffsetTransition | None:
        return self._transition

    @property
    def is_transition(self) -> bool:
        return self._transition is not None

    @property
    def is_gap(self) -> bool:
        return self._transition is not None and self._transition.is_gap

    @property
    def is_overlap(self) -> bool:
        return self._transition is not None and self._transition.is_overlap

    @property
    def valid_offsets(self) -> tuple[ZoneOffset, ...]:
        """Return the valid offsets: one normally, none in a gap, two in an overlap."""
        if self._transition is None:
            return (self._offset,)
        if self._transition.is_gap:
            return ()
        return (self._transition.offset_before, self._transition.offset_after)

    def is_valid_offset(self, offset: ZoneOffset) -> bool:
        return offset in self.valid_offsets

    def __repr__(self) -> str:
        if self._transition is None:
            return f"ZoneOffsetInfo({self._local_date_time}, {self._offset})"
        return f"ZoneOffsetInfo({self._local_date_time}, {self._transition!r})"


class TimeZone:
    """A time-zone: either a fixed offset or a region of the IANA database.

    Examples:
        >>> TimeZone.of("Europe/Paris").id
        'Europe/Paris'
        >>> TimeZone.of("UTC+01:00").fixed_offset
        ZoneOffset('+01:00')
        >>> TimeZone.of("Mars/Olympus")
        Traceback (most recent call last):
        ...
        TimezoneError: unknown time-zone id: 'Mars/Olympus'
    """

    __slots__ = ("_id", "_fixed", "_zoneinfo")

    UTC: ClassVar[TimeZone]

    def __init__(
        self,
        zone_id: str,
        fixed: ZoneOffset | None = None,
        zoneinfo: ZoneInfo | None = None,
    ) -> None:
        self._id = zone_id
        self._fixed = fixed
        self._zoneinfo = zoneinfo

    @classmethod
    def of(cls, zone_id: str) -> TimeZone:
        """Look up a time-zone by identifier.

        Supported identifiers:
            - "UTC", "GMT", "Z": the UTC zone
            - "UTC+01:00", "GMT-05:30", "+02:00": fixed offsets
            - "Europe/London" and other IANA region ids

        Raises:
            PreconditionError: If zone_id is None.
            TimezoneError: If the identifier is malformed or unknown.
        """
        require(zone_id, "zone_id")
        if zone_id in ("UTC", "GMT", "Z"):
            return cls.UTC
        for prefix in ("UTC", "GMT"):
            if zone_id.startswith(prefix) and zone_id[3:4] in ("+", "-"):
                return cls.of_offset(ZoneOffset.of(zone_id[3:]))
        if zone_id[:1] in ("+", "-"):
            return cls.of_offset(ZoneOffset.of(zone_id))

        try:
            info = ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise TimezoneError(f"unknown time-zone id: {zone_id!r}") from exc
        return cls(zone_id, zoneinfo=info)

    @classmethod
    def of_offset(cls, offset: ZoneOffset) -> TimeZone:
        """Return the fixed zone for an offset, with id "UTC" or "UTC+hh:mm"."""
        require(offset, "offset")
        if offset.is_utc:
            return cls.UTC
        return cls(f"UTC{offset.id}", fixed=offset)

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_fixed(self) -> bool:
        return self._fixed is not None

    @property
    def fixed_offset(self) -> ZoneOffset | None:
        """Return the offset of a fixed zone, or None for a region."""
        return self._fixed

    def offset_at_epoch_seconds(self, epoch_seconds: int) -> ZoneOffset:
        """Return the offset in force at an instant."""
        if self._fixed is not None:
            return self._fixed
        year = epoch_day_to_ymd(epoch_seconds // SECONDS_PER_DAY)[0]
        shift = _cycle_shift(year) * _SECONDS_PER_CYCLE
        return self._offset_at_shifted(epoch_seconds + shift)

    def offset_at(self, instant: Instant) -> ZoneOffset:
        return self.offset_at_epoch_seconds(instant.to_instant().epoch_seconds)

    def _offset_at_shifted(self, epoch_seconds: int) -> ZoneOffset:
        utc = _UNIX_EPOCH + _datetime.timedelta(seconds=epoch_seconds)
        return _to_offset(utc.astimezone(self._zoneinfo).utcoffset())

    def offset_info(self, local_date_time: LocalDateTime) -> ZoneOffsetInfo:
        """Return the offsets valid for a local date-time.

        Examples:
            >>> from isochron.core.datetime import LocalDateTime
            >>> paris = TimeZone.of("Europe/Paris")
            >>> paris.offset_info(LocalDateTime(2024, 3, 31, 2, 30)).is_gap
            True
        """
        require(local_date_time, "local_date_time")
        if self._fixed is not None:
            return ZoneOffsetInfo(local_date_time, self._fixed, None)

        cycles = _cycle_shift(local_date_time.year)
        year = local_date_time.year + cycles * 400
        naive = _datetime.datetime(
            year,
            local_date_time.month,
            local_date_time.day,
            local_date_time.hour,
            local_date_time.minute,
            local_date_time.second,
        )
        earlier = _to_offset(naive.replace(tzinfo=self._zoneinfo, fold=0).utcoffset())
        later = _to_offset(naive.replace(tzinfo=self._zoneinfo, fold=1).utcoffset())
        if earlier == later:
            return ZoneOffsetInfo(local_date_time, earlier, None)

        # fold=0 gives the offset before the transition, fold=1 the one after
        local_seconds = (
            ymd_to_epoch_day(year, local_date_time.month, local_date_time.day)
            * SECONDS_PER_DAY
            + local_date_time.to_local_time().second_of_day
        )
        low = local_seconds - max(earlier.total_seconds, later.total_seconds)
        high = local_seconds - min(earlier.total_seconds, later.total_seconds)
        while high - low > 1:
            middle = (low + high) // 2
            if self._offset_at_shifted(middle) == later:
                high = middle
            else:
                low = middle

        transition = ZoneOffsetTransition(
            high - cycles * _SECONDS_PER_CYCLE, earlier, later
        )
        return ZoneOffsetInfo(local_date_time, None, transition)

    def is_valid_offset(self, local_date_time: LocalDateTime, offset: ZoneOffset) -> bool:
        """Return True if offset is valid for the local date-time in this zone."""
        return self.offset_info(local_date_time).is_valid_offset(offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"TimeZone({self._id!r})"

    def __str__(self) -> str:
        return self._id


TimeZone.UTC = TimeZone("UTC", fixed=ZoneOffset.UTC)


__all__ = [
    "TimeZone",
    "ZoneOffsetInfo",
    "ZoneOffsetTransition",
]
