"""ZonedDateTime class combining an offset date-time with a time-zone.

Attaching a zone to a local date-time needs a choice when the local
time does not exist (a gap) or exists twice (an overlap). That choice
is made by a zone resolver; see isochron.resolvers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.constants import NANOS_PER_SECOND
from isochron._internal.validation import require
from isochron.config.logging import get_logger
from isochron.core.datetime import LocalDateTime
from isochron.core.instant import Instant
from isochron.core.offset_datetime import OffsetDateTime
from isochron.errors import ZoneResolutionError
from isochron.zone import TimeZone

if TYPE_CHECKING:
    from isochron.core.date import LocalDate
    from isochron.core.period import Period
    from isochron.core.time import LocalTime
    from isochron.fields import FieldRule
    from isochron.format.formatter import DateTimeFormatter
    from isochron.format.parsed import Parsed
    from isochron.resolvers import DateResolver, ZoneResolver
    from isochron.units.dayofweek import DayOfWeek
    from isochron.units.offset import ZoneOffset

logger = get_logger(__name__)


class ZonedDateTime:
    """A date-time with a time-zone, such as 2007-12-03T10:15:30+01:00[Europe/Paris].

    The offset is always one that is valid for the local date-time in
    the zone. Date arithmetic runs on the local time-line and keeps the
    offset where it can; time arithmetic runs on the instant time-line.

    Examples:
        >>> paris = TimeZone.of("Europe/Paris")
        >>> zdt = ZonedDateTime.of(LocalDateTime(2024, 3, 31, 2, 30), paris)
        >>> str(zdt)
        '2024-03-31T03:00+02:00[Europe/Paris]'
    """

    __slots__ = ("_date_time", "_zone")

    def __init__(self, date_time: OffsetDateTime, zone: TimeZone) -> None:
        """Create a ZonedDateTime from an offset date-time already valid in zone.

        Raises:
            PreconditionError: If an argument is None.
            ZoneResolutionError: If the offset is not valid for the local
                date-time in the zone.
        """
        require(date_time, "date_time")
        require(zone, "zone")
        if not zone.is_valid_offset(date_time.to_local_date_time(), date_time.offset):
            raise ZoneResolutionError(
                f"offset {date_time.offset} is not valid for {date_time.to_local_date_time()} "
                f"in time-zone {zone.id}"
            )
        self._date_time: OffsetDateTime = date_time
        self._zone: TimeZone = zone

    @classmethod
    def _from_internal(cls, date_time: OffsetDateTime, zone: TimeZone) -> ZonedDateTime:
        instance = object.__new__(cls)
        instance._date_time = date_time
        instance._zone = zone
        return instance

    @classmethod
    def of(
        cls,
        local_date_time: LocalDateTime,
        zone: TimeZone,
        resolver: ZoneResolver | None = None,
    ) -> ZonedDateTime:
        """Attach a zone to a local date-time.

        Args:
            local_date_time: The wall-clock date-time.
            zone: The time-zone.
            resolver: Chooses the result in a gap or overlap. Defaults to
                the resolver named in settings (post_transition).

        Raises:
            PreconditionError: If an argument is None.
            ZoneResolutionError: If the resolver rejects the local
                date-time or returns an offset invalid in the zone.
        """
        require(local_date_time, "local_date_time")
        require(zone, "zone")
        return cls._from_internal(_resolve(local_date_time, zone, resolver), zone)

    @classmethod
    def of_instant(cls, instant: Instant, zone: TimeZone) -> ZonedDateTime:
        """Return the date-time seen in a zone at an instant.

        Args:
            instant: An Instant, or any value offering to_instant().
            zone: The time-zone.
        """
        require(instant, "instant")
        require(zone, "zone")
        instant = instant.to_instant()
        offset = zone.offset_at_epoch_seconds(instant.epoch_seconds)
        return cls._from_internal(OffsetDateTime.of_instant(instant, offset), zone)

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> ZonedDateTime:
        """Parse text such as "2007-12-03T10:15:30+01:00[Europe/Paris]"."""
        from isochron.format.formatters import iso_zoned_date_time

        return (formatter or iso_zoned_date_time()).parse(text, cls)

    @classmethod
    def from_parsed(cls, parsed: Parsed) -> ZonedDateTime:
        """Build a ZonedDateTime from fields merged by a formatter.

        Without a parsed zone the offset is used as a fixed zone. Without a
        parsed offset the local date-time is resolved in the zone.

        Raises:
            ZoneResolutionError: If the parsed offset is not valid in the
                parsed zone for the local date-time.
        """
        local = LocalDateTime.from_parsed(parsed)
        offset = parsed.offset
        zone = parsed.zone
        if zone is None:
            zone = TimeZone.of_offset(parsed.resolve_offset())
        if offset is None:
            return cls.of(local, zone)
        if not zone.is_valid_offset(local, offset):
            raise ZoneResolutionError(
                f"offset {offset} is not valid for {local} in time-zone {zone.id}"
            )
        return cls._from_internal(OffsetDateTime.of(local, offset), zone)

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
        return self._date_time.offset

    @property
    def zone(self) -> TimeZone:
        return self._zone

    def get(self, rule: FieldRule) -> int:
        return rule.get(self)

    def to_local_date(self) -> LocalDate:
        return self._date_time.to_local_date()

    def to_local_time(self) -> LocalTime:
        return self._date_time.to_local_time()

    def to_local_date_time(self) -> LocalDateTime:
        return self._date_time.to_local_date_time()

    def to_offset_date_time(self) -> OffsetDateTime:
        return self._date_time

    def to_epoch_seconds(self) -> int:
        return self._date_time.to_epoch_seconds()

    def to_instant(self) -> Instant:
        return self._date_time.to_instant()

    # -- Zone and offset changes ----------------------------------------------

    def with_earlier_offset_at_overlap(self) -> ZonedDateTime:
        """Return a copy using the earlier offset if the local time is in an overlap."""
        info = self._zone.offset_info(self.to_local_date_time())
        if not info.is_overlap:
            return self
        return self._with_offset(info.transition.offset_before)

    def with_later_offset_at_overlap(self) -> ZonedDateTime:
        """Return a copy using the later offset if the local time is in an overlap."""
        info = self._zone.offset_info(self.to_local_date_time())
        if not info.is_overlap:
            return self
        return self._with_offset(info.transition.offset_after)

    def _with_offset(self, offset: ZoneOffset) -> ZonedDateTime:
        if offset == self.offset:
            return self
        return ZonedDateTime._from_internal(
            self._date_time.with_offset_same_local(offset), self._zone
        )

    def with_zone_same_instant(self, zone: TimeZone) -> ZonedDateTime:
        """Return the same instant seen in another zone."""
        require(zone, "zone")
        if zone == self._zone:
            return self
        return ZonedDateTime.of_instant(self._date_time, zone)

    def with_zone_same_local(
        self, zone: TimeZone, resolver: ZoneResolver | None = None
    ) -> ZonedDateTime:
        """Return the same local date-time in another zone, keeping the offset if valid."""
        from isochron.resolvers import retain_offset

        require(zone, "zone")
        if zone == self._zone:
            return self
        return ZonedDateTime.of(
            self.to_local_date_time(), zone, resolver or retain_offset(self.offset)
        )

    def with_fixed_offset_zone(self) -> ZonedDateTime:
        """Return a copy whose zone is the fixed zone of the current offset."""
        zone = TimeZone.of_offset(self.offset)
        if zone == self._zone:
            return self
        return ZonedDateTime._from_internal(self._date_time, zone)

    # -- Arithmetic ---------------------------------------------------------

    def _with_local(
        self, local_date_time: LocalDateTime, resolver: ZoneResolver | None = None
    ) -> ZonedDateTime:
        from isochron.resolvers import retain_offset

        if local_date_time == self.to_local_date_time():
            return self
        return ZonedDateTime.of(
            local_date_time, self._zone, resolver or retain_offset(self.offset)
        )

    def _with_instant(self, instant: Instant) -> ZonedDateTime:
        return ZonedDateTime.of_instant(instant, self._zone)

    def with_year(self, year: int, resolver: DateResolver | None = None) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().with_year(year, resolver))

    def with_month(self, month: int, resolver: DateResolver | None = None) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().with_month(month, resolver))

    def with_day_of_month(
        self, day: int, resolver: DateResolver | None = None
    ) -> ZonedDateTime:
        return self._with_local(
            self.to_local_date_time().with_day_of_month(day, resolver)
        )

    def with_hour(self, hour: int) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().with_hour(hour))

    def with_minute(self, minute: int) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().with_minute(minute))

    def with_second(self, second: int) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().with_second(second))

    def with_nanosecond(self, nanosecond: int) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().with_nanosecond(nanosecond))

    def plus(self, period: Period, resolver: DateResolver | None = None) -> ZonedDateTime:
        """Return a copy with a period added.

        The date part is added to the local date-time and the time part
        to the instant, so adding a day across a daylight-saving change
        keeps the wall-clock time while adding 24 hours does not.

        Examples:
            >>> from isochron.core.period import Period
            >>> paris = TimeZone.of("Europe/Paris")
            >>> zdt = ZonedDateTime.of(LocalDateTime(2024, 3, 30, 12), paris)
            >>> str(zdt.plus(Period(days=1)))
            '2024-03-31T12:00+02:00[Europe/Paris]'
            >>> str(zdt.plus(Period(hours=24)))
            '2024-03-31T13:00+02:00[Europe/Paris]'
        """
        require(period, "period")
        local = self.to_local_date_time()
        date = local.to_local_date().plus_months(period.total_months, resolver)
        date = date.plus_days(period.total_days)
        result = self._with_local(LocalDateTime._of(date, local.to_local_time()))
        return result.plus_nanos(period.total_nanos)

    def minus(self, period: Period, resolver: DateResolver | None = None) -> ZonedDateTime:
        return self.plus(-period, resolver)

    def plus_years(self, years: int, resolver: DateResolver | None = None) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().plus_years(years, resolver))

    def plus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().plus_months(months, resolver))

    def plus_weeks(self, weeks: int) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().plus_weeks(weeks))

    def plus_days(self, days: int) -> ZonedDateTime:
        return self._with_local(self.to_local_date_time().plus_days(days))

    def plus_hours(self, hours: int) -> ZonedDateTime:
        return self.plus_seconds(hours * 3600)

    def plus_minutes(self, minutes: int) -> ZonedDateTime:
        return self.plus_seconds(minutes * 60)

    def plus_seconds(self, seconds: int) -> ZonedDateTime:
        if seconds == 0:
            return self
        return self._with_instant(self.to_instant().plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> ZonedDateTime:
        if nanos == 0:
            return self
        seconds, nanos = divmod(nanos, NANOS_PER_SECOND)
        return self._with_instant(
            self.to_instant().plus_seconds(seconds).plus_nanos(nanos)
        )

    def minus_years(self, years: int, resolver: DateResolver | None = None) -> ZonedDateTime:
        return self.plus_years(-years, resolver)

    def minus_months(
        self, months: int, resolver: DateResolver | None = None
    ) -> ZonedDateTime:
        return self.plus_months(-months, resolver)

    def minus_weeks(self, weeks: int) -> ZonedDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> ZonedDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> ZonedDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> ZonedDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> ZonedDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> ZonedDateTime:
        return self.plus_nanos(-nanos)

    # -- Comparison ---------------------------------------------------------

    def _key(self) -> tuple:
        return (
            self.to_epoch_seconds(),
            self.nanosecond,
            self.to_local_date_time()._key(),
            self._zone.id,
        )

    def compare_to(self, other: ZonedDateTime) -> int:
        """Compare by instant, then local date-time, then zone id."""
        require(other, "other")
        this_key, other_key = self._key(), other._key()
        return (this_key > other_key) - (this_key < other_key)

    def is_before(self, other: ZonedDateTime) -> bool:
        return self._date_time.is_before(require(other, "other")._date_time)

    def is_after(self, other: ZonedDateTime) -> bool:
        return self._date_time.is_after(require(other, "other")._date_time)

    def equal_instant(self, other: ZonedDateTime) -> bool:
        return self._date_time.equal_instant(require(other, "other")._date_time)

    def __add__(self, other: object) -> ZonedDateTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> ZonedDateTime:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._date_time == other._date_time and self._zone == other._zone

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._date_time, self._zone))

    def __repr__(self) -> str:
        return f"ZonedDateTime({self._date_time!r}, {self._zone!r})"

    def __str__(self) -> str:
        return f"{self._date_time}[{self._zone.id}]"


def _resolve(
    local_date_time: LocalDateTime, zone: TimeZone, resolver: ZoneResolver | None
) -> OffsetDateTime:
    info = zone.offset_info(local_date_time)
    if not info.is_transition:
        return OffsetDateTime.of(local_date_time, info.offset)

    if resolver is None:
        # Import here to avoid circular imports
        from isochron.resolvers import default_zone_resolver

        resolver = default_zone_resolver()
    result = resolver(local_date_time, info, zone)
    logger.debug(
        "zone transition resolved",
        zone=zone.id,
        local=str(local_date_time),
        kind="gap" if info.is_gap else "overlap",
        result=str(result),
    )
    if not zone.is_valid_offset(result.to_local_date_time(), result.offset):
        raise ZoneResolutionError(
            f"resolver returned {result}, which is not valid in time-zone {zone.id}"
        )
    return result


__all__ = ["ZonedDateTime"]
