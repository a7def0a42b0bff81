"""Resolvers for values that fall outside the calendar or the time-line.

Two kinds of resolver are used by the value types:

Date resolvers are called as ``resolver(year, month, day)`` whenever a
"with" or "plus" operation produces a year and month that may not have
the requested day, such as January 31 plus one month. They return a
valid LocalDate or raise.

Zone resolvers are called as ``resolver(local_date_time, info, zone)``
when a local date-time is attached to a zone and falls in a gap or an
overlap. ``info`` is the ZoneOffsetInfo for the local date-time. They
return an OffsetDateTime whose offset is valid in the zone.

The defaults are chosen by name through IsochronSettings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from isochron._internal.calendar import days_in_month
from isochron.core.date import LocalDate
from isochron.errors import ZoneResolutionError

if TYPE_CHECKING:
    from isochron.core.datetime import LocalDateTime
    from isochron.core.offset_datetime import OffsetDateTime
    from isochron.units.offset import ZoneOffset
    from isochron.zone import TimeZone, ZoneOffsetInfo

DateResolver = Callable[[int, int, int], LocalDate]
ZoneResolver = Callable[["LocalDateTime", "ZoneOffsetInfo", "TimeZone"], "OffsetDateTime"]


# -- Date resolvers -----------------------------------------------------------


def previous_valid(year: int, month: int, day: int) -> LocalDate:
    """Clamp the day to the last valid day of the month.

    Examples:
        >>> previous_valid(2023, 2, 31)
        LocalDate(2023, 2, 28)
    """
    return LocalDate(year, month, min(day, days_in_month(year, month)))


def next_valid(year: int, month: int, day: int) -> LocalDate:
    """Move an invalid day to the first day of the following month.

    Examples:
        >>> next_valid(2023, 2, 31)
        LocalDate(2023, 3, 1)
    """
    last = days_in_month(year, month)
    if day > last:
        return LocalDate(year, month, last).plus_days(1)
    return LocalDate(year, month, day)


def strict_date(year: int, month: int, day: int) -> LocalDate:
    """Reject an invalid day with InvalidFieldError."""
    return LocalDate(year, month, day)


def part_lenient(year: int, month: int, day: int) -> LocalDate:
    """Carry the excess days of an invalid day into the following month.

    Examples:
        >>> part_lenient(2023, 2, 31)
        LocalDate(2023, 3, 3)
    """
    last = days_in_month(year, month)
    if day > last:
        return LocalDate(year, month, last).plus_days(day - last)
    return LocalDate(year, month, day)


# -- Zone resolvers -----------------------------------------------------------


def post_transition(
    local_date_time: LocalDateTime, info: ZoneOffsetInfo, zone: TimeZone
) -> OffsetDateTime:
    """Use the instant of the transition in a gap, the later offset in an overlap."""
    transition = info.transition
    if info.is_gap:
        return transition.date_time_after
    return local_date_time.at_offset(transition.offset_after)


def pre_transition(
    local_date_time: LocalDateTime, info: ZoneOffsetInfo, zone: TimeZone
) -> OffsetDateTime:
    """Use the nanosecond before a gap, the earlier offset in an overlap."""
    transition = info.transition
    if info.is_gap:
        return transition.date_time_before.minus_nanos(1)
    return local_date_time.at_offset(transition.offset_before)


def post_gap_pre_overlap(
    local_date_time: LocalDateTime, info: ZoneOffsetInfo, zone: TimeZone
) -> OffsetDateTime:
    """Use the instant of the transition in a gap, the earlier offset in an overlap.

    This matches the behaviour of ``datetime`` with ``fold=0``.
    """
    transition = info.transition
    if info.is_gap:
        return transition.date_time_after
    return local_date_time.at_offset(transition.offset_before)


def strict_zone(
    local_date_time: LocalDateTime, info: ZoneOffsetInfo, zone: TimeZone
) -> OffsetDateTime:
    """Reject any local date-time in a gap or an overlap."""
    kind = "gap" if info.is_gap else "overlap"
    raise ZoneResolutionError(
        f"local date-time {local_date_time} falls in a {kind} in time-zone "
        f"{zone.id}"
    )


def retain_offset(offset: ZoneOffset) -> ZoneResolver:
    """Return a resolver that keeps offset in an overlap when it is valid.

    Falls back to post_transition otherwise. Used to keep the offset
    stable across arithmetic on a ZonedDateTime.
    """

    def resolve(
        local_date_time: LocalDateTime, info: ZoneOffsetInfo, zone: TimeZone
    ) -> OffsetDateTime:
        if info.is_overlap and info.is_valid_offset(offset):
            return local_date_time.at_offset(offset)
        return post_transition(local_date_time, info, zone)

    return resolve


DATE_RESOLVERS: dict[str, DateResolver] = {
    "previous_valid": previous_valid,
    "next_valid": next_valid,
    "strict": strict_date,
    "part_lenient": part_lenient,
}

ZONE_RESOLVERS: dict[str, ZoneResolver] = {
    "post_transition": post_transition,
    "pre_transition": pre_transition,
    "post_gap_pre_overlap": post_gap_pre_overlap,
    "strict": strict_zone,
}


def default_date_resolver() -> DateResolver:
    """Return the date resolver named by the current settings."""
    from isochron.config.settings import get_settings

    return DATE_RESOLVERS[get_settings().date_resolver]


def default_zone_resolver() -> ZoneResolver:
    """Return the zone resolver named by the current settings."""
    from isochron.config.settings import get_settings

    return ZONE_RESOLVERS[get_settings().zone_resolver]


__all__ = [
    "DATE_RESOLVERS",
    "DateResolver",
    "ZONE_RESOLVERS",
    "ZoneResolver",
    "default_date_resolver",
    "default_zone_resolver",
    "next_valid",
    "part_lenient",
    "post_gap_pre_overlap",
    "post_transition",
    "pre_transition",
    "previous_valid",
    "retain_offset",
    "strict_date",
    "strict_zone",
]
