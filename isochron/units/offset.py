"""Fixed UTC offset representation.

This module provides the ZoneOffset class, a bounded displacement of
local time from UTC with no transition history.
"""

from __future__ import annotations

import re
from typing import ClassVar

from isochron._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import TimezoneError

_OFFSET_ID = re.compile(r"^([+-])(\d{2})(?::?(\d{2})(?::?(\d{2}))?)?$")


class ZoneOffset:
    """A fixed offset from UTC, between -18:00 and +18:00.

    The offset is stored in seconds, positive values being east of UTC
    (ahead in time) and negative values being west of UTC.

    Attributes:
        total_seconds: The offset in seconds.
        id: The normalized identifier: "Z", "+HH:MM" or "+HH:MM:SS".

    Examples:
        >>> ZoneOffset.of_hours(1).id
        '+01:00'

        >>> ZoneOffset.of("-05:30").total_seconds
        -19800

        >>> ZoneOffset.of_total_seconds(0) is ZoneOffset.UTC
        True
    """

    __slots__ = ("_total_seconds", "_id")

    UTC: ClassVar[ZoneOffset]

    def __init__(self, total_seconds: int) -> None:
        """Create a ZoneOffset from a number of seconds.

        Args:
            total_seconds: Offset in seconds from UTC.

        Raises:
            TimezoneError: If the offset is not an integer or lies outside
                -18:00 to +18:00.
        """
        if not isinstance(total_seconds, int) or isinstance(total_seconds, bool):
            raise TimezoneError(
                f"total_seconds must be an integer, got {type(total_seconds).__name__}"
            )
        if abs(total_seconds) > MAX_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset {total_seconds}s is outside valid range "
                f"[-{MAX_OFFSET_SECONDS}, {MAX_OFFSET_SECONDS}]"
            )
        self._total_seconds: int = total_seconds
        self._id: str = _build_id(total_seconds)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        """Return the offset for a number of seconds, reusing UTC for zero."""
        if total_seconds == 0 and isinstance(total_seconds, int):
            return cls.UTC
        return cls(total_seconds)

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        """Return the offset for a whole number of hours."""
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        """Return the offset for hours and minutes.

        Both components must carry the same sign, e.g. ``(-5, -30)``.
        """
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    def of_hours_minutes_seconds(
        cls, hours: int, minutes: int, seconds: int
    ) -> ZoneOffset:
        """Return the offset for hours, minutes and seconds.

        Args:
            hours: Hours, -18 to +18.
            minutes: Minutes, -59 to +59, same sign as hours.
            seconds: Seconds, -59 to +59, same sign as hours and minutes.

        Raises:
            TimezoneError: If a component is out of range or the signs
                disagree.

        Examples:
            >>> ZoneOffset.of_hours_minutes_seconds(-5, -30, 0).id
            '-05:30'
        """
        if hours < -18 or hours > 18:
            raise TimezoneError(f"offset hours must be -18 to +18, got {hours}")
        if abs(minutes) > 59:
            raise TimezoneError(f"offset minutes must be -59 to +59, got {minutes}")
        if abs(seconds) > 59:
            raise TimezoneError(f"offset seconds must be -59 to +59, got {seconds}")
        signs = {(-1 if v < 0 else 1) for v in (hours, minutes, seconds) if v != 0}
        if len(signs) > 1:
            raise TimezoneError(
                f"offset components must share a sign: "
                f"{hours}h {minutes}m {seconds}s"
            )
        return cls.of_total_seconds(
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def of(cls, offset_id: str) -> ZoneOffset:
        """Parse an offset identifier.

        Supported formats:
            - "Z": UTC
            - "+HH", "+HHMM", "+HH:MM"
            - "+HHMMSS", "+HH:MM:SS"

        Args:
            offset_id: The identifier to parse.

        Returns:
            The matching ZoneOffset.

        Raises:
            TimezoneError: If the identifier is malformed or out of range.

        Examples:
            >>> ZoneOffset.of("Z") is ZoneOffset.UTC
            True
            >>> ZoneOffset.of("+0530").id
            '+05:30'
        """
        if not isinstance(offset_id, str):
            raise TimezoneError(f"expected string, got {type(offset_id).__name__}")
        if offset_id == "Z":
            return cls.UTC

        match = _OFFSET_ID.match(offset_id)
        if not match:
            raise TimezoneError(f"invalid offset id: {offset_id!r}")

        sign_str, hours_str, minutes_str, seconds_str = match.groups()
        sign = -1 if sign_str == "-" else 1
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        seconds = int(seconds_str) if seconds_str else 0
        if minutes > 59 or seconds > 59:
            raise TimezoneError(f"invalid offset id: {offset_id!r}")
        return cls.of_hours_minutes_seconds(
            sign * hours, sign * minutes, sign * seconds
        )

    @property
    def total_seconds(self) -> int:
        """Return the offset in seconds. Positive values are east of UTC."""
        return self._total_seconds

    @property
    def id(self) -> str:
        """Return the normalized identifier."""
        return self._id

    @property
    def is_utc(self) -> bool:
        """Return True if this offset is zero."""
        return self._total_seconds == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds == other._total_seconds

    def __hash__(self) -> int:
        return hash(self._total_seconds)

    def __repr__(self) -> str:
        return f"ZoneOffset({self._id!r})"

    def __str__(self) -> str:
        return self._id


def _build_id(total_seconds: int) -> str:
    if total_seconds == 0:
        return "Z"
    abs_seconds = abs(total_seconds)
    hours, remainder = divmod(abs_seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    sign = "-" if total_seconds < 0 else "+"
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


ZoneOffset.UTC = ZoneOffset(0)


__all__ = ["ZoneOffset"]
