"""DayOfWeek enumeration.

This module provides the DayOfWeek enum using ISO-8601 numbering,
Monday being 1 and Sunday being 7.
"""

from __future__ import annotations

from enum import IntEnum

from isochron.errors import FieldRangeError


class DayOfWeek(IntEnum):
    """A day of the week, numbered MONDAY=1 through SUNDAY=7.

    Examples:
        >>> DayOfWeek.of(1)
        <DayOfWeek.MONDAY: 1>

        >>> DayOfWeek.SUNDAY.plus(1)
        <DayOfWeek.MONDAY: 1>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Return the day for an ISO number.

        Raises:
            FieldRangeError: If value is outside 1-7.
        """
        if value < 1 or value > 7:
            raise FieldRangeError("DayOfWeek", value, 1, 7)
        return cls(value)

    def plus(self, days: int) -> DayOfWeek:
        """Return the day that is the given number of days later."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)


__all__ = ["DayOfWeek"]
