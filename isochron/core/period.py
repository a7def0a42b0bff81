"""Period class representing an amount of calendar and clock time.

This module provides the Period class used by the plus/minus operations
of every date-time value. Date components (years, months, weeks, days)
vary in length by context; time components (hours, minutes, seconds,
nanos) are exact.
"""

from __future__ import annotations

from isochron._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class Period:
    """A period of time with date and time components.

    The components are stored as given without normalization. For
    example, Period(months=14) remains 14 months rather than being
    converted to 1 year and 2 months. Use normalized() for that.

    When a period is added to a date-time, the date part is applied
    first (years and months together, then weeks and days), then the
    time part.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        weeks: Number of weeks (can be negative).
        days: Number of days (can be negative).
        hours: Number of hours (can be negative).
        minutes: Number of minutes (can be negative).
        seconds: Number of seconds (can be negative).
        nanos: Number of nanoseconds (can be negative).

    Examples:
        >>> p = Period(years=1, months=2)
        >>> p.total_months
        14

        >>> str(Period(days=3, hours=4))
        'P3DT4H'
    """

    __slots__ = (
        "_years",
        "_months",
        "_weeks",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_nanos",
    )

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanos: int = 0,
    ) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> Period(months=-3)
            Period(months=-3)
        """
        self._years = years
        self._months = months
        self._weeks = weeks
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years."""
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of a given number of weeks."""
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @classmethod
    def of_hours(cls, hours: int) -> Period:
        """Create a Period of a given number of hours."""
        return cls(hours=hours)

    @classmethod
    def of_minutes(cls, minutes: int) -> Period:
        """Create a Period of a given number of minutes."""
        return cls(minutes=minutes)

    @classmethod
    def of_seconds(cls, seconds: int) -> Period:
        """Create a Period of a given number of seconds."""
        return cls(seconds=seconds)

    @classmethod
    def of_nanos(cls, nanos: int) -> Period:
        """Create a Period of a given number of nanoseconds."""
        return cls(nanos=nanos)

    @classmethod
    def zero(cls) -> Period:
        """Create a zero-length period."""
        return cls()

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def nanos(self) -> int:
        return self._nanos

    @property
    def total_months(self) -> int:
        """Return the total months (years * 12 + months).

        Examples:
            >>> Period(years=-1, months=3).total_months
            -9
        """
        return self._years * 12 + self._months

    @property
    def total_days(self) -> int:
        """Return the total days (weeks * 7 + days).

        Examples:
            >>> Period(weeks=2, days=3).total_days
            17
        """
        return self._weeks * 7 + self._days

    @property
    def total_nanos(self) -> int:
        """Return the exact time part in nanoseconds.

        Examples:
            >>> Period(minutes=1, nanos=5).total_nanos
            60000000005
        """
        return (
            self._hours * NANOS_PER_HOUR
            + self._minutes * NANOS_PER_MINUTE
            + self._seconds * NANOS_PER_SECOND
            + self._nanos
        )

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return not any(self._components())

    def normalized(self) -> Period:
        """Return a Period with months < 12, days < 7 and time < 1 day.

        Time components are carried into hours but never into days, since
        a day is not always 24 hours long on a zoned time-line.

        Examples:
            >>> Period(months=14).normalized()
            Period(years=1, months=2)

            >>> Period(minutes=90).normalized()
            Period(hours=1, minutes=30)
        """
        years, months = divmod(self.total_months, 12)
        weeks, days = divmod(self.total_days, 7)

        hours, remainder = divmod(self.total_nanos, NANOS_PER_HOUR)
        minutes, remainder = divmod(remainder, NANOS_PER_MINUTE)
        seconds, nanos = divmod(remainder, NANOS_PER_SECOND)

        return Period(years, months, weeks, days, hours, minutes, seconds, nanos)

    def _components(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._weeks,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._nanos,
        )

    def __add__(self, other: object) -> Period:
        """Add two Periods component by component.

        Examples:
            >>> Period(years=1, months=3) + Period(months=6)
            Period(years=1, months=9)
        """
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            *(a + b for a, b in zip(self._components(), other._components()))
        )

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            *(a - b for a, b in zip(self._components(), other._components()))
        )

    def __neg__(self) -> Period:
        """Return a Period with all components negated."""
        return Period(*(-value for value in self._components()))

    def __mul__(self, other: object) -> Period:
        """Multiply every component by an integer scalar.

        Examples:
            >>> Period(months=3) * 2
            Period(months=6)
        """
        if not isinstance(other, int):
            return NotImplemented
        return Period(*(value * other for value in self._components()))

    def __rmul__(self, other: object) -> Period:
        """Support scalar * Period."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check equality component by component.

        Period(months=12) != Period(years=1) because components are
        compared directly. Use normalized() for semantic comparison.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __repr__(self) -> str:
        names = ("years", "months", "weeks", "days", "hours", "minutes", "seconds", "nanos")
        parts = [
            f"{name}={value}"
            for name, value in zip(names, self._components())
            if value != 0
        ]
        return f"Period({', '.join(parts)})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation, e.g. "P1Y2M3DT4H5M6.5S"."""
        if self.is_zero:
            return "P0D"

        text = "P"
        if self._years != 0:
            text += f"{self._years}Y"
        if self._months != 0:
            text += f"{self._months}M"
        if self.total_days != 0:
            text += f"{self.total_days}D"

        total_nanos = self.total_nanos
        if total_nanos != 0:
            text += "T"
            sign = "-" if total_nanos < 0 else ""
            hours, remainder = divmod(abs(total_nanos), NANOS_PER_HOUR)
            minutes, remainder = divmod(remainder, NANOS_PER_MINUTE)
            seconds, nanos = divmod(remainder, NANOS_PER_SECOND)
            if hours:
                text += f"{sign}{hours}H"
            if minutes:
                text += f"{sign}{minutes}M"
            if seconds or nanos:
                text += f"{sign}{seconds}"
                if nanos:
                    text += "." + f"{nanos:09d}".rstrip("0")
                text += "S"
        return text

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


__all__ = ["Period"]
