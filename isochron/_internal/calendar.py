"""Calendar utilities for Isochron.

This module provides internal functions for ISO calendar calculations,
including epoch-day conversions, leap year logic and ISO week dates.

Epoch day 0 = 1970-01-01 (Thursday)

All divisions use Python's floor semantics so the same formulas hold
for dates before year 0 and before the epoch.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    MAX_YEAR,
    MIN_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1

    # Floor division makes this hold for negative years too
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + days_before_month(year, month) + day


# Ordinal of 1970-01-01
_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    return ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day.

    The calculation shifts the year to start in March so the leap day
    falls at the end of each four year cycle.

    Args:
        epoch_day: The epoch day number.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-1)
        (1969, 12, 31)
    """
    zero_day = epoch_day + DAYS_0000_TO_1970 - 60  # days since 0000-03-01
    cycles, zero_day = divmod(zero_day, DAYS_PER_CYCLE)

    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - (
        365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
    )
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - (
            365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
        )

    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    year = year_est + march_month0 // 10 + cycles * 400
    return (year, month, day)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (Monday=1, Sunday=7) for an epoch day.

    Examples:
        >>> epoch_day_to_day_of_week(0)  # 1970-01-01 was a Thursday
        4
    """
    return (epoch_day + 3) % 7 + 1


def weeks_in_week_based_year(year: int) -> int:
    """Return 53 for long ISO week-based years, 52 otherwise.

    A week-based year is long when January 1 is a Thursday, or a
    Wednesday in a leap year.
    """
    jan1 = epoch_day_to_day_of_week(ymd_to_epoch_day(year, 1, 1))
    if jan1 == 4 or (jan1 == 3 and is_leap_year(year)):
        return 53
    return 52


def epoch_day_to_week_date(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to (week_based_year, week, day_of_week).

    Examples:
        >>> epoch_day_to_week_date(ymd_to_epoch_day(2008, 12, 29))
        (2009, 1, 1)
    """
    year, month, day = epoch_day_to_ymd(epoch_day)
    dow = epoch_day_to_day_of_week(epoch_day)
    doy = days_before_month(year, month) + day

    week = (doy - dow + 10) // 7
    if week < 1:
        year -= 1
        week = weeks_in_week_based_year(year)
    elif week > weeks_in_week_based_year(year):
        year += 1
        week = 1
    return (year, week, dow)


def week_date_to_epoch_day(week_based_year: int, week: int, day_of_week: int) -> int:
    """Convert an ISO week date to an epoch day.

    The week must already be known to exist in the week-based year.
    """
    jan4 = ymd_to_epoch_day(week_based_year, 1, 4)
    week1_monday = jan4 - (epoch_day_to_day_of_week(jan4) - 1)
    return week1_monday + (week - 1) * 7 + (day_of_week - 1)


MIN_EPOCH_DAY: int = ymd_to_epoch_day(MIN_YEAR, 1, 1)
MAX_EPOCH_DAY: int = ymd_to_epoch_day(MAX_YEAR, 12, 31)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "weeks_in_week_based_year",
    "epoch_day_to_week_date",
    "week_date_to_epoch_day",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
]
