"""Validation utilities for Isochron.

This module provides the checks used by every factory to make sure
calendar values are within valid ranges before a value is built.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TypeVar

from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron.errors import FieldRangeError, InvalidFieldError, PreconditionError

T = TypeVar("T")


def require(value: T | None, name: str) -> T:
    """Return value unchanged, or raise if it is None.

    Args:
        value: The argument to check.
        name: The argument name used in the error message.

    Returns:
        The value itself.

    Raises:
        PreconditionError: If value is None.

    Examples:
        >>> require(5, "hour")
        5
        >>> require(None, "offset")
        Traceback (most recent call last):
        ...
        PreconditionError: offset must not be None
    """
    if value is None:
        raise PreconditionError(name)
    return value


def check_field(field: str, value: int, minimum: int, maximum: int) -> int:
    """Validate that a field value lies in its absolute domain.

    Args:
        field: The field name, e.g. "MonthOfYear".
        value: The value to check.
        minimum: Smallest allowed value (inclusive).
        maximum: Largest allowed value (inclusive).

    Returns:
        The value itself.

    Raises:
        PreconditionError: If value is None.
        FieldRangeError: If value is outside minimum to maximum.
    """
    if value is None:
        raise PreconditionError(field)
    if value < minimum or value > maximum:
        raise FieldRangeError(field, value, minimum, maximum)
    return value


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        FieldRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    check_field("Year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        FieldRangeError: If month is outside 1-12.
    """
    check_field("MonthOfYear", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    A day outside 1-31 is a range error; a day that exists in some
    months but not this one is an invalid combination.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        FieldRangeError: If day is outside 1-31.
        InvalidFieldError: If day is too large for the month.
    """
    from isochron._internal.calendar import days_in_month

    check_field("DayOfMonth", day, 1, 31)
    max_day = days_in_month(year, month)
    if day > max_day:
        raise InvalidFieldError(
            f"DayOfMonth {day} is invalid for {year}-{month:02d}, "
            f"which has {max_day} days",
            "DayOfMonth",
        )


__all__ = [
    "require",
    "check_field",
    "validate_year",
    "validate_month",
    "validate_day",
]
