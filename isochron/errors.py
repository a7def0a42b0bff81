"""Isochron exception hierarchy.

All Isochron-specific exceptions inherit from CalendricalError. Each
concrete error also derives from the closest builtin exception so callers
that only know the standard library can still catch them.
"""

from __future__ import annotations


class CalendricalError(Exception):
    """Base exception for all Isochron errors."""

    pass


class PreconditionError(CalendricalError, TypeError):
    """A required argument was missing.

    Raised when None is passed where a value is mandatory, for example
    an OffsetDateTime constructed without an offset.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name


class FieldRangeError(CalendricalError, ValueError):
    """A field value is outside the absolute domain of the field.

    Examples:
        - Month value 13
        - Hour value 24
        - Year beyond the supported span at construction time
    """

    def __init__(
        self,
        field: str,
        value: int,
        minimum: int,
        maximum: int,
    ) -> None:
        super().__init__(
            f"{field} must be between {minimum} and {maximum}, got {value}"
        )
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class InvalidFieldError(CalendricalError, ValueError):
    """A field value is valid on its own but not in combination.

    Examples:
        - Day 30 in February
        - Day-of-year 366 in a non-leap year
        - A parsed day-of-week that disagrees with the parsed date
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class ArithmeticRangeError(CalendricalError, ArithmeticError):
    """A calculation produced a result outside the supported range.

    Examples:
        - Adding years beyond the maximum supported year
        - Converting an instant that lands outside the supported years
    """

    pass


class ParseError(CalendricalError, ValueError):
    """Text could not be parsed.

    Attributes:
        parsed_text: The complete text that was being parsed.
        error_index: Index in the text where matching failed.
        element: Description of the pattern element that was not met,
            or None when the failure is not tied to a single element.
    """

    def __init__(
        self,
        message: str,
        parsed_text: str,
        error_index: int,
        element: str | None = None,
    ) -> None:
        super().__init__(message)
        self.parsed_text = parsed_text
        self.error_index = error_index
        self.element = element


class UnsupportedFieldError(CalendricalError):
    """A field needed for printing cannot be derived from the value.

    Examples:
        - Printing an offset for a LocalDateTime
        - Printing an hour for a LocalDate
    """

    def __init__(self, field: str, value_type: str) -> None:
        super().__init__(f"unable to print {field} from {value_type}")
        self.field = field
        self.value_type = value_type


class TimezoneError(CalendricalError, ValueError):
    """Invalid offset or unknown time-zone identifier.

    Examples:
        - Offset outside -18:00 to +18:00
        - Malformed offset id such as "+5:3"
        - Region id not present in the zone database
    """

    pass


class ZoneResolutionError(CalendricalError):
    """A local date-time falls in a gap or overlap that was not resolved.

    Raised by the strict zone resolver.
    """

    pass


__all__ = [
    "CalendricalError",
    "PreconditionError",
    "FieldRangeError",
    "InvalidFieldError",
    "ArithmeticRangeError",
    "ParseError",
    "UnsupportedFieldError",
    "TimezoneError",
    "ZoneResolutionError",
]
