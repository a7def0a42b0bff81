"""Conversion utilities.

This module provides functions for converting date-time values to and
from JSON-serializable dictionaries.

Examples:
    >>> from isochron import LocalDate
    >>> from isochron.convert import to_json, from_json

    >>> data = to_json(LocalDate(2024, 1, 15))
    >>> from_json(data)
    LocalDate(2024, 1, 15)
"""

from __future__ import annotations

from isochron.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
