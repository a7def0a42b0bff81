"""Calendar units and enumerations.

This module provides:
    - DayOfWeek: ISO day-of-week enum (MONDAY=1 .. SUNDAY=7)
    - ZoneOffset: fixed UTC offset between -18:00 and +18:00
"""

from __future__ import annotations

from isochron.units.dayofweek import DayOfWeek
from isochron.units.offset import ZoneOffset

__all__: list[str] = [
    "DayOfWeek",
    "ZoneOffset",
]
