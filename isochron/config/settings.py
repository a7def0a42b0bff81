"""Library settings read from environment variables.

Priority chain (highest to lowest):
  1. Init kwargs: passed when building IsochronSettings directly
  2. Env vars: ``ISOCHRON_*`` prefix
  3. Code defaults

The defaults decide the locale used by ``to_formatter()`` when none is
given, the date resolver used by with/plus operations, and the zone
resolver used by ``at_zone_similar_local``.
"""

from __future__ import annotations

import functools
from typing import Literal

from pydantic_settings import BaseSettings

DateResolverName = Literal["previous_valid", "next_valid", "strict", "part_lenient"]
ZoneResolverName = Literal[
    "post_transition", "pre_transition", "post_gap_pre_overlap", "strict"
]


class IsochronSettings(BaseSettings):
    """Process-wide defaults for Isochron.

    Attributes:
        default_locale: Locale used by formatters built without one.
        date_resolver: Name of the resolver for invalid day-of-month values.
        zone_resolver: Name of the resolver for local time-line gaps and overlaps.
        verbose: Enable DEBUG-level library logging.
        log_json: Render log lines as JSON.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISOCHRON_",
    }

    default_locale: str = "en"
    date_resolver: DateResolverName = "previous_valid"
    zone_resolver: ZoneResolverName = "post_transition"
    verbose: bool = False
    log_json: bool = False


@functools.lru_cache(maxsize=1)
def get_settings() -> IsochronSettings:
    """Return the cached settings, reading the environment on first call."""
    return IsochronSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = [
    "DateResolverName",
    "ZoneResolverName",
    "IsochronSettings",
    "get_settings",
    "reset_settings",
]
