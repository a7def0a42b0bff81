"""Configuration for Isochron.

This module provides:
    - IsochronSettings: library defaults read from ``ISOCHRON_*`` env vars
    - configure_logging: structlog setup for the ``isochron`` logger
    - get_logger: structlog logger bound to a stdlib logger
"""

from __future__ import annotations

from isochron.config.logging import configure_logging, get_logger
from isochron.config.settings import IsochronSettings, get_settings, reset_settings

__all__: list[str] = [
    "IsochronSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_settings",
]
