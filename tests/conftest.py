"""Pytest configuration and fixtures for Isochron tests."""

from __future__ import annotations

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isochron can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from isochron.config.settings import reset_settings  # noqa: E402

_SETTINGS_ENV = (
    "ISOCHRON_DEFAULT_LOCALE",
    "ISOCHRON_DATE_RESOLVER",
    "ISOCHRON_ZONE_RESOLVER",
    "ISOCHRON_VERBOSE",
    "ISOCHRON_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test against default settings, whatever the environment holds."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def paris():
    """The Europe/Paris zone: +01:00 in winter, +02:00 in summer."""
    from isochron.zone import TimeZone

    return TimeZone.of("Europe/Paris")
