"""Tests for IsochronSettings and the cached settings accessors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from isochron.config.settings import IsochronSettings, get_settings, reset_settings


class TestIsochronSettingsDefaults:
    def test_all_defaults(self) -> None:
        """With no env vars, all fields use code defaults."""
        settings = IsochronSettings()
        assert settings.default_locale == "en"
        assert settings.date_resolver == "previous_valid"
        assert settings.zone_resolver == "post_transition"
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = IsochronSettings()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestEnvSource:
    def test_env_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISOCHRON_DEFAULT_LOCALE", "fr")
        monkeypatch.setenv("ISOCHRON_DATE_RESOLVER", "strict")
        monkeypatch.setenv("ISOCHRON_VERBOSE", "true")
        settings = IsochronSettings()
        assert settings.default_locale == "fr"
        assert settings.date_resolver == "strict"
        assert settings.verbose is True
        assert settings.zone_resolver == "post_transition"  # default preserved

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISOCHRON_DEFAULT_LOCALE", "fr")
        assert IsochronSettings(default_locale="de").default_locale == "de"

    def test_unknown_resolver_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with pytest.raises(ValidationError):
            IsochronSettings(date_resolver="closest")  # type: ignore[arg-type]
        monkeypatch.setenv("ISOCHRON_ZONE_RESOLVER", "closest")
        with pytest.raises(ValidationError):
            IsochronSettings()


class TestCachedSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_rereads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("ISOCHRON_DEFAULT_LOCALE", "de")
        assert get_settings().default_locale == "en"
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.default_locale == "de"
