"""Tests for Isochron public API and exports.

This module verifies:
- All expected exports are available from the top-level package
- __all__ lists match actual exports in all modules
- No private symbols are accidentally exported
"""

from __future__ import annotations

import importlib
import pkgutil


class TestPublicAPIExports:
    """Test that all expected exports are available from isochron."""

    def test_core_types_exported(self) -> None:
        """All value types should be importable from isochron."""
        from isochron import (
            Instant,
            LocalDate,
            LocalDateTime,
            LocalTime,
            OffsetDate,
            OffsetDateTime,
            OffsetTime,
            Period,
            ZonedDateTime,
        )

        for cls in (
            Instant,
            LocalDate,
            LocalDateTime,
            LocalTime,
            OffsetDate,
            OffsetDateTime,
            OffsetTime,
            Period,
            ZonedDateTime,
        ):
            assert isinstance(cls, type)

    def test_exception_types_exported(self) -> None:
        """All exception types should be importable from isochron."""
        from isochron import (
            ArithmeticRangeError,
            CalendricalError,
            FieldRangeError,
            InvalidFieldError,
            ParseError,
            PreconditionError,
            TimezoneError,
            UnsupportedFieldError,
            ZoneResolutionError,
        )

        for exc in (
            ArithmeticRangeError,
            FieldRangeError,
            InvalidFieldError,
            ParseError,
            PreconditionError,
            TimezoneError,
            UnsupportedFieldError,
            ZoneResolutionError,
        ):
            assert issubclass(exc, CalendricalError)

    def test_formatting_exported(self) -> None:
        from isochron import DateTimeFormatter, DateTimeFormatterBuilder, formatters

        assert isinstance(DateTimeFormatter, type)
        assert isinstance(DateTimeFormatterBuilder, type)
        assert callable(formatters.iso_offset_date_time)


class TestNoPrivateSymbolsExported:
    """Test that private symbols are not accidentally exported."""

    def test_top_level_no_private_exports(self) -> None:
        """isochron.__all__ should not contain private symbols."""
        import isochron

        for name in isochron.__all__:
            # Allow __version__ which is a standard dunder
            if name == "__version__":
                continue
            assert not name.startswith("_"), f"Private symbol {name!r} should not be in __all__"

    def test_internal_module_not_exported(self) -> None:
        import isochron

        assert "_internal" not in isochron.__all__
        assert "require" not in isochron.__all__


class TestSubmoduleAllConsistency:
    """Test that every module's __all__ names resolve."""

    def test_all_modules(self) -> None:
        import isochron

        checked = 0
        for info in pkgutil.walk_packages(isochron.__path__, prefix="isochron."):
            module = importlib.import_module(info.name)
            all_list = getattr(module, "__all__", None)
            assert all_list is not None, f"{info.name} should define __all__"
            for name in all_list:
                assert hasattr(
                    module, name
                ), f"{name!r} in {info.name}.__all__ but not accessible as attribute"
            checked += 1
        assert checked > 20


class TestFunctionalAPI:
    """Test that the API is functionally usable."""

    def test_offset_date_time_round_trip(self) -> None:
        from isochron import OffsetDateTime, ZoneOffset

        dt = OffsetDateTime.parse("2007-12-03T10:15:30+01:00")
        assert str(dt.with_offset_same_instant(ZoneOffset.UTC)) == "2007-12-03T09:15:30Z"

    def test_basic_date_period_arithmetic(self) -> None:
        """Basic date + period arithmetic should clamp the day."""
        from isochron import LocalDate, Period

        result = LocalDate(2024, 1, 31) + Period(months=1)
        assert isinstance(result, LocalDate)
        assert (result.month, result.day) == (2, 29)

    def test_zoned_arithmetic(self) -> None:
        from isochron import LocalDateTime, Period, TimeZone

        zdt = LocalDateTime(2024, 3, 30, 12).at_zone(TimeZone.of("Europe/Paris"))
        assert (zdt + Period(days=1)).hour == 12
        assert (zdt + Period(hours=24)).hour == 13

    def test_exception_handling_works(self) -> None:
        """Exception handling should work with imported exceptions."""
        from isochron import FieldRangeError, LocalDate

        try:
            LocalDate(2024, 13, 1)
        except FieldRangeError as e:
            assert "month" in str(e).lower()
            assert isinstance(e, ValueError)
        else:
            raise AssertionError("Expected FieldRangeError")
