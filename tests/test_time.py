"""Tests for the LocalTime class."""

from __future__ import annotations

import pytest

from isochron.core.period import Period
from isochron.core.time import LocalTime
from isochron.errors import FieldRangeError, ParseError


class TestLocalTimeConstruction:
    """Tests for LocalTime construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic time construction."""
        t = LocalTime(14, 30, 45, 123_456_789)
        assert t.hour == 14
        assert t.minute == 30
        assert t.second == 45
        assert t.nanosecond == 123_456_789

    def test_defaults_to_midnight(self) -> None:
        assert LocalTime() == LocalTime.MIDNIGHT
        assert LocalTime(12) == LocalTime.NOON

    def test_invalid_hour(self) -> None:
        """Test that hour 24 raises FieldRangeError."""
        with pytest.raises(FieldRangeError, match="HourOfDay must be between 0 and 23"):
            LocalTime(24, 0)

    def test_invalid_minute_second_nano(self) -> None:
        with pytest.raises(FieldRangeError):
            LocalTime(0, 60)
        with pytest.raises(FieldRangeError):
            LocalTime(0, 0, 60)
        with pytest.raises(FieldRangeError):
            LocalTime(0, 0, 0, 1_000_000_000)

    def test_of_second_of_day(self) -> None:
        assert LocalTime.of_second_of_day(3661) == LocalTime(1, 1, 1)
        assert LocalTime(1, 1, 1).second_of_day == 3661

    def test_of_nano_of_day(self) -> None:
        t = LocalTime.of_nano_of_day(86_399_999_999_999)
        assert t == LocalTime(23, 59, 59, 999_999_999)
        assert t.nano_of_day == 86_399_999_999_999
        with pytest.raises(FieldRangeError):
            LocalTime.of_nano_of_day(86_400_000_000_000)


class TestLocalTimeTransforms:
    """Tests for replace and the "with" transforms."""

    def test_replace(self) -> None:
        assert LocalTime(14, 30).replace(minute=0) == LocalTime(14, 0)

    def test_with_fields(self) -> None:
        t = LocalTime(10, 15, 30)
        assert t.with_hour(11) == LocalTime(11, 15, 30)
        assert t.with_minute(0) == LocalTime(10, 0, 30)
        assert t.with_second(0) == LocalTime(10, 15)
        assert t.with_nanosecond(5) == LocalTime(10, 15, 30, 5)

    def test_with_invalid_value(self) -> None:
        with pytest.raises(FieldRangeError):
            LocalTime(10, 15).with_hour(24)


class TestLocalTimeArithmetic:
    """Tests for arithmetic that wraps around midnight."""

    def test_plus_hours_wraps(self) -> None:
        assert LocalTime(23, 0).plus_hours(2) == LocalTime(1, 0)

    def test_minus_minutes_wraps_backwards(self) -> None:
        assert LocalTime(0, 10).minus_minutes(20) == LocalTime(23, 50)

    def test_plus_nanos_carry(self) -> None:
        t = LocalTime(0, 0, 59, 999_999_999).plus_nanos(1)
        assert t == LocalTime(0, 1)

    def test_plus_with_overflow(self) -> None:
        """Test that the number of crossed days is reported."""
        assert LocalTime(23, 0).plus_with_overflow(2 * 3_600_000_000_000) == (
            1,
            LocalTime(1, 0),
        )
        days, time = LocalTime(1, 0).plus_with_overflow(-2 * 3_600_000_000_000)
        assert days == -1
        assert time == LocalTime(23, 0)

    def test_plus_period(self) -> None:
        assert LocalTime(10, 0) + Period(hours=1, minutes=30) == LocalTime(11, 30)
        assert LocalTime(10, 0) - Period(seconds=1) == LocalTime(9, 59, 59)

    def test_plus_period_with_date_rejected(self) -> None:
        with pytest.raises(ValueError, match="date components"):
            LocalTime(10, 0).plus(Period(days=1))


class TestLocalTimeComparison:
    """Tests for ordering and hashing."""

    def test_ordering(self) -> None:
        assert LocalTime(10, 0) < LocalTime(10, 0, 0, 1)
        assert LocalTime(23, 59) > LocalTime.NOON
        assert max(LocalTime(1), LocalTime(2)) == LocalTime(2)

    def test_hash(self) -> None:
        assert hash(LocalTime(10, 15)) == hash(LocalTime(10, 15, 0, 0))


class TestLocalTimeText:
    """Tests for ISO text, repr and parsing."""

    def test_iso_format_omits_zero_seconds(self) -> None:
        assert str(LocalTime(10, 15)) == "10:15"
        assert str(LocalTime(10, 15, 30)) == "10:15:30"

    def test_iso_format_fraction_groups(self) -> None:
        """Test that the fraction is printed in groups of three digits."""
        assert str(LocalTime(12, 0, 0, 500_000_000)) == "12:00:00.500"
        assert str(LocalTime(10, 15, 30, 1000)) == "10:15:30.000001"
        assert str(LocalTime(10, 15, 30, 1)) == "10:15:30.000000001"

    def test_repr(self) -> None:
        assert repr(LocalTime(14, 30, 45)) == "LocalTime(14, 30, 45)"
        assert repr(LocalTime(14, 30, 45, 7)) == "LocalTime(14, 30, 45, 7)"

    def test_parse(self) -> None:
        assert LocalTime.parse("10:15") == LocalTime(10, 15)
        assert LocalTime.parse("10:15:30") == LocalTime(10, 15, 30)
        assert LocalTime.parse("10:15:30.5") == LocalTime(10, 15, 30, 500_000_000)
        assert LocalTime.parse("10:15:30.123456789") == LocalTime(
            10, 15, 30, 123_456_789
        )

    def test_parse_hour_out_of_range(self) -> None:
        with pytest.raises(FieldRangeError):
            LocalTime.parse("24:00")

    def test_parse_fraction_requires_digit(self) -> None:
        with pytest.raises(ParseError):
            LocalTime.parse("10:15:30.")

    def test_parse_round_trip(self) -> None:
        for t in (LocalTime(0, 0), LocalTime(23, 59, 59, 999_999_999), LocalTime(7, 5, 3, 20)):
            assert LocalTime.parse(str(t)) == t
