"""Tests for OffsetDate, OffsetTime and Instant."""

from __future__ import annotations

import pytest

from isochron.core.date import LocalDate
from isochron.core.instant import Instant
from isochron.core.offset_date import OffsetDate
from isochron.core.offset_datetime import OffsetDateTime
from isochron.core.offset_time import OffsetTime
from isochron.core.period import Period
from isochron.core.time import LocalTime
from isochron.errors import FieldRangeError, PreconditionError
from isochron.units.offset import ZoneOffset

UTC = ZoneOffset.UTC
PLUS_1 = ZoneOffset.of_hours(1)
MINUS_8 = ZoneOffset.of_hours(-8)


class TestOffsetDate:
    """Tests for OffsetDate."""

    def test_construction(self) -> None:
        d = OffsetDate(2007, 12, 3, offset=PLUS_1)
        assert (d.year, d.month, d.day) == (2007, 12, 3)
        assert d.offset == PLUS_1
        assert d.to_local_date() == LocalDate(2007, 12, 3)

    def test_offset_required(self) -> None:
        with pytest.raises(PreconditionError):
            OffsetDate(2007, 12, 3)

    def test_str_and_parse(self) -> None:
        d = OffsetDate(2007, 12, 3, offset=PLUS_1)
        assert str(d) == "2007-12-03+01:00"
        assert OffsetDate.parse("2007-12-03+01:00") == d

    def test_to_epoch_seconds(self) -> None:
        """Test that the epoch-seconds are those of the start of the day."""
        assert OffsetDate(1970, 1, 1, offset=UTC).to_epoch_seconds() == 0
        assert OffsetDate(1970, 1, 1, offset=PLUS_1).to_epoch_seconds() == -3600

    def test_at_time(self) -> None:
        d = OffsetDate(2007, 12, 3, offset=PLUS_1)
        assert d.at_time(LocalTime(10, 15)) == OffsetDateTime(
            2007, 12, 3, 10, 15, offset=PLUS_1
        )
        assert str(d.at_midnight()) == "2007-12-03T00:00+01:00"

    def test_arithmetic_keeps_offset(self) -> None:
        d = OffsetDate(2024, 1, 31, offset=PLUS_1)
        assert d.plus_months(1) == OffsetDate(2024, 2, 29, offset=PLUS_1)
        assert d.plus(Period(days=1)) == OffsetDate(2024, 2, 1, offset=PLUS_1)
        assert d.minus_weeks(1) == OffsetDate(2024, 1, 24, offset=PLUS_1)

    def test_comparison(self) -> None:
        """Test that the start-of-day instant orders dates first."""
        a = OffsetDate(2024, 1, 15, offset=PLUS_1)
        b = OffsetDate(2024, 1, 15, offset=UTC)
        assert a.is_before(b)
        assert a < b
        assert not a.equal_instant(b)
        assert a.compare_to(OffsetDate(2024, 1, 15, offset=PLUS_1)) == 0

    def test_with_offset_same_local(self) -> None:
        d = OffsetDate(2024, 1, 15, offset=PLUS_1)
        assert str(d.with_offset_same_local(MINUS_8)) == "2024-01-15-08:00"


class TestOffsetTime:
    """Tests for OffsetTime."""

    def test_construction(self) -> None:
        t = OffsetTime(10, 15, 30, offset=PLUS_1)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (10, 15, 30, 0)
        assert t.offset == PLUS_1

    def test_invalid(self) -> None:
        with pytest.raises(FieldRangeError):
            OffsetTime(24, offset=UTC)
        with pytest.raises(PreconditionError):
            OffsetTime(10)

    def test_str_and_parse(self) -> None:
        t = OffsetTime(10, 15, offset=PLUS_1)
        assert str(t) == "10:15+01:00"
        assert OffsetTime.parse("10:15+01:00") == t
        assert OffsetTime.parse("10:15:30.5Z") == OffsetTime(10, 15, 30, 500_000_000, offset=UTC)

    def test_with_offset_same_instant(self) -> None:
        t = OffsetTime(10, 15, offset=PLUS_1)
        assert str(t.with_offset_same_instant(UTC)) == "09:15Z"

    def test_with_offset_same_instant_wraps(self) -> None:
        t = OffsetTime(1, 0, offset=UTC)
        assert t.with_offset_same_instant(MINUS_8) == OffsetTime(17, 0, offset=MINUS_8)

    def test_arithmetic_wraps(self) -> None:
        t = OffsetTime(23, 30, offset=PLUS_1)
        assert t.plus_hours(1) == OffsetTime(0, 30, offset=PLUS_1)
        assert t.minus(Period(minutes=30)) == OffsetTime(23, offset=PLUS_1)

    def test_comparison_by_utc_time(self) -> None:
        a = OffsetTime(10, 0, offset=PLUS_1)
        b = OffsetTime(9, 30, offset=UTC)
        assert a.is_before(b)
        assert a < b
        assert OffsetTime(10, 0, offset=PLUS_1).equal_instant(OffsetTime(9, 0, offset=UTC))

    def test_at_date(self) -> None:
        t = OffsetTime(10, 15, offset=PLUS_1)
        assert t.at_date(LocalDate(2007, 12, 3)) == OffsetDateTime(
            2007, 12, 3, 10, 15, offset=PLUS_1
        )


class TestInstant:
    """Tests for Instant."""

    def test_epoch(self) -> None:
        assert Instant.EPOCH == Instant(0)
        assert str(Instant.EPOCH) == "1970-01-01T00:00Z"

    def test_of_epoch_seconds_normalizes(self) -> None:
        assert Instant.of_epoch_seconds(0, -1) == Instant(-1, 999_999_999)
        assert Instant.of_epoch_seconds(1, 2_000_000_001) == Instant(3, 1)

    def test_nanosecond_range(self) -> None:
        with pytest.raises(FieldRangeError):
            Instant(0, 1_000_000_000)

    def test_epoch_millis(self) -> None:
        assert Instant.of_epoch_millis(-1) == Instant(-1, 999_000_000)
        assert Instant(-1, 999_000_000).to_epoch_millis() == -1
        assert Instant(1, 500_000_999).to_epoch_millis() == 1500

    def test_plus_and_minus(self) -> None:
        assert Instant(0).minus_nanos(1) == Instant(-1, 999_999_999)
        assert Instant(0).plus_seconds(60).plus_nanos(5) == Instant(60, 5)

    def test_ordering(self) -> None:
        assert Instant(-1, 999_999_999) < Instant(0)
        assert sorted([Instant(5), Instant(-5)]) == [Instant(-5), Instant(5)]

    def test_repr(self) -> None:
        assert repr(Instant.of_epoch_seconds(-1, 500_000_000)) == "Instant(-1, 500000000)"

    def test_at_offset(self) -> None:
        dt = Instant(0).at_offset(PLUS_1)
        assert str(dt) == "1970-01-01T01:00+01:00"
        assert dt.to_instant() == Instant(0)

    def test_parse_uses_offset(self) -> None:
        assert Instant.parse("1970-01-01T01:00+01:00") == Instant.EPOCH
        assert Instant.parse("1969-12-31T23:59:59.5Z") == Instant(-1, 500_000_000)
