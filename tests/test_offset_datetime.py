"""Tests for the OffsetDateTime class."""

from __future__ import annotations

import pytest

from isochron.core.date import LocalDate
from isochron.core.datetime import LocalDateTime
from isochron.core.instant import Instant
from isochron.core.offset_datetime import OffsetDateTime
from isochron.core.period import Period
from isochron.core.time import LocalTime
from isochron.errors import (
    ArithmeticRangeError,
    FieldRangeError,
    InvalidFieldError,
    ParseError,
    PreconditionError,
)
from isochron.fields import DAY_OF_YEAR
from isochron.units.dayofweek import DayOfWeek
from isochron.units.offset import ZoneOffset

UTC = ZoneOffset.UTC
PLUS_1 = ZoneOffset.of_hours(1)
PLUS_2 = ZoneOffset.of_hours(2)


class TestOffsetDateTimeConstruction:
    """Tests for OffsetDateTime construction and factories."""

    def test_basic_construction(self) -> None:
        dt = OffsetDateTime(2007, 12, 3, 10, 15, 30, 5, offset=PLUS_1)
        assert (dt.year, dt.month, dt.day) == (2007, 12, 3)
        assert (dt.hour, dt.minute, dt.second, dt.nanosecond) == (10, 15, 30, 5)
        assert dt.offset == PLUS_1
        assert dt.day_of_week == DayOfWeek.MONDAY
        assert dt.day_of_year == 337

    def test_offset_required(self) -> None:
        with pytest.raises(PreconditionError, match="offset"):
            OffsetDateTime(2007, 12, 3)

    def test_invalid_fields(self) -> None:
        with pytest.raises(FieldRangeError):
            OffsetDateTime(2007, 12, 3, 24, offset=UTC)
        with pytest.raises(InvalidFieldError):
            OffsetDateTime(2007, 2, 29, offset=UTC)

    def test_of_and_of_date_time(self) -> None:
        ldt = LocalDateTime(2024, 1, 15, 9)
        assert OffsetDateTime.of(ldt, UTC) == OffsetDateTime(2024, 1, 15, 9, offset=UTC)
        assert OffsetDateTime.of_date_time(
            LocalDate(2024, 1, 15), LocalTime(9), UTC
        ) == OffsetDateTime.of(ldt, UTC)

    def test_midnight(self) -> None:
        assert str(OffsetDateTime.midnight(2024, 1, 15, UTC)) == "2024-01-15T00:00Z"

    def test_get(self) -> None:
        assert OffsetDateTime(2024, 2, 1, offset=UTC).get(DAY_OF_YEAR) == 32


class TestOffsetDateTimeEpoch:
    """Tests for conversions to and from the epoch."""

    def test_of_epoch_seconds_negative(self) -> None:
        dt = OffsetDateTime.of_epoch_seconds(-86400, UTC)
        assert dt == OffsetDateTime(1969, 12, 31, offset=UTC)
        assert dt.to_epoch_seconds() == -86400

    def test_of_epoch_seconds_applies_offset(self) -> None:
        dt = OffsetDateTime.of_epoch_seconds(0, ZoneOffset.of_hours(-5))
        assert str(dt) == "1969-12-31T19:00-05:00"

    def test_of_epoch_seconds_nanosecond(self) -> None:
        dt = OffsetDateTime.of_epoch_seconds(-1, UTC, 999_999_999)
        assert dt.to_instant() == Instant.of_epoch_seconds(0, -1)

    def test_to_epoch_seconds(self) -> None:
        dt = OffsetDateTime(2007, 12, 3, 10, 15, 30, offset=PLUS_1)
        assert dt.to_epoch_seconds() == 1196673330

    def test_epoch_round_trip_at_many_offsets(self) -> None:
        for seconds in (-1, 0, 1, 86_399, 1_700_000_000, -62_135_596_800):
            for offset in (UTC, PLUS_1, ZoneOffset.of_hours(-18), ZoneOffset.of_hours(18)):
                dt = OffsetDateTime.of_epoch_seconds(seconds, offset)
                assert dt.to_epoch_seconds() == seconds

    def test_of_instant(self) -> None:
        instant = Instant(1_196_673_330, 500)
        dt = OffsetDateTime.of_instant(instant, PLUS_1)
        assert dt == OffsetDateTime(2007, 12, 3, 10, 15, 30, 500, offset=PLUS_1)
        assert dt.to_instant() == instant

    def test_out_of_range(self) -> None:
        far = LocalDate(999_999_999, 12, 31).to_epoch_day() * 86_400 + 86_399
        with pytest.raises(ArithmeticRangeError):
            OffsetDateTime.of_epoch_seconds(far, ZoneOffset.of_hours(1))


class TestOffsetDateTimeTransforms:
    """Tests for "with" transforms and adjusters."""

    def test_with_fields_keep_offset(self) -> None:
        dt = OffsetDateTime(2024, 1, 31, 9, 30, offset=PLUS_1)
        assert dt.with_month(2) == OffsetDateTime(2024, 2, 29, 9, 30, offset=PLUS_1)
        assert dt.with_hour(0).offset == PLUS_1

    def test_adjust_date(self) -> None:
        dt = OffsetDateTime(2024, 1, 15, 9, offset=UTC)
        adjusted = dt.adjust_date(lambda d: d.with_day_of_month(1))
        assert str(adjusted) == "2024-01-01T09:00Z"

    def test_adjust_time(self) -> None:
        dt = OffsetDateTime(2024, 1, 15, 9, 45, offset=UTC)
        assert dt.adjust_time(lambda t: t.with_minute(0)) == OffsetDateTime(
            2024, 1, 15, 9, offset=UTC
        )

    def test_with_offset_same_local(self) -> None:
        dt = OffsetDateTime(2008, 12, 3, 11, 30, offset=PLUS_2)
        moved = dt.with_offset_same_local(ZoneOffset.of_hours(3))
        assert str(moved) == "2008-12-03T11:30+03:00"
        assert moved.to_local_date_time() == dt.to_local_date_time()
        assert not moved.equal_instant(dt)

    def test_with_offset_same_instant(self) -> None:
        dt = OffsetDateTime(2008, 12, 3, 11, 30, offset=PLUS_2)
        moved = dt.with_offset_same_instant(ZoneOffset.of_hours(3))
        assert str(moved) == "2008-12-03T12:30+03:00"
        assert moved.equal_instant(dt)

    def test_with_offset_same_instant_crosses_day(self) -> None:
        dt = OffsetDateTime(2024, 1, 1, 0, 30, offset=PLUS_1)
        assert str(dt.with_offset_same_instant(UTC)) == "2023-12-31T23:30Z"

    def test_offset_change_round_trip(self) -> None:
        """Test moving to another offset by local fields and back by instant."""
        dt = OffsetDateTime(2008, 12, 3, 11, 30, offset=PLUS_2)
        for other in (PLUS_2, UTC, PLUS_1, ZoneOffset.of_hours_minutes(-5, -30)):
            local_moved = dt.with_offset_same_local(other)
            back = local_moved.with_offset_same_instant(PLUS_2)
            assert back.offset == PLUS_2
            assert back.equal_instant(local_moved)
            shift = other.total_seconds - PLUS_2.total_seconds
            assert back.to_epoch_seconds() == dt.to_epoch_seconds() - shift
            assert (back == dt) is (other == PLUS_2)
            assert (back.to_local_date_time() == dt.to_local_date_time()) is (
                other == PLUS_2
            )
            assert dt.with_offset_same_instant(other).with_offset_same_instant(PLUS_2) == dt

    def test_same_offset_returns_self(self) -> None:
        dt = OffsetDateTime(2008, 12, 3, 11, 30, offset=PLUS_2)
        assert dt.with_offset_same_instant(PLUS_2) is dt
        assert dt.with_offset_same_local(PLUS_2) is dt

    def test_split_parts(self) -> None:
        dt = OffsetDateTime(2007, 12, 3, 10, 15, offset=PLUS_1)
        assert str(dt.to_offset_date()) == "2007-12-03+01:00"
        assert str(dt.to_offset_time()) == "10:15+01:00"


class TestOffsetDateTimeArithmetic:
    """Tests for plus and minus, which keep the offset."""

    def test_plus_period_clamps(self) -> None:
        dt = OffsetDateTime(2024, 1, 31, offset=UTC)
        assert str(dt.plus(Period(months=1))) == "2024-02-29T00:00Z"

    def test_plus_hours_keeps_offset(self) -> None:
        dt = OffsetDateTime(2024, 1, 15, 23, offset=PLUS_1)
        assert dt.plus_hours(2) == OffsetDateTime(2024, 1, 16, 1, offset=PLUS_1)

    def test_operators(self) -> None:
        dt = OffsetDateTime(2024, 1, 15, 12, offset=UTC)
        assert dt + Period(days=1) == dt.plus_days(1)
        assert dt - Period(seconds=1) == OffsetDateTime(2024, 1, 15, 11, 59, 59, offset=UTC)


class TestOffsetDateTimeComparison:
    """Tests for instant and full ordering."""

    def test_equal_instant_but_not_equal(self) -> None:
        a = OffsetDateTime(2008, 12, 3, 11, offset=PLUS_1)
        b = OffsetDateTime(2008, 12, 3, 12, offset=PLUS_2)
        assert a.equal_instant(b)
        assert a != b
        assert not a.is_before(b)
        assert not a.is_after(b)

    def test_same_instant_ordered_by_local(self) -> None:
        """Test that ties on the instant are broken by local date-time."""
        a = OffsetDateTime(2008, 12, 3, 11, offset=PLUS_1)
        b = OffsetDateTime(2008, 12, 3, 12, offset=PLUS_2)
        assert a.compare_to(b) == -1
        assert b.compare_to(a) == 1
        assert a < b

    def test_instant_order_wins(self) -> None:
        """Test that a later local time can still be the earlier instant."""
        a = OffsetDateTime(2008, 12, 3, 11, 30, offset=PLUS_2)
        b = OffsetDateTime(2008, 12, 3, 11, 0, offset=UTC)
        assert a.is_before(b)
        assert a.compare_to(b) == -1
        assert sorted([b, a]) == [a, b]

    def test_compare_equal(self) -> None:
        a = OffsetDateTime(2008, 12, 3, 11, offset=PLUS_1)
        assert a.compare_to(OffsetDateTime(2008, 12, 3, 11, offset=PLUS_1)) == 0

    def test_hash(self) -> None:
        a = OffsetDateTime(2008, 12, 3, 11, offset=PLUS_1)
        b = OffsetDateTime(2008, 12, 3, 12, offset=PLUS_2)
        assert len({a, b, OffsetDateTime(2008, 12, 3, 11, offset=PLUS_1)}) == 2


class TestOffsetDateTimeText:
    """Tests for ISO text, repr and parsing."""

    def test_str(self) -> None:
        dt = OffsetDateTime(2007, 12, 3, 10, 15, 30, offset=PLUS_1)
        assert str(dt) == "2007-12-03T10:15:30+01:00"
        assert str(OffsetDateTime(2024, 1, 15, offset=UTC)) == "2024-01-15T00:00Z"

    def test_repr(self) -> None:
        dt = OffsetDateTime.of_epoch_seconds(-86400, UTC)
        assert repr(dt) == "OffsetDateTime(1969, 12, 31, 0, 0, 0, offset=ZoneOffset('Z'))"

    def test_parse_round_trip(self) -> None:
        text = "2007-12-03T10:15:30+01:00"
        dt = OffsetDateTime.parse(text)
        assert dt == OffsetDateTime(2007, 12, 3, 10, 15, 30, offset=PLUS_1)
        assert str(dt) == text

    def test_parse_lower_case_z(self) -> None:
        assert OffsetDateTime.parse("2007-12-03T10:15:30z").offset == UTC

    def test_parse_fraction(self) -> None:
        dt = OffsetDateTime.parse("2007-12-03T10:15:30.123456789-08:00")
        assert dt.nanosecond == 123_456_789
        assert dt.offset == ZoneOffset.of_hours(-8)

    def test_parse_missing_offset(self) -> None:
        with pytest.raises(ParseError):
            OffsetDateTime.parse("2007-12-03T10:15:30")

    def test_parse_offset_out_of_range(self) -> None:
        with pytest.raises(ParseError):
            OffsetDateTime.parse("2007-12-03T10:15:30+19:00")
