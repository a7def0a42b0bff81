"""Tests for DateTimeFormatterBuilder and the elements it produces."""

from __future__ import annotations

import io

import pytest

from isochron.core.date import LocalDate
from isochron.core.datetime import LocalDateTime
from isochron.core.offset_datetime import OffsetDateTime
from isochron.core.time import LocalTime
from isochron.errors import (
    CalendricalError,
    FieldRangeError,
    InvalidFieldError,
    ParseError,
    UnsupportedFieldError,
)
from isochron.fields import (
    DAY_OF_MONTH,
    HOUR_OF_DAY,
    MINUTE_OF_HOUR,
    MONTH_OF_YEAR,
    NANO_OF_SECOND,
    SECOND_OF_MINUTE,
    YEAR,
)
from isochron.format.builder import DateTimeFormatterBuilder
from isochron.format.elements import SignStyle
from isochron.format.locale import FormatStyle, TextStyle
from isochron.format.parsed import Parsed
from isochron.units.offset import ZoneOffset


def pattern(text: str, locale: str = "en"):
    return DateTimeFormatterBuilder().append_pattern(text).to_formatter(locale)


class TestNumericValues:
    """Tests for append_value and sign styles."""

    def test_default_is_normal(self) -> None:
        f = DateTimeFormatterBuilder().append_value(YEAR).to_formatter("en")
        assert f.print(LocalDate(2024, 1, 1)) == "2024"
        assert f.print(LocalDate(-44, 3, 15)) == "-44"
        assert str(f) == "(Value(Year))"

    def test_fixed_width(self) -> None:
        f = DateTimeFormatterBuilder().append_value(MONTH_OF_YEAR, 2).to_formatter("en")
        assert f.print(LocalDate(2024, 3, 1)) == "03"
        assert f.parse("03").get(MONTH_OF_YEAR) == 3
        with pytest.raises(ParseError):
            f.parse("3")
        with pytest.raises(ParseError):
            f.parse("+03")

    def test_fixed_width_overflow(self) -> None:
        f = DateTimeFormatterBuilder().append_value(YEAR, 4).to_formatter("en")
        with pytest.raises(FieldRangeError):
            f.print(LocalDate(12345, 1, 1))

    def test_exceeds_pad(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_value(YEAR, 4, 10, SignStyle.EXCEEDS_PAD)
            .to_formatter("en")
        )
        assert f.print(LocalDate(2024, 1, 1)) == "2024"
        assert f.print(LocalDate(12345, 1, 1)) == "+12345"
        assert f.print(LocalDate(-44, 1, 1)) == "-0044"
        assert f.parse("+12345").get(YEAR) == 12345
        assert f.parse("-0044").get(YEAR) == -44

    def test_exceeds_pad_sign_rules(self) -> None:
        """Test that '+' is required past the minimum width and rejected within it."""
        f = (
            DateTimeFormatterBuilder()
            .append_value(YEAR, 4, 10, SignStyle.EXCEEDS_PAD)
            .to_formatter("en")
        )
        for text in ("12345", "+2024"):
            with pytest.raises(ParseError):
                f.parse(text)

    def test_always(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_value(YEAR, 4, 10, SignStyle.ALWAYS)
            .to_formatter("en")
        )
        assert f.print(LocalDate(2024, 1, 1)) == "+2024"
        assert f.parse("+2024").get(YEAR) == 2024
        with pytest.raises(ParseError):
            f.parse("2024")

    def test_never(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_value(YEAR, 4, 10, SignStyle.NEVER)
            .to_formatter("en")
        )
        assert f.print(LocalDate(-44, 1, 1)) == "0044"
        with pytest.raises(ParseError):
            f.parse("-0044")

    def test_not_negative(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_value(YEAR, 4, 10, SignStyle.NOT_NEGATIVE)
            .to_formatter("en")
        )
        with pytest.raises(FieldRangeError):
            f.print(LocalDate(-44, 1, 1))

    def test_negative_zero_rejected(self) -> None:
        f = DateTimeFormatterBuilder().append_value(YEAR).to_formatter("en")
        with pytest.raises(ParseError):
            f.parse("-0")

    def test_invalid_widths(self) -> None:
        b = DateTimeFormatterBuilder()
        with pytest.raises(ValueError):
            b.append_value(YEAR, 0)
        with pytest.raises(ValueError):
            b.append_value(YEAR, 20)
        with pytest.raises(ValueError):
            b.append_value(YEAR, 5, 3, SignStyle.NORMAL)

    def test_fixed_width_rejects_sign_style(self) -> None:
        b = DateTimeFormatterBuilder()
        with pytest.raises(ValueError, match="EXCEEDS_PAD"):
            b.append_value(YEAR, 4, sign_style=SignStyle.EXCEEDS_PAD)
        f = b.append_value(YEAR, 4, sign_style=SignStyle.NOT_NEGATIVE).to_formatter("en")
        assert f.parse("2007").get(YEAR) == 2007

    def test_adjacent_fixed_widths(self) -> None:
        """Test that a variable-width year leaves digits for the fields after it."""
        f = pattern("yyyyMMdd")
        assert f.print(LocalDate(2007, 12, 3)) == "20071203"
        assert f.parse("20071203", LocalDate) == LocalDate(2007, 12, 3)
        assert f.parse("+120071203", LocalDate) == LocalDate(12007, 12, 3)

    def test_adjacent_chain_after_literal(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_value(HOUR_OF_DAY)
            .append_literal(":")
            .append_value(MINUTE_OF_HOUR, 2)
            .to_formatter("en")
        )
        assert f.parse("123:45").get(HOUR_OF_DAY) == 123
        assert str(f) == "(Value(HourOfDay)':'Value(MinuteOfHour,2))"


class TestReducedAndFraction:
    """Tests for reduced values and fractions."""

    def test_reduced_year(self) -> None:
        f = DateTimeFormatterBuilder().append_value_reduced(YEAR, 2, 2000).to_formatter("en")
        assert f.print(LocalDate(2024, 1, 1)) == "24"
        assert f.print(LocalDate(1999, 1, 1)) == "99"
        assert f.parse("99").get(YEAR) == 2099
        assert f.parse("05").get(YEAR) == 2005
        assert str(f) == "(ReducedValue(Year,2,2000))"

    def test_reduced_base_mid_century(self) -> None:
        f = DateTimeFormatterBuilder().append_value_reduced(YEAR, 2, 1950).to_formatter("en")
        assert f.parse("49").get(YEAR) == 2049
        assert f.parse("50").get(YEAR) == 1950

    def test_fraction_minimal_digits(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_fraction(NANO_OF_SECOND, 0, 9)
            .to_formatter("en")
        )
        assert f.print(LocalTime(10, 0, 0, 500_000_000)) == ".5"
        assert f.print(LocalTime(10, 0, 0, 123_456_789)) == ".123456789"
        assert f.print(LocalTime(10)) == ""
        assert str(f) == "(Fraction(NanoOfSecond,0,9,DecimalPoint))"

    def test_fraction_fixed_digits(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_fraction(NANO_OF_SECOND, 3, 3)
            .to_formatter("en")
        )
        assert f.print(LocalTime(10)) == ".000"
        assert f.print(LocalTime(10, 0, 0, 123_456_789)) == ".123"

    def test_fraction_parse(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_fraction(NANO_OF_SECOND, 0, 9)
            .to_formatter("en")
        )
        assert f.parse(".5").get(NANO_OF_SECOND) == 500_000_000
        assert f.parse("").get(NANO_OF_SECOND) is None
        with pytest.raises(ParseError):
            f.parse(".")

    def test_fraction_requires_decimal_range(self) -> None:
        with pytest.raises(ValueError, match="decimal range"):
            DateTimeFormatterBuilder().append_fraction(HOUR_OF_DAY, 0, 9)

    def test_fraction_widths(self) -> None:
        with pytest.raises(ValueError):
            DateTimeFormatterBuilder().append_fraction(NANO_OF_SECOND, 5, 3)
        with pytest.raises(ValueError):
            DateTimeFormatterBuilder().append_fraction(NANO_OF_SECOND, 0, 10)


class TestTextAndOffset:
    """Tests for text fields, offsets and zone ids."""

    def test_month_text(self) -> None:
        f = DateTimeFormatterBuilder().append_text(MONTH_OF_YEAR).to_formatter("en")
        assert f.print(LocalDate(2007, 12, 3)) == "December"
        assert f.parse("December").get(MONTH_OF_YEAR) == 12
        assert str(f) == "(Text(MonthOfYear))"

    def test_short_text_str(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_text(MONTH_OF_YEAR, TextStyle.SHORT)
            .to_formatter("en")
        )
        assert f.print(LocalDate(2007, 12, 3)) == "Dec"
        assert str(f) == "(Text(MonthOfYear,SHORT))"

    def test_text_falls_back_to_number(self) -> None:
        f = DateTimeFormatterBuilder().append_text(MONTH_OF_YEAR).to_formatter("en")
        assert f.parse("7").get(MONTH_OF_YEAR) == 7

    def test_text_without_table_prints_number(self) -> None:
        f = DateTimeFormatterBuilder().append_text(DAY_OF_MONTH).to_formatter("en")
        assert f.print(LocalDate(2007, 12, 3)) == "3"

    def test_offset_id(self) -> None:
        f = DateTimeFormatterBuilder().append_offset_id().to_formatter("en")
        assert f.print(OffsetDateTime(2024, 1, 1, offset=ZoneOffset.UTC)) == "Z"
        assert f.print(
            OffsetDateTime(2024, 1, 1, offset=ZoneOffset.of_total_seconds(3600 + 30))
        ) == "+01:00:30"
        assert f.parse("-05:30").offset == ZoneOffset.of_hours_minutes(-5, -30)
        assert str(f) == "(Offset(+HH:MM:ss,'Z'))"

    def test_offset_without_colon(self) -> None:
        f = DateTimeFormatterBuilder().append_offset("+0000", False, False).to_formatter("en")
        assert f.print(OffsetDateTime(2024, 1, 1, offset=ZoneOffset.UTC)) == "+0000"
        assert f.print(
            OffsetDateTime(2024, 1, 1, offset=ZoneOffset.of_hours(-8))
        ) == "-0800"
        assert f.parse("+0530").offset == ZoneOffset.of_hours_minutes(5, 30)
        assert str(f) == "(Offset(+HHMM,'+0000'))"

    def test_offset_parse_bad_minutes(self) -> None:
        f = DateTimeFormatterBuilder().append_offset_id().to_formatter("en")
        with pytest.raises(ParseError):
            f.parse("+01:60")

    def test_zone_id(self, paris) -> None:
        f = DateTimeFormatterBuilder().append_zone_id().to_formatter("en")
        zdt = LocalDateTime(2024, 7, 1, 12).at_zone(paris)
        assert f.print(zdt) == "Europe/Paris"
        assert f.parse("Europe/Paris").zone == paris
        assert str(f) == "(ZoneId())"

    def test_unsupported_field(self) -> None:
        with pytest.raises(UnsupportedFieldError):
            pattern("HH:mm").print(LocalDate(2024, 1, 1))
        with pytest.raises(UnsupportedFieldError):
            DateTimeFormatterBuilder().append_offset_id().to_formatter("en").print(
                LocalDate(2024, 1, 1)
            )

    def test_unsupported_field_in_optional_section(self) -> None:
        """Test that optional sections do not hide missing fields when printing."""
        f = pattern("yyyy-MM-dd['T'HH]")
        with pytest.raises(UnsupportedFieldError):
            f.print(LocalDate(2024, 1, 1))


class TestOptionalSections:
    """Tests for optional sections and case sensitivity."""

    def build(self):
        return (
            DateTimeFormatterBuilder()
            .append_literal("A")
            .optional_start()
            .append_value(HOUR_OF_DAY, 2)
            .optional_end()
            .append_literal("C")
            .to_formatter("en")
        )

    def test_optional_present_and_absent(self) -> None:
        f = self.build()
        assert f.parse("A12C").get(HOUR_OF_DAY) == 12
        assert len(f.parse("AC")) == 0

    def test_mismatch_after_optional(self) -> None:
        with pytest.raises(ParseError) as info:
            self.build().parse("AX")
        assert info.value.error_index == 1
        assert info.value.element == "'C'"

    def test_failed_section_rolls_back_fields(self) -> None:
        f = pattern("HH[:mm:ss]")
        parsed, end = f.parse_unresolved("10:15", 0)
        assert end == 2
        assert parsed.get(MINUTE_OF_HOUR) is None

    def test_conflicting_field_skips_section(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_value(HOUR_OF_DAY, 2)
            .optional_start()
            .append_literal(":")
            .append_value(HOUR_OF_DAY, 2)
            .append_literal("x")
            .optional_end()
            .append_literal(":11")
            .to_formatter("en")
        )
        assert f.parse("10:11").get(HOUR_OF_DAY) == 10
        assert f.parse("10:10x:11").get(HOUR_OF_DAY) == 10

    def test_conflict_in_nested_section_rolls_back_inner_only(self) -> None:
        f = pattern("HH[:mm['h'HH]]")
        parsed, end = f.parse_unresolved("10:15h11", 0)
        assert end == 5
        assert parsed.get(MINUTE_OF_HOUR) == 15
        assert parsed.get(HOUR_OF_DAY) == 10

    def test_nested_sections(self) -> None:
        f = pattern("HH[:mm[:ss]]")
        assert f.parse("10:15", LocalTime) == LocalTime(10, 15)
        assert f.parse("10:15:30", LocalTime) == LocalTime(10, 15, 30)
        assert f.print(LocalTime(10, 15, 30)) == "10:15:30"
        assert str(f) == (
            "(Value(HourOfDay,2)[':'Value(MinuteOfHour,2)"
            "[':'Value(SecondOfMinute,2)]])"
        )

    def test_to_formatter_closes_sections(self) -> None:
        b = DateTimeFormatterBuilder().optional_start().append_literal("x")
        assert str(b.to_formatter("en")) == "(['x'])"

    def test_optional_end_without_start(self) -> None:
        with pytest.raises(ValueError, match="optional_start"):
            DateTimeFormatterBuilder().optional_end()

    def test_case_insensitive(self) -> None:
        strict = DateTimeFormatterBuilder().append_literal("T").to_formatter("en")
        with pytest.raises(ParseError):
            strict.parse("t")
        lenient = (
            DateTimeFormatterBuilder()
            .parse_case_insensitive()
            .append_literal("T")
            .to_formatter("en")
        )
        assert len(lenient.parse("t")) == 0

    def test_case_insensitive_text(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .parse_case_insensitive()
            .append_text(MONTH_OF_YEAR, TextStyle.SHORT)
            .to_formatter("en")
        )
        assert f.parse("DEC").get(MONTH_OF_YEAR) == 12

    def test_case_flag_persists_after_section(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .optional_start()
            .parse_case_insensitive()
            .append_literal("A")
            .optional_end()
            .append_literal("b")
            .to_formatter("en")
        )
        assert len(f.parse("aB")) == 0

    def test_case_flag_restored_after_failed_section(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .optional_start()
            .parse_case_insensitive()
            .append_literal("A")
            .optional_end()
            .append_literal("b")
            .to_formatter("en")
        )
        with pytest.raises(ParseError):
            f.parse("B")
        assert len(f.parse("b")) == 0


class TestPatterns:
    """Tests for append_pattern."""

    def test_date_pattern(self) -> None:
        f = pattern("EEE, dd MMM yyyy")
        assert f.print(LocalDate(2007, 12, 3)) == "Mon, 03 Dec 2007"
        assert f.parse("Mon, 03 Dec 2007", LocalDate) == LocalDate(2007, 12, 3)

    def test_day_of_week_is_cross_checked(self) -> None:
        with pytest.raises(InvalidFieldError, match="conflict found"):
            pattern("EEE, dd MMM yyyy").parse("Tue, 03 Dec 2007", LocalDate)

    def test_full_text(self) -> None:
        f = pattern("EEEE d MMMM y")
        assert f.print(LocalDate(2007, 12, 3)) == "Monday 3 December 2007"

    def test_narrow_month(self) -> None:
        assert pattern("MMMMM").print(LocalDate(2007, 12, 3)) == "D"

    def test_two_digit_year(self) -> None:
        f = pattern("dd/MM/yy")
        assert f.print(LocalDate(2007, 12, 3)) == "03/12/07"
        assert f.parse("03/12/07", LocalDate) == LocalDate(2007, 12, 3)

    def test_day_of_year(self) -> None:
        f = pattern("yyyy-DDD")
        assert f.print(LocalDate(2007, 2, 1)) == "2007-032"
        assert f.parse("2007-337", LocalDate) == LocalDate(2007, 12, 3)

    def test_twelve_hour_clock(self) -> None:
        f = pattern("h:mm a")
        assert f.print(LocalTime(0, 5)) == "12:05 AM"
        assert f.print(LocalTime(13, 30)) == "1:30 PM"
        assert f.parse("12:05 AM", LocalTime) == LocalTime(0, 5)
        assert f.parse("1:30 PM", LocalTime) == LocalTime(13, 30)

    def test_fraction_letters(self) -> None:
        f = pattern("HH:mm:ss.SSS")
        assert f.print(LocalTime(10, 15, 30, 120_000_000)) == "10:15:30.120"
        assert f.parse("10:15:30.120", LocalTime) == LocalTime(10, 15, 30, 120_000_000)

    def test_offset_letters(self) -> None:
        dt = OffsetDateTime(2024, 1, 1, offset=ZoneOffset.of_hours(1))
        utc = OffsetDateTime(2024, 1, 1, offset=ZoneOffset.UTC)
        assert pattern("Z").print(dt) == "+0100"
        assert pattern("Z").print(utc) == "+0000"
        assert pattern("ZZZZZ").print(dt) == "+01:00"
        assert pattern("ZZZZZ").print(utc) == "Z"
        with pytest.raises(ValueError, match="invalid number of pattern letters"):
            pattern("ZZZZ")

    def test_zone_letter(self, paris) -> None:
        zdt = LocalDateTime(2024, 7, 1, 12).at_zone(paris)
        assert pattern("HH:mm z").print(zdt) == "12:00 Europe/Paris"

    def test_quotes(self) -> None:
        assert pattern("HH 'o''clock'").print(LocalTime(9)) == "09 o'clock"
        assert pattern("''HH").print(LocalTime(9)) == "'09"
        assert pattern("yyyy-MM-dd'T'HH").print(LocalDateTime(2024, 1, 2, 3)) == (
            "2024-01-02T03"
        )

    def test_pattern_errors(self) -> None:
        for text in ("]", "yyyy]", "{", "#", "q", "'abc", "HHH", "DDDD", "aa", "SSSSSSSSSS"):
            with pytest.raises(ValueError):
                pattern(text)

    def test_conflicting_duplicate_fields(self) -> None:
        f = pattern("dd/dd")
        assert f.parse("03/03").get(DAY_OF_MONTH) == 3
        with pytest.raises(InvalidFieldError, match="conflict found"):
            f.parse("03/04")


class TestDateTimeFormatter:
    """Tests for the DateTimeFormatter entry points."""

    def test_append_formatter(self) -> None:
        time = pattern("HH:mm")
        f = (
            DateTimeFormatterBuilder()
            .append_pattern("yyyy-MM-dd ")
            .append(time)
            .to_formatter("en")
        )
        assert f.print(LocalDateTime(2024, 1, 2, 3, 4)) == "2024-01-02 03:04"

    def test_append_localized(self) -> None:
        f = (
            DateTimeFormatterBuilder()
            .append_localized(FormatStyle.MEDIUM, None)
            .to_formatter("en")
        )
        assert f.print(LocalDate(2007, 12, 3)) == "Dec 3, 2007"
        assert f.with_locale("fr").print(LocalDate(2007, 12, 3)) == "3 déc. 2007"
        assert str(f) == "(Localized(MEDIUM,))"
        with pytest.raises(ValueError):
            DateTimeFormatterBuilder().append_localized(None, None)

    def test_parse_without_target(self) -> None:
        parsed = pattern("yyyy-MM-dd").parse("2024-01-15")
        assert isinstance(parsed, Parsed)
        assert parsed.get(YEAR) == 2024
        assert parsed.resolve_local_date() == LocalDate(2024, 1, 15)

    def test_parse_target_needs_fields(self) -> None:
        with pytest.raises(CalendricalError):
            pattern("yyyy-MM").parse("2024-01", LocalDate)

    def test_unparsed_text(self) -> None:
        with pytest.raises(ParseError, match="unparsed text found at index 10") as info:
            pattern("yyyy-MM-dd").parse("2024-01-15 extra")
        assert info.value.error_index == 10
        assert info.value.parsed_text == "2024-01-15 extra"

    def test_parse_unresolved(self) -> None:
        parsed, end = pattern("yyyy-MM-dd").parse_unresolved("on 2024-01-15 exactly", 3)
        assert end == 13
        assert parsed.resolve_local_date() == LocalDate(2024, 1, 15)
        with pytest.raises(IndexError):
            pattern("yyyy").parse_unresolved("2024", 5)

    def test_print_to_stream(self) -> None:
        stream = io.StringIO()
        pattern("HH:mm").print_to(LocalTime(9, 5), stream)
        assert stream.getvalue() == "09:05"

    def test_with_locale(self) -> None:
        f = pattern("MMMM")
        assert f.with_locale("en") is f
        assert f.with_locale("de").print(LocalDate(2024, 3, 1)) == "März"
        assert f.locale == "en"

    def test_default_locale_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from isochron.config.settings import reset_settings

        monkeypatch.setenv("ISOCHRON_DEFAULT_LOCALE", "fr")
        reset_settings()
        f = DateTimeFormatterBuilder().append_pattern("MMMM").to_formatter()
        assert f.locale == "fr"
        assert f.print(LocalDate(2024, 2, 1)) == "février"

    def test_repr(self) -> None:
        f = DateTimeFormatterBuilder().append_value(SECOND_OF_MINUTE, 2).to_formatter("en")
        assert repr(f) == "DateTimeFormatter((Value(SecondOfMinute,2)), locale='en')"
