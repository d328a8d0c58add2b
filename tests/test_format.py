"""Tests for strftime/strptime and the fixed ISO 8601 and RFC 3339 codecs."""

from __future__ import annotations

import pytest

from epochal import Instant, Source
from epochal.convert import from_mac_os, from_unix, from_unix_ms
from epochal.errors import ParseError
from epochal.format import (
    format_iso8601,
    format_rfc3339,
    parse_iso8601,
    parse_rfc3339,
    parse_time,
    strftime,
    strp_iso8601,
    strp_rfc3339,
    strptime,
)

from conftest import NEW_YEAR_2017_UNIX


@pytest.fixture
def friday():
    """2024-01-05 14:46:29 UTC, a Friday."""
    return from_mac_os(3_787_310_789)


class TestStrftime:
    """Tests for strftime."""

    def test_basic(self, friday):
        """Date and time directives."""
        assert strftime(friday, "%Y-%m-%d %H:%M:%S") == "2024-01-05 14:46:29"

    def test_names(self, friday):
        """Weekday and month names are English."""
        assert strftime(friday, "%a %A %b %B %h") == "Fri Friday Jan January Jan"

    def test_twelve_hour_clock(self, friday):
        """%I and %p."""
        assert strftime(friday, "%I:%M %p") == "02:46 PM"
        assert strftime(from_unix(0), "%I %p") == "12 AM"

    def test_numeric_weekdays(self, friday):
        """%u is Monday=1, %w is Sunday=0."""
        assert strftime(friday, "%u %w") == "5 5"
        sunday = from_unix(NEW_YEAR_2017_UNIX)
        assert strftime(sunday, "%u %w") == "7 0"

    def test_padding(self, friday):
        """%e is space padded, %j zero padded."""
        assert strftime(friday, "[%e] %j") == "[ 5] 005"

    def test_short_forms(self, friday):
        """%C, %y, %D and %R."""
        assert strftime(friday, "%C %y") == "20 24"
        assert strftime(friday, "%D %R") == "01/05/24 14:46"

    def test_composites(self, friday):
        """%F and %T expand to full date and time."""
        assert strftime(friday, "%FT%T") == "2024-01-05T14:46:29"

    def test_milliseconds(self):
        """%f renders three digits."""
        assert strftime(from_unix_ms(1_483_228_800_007), "%S.%f") == "00.007"

    def test_offset_directives(self, friday):
        """%z and %Z follow the display offset."""
        assert strftime(friday, "%z %Z") == "+0000 UTC"
        shifted = friday.change_tz("-03:30")
        assert strftime(shifted, "%H:%M %z %Z") == "11:16 -0330 -03:30"

    def test_unix_timestamp(self):
        """%s is signed Unix seconds."""
        assert strftime(from_unix(NEW_YEAR_2017_UNIX), "%s") == "1483228800"
        assert strftime(Instant(11_644_473_600 - 86_400), "%s") == "-86400"

    def test_literals(self, friday):
        """%%, %n and %t."""
        assert strftime(friday, "100%%%n%t") == "100%\n\t"

    def test_unsupported(self, friday):
        """Unknown directives raise ValueError."""
        with pytest.raises(ValueError):
            strftime(friday, "%Q")

    def test_instant_method(self, friday):
        """Instant.strftime delegates here."""
        assert friday.strftime("%F") == "2024-01-05"


class TestStrptime:
    """Tests for strptime and parse_time."""

    def test_basic(self):
        """Full date and time."""
        instant = parse_time("2017-01-01 00:00:00", "%Y-%m-%d %H:%M:%S")
        assert instant.unix() == NEW_YEAR_2017_UNIX
        assert instant.source is Source.SYSTEM

    def test_source_tag(self):
        """The source tag is attached."""
        instant = parse_time("2017-01-01 00:00:00", "%Y-%m-%d %H:%M:%S", Source.NTP)
        assert instant.source is Source.NTP

    def test_numeric_offset(self):
        """A +0000 offset."""
        instant = strptime("2021-01-01 00:00:00 +0000", "%Y-%m-%d %H:%M:%S %z")
        assert instant.unix() == 1_609_459_200

    def test_offset_normalized_to_utc(self):
        """Local time minus offset gives UTC; the offset is kept for display."""
        instant = strptime("2021-01-01 05:30:00 +05:30", "%F %T %z")
        assert instant.unix() == 1_609_459_200
        assert instant.utc_offset == 19_800
        assert instant.pretty() == "2021-01-01 05:30:00"

    def test_z_and_names(self):
        """Z for %z, UTC/GMT for %Z."""
        assert strptime("2021-01-01 00:00 Z", "%Y-%m-%d %H:%M %z").unix() == 1_609_459_200
        assert strptime("2021-01-01 00:00 GMT", "%Y-%m-%d %H:%M %Z").unix() == 1_609_459_200

    def test_missing_time_defaults_to_midnight(self):
        """Only a date."""
        assert strptime("2017-01-01", "%Y-%m-%d").unix() == NEW_YEAR_2017_UNIX

    def test_fraction_truncated(self):
        """Fractions longer than milliseconds are truncated."""
        instant = strptime("2017-01-01 00:00:00.123456", "%Y-%m-%d %H:%M:%S.%f")
        assert instant.milliseconds == 123
        assert strptime("2017-01-01 00:00:00.5", "%Y-%m-%d %H:%M:%S.%f").milliseconds == 500

    def test_twelve_hour_clock(self):
        """%I with %p."""
        instant = strptime("2024-01-05 02:46 PM", "%Y-%m-%d %I:%M %p")
        assert instant.hour == 14
        assert strptime("2024-01-05 12:00 am", "%Y-%m-%d %I:%M %p").hour == 0

    def test_month_and_weekday_names(self):
        """Names are matched case-insensitively."""
        instant = strptime("Fri, 05 January 2024", "%a, %d %B %Y")
        assert instant.pretty() == "2024-01-05 00:00:00"
        assert strptime("05 jan 2024", "%d %b %Y").month == 1

    def test_weekday_mismatch(self):
        """A wrong weekday name is rejected."""
        with pytest.raises(ParseError):
            strptime("Sat 2024-01-05", "%a %Y-%m-%d")

    def test_two_digit_year(self):
        """%y maps 69-99 to 1900s and 00-68 to 2000s."""
        assert strptime("69-01-01", "%y-%m-%d").year == 1969
        assert strptime("68-01-01", "%y-%m-%d").year == 2068

    def test_day_of_year(self):
        """%Y with %j."""
        assert strptime("2017-032", "%Y-%j").unix() == NEW_YEAR_2017_UNIX + 31 * 86_400

    def test_unix_timestamp(self):
        """%s gives the instant directly."""
        assert strptime("1483228800", "%s").unix() == NEW_YEAR_2017_UNIX
        assert strptime("-86400", "%s").pretty() == "1969-12-31 00:00:00"

    def test_repeated_directive_must_agree(self):
        """A directive used twice must match the same text."""
        assert strptime("2017 2017-01-01", "%Y %Y-%m-%d").year == 2017
        with pytest.raises(ParseError):
            strptime("2016 2017-01-01", "%Y %Y-%m-%d")

    @pytest.mark.parametrize(
        "text",
        [
            "2017/01/01 00:00:00",
            "2017-01-01 00:00:00 trailing",
            "2017-13-01 00:00:00",
            "2017-02-29 00:00:00",
            "2017-01-01 24:00:00",
            "2017-01-01 00:60:00",
        ],
    )
    def test_invalid(self, text):
        """Mismatched or out-of-range input raises ParseError."""
        with pytest.raises(ParseError):
            strptime(text, "%Y-%m-%d %H:%M:%S")

    def test_missing_day(self):
        """Year and month alone are not enough."""
        with pytest.raises(ParseError):
            strptime("2017-01", "%Y-%m")

    def test_before_1601(self):
        """Dates before the reference epoch are out of range."""
        with pytest.raises(ParseError):
            strptime("1600-12-31", "%Y-%m-%d")

    def test_unsupported_directive(self):
        """Unknown directives raise ValueError."""
        with pytest.raises(ValueError):
            strptime("x", "%Q")

    def test_format_parse_inverse(self, friday):
        """Parsing the formatted text gives back the instant."""
        pattern = "%Y-%m-%d %H:%M:%S.%f %z"
        instant = friday.add_milliseconds(321).change_tz("+09:00")
        assert strptime(strftime(instant, pattern), pattern) == instant

    def test_format_parse_inverse_days(self, friday):
        """%d and %e in one pattern are parsed independently."""
        text = strftime(friday, "%Y-%m %d %e")
        assert text == "2024-01 05  5"
        assert strptime(text, "%Y-%m %d %e") == strptime("2024-01-05", "%Y-%m-%d")

    def test_day_directives_round_trip(self, friday):
        """A pattern using both %d and %e round-trips."""
        pattern = "%Y-%m-%d %H:%M:%S (%e)"
        assert strptime(strftime(friday, pattern), pattern) == friday

    def test_day_directives_disagree(self):
        """%d and %e must name the same day."""
        with pytest.raises(ParseError):
            strptime("2024-01 05  6", "%Y-%m %d %e")

    def test_padded_day(self):
        """%e accepts a space-padded day."""
        assert strptime("2024-01- 5", "%Y-%m-%e").day == 5


class TestIso8601:
    """Tests for the fixed ISO 8601 codec."""

    def test_parse(self):
        """The fixed pattern."""
        assert strp_iso8601("2017-01-01T00:00:00.000").unix() == NEW_YEAR_2017_UNIX

    def test_source_tag(self):
        """strp_iso8601 attaches the source."""
        assert strp_iso8601("2017-01-01T00:00:00.000", Source.NTP).source is Source.NTP

    def test_format(self):
        """Three-digit milliseconds."""
        assert format_iso8601(from_unix_ms(1_483_228_800_042)) == "2017-01-01T00:00:00.042"

    def test_round_trip(self, friday):
        """Format then parse."""
        instant = friday.add_milliseconds(999)
        assert parse_iso8601(format_iso8601(instant)) == instant

    @pytest.mark.parametrize(
        "text",
        ["", "2017-01-01", "2017-01-01 00:00:00.000", "2017-01-01T00:00:00"],
    )
    def test_invalid(self, text):
        """Other shapes are rejected."""
        with pytest.raises(ParseError):
            parse_iso8601(text)

    def test_format_type(self):
        """Only Instants can be formatted."""
        with pytest.raises(TypeError):
            format_iso8601("2017-01-01")


class TestRfc3339:
    """Tests for the RFC 3339 codec."""

    def test_parse_utc(self):
        """The Z designator."""
        assert strp_rfc3339("2017-01-01T00:00:00.000Z").unix() == NEW_YEAR_2017_UNIX

    def test_parse_offset(self):
        """Offsets are normalized to UTC."""
        instant = parse_rfc3339("2017-01-01T01:00:00+01:00")
        assert instant.unix() == NEW_YEAR_2017_UNIX
        assert instant.utc_offset == 3_600

    def test_parse_lowercase_and_fraction(self):
        """Lowercase t/z and long fractions."""
        instant = parse_rfc3339("2017-01-01t00:00:00.123456789z")
        assert instant.milliseconds == 123

    def test_source_tag(self):
        """strp_rfc3339 attaches the source."""
        assert strp_rfc3339("2017-01-01T00:00:00Z", Source.NTP).source is Source.NTP

    def test_format(self, new_year_2017):
        """Z at offset 0, +HH:MM otherwise."""
        assert format_rfc3339(new_year_2017) == "2017-01-01T00:00:00.000Z"
        assert format_rfc3339(new_year_2017.change_tz("-05:00")) == "2016-12-31T19:00:00.000-05:00"

    def test_round_trip_keeps_offset(self, friday):
        """Format then parse keeps instant and offset."""
        instant = friday.change_tz("+05:45")
        restored = parse_rfc3339(format_rfc3339(instant))
        assert restored == instant
        assert restored.utc_offset == instant.utc_offset

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2017-01-01T00:00:00",
            "2017-01-01 00:00:00Z",
            "2017-02-30T00:00:00Z",
            "2017-01-01T25:00:00Z",
            "2017-01-01T00:00:00+24:00",
        ],
    )
    def test_invalid(self, text):
        """Malformed strings raise ParseError."""
        with pytest.raises(ParseError):
            parse_rfc3339(text)
