"""Tests for epoch conversion and JSON serialization."""

from __future__ import annotations

import json

import pytest

from epochal import Epoch, Instant, Source, TimeUnit
from epochal.convert import (
    from_epoch,
    from_json,
    from_mac_os,
    from_mac_os_cfa,
    from_sas_4gl,
    from_unix,
    from_unix_ms,
    from_webkit,
    from_windows_ns,
    to_epoch,
    to_json,
)
from epochal.errors import (
    EpochUnderflowError,
    OverflowError,
    ParseError,
    ValidationError,
)

from conftest import NEW_YEAR_2017_CANONICAL, NEW_YEAR_2017_UNIX

U64_MAX = 2**64 - 1


class TestFromEpoch:
    """Tests for creating Instants from raw timestamps."""

    def test_unix_zero(self):
        """Unix 0 is 11644473600 seconds after 1601."""
        assert from_unix(0).seconds == 11_644_473_600

    def test_windows_ns(self):
        """Windows ticks are 100ns since 1601."""
        instant = from_windows_ns(131_277_024_000_000_000)
        assert instant.pretty() == "2017-01-01 00:00:00"
        assert instant.seconds == NEW_YEAR_2017_CANONICAL

    def test_unix(self):
        """Unix seconds for 2017-01-01."""
        assert from_unix(NEW_YEAR_2017_UNIX).pretty() == "2017-01-01 00:00:00"

    def test_mac_os(self):
        """Mac OS seconds since 1904."""
        instant = from_mac_os(3_787_310_789)
        assert instant.strftime("%Y-%m-%d %H:%M:%S") == "2024-01-05 14:46:29"

    def test_mac_os_cfa(self):
        """Mac OS Absolute seconds since 2001."""
        assert from_mac_os_cfa(726_158_877).pretty() == "2024-01-05 14:47:57"

    def test_sas_4gl(self):
        """SAS 4GL seconds since 1960."""
        assert from_sas_4gl(0).pretty() == "1960-01-01 00:00:00"

    def test_webkit(self):
        """WebKit microseconds since 1601."""
        assert from_webkit(13_127_702_400_000_000).unix() == NEW_YEAR_2017_UNIX

    def test_unix_ms_keeps_milliseconds(self):
        """Unix milliseconds split into seconds and milliseconds."""
        instant = from_unix_ms(1_483_228_800_123)
        assert instant.unix() == NEW_YEAR_2017_UNIX
        assert instant.milliseconds == 123

    def test_sub_millisecond_truncated(self):
        """Finer-than-millisecond input is truncated."""
        assert from_windows_ns(19_999).milliseconds == 1
        assert from_webkit(1_999).milliseconds == 1

    def test_source_tag(self):
        """The requested source tag is attached."""
        assert from_unix(0, Source.NTP).source is Source.NTP
        assert from_epoch(0, Epoch.UNIX, source=Source.NTP).source is Source.NTP

    def test_explicit_unit(self):
        """A non-native unit can be given."""
        instant = from_epoch(NEW_YEAR_2017_UNIX * 1000, Epoch.UNIX, TimeUnit.MILLISECOND)
        assert instant.unix() == NEW_YEAR_2017_UNIX
        assert from_epoch(2, Epoch.UNIX, TimeUnit.WEEK).unix() == 1_209_600

    def test_negative_rejected(self):
        """Raw timestamps are unsigned."""
        with pytest.raises(ValidationError):
            from_unix(-1)

    def test_beyond_range(self):
        """A raw value whose instant exceeds 64-bit seconds raises."""
        with pytest.raises(OverflowError):
            from_unix(U64_MAX)

    def test_max_windows_ticks(self):
        """The largest Windows tick count is representable."""
        instant = from_windows_ns(U64_MAX)
        assert instant.windows_ns() == U64_MAX - U64_MAX % 10_000


class TestToEpoch:
    """Tests for expressing Instants as raw timestamps."""

    def test_native_units(self, new_year_2017):
        """Each epoch defaults to its native unit."""
        assert to_epoch(new_year_2017, Epoch.UNIX) == NEW_YEAR_2017_UNIX
        assert to_epoch(new_year_2017, Epoch.WINDOWS) == 131_277_024_000_000_000
        assert to_epoch(new_year_2017, Epoch.WEBKIT) == 13_127_702_400_000_000

    def test_explicit_unit(self, new_year_2017):
        """An explicit unit overrides the native one."""
        assert to_epoch(new_year_2017, Epoch.WEBKIT, TimeUnit.SECOND) == 13_127_702_400
        assert to_epoch(new_year_2017, Epoch.UNIX, TimeUnit.DAY) == 17_167

    def test_coarse_unit_truncates(self):
        """Coarser units truncate the remainder."""
        instant = from_unix_ms(1_999)
        assert to_epoch(instant, Epoch.UNIX) == 1
        assert to_epoch(instant, Epoch.UNIX, TimeUnit.MICROSECOND) == 1_999_000

    def test_underflow(self):
        """Instants before an epoch's reference date raise."""
        with pytest.raises(EpochUnderflowError):
            to_epoch(Instant.min(), Epoch.UNIX)
        with pytest.raises(EpochUnderflowError):
            from_unix(0).mac_os_cfa()
        with pytest.raises(EpochUnderflowError):
            from_sas_4gl(0).add_seconds(-1).sas_4gl()

    def test_reference_date_is_zero(self):
        """Each epoch's reference date converts to 0."""
        for epoch in Epoch:
            instant = Instant(epoch.offset_seconds)
            assert to_epoch(instant, epoch) == 0

    def test_too_large_for_u64(self):
        """Results that do not fit in 64 bits raise."""
        with pytest.raises(OverflowError):
            Instant.max().windows_ns()

    def test_round_trip_every_epoch(self, new_year_2017):
        """from_epoch inverts to_epoch at millisecond precision."""
        instant = new_year_2017.add_milliseconds(123)
        for epoch in Epoch:
            for unit in (TimeUnit.MILLISECOND, TimeUnit.MICROSECOND, TimeUnit.HUNDRED_NANOSECONDS):
                raw = to_epoch(instant, epoch, unit)
                assert from_epoch(raw, epoch, unit) == instant


class TestEpochTable:
    """Tests for the epoch descriptors."""

    def test_offsets(self):
        """Offsets from 1601-01-01 in seconds."""
        assert Epoch.UNIX.offset_seconds == 11_644_473_600
        assert Epoch.NTP.offset_seconds == 9_435_484_800
        assert Epoch.MAC_OS.offset_seconds == 9_561_628_800
        assert Epoch.MAC_OS_CFA.offset_seconds == 12_622_780_800
        assert Epoch.SAS_4GL.offset_seconds == 11_328_854_400
        assert Epoch.WINDOWS.offset_seconds == 0
        assert Epoch.WEBKIT.offset_seconds == 0

    def test_native_units(self):
        """Windows counts 100ns ticks, WebKit microseconds."""
        assert Epoch.WINDOWS.native_unit is TimeUnit.HUNDRED_NANOSECONDS
        assert Epoch.WEBKIT.native_unit is TimeUnit.MICROSECOND
        assert Epoch.UNIX.native_unit is TimeUnit.SECOND


class TestJson:
    """Tests for to_json/from_json."""

    def test_to_json(self, new_year_2017):
        """The dict carries counters and an RFC 3339 value."""
        data = to_json(new_year_2017)
        assert data == {
            "_type": "Instant",
            "value": "2017-01-01T00:00:00.000Z",
            "seconds": NEW_YEAR_2017_CANONICAL,
            "milliseconds": 0,
            "source": "system",
            "utc_offset": 0,
        }

    def test_serializable(self, new_year_2017):
        """The dict survives json.dumps/json.loads."""
        restored = from_json(json.loads(json.dumps(new_year_2017.to_json())))
        assert restored == new_year_2017

    def test_metadata_round_trip(self):
        """Source and offset are restored."""
        tagged = from_unix_ms(1_483_228_800_250, Source.NTP).change_tz("+05:30")
        restored = from_json(to_json(tagged))
        assert restored == tagged
        assert restored.source is Source.NTP
        assert restored.utc_offset == 19_800

    def test_value_only(self):
        """Without counters, the RFC 3339 value is parsed."""
        restored = from_json({"_type": "Instant", "value": "2017-01-01T00:00:00.000Z"})
        assert restored.unix() == NEW_YEAR_2017_UNIX

    def test_wrong_type(self):
        """Other _type values raise TypeError."""
        with pytest.raises(TypeError):
            from_json({"_type": "Date", "value": "2017-01-01"})

    def test_to_json_wrong_type(self):
        """to_json only accepts Instants."""
        with pytest.raises(TypeError):
            to_json("2017-01-01")

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"value": "2017-01-01T00:00:00Z"},
            {"_type": "Instant"},
            {"_type": "Instant", "seconds": -1},
            {"_type": "Instant", "seconds": 0, "milliseconds": 1000},
            {"_type": "Instant", "seconds": 0, "source": "gps"},
            {"_type": "Instant", "seconds": 0, "utc_offset": 90000},
            {"_type": "Instant", "value": "not a time"},
        ],
    )
    def test_invalid(self, data):
        """Malformed data raises ParseError."""
        with pytest.raises(ParseError):
            from_json(data)

    def test_not_a_dict(self):
        """Non-dict input raises ParseError."""
        with pytest.raises(ParseError):
            from_json("2017-01-01T00:00:00Z")
