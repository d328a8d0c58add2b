"""Instant: the canonical time value.

This module provides the Instant class, the single value type every
conversion, difference and text operation in Epochal works on.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any

from epochal._internal.calendar import CalendarFields, to_fields
from epochal._internal.constants import MILLIS_PER_SECOND, U64_MAX
from epochal._internal.validation import validate_int, validate_range
from epochal.errors import OverflowError, ValidationError
from epochal.units.epoch import Epoch
from epochal.units.source import Source
from epochal.units.timeunit import TimeUnit
from epochal.units.timezone import Tz, format_offset, parse_offset, validate_offset

if TYPE_CHECKING:
    from epochal.arithmetic.ops import RelativeTime


class Instant:
    """An instant in time, counted from 1601-01-01 00:00:00 UTC.

    The instant is stored as two unsigned counters: whole seconds since the
    reference epoch and a millisecond remainder. The reference epoch
    predates every supported epoch, so all epoch offsets are non-negative,
    and a 64-bit second count reaches hundreds of billions of years into
    the future.

    Two pieces of metadata ride along without affecting equality, ordering
    or hashing:

    - ``source``: which time source the instant is attributed to.
    - ``utc_offset``: the display offset (seconds east of UTC) used when
      rendering calendar fields. The stored counters are always UTC.

    Instants are immutable; every operation returns a new Instant.

    Attributes:
        seconds: Whole seconds since 1601-01-01 00:00:00 UTC.
        milliseconds: Sub-second remainder (0-999).
        source: The Source tag.
        utc_offset: Display offset in seconds.

    Examples:
        >>> i = Instant(11_644_473_600)
        >>> i.unix()
        0
        >>> i.pretty()
        '1970-01-01 00:00:00'

        >>> Instant(0, 500) < Instant(1)
        True
    """

    __slots__ = ("_seconds", "_millis", "_source", "_utc_offset")

    @validate_range(seconds=(0, U64_MAX), milliseconds=(0, MILLIS_PER_SECOND - 1))
    def __init__(
        self,
        seconds: int,
        milliseconds: int = 0,
        *,
        source: Source = Source.SYSTEM,
        utc_offset: int = 0,
    ) -> None:
        """Create an Instant from its canonical counters.

        Args:
            seconds: Whole seconds since 1601-01-01 00:00:00 UTC (0 to 2**64-1).
            milliseconds: Sub-second remainder (0-999).
            source: Time source tag.
            utc_offset: Display offset in seconds east of UTC.

        Raises:
            ValidationError: If a counter is not an int or is out of range.
            TimezoneError: If utc_offset is invalid.
        """
        if not isinstance(source, Source):
            raise ValidationError(f"source must be a Source, got {source!r}")
        validate_offset(utc_offset)

        self._seconds: int = seconds
        self._millis: int = milliseconds
        self._source: Source = source
        self._utc_offset: int = utc_offset

    @classmethod
    def _from_internal(
        cls,
        seconds: int,
        millis: int,
        source: Source,
        utc_offset: int,
    ) -> Instant:
        """Create an Instant from already-validated counters."""
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._millis = millis
        instance._source = source
        instance._utc_offset = utc_offset
        return instance

    @classmethod
    def from_total_milliseconds(
        cls,
        total: int,
        *,
        source: Source = Source.SYSTEM,
        utc_offset: int = 0,
    ) -> Instant:
        """Create an Instant from milliseconds since the reference epoch.

        Raises:
            OverflowError: If the result falls outside the representable range.

        Examples:
            >>> Instant.from_total_milliseconds(1_500)
            Instant(seconds=1, milliseconds=500, source=system)
        """
        validate_int("total", total)
        seconds, millis = divmod(total, MILLIS_PER_SECOND)
        if seconds < 0 or seconds > U64_MAX:
            raise OverflowError(
                f"{total} milliseconds is outside the representable range "
                f"[0, {U64_MAX}] seconds"
            )
        validate_offset(utc_offset)
        return cls._from_internal(seconds, millis, source, utc_offset)

    @classmethod
    def min(cls) -> Instant:
        """Return the earliest representable instant, 1601-01-01 00:00:00."""
        return cls._from_internal(0, 0, Source.SYSTEM, 0)

    @classmethod
    def max(cls) -> Instant:
        """Return the latest representable instant."""
        return cls._from_internal(U64_MAX, MILLIS_PER_SECOND - 1, Source.SYSTEM, 0)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def seconds(self) -> int:
        """Whole seconds since 1601-01-01 00:00:00 UTC."""
        return self._seconds

    @property
    def milliseconds(self) -> int:
        """Sub-second remainder in milliseconds (0-999)."""
        return self._millis

    @property
    def source(self) -> Source:
        return self._source

    @property
    def utc_offset(self) -> int:
        """Display offset in seconds east of UTC."""
        return self._utc_offset

    @property
    def total_milliseconds(self) -> int:
        """Milliseconds since the reference epoch."""
        return self._seconds * MILLIS_PER_SECOND + self._millis

    def fields(self) -> CalendarFields:
        """Calendar fields of this instant at its display offset."""
        return to_fields(self._seconds + self._utc_offset)

    @property
    def year(self) -> int:
        return self.fields().year

    @property
    def month(self) -> int:
        return self.fields().month

    @property
    def day(self) -> int:
        return self.fields().day

    @property
    def hour(self) -> int:
        return self.fields().hour

    @property
    def minute(self) -> int:
        return self.fields().minute

    @property
    def second(self) -> int:
        return self.fields().second

    @property
    def weekday(self) -> int:
        """Day of week, Monday=0."""
        return self.fields().weekday

    # -------------------------------------------------------------------------
    # Epoch conversions
    # -------------------------------------------------------------------------

    def to_epoch(self, epoch: Epoch, unit: TimeUnit | None = None) -> int:
        """Express this instant as a timestamp in the given epoch.

        Args:
            epoch: Target epoch.
            unit: Target unit; defaults to the epoch's native unit.

        Raises:
            EpochUnderflowError: If this instant predates the epoch.
            OverflowError: If the timestamp does not fit in 64 bits.
        """
        from epochal.convert.epoch import to_epoch

        return to_epoch(self, epoch, unit)

    def unix(self) -> int:
        """Seconds since 1970-01-01 00:00:00 UTC."""
        return self.to_epoch(Epoch.UNIX)

    def unix_ms(self) -> int:
        """Milliseconds since 1970-01-01 00:00:00 UTC."""
        return self.to_epoch(Epoch.UNIX, TimeUnit.MILLISECOND)

    def windows_ns(self) -> int:
        """100-nanosecond ticks since 1601-01-01 (Windows/LDAP FILETIME)."""
        return self.to_epoch(Epoch.WINDOWS)

    def webkit(self) -> int:
        """Microseconds since 1601-01-01 (WebKit/Chromium)."""
        return self.to_epoch(Epoch.WEBKIT)

    def mac_os(self) -> int:
        """Seconds since 1904-01-01 00:00:00 (classic Mac OS)."""
        return self.to_epoch(Epoch.MAC_OS)

    def mac_os_cfa(self) -> int:
        """Seconds since 2001-01-01 00:00:00 (Mac OS Absolute / CFAbsoluteTime)."""
        return self.to_epoch(Epoch.MAC_OS_CFA)

    def sas_4gl(self) -> int:
        """Seconds since 1960-01-01 00:00:00 (SAS 4GL)."""
        return self.to_epoch(Epoch.SAS_4GL)

    def ntp(self) -> int:
        """Seconds since 1900-01-01 00:00:00 (NTP, unwrapped)."""
        return self.to_epoch(Epoch.NTP)

    def epoch(self) -> int:
        """Milliseconds since 1601-01-01, the library's own epoch."""
        return self.total_milliseconds

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def strftime(self, pattern: str) -> str:
        """Format this instant using a strftime-style pattern.

        Examples:
            >>> Instant(11_644_473_600).strftime("%Y/%m/%d")
            '1970/01/01'
        """
        from epochal.format.strftime import strftime

        return strftime(self, pattern)

    def pretty(self) -> str:
        """Format as ``YYYY-MM-DD HH:MM:SS``."""
        return self.strftime("%Y-%m-%d %H:%M:%S")

    def iso8601(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SS.fff``."""
        from epochal.format.iso8601 import format_iso8601

        return format_iso8601(self)

    def rfc3339(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SS.fffZ`` (or with ``+HH:MM``)."""
        from epochal.format.rfc3339 import format_rfc3339

        return format_rfc3339(self)

    def to_json(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        from epochal.convert.json import to_json

        return to_json(self)

    # -------------------------------------------------------------------------
    # Timezone
    # -------------------------------------------------------------------------

    def tz_offset(self) -> str:
        """Return the display offset as ``+HH:MM``."""
        return format_offset(self._utc_offset)

    def change_tz(self, offset: str | int | Tz) -> Instant:
        """Return the same instant rendered at a different UTC offset.

        Args:
            offset: An offset string (``"+01:00"``), seconds, or a Tz member.
                The offset is relative to UTC, not to the current offset.

        Raises:
            TimezoneError: If the offset is invalid.

        Examples:
            >>> i = Instant(11_644_473_600)
            >>> i.change_tz("+01:00").pretty()
            '1970-01-01 01:00:00'
            >>> i.change_tz("+01:00") == i
            True
        """
        if isinstance(offset, Tz):
            seconds = offset.offset
        elif isinstance(offset, str):
            seconds = parse_offset(offset)
        else:
            seconds = validate_offset(offset)
        return self._from_internal(self._seconds, self._millis, self._source, seconds)

    def with_source(self, source: Source) -> Instant:
        """Return the same instant attributed to another source."""
        if not isinstance(source, Source):
            raise ValidationError(f"source must be a Source, got {source!r}")
        return self._from_internal(self._seconds, self._millis, source, self._utc_offset)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def diff(self, other: Instant, unit: TimeUnit = TimeUnit.SECOND) -> int:
        """Absolute elapsed time between two instants, in ``unit``."""
        from epochal.arithmetic.ops import diff

        return diff(self, other, unit)

    def diff_ms(self, other: Instant) -> int:
        """Absolute elapsed milliseconds between two instants."""
        from epochal.arithmetic.ops import diff_ms

        return diff_ms(self, other)

    def past_future(self, other: Instant) -> RelativeTime:
        """Classify this instant as past, present or future relative to other."""
        from epochal.arithmetic.ops import past_future

        return past_future(self, other)

    def add_milliseconds(self, milliseconds: int) -> Instant:
        """Shift by a signed number of milliseconds.

        Raises:
            OverflowError: If the result leaves the representable range.
        """
        from epochal.arithmetic.ops import shift

        return shift(self, milliseconds=milliseconds)

    def add_seconds(self, seconds: int) -> Instant:
        """Shift by a signed number of seconds."""
        from epochal.arithmetic.ops import shift

        return shift(self, seconds)

    def add_minutes(self, minutes: int) -> Instant:
        return self.add_seconds(minutes * 60)

    def add_hours(self, hours: int) -> Instant:
        return self.add_seconds(hours * 3600)

    def add_days(self, days: int) -> Instant:
        return self.add_seconds(days * 86400)

    def add_weeks(self, weeks: int) -> Instant:
        # Stops at weeks; months and years have no fixed length.
        return self.add_seconds(weeks * 604800)

    def add_duration(self, duration: _datetime.timedelta) -> Instant:
        """Shift by a timedelta, truncated to whole milliseconds."""
        if not isinstance(duration, _datetime.timedelta):
            raise TypeError(f"expected timedelta, got {type(duration).__name__}")
        return self.add_milliseconds(duration // _datetime.timedelta(milliseconds=1))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._millis)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        parts = [
            f"seconds={self._seconds}",
            f"milliseconds={self._millis}",
            f"source={self._source.value}",
        ]
        if self._utc_offset:
            parts.append(f"utc_offset={self._utc_offset}")
        return f"Instant({', '.join(parts)})"

    def __str__(self) -> str:
        return self.pretty()


__all__ = ["Instant"]
