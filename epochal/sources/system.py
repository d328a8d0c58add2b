"""System clock time source."""

from __future__ import annotations

import logging
import time
from typing import Callable

from epochal._internal.constants import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    OFFSET_UNIX,
    U64_MAX,
)
from epochal.core.instant import Instant
from epochal.errors import ClockReadError
from epochal.units.source import Source

logger = logging.getLogger(__name__)


class SystemClock:
    """Reads "now" from the operating system's wall clock.

    Args:
        clock: Callable returning nanoseconds since the Unix epoch.
            Defaults to ``time.time_ns``; tests inject a fixed clock.

    Examples:
        >>> clock = SystemClock(clock=lambda: 1_483_228_800_250_000_000)
        >>> clock.now().unix_ms()
        1483228800250
    """

    source = Source.SYSTEM

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock

    def now(self) -> Instant:
        """Return the current instant.

        Sub-millisecond precision is truncated.

        Raises:
            ClockReadError: If the clock cannot be read or reports a time
                outside the representable range. Not retried.
        """
        try:
            unix_nanos = self._clock()
        except OSError as exc:
            logger.error("system clock read failed: %s", exc)
            raise ClockReadError(f"system clock read failed: {exc}") from exc

        unix_seconds, remainder = divmod(unix_nanos, NANOS_PER_SECOND)
        seconds = unix_seconds + OFFSET_UNIX
        if seconds < 0 or seconds > U64_MAX:
            raise ClockReadError(
                f"system clock reported {unix_nanos} ns, outside the representable range"
            )
        return Instant._from_internal(
            seconds, remainder // NANOS_PER_MILLISECOND, self.source, 0
        )

    def __repr__(self) -> str:
        return f"SystemClock(clock={self._clock!r})"


__all__ = ["SystemClock"]
