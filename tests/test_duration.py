"""Tests for elapsed-time pretty printing."""

from __future__ import annotations

import pytest

from epochal import ts_print
from epochal.errors import ValidationError


class TestTsPrint:
    """Tests for ts_print."""

    def test_one_hour(self):
        """An hour."""
        assert ts_print(3600) == "0w 0d 1h 0m 0s"

    def test_zero(self):
        """Zero seconds."""
        assert ts_print(0) == "0w 0d 0h 0m 0s"

    def test_every_field(self):
        """Each field carries into the next."""
        assert ts_print(604_800 + 86_400 + 3_600 + 60 + 1) == "1w 1d 1h 1m 1s"

    def test_two_years(self):
        """731 days is 104 weeks and 3 days."""
        assert ts_print(63_158_400) == "104w 3d 0h 0m 0s"

    def test_weeks_do_not_roll_over(self):
        """Weeks are the largest unit."""
        assert ts_print(604_800 * 1_000) == "1000w 0d 0h 0m 0s"

    def test_negative(self):
        """Negative durations are rejected."""
        with pytest.raises(ValidationError):
            ts_print(-1)

    def test_not_an_int(self):
        """Floats are rejected."""
        with pytest.raises(ValidationError):
            ts_print(1.5)
