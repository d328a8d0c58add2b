"""Pytest configuration and fixtures for Epochal tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so epochal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from epochal.convert import from_unix  # noqa: E402

# 2017-01-01 00:00:00 UTC, a Sunday
NEW_YEAR_2017_UNIX = 1_483_228_800
NEW_YEAR_2017_CANONICAL = NEW_YEAR_2017_UNIX + 11_644_473_600


@pytest.fixture
def new_year_2017():
    """2017-01-01 00:00:00 UTC."""
    return from_unix(NEW_YEAR_2017_UNIX)
