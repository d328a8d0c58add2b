"""Tests for Epochal package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_epochal() -> None:
    """Import epochal package succeeds."""
    import epochal

    assert hasattr(epochal, "__version__")
    assert epochal.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import epochal.core submodule succeeds."""
    from epochal import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import epochal.units submodule succeeds."""
    from epochal import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import epochal.format submodule succeeds."""
    from epochal import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import epochal.convert submodule succeeds."""
    from epochal import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import epochal.arithmetic submodule succeeds."""
    from epochal import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_sources_module() -> None:
    """Import epochal.sources submodule succeeds."""
    from epochal import sources

    assert hasattr(sources, "__all__")


def test_import_internal_module() -> None:
    """Import epochal._internal submodule succeeds."""
    from epochal import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """All exceptions share the EpochalError base."""
    from epochal.errors import (
        ClockReadError,
        EpochalError,
        EpochUnderflowError,
        NtpQueryError,
        OverflowError,
        ParseError,
        TimezoneError,
        ValidationError,
    )

    for exc in (
        ValidationError,
        ParseError,
        OverflowError,
        EpochUnderflowError,
        TimezoneError,
        NtpQueryError,
        ClockReadError,
    ):
        assert issubclass(exc, EpochalError)


def test_public_names_resolve() -> None:
    """Every name in epochal.__all__ is an attribute of the package."""
    import epochal

    for name in epochal.__all__:
        assert hasattr(epochal, name), name
