"""Tests for altchrono package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_altchrono() -> None:
    """Import altchrono package succeeds."""
    import altchrono

    assert hasattr(altchrono, "__version__")
    assert altchrono.__version__ == "0.1.0"


def test_public_names_exist() -> None:
    """Every name in altchrono.__all__ is defined."""
    import altchrono

    for name in altchrono.__all__:
        assert hasattr(altchrono, name), name


def test_import_core_module() -> None:
    """Import altchrono.core submodule succeeds."""
    from altchrono import core

    assert hasattr(core, "__all__")


def test_import_calendars_module() -> None:
    """Import altchrono.calendars submodule succeeds."""
    from altchrono import calendars

    assert hasattr(calendars, "__all__")
    assert "JulianDate" in calendars.__all__


def test_import_units_module() -> None:
    """Import altchrono.units submodule succeeds."""
    from altchrono import units

    assert hasattr(units, "__all__")


def test_import_convert_module() -> None:
    """Import altchrono.convert submodule succeeds."""
    from altchrono import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import altchrono.arithmetic submodule succeeds."""
    from altchrono import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import altchrono._internal submodule succeeds."""
    from altchrono import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import altchrono.errors succeeds with all exception classes."""
    from altchrono.errors import (
        AltChronoError,
        DateRangeError,
        EraMismatchError,
        ParseError,
        UnsupportedFieldError,
        ValidationError,
    )

    # Verify inheritance hierarchy
    assert issubclass(ValidationError, AltChronoError)
    assert issubclass(ParseError, AltChronoError)
    assert issubclass(DateRangeError, AltChronoError)
    assert issubclass(EraMismatchError, AltChronoError)
    assert issubclass(UnsupportedFieldError, AltChronoError)
    assert issubclass(AltChronoError, Exception)


def test_import_constants() -> None:
    """Import altchrono._internal.constants succeeds."""
    from altchrono._internal.constants import (
        DAYS_0000_TO_1970,
        DAYS_0001_TO_1970,
        DAYS_IN_MONTH,
        MJD_UNIX_EPOCH,
    )

    assert DAYS_0001_TO_1970 == 719_162
    assert DAYS_0000_TO_1970 - DAYS_0001_TO_1970 == 366
    assert MJD_UNIX_EPOCH == 40587
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
