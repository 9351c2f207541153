"""Tests for Horologe package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_horologe() -> None:
    """Import horologe package succeeds."""
    import horologe

    assert hasattr(horologe, "__version__")
    assert horologe.__version__ == "0.1.0"


def test_public_names_resolve() -> None:
    """Every name in horologe.__all__ is importable."""
    import horologe

    for name in horologe.__all__:
        assert hasattr(horologe, name), name


def test_import_core_module() -> None:
    """Import horologe.core submodule succeeds."""
    from horologe import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import horologe.units submodule succeeds."""
    from horologe import units

    assert hasattr(units, "__all__")


def test_import_format_description_module() -> None:
    """Import horologe.format_description submodule succeeds."""
    from horologe import format_description

    assert hasattr(format_description, "__all__")


def test_import_formatting_module() -> None:
    """Import horologe.formatting submodule succeeds."""
    from horologe import formatting

    assert hasattr(formatting, "__all__")


def test_import_parsing_module() -> None:
    """Import horologe.parsing submodule succeeds."""
    from horologe import parsing

    assert hasattr(parsing, "__all__")


def test_import_internal_module() -> None:
    """Import horologe._internal submodule succeeds."""
    from horologe import _internal

    assert hasattr(_internal, "__all__")


def test_import_constants() -> None:
    """Import horologe._internal.constants succeeds."""
    from horologe._internal.constants import (
        DAYS_IN_MONTH,
        NANOS_PER_SECOND,
        SECONDS_PER_DAY,
        UNIX_EPOCH_JULIAN_DAY,
    )

    assert NANOS_PER_SECOND == 1_000_000_000
    assert SECONDS_PER_DAY == 86_400
    assert UNIX_EPOCH_JULIAN_DAY == 2_440_588
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
