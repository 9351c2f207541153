"""Tests for the Horologe exception hierarchy."""

from __future__ import annotations

import pytest

from horologe import errors
from horologe.errors import (
    ComponentRangeError,
    ConversionRangeError,
    FormatError,
    HorologeError,
    InvalidFormatDescription,
    ParseError,
    ParsedComponentRange,
)


class TestHierarchy:
    """Tests for exception base classes."""

    @pytest.mark.parametrize("name", errors.__all__)
    def test_every_error_is_a_horologe_error(self, name: str) -> None:
        assert issubclass(getattr(errors, name), HorologeError)

    @pytest.mark.parametrize(
        "exc_type",
        [ComponentRangeError, ConversionRangeError, InvalidFormatDescription, ParseError],
    )
    def test_value_errors(self, exc_type: type[Exception]) -> None:
        """Errors about bad input values are also ValueErrors."""
        assert issubclass(exc_type, ValueError)

    def test_format_errors_are_not_value_errors(self) -> None:
        assert not issubclass(FormatError, ValueError)

    @pytest.mark.parametrize(
        ("name", "base"),
        [
            ("InsufficientTypeInformation", FormatError),
            ("InvalidFormatComponent", FormatError),
            ("FormatOutputError", FormatError),
            ("UnclosedOpeningBracket", InvalidFormatDescription),
            ("InvalidComponentName", InvalidFormatDescription),
            ("InvalidModifier", InvalidFormatDescription),
            ("MissingComponentName", InvalidFormatDescription),
            ("ConflictingModifier", InvalidFormatDescription),
            ("InvalidLiteral", ParseError),
            ("InvalidComponent", ParseError),
            ("InsufficientInformation", ParseError),
            ("ParsedComponentRange", ParseError),
            ("UnexpectedTrailingCharacters", ParseError),
        ],
    )
    def test_grouping(self, name: str, base: type[Exception]) -> None:
        assert issubclass(getattr(errors, name), base)


class TestComponentRangeError:
    """Tests for ComponentRangeError details."""

    def test_message(self) -> None:
        err = ComponentRangeError("hour", 0, 23, 24)
        assert str(err) == "hour must be in the range 0..=23"

    def test_conditional_message(self) -> None:
        err = ComponentRangeError("day", 1, 28, 29, conditional_range=True)
        assert str(err) == "day must be in the range 1..=28, given values of other parameters"

    def test_equality_and_hash(self) -> None:
        """Errors with the same details compare equal."""
        a = ComponentRangeError("hour", 0, 23, 24)
        b = ComponentRangeError("hour", 0, 23, 24)
        assert a == b
        assert hash(a) == hash(b)
        assert a != ComponentRangeError("hour", 0, 23, 25)

    def test_repr(self) -> None:
        assert repr(ComponentRangeError("hour", 0, 23, 24)) == (
            "ComponentRangeError(name='hour', minimum=0, maximum=23, value=24, conditional_range=False)"
        )


class TestParsedComponentRange:
    """Tests for wrapping range errors raised while parsing."""

    def test_wraps_range_error(self) -> None:
        inner = ComponentRangeError("month", 1, 12, 13)
        err = ParsedComponentRange(inner)
        assert err.component_range is inner
        assert str(err) == "month must be in the range 1..=12"
