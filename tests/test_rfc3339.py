"""Tests for the RFC 3339 well-known format."""

from __future__ import annotations

import pytest

from horologe.core.date import Date
from horologe.core.offset_date_time import OffsetDateTime
from horologe.core.primitive_date_time import PrimitiveDateTime
from horologe.core.time import Time
from horologe.core.utc_offset import UtcOffset
from horologe.errors import (
    InsufficientTypeInformation,
    InvalidComponent,
    InvalidFormatComponent,
    InvalidLiteral,
    ParsedComponentRange,
)
from horologe.format_description import Rfc3339

RFC3339 = Rfc3339()


def odt(
    date: Date, time: Time, offset: UtcOffset = UtcOffset.UTC
) -> OffsetDateTime:
    return PrimitiveDateTime(date, time).assume_offset(offset)


class TestRfc3339Format:
    """Tests for rendering RFC 3339."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (odt(Date(1985, 4, 12), Time(23, 20, 50, 520_000_000)), "1985-04-12T23:20:50.52Z"),
            (odt(Date(2024, 1, 15), Time(14, 30, 0)), "2024-01-15T14:30:00Z"),
            (
                odt(Date(2024, 1, 15), Time(14, 30, 0), UtcOffset(5, 30, 0)),
                "2024-01-15T14:30:00+05:30",
            ),
            (
                odt(Date(1996, 12, 19), Time(16, 39, 57), UtcOffset(-8, 0, 0)),
                "1996-12-19T16:39:57-08:00",
            ),
            (
                odt(Date(2000, 1, 1), Time(0, 0, 0, 1), UtcOffset(0, -30, 0)),
                "2000-01-01T00:00:00.000000001-00:30",
            ),
            (odt(Date(1, 1, 1), Time.MIDNIGHT), "0001-01-01T00:00:00Z"),
        ],
    )
    def test_format(self, value: OffsetDateTime, expected: str) -> None:
        """Fractions appear only when non-zero and UTC is written as Z."""
        assert value.format(RFC3339) == expected

    def test_negative_year(self) -> None:
        """Years before 0 cannot be represented."""
        with pytest.raises(InvalidFormatComponent) as exc_info:
            odt(Date(-1, 1, 1), Time.MIDNIGHT).format(RFC3339)
        assert exc_info.value.component == "year"

    def test_offset_seconds(self) -> None:
        """Offsets with seconds cannot be represented."""
        with pytest.raises(InvalidFormatComponent) as exc_info:
            odt(Date(2024, 1, 1), Time.MIDNIGHT, UtcOffset(1, 0, 30)).format(RFC3339)
        assert exc_info.value.component == "offset_second"

    def test_needs_every_part(self) -> None:
        """A PrimitiveDateTime has no offset to write."""
        with pytest.raises(InsufficientTypeInformation):
            PrimitiveDateTime(Date(2024, 1, 1), Time.MIDNIGHT).format(RFC3339)


class TestRfc3339Parse:
    """Tests for reading RFC 3339."""

    def test_parse_with_offset(self) -> None:
        """The offset is kept for presentation."""
        value = OffsetDateTime.parse("2024-01-15T14:30:00+05:30", RFC3339)
        assert value.offset == UtcOffset(5, 30, 0)
        assert value.unix_timestamp() == 1_705_309_200

    def test_lowercase_separators(self) -> None:
        """t and z are accepted."""
        value = OffsetDateTime.parse("1985-04-12t23:20:50.52z", RFC3339)
        assert value.offset.is_utc
        assert value.nanosecond == 520_000_000

    def test_extra_fraction_digits_ignored(self) -> None:
        """Digits past the ninth do not change the value."""
        value = OffsetDateTime.parse("2024-01-01T00:00:00.1234567899999Z", RFC3339)
        assert value.nanosecond == 123_456_789

    def test_space_separator(self) -> None:
        """A space in place of T is not RFC 3339."""
        with pytest.raises(InvalidLiteral):
            OffsetDateTime.parse("2024-01-15 14:30:00Z", RFC3339)

    def test_missing_offset(self) -> None:
        """The offset is required."""
        with pytest.raises(InvalidComponent) as exc_info:
            OffsetDateTime.parse("2024-01-15T14:30:00", RFC3339)
        assert exc_info.value.component == "offset_hour"

    def test_empty_fraction(self) -> None:
        """A dot must be followed by a digit."""
        with pytest.raises(InvalidComponent) as exc_info:
            OffsetDateTime.parse("2024-01-15T14:30:50.Z", RFC3339)
        assert exc_info.value.component == "subsecond"

    def test_month_out_of_range(self) -> None:
        """Field values are range-checked when resolved."""
        with pytest.raises(ParsedComponentRange) as exc_info:
            OffsetDateTime.parse("2024-13-01T00:00:00Z", RFC3339)
        assert exc_info.value.component_range.name == "month"

    def test_short_field(self) -> None:
        """Each field has a fixed width."""
        with pytest.raises(InvalidComponent) as exc_info:
            OffsetDateTime.parse("2024-1-01T00:00:00Z", RFC3339)
        assert exc_info.value.component == "month"

    def test_other_types(self) -> None:
        """Dates and times can be read from an RFC 3339 string."""
        text = "2024-01-15T14:30:00-08:00"
        assert Date.parse(text, RFC3339) == Date(2024, 1, 15)
        assert Time.parse(text, RFC3339) == Time(14, 30, 0)
        assert UtcOffset.parse(text, RFC3339) == UtcOffset(-8, 0, 0)

    @pytest.mark.parametrize(
        "text",
        [
            "1985-04-12T23:20:50.52Z",
            "1996-12-19T16:39:57-08:00",
            "2000-01-01T00:00:00.000000001-00:30",
            "9999-12-31T23:59:59.999999999+23:59",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        """Canonical strings survive a parse and format."""
        assert OffsetDateTime.parse(text, RFC3339).format(RFC3339) == text


class TestRfc3339Value:
    """Tests for the format object itself."""

    def test_equality(self) -> None:
        """All instances are equal and hash alike."""
        assert Rfc3339() == Rfc3339()
        assert hash(Rfc3339()) == hash(Rfc3339())
        assert Rfc3339() != "rfc3339"

    def test_repr(self) -> None:
        assert repr(Rfc3339()) == "Rfc3339()"
