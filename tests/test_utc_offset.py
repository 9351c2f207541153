"""Tests for the UtcOffset class."""

from __future__ import annotations

import datetime
import types

import pytest

from horologe.core import utc_offset as utc_offset_module
from horologe.core.offset_date_time import OffsetDateTime
from horologe.core.utc_offset import UtcOffset
from horologe.errors import ComponentRangeError, IndeterminateOffsetError


class TestUtcOffsetConstruction:
    """Tests for UtcOffset construction."""

    @pytest.mark.parametrize(
        ("hms", "expected"),
        [
            ((-1, 30, 0), (-1, -30, 0)),
            ((1, -30, -15), (1, 30, 15)),
            ((0, -30, 15), (0, -30, -15)),
            ((0, 0, -5), (0, 0, -5)),
            ((5, 30, 0), (5, 30, 0)),
        ],
    )
    def test_signs_follow_larger_component(
        self, hms: tuple[int, int, int], expected: tuple[int, int, int]
    ) -> None:
        """Minutes and seconds take the sign of the larger components."""
        assert UtcOffset.from_hms(*hms).as_hms() == expected

    @pytest.mark.parametrize(
        ("hms", "name"),
        [
            ((24, 0, 0), "hours"),
            ((-24, 0, 0), "hours"),
            ((0, 60, 0), "minutes"),
            ((0, 0, -60), "seconds"),
        ],
    )
    def test_range(self, hms: tuple[int, int, int], name: str) -> None:
        """Each component is bounded."""
        with pytest.raises(ComponentRangeError, match=f"{name} must be in the range"):
            UtcOffset.from_hms(*hms)

    def test_from_whole_seconds(self) -> None:
        """Whole seconds split into signed components."""
        assert UtcOffset.from_whole_seconds(-3_723) == UtcOffset.from_hms(-1, -2, -3)
        assert UtcOffset.from_whole_seconds(19_800) == UtcOffset(5, 30, 0)
        assert UtcOffset.from_whole_seconds(0) == UtcOffset.UTC

    def test_from_whole_seconds_range(self) -> None:
        """A full day is out of range."""
        with pytest.raises(ComponentRangeError, match="seconds must be in the range -86399..=86399"):
            UtcOffset.from_whole_seconds(86_400)


class TestUtcOffsetProperties:
    """Tests for UtcOffset accessors."""

    def test_accessors(self) -> None:
        """Whole and partial values keep the offset's sign."""
        offset = UtcOffset.from_hms(-1, -2, -3)
        assert offset.whole_hours == -1
        assert offset.whole_minutes == -62
        assert offset.minutes_past_hour == -2
        assert offset.whole_seconds == -3_723
        assert offset.seconds_past_minute == -3

    def test_sign_queries(self) -> None:
        """is_utc, is_positive and is_negative."""
        assert UtcOffset.UTC.is_utc
        assert UtcOffset(0, 0, 1).is_positive
        assert UtcOffset(0, -1, 0).is_negative
        assert not UtcOffset.UTC.is_positive
        assert not UtcOffset.UTC.is_negative

    def test_negation(self) -> None:
        """Negation flips every component."""
        assert -UtcOffset(5, 30, 0) == UtcOffset(-5, -30, 0)

    def test_to_timezone(self) -> None:
        """The host timezone has the same offset."""
        tz = UtcOffset(-5, -30, 0).to_timezone()
        assert tz.utcoffset(None) == datetime.timedelta(hours=-5, minutes=-30)


class TestUtcOffsetLocal:
    """Tests for host offset lookups."""

    def test_local_offset_at(self) -> None:
        """The host offset is less than a day in magnitude."""
        offset = UtcOffset.local_offset_at(OffsetDateTime.UNIX_EPOCH)
        assert abs(offset.whole_seconds) < 86_400

    def test_current_local_offset(self) -> None:
        """The current offset is a valid UtcOffset."""
        assert isinstance(UtcOffset.current_local_offset(), UtcOffset)

    def test_indeterminate_offset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Host failures are reported as IndeterminateOffsetError."""

        class FailingDateTime:
            @staticmethod
            def fromtimestamp(timestamp: float, tz: datetime.tzinfo) -> datetime.datetime:
                raise OSError("timestamp out of range for platform")

        fake = types.SimpleNamespace(datetime=FailingDateTime, timezone=datetime.timezone)
        monkeypatch.setattr(utc_offset_module, "_datetime", fake)
        with pytest.raises(IndeterminateOffsetError) as exc_info:
            UtcOffset.local_offset_at(OffsetDateTime.UNIX_EPOCH)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestUtcOffsetComparison:
    """Tests for comparison, hashing and string forms."""

    def test_ordering(self) -> None:
        """Offsets order by their total seconds."""
        assert UtcOffset(-1, 0, 0) < UtcOffset.UTC < UtcOffset(0, 0, 1)

    def test_hash(self) -> None:
        """Equal offsets hash equally."""
        assert hash(UtcOffset(-1, 30, 0)) == hash(UtcOffset(-1, -30, 0))

    def test_repr(self) -> None:
        """repr shows the signed components."""
        assert repr(UtcOffset(-1, 30, 0)) == "UtcOffset(-1, -30, 0)"

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (UtcOffset.UTC, "+00:00:00"),
            (UtcOffset(-5, 0, 0), "-05:00:00"),
            (UtcOffset(0, -30, 0), "-00:30:00"),
            (UtcOffset(23, 59, 59), "+23:59:59"),
        ],
    )
    def test_str(self, offset: UtcOffset, expected: str) -> None:
        """str is always signed and zero-padded."""
        assert str(offset) == expected
