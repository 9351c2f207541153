"""Tests for Weekday and DateAdjustment."""

from __future__ import annotations

import pytest

from horologe.units.adjustment import DateAdjustment
from horologe.units.weekday import Weekday


class TestWeekday:
    """Tests for the Weekday enum."""

    def test_order(self) -> None:
        """Monday comes first."""
        assert list(Weekday)[0] is Weekday.MONDAY
        assert list(Weekday)[-1] is Weekday.SUNDAY

    @pytest.mark.parametrize(
        ("weekday", "from_monday", "from_sunday"),
        [
            (Weekday.MONDAY, 0, 1),
            (Weekday.WEDNESDAY, 2, 3),
            (Weekday.SATURDAY, 5, 6),
            (Weekday.SUNDAY, 6, 0),
        ],
    )
    def test_numbers(self, weekday: Weekday, from_monday: int, from_sunday: int) -> None:
        assert weekday.number_days_from_monday() == from_monday
        assert weekday.number_days_from_sunday() == from_sunday
        assert weekday.number_from_monday() == from_monday + 1
        assert weekday.number_from_sunday() == from_sunday + 1

    def test_next_and_previous_wrap(self) -> None:
        assert Weekday.SUNDAY.next() is Weekday.MONDAY
        assert Weekday.MONDAY.previous() is Weekday.SUNDAY
        assert Weekday.THURSDAY.next().previous() is Weekday.THURSDAY

    def test_from_number(self) -> None:
        assert Weekday.from_number_days_from_monday(4) is Weekday.FRIDAY
        assert Weekday.from_number_days_from_monday(7) is Weekday.MONDAY

    def test_str(self) -> None:
        assert str(Weekday.TUESDAY) == "Tuesday"


class TestDateAdjustment:
    """Tests for the DateAdjustment enum."""

    @pytest.mark.parametrize(
        ("adjustment", "days"),
        [(DateAdjustment.PREVIOUS, -1), (DateAdjustment.NONE, 0), (DateAdjustment.NEXT, 1)],
    )
    def test_days(self, adjustment: DateAdjustment, days: int) -> None:
        assert adjustment.days == days
