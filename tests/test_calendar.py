"""Tests for the internal calendar, cascade and validation helpers."""

from __future__ import annotations

import pytest

from horologe._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    from_julian_day,
    is_leap_year,
    iso_week_date_to_julian_day,
    iso_year_week,
    julian_day_to_weekday,
    ordinal_to_month_day,
    to_julian_day,
    weeks_in_year,
)
from horologe._internal.cascade import cascade, cascade_ordinal
from horologe._internal.decorators import memoize
from horologe._internal.validation import ensure_in_range, validate_day, validate_range
from horologe.errors import ComponentRangeError


class TestLeapYears:
    """Tests for leap year rules."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-4, True), (-100, False)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Gregorian rules apply to every year, including negative ones."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365

    def test_days_in_month(self) -> None:
        """February depends on the year."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        with pytest.raises(ValueError):
            days_in_month(2023, 13)

    def test_days_before_month(self) -> None:
        assert days_before_month(2023, 1) == 0
        assert days_before_month(2023, 3) == 59
        assert days_before_month(2024, 3) == 60

    @pytest.mark.parametrize(
        ("year", "ordinal", "expected"),
        [(2024, 1, (1, 1)), (2024, 60, (2, 29)), (2023, 60, (3, 1)), (2024, 366, (12, 31))],
    )
    def test_ordinal_to_month_day(self, year: int, ordinal: int, expected: tuple[int, int]) -> None:
        assert ordinal_to_month_day(year, ordinal) == expected


class TestJulianDays:
    """Tests for Julian day conversion."""

    @pytest.mark.parametrize(
        ("year", "ordinal", "julian_day"),
        [
            (1970, 1, 2_440_588),
            (2000, 1, 2_451_545),
            (-4713, 328, 0),
            (1, 1, 1_721_426),
            (0, 366, 1_721_425),
        ],
    )
    def test_known_values(self, year: int, ordinal: int, julian_day: int) -> None:
        """Known dates map to their Julian day and back."""
        assert to_julian_day(year, ordinal) == julian_day
        assert from_julian_day(julian_day) == (year, ordinal)

    @pytest.mark.parametrize("year", [-9999, -401, -1, 0, 1, 399, 1600, 1900, 2000, 2100, 9999])
    def test_round_trip_boundaries(self, year: int) -> None:
        """The first, last and leap-day ordinals survive a round trip."""
        for ordinal in (1, 59, 60, days_in_year(year)):
            assert from_julian_day(to_julian_day(year, ordinal)) == (year, ordinal)

    def test_consecutive_days(self) -> None:
        """Consecutive Julian days are consecutive ordinals across a year end."""
        jd = to_julian_day(2020, 366)
        assert from_julian_day(jd + 1) == (2021, 1)

    def test_weekday(self) -> None:
        """Julian day 0 was a Monday and the epoch a Thursday."""
        assert julian_day_to_weekday(0) == 0
        assert julian_day_to_weekday(2_440_588) == 3
        assert julian_day_to_weekday(-1) == 6


class TestIsoWeeks:
    """Tests for ISO week helpers."""

    @pytest.mark.parametrize(("year", "weeks"), [(2015, 53), (2020, 53), (2021, 52), (2026, 53), (2019, 52)])
    def test_weeks_in_year(self, year: int, weeks: int) -> None:
        assert weeks_in_year(year) == weeks

    @pytest.mark.parametrize(
        ("year", "ordinal", "expected"),
        [(2021, 1, (2020, 53)), (2019, 365, (2020, 1)), (2024, 1, (2024, 1)), (2023, 1, (2022, 52))],
    )
    def test_iso_year_week(self, year: int, ordinal: int, expected: tuple[int, int]) -> None:
        """Days near the year boundary can belong to the neighbouring ISO year."""
        assert iso_year_week(year, ordinal) == expected

    def test_iso_week_date_to_julian_day(self) -> None:
        """Week 1 of 2020 starts on 2019-12-30."""
        assert iso_week_date_to_julian_day(2020, 1, 0) == to_julian_day(2019, 364)
        assert iso_week_date_to_julian_day(2020, 53, 4) == to_julian_day(2021, 1)


class TestCascade:
    """Tests for component cascades."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(61, (1, 6)), (60, (0, 6)), (-1, (59, 4)), (0, (0, 5)), (59, (59, 5))],
    )
    def test_cascade(self, value: int, expected: tuple[int, int]) -> None:
        """A single unit is carried or borrowed."""
        assert cascade(value, 0, 60, 5) == expected

    @pytest.mark.parametrize(
        ("ordinal", "year", "expected"),
        [
            (366, 2019, (1, 2020)),
            (366, 2020, (366, 2020)),
            (0, 2021, (366, 2020)),
            (-365, 2021, (1, 2020)),
            (366 + 365 + 2, 2020, (2, 2022)),
        ],
    )
    def test_cascade_ordinal(self, ordinal: int, year: int, expected: tuple[int, int]) -> None:
        """Ordinals roll through as many years as needed."""
        assert cascade_ordinal(ordinal, year) == expected


class TestValidation:
    """Tests for range validation helpers."""

    def test_ensure_in_range(self) -> None:
        ensure_in_range("hour", 23, 0, 23)
        with pytest.raises(ComponentRangeError) as exc_info:
            ensure_in_range("hour", 24, 0, 23)
        assert exc_info.value == ComponentRangeError("hour", 0, 23, 24)

    def test_validate_day_is_conditional(self) -> None:
        with pytest.raises(ComponentRangeError) as exc_info:
            validate_day(2023, 2, 29)
        assert exc_info.value.conditional_range
        assert exc_info.value.maximum == 28

    def test_validate_range_reports_first_failure(self) -> None:
        """Parameters are checked in declaration order."""

        @validate_range(a=(0, 1), b=(0, 1))
        def pair(a: int, b: int = 0) -> tuple[int, int]:
            return a, b

        assert pair(1, b=1) == (1, 1)
        with pytest.raises(ComponentRangeError, match="a must be"):
            pair(2, 2)
        with pytest.raises(ComponentRangeError, match="b must be"):
            pair(0, b=5)


class TestMemoize:
    """Tests for the memoize decorator."""

    def test_results_are_cached(self) -> None:
        calls: list[int] = []

        @memoize
        def double(n: int) -> int:
            calls.append(n)
            return n * 2

        assert double(2) == 4
        assert double(2) == 4
        assert calls == [2]
        assert double.cache_size() == 1  # type: ignore[attr-defined]
        double.cache_clear()  # type: ignore[attr-defined]
        assert double(2) == 4
        assert calls == [2, 2]

    def test_errors_are_not_cached(self) -> None:
        """A failing call is retried on the next lookup."""
        attempts: list[str] = []

        @memoize
        def fail(text: str) -> str:
            attempts.append(text)
            raise ValueError(text)

        for _ in range(2):
            with pytest.raises(ValueError):
                fail("x")
        assert attempts == ["x", "x"]

    def test_maxsize_evicts_least_recently_used(self) -> None:
        """A bounded cache drops the entry that was used longest ago."""
        calls: list[int] = []

        @memoize(maxsize=2)
        def square(n: int) -> int:
            calls.append(n)
            return n * n

        square(1)
        square(2)
        square(1)
        square(3)
        assert square.cache_size() == 2  # type: ignore[attr-defined]
        square(1)
        assert calls == [1, 2, 3]
        square(2)
        assert calls == [1, 2, 3, 2]

    def test_maxsize_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            memoize(maxsize=0)
