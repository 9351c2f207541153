"""Tests for the Duration class.

This module covers:
- Construction and normalization of signs
- Unit constructors and whole/subsecond accessors
- Checked, saturating and operator arithmetic
- Interop with datetime.timedelta
- Comparison, hashing and string forms
"""

from __future__ import annotations

import datetime

import pytest

from horologe.core.duration import Duration


class TestDurationConstruction:
    """Tests for Duration construction and normalization."""

    def test_default_is_zero(self) -> None:
        """Duration with no args is zero."""
        assert Duration() == Duration.ZERO
        assert Duration().is_zero

    def test_basic_construction(self) -> None:
        """Seconds and nanoseconds are stored as given when already normal."""
        d = Duration(1, 500_000_000)
        assert d.whole_seconds == 1
        assert d.subsec_nanoseconds == 500_000_000

    @pytest.mark.parametrize(
        ("seconds", "nanoseconds", "expected"),
        [
            (1, -500_000_000, (0, 500_000_000)),
            (-1, 500_000_000, (0, -500_000_000)),
            (-1, -500_000_000, (-1, -500_000_000)),
            (0, 2_500_000_000, (2, 500_000_000)),
            (-1, 2_000_000_000, (1, 0)),
            (0, -1, (0, -1)),
        ],
    )
    def test_signs_are_normalized(
        self, seconds: int, nanoseconds: int, expected: tuple[int, int]
    ) -> None:
        """Seconds and nanoseconds always share a sign after construction."""
        d = Duration(seconds, nanoseconds)
        assert (d.whole_seconds, d.subsec_nanoseconds) == expected

    def test_construction_overflow(self) -> None:
        """Seconds beyond the signed 64-bit range raise OverflowError."""
        with pytest.raises(OverflowError):
            Duration(2**63)

    def test_unit_constructors(self) -> None:
        """Each unit constructor scales to seconds and nanoseconds."""
        assert Duration.weeks(1) == Duration.seconds(604_800)
        assert Duration.days(1) == Duration.seconds(86_400)
        assert Duration.hours(1) == Duration.seconds(3_600)
        assert Duration.minutes(1) == Duration.seconds(60)
        assert Duration.milliseconds(1_500) == Duration(1, 500_000_000)
        assert Duration.microseconds(-1) == Duration(0, -1_000)
        assert Duration.nanoseconds(1_000_000_001) == Duration(1, 1)

    def test_seconds_f(self) -> None:
        """Float seconds are split into whole seconds and nanoseconds."""
        assert Duration.seconds_f(1.5) == Duration(1, 500_000_000)
        assert Duration.seconds_f(-0.5) == Duration(0, -500_000_000)

    def test_seconds_f_non_finite(self) -> None:
        """NaN and infinity cannot be represented."""
        with pytest.raises(OverflowError):
            Duration.seconds_f(float("nan"))
        with pytest.raises(OverflowError):
            Duration.seconds_f(float("inf"))


class TestDurationAccessors:
    """Tests for whole and subsecond accessors."""

    def test_whole_units_truncate_toward_zero(self) -> None:
        """Whole units drop the remainder toward zero for negative values."""
        d = Duration.hours(-36)
        assert d.whole_days == -1
        assert d.whole_hours == -36
        assert d.whole_minutes == -2_160
        assert Duration.days(-13).whole_weeks == -1

    def test_whole_subsecond_totals(self) -> None:
        """Whole milli/micro/nanosecond totals include the seconds."""
        d = Duration(-1, -500_000_000)
        assert d.whole_milliseconds == -1_500
        assert d.whole_microseconds == -1_500_000
        assert d.whole_nanoseconds == -1_500_000_000

    def test_subsecond_parts(self) -> None:
        """Subsecond parts exclude the whole seconds."""
        d = Duration(1, 123_456_789)
        assert d.subsec_milliseconds == 123
        assert d.subsec_microseconds == 123_456
        assert d.subsec_nanoseconds == 123_456_789

    def test_sign_queries(self) -> None:
        """is_zero, is_positive and is_negative inspect the fields."""
        assert Duration.NANOSECOND.is_positive
        assert (-Duration.NANOSECOND).is_negative
        assert not Duration.ZERO.is_positive
        assert not Duration.ZERO.is_negative

    def test_as_seconds_f(self) -> None:
        """as_seconds_f combines both fields."""
        assert Duration(1, 500_000_000).as_seconds_f() == 1.5
        assert Duration(-1, -250_000_000).as_seconds_f() == -1.25


class TestDurationArithmetic:
    """Tests for Duration arithmetic."""

    def test_add_sub(self) -> None:
        """Addition and subtraction carry between the fields."""
        a = Duration(1, 600_000_000)
        b = Duration(0, 500_000_000)
        assert a + b == Duration(2, 100_000_000)
        assert b - a == Duration(-1, -100_000_000)

    def test_neg_and_abs(self) -> None:
        """Negation flips both fields; abs drops the sign."""
        d = Duration(1, 500)
        assert -d == Duration(-1, -500)
        assert abs(-d) == d
        assert +d is d

    def test_mul(self) -> None:
        """Multiplication by an int is exact, by a float goes via seconds."""
        assert Duration.seconds(30) * 3 == Duration.seconds(90)
        assert 3 * Duration.seconds(30) == Duration.seconds(90)
        assert Duration.seconds(1) * 1.5 == Duration(1, 500_000_000)

    def test_truediv(self) -> None:
        """Division truncates toward zero and a Duration ratio is a float."""
        assert Duration.seconds(7) / 2 == Duration(3, 500_000_000)
        assert Duration.seconds(-7) / 2 == Duration(-3, -500_000_000)
        assert Duration.nanoseconds(-7) / 2 == Duration.nanoseconds(-3)
        assert Duration.minutes(1) / Duration.seconds(30) == 2.0

    def test_division_by_zero(self) -> None:
        """Dividing by zero raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Duration.SECOND / 0
        with pytest.raises(ZeroDivisionError):
            Duration.SECOND / Duration.ZERO

    def test_division_overflow(self) -> None:
        """A quotient past MAX raises OverflowError, not ZeroDivisionError."""
        with pytest.raises(OverflowError):
            Duration.MIN / -1
        assert Duration.MIN.checked_div(-1) is None
        assert Duration.MAX / -1 == -Duration.MAX

    def test_sum(self) -> None:
        """sum() works with the default start of 0."""
        assert sum([Duration.SECOND, Duration.MINUTE]) == Duration.seconds(61)

    def test_overflow_raises(self) -> None:
        """Operators raise OverflowError past the supported range."""
        with pytest.raises(OverflowError):
            Duration.MAX + Duration.NANOSECOND
        with pytest.raises(OverflowError):
            Duration.MIN - Duration.NANOSECOND
        with pytest.raises(OverflowError):
            Duration.MAX * 2

    def test_negating_min_overflows(self) -> None:
        """MIN has no positive counterpart."""
        with pytest.raises(OverflowError):
            -Duration.MIN
        assert abs(Duration.MIN) == Duration.MAX

    def test_checked(self) -> None:
        """checked_* return None on overflow or a zero divisor."""
        assert Duration.MAX.checked_add(Duration.NANOSECOND) is None
        assert Duration.MIN.checked_sub(Duration.NANOSECOND) is None
        assert Duration.MAX.checked_mul(2) is None
        assert Duration.SECOND.checked_div(0) is None
        assert Duration.SECOND.checked_add(Duration.SECOND) == Duration.seconds(2)
        assert Duration.seconds(10).checked_div(-4) == Duration(-2, -500_000_000)

    def test_saturating(self) -> None:
        """saturating_* clamp to MIN or MAX."""
        assert Duration.MAX.saturating_add(Duration.SECOND) == Duration.MAX
        assert Duration.MIN.saturating_sub(Duration.SECOND) == Duration.MIN
        assert Duration.MAX.saturating_mul(-2) == Duration.MIN
        assert Duration.SECOND.saturating_mul(2) == Duration.seconds(2)

    def test_unsupported_operand(self) -> None:
        """Adding a non-duration raises TypeError."""
        with pytest.raises(TypeError):
            Duration.SECOND + 1  # type: ignore[operator]


class TestDurationTimedelta:
    """Tests for interop with datetime.timedelta."""

    def test_from_timedelta(self) -> None:
        """Negative timedeltas keep their sign."""
        delta = datetime.timedelta(days=-1, seconds=1)
        assert Duration.from_timedelta(delta) == Duration.seconds(-86_399)

    def test_to_timedelta_truncates_nanoseconds(self) -> None:
        """Nanoseconds below a microsecond are dropped."""
        assert Duration(1, 1_500).to_timedelta() == datetime.timedelta(seconds=1, microseconds=1)

    def test_abs_timedelta(self) -> None:
        """abs_timedelta is the unsigned magnitude."""
        assert Duration.seconds(-1).abs_timedelta() == datetime.timedelta(seconds=1)

    def test_operators_with_timedelta(self) -> None:
        """timedelta works on either side of + and -."""
        delta = datetime.timedelta(seconds=1)
        assert Duration.SECOND + delta == Duration.seconds(2)
        assert delta + Duration.SECOND == Duration.seconds(2)
        assert Duration.SECOND - delta == Duration.ZERO
        assert delta - Duration.seconds(3) == Duration.seconds(-2)


class TestDurationComparison:
    """Tests for comparison, hashing and string forms."""

    def test_ordering(self) -> None:
        """Ordering follows the total signed length."""
        assert Duration(0, -1) < Duration.ZERO < Duration.NANOSECOND
        assert Duration.MIN < Duration.MAX
        assert Duration.seconds(1) <= Duration(0, 1_000_000_000)

    def test_equality_with_other_types(self) -> None:
        """A Duration never equals a plain number."""
        assert Duration.SECOND != 1
        with pytest.raises(TypeError):
            Duration.SECOND < 1  # type: ignore[operator]

    def test_hash(self) -> None:
        """Equal durations hash equally."""
        assert hash(Duration(1, -500_000_000)) == hash(Duration(0, 500_000_000))

    def test_bool(self) -> None:
        """Only the zero duration is falsy."""
        assert not Duration.ZERO
        assert Duration.NANOSECOND

    def test_repr(self) -> None:
        """repr shows both fields."""
        assert repr(Duration(1, 5)) == "Duration(seconds=1, nanoseconds=5)"

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (Duration.ZERO, "0s"),
            (Duration.minutes(90), "1h30m"),
            (-Duration.minutes(90), "-1h30m"),
            (
                Duration(93_784, 5_006_007),
                "1d2h3m4s5ms6µs7ns",
            ),
        ],
    )
    def test_str(self, duration: Duration, expected: str) -> None:
        """str omits zero units."""
        assert str(duration) == expected
