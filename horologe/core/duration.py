"""Duration class representing a signed span of time.

This module provides the Duration class for representing elapsed time
with nanosecond precision, independent of any calendar.
"""

from __future__ import annotations

import datetime as _datetime
import math
from typing import ClassVar

from horologe._internal.constants import (
    MAX_DURATION_SECONDS,
    MIN_DURATION_SECONDS,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)


def _truncated_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of value."""
    quotient, remainder = divmod(abs(value), divisor)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


class Duration:
    """A signed span of time with nanosecond precision.

    Duration stores whole seconds and the nanoseconds within the current
    second. The two components always share a sign (or one of them is zero),
    so ``Duration(-1, -500_000_000)`` is minus one and a half seconds.

    Whole seconds are bounded to a signed 64-bit range. Operators raise
    OverflowError past that range; the ``checked_*`` methods return None
    and the ``saturating_*`` methods clamp instead.

    Attributes:
        whole_seconds: The number of whole seconds (truncated toward zero).
        subsec_nanoseconds: Nanoseconds past the whole seconds, same sign.

    Examples:
        >>> Duration(1, 500_000_000)
        Duration(seconds=1, nanoseconds=500000000)

        >>> Duration(1, -500_000_000)  # Normalized to a single sign
        Duration(seconds=0, nanoseconds=500000000)

        >>> Duration.hours(25).whole_days
        1

        >>> str(Duration.minutes(90))
        '1h30m'
    """

    __slots__ = ("_seconds", "_nanos")

    ZERO: ClassVar[Duration]
    NANOSECOND: ClassVar[Duration]
    MICROSECOND: ClassVar[Duration]
    MILLISECOND: ClassVar[Duration]
    SECOND: ClassVar[Duration]
    MINUTE: ClassVar[Duration]
    HOUR: ClassVar[Duration]
    DAY: ClassVar[Duration]
    WEEK: ClassVar[Duration]
    MIN: ClassVar[Duration]
    MAX: ClassVar[Duration]

    def __init__(self, seconds: int = 0, nanoseconds: int = 0) -> None:
        """Create a Duration from seconds and nanoseconds.

        The nanoseconds may exceed one second and may disagree in sign with
        the seconds; the result is re-normalized so both components agree.

        Args:
            seconds: Number of seconds.
            nanoseconds: Number of nanoseconds.

        Raises:
            OverflowError: If the result does not fit in the supported range.

        Examples:
            >>> Duration(-1, 2_000_000_000)
            Duration(seconds=1, nanoseconds=0)
        """
        whole, nanos = _truncated_divmod(
            seconds * NANOS_PER_SECOND + nanoseconds, NANOS_PER_SECOND
        )
        if not MIN_DURATION_SECONDS <= whole <= MAX_DURATION_SECONDS:
            raise OverflowError("overflow constructing `Duration`")
        self._seconds: int = whole
        self._nanos: int = nanos

    @classmethod
    def _new_unchecked(cls, seconds: int, nanoseconds: int) -> Duration:
        """Create a Duration without normalizing.

        The caller must guarantee that ``abs(nanoseconds) < 1_000_000_000``,
        that both components share a sign or one is zero, and that seconds
        fits in a signed 64-bit integer.
        """
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._nanos = nanoseconds
        return instance

    @classmethod
    def _from_total_nanoseconds(cls, nanos: int) -> Duration | None:
        """Build a Duration from total nanoseconds, or None if out of range."""
        seconds, subsec = _truncated_divmod(nanos, NANOS_PER_SECOND)
        if not MIN_DURATION_SECONDS <= seconds <= MAX_DURATION_SECONDS:
            return None
        return cls._new_unchecked(seconds, subsec)

    @classmethod
    def weeks(cls, weeks: int) -> Duration:
        """Create a Duration from a number of weeks.

        Examples:
            >>> Duration.weeks(1)
            Duration(seconds=604800, nanoseconds=0)
        """
        return cls(weeks * SECONDS_PER_WEEK)

    @classmethod
    def days(cls, days: int) -> Duration:
        """Create a Duration from a number of days."""
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def seconds(cls, seconds: int) -> Duration:
        """Create a Duration from a number of seconds."""
        return cls(seconds)

    @classmethod
    def seconds_f(cls, seconds: float) -> Duration:
        """Create a Duration from a number of seconds as a float.

        The fractional part is truncated to whole nanoseconds.

        Examples:
            >>> Duration.seconds_f(0.5)
            Duration(seconds=0, nanoseconds=500000000)
            >>> Duration.seconds_f(-0.5)
            Duration(seconds=0, nanoseconds=-500000000)
        """
        if not math.isfinite(seconds):
            raise OverflowError("cannot create a `Duration` from a non-finite float")
        return cls(int(seconds), int(math.fmod(seconds, 1.0) * NANOS_PER_SECOND))

    @classmethod
    def milliseconds(cls, milliseconds: int) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls(0, milliseconds * NANOS_PER_MILLISECOND)

    @classmethod
    def microseconds(cls, microseconds: int) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls(0, microseconds * NANOS_PER_MICROSECOND)

    @classmethod
    def nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls(0, nanoseconds)

    @classmethod
    def from_timedelta(cls, delta: _datetime.timedelta) -> Duration:
        """Create a Duration from a ``datetime.timedelta``.

        Examples:
            >>> Duration.from_timedelta(_datetime.timedelta(days=-1))
            Duration(seconds=-86400, nanoseconds=0)
        """
        return cls(
            delta.days * SECONDS_PER_DAY + delta.seconds,
            delta.microseconds * NANOS_PER_MICROSECOND,
        )

    # Properties

    @property
    def is_zero(self) -> bool:
        """Return True if the duration is exactly zero."""
        return self._seconds == 0 and self._nanos == 0

    @property
    def is_negative(self) -> bool:
        """Return True if the duration is less than zero."""
        return self._seconds < 0 or self._nanos < 0

    @property
    def is_positive(self) -> bool:
        """Return True if the duration is greater than zero."""
        return self._seconds > 0 or self._nanos > 0

    @property
    def whole_weeks(self) -> int:
        """Return the number of whole weeks, truncated toward zero."""
        return _truncated_divmod(self._seconds, SECONDS_PER_WEEK)[0]

    @property
    def whole_days(self) -> int:
        """Return the number of whole days, truncated toward zero.

        Examples:
            >>> Duration.hours(-36).whole_days
            -1
        """
        return _truncated_divmod(self._seconds, SECONDS_PER_DAY)[0]

    @property
    def whole_hours(self) -> int:
        """Return the number of whole hours, truncated toward zero."""
        return _truncated_divmod(self._seconds, SECONDS_PER_HOUR)[0]

    @property
    def whole_minutes(self) -> int:
        """Return the number of whole minutes, truncated toward zero."""
        return _truncated_divmod(self._seconds, SECONDS_PER_MINUTE)[0]

    @property
    def whole_seconds(self) -> int:
        """Return the number of whole seconds."""
        return self._seconds

    @property
    def whole_milliseconds(self) -> int:
        """Return the total number of whole milliseconds."""
        return self._seconds * 1_000 + _truncated_divmod(self._nanos, NANOS_PER_MILLISECOND)[0]

    @property
    def whole_microseconds(self) -> int:
        """Return the total number of whole microseconds."""
        return self._seconds * 1_000_000 + _truncated_divmod(self._nanos, 1_000)[0]

    @property
    def whole_nanoseconds(self) -> int:
        """Return the total number of nanoseconds.

        Examples:
            >>> Duration(1, 500).whole_nanoseconds
            1000000500
        """
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def subsec_milliseconds(self) -> int:
        """Return the milliseconds past the whole seconds, same sign."""
        return _truncated_divmod(self._nanos, NANOS_PER_MILLISECOND)[0]

    @property
    def subsec_microseconds(self) -> int:
        """Return the microseconds past the whole seconds, same sign."""
        return _truncated_divmod(self._nanos, NANOS_PER_MICROSECOND)[0]

    @property
    def subsec_nanoseconds(self) -> int:
        """Return the nanoseconds past the whole seconds, same sign."""
        return self._nanos

    def as_seconds_f(self) -> float:
        """Return the duration as a float number of seconds.

        This conversion may lose precision for very large or very precise
        durations. For exact values use ``whole_nanoseconds``.
        """
        return self._seconds + self._nanos / NANOS_PER_SECOND

    def to_timedelta(self) -> _datetime.timedelta:
        """Return the duration as a ``datetime.timedelta``.

        Nanoseconds below one microsecond are truncated toward zero.

        Raises:
            OverflowError: If the duration exceeds timedelta's range.
        """
        return _datetime.timedelta(
            seconds=self._seconds,
            microseconds=_truncated_divmod(self._nanos, NANOS_PER_MICROSECOND)[0],
        )

    def abs_timedelta(self) -> _datetime.timedelta:
        """Return the magnitude of the duration as an unsigned timedelta."""
        return abs(self).to_timedelta()

    # Checked and saturating arithmetic

    def checked_add(self, other: Duration) -> Duration | None:
        """Add two durations, returning None on overflow."""
        return Duration._from_total_nanoseconds(
            self.whole_nanoseconds + other.whole_nanoseconds
        )

    def checked_sub(self, other: Duration) -> Duration | None:
        """Subtract a duration, returning None on overflow."""
        return Duration._from_total_nanoseconds(
            self.whole_nanoseconds - other.whole_nanoseconds
        )

    def checked_mul(self, factor: int) -> Duration | None:
        """Multiply by an integer, returning None on overflow."""
        return Duration._from_total_nanoseconds(self.whole_nanoseconds * factor)

    def checked_div(self, divisor: int) -> Duration | None:
        """Divide by an integer, returning None on a zero divisor or overflow.

        The quotient is truncated toward zero.
        """
        if divisor == 0:
            return None
        quotient = abs(self.whole_nanoseconds) // abs(divisor)
        if (self.whole_nanoseconds < 0) != (divisor < 0):
            quotient = -quotient
        return Duration._from_total_nanoseconds(quotient)

    def _saturate(self, result: Duration | None, negative: bool) -> Duration:
        if result is not None:
            return result
        return Duration.MIN if negative else Duration.MAX

    def saturating_add(self, other: Duration) -> Duration:
        """Add two durations, clamping to MIN or MAX on overflow."""
        return self._saturate(
            self.checked_add(other),
            self.whole_nanoseconds + other.whole_nanoseconds < 0,
        )

    def saturating_sub(self, other: Duration) -> Duration:
        """Subtract a duration, clamping to MIN or MAX on overflow."""
        return self._saturate(
            self.checked_sub(other),
            self.whole_nanoseconds - other.whole_nanoseconds < 0,
        )

    def saturating_mul(self, factor: int) -> Duration:
        """Multiply by an integer, clamping to MIN or MAX on overflow."""
        return self._saturate(
            self.checked_mul(factor),
            self.whole_nanoseconds * factor < 0,
        )

    # Operators

    @staticmethod
    def _coerce(other: object) -> Duration | None:
        if isinstance(other, Duration):
            return other
        if isinstance(other, _datetime.timedelta):
            return Duration.from_timedelta(other)
        return None

    def __add__(self, other: object) -> Duration:
        """Add a Duration or timedelta.

        Raises:
            OverflowError: If the sum is out of range.

        Examples:
            >>> Duration.seconds(30) + Duration.seconds(45)
            Duration(seconds=75, nanoseconds=0)
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.checked_add(rhs)
        if result is None:
            raise OverflowError("overflow when adding durations")
        return result

    def __radd__(self, other: object) -> Duration:
        """Support timedelta + Duration and sum()."""
        if other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other: object) -> Duration:
        """Subtract a Duration or timedelta.

        Raises:
            OverflowError: If the difference is out of range.
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.checked_sub(rhs)
        if result is None:
            raise OverflowError("overflow when subtracting durations")
        return result

    def __rsub__(self, other: object) -> Duration:
        """Support timedelta - Duration."""
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Duration:
        """Multiply by an int (exact) or a float (via seconds).

        Examples:
            >>> Duration.seconds(30) * 3
            Duration(seconds=90, nanoseconds=0)
            >>> Duration.seconds(1) * 1.5
            Duration(seconds=1, nanoseconds=500000000)
        """
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            result = self.checked_mul(other)
            if result is None:
                raise OverflowError("overflow when multiplying duration")
            return result
        if isinstance(other, float):
            return Duration.seconds_f(self.as_seconds_f() * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Duration | float:
        """Divide by an int, a float, or another Duration.

        Dividing by a number yields a Duration; dividing by a Duration
        yields their ratio as a float.

        Raises:
            ZeroDivisionError: If the divisor is zero.
            OverflowError: If the quotient does not fit, as in
                ``Duration.MIN / -1``.

        Examples:
            >>> Duration.seconds(90) / 3
            Duration(seconds=30, nanoseconds=0)
            >>> Duration.minutes(1) / Duration.seconds(30)
            2.0
        """
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            if other == 0:
                raise ZeroDivisionError("division by zero")
            result = self.checked_div(other)
            if result is None:
                raise OverflowError("overflow when dividing duration")
            return result
        if isinstance(other, float):
            if other == 0:
                raise ZeroDivisionError("division by zero")
            return Duration.seconds_f(self.as_seconds_f() / other)
        if isinstance(other, Duration):
            if other.is_zero:
                raise ZeroDivisionError("division by zero")
            return self.whole_nanoseconds / other.whole_nanoseconds
        return NotImplemented

    def __neg__(self) -> Duration:
        """Return the negation of this duration.

        Examples:
            >>> -Duration(1, 500)
            Duration(seconds=-1, nanoseconds=-500)
        """
        if self._seconds == MIN_DURATION_SECONDS:
            raise OverflowError("overflow when negating duration")
        return Duration._new_unchecked(-self._seconds, -self._nanos)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        """Return the absolute value of this duration.

        ``abs(Duration.MIN)`` saturates to ``Duration.MAX``.
        """
        if self._seconds == MIN_DURATION_SECONDS:
            return Duration.MAX
        return Duration._new_unchecked(abs(self._seconds), abs(self._nanos))

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.whole_nanoseconds < other.whole_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.whole_nanoseconds <= other.whole_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.whole_nanoseconds > other.whole_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.whole_nanoseconds >= other.whole_nanoseconds

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a compact representation such as ``-1d2h3m4s5ms``.

        Zero-valued units are omitted; a zero duration is ``0s``.
        """
        if self.is_zero:
            return "0s"

        magnitude = abs(self)
        seconds = magnitude._seconds
        nanos = magnitude._nanos
        parts = [
            (seconds // SECONDS_PER_DAY, "d"),
            (seconds % SECONDS_PER_DAY // SECONDS_PER_HOUR, "h"),
            (seconds % SECONDS_PER_HOUR // SECONDS_PER_MINUTE, "m"),
            (seconds % SECONDS_PER_MINUTE, "s"),
            (nanos // NANOS_PER_MILLISECOND, "ms"),
            (nanos % NANOS_PER_MILLISECOND // NANOS_PER_MICROSECOND, "µs"),
            (nanos % NANOS_PER_MICROSECOND, "ns"),
        ]
        text = "".join(f"{value}{unit}" for value, unit in parts if value)
        return f"-{text}" if self.is_negative else text


Duration.ZERO = Duration._new_unchecked(0, 0)
Duration.NANOSECOND = Duration._new_unchecked(0, 1)
Duration.MICROSECOND = Duration._new_unchecked(0, NANOS_PER_MICROSECOND)
Duration.MILLISECOND = Duration._new_unchecked(0, NANOS_PER_MILLISECOND)
Duration.SECOND = Duration._new_unchecked(1, 0)
Duration.MINUTE = Duration._new_unchecked(SECONDS_PER_MINUTE, 0)
Duration.HOUR = Duration._new_unchecked(SECONDS_PER_HOUR, 0)
Duration.DAY = Duration._new_unchecked(SECONDS_PER_DAY, 0)
Duration.WEEK = Duration._new_unchecked(SECONDS_PER_WEEK, 0)
Duration.MIN = Duration._new_unchecked(MIN_DURATION_SECONDS, -(NANOS_PER_SECOND - 1))
Duration.MAX = Duration._new_unchecked(MAX_DURATION_SECONDS, NANOS_PER_SECOND - 1)


__all__ = ["Duration"]
