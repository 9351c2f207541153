"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar, TextIO, overload

from horologe._internal.cascade import cascade
from horologe._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from horologe._internal.validation import ensure_in_range, validate_range
from horologe.core.duration import Duration
from horologe.errors import ComponentRangeError, InsufficientInformation, ParsedComponentRange
from horologe.format_description.parse import into_description
from horologe.units.adjustment import DateAdjustment

if TYPE_CHECKING:
    from horologe.format_description import Description
    from horologe.parsing.parsed import Parsed


class Time:
    """A time of day with nanosecond precision.

    Time represents the wall-clock time within a single day, from midnight
    (00:00:00) to just before the next midnight (23:59:59.999999999). It
    has no date or offset. Leap seconds are not represented.

    Adding a Duration wraps around midnight; use :meth:`adjusting_add` to
    learn whether the result moved to the previous or next day.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        microsecond: The microsecond component (0-999999).
        nanosecond: The nanosecond component (0-999999999).

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour
        14

        >>> Time(12, 0, 0, 123_456_789).microsecond
        123456

        >>> str(Time.from_hms_milli(1, 2, 3, 4))
        '1:02:03.004'
    """

    __slots__ = ("_hour", "_minute", "_second", "_nanosecond")

    MIDNIGHT: ClassVar[Time]

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).

        Raises:
            ComponentRangeError: If any component is out of range. The first
                offending component, in the order above, is reported.

        Examples:
            >>> Time(14, 30, 45)
            Time(14, 30, 45, nanosecond=0)

            >>> Time(24, 0, 0)
            Traceback (most recent call last):
            ...
            horologe.errors.ComponentRangeError: hour must be in the range 0..=23
        """
        ensure_in_range("hour", hour, 0, 23)
        ensure_in_range("minute", minute, 0, 59)
        ensure_in_range("second", second, 0, 59)
        ensure_in_range("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1)

        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._nanosecond: int = nanosecond

    @classmethod
    def _from_hms_nanos_unchecked(
        cls, hour: int, minute: int, second: int, nanosecond: int
    ) -> Time:
        """Create a Time without validating the components.

        The caller must guarantee every component is within its range.
        Passing an out-of-range value produces a Time that breaks the
        ordering and arithmetic of every other instance.
        """
        instance = object.__new__(cls)
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        instance._nanosecond = nanosecond
        return instance

    @classmethod
    def from_hms(cls, hour: int, minute: int, second: int) -> Time:
        """Create a Time from the hour, minute and second.

        Raises:
            ComponentRangeError: If any component is out of range.

        Examples:
            >>> Time.from_hms(1, 2, 3)
            Time(1, 2, 3, nanosecond=0)
        """
        return cls(hour, minute, second)

    @classmethod
    @validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59), millisecond=(0, 999))
    def from_hms_milli(cls, hour: int, minute: int, second: int, millisecond: int) -> Time:
        """Create a Time from the hour, minute, second and millisecond.

        Raises:
            ComponentRangeError: If any component is out of range.
        """
        return cls._from_hms_nanos_unchecked(
            hour, minute, second, millisecond * NANOS_PER_MILLISECOND
        )

    @classmethod
    @validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59), microsecond=(0, 999_999))
    def from_hms_micro(cls, hour: int, minute: int, second: int, microsecond: int) -> Time:
        """Create a Time from the hour, minute, second and microsecond.

        Raises:
            ComponentRangeError: If any component is out of range.
        """
        return cls._from_hms_nanos_unchecked(
            hour, minute, second, microsecond * NANOS_PER_MICROSECOND
        )

    @classmethod
    def from_hms_nano(cls, hour: int, minute: int, second: int, nanosecond: int) -> Time:
        """Create a Time from the hour, minute, second and nanosecond.

        Raises:
            ComponentRangeError: If any component is out of range.
        """
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def parse(cls, text: str, description: Description) -> Time:
        """Parse a Time from text using a format description.

        Args:
            text: The input string.
            description: A FormatDescription, a well-known format, or a
                format-description string to compile.

        Returns:
            The parsed Time.

        Raises:
            ParseError: If the text does not match, or does not contain
                enough information to build a Time.

        Examples:
            >>> Time.parse("13:05", "[hour]:[minute]")
            Time(13, 5, 0, nanosecond=0)
        """
        return cls._from_parsed(into_description(description).parse(text))

    @classmethod
    def _from_parsed(cls, parsed: Parsed) -> Time:
        """Build a Time from parsed components.

        The hour comes from the 24-hour value when present, otherwise from
        the 12-hour value and the period. Minute is required; second and
        subsecond default to zero.
        """
        if parsed.hour_24 is not None:
            hour = parsed.hour_24
        elif parsed.hour_12 is not None and parsed.hour_12_is_pm is not None:
            hour = parsed.hour_12 % 12
            if parsed.hour_12_is_pm:
                hour += 12
        else:
            raise InsufficientInformation()

        if parsed.minute is None:
            raise InsufficientInformation()

        try:
            return cls.from_hms_nano(
                hour,
                parsed.minute,
                parsed.second if parsed.second is not None else 0,
                parsed.subsecond if parsed.subsecond is not None else 0,
            )
        except ComponentRangeError as exc:
            raise ParsedComponentRange(exc) from exc

    # Properties

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._minute

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._second

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second (0-999)."""
        return self._nanosecond // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microsecond within the second (0-999999)."""
        return self._nanosecond // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond within the second (0-999999999)."""
        return self._nanosecond

    def as_hms(self) -> tuple[int, int, int]:
        """Return the (hour, minute, second) of the time."""
        return self._hour, self._minute, self._second

    def as_hms_milli(self) -> tuple[int, int, int, int]:
        """Return the (hour, minute, second, millisecond) of the time."""
        return self._hour, self._minute, self._second, self.millisecond

    def as_hms_micro(self) -> tuple[int, int, int, int]:
        """Return the (hour, minute, second, microsecond) of the time."""
        return self._hour, self._minute, self._second, self.microsecond

    def as_hms_nano(self) -> tuple[int, int, int, int]:
        """Return the (hour, minute, second, nanosecond) of the time."""
        return self._hour, self._minute, self._second, self._nanosecond

    def replace(
        self,
        *,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> Time:
        """Return a new Time with the given components replaced.

        Raises:
            ComponentRangeError: If a replacement is out of range.

        Examples:
            >>> Time(14, 30, 45).replace(hour=9)
            Time(9, 30, 45, nanosecond=0)
        """
        return Time(
            self._hour if hour is None else hour,
            self._minute if minute is None else minute,
            self._second if second is None else second,
            self._nanosecond if nanosecond is None else nanosecond,
        )

    # Adjusting arithmetic

    def adjusting_add(self, duration: Duration) -> tuple[DateAdjustment, Time]:
        """Add a Duration, reporting whether the day changed.

        Components are added separately and then cascaded from nanoseconds
        up to hours. An hour that leaves 0..23 is wrapped instead of
        carried, and the direction is returned as a DateAdjustment.

        Args:
            duration: The signed duration to add.

        Returns:
            Tuple of (day adjustment, resulting time).

        Examples:
            >>> Time(23, 59, 59).adjusting_add(Duration.seconds(2))
            (<DateAdjustment.NEXT: 'next'>, Time(0, 0, 1, nanosecond=0))
        """
        whole_days = duration.whole_days
        whole_hours = duration.whole_hours
        whole_minutes = duration.whole_minutes

        nanosecond = self._nanosecond + duration.subsec_nanoseconds
        second = self._second + (duration.whole_seconds - whole_minutes * SECONDS_PER_MINUTE)
        minute = self._minute + (whole_minutes - whole_hours * 60)
        hour = self._hour + (whole_hours - whole_days * 24)

        if (
            0 <= nanosecond < NANOS_PER_SECOND
            and 0 <= second < 60
            and 0 <= minute < 60
            and 0 <= hour < 24
        ):
            return DateAdjustment.NONE, Time._from_hms_nanos_unchecked(
                hour, minute, second, nanosecond
            )

        nanosecond, second = cascade(nanosecond, 0, NANOS_PER_SECOND, second)
        second, minute = cascade(second, 0, 60, minute)
        minute, hour = cascade(minute, 0, 60, hour)

        adjustment = DateAdjustment.NONE
        if hour >= 24:
            hour -= 24
            adjustment = DateAdjustment.NEXT
        elif hour < 0:
            hour += 24
            adjustment = DateAdjustment.PREVIOUS

        return adjustment, Time._from_hms_nanos_unchecked(hour, minute, second, nanosecond)

    def adjusting_sub(self, duration: Duration) -> tuple[DateAdjustment, Time]:
        """Subtract a Duration, reporting whether the day changed.

        Examples:
            >>> Time(0, 0, 1).adjusting_sub(Duration.seconds(2))
            (<DateAdjustment.PREVIOUS: 'previous'>, Time(23, 59, 59, nanosecond=0))
        """
        return self.adjusting_add(-duration)

    def adjusting_add_std(self, delta: _datetime.timedelta) -> tuple[bool, Time]:
        """Add a timedelta, reporting whether the result is on the next day.

        A negative timedelta is subtracted instead, and the flag then
        reports a move to the previous day.

        Returns:
            Tuple of (crossed midnight, resulting time).

        Examples:
            >>> Time(23, 0, 0).adjusting_add_std(_datetime.timedelta(hours=2))
            (True, Time(1, 0, 0, nanosecond=0))
        """
        if delta < _datetime.timedelta(0):
            return self.adjusting_sub_std(-delta)

        whole_seconds, nanos = _split_timedelta(delta)
        nanosecond = self._nanosecond + nanos
        second = self._second + whole_seconds % 60
        minute = self._minute + whole_seconds // SECONDS_PER_MINUTE % 60
        hour = self._hour + whole_seconds // SECONDS_PER_HOUR % 24

        nanosecond, second = cascade(nanosecond, 0, NANOS_PER_SECOND, second)
        second, minute = cascade(second, 0, 60, minute)
        minute, hour = cascade(minute, 0, 60, hour)

        is_next_day = hour >= 24
        if is_next_day:
            hour -= 24

        return is_next_day, Time._from_hms_nanos_unchecked(hour, minute, second, nanosecond)

    def adjusting_sub_std(self, delta: _datetime.timedelta) -> tuple[bool, Time]:
        """Subtract a timedelta, reporting whether the result is on the previous day.

        A negative timedelta is added instead, and the flag then reports a
        move to the next day.

        Returns:
            Tuple of (crossed midnight, resulting time).
        """
        if delta < _datetime.timedelta(0):
            return self.adjusting_add_std(-delta)

        whole_seconds, nanos = _split_timedelta(delta)
        nanosecond = self._nanosecond - nanos
        second = self._second - whole_seconds % 60
        minute = self._minute - whole_seconds // SECONDS_PER_MINUTE % 60
        hour = self._hour - whole_seconds // SECONDS_PER_HOUR % 24

        nanosecond, second = cascade(nanosecond, 0, NANOS_PER_SECOND, second)
        second, minute = cascade(second, 0, 60, minute)
        minute, hour = cascade(minute, 0, 60, hour)

        is_previous_day = hour < 0
        if is_previous_day:
            hour += 24

        return is_previous_day, Time._from_hms_nanos_unchecked(
            hour, minute, second, nanosecond
        )

    # Formatting

    def format(self, description: Description) -> str:
        """Format the time using a format description.

        Raises:
            InsufficientTypeInformation: If the description needs a date or
                an offset.

        Examples:
            >>> Time(13, 5, 0).format("[hour repr:12]:[minute] [period]")
            '01:05 PM'
        """
        return into_description(description).format(time=self)

    def format_into(self, output: TextIO, description: Description) -> int:
        """Write the formatted time to ``output``, returning the characters written."""
        return into_description(description).format_into(output, time=self)

    # Arithmetic operators

    def __add__(self, other: object) -> Time:
        """Add a Duration or timedelta, wrapping around midnight.

        Examples:
            >>> Time(12, 0, 0) + Duration.hours(13)
            Time(1, 0, 0, nanosecond=0)
        """
        if isinstance(other, Duration):
            return self.adjusting_add(other)[1]
        if isinstance(other, _datetime.timedelta):
            return self.adjusting_add_std(other)[1]
        return NotImplemented

    @overload
    def __sub__(self, other: Duration) -> Time: ...

    @overload
    def __sub__(self, other: _datetime.timedelta) -> Time: ...

    @overload
    def __sub__(self, other: Time) -> Duration: ...

    def __sub__(self, other: object) -> Time | Duration:
        """Subtract a Duration or timedelta, or find the Duration between two Times.

        Both Times are assumed to be on the same day, so the difference is
        always less than 24 hours in magnitude.

        Examples:
            >>> Time(1, 0, 0) - Time(0, 0, 0, 500_000_000)
            Duration(seconds=3599, nanoseconds=500000000)
        """
        if isinstance(other, Duration):
            return self.adjusting_sub(other)[1]
        if isinstance(other, _datetime.timedelta):
            return self.adjusting_sub_std(other)[1]
        if isinstance(other, Time):
            seconds = (
                (self._hour - other._hour) * SECONDS_PER_HOUR
                + (self._minute - other._minute) * SECONDS_PER_MINUTE
                + (self._second - other._second)
            )
            nanoseconds = self._nanosecond - other._nanosecond
            if seconds > 0 and nanoseconds < 0:
                seconds -= 1
                nanoseconds += NANOS_PER_SECOND
            elif seconds < 0 and nanoseconds > 0:
                seconds += 1
                nanoseconds -= NANOS_PER_SECOND
            return Duration._new_unchecked(seconds, nanoseconds)
        return NotImplemented

    # Comparison operators

    def _key(self) -> tuple[int, int, int, int]:
        return self._hour, self._minute, self._second, self._nanosecond

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Time({self._hour}, {self._minute}, {self._second}, "
            f"nanosecond={self._nanosecond})"
        )

    def __str__(self) -> str:
        """Return the time as ``H:MM:SS.f``.

        The hour is not padded and the fraction keeps as many digits as it
        needs, with at least one.

        Examples:
            >>> str(Time(0, 0, 0))
            '0:00:00.0'
            >>> str(Time(13, 5, 9, 120_000_000))
            '13:05:09.12'
        """
        fraction = f"{self._nanosecond:09d}".rstrip("0") or "0"
        return f"{self._hour}:{self._minute:02d}:{self._second:02d}.{fraction}"


def _split_timedelta(delta: _datetime.timedelta) -> tuple[int, int]:
    """Return the whole seconds and nanoseconds of a non-negative timedelta."""
    return (
        delta.days * SECONDS_PER_DAY + delta.seconds,
        delta.microseconds * NANOS_PER_MICROSECOND,
    )


Time.MIDNIGHT = Time._from_hms_nanos_unchecked(0, 0, 0, 0)


__all__ = ["Time"]
