"""UtcOffset class representing a fixed offset from UTC.

This module provides the UtcOffset class, a signed hours/minutes/seconds
displacement from UTC. Offsets carry no timezone or daylight-saving rules.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING, ClassVar, TextIO

from horologe._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from horologe._internal.validation import validate_range
from horologe.errors import (
    ComponentRangeError,
    IndeterminateOffsetError,
    InsufficientInformation,
    ParsedComponentRange,
)
from horologe.format_description.parse import into_description

if TYPE_CHECKING:
    from horologe.core.offset_date_time import OffsetDateTime
    from horologe.format_description import Description
    from horologe.parsing.parsed import Parsed

logger = logging.getLogger(__name__)


class UtcOffset:
    """A fixed offset from UTC with second resolution.

    The hours, minutes and seconds always share a sign (or are zero), so
    ``-01:30`` is stored as (-1, -30, 0). The magnitude is strictly less
    than 24 hours.

    Examples:
        >>> UtcOffset.from_hms(-1, 30, 0).as_hms()
        (-1, -30, 0)

        >>> UtcOffset.from_whole_seconds(19_800)
        UtcOffset(5, 30, 0)

        >>> str(UtcOffset.from_hms(-5, 0, 0))
        '-05:00:00'
    """

    __slots__ = ("_hours", "_minutes", "_seconds")

    UTC: ClassVar[UtcOffset]

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        """Create a UtcOffset; see :meth:`from_hms`."""
        hours, minutes, seconds = _normalize_signs(hours, minutes, seconds)
        self._hours: int = hours
        self._minutes: int = minutes
        self._seconds: int = seconds

    @classmethod
    def _from_hms_unchecked(cls, hours: int, minutes: int, seconds: int) -> UtcOffset:
        """Create a UtcOffset without validating the components.

        The caller must guarantee each component is within its range and
        that all non-zero components share a sign.
        """
        instance = object.__new__(cls)
        instance._hours = hours
        instance._minutes = minutes
        instance._seconds = seconds
        return instance

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> UtcOffset:
        """Create a UtcOffset from hours, minutes and seconds.

        The sign of the minutes follows the hours, and the sign of the
        seconds follows the hours or minutes, so ``from_hms(-1, 30, 0)``
        is one and a half hours west of UTC.

        Args:
            hours: Hours from UTC (-23 to 23).
            minutes: Minutes (-59 to 59).
            seconds: Seconds (-59 to 59).

        Raises:
            ComponentRangeError: If a component is out of range.

        Examples:
            >>> UtcOffset.from_hms(24, 0, 0)
            Traceback (most recent call last):
            ...
            horologe.errors.ComponentRangeError: hours must be in the range -23..=23
        """
        return cls(hours, minutes, seconds)

    @classmethod
    @validate_range(seconds=(-MAX_UTC_OFFSET_SECONDS, MAX_UTC_OFFSET_SECONDS))
    def from_whole_seconds(cls, seconds: int) -> UtcOffset:
        """Create a UtcOffset from a signed number of seconds.

        Raises:
            ComponentRangeError: If the magnitude is 24 hours or more.
        """
        sign = -1 if seconds < 0 else 1
        magnitude = abs(seconds)
        return cls._from_hms_unchecked(
            sign * (magnitude // SECONDS_PER_HOUR),
            sign * (magnitude // SECONDS_PER_MINUTE % 60),
            sign * (magnitude % 60),
        )

    @classmethod
    def local_offset_at(cls, datetime: OffsetDateTime) -> UtcOffset:
        """Return the host's local UTC offset at the given instant.

        Raises:
            IndeterminateOffsetError: If the host cannot report the offset
                for that instant.
        """
        try:
            local = _datetime.datetime.fromtimestamp(
                datetime.unix_timestamp(), tz=_datetime.timezone.utc
            ).astimezone()
            delta = local.utcoffset()
        except (OverflowError, OSError, ValueError) as exc:
            raise IndeterminateOffsetError() from exc
        if delta is None:
            raise IndeterminateOffsetError()

        offset = cls.from_whole_seconds(int(delta.total_seconds()))
        logger.debug("local offset at %s is %s", datetime, offset)
        return offset

    @classmethod
    def current_local_offset(cls) -> UtcOffset:
        """Return the host's local UTC offset right now.

        Raises:
            IndeterminateOffsetError: If the host cannot report the offset.
        """
        from horologe.core.offset_date_time import OffsetDateTime

        return cls.local_offset_at(OffsetDateTime.now_utc())

    @classmethod
    def parse(cls, text: str, description: Description) -> UtcOffset:
        """Parse a UtcOffset from text using a format description.

        Examples:
            >>> UtcOffset.parse("-00:30", "[offset_hour]:[offset_minute]")
            UtcOffset(0, -30, 0)
        """
        return cls._from_parsed(into_description(description).parse(text))

    @classmethod
    def _from_parsed(cls, parsed: Parsed) -> UtcOffset:
        """Build a UtcOffset from parsed components.

        The offset hour is required; minutes and seconds default to zero. A
        parsed negative sign applies to every component.
        """
        if parsed.offset_hour is None:
            raise InsufficientInformation()

        hours = parsed.offset_hour
        minutes = parsed.offset_minute if parsed.offset_minute is not None else 0
        seconds = parsed.offset_second if parsed.offset_second is not None else 0
        if parsed.offset_is_negative:
            hours, minutes, seconds = -abs(hours), -abs(minutes), -abs(seconds)

        try:
            return cls.from_hms(hours, minutes, seconds)
        except ComponentRangeError as exc:
            raise ParsedComponentRange(exc) from exc

    # Properties

    def as_hms(self) -> tuple[int, int, int]:
        """Return the (hours, minutes, seconds) of the offset, all sharing a sign."""
        return self._hours, self._minutes, self._seconds

    @property
    def whole_hours(self) -> int:
        """Return the whole hours of the offset."""
        return self._hours

    @property
    def whole_minutes(self) -> int:
        """Return the offset expressed in whole minutes."""
        return self._hours * 60 + self._minutes

    @property
    def minutes_past_hour(self) -> int:
        """Return the minutes past the whole hours, with the offset's sign."""
        return self._minutes

    @property
    def whole_seconds(self) -> int:
        """Return the offset expressed in seconds.

        Examples:
            >>> UtcOffset.from_hms(-1, -2, -3).whole_seconds
            -3723
        """
        return self._hours * SECONDS_PER_HOUR + self._minutes * SECONDS_PER_MINUTE + self._seconds

    @property
    def seconds_past_minute(self) -> int:
        """Return the seconds past the whole minutes, with the offset's sign."""
        return self._seconds

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._hours == 0 and self._minutes == 0 and self._seconds == 0

    @property
    def is_positive(self) -> bool:
        """Return True if the offset is east of UTC."""
        return self._hours > 0 or self._minutes > 0 or self._seconds > 0

    @property
    def is_negative(self) -> bool:
        """Return True if the offset is west of UTC."""
        return self._hours < 0 or self._minutes < 0 or self._seconds < 0

    def to_timezone(self) -> _datetime.timezone:
        """Return the equivalent fixed ``datetime.timezone``."""
        return _datetime.timezone(_datetime.timedelta(seconds=self.whole_seconds))

    # Formatting

    def format(self, description: Description) -> str:
        """Format the offset using a format description.

        Examples:
            >>> UtcOffset.from_hms(2, 0, 0).format("[offset_hour sign:mandatory]:[offset_minute]")
            '+02:00'
        """
        return into_description(description).format(offset=self)

    def format_into(self, output: TextIO, description: Description) -> int:
        """Write the formatted offset to ``output``, returning the characters written."""
        return into_description(description).format_into(output, offset=self)

    # Operators

    def __neg__(self) -> UtcOffset:
        return UtcOffset._from_hms_unchecked(-self._hours, -self._minutes, -self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.as_hms() == other.as_hms()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.whole_seconds < other.whole_seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.whole_seconds <= other.whole_seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.whole_seconds > other.whole_seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.whole_seconds >= other.whole_seconds

    def __hash__(self) -> int:
        return hash(self.as_hms())

    def __repr__(self) -> str:
        return f"UtcOffset({self._hours}, {self._minutes}, {self._seconds})"

    def __str__(self) -> str:
        """Return the offset as ``+HH:MM:SS``."""
        sign = "-" if self.is_negative else "+"
        return (
            f"{sign}{abs(self._hours):02d}:{abs(self._minutes):02d}:"
            f"{abs(self._seconds):02d}"
        )


@validate_range(hours=(-23, 23), minutes=(-59, 59), seconds=(-59, 59))
def _normalize_signs(hours: int, minutes: int, seconds: int) -> tuple[int, int, int]:
    """Validate offset components and align the signs of minutes and seconds."""
    if (hours > 0 and minutes < 0) or (hours < 0 and minutes > 0):
        minutes = -minutes
    if (
        (hours > 0 and seconds < 0)
        or (hours < 0 and seconds > 0)
        or (minutes > 0 and seconds < 0)
        or (minutes < 0 and seconds > 0)
    ):
        seconds = -seconds
    return hours, minutes, seconds


UtcOffset.UTC = UtcOffset._from_hms_unchecked(0, 0, 0)


__all__ = ["UtcOffset"]
