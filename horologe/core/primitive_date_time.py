"""PrimitiveDateTime class combining a Date and a Time.

This module provides the PrimitiveDateTime class, a date and time of day
with no knowledge of any UTC offset.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, TextIO, overload

from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.time import Time
from horologe.core.utc_offset import UtcOffset
from horologe.format_description.parse import into_description
from horologe.units.adjustment import DateAdjustment
from horologe.units.weekday import Weekday

if TYPE_CHECKING:
    from horologe.core.offset_date_time import OffsetDateTime
    from horologe.format_description import Description
    from horologe.parsing.parsed import Parsed


class PrimitiveDateTime:
    """A date and time of day without an offset.

    Ordering and equality compare the date first and then the time. Since
    there is no offset, two values are only comparable as wall-clock
    readings, not as instants.

    Examples:
        >>> dt = PrimitiveDateTime(Date(2019, 12, 31), Time(23, 59, 59))
        >>> dt + Duration.seconds(2)
        PrimitiveDateTime(Date(2020, 1, 1), Time(0, 0, 1, nanosecond=0))

        >>> str(dt)
        '2019-12-31 23:59:59.0'
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        """Create a PrimitiveDateTime from a Date and a Time."""
        self._date: Date = date
        self._time: Time = time

    @classmethod
    def parse(cls, text: str, description: Description) -> PrimitiveDateTime:
        """Parse a PrimitiveDateTime from text using a format description.

        Examples:
            >>> PrimitiveDateTime.parse("2020-01-02 03:04", "[year]-[month]-[day] [hour]:[minute]")
            PrimitiveDateTime(Date(2020, 1, 2), Time(3, 4, 0, nanosecond=0))
        """
        return cls._from_parsed(into_description(description).parse(text))

    @classmethod
    def _from_parsed(cls, parsed: Parsed) -> PrimitiveDateTime:
        """Build a PrimitiveDateTime from parsed components."""
        return cls(Date._from_parsed(parsed), Time._from_parsed(parsed))

    # Components

    def date(self) -> Date:
        """Return the date component."""
        return self._date

    def time(self) -> Time:
        """Return the time component."""
        return self._time

    @property
    def year(self) -> int:
        """Return the calendar year."""
        return self._date.year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self._date.month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._date.day

    @property
    def ordinal(self) -> int:
        """Return the day of the year (1-366)."""
        return self._date.ordinal

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week."""
        return self._date.weekday

    @property
    def iso_week(self) -> int:
        """Return the ISO 8601 week number."""
        return self._date.iso_week

    @property
    def sunday_based_week(self) -> int:
        """Return the Sunday-based week number."""
        return self._date.sunday_based_week

    @property
    def monday_based_week(self) -> int:
        """Return the Monday-based week number."""
        return self._date.monday_based_week

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self._time.hour

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._time.minute

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._time.second

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second."""
        return self._time.millisecond

    @property
    def microsecond(self) -> int:
        """Return the microsecond within the second."""
        return self._time.microsecond

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond within the second."""
        return self._time.nanosecond

    def to_calendar_date(self) -> tuple[int, int, int]:
        """Return the (year, month, day) of the date."""
        return self._date.to_calendar_date()

    def to_ordinal_date(self) -> tuple[int, int]:
        """Return the (year, ordinal) of the date."""
        return self._date.to_ordinal_date()

    def to_iso_week_date(self) -> tuple[int, int, Weekday]:
        """Return the ISO (year, week, weekday) of the date."""
        return self._date.to_iso_week_date()

    def to_julian_day(self) -> int:
        """Return the Julian day number of the date."""
        return self._date.to_julian_day()

    def as_hms(self) -> tuple[int, int, int]:
        """Return the (hour, minute, second) of the time."""
        return self._time.as_hms()

    def as_hms_nano(self) -> tuple[int, int, int, int]:
        """Return the (hour, minute, second, nanosecond) of the time."""
        return self._time.as_hms_nano()

    # Offsets

    def assume_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Interpret this wall-clock value as being in ``offset``.

        The returned OffsetDateTime represents the instant at which a clock
        in that offset shows this date and time.

        Raises:
            ComponentRangeError: If the equivalent UTC value is outside the
                supported date range.

        Examples:
            >>> dt = PrimitiveDateTime(Date(2020, 1, 1), Time(0, 0, 0))
            >>> dt.assume_offset(UtcOffset.from_hms(1, 0, 0)).to_offset(UtcOffset.UTC).hour
            23
        """
        from horologe.core.offset_date_time import OffsetDateTime

        utc = self - Duration.seconds(offset.whole_seconds)
        return OffsetDateTime._from_utc_unchecked(utc, offset)

    def assume_utc(self) -> OffsetDateTime:
        """Interpret this wall-clock value as UTC."""
        from horologe.core.offset_date_time import OffsetDateTime

        return OffsetDateTime._from_utc_unchecked(self, UtcOffset.UTC)

    def replace_date(self, date: Date) -> PrimitiveDateTime:
        """Return a copy with the date replaced."""
        return PrimitiveDateTime(date, self._time)

    def replace_time(self, time: Time) -> PrimitiveDateTime:
        """Return a copy with the time replaced."""
        return PrimitiveDateTime(self._date, time)

    # Formatting

    def format(self, description: Description) -> str:
        """Format the value using a format description.

        Raises:
            InsufficientTypeInformation: If the description needs an offset.
        """
        return into_description(description).format(date=self._date, time=self._time)

    def format_into(self, output: TextIO, description: Description) -> int:
        """Write the formatted value to ``output``, returning the characters written."""
        return into_description(description).format_into(
            output, date=self._date, time=self._time
        )

    # Arithmetic

    def _apply(self, adjustment: DateAdjustment, time: Time, date: Date) -> PrimitiveDateTime:
        if adjustment is DateAdjustment.NEXT:
            date = date.next_day()
        elif adjustment is DateAdjustment.PREVIOUS:
            date = date.previous_day()
        return PrimitiveDateTime(date, time)

    def __add__(self, other: object) -> PrimitiveDateTime:
        """Add a Duration or timedelta.

        The sub-day part is added to the time; whole days and any carry
        from the time are added to the date.

        Raises:
            ComponentRangeError: If the result is outside the supported range.
        """
        if isinstance(other, _datetime.timedelta):
            other = Duration.from_timedelta(other)
        if not isinstance(other, Duration):
            return NotImplemented
        adjustment, time = self._time.adjusting_add(other)
        return self._apply(adjustment, time, self._date + other)

    def __radd__(self, other: object) -> PrimitiveDateTime:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> PrimitiveDateTime: ...

    @overload
    def __sub__(self, other: _datetime.timedelta) -> PrimitiveDateTime: ...

    @overload
    def __sub__(self, other: PrimitiveDateTime) -> Duration: ...

    def __sub__(self, other: object) -> PrimitiveDateTime | Duration:
        """Subtract a Duration or timedelta, or find the Duration between two values.

        Examples:
            >>> a = PrimitiveDateTime(Date(2020, 1, 2), Time(0, 0, 0))
            >>> b = PrimitiveDateTime(Date(2020, 1, 1), Time(12, 0, 0))
            >>> a - b
            Duration(seconds=43200, nanoseconds=0)
        """
        if isinstance(other, PrimitiveDateTime):
            return (self._date - other._date) + (self._time - other._time)
        if isinstance(other, _datetime.timedelta):
            other = Duration.from_timedelta(other)
        if isinstance(other, Duration):
            return self + (-other)
        return NotImplemented

    # Comparison operators

    def _key(self) -> tuple[Date, Time]:
        return self._date, self._time

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"PrimitiveDateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return f"{self._date} {self._time}"


__all__ = ["PrimitiveDateTime"]
