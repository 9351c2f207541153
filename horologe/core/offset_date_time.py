"""OffsetDateTime class representing an instant with a UTC offset.

This module provides the OffsetDateTime class. The instant is always
stored in UTC; the offset only changes how the instant is presented.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import time as _time
from typing import TYPE_CHECKING, ClassVar, TextIO, overload

from horologe._internal.calendar import from_julian_day
from horologe._internal.cascade import cascade, cascade_ordinal
from horologe._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_JULIAN_DAY,
)
from horologe._internal.validation import ensure_in_range
from horologe.core.date import MAX_JULIAN_DAY, MIN_JULIAN_DAY, Date
from horologe.core.duration import Duration
from horologe.core.primitive_date_time import PrimitiveDateTime
from horologe.core.time import Time
from horologe.core.utc_offset import UtcOffset
from horologe.errors import ComponentRangeError, ConversionRangeError, ParsedComponentRange
from horologe.format_description.parse import into_description
from horologe.units.weekday import Weekday

if TYPE_CHECKING:
    from horologe.format_description import Description
    from horologe.parsing.parsed import Parsed

logger = logging.getLogger(__name__)

MIN_UNIX_TIMESTAMP: int = (MIN_JULIAN_DAY - UNIX_EPOCH_JULIAN_DAY) * SECONDS_PER_DAY
MAX_UNIX_TIMESTAMP: int = (MAX_JULIAN_DAY - UNIX_EPOCH_JULIAN_DAY + 1) * SECONDS_PER_DAY - 1


class OffsetDateTime:
    """An instant paired with the UTC offset used to present it.

    The instant is stored as a UTC PrimitiveDateTime. Presentation values
    such as ``year``, ``hour`` or :meth:`date` are computed on each access
    by shifting the stored UTC fields by the offset.

    Equality, ordering and hashing consider only the instant: the same
    moment expressed in two different offsets compares equal.

    Examples:
        >>> odt = OffsetDateTime.from_unix_timestamp(0)
        >>> odt == OffsetDateTime.UNIX_EPOCH
        True

        >>> tokyo = odt.to_offset(UtcOffset.from_hms(9, 0, 0))
        >>> tokyo.hour, tokyo == odt
        (9, True)

        >>> OffsetDateTime.from_unix_timestamp(-1).year
        1969
    """

    __slots__ = ("_utc", "_offset")

    UNIX_EPOCH: ClassVar[OffsetDateTime]

    def __init__(self, utc_datetime: PrimitiveDateTime, offset: UtcOffset = UtcOffset.UTC) -> None:
        """Create an OffsetDateTime from a UTC value and a presentation offset.

        Args:
            utc_datetime: The instant, expressed in UTC.
            offset: The offset used to present the instant.

        Examples:
            >>> utc = PrimitiveDateTime(Date(2020, 1, 1), Time(0, 0, 0))
            >>> OffsetDateTime(utc, UtcOffset.from_hms(-5, 0, 0)).day
            31
        """
        self._utc: PrimitiveDateTime = utc_datetime
        self._offset: UtcOffset = offset

    @classmethod
    def _from_utc_unchecked(cls, utc_datetime: PrimitiveDateTime, offset: UtcOffset) -> OffsetDateTime:
        """Create an OffsetDateTime from values already known to be valid."""
        instance = object.__new__(cls)
        instance._utc = utc_datetime
        instance._offset = offset
        return instance

    @classmethod
    def now_utc(cls) -> OffsetDateTime:
        """Return the current instant with a UTC offset.

        Examples:
            >>> OffsetDateTime.now_utc().offset.is_utc
            True
        """
        now = cls.from_unix_timestamp_nanos(_time.time_ns())
        logger.debug("read host clock: %s", now)
        return now

    @classmethod
    def now_local(cls) -> OffsetDateTime:
        """Return the current instant with the host's local offset.

        Raises:
            IndeterminateOffsetError: If the local offset cannot be found.
        """
        now = cls.now_utc()
        return now.to_offset(UtcOffset.local_offset_at(now))

    @classmethod
    def from_unix_timestamp(cls, timestamp: int) -> OffsetDateTime:
        """Create an OffsetDateTime from a Unix timestamp in seconds.

        Negative timestamps are before 1970; the day and the time within the
        day use floor division, so -1 is 23:59:59 on 1969-12-31.

        Raises:
            ComponentRangeError: If the timestamp is outside the supported
                date range.

        Examples:
            >>> OffsetDateTime.from_unix_timestamp(1_546_300_800)
            OffsetDateTime(Date(2019, 1, 1), Time(0, 0, 0, nanosecond=0), UtcOffset(0, 0, 0))
        """
        ensure_in_range("timestamp", timestamp, MIN_UNIX_TIMESTAMP, MAX_UNIX_TIMESTAMP)
        days, seconds = divmod(timestamp, SECONDS_PER_DAY)
        date = Date._from_ordinal_date_unchecked(*from_julian_day(UNIX_EPOCH_JULIAN_DAY + days))
        time = Time._from_hms_nanos_unchecked(
            seconds // SECONDS_PER_HOUR,
            seconds % SECONDS_PER_HOUR // SECONDS_PER_MINUTE,
            seconds % SECONDS_PER_MINUTE,
            0,
        )
        return cls._from_utc_unchecked(PrimitiveDateTime(date, time), UtcOffset.UTC)

    @classmethod
    def from_unix_timestamp_nanos(cls, timestamp: int) -> OffsetDateTime:
        """Create an OffsetDateTime from a Unix timestamp in nanoseconds.

        Raises:
            ComponentRangeError: If the timestamp is outside the supported
                date range.
        """
        seconds, nanos = divmod(timestamp, NANOS_PER_SECOND)
        utc = cls.from_unix_timestamp(seconds)._utc
        return cls._from_utc_unchecked(
            utc.replace_time(utc.time().replace(nanosecond=nanos)), UtcOffset.UTC
        )

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> OffsetDateTime:
        """Create an OffsetDateTime from an aware ``datetime.datetime``.

        Raises:
            ValueError: If the datetime is naive.
            ConversionRangeError: If its offset is not a whole number of
                seconds.

        Examples:
            >>> value = _datetime.datetime(2020, 1, 1, tzinfo=_datetime.timezone.utc)
            >>> OffsetDateTime.from_datetime(value).unix_timestamp()
            1577836800
        """
        delta = value.utcoffset()
        if delta is None:
            raise ValueError("cannot convert a naive datetime to an OffsetDateTime")
        if delta.microseconds:
            raise ConversionRangeError()

        offset = UtcOffset.from_whole_seconds(delta.days * SECONDS_PER_DAY + delta.seconds)
        local = PrimitiveDateTime(
            Date(value.year, value.month, value.day),
            Time(value.hour, value.minute, value.second, value.microsecond * NANOS_PER_MICROSECOND),
        )
        return local.assume_offset(offset)

    @classmethod
    def parse(cls, text: str, description: Description) -> OffsetDateTime:
        """Parse an OffsetDateTime from text using a format description.

        Examples:
            >>> from horologe.format_description import Rfc3339
            >>> OffsetDateTime.parse("1970-01-01T01:00:00+01:00", Rfc3339()).unix_timestamp()
            0
        """
        return cls._from_parsed(into_description(description).parse(text))

    @classmethod
    def _from_parsed(cls, parsed: Parsed) -> OffsetDateTime:
        """Build an OffsetDateTime from parsed components."""
        local = PrimitiveDateTime._from_parsed(parsed)
        offset = UtcOffset._from_parsed(parsed)
        try:
            return local.assume_offset(offset)
        except ComponentRangeError as exc:
            raise ParsedComponentRange(exc) from exc

    # Offset handling

    @property
    def offset(self) -> UtcOffset:
        """Return the presentation offset."""
        return self._offset

    def to_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Return the same instant presented in ``offset``.

        Examples:
            >>> odt = OffsetDateTime.UNIX_EPOCH.to_offset(UtcOffset.from_hms(-1, 0, 0))
            >>> odt.year, odt.hour
            (1969, 23)
        """
        return OffsetDateTime._from_utc_unchecked(self._utc, offset)

    def _local_datetime(self) -> PrimitiveDateTime:
        """Return the wall-clock value in the presentation offset.

        The offset's components are added to the stored UTC fields and
        carried from seconds up to the year.
        """
        if self._offset.is_utc:
            return self._utc

        utc_time = self._utc.time()
        second = utc_time.second + self._offset.seconds_past_minute
        minute = utc_time.minute + self._offset.minutes_past_hour
        hour = utc_time.hour + self._offset.whole_hours
        year, ordinal = self._utc.to_ordinal_date()

        second, minute = cascade(second, 0, 60, minute)
        minute, hour = cascade(minute, 0, 60, hour)
        hour, ordinal = cascade(hour, 0, 24, ordinal)
        ordinal, year = cascade_ordinal(ordinal, year)

        return PrimitiveDateTime(
            Date._from_ordinal_date_unchecked(year, ordinal),
            Time._from_hms_nanos_unchecked(hour, minute, second, utc_time.nanosecond),
        )

    # Presentation

    def date(self) -> Date:
        """Return the date in the presentation offset."""
        return self._local_datetime().date()

    def time(self) -> Time:
        """Return the time of day in the presentation offset."""
        return self._local_datetime().time()

    @property
    def year(self) -> int:
        """Return the year in the presentation offset."""
        return self._local_datetime().year

    @property
    def month(self) -> int:
        """Return the month in the presentation offset."""
        return self._local_datetime().month

    @property
    def day(self) -> int:
        """Return the day of the month in the presentation offset."""
        return self._local_datetime().day

    @property
    def ordinal(self) -> int:
        """Return the day of the year in the presentation offset."""
        return self._local_datetime().ordinal

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week in the presentation offset."""
        return self._local_datetime().weekday

    @property
    def iso_week(self) -> int:
        """Return the ISO week number in the presentation offset."""
        return self._local_datetime().iso_week

    @property
    def sunday_based_week(self) -> int:
        """Return the Sunday-based week number in the presentation offset."""
        return self._local_datetime().sunday_based_week

    @property
    def monday_based_week(self) -> int:
        """Return the Monday-based week number in the presentation offset."""
        return self._local_datetime().monday_based_week

    @property
    def hour(self) -> int:
        """Return the hour in the presentation offset."""
        return self._local_datetime().hour

    @property
    def minute(self) -> int:
        """Return the minute in the presentation offset."""
        return self._local_datetime().minute

    @property
    def second(self) -> int:
        """Return the second in the presentation offset."""
        return self._local_datetime().second

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second."""
        return self._utc.millisecond

    @property
    def microsecond(self) -> int:
        """Return the microsecond within the second."""
        return self._utc.microsecond

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond within the second."""
        return self._utc.nanosecond

    def to_calendar_date(self) -> tuple[int, int, int]:
        """Return the (year, month, day) in the presentation offset."""
        return self._local_datetime().to_calendar_date()

    def to_ordinal_date(self) -> tuple[int, int]:
        """Return the (year, ordinal) in the presentation offset."""
        return self._local_datetime().to_ordinal_date()

    def to_iso_week_date(self) -> tuple[int, int, Weekday]:
        """Return the ISO (year, week, weekday) in the presentation offset."""
        return self._local_datetime().to_iso_week_date()

    def to_julian_day(self) -> int:
        """Return the Julian day number in the presentation offset."""
        return self._local_datetime().to_julian_day()

    # Conversion

    def unix_timestamp(self) -> int:
        """Return the Unix timestamp in seconds.

        Examples:
            >>> OffsetDateTime.from_unix_timestamp(-1).unix_timestamp()
            -1
        """
        days = self._utc.to_julian_day() - UNIX_EPOCH_JULIAN_DAY
        hour, minute, second = self._utc.as_hms()
        return (
            days * SECONDS_PER_DAY
            + hour * SECONDS_PER_HOUR
            + minute * SECONDS_PER_MINUTE
            + second
        )

    def unix_timestamp_nanos(self) -> int:
        """Return the Unix timestamp in nanoseconds."""
        return self.unix_timestamp() * NANOS_PER_SECOND + self._utc.nanosecond

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware ``datetime.datetime`` in the presentation offset.

        Nanoseconds below one microsecond are truncated.

        Raises:
            ConversionRangeError: If the year is outside 1..9999.
        """
        local = self._local_datetime()
        if not _datetime.MINYEAR <= local.year <= _datetime.MAXYEAR:
            raise ConversionRangeError()
        year, month, day = local.to_calendar_date()
        return _datetime.datetime(
            year,
            month,
            day,
            local.hour,
            local.minute,
            local.second,
            local.microsecond,
            tzinfo=self._offset.to_timezone(),
        )

    # Replacement

    def replace_time(self, time: Time) -> OffsetDateTime:
        """Return a copy with the local time replaced, keeping the offset."""
        return self._local_datetime().replace_time(time).assume_offset(self._offset)

    def replace_date(self, date: Date) -> OffsetDateTime:
        """Return a copy with the local date replaced, keeping the offset."""
        return self._local_datetime().replace_date(date).assume_offset(self._offset)

    def replace_date_time(self, date_time: PrimitiveDateTime) -> OffsetDateTime:
        """Return a copy with the local date and time replaced, keeping the offset."""
        return date_time.assume_offset(self._offset)

    def replace_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Return a copy with the offset replaced, keeping the local date and time.

        Unlike :meth:`to_offset`, this changes the instant.

        Examples:
            >>> odt = OffsetDateTime.UNIX_EPOCH.replace_offset(UtcOffset.from_hms(1, 0, 0))
            >>> odt.unix_timestamp()
            -3600
        """
        return self._local_datetime().assume_offset(offset)

    # Formatting

    def format(self, description: Description) -> str:
        """Format the value in its presentation offset.

        Examples:
            >>> from horologe.format_description import Rfc3339
            >>> OffsetDateTime.UNIX_EPOCH.format(Rfc3339())
            '1970-01-01T00:00:00Z'
        """
        local = self._local_datetime()
        return into_description(description).format(
            date=local.date(), time=local.time(), offset=self._offset
        )

    def format_into(self, output: TextIO, description: Description) -> int:
        """Write the formatted value to ``output``, returning the characters written."""
        local = self._local_datetime()
        return into_description(description).format_into(
            output, date=local.date(), time=local.time(), offset=self._offset
        )

    # Arithmetic

    def __add__(self, other: object) -> OffsetDateTime:
        """Add a Duration or timedelta, keeping the offset."""
        if not isinstance(other, (Duration, _datetime.timedelta)):
            return NotImplemented
        return OffsetDateTime._from_utc_unchecked(self._utc + other, self._offset)

    def __radd__(self, other: object) -> OffsetDateTime:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> OffsetDateTime: ...

    @overload
    def __sub__(self, other: _datetime.timedelta) -> OffsetDateTime: ...

    @overload
    def __sub__(self, other: OffsetDateTime) -> Duration: ...

    def __sub__(self, other: object) -> OffsetDateTime | Duration:
        """Subtract a Duration or timedelta, or find the Duration between two instants.

        The offsets of the two instants do not affect the difference.
        """
        if isinstance(other, OffsetDateTime):
            return self._utc - other._utc
        if isinstance(other, (Duration, _datetime.timedelta)):
            return OffsetDateTime._from_utc_unchecked(self._utc - other, self._offset)
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._utc == other._utc

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._utc < other._utc

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._utc <= other._utc

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._utc > other._utc

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._utc >= other._utc

    def __hash__(self) -> int:
        return hash(self._utc)

    def __repr__(self) -> str:
        local = self._local_datetime()
        return f"OffsetDateTime({local.date()!r}, {local.time()!r}, {self._offset!r})"

    def __str__(self) -> str:
        return f"{self._local_datetime()} {self._offset}"


OffsetDateTime.UNIX_EPOCH = OffsetDateTime._from_utc_unchecked(
    PrimitiveDateTime(Date._from_ordinal_date_unchecked(1970, 1), Time.MIDNIGHT),
    UtcOffset.UTC,
)


__all__ = ["OffsetDateTime", "MIN_UNIX_TIMESTAMP", "MAX_UNIX_TIMESTAMP"]
