"""Date class representing a calendar date.

This module provides the Date class for representing dates in the
proleptic Gregorian calendar.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar, TextIO, overload

from horologe._internal.calendar import (
    days_before_month,
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
from horologe._internal.cascade import cascade_ordinal
from horologe._internal.constants import MAX_YEAR, MIN_YEAR
from horologe._internal.validation import (
    ensure_in_range,
    validate_day,
    validate_month,
    validate_year,
)
from horologe.core.duration import Duration
from horologe.errors import ComponentRangeError, InsufficientInformation, ParsedComponentRange
from horologe.format_description.parse import into_description
from horologe.units.weekday import Weekday

if TYPE_CHECKING:
    from horologe.core.primitive_date_time import PrimitiveDateTime
    from horologe.core.time import Time
    from horologe.format_description import Description
    from horologe.parsing.parsed import Parsed

MIN_JULIAN_DAY: int = to_julian_day(MIN_YEAR, 1)
MAX_JULIAN_DAY: int = to_julian_day(MAX_YEAR, days_in_year(MAX_YEAR))


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date stores the year and the day of the year. The Julian day number is
    derived on demand, so subtracting two dates or adding whole days is a
    constant-time operation regardless of the distance involved.

    Years range from -9999 to 9999, or -999999 to 999999 when the
    ``HOROLOGE_LARGE_DATES`` environment variable is set. Year 0 exists and
    is a leap year.

    Attributes:
        year: The calendar year.
        month: The month (1-12).
        day: The day of the month (1-31).
        ordinal: The day of the year (1-366).
        weekday: The day of the week.

    Examples:
        >>> d = Date.from_calendar_date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date.from_calendar_date(2019, 12, 31) + Duration.days(1)
        Date(2020, 1, 1)

        >>> str(Date.from_ordinal_date(2020, 60))
        '2020-02-29'
    """

    __slots__ = ("_year", "_ordinal")

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from the year, month and day.

        Args:
            year: The year.
            month: The month (1-12).
            day: The day of the month (1-31, depending on month and year).

        Raises:
            ComponentRangeError: If any component is out of range. The day
                error is conditional on the month and year.

        Examples:
            >>> Date(2024, 2, 29)
            Date(2024, 2, 29)

            >>> Date(2023, 2, 29)
            Traceback (most recent call last):
            ...
            horologe.errors.ComponentRangeError: day must be in the range 1..=28, given values of other parameters
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._year: int = year
        self._ordinal: int = days_before_month(year, month) + day

    @classmethod
    def _from_ordinal_date_unchecked(cls, year: int, ordinal: int) -> Date:
        """Create a Date without validating the components.

        The caller must guarantee that the year is within the supported
        range and that ``1 <= ordinal <= days_in_year(year)``.
        """
        instance = object.__new__(cls)
        instance._year = year
        instance._ordinal = ordinal
        return instance

    @classmethod
    def from_calendar_date(cls, year: int, month: int, day: int) -> Date:
        """Create a Date from the year, month and day.

        Raises:
            ComponentRangeError: If any component is out of range.
        """
        return cls(year, month, day)

    @classmethod
    def from_ordinal_date(cls, year: int, ordinal: int) -> Date:
        """Create a Date from the year and day of the year.

        Raises:
            ComponentRangeError: If the year is out of range, or the ordinal
                is past the end of the year (conditional).

        Examples:
            >>> Date.from_ordinal_date(2019, 365)
            Date(2019, 12, 31)
        """
        validate_year(year)
        ensure_in_range("ordinal", ordinal, 1, days_in_year(year), conditional=True)
        return cls._from_ordinal_date_unchecked(year, ordinal)

    @classmethod
    def from_iso_week_date(cls, year: int, week: int, weekday: Weekday) -> Date:
        """Create a Date from an ISO week date.

        Args:
            year: The ISO week-numbering year.
            week: The ISO week (1-52 or 1-53, depending on the year).
            weekday: The day of the week.

        Raises:
            ComponentRangeError: If a component is out of range, or the
                resulting date is outside the supported range.

        Examples:
            >>> Date.from_iso_week_date(2020, 53, Weekday.FRIDAY)
            Date(2021, 1, 1)
        """
        validate_year(year)
        ensure_in_range("week", week, 1, weeks_in_year(year), conditional=True)
        return cls.from_julian_day(
            iso_week_date_to_julian_day(year, week, weekday.number_days_from_monday())
        )

    @classmethod
    def from_julian_day(cls, julian_day: int) -> Date:
        """Create a Date from its Julian day number.

        Julian day 0 is -4713-11-24 in the proleptic Gregorian calendar.

        Raises:
            ComponentRangeError: If the Julian day is outside the supported
                range.

        Examples:
            >>> Date.from_julian_day(2_440_588)
            Date(1970, 1, 1)
        """
        ensure_in_range("julian_day", julian_day, MIN_JULIAN_DAY, MAX_JULIAN_DAY)
        return cls._from_ordinal_date_unchecked(*from_julian_day(julian_day))

    @classmethod
    def parse(cls, text: str, description: Description) -> Date:
        """Parse a Date from text using a format description.

        Raises:
            ParseError: If the text does not match, or does not contain
                enough information to build a Date.

        Examples:
            >>> Date.parse("2020-060", "[year]-[ordinal]")
            Date(2020, 2, 29)
        """
        return cls._from_parsed(into_description(description).parse(text))

    @classmethod
    def _from_parsed(cls, parsed: Parsed) -> Date:
        """Build a Date from parsed components.

        The first complete combination wins, in this order: year and
        ordinal; year, month and day; ISO year, ISO week and weekday; year,
        Sunday-based week and weekday; year, Monday-based week and weekday.
        Two-digit years are never used.
        """
        try:
            if parsed.year is not None and parsed.ordinal is not None:
                return cls.from_ordinal_date(parsed.year, parsed.ordinal)
            if parsed.year is not None and parsed.month is not None and parsed.day is not None:
                return cls.from_calendar_date(parsed.year, parsed.month, parsed.day)
            if (
                parsed.iso_year is not None
                and parsed.iso_week_number is not None
                and parsed.weekday is not None
            ):
                return cls.from_iso_week_date(
                    parsed.iso_year, parsed.iso_week_number, parsed.weekday
                )
            if parsed.year is not None and parsed.weekday is not None:
                if parsed.sunday_week_number is not None:
                    return cls._from_week_based(
                        parsed.year,
                        parsed.sunday_week_number,
                        parsed.weekday.number_days_from_sunday(),
                        Weekday.SUNDAY,
                    )
                if parsed.monday_week_number is not None:
                    return cls._from_week_based(
                        parsed.year,
                        parsed.monday_week_number,
                        parsed.weekday.number_days_from_monday(),
                        Weekday.MONDAY,
                    )
        except ComponentRangeError as exc:
            raise ParsedComponentRange(exc) from exc
        raise InsufficientInformation()

    @classmethod
    def _from_week_based(cls, year: int, week: int, day: int, first_day: Weekday) -> Date:
        """Create a Date from a Sunday- or Monday-based week number.

        ``day`` counts from ``first_day``; week 0 holds the days before the
        first ``first_day`` of the year.
        """
        validate_year(year)
        jan_1 = Weekday.from_number_days_from_monday(
            julian_day_to_weekday(to_julian_day(year, 1))
        )
        if first_day is Weekday.SUNDAY:
            jan_1_number = jan_1.number_days_from_sunday()
        else:
            jan_1_number = jan_1.number_days_from_monday()
        return cls.from_ordinal_date(year, 7 * week + day - (jan_1_number + 6) % 7)

    # Properties

    @property
    def year(self) -> int:
        """Return the calendar year."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return ordinal_to_month_day(self._year, self._ordinal)[0]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return ordinal_to_month_day(self._year, self._ordinal)[1]

    @property
    def ordinal(self) -> int:
        """Return the day of the year (1-366)."""
        return self._ordinal

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> Date(2024, 1, 15).weekday
            <Weekday.MONDAY: 'Monday'>
        """
        return Weekday.from_number_days_from_monday(julian_day_to_weekday(self.to_julian_day()))

    @property
    def iso_week(self) -> int:
        """Return the ISO 8601 week number (1-53)."""
        return iso_year_week(self._year, self._ordinal)[1]

    @property
    def sunday_based_week(self) -> int:
        """Return the week number where week 1 starts on the first Sunday (0-53)."""
        return (self._ordinal - self.weekday.number_days_from_sunday() + 6) // 7

    @property
    def monday_based_week(self) -> int:
        """Return the week number where week 1 starts on the first Monday (0-53)."""
        return (self._ordinal - self.weekday.number_days_from_monday() + 6) // 7

    @property
    def is_leap_year(self) -> bool:
        """Return True if the date's year is a leap year."""
        return is_leap_year(self._year)

    def to_calendar_date(self) -> tuple[int, int, int]:
        """Return the (year, month, day) of the date."""
        month, day = ordinal_to_month_day(self._year, self._ordinal)
        return self._year, month, day

    def to_ordinal_date(self) -> tuple[int, int]:
        """Return the (year, ordinal) of the date."""
        return self._year, self._ordinal

    def to_iso_week_date(self) -> tuple[int, int, Weekday]:
        """Return the ISO (year, week, weekday) of the date.

        The ISO year can differ from the calendar year for days near the
        start or end of the year.

        Examples:
            >>> Date(2021, 1, 1).to_iso_week_date()
            (2020, 53, <Weekday.FRIDAY: 'Friday'>)
        """
        iso_year, week = iso_year_week(self._year, self._ordinal)
        return iso_year, week, self.weekday

    def to_julian_day(self) -> int:
        """Return the Julian day number of the date."""
        return to_julian_day(self._year, self._ordinal)

    # Navigation

    def next_day(self) -> Date:
        """Return the following day.

        Raises:
            ComponentRangeError: If the date is Date.MAX.

        Examples:
            >>> Date(2020, 12, 31).next_day()
            Date(2021, 1, 1)
        """
        ordinal, year = cascade_ordinal(self._ordinal + 1, self._year)
        validate_year(year)
        return Date._from_ordinal_date_unchecked(year, ordinal)

    def previous_day(self) -> Date:
        """Return the preceding day.

        Raises:
            ComponentRangeError: If the date is Date.MIN.
        """
        ordinal, year = cascade_ordinal(self._ordinal - 1, self._year)
        validate_year(year)
        return Date._from_ordinal_date_unchecked(year, ordinal)

    def replace(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with the given components replaced.

        Raises:
            ComponentRangeError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 31).replace(month=4, day=30)
            Date(2024, 4, 30)
        """
        current_year, current_month, current_day = self.to_calendar_date()
        return Date(
            current_year if year is None else year,
            current_month if month is None else month,
            current_day if day is None else day,
        )

    # Combination with a time of day

    def midnight(self) -> PrimitiveDateTime:
        """Return a PrimitiveDateTime at midnight on this date."""
        from horologe.core.primitive_date_time import PrimitiveDateTime
        from horologe.core.time import Time

        return PrimitiveDateTime(self, Time.MIDNIGHT)

    def with_time(self, time: Time) -> PrimitiveDateTime:
        """Return a PrimitiveDateTime combining this date and ``time``."""
        from horologe.core.primitive_date_time import PrimitiveDateTime

        return PrimitiveDateTime(self, time)

    def with_hms(self, hour: int, minute: int, second: int) -> PrimitiveDateTime:
        """Return a PrimitiveDateTime on this date at the given time.

        Raises:
            ComponentRangeError: If the time is invalid.
        """
        from horologe.core.time import Time

        return self.with_time(Time.from_hms(hour, minute, second))

    def with_hms_milli(
        self, hour: int, minute: int, second: int, millisecond: int
    ) -> PrimitiveDateTime:
        """Return a PrimitiveDateTime on this date at the given time."""
        from horologe.core.time import Time

        return self.with_time(Time.from_hms_milli(hour, minute, second, millisecond))

    def with_hms_micro(
        self, hour: int, minute: int, second: int, microsecond: int
    ) -> PrimitiveDateTime:
        """Return a PrimitiveDateTime on this date at the given time."""
        from horologe.core.time import Time

        return self.with_time(Time.from_hms_micro(hour, minute, second, microsecond))

    def with_hms_nano(
        self, hour: int, minute: int, second: int, nanosecond: int
    ) -> PrimitiveDateTime:
        """Return a PrimitiveDateTime on this date at the given time."""
        from horologe.core.time import Time

        return self.with_time(Time.from_hms_nano(hour, minute, second, nanosecond))

    # Formatting

    def format(self, description: Description) -> str:
        """Format the date using a format description.

        Raises:
            InsufficientTypeInformation: If the description needs a time or
                an offset.

        Examples:
            >>> Date(2024, 1, 15).format("[weekday repr:short] [day] [month repr:long]")
            'Mon 15 January'
        """
        return into_description(description).format(date=self)

    def format_into(self, output: TextIO, description: Description) -> int:
        """Write the formatted date to ``output``, returning the characters written."""
        return into_description(description).format_into(output, date=self)

    # Arithmetic

    def checked_add(self, duration: Duration) -> Date | None:
        """Add the whole days of a Duration, returning None if out of range.

        Examples:
            >>> Date.MAX.checked_add(Duration.days(1)) is None
            True
        """
        julian_day = self.to_julian_day() + duration.whole_days
        if not MIN_JULIAN_DAY <= julian_day <= MAX_JULIAN_DAY:
            return None
        return Date._from_ordinal_date_unchecked(*from_julian_day(julian_day))

    def checked_sub(self, duration: Duration) -> Date | None:
        """Subtract the whole days of a Duration, returning None if out of range."""
        return self.checked_add(-duration)

    def __add__(self, other: object) -> Date:
        """Add the whole days of a Duration or timedelta.

        Any part smaller than a day is ignored.

        Raises:
            ComponentRangeError: If the result is outside the supported range.

        Examples:
            >>> Date(2020, 12, 31) + Duration.days(1)
            Date(2021, 1, 1)
        """
        if isinstance(other, _datetime.timedelta):
            other = Duration.from_timedelta(other)
        if not isinstance(other, Duration):
            return NotImplemented
        return Date.from_julian_day(self.to_julian_day() + other.whole_days)

    def __radd__(self, other: object) -> Date:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> Date: ...

    @overload
    def __sub__(self, other: _datetime.timedelta) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Duration: ...

    def __sub__(self, other: object) -> Date | Duration:
        """Subtract whole days, or find the number of days between two Dates.

        Examples:
            >>> Date(2021, 1, 1) - Date(2020, 1, 1)
            Duration(seconds=31622400, nanoseconds=0)
        """
        if isinstance(other, Date):
            return Duration.days(self.to_julian_day() - other.to_julian_day())
        if isinstance(other, _datetime.timedelta):
            other = Duration.from_timedelta(other)
        if isinstance(other, Duration):
            return self + (-other)
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._year == other._year and self._ordinal == other._ordinal

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._year, self._ordinal) < (other._year, other._ordinal)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._year, self._ordinal) <= (other._year, other._ordinal)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._year, self._ordinal) > (other._year, other._ordinal)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._year, self._ordinal) >= (other._year, other._ordinal)

    def __hash__(self) -> int:
        return hash((self._year, self._ordinal))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        year, month, day = self.to_calendar_date()
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the date as ``YYYY-MM-DD``.

        Negative years carry a ``-`` and years past 9999 a ``+``.

        Examples:
            >>> str(Date(-1, 1, 1))
            '-0001-01-01'
        """
        year, month, day = self.to_calendar_date()
        if year < 0:
            sign = "-"
        elif year > 9_999:
            sign = "+"
        else:
            sign = ""
        return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"


Date.MIN = Date._from_ordinal_date_unchecked(MIN_YEAR, 1)
Date.MAX = Date._from_ordinal_date_unchecked(MAX_YEAR, days_in_year(MAX_YEAR))


__all__ = ["Date", "MIN_JULIAN_DAY", "MAX_JULIAN_DAY"]
