"""Calendar utilities for Horologe.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, ordinal dates, ISO weeks and Julian day numbers.

Julian day 0 = -4713-11-24 (November 24, 4714 BCE, proleptic Gregorian).
Julian day numbers here are integers naming whole days; there is no
half-day offset.

This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.constants import DAYS_IN_MONTH
from horologe._internal.decorators import memoize


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Args:
        year: The year to check.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ordinal_to_month_day(year: int, ordinal: int) -> tuple[int, int]:
    """Convert a day of the year to month and day.

    Args:
        year: The year (for leap year calculation).
        ordinal: Day of year (1-366).

    Returns:
        Tuple of (month, day).
    """
    month = 12
    while month > 1 and days_before_month(year, month) >= ordinal:
        month -= 1
    return month, ordinal - days_before_month(year, month)


def to_julian_day(year: int, ordinal: int) -> int:
    """Convert an ordinal date to its Julian day number.

    Python's ``//`` floors toward negative infinity, so the same formula
    holds for years before 1.

    Examples:
        >>> to_julian_day(1970, 1)
        2440588
        >>> to_julian_day(2000, 1)
        2451545
    """
    y = year - 1
    return ordinal + 365 * y + y // 4 - y // 100 + y // 400 + 1_721_425


def from_julian_day(julian_day: int) -> tuple[int, int]:
    """Convert a Julian day number to an ordinal date.

    Args:
        julian_day: The Julian day number.

    Returns:
        Tuple of (year, ordinal).

    Examples:
        >>> from_julian_day(2440588)
        (1970, 1)
    """
    z = julian_day - 1_721_119
    g = 100 * z - 25
    a = g // 3_652_425
    b = a - a // 4
    year = (100 * b + g) // 36_525
    ordinal = b + z - (36_525 * year) // 100

    # The computation above counts from March 1; shift back to January 1.
    if is_leap_year(year):
        ordinal += 60
        if ordinal > 366:
            ordinal -= 366
            year += 1
    else:
        ordinal += 59
        if ordinal > 365:
            ordinal -= 365
            year += 1

    return year, ordinal


def julian_day_to_weekday(julian_day: int) -> int:
    """Return the day of the week for a Julian day (Monday=0, Sunday=6).

    Julian day 0 was a Monday.
    """
    return julian_day % 7


@memoize
def weeks_in_year(year: int) -> int:
    """Return the number of ISO weeks in a year (52 or 53).

    A year has 53 ISO weeks when it starts on a Thursday, or when it is a
    leap year starting on a Wednesday.

    Examples:
        >>> weeks_in_year(2020)
        53
        >>> weeks_in_year(2021)
        52
    """
    jan_1 = julian_day_to_weekday(to_julian_day(year, 1))
    if jan_1 == 3 or (jan_1 == 2 and is_leap_year(year)):
        return 53
    return 52


def iso_year_week(year: int, ordinal: int) -> tuple[int, int]:
    """Return the ISO week-numbering year and week for an ordinal date.

    Examples:
        >>> iso_year_week(2021, 1)  # Friday, still in 2020's last week
        (2020, 53)
        >>> iso_year_week(2019, 365)  # Tuesday, first week of 2020
        (2020, 1)
    """
    weekday_from_monday = julian_day_to_weekday(to_julian_day(year, ordinal)) + 1
    week = (ordinal + 10 - weekday_from_monday) // 7
    if week == 0:
        return year - 1, weeks_in_year(year - 1)
    if week == 53 and weeks_in_year(year) == 52:
        return year + 1, 1
    return year, week


def iso_week_date_to_julian_day(year: int, week: int, weekday: int) -> int:
    """Return the Julian day of an ISO week date.

    Args:
        year: ISO week-numbering year.
        week: ISO week (1-53).
        weekday: Day of the week, Monday=0.

    Returns:
        The Julian day number.
    """
    jan_4 = to_julian_day(year, 4)
    week_1_monday = jan_4 - julian_day_to_weekday(jan_4)
    return week_1_monday + (week - 1) * 7 + weekday


__all__ = [
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "days_before_month",
    "ordinal_to_month_day",
    "to_julian_day",
    "from_julian_day",
    "julian_day_to_weekday",
    "weeks_in_year",
    "iso_year_week",
    "iso_week_date_to_julian_day",
]
