"""Components of a format description.

A component names one field of a temporal value (``day``, ``hour``,
``offset_minute`` ...) together with the modifiers that control how it is
written and read. Components are immutable and hashable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from horologe.format_description.modifier import (
    MonthRepr,
    Padding,
    SubsecondDigits,
    WeekdayRepr,
    WeekNumberRepr,
    YearRepr,
)


@dataclass(frozen=True)
class Day:
    """Day of the month."""

    name: ClassVar[str] = "day"

    padding: Padding = Padding.ZERO


@dataclass(frozen=True)
class Month:
    """Month of the year, as a number or an English name."""

    name: ClassVar[str] = "month"

    padding: Padding = Padding.ZERO
    repr: MonthRepr = MonthRepr.NUMERICAL


@dataclass(frozen=True)
class Ordinal:
    """Day of the year."""

    name: ClassVar[str] = "ordinal"

    padding: Padding = Padding.ZERO


@dataclass(frozen=True)
class Weekday:
    """Day of the week, as an English name or a number.

    Attributes:
        repr: Name or numbering convention.
        one_indexed: Whether numbering starts at 1 instead of 0. Only
            meaningful for the numeric representations.
    """

    name: ClassVar[str] = "weekday"

    repr: WeekdayRepr = WeekdayRepr.LONG
    one_indexed: bool = True


@dataclass(frozen=True)
class WeekNumber:
    """Week of the year."""

    name: ClassVar[str] = "week_number"

    padding: Padding = Padding.ZERO
    repr: WeekNumberRepr = WeekNumberRepr.ISO


@dataclass(frozen=True)
class Year:
    """Year, either calendar or ISO week-numbering.

    Attributes:
        padding: How the year is padded to its width.
        repr: Full year or the last two digits.
        iso_week_based: Use the ISO week-numbering year.
        sign_is_mandatory: Always write a sign, even for positive years.
    """

    name: ClassVar[str] = "year"

    padding: Padding = Padding.ZERO
    repr: YearRepr = YearRepr.FULL
    iso_week_based: bool = False
    sign_is_mandatory: bool = False


@dataclass(frozen=True)
class Hour:
    """Hour of the day, on a 24- or 12-hour clock."""

    name: ClassVar[str] = "hour"

    padding: Padding = Padding.ZERO
    is_12_hour_clock: bool = False


@dataclass(frozen=True)
class Minute:
    """Minute within the hour."""

    name: ClassVar[str] = "minute"

    padding: Padding = Padding.ZERO


@dataclass(frozen=True)
class Period:
    """AM or PM."""

    name: ClassVar[str] = "period"

    is_uppercase: bool = True


@dataclass(frozen=True)
class Second:
    """Second within the minute."""

    name: ClassVar[str] = "second"

    padding: Padding = Padding.ZERO


@dataclass(frozen=True)
class Subsecond:
    """Fraction of the second."""

    name: ClassVar[str] = "subsecond"

    digits: SubsecondDigits = SubsecondDigits.ONE_OR_MORE


@dataclass(frozen=True)
class OffsetHour:
    """Whole hours of the UTC offset, with its sign."""

    name: ClassVar[str] = "offset_hour"

    padding: Padding = Padding.ZERO
    sign_is_mandatory: bool = False


@dataclass(frozen=True)
class OffsetMinute:
    """Minutes past the hour of the UTC offset."""

    name: ClassVar[str] = "offset_minute"

    padding: Padding = Padding.ZERO


@dataclass(frozen=True)
class OffsetSecond:
    """Seconds past the minute of the UTC offset."""

    name: ClassVar[str] = "offset_second"

    padding: Padding = Padding.ZERO


Component = Union[
    Day,
    Month,
    Ordinal,
    Weekday,
    WeekNumber,
    Year,
    Hour,
    Minute,
    Period,
    Second,
    Subsecond,
    OffsetHour,
    OffsetMinute,
    OffsetSecond,
]


__all__ = [
    "Component",
    "Day",
    "Month",
    "Ordinal",
    "Weekday",
    "WeekNumber",
    "Year",
    "Hour",
    "Minute",
    "Period",
    "Second",
    "Subsecond",
    "OffsetHour",
    "OffsetMinute",
    "OffsetSecond",
]
