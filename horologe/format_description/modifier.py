"""Modifiers that change how a format component is rendered and parsed.

Each enum value is the keyword used in a format description, so
``[month repr:short]`` selects ``MonthRepr.SHORT``.
"""

from __future__ import annotations

from enum import Enum


class Padding(Enum):
    """How a numeric value shorter than its width is filled."""

    SPACE = "space"
    ZERO = "zero"
    NONE = "none"


class MonthRepr(Enum):
    """How a month is written."""

    NUMERICAL = "numerical"
    LONG = "long"
    SHORT = "short"


class WeekdayRepr(Enum):
    """How a weekday is written.

    SUNDAY and MONDAY write a number counted from that day.
    """

    SHORT = "short"
    LONG = "long"
    SUNDAY = "sunday"
    MONDAY = "monday"


class WeekNumberRepr(Enum):
    """Which week-numbering convention is used."""

    ISO = "iso"
    SUNDAY = "sunday"
    MONDAY = "monday"


class YearRepr(Enum):
    """Whether the full year or only its last two digits are written."""

    FULL = "full"
    LAST_TWO = "last_two"


class SubsecondDigits(Enum):
    """How many fractional-second digits are written or read.

    ONE_OR_MORE writes as few digits as needed (at least one) and reads any
    number from one to nine.
    """

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ONE_OR_MORE = "1+"

    @property
    def count(self) -> int | None:
        """Return the fixed digit count, or None for ONE_OR_MORE."""
        if self is SubsecondDigits.ONE_OR_MORE:
            return None
        return int(self.value)


__all__ = [
    "Padding",
    "MonthRepr",
    "WeekdayRepr",
    "WeekNumberRepr",
    "YearRepr",
    "SubsecondDigits",
]
