"""Weekday enumeration.

This module provides the Weekday enum for the seven days of the week,
with Monday first as in ISO 8601.
"""

from __future__ import annotations

from enum import Enum


class Weekday(Enum):
    """Day of the week.

    Examples:
        >>> Weekday.MONDAY.next()
        <Weekday.TUESDAY: 'Tuesday'>

        >>> Weekday.SUNDAY.number_from_monday()
        7

        >>> Weekday.SUNDAY.number_days_from_sunday()
        0
    """

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_number_days_from_monday(cls, number: int) -> Weekday:
        """Return the weekday that is ``number`` days after Monday (0-6)."""
        return _ORDER[number % 7]

    def previous(self) -> Weekday:
        """Return the previous weekday."""
        return _ORDER[(self.number_days_from_monday() - 1) % 7]

    def next(self) -> Weekday:
        """Return the next weekday."""
        return _ORDER[(self.number_days_from_monday() + 1) % 7]

    def number_from_monday(self) -> int:
        """Return the one-indexed day number, counting Monday as 1."""
        return self.number_days_from_monday() + 1

    def number_from_sunday(self) -> int:
        """Return the one-indexed day number, counting Sunday as 1."""
        return self.number_days_from_sunday() + 1

    def number_days_from_monday(self) -> int:
        """Return the zero-indexed day number, counting Monday as 0."""
        return _ORDER.index(self)

    def number_days_from_sunday(self) -> int:
        """Return the zero-indexed day number, counting Sunday as 0."""
        return (self.number_days_from_monday() + 1) % 7

    def __str__(self) -> str:
        return self.value


_ORDER: tuple[Weekday, ...] = tuple(Weekday)


__all__ = ["Weekday"]
