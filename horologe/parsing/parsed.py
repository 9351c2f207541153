"""Accumulator for components read from input.

A Parsed instance collects the values read by each component while the
input is scanned. When a component appears more than once, the last value
wins. Resolving the collected values into a Date, Time or UtcOffset is done
by those types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from horologe.errors import InvalidComponent
from horologe.format_description import component as c
from horologe.format_description.modifier import WeekNumberRepr, YearRepr
from horologe.parsing import component as p
from horologe.units.weekday import Weekday


@dataclass
class Parsed:
    """Values read from input, each None until its component is parsed.

    Two-digit years are recorded in ``year_last_two`` and
    ``iso_year_last_two`` but never widened to a full year, since the
    century is unknown. A date built from them alone raises
    InsufficientInformation; callers that know the century can read the
    fields from the Parsed value themselves.

    Attributes:
        year: Calendar year.
        year_last_two: Last two digits of the calendar year.
        iso_year: ISO week-numbering year.
        iso_year_last_two: Last two digits of the ISO year.
        month: Month (1-12).
        sunday_week_number: Week number, weeks starting on Sunday.
        monday_week_number: Week number, weeks starting on Monday.
        iso_week_number: ISO week number.
        weekday: Day of the week.
        ordinal: Day of the year.
        day: Day of the month.
        hour_24: Hour on a 24-hour clock.
        hour_12: Hour on a 12-hour clock (1-12).
        hour_12_is_pm: Whether the 12-hour value is after noon.
        minute: Minute.
        second: Second.
        subsecond: Nanoseconds within the second.
        offset_hour: Signed whole hours of the offset.
        offset_minute: Minutes past the hour of the offset, unsigned.
        offset_second: Seconds past the minute of the offset, unsigned.
        offset_is_negative: Whether the offset carried a ``-`` sign.
    """

    year: Optional[int] = None
    year_last_two: Optional[int] = None
    iso_year: Optional[int] = None
    iso_year_last_two: Optional[int] = None
    month: Optional[int] = None
    sunday_week_number: Optional[int] = None
    monday_week_number: Optional[int] = None
    iso_week_number: Optional[int] = None
    weekday: Optional[Weekday] = None
    ordinal: Optional[int] = None
    day: Optional[int] = None
    hour_24: Optional[int] = None
    hour_12: Optional[int] = None
    hour_12_is_pm: Optional[bool] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    subsecond: Optional[int] = None
    offset_hour: Optional[int] = None
    offset_minute: Optional[int] = None
    offset_second: Optional[int] = None
    offset_is_negative: Optional[bool] = None

    def parse_component(self, text: str, position: int, component: c.Component) -> int:
        """Read ``component`` at ``position`` and record its value.

        Returns:
            The position after the component.

        Raises:
            InvalidComponent: If the input does not hold a valid value.
        """
        parser, store = _HANDLERS[type(component)]
        item = parser(text, position, component)
        if item is None:
            raise InvalidComponent(component.name)
        position, value = item
        store(self, component, value)
        return position

    # Storage of individual values

    def _store_year(self, modifier: c.Year, value: int) -> None:
        if modifier.iso_week_based:
            if modifier.repr is YearRepr.LAST_TWO:
                self.iso_year_last_two = value
            else:
                self.iso_year = value
        elif modifier.repr is YearRepr.LAST_TWO:
            self.year_last_two = value
        else:
            self.year = value

    def _store_week_number(self, modifier: c.WeekNumber, value: int) -> None:
        if modifier.repr is WeekNumberRepr.ISO:
            self.iso_week_number = value
        elif modifier.repr is WeekNumberRepr.SUNDAY:
            self.sunday_week_number = value
        else:
            self.monday_week_number = value

    def _store_hour(self, modifier: c.Hour, value: int) -> None:
        if modifier.is_12_hour_clock:
            self.hour_12 = value
        else:
            self.hour_24 = value

    def _store_offset_hour(self, modifier: c.OffsetHour, value: tuple[int, bool]) -> None:
        self.offset_hour, self.offset_is_negative = value


def _setter(field: str) -> Callable[[Parsed, Any, Any], None]:
    def store(parsed: Parsed, modifier: Any, value: Any) -> None:
        setattr(parsed, field, value)

    return store


_HANDLERS: dict[type, tuple[Callable[..., Any], Callable[..., Any]]] = {
    c.Day: (p.parse_day, _setter("day")),
    c.Month: (p.parse_month, _setter("month")),
    c.Ordinal: (p.parse_ordinal, _setter("ordinal")),
    c.Weekday: (p.parse_weekday, _setter("weekday")),
    c.WeekNumber: (p.parse_week_number, Parsed._store_week_number),
    c.Year: (p.parse_year, Parsed._store_year),
    c.Hour: (p.parse_hour, Parsed._store_hour),
    c.Minute: (p.parse_minute, _setter("minute")),
    c.Period: (p.parse_period, _setter("hour_12_is_pm")),
    c.Second: (p.parse_second, _setter("second")),
    c.Subsecond: (p.parse_subsecond, _setter("subsecond")),
    c.OffsetHour: (p.parse_offset_hour, Parsed._store_offset_hour),
    c.OffsetMinute: (p.parse_offset_minute, _setter("offset_minute")),
    c.OffsetSecond: (p.parse_offset_second, _setter("offset_second")),
}


__all__ = ["Parsed"]
