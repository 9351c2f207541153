"""Parsers for individual format components.

Each parser reads one component at a position and returns
``(new_position, value)``, or None when the input does not hold a valid
value for that component. Values are returned as read; range checks
against the target type happen when the parsed components are resolved.
"""

from __future__ import annotations

from horologe._internal.constants import LARGE_DATES
from horologe.format_description import component as c
from horologe.format_description.modifier import (
    MonthRepr,
    WeekdayRepr,
    YearRepr,
)
from horologe.formatting.formatter import MONTH_NAMES
from horologe.parsing.combinator import (
    ParsedItem,
    exactly_n_digits,
    first_match,
    n_to_m_digits,
    n_to_m_digits_padded,
    sign,
)
from horologe.units.weekday import Weekday

_WEEKDAYS: tuple[Weekday, ...] = tuple(Weekday)

_LONG_MONTHS = [(name, number) for number, name in enumerate(MONTH_NAMES, 1)]
_SHORT_MONTHS = [(name[:3], number) for number, name in enumerate(MONTH_NAMES, 1)]
_LONG_WEEKDAYS = [(weekday.value, weekday) for weekday in _WEEKDAYS]
_SHORT_WEEKDAYS = [(weekday.value[:3], weekday) for weekday in _WEEKDAYS]


def parse_day(text: str, position: int, modifier: c.Day) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)


def parse_month(text: str, position: int, modifier: c.Month) -> ParsedItem[int] | None:
    """Parse a month as a number or an English name (case-sensitive)."""
    if modifier.repr is MonthRepr.NUMERICAL:
        return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)
    if modifier.repr is MonthRepr.LONG:
        return first_match(text, position, _LONG_MONTHS)
    return first_match(text, position, _SHORT_MONTHS)


def parse_ordinal(text: str, position: int, modifier: c.Ordinal) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 3, 3, modifier.padding)


def parse_weekday(text: str, position: int, modifier: c.Weekday) -> ParsedItem[Weekday] | None:
    """Parse a weekday name, or a single digit counted from Sunday or Monday."""
    if modifier.repr is WeekdayRepr.LONG:
        return first_match(text, position, _LONG_WEEKDAYS)
    if modifier.repr is WeekdayRepr.SHORT:
        return first_match(text, position, _SHORT_WEEKDAYS)

    item = exactly_n_digits(text, position, 1)
    if item is None:
        return None
    position, number = item
    number -= int(modifier.one_indexed)
    if not 0 <= number <= 6:
        return None
    if modifier.repr is WeekdayRepr.SUNDAY:
        number = (number - 1) % 7
    return position, Weekday.from_number_days_from_monday(number)


def parse_week_number(
    text: str, position: int, modifier: c.WeekNumber
) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)


def parse_year(text: str, position: int, modifier: c.Year) -> ParsedItem[int] | None:
    """Parse a signed year.

    A full year is four digits, or four to six when large dates are
    enabled. The widest match is taken, so a six-digit run is always read
    as one year even when a shorter year followed by digits was intended.
    """
    signed = sign(text, position)
    if signed is not None:
        position, year_sign = signed
    elif modifier.sign_is_mandatory:
        return None
    else:
        year_sign = "+"

    if modifier.repr is YearRepr.LAST_TWO:
        item = n_to_m_digits_padded(text, position, 2, 2, modifier.padding)
    else:
        item = n_to_m_digits_padded(text, position, 4, 6 if LARGE_DATES else 4, modifier.padding)
    if item is None:
        return None

    position, year = item
    return position, -year if year_sign == "-" else year


def parse_hour(text: str, position: int, modifier: c.Hour) -> ParsedItem[int] | None:
    """Parse an hour; a 12-hour clock value must be 1-12."""
    item = n_to_m_digits_padded(text, position, 2, 2, modifier.padding)
    if item is not None and modifier.is_12_hour_clock and not 1 <= item[1] <= 12:
        return None
    return item


def parse_minute(text: str, position: int, modifier: c.Minute) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)


def parse_period(text: str, position: int, modifier: c.Period) -> ParsedItem[bool] | None:
    """Parse AM or PM; the value is True for PM."""
    if modifier.is_uppercase:
        return first_match(text, position, [("AM", False), ("PM", True)])
    return first_match(text, position, [("am", False), ("pm", True)])


def parse_second(text: str, position: int, modifier: c.Second) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)


def parse_subsecond(text: str, position: int, modifier: c.Subsecond) -> ParsedItem[int] | None:
    """Parse a fraction of a second, returning nanoseconds.

    Examples:
        >>> parse_subsecond("25", 0, c.Subsecond())
        (2, 250000000)
    """
    count = modifier.digits.count
    start = position
    if count is None:
        item = n_to_m_digits(text, position, 1, 9)
    else:
        item = exactly_n_digits(text, position, count)
    if item is None:
        return None
    position, value = item
    return position, value * 10 ** (9 - (position - start))


def parse_offset_hour(
    text: str, position: int, modifier: c.OffsetHour
) -> ParsedItem[tuple[int, bool]] | None:
    """Parse the offset hour, returning (hours, is_negative).

    The sign is kept separately so that ``-00`` is still negative.
    """
    signed = sign(text, position)
    if signed is not None:
        position, hour_sign = signed
    elif modifier.sign_is_mandatory:
        return None
    else:
        hour_sign = "+"

    item = n_to_m_digits_padded(text, position, 2, 2, modifier.padding)
    if item is None:
        return None
    position, hours = item
    is_negative = hour_sign == "-"
    return position, (-hours if is_negative else hours, is_negative)


def parse_offset_minute(
    text: str, position: int, modifier: c.OffsetMinute
) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)


def parse_offset_second(
    text: str, position: int, modifier: c.OffsetSecond
) -> ParsedItem[int] | None:
    return n_to_m_digits_padded(text, position, 2, 2, modifier.padding)


__all__ = [
    "parse_day",
    "parse_month",
    "parse_ordinal",
    "parse_weekday",
    "parse_week_number",
    "parse_year",
    "parse_hour",
    "parse_minute",
    "parse_period",
    "parse_second",
    "parse_subsecond",
    "parse_offset_hour",
    "parse_offset_minute",
    "parse_offset_second",
]
