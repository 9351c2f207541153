"""Rendering of individual format components.

Each component reads one field from the date, time or offset it is given
and writes it to the output, honoring its modifiers. Output failures are
reported as FormatOutputError with the sink's exception as the cause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TextIO, TypeVar

from horologe.errors import FormatOutputError, InsufficientTypeInformation
from horologe.format_description import component as c
from horologe.format_description.modifier import (
    MonthRepr,
    Padding,
    WeekdayRepr,
    WeekNumberRepr,
    YearRepr,
)

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.time import Time
    from horologe.core.utc_offset import UtcOffset

T = TypeVar("T")

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def write(output: TextIO, text: str) -> int:
    """Write ``text`` to ``output`` and return its length.

    Raises:
        FormatOutputError: If the sink raises any exception.
    """
    try:
        output.write(text)
    except Exception as exc:
        raise FormatOutputError(f"an error occurred when writing the output: {exc}") from exc
    return len(text)


def format_number(output: TextIO, value: int, padding: Padding, width: int) -> int:
    """Write a non-negative number padded to ``width``.

    Examples:
        >>> import io
        >>> buffer = io.StringIO()
        >>> format_number(buffer, 7, Padding.SPACE, 3)
        3
        >>> buffer.getvalue()
        '  7'
    """
    if padding is Padding.ZERO:
        text = f"{value:0{width}d}"
    elif padding is Padding.SPACE:
        text = f"{value:>{width}d}"
    else:
        text = str(value)
    return write(output, text)


def _require(value: T | None) -> T:
    if value is None:
        raise InsufficientTypeInformation()
    return value


# Date components


def _format_day(output: TextIO, date: Date, modifier: c.Day) -> int:
    return format_number(output, date.day, modifier.padding, 2)


def _format_month(output: TextIO, date: Date, modifier: c.Month) -> int:
    if modifier.repr is MonthRepr.NUMERICAL:
        return format_number(output, date.month, modifier.padding, 2)
    name = MONTH_NAMES[date.month - 1]
    if modifier.repr is MonthRepr.SHORT:
        name = name[:3]
    return write(output, name)


def _format_ordinal(output: TextIO, date: Date, modifier: c.Ordinal) -> int:
    return format_number(output, date.ordinal, modifier.padding, 3)


def _format_weekday(output: TextIO, date: Date, modifier: c.Weekday) -> int:
    weekday = date.weekday
    if modifier.repr is WeekdayRepr.LONG:
        return write(output, weekday.value)
    if modifier.repr is WeekdayRepr.SHORT:
        return write(output, weekday.value[:3])
    if modifier.repr is WeekdayRepr.SUNDAY:
        number = weekday.number_days_from_sunday()
    else:
        number = weekday.number_days_from_monday()
    return write(output, str(number + int(modifier.one_indexed)))


def _format_week_number(output: TextIO, date: Date, modifier: c.WeekNumber) -> int:
    if modifier.repr is WeekNumberRepr.ISO:
        week = date.iso_week
    elif modifier.repr is WeekNumberRepr.SUNDAY:
        week = date.sunday_based_week
    else:
        week = date.monday_based_week
    return format_number(output, week, modifier.padding, 2)


def _format_year(output: TextIO, date: Date, modifier: c.Year) -> int:
    year = date.to_iso_week_date()[0] if modifier.iso_week_based else date.year

    if modifier.repr is YearRepr.LAST_TWO:
        return format_number(output, abs(year) % 100, modifier.padding, 2)

    written = 0
    if year < 0:
        written += write(output, "-")
    elif modifier.sign_is_mandatory or year >= 10_000:
        written += write(output, "+")
    return written + format_number(output, abs(year), modifier.padding, 4)


# Time components


def _format_hour(output: TextIO, time: Time, modifier: c.Hour) -> int:
    hour = time.hour
    if modifier.is_12_hour_clock:
        hour = (hour + 11) % 12 + 1
    return format_number(output, hour, modifier.padding, 2)


def _format_minute(output: TextIO, time: Time, modifier: c.Minute) -> int:
    return format_number(output, time.minute, modifier.padding, 2)


def _format_period(output: TextIO, time: Time, modifier: c.Period) -> int:
    period = "AM" if time.hour < 12 else "PM"
    return write(output, period if modifier.is_uppercase else period.lower())


def _format_second(output: TextIO, time: Time, modifier: c.Second) -> int:
    return format_number(output, time.second, modifier.padding, 2)


def _format_subsecond(output: TextIO, time: Time, modifier: c.Subsecond) -> int:
    count = modifier.digits.count
    if count is None:
        return write(output, f"{time.nanosecond:09d}".rstrip("0") or "0")
    return write(output, f"{time.nanosecond // 10 ** (9 - count):0{count}d}")


# Offset components


def _format_offset_hour(output: TextIO, offset: UtcOffset, modifier: c.OffsetHour) -> int:
    written = 0
    if offset.is_negative:
        written += write(output, "-")
    elif modifier.sign_is_mandatory:
        written += write(output, "+")
    return written + format_number(output, abs(offset.whole_hours), modifier.padding, 2)


def _format_offset_minute(output: TextIO, offset: UtcOffset, modifier: c.OffsetMinute) -> int:
    return format_number(output, abs(offset.minutes_past_hour), modifier.padding, 2)


def _format_offset_second(output: TextIO, offset: UtcOffset, modifier: c.OffsetSecond) -> int:
    return format_number(output, abs(offset.seconds_past_minute), modifier.padding, 2)


_DATE_FORMATTERS: dict[type, Callable[..., int]] = {
    c.Day: _format_day,
    c.Month: _format_month,
    c.Ordinal: _format_ordinal,
    c.Weekday: _format_weekday,
    c.WeekNumber: _format_week_number,
    c.Year: _format_year,
}

_TIME_FORMATTERS: dict[type, Callable[..., int]] = {
    c.Hour: _format_hour,
    c.Minute: _format_minute,
    c.Period: _format_period,
    c.Second: _format_second,
    c.Subsecond: _format_subsecond,
}

_OFFSET_FORMATTERS: dict[type, Callable[..., int]] = {
    c.OffsetHour: _format_offset_hour,
    c.OffsetMinute: _format_offset_minute,
    c.OffsetSecond: _format_offset_second,
}


def format_component(
    output: TextIO,
    component: c.Component,
    date: Date | None,
    time: Time | None,
    offset: UtcOffset | None,
) -> int:
    """Write a single component, reading from whichever value it needs.

    Returns:
        The number of characters written.

    Raises:
        InsufficientTypeInformation: If the needed value is None.
        FormatOutputError: If writing to ``output`` fails.
    """
    kind = type(component)
    if kind in _DATE_FORMATTERS:
        return _DATE_FORMATTERS[kind](output, _require(date), component)
    if kind in _TIME_FORMATTERS:
        return _TIME_FORMATTERS[kind](output, _require(time), component)
    return _OFFSET_FORMATTERS[kind](output, _require(offset), component)


__all__ = ["MONTH_NAMES", "write", "format_number", "format_component"]
