"""Format descriptions shared by formatting and parsing.

A format description is compiled once from text and then reused to both
render and read temporal values:

    >>> from horologe import Date
    >>> from horologe.format_description import parse_format_description
    >>> description = parse_format_description("[year]-[month]-[day]")
    >>> Date(2024, 1, 15).format(description)
    '2024-01-15'
    >>> Date.parse("2024-01-15", description)
    Date(2024, 1, 15)

Components:
    day, month, ordinal, weekday, week_number, year, hour, minute,
    period, second, subsecond, offset_hour, offset_minute, offset_second.

Well-known formats:
    Rfc3339: RFC 3339 date-times.
"""

from __future__ import annotations

from horologe.format_description import component, modifier
from horologe.format_description.items import FormatDescription, FormatItem, Literal
from horologe.format_description.parse import (
    Description,
    into_description,
    parse_format_description,
)
from horologe.format_description.well_known import Rfc3339

__all__: list[str] = [
    "component",
    "modifier",
    "Description",
    "FormatDescription",
    "FormatItem",
    "Literal",
    "Rfc3339",
    "into_description",
    "parse_format_description",
]
