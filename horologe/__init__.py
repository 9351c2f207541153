"""Horologe: proleptic Gregorian dates, times and offsets with nanosecond precision.

Horologe models calendar dates, times of day, spans of time and fixed UTC
offsets as immutable values, and renders or reads them through compiled
format descriptions.

Core Types:
    Duration: Signed span of time with nanosecond precision
    Time: Time of day (hour, minute, second, nanosecond)
    Date: Proleptic Gregorian calendar date
    PrimitiveDateTime: Date and time without an offset
    UtcOffset: Fixed offset from UTC
    OffsetDateTime: Instant presented at a UTC offset

Units:
    Weekday: Day of the week
    DateAdjustment: Day carry produced by time-of-day arithmetic

Formatting and Parsing:
    parse_format_description: Compile format description text
    FormatDescription: A compiled format description
    Rfc3339: The RFC 3339 well-known format

Exceptions:
    HorologeError: Base exception
    ComponentRangeError: A component is out of range
    FormatError: Formatting failed
    InvalidFormatDescription: Format description text is malformed
    ParseError: Parsing failed

Example:
    >>> from horologe import Date, Duration, Time
    >>> Date(2019, 12, 31) + Duration.days(1)
    Date(2020, 1, 1)
    >>> Time(23, 59, 59).adjusting_add(Duration.seconds(2))
    (<DateAdjustment.NEXT: 'next'>, Time(0, 0, 1, nanosecond=0))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Exceptions
from horologe.errors import (
    ComponentRangeError,
    ConflictingModifier,
    ConversionRangeError,
    FormatError,
    FormatOutputError,
    HorologeError,
    IndeterminateOffsetError,
    InsufficientInformation,
    InsufficientTypeInformation,
    InvalidComponent,
    InvalidComponentName,
    InvalidFormatComponent,
    InvalidFormatDescription,
    InvalidLiteral,
    InvalidModifier,
    MissingComponentName,
    ParsedComponentRange,
    ParseError,
    UnclosedOpeningBracket,
    UnexpectedTrailingCharacters,
)

# Core types
from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.offset_date_time import OffsetDateTime
from horologe.core.primitive_date_time import PrimitiveDateTime
from horologe.core.time import Time
from horologe.core.utc_offset import UtcOffset

# Units
from horologe.units.adjustment import DateAdjustment
from horologe.units.weekday import Weekday

# Formatting and parsing
from horologe.format_description import (
    FormatDescription,
    Rfc3339,
    parse_format_description,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Duration",
    "OffsetDateTime",
    "PrimitiveDateTime",
    "Time",
    "UtcOffset",
    # Units
    "DateAdjustment",
    "Weekday",
    # Formatting and parsing
    "FormatDescription",
    "Rfc3339",
    "parse_format_description",
    # Exceptions
    "HorologeError",
    "ComponentRangeError",
    "ConversionRangeError",
    "IndeterminateOffsetError",
    "FormatError",
    "InsufficientTypeInformation",
    "InvalidFormatComponent",
    "FormatOutputError",
    "InvalidFormatDescription",
    "UnclosedOpeningBracket",
    "InvalidComponentName",
    "InvalidModifier",
    "MissingComponentName",
    "ConflictingModifier",
    "ParseError",
    "InvalidLiteral",
    "InvalidComponent",
    "InsufficientInformation",
    "ParsedComponentRange",
    "UnexpectedTrailingCharacters",
]
