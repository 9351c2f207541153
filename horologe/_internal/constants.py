"""Internal constants for Horologe.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.config import SETTINGS

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
SECONDS_PER_WEEK: int = 7 * SECONDS_PER_DAY

# Duration stores whole seconds as a signed 64-bit value
MIN_DURATION_SECONDS: int = -(2**63)
MAX_DURATION_SECONDS: int = 2**63 - 1

# Year limits, widened when large dates are enabled
LARGE_DATES: bool = SETTINGS.large_dates
MIN_YEAR: int = SETTINGS.min_year
MAX_YEAR: int = SETTINGS.max_year

# Month lengths in a common year, indexed by month number (index 0 unused)
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Julian day 0 = -4713-11-24 in the proleptic Gregorian calendar
UNIX_EPOCH_JULIAN_DAY: int = 2_440_588  # 1970-01-01

# UTC offset limits (in seconds), exclusive of a full day
MAX_UTC_OFFSET_SECONDS: int = SECONDS_PER_DAY - 1


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "MIN_DURATION_SECONDS",
    "MAX_DURATION_SECONDS",
    "LARGE_DATES",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_JULIAN_DAY",
    "MAX_UTC_OFFSET_SECONDS",
]
