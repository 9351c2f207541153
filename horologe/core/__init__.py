"""Core temporal types for Horologe.

This module provides the fundamental temporal types:
    - Duration: A signed span of time
    - Time: A time of day
    - Date: A calendar date
    - PrimitiveDateTime: A date and time without an offset
    - UtcOffset: A fixed offset from UTC
    - OffsetDateTime: An instant with a presentation offset
"""

from __future__ import annotations

from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.offset_date_time import OffsetDateTime
from horologe.core.primitive_date_time import PrimitiveDateTime
from horologe.core.time import Time
from horologe.core.utc_offset import UtcOffset

__all__: list[str] = [
    "Date",
    "Duration",
    "OffsetDateTime",
    "PrimitiveDateTime",
    "Time",
    "UtcOffset",
]
