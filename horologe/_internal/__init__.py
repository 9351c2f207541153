"""Internal utilities for Horologe.

This module contains private implementation details:
    - Settings and constants
    - Calendar math (leap years, Julian days, ISO weeks)
    - Component cascades
    - Range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.cascade import cascade, cascade_ordinal
from horologe._internal.decorators import memoize
from horologe._internal.validation import (
    ensure_in_range,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "cascade",
    "cascade_ordinal",
    "memoize",
    "ensure_in_range",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
