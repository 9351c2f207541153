"""Temporal units and enumerations.

This module provides:
    - Weekday: Day of the week
    - DateAdjustment: Day carry produced by time-of-day arithmetic
"""

from __future__ import annotations

from horologe.units.adjustment import DateAdjustment
from horologe.units.weekday import Weekday

__all__: list[str] = [
    "DateAdjustment",
    "Weekday",
]
