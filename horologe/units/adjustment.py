"""Day adjustment signal produced by time-of-day arithmetic.

When adding a span to a Time wraps past midnight, the result carries a
DateAdjustment that callers combine with date arithmetic.
"""

from __future__ import annotations

from enum import Enum


class DateAdjustment(Enum):
    """Whether a wrapped time-of-day belongs to a different calendar day.

    Examples:
        >>> DateAdjustment.NEXT.days
        1
        >>> DateAdjustment.PREVIOUS.days
        -1
    """

    PREVIOUS = "previous"
    NONE = "none"
    NEXT = "next"

    @property
    def days(self) -> int:
        """Return the signed number of days this adjustment represents."""
        if self is DateAdjustment.PREVIOUS:
            return -1
        if self is DateAdjustment.NEXT:
            return 1
        return 0


__all__ = ["DateAdjustment"]
