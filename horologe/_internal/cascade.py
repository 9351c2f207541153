"""Carry helpers for out-of-range components.

A cascade folds a component that has left its window back into range by
moving one unit into (or out of) the next larger component. Components are
cascaded from the smallest unit to the largest, in that order.

This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.calendar import days_in_year


def cascade(value: int, lower: int, upper: int, carry: int) -> tuple[int, int]:
    """Fold ``value`` into ``[lower, upper)`` by one unit of ``carry``.

    Only a single unit is borrowed or carried, so ``value`` must be at most
    one window away from the valid range.

    Args:
        value: The component to correct.
        lower: Smallest valid value, inclusive.
        upper: Largest valid value, exclusive.
        carry: The next larger component.

    Returns:
        Tuple of (corrected value, adjusted carry).

    Examples:
        >>> cascade(61, 0, 60, 5)
        (1, 6)
        >>> cascade(-1, 0, 60, 5)
        (59, 4)
        >>> cascade(30, 0, 60, 5)
        (30, 5)
    """
    if value >= upper:
        return value - (upper - lower), carry + 1
    if value < lower:
        return value + (upper - lower), carry - 1
    return value, carry


def cascade_ordinal(ordinal: int, year: int) -> tuple[int, int]:
    """Fold a day-of-year into range, rolling the year as needed.

    Unlike :func:`cascade`, the window depends on the year, so an ordinal
    past the end of the year moves into the following year and an ordinal
    of zero or less moves into the preceding one. Larger jumps keep rolling
    until the ordinal fits.

    Args:
        ordinal: Day of the year, possibly out of range.
        year: The year the ordinal is relative to.

    Returns:
        Tuple of (ordinal, year).

    Examples:
        >>> cascade_ordinal(366, 2019)
        (1, 2020)
        >>> cascade_ordinal(0, 2021)
        (366, 2020)
    """
    while ordinal > days_in_year(year):
        ordinal -= days_in_year(year)
        year += 1
    while ordinal < 1:
        year -= 1
        ordinal += days_in_year(year)
    return ordinal, year


__all__ = ["cascade", "cascade_ordinal"]
