"""Validation utilities for Horologe.

This module provides the range checks shared by every validated
constructor. Failures raise ComponentRangeError carrying the component
name, its bounds and the offending value.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from horologe._internal.calendar import days_in_month
from horologe._internal.constants import MAX_YEAR, MIN_YEAR
from horologe.errors import ComponentRangeError

P = ParamSpec("P")
T = TypeVar("T")


def ensure_in_range(
    name: str,
    value: int,
    minimum: int,
    maximum: int,
    *,
    conditional: bool = False,
) -> None:
    """Raise ComponentRangeError unless ``minimum <= value <= maximum``.

    Args:
        name: Component name reported in the error.
        value: The value to check.
        minimum: Smallest valid value, inclusive.
        maximum: Largest valid value, inclusive.
        conditional: Whether the bounds depend on other components.

    Raises:
        ComponentRangeError: If the value is out of range.
    """
    if value < minimum or value > maximum:
        raise ComponentRangeError(name, minimum, maximum, value, conditional)


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Parameters are checked in the order the limits are given, so the first
    out-of-range parameter is the one reported.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23), minute=(0, 59))
        ... def make(hour: int, minute: int) -> None:
        ...     pass

        >>> make(24, 0)
        Traceback (most recent call last):
        ...
        horologe.errors.ComponentRangeError: hour must be in the range 0..=23
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            for param_name, (min_val, max_val) in limits.items():
                ensure_in_range(param_name, bound.arguments[param_name], min_val, max_val)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ComponentRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    ensure_in_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ComponentRangeError: If month is outside 1-12.
    """
    ensure_in_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    The upper bound depends on the month and leap-year status, so the
    error is marked conditional.

    Raises:
        ComponentRangeError: If day is invalid for the month.
    """
    ensure_in_range("day", day, 1, days_in_month(year, month), conditional=True)


__all__ = [
    "ensure_in_range",
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]
