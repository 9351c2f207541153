"""Caching decorator shared by the calendar and format-description code.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, Hashable, TypeVar, overload

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@overload
def memoize(func: Callable[[K], V]) -> Callable[[K], V]: ...


@overload
def memoize(*, maxsize: int | None = None) -> Callable[[Callable[[K], V]], Callable[[K], V]]: ...


def memoize(func=None, *, maxsize=None):
    """Cache the results of a pure single-argument function.

    Used bare, the cache is unbounded, which suits a small argument space
    such as ISO week counts keyed by year. With ``maxsize`` the least
    recently used entry is dropped once the cache is full, which keeps
    compiled format descriptions from piling up when callers build them
    dynamically. Exceptions are not cached, so a description that fails to
    compile raises again on the next call.

    The wrapper exposes ``cache_size()`` and ``cache_clear()``.

    Examples:
        >>> @memoize
        ... def square(n: int) -> int:
        ...     return n ** 2
        >>> square(4), square.cache_size()
        (16, 1)

        >>> @memoize(maxsize=2)
        ... def cube(n: int) -> int:
        ...     return n ** 3
        >>> [cube(n) for n in range(5)], cube.cache_size()
        ([0, 1, 8, 27, 64], 2)
    """
    if maxsize is not None and maxsize < 1:
        raise ValueError("maxsize must be at least 1")

    def decorate(func: Callable[[K], V]) -> Callable[[K], V]:
        results: dict[K, V] = {}

        @functools.wraps(func)
        def wrapper(key: K) -> V:
            try:
                value = results.pop(key)
            except KeyError:
                value = func(key)
                if maxsize is not None and len(results) >= maxsize:
                    # dicts keep insertion order, so the first key is the stalest
                    del results[next(iter(results))]
            results[key] = value
            return value

        wrapper.cache_size = results.__len__  # type: ignore[attr-defined]
        wrapper.cache_clear = results.clear  # type: ignore[attr-defined]
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate


__all__ = ["memoize"]
