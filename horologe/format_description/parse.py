"""Compilation of textual format descriptions.

The grammar is small:

- Text outside brackets is literal.
- ``[[`` is a literal ``[``.
- ``[name key:value key:value]`` is a component with modifiers, separated
  by whitespace.

Examples:
    >>> description = parse_format_description("[year]-[month repr:short]")
    >>> [type(item).__name__ for item in description.items]
    ['Year', 'Literal', 'Month']
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Union

from horologe._internal.decorators import memoize
from horologe.errors import (
    ConflictingModifier,
    InvalidComponentName,
    InvalidModifier,
    MissingComponentName,
    UnclosedOpeningBracket,
)
from horologe.format_description import component as c
from horologe.format_description.items import FormatDescription, FormatItem, Literal
from horologe.format_description.modifier import (
    MonthRepr,
    Padding,
    SubsecondDigits,
    WeekdayRepr,
    WeekNumberRepr,
    YearRepr,
)

if TYPE_CHECKING:
    from horologe.format_description.well_known import Rfc3339

logger = logging.getLogger(__name__)

# Compiled descriptions kept before the least recently used one is dropped
DESCRIPTION_CACHE_SIZE: int = 256

Description = Union[FormatDescription, "Rfc3339", str]

# Modifier keyword -> (dataclass field, {value text: field value})
_ModifierTable = dict[str, tuple[str, dict[str, Any]]]

_PADDING = ("padding", {p.value: p for p in Padding})
_SIGN = ("sign_is_mandatory", {"automatic": False, "mandatory": True})

_COMPONENTS: dict[str, tuple[type, _ModifierTable]] = {
    "day": (c.Day, {"padding": _PADDING}),
    "month": (
        c.Month,
        {"padding": _PADDING, "repr": ("repr", {r.value: r for r in MonthRepr})},
    ),
    "ordinal": (c.Ordinal, {"padding": _PADDING}),
    "weekday": (
        c.Weekday,
        {
            "repr": ("repr", {r.value: r for r in WeekdayRepr}),
            "one_indexed": ("one_indexed", {"true": True, "false": False}),
        },
    ),
    "week_number": (
        c.WeekNumber,
        {"padding": _PADDING, "repr": ("repr", {r.value: r for r in WeekNumberRepr})},
    ),
    "year": (
        c.Year,
        {
            "padding": _PADDING,
            "repr": ("repr", {r.value: r for r in YearRepr}),
            "base": ("iso_week_based", {"calendar": False, "iso_week": True}),
            "sign": _SIGN,
        },
    ),
    "hour": (
        c.Hour,
        {"padding": _PADDING, "repr": ("is_12_hour_clock", {"24": False, "12": True})},
    ),
    "minute": (c.Minute, {"padding": _PADDING}),
    "period": (c.Period, {"case": ("is_uppercase", {"upper": True, "lower": False})}),
    "second": (c.Second, {"padding": _PADDING}),
    "subsecond": (
        c.Subsecond,
        {"digits": ("digits", {d.value: d for d in SubsecondDigits})},
    ),
    "offset_hour": (c.OffsetHour, {"padding": _PADDING, "sign": _SIGN}),
    "offset_minute": (c.OffsetMinute, {"padding": _PADDING}),
    "offset_second": (c.OffsetSecond, {"padding": _PADDING}),
}


def _tokens(text: str, start: int) -> list[tuple[str, int]]:
    """Split bracket contents on whitespace, keeping each token's index."""
    tokens: list[tuple[str, int]] = []
    index = 0
    while index < len(text):
        if text[index].isspace():
            index += 1
            continue
        end = index
        while end < len(text) and not text[end].isspace():
            end += 1
        tokens.append((text[index:end], start + index))
        index = end
    return tokens


def _parse_component(body: str, body_index: int, bracket_index: int) -> c.Component:
    """Build a component from the text between its brackets."""
    tokens = _tokens(body, body_index)
    if not tokens:
        raise MissingComponentName(bracket_index)

    name, name_index = tokens[0]
    if name not in _COMPONENTS:
        raise InvalidComponentName(name, name_index)
    component_type, table = _COMPONENTS[name]

    values: dict[str, Any] = {}
    seen: set[str] = set()
    for token, index in tokens[1:]:
        key, colon, value = token.partition(":")
        if not colon or key not in table or value not in table[key][1]:
            raise InvalidModifier(token, index)
        if key in seen:
            raise ConflictingModifier(key, index)
        seen.add(key)
        field, choices = table[key]
        values[field] = choices[value]

    return component_type(**values)


@memoize(maxsize=DESCRIPTION_CACHE_SIZE)
def parse_format_description(text: str) -> FormatDescription:
    """Compile a textual format description.

    The most recently used compiled descriptions are cached, so repeated
    calls with the same text return the same object.

    Args:
        text: The format description.

    Returns:
        The compiled FormatDescription.

    Raises:
        UnclosedOpeningBracket: If a ``[`` has no matching ``]``.
        MissingComponentName: If brackets contain no name.
        InvalidComponentName: If the component name is unknown.
        InvalidModifier: If a modifier is unknown or has a bad value.
        ConflictingModifier: If a modifier is given twice.

    Examples:
        >>> parse_format_description("[[literal]").items
        (Literal(value='[literal]'),)

        >>> parse_format_description("[hour")
        Traceback (most recent call last):
        ...
        horologe.errors.UnclosedOpeningBracket: unclosed opening bracket at index 0
    """
    items: list[FormatItem] = []
    literal: list[str] = []
    index = 0

    while index < len(text):
        char = text[index]
        if char != "[":
            literal.append(char)
            index += 1
            continue
        if text.startswith("[[", index):
            literal.append("[")
            index += 2
            continue

        close = text.find("]", index + 1)
        if close == -1:
            raise UnclosedOpeningBracket(index)
        if literal:
            items.append(Literal("".join(literal)))
            literal = []
        items.append(_parse_component(text[index + 1 : close], index + 1, index))
        index = close + 1

    if literal:
        items.append(Literal("".join(literal)))

    logger.debug("compiled format description %r into %d items", text, len(items))
    return FormatDescription(tuple(items))


def into_description(description: Description) -> FormatDescription | Rfc3339:
    """Return ``description``, compiling it first if it is a string."""
    if isinstance(description, str):
        return parse_format_description(description)
    return description


__all__ = ["Description", "DESCRIPTION_CACHE_SIZE", "parse_format_description", "into_description"]
