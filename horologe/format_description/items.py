"""Compiled format descriptions.

A FormatDescription is an ordered, immutable sequence of items. Each item
is either a Literal, copied verbatim on output and matched exactly on
input, or a component naming a field of a temporal value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO, Union

from horologe.errors import InvalidLiteral
from horologe.format_description.component import Component
from horologe.formatting.formattable import Formattable
from horologe.formatting.formatter import format_component, write
from horologe.parsing.parsable import Parsable

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.time import Time
    from horologe.core.utc_offset import UtcOffset
    from horologe.parsing.parsed import Parsed


@dataclass(frozen=True)
class Literal:
    """Text that is written as-is and must appear exactly in parsed input."""

    value: str


FormatItem = Union[Literal, Component]


@dataclass(frozen=True)
class FormatDescription(Formattable, Parsable):
    """A compiled format description.

    Instances are usually created with
    :func:`~horologe.format_description.parse_format_description` and can be
    reused for any number of format and parse calls. An empty description
    formats to the empty string and parses only the empty string.

    Attributes:
        items: The literals and components, in order.

    Examples:
        >>> from horologe.format_description import parse_format_description
        >>> description = parse_format_description("[hour]:[minute]")
        >>> len(description.items)
        3
    """

    items: tuple[FormatItem, ...] = ()

    def format_into(
        self,
        output: TextIO,
        date: Date | None = None,
        time: Time | None = None,
        offset: UtcOffset | None = None,
    ) -> int:
        """Write each item to ``output``.

        Returns:
            The number of characters written.

        Raises:
            InsufficientTypeInformation: If a component needs a value that
                was not supplied.
            FormatOutputError: If writing to ``output`` fails.
        """
        written = 0
        for item in self.items:
            if isinstance(item, Literal):
                written += write(output, item.value)
            else:
                written += format_component(output, item, date, time, offset)
        return written

    def parse_into(self, text: str, position: int, parsed: Parsed) -> int:
        """Match each item against ``text`` starting at ``position``.

        Returns:
            The position after the last consumed character.

        Raises:
            InvalidLiteral: If a literal does not match.
            InvalidComponent: If a component cannot be read.
        """
        for item in self.items:
            if isinstance(item, Literal):
                if not text.startswith(item.value, position):
                    raise InvalidLiteral()
                position += len(item.value)
            else:
                position = parsed.parse_component(text, position, item)
        return position


__all__ = ["Literal", "FormatItem", "FormatDescription"]
