"""Base class for descriptions that can read temporal values."""

from __future__ import annotations

from abc import ABC, abstractmethod

from horologe.errors import UnexpectedTrailingCharacters
from horologe.parsing.parsed import Parsed


class Parsable(ABC):
    """A description that reads components from text into a Parsed.

    Implemented by FormatDescription and the well-known formats. The
    temporal types resolve the returned Parsed into a value.
    """

    __slots__ = ()

    @abstractmethod
    def parse_into(self, text: str, position: int, parsed: Parsed) -> int:
        """Read from ``text`` at ``position`` into ``parsed``.

        Returns:
            The position after the consumed input.
        """

    def parse(self, text: str) -> Parsed:
        """Read all of ``text``.

        Raises:
            ParseError: If the text does not match the description.
            UnexpectedTrailingCharacters: If input remains afterwards.
        """
        parsed = Parsed()
        if self.parse_into(text, 0, parsed) != len(text):
            raise UnexpectedTrailingCharacters()
        return parsed


__all__ = ["Parsable"]
