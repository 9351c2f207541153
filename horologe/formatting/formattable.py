"""Base class for descriptions that can render temporal values."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.time import Time
    from horologe.core.utc_offset import UtcOffset


class Formattable(ABC):
    """A description that renders a (date, time, offset) triple.

    Any of the three values may be omitted; a description that needs an
    omitted value raises InsufficientTypeInformation. Implemented by
    FormatDescription and the well-known formats.
    """

    __slots__ = ()

    @abstractmethod
    def format_into(
        self,
        output: TextIO,
        date: Date | None = None,
        time: Time | None = None,
        offset: UtcOffset | None = None,
    ) -> int:
        """Write the rendered values to ``output``.

        Returns:
            The number of characters written.
        """

    def format(
        self,
        date: Date | None = None,
        time: Time | None = None,
        offset: UtcOffset | None = None,
    ) -> str:
        """Render the values to a new string."""
        buffer = io.StringIO()
        self.format_into(buffer, date=date, time=time, offset=offset)
        return buffer.getvalue()


__all__ = ["Formattable"]
