"""Well-known formats that are not expressible as a format description.

RFC 3339 has rules a plain description cannot state: a fraction of a
second only when needed, ``Z`` for UTC and case-insensitive separators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from horologe.errors import (
    InsufficientTypeInformation,
    InvalidComponent,
    InvalidFormatComponent,
    InvalidLiteral,
)
from horologe.format_description.modifier import Padding
from horologe.formatting.formattable import Formattable
from horologe.formatting.formatter import format_number, write
from horologe.parsing.combinator import any_digit, ascii_char, exactly_n_digits, sign
from horologe.parsing.parsable import Parsable

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.time import Time
    from horologe.core.utc_offset import UtcOffset
    from horologe.parsing.parsed import Parsed


def _literal(text: str, position: int, *options: str) -> int:
    for option in options:
        next_position = ascii_char(text, position, option)
        if next_position is not None:
            return next_position
    raise InvalidLiteral()


def _number(text: str, position: int, digits: int, name: str) -> tuple[int, int]:
    item = exactly_n_digits(text, position, digits)
    if item is None:
        raise InvalidComponent(name)
    return item


class Rfc3339(Formattable, Parsable):
    """The RFC 3339 date-time format, e.g. ``1985-04-12T23:20:50.52Z``.

    Formatting requires a date, a time and an offset. The year must be in
    0..=9999 and the offset must be a whole number of minutes. Parsing
    accepts ``T``/``t`` and ``Z``/``z``, and any number of fractional
    digits; digits past the ninth are ignored.

    Examples:
        >>> from horologe import OffsetDateTime
        >>> OffsetDateTime.parse("1985-04-12T23:20:50.52Z", Rfc3339()).nanosecond
        520000000
    """

    __slots__ = ()

    def format_into(
        self,
        output: TextIO,
        date: Date | None = None,
        time: Time | None = None,
        offset: UtcOffset | None = None,
    ) -> int:
        """Write the RFC 3339 representation to ``output``.

        Raises:
            InsufficientTypeInformation: If the date, time or offset is
                missing.
            InvalidFormatComponent: If the year or offset cannot be
                represented.
        """
        if date is None or time is None or offset is None:
            raise InsufficientTypeInformation()

        year, month, day = date.to_calendar_date()
        if not 0 <= year <= 9_999:
            raise InvalidFormatComponent("year")
        if offset.seconds_past_minute != 0:
            raise InvalidFormatComponent("offset_second")

        written = format_number(output, year, Padding.ZERO, 4)
        written += write(output, "-")
        written += format_number(output, month, Padding.ZERO, 2)
        written += write(output, "-")
        written += format_number(output, day, Padding.ZERO, 2)
        written += write(output, "T")
        written += format_number(output, time.hour, Padding.ZERO, 2)
        written += write(output, ":")
        written += format_number(output, time.minute, Padding.ZERO, 2)
        written += write(output, ":")
        written += format_number(output, time.second, Padding.ZERO, 2)

        if time.nanosecond != 0:
            written += write(output, "." + f"{time.nanosecond:09d}".rstrip("0"))

        if offset.is_utc:
            return written + write(output, "Z")

        written += write(output, "-" if offset.is_negative else "+")
        written += format_number(output, abs(offset.whole_hours), Padding.ZERO, 2)
        written += write(output, ":")
        return written + format_number(output, abs(offset.minutes_past_hour), Padding.ZERO, 2)

    def parse_into(self, text: str, position: int, parsed: Parsed) -> int:
        """Read an RFC 3339 date-time into ``parsed``.

        Raises:
            InvalidLiteral: If a separator is missing.
            InvalidComponent: If a field is malformed.
        """
        position, parsed.year = _number(text, position, 4, "year")
        position = _literal(text, position, "-")
        position, parsed.month = _number(text, position, 2, "month")
        position = _literal(text, position, "-")
        position, parsed.day = _number(text, position, 2, "day")
        position = _literal(text, position, "T", "t")
        position, parsed.hour_24 = _number(text, position, 2, "hour")
        position = _literal(text, position, ":")
        position, parsed.minute = _number(text, position, 2, "minute")
        position = _literal(text, position, ":")
        position, parsed.second = _number(text, position, 2, "second")

        subsecond = 0
        after_dot = ascii_char(text, position, ".")
        if after_dot is not None:
            digit = any_digit(text, after_dot)
            if digit is None:
                raise InvalidComponent("subsecond")
            position, value = digit
            subsecond = value * 100_000_000
            multiplier = 10_000_000
            digit = any_digit(text, position)
            while digit is not None:
                position, value = digit
                subsecond += value * multiplier
                multiplier //= 10
                digit = any_digit(text, position)
        parsed.subsecond = subsecond

        utc = ascii_char(text, position, "Z")
        if utc is None:
            utc = ascii_char(text, position, "z")
        if utc is not None:
            parsed.offset_hour = 0
            parsed.offset_minute = 0
            parsed.offset_is_negative = False
            return utc

        signed = sign(text, position)
        if signed is None:
            raise InvalidComponent("offset_hour")
        position, offset_sign = signed
        position, hours = _number(text, position, 2, "offset_hour")
        position = _literal(text, position, ":")
        position, parsed.offset_minute = _number(text, position, 2, "offset_minute")
        parsed.offset_is_negative = offset_sign == "-"
        parsed.offset_hour = -hours if parsed.offset_is_negative else hours
        return position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rfc3339):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Rfc3339)

    def __repr__(self) -> str:
        return "Rfc3339()"


__all__ = ["Rfc3339"]
