"""Small parsers over a string and a position.

Every function takes the input and a starting position and returns
``(new_position, value)`` on success or None when the input does not match.
Nothing is consumed on failure, and there is no backtracking.

Only ASCII digits are accepted as digits.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from horologe.format_description.modifier import Padding

T = TypeVar("T")

ParsedItem = tuple[int, T]


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def ascii_char(text: str, position: int, expected: str) -> int | None:
    """Consume ``expected`` if it is the next character."""
    if position < len(text) and text[position] == expected:
        return position + 1
    return None


def sign(text: str, position: int) -> ParsedItem[str] | None:
    """Consume a ``+`` or ``-``."""
    if position < len(text) and text[position] in "+-":
        return position + 1, text[position]
    return None


def any_digit(text: str, position: int) -> ParsedItem[int] | None:
    """Consume a single digit."""
    if position < len(text) and _is_digit(text[position]):
        return position + 1, int(text[position])
    return None


def n_to_m_digits(text: str, position: int, n: int, m: int) -> ParsedItem[int] | None:
    """Consume at least ``n`` and at most ``m`` digits, greedily.

    Examples:
        >>> n_to_m_digits("12345", 0, 1, 3)
        (3, 123)
        >>> n_to_m_digits("1a", 0, 2, 2) is None
        True
    """
    end = position
    while end < len(text) and end - position < m and _is_digit(text[end]):
        end += 1
    if end - position < n:
        return None
    return end, int(text[position:end])


def exactly_n_digits(text: str, position: int, n: int) -> ParsedItem[int] | None:
    """Consume exactly ``n`` digits."""
    return n_to_m_digits(text, position, n, n)


def n_to_m_digits_padded(
    text: str, position: int, n: int, m: int, padding: Padding
) -> ParsedItem[int] | None:
    """Consume a number padded to a width of ``n``, allowing up to ``m`` digits.

    With zero padding the leading zeros count as digits. With space
    padding up to ``n - 1`` leading spaces are consumed first, and the
    remaining width must be digits. With no padding one to ``m`` digits
    are read.

    Examples:
        >>> n_to_m_digits_padded(" 7", 0, 2, 2, Padding.SPACE)
        (2, 7)
        >>> n_to_m_digits_padded("7", 0, 2, 2, Padding.NONE)
        (1, 7)
        >>> n_to_m_digits_padded("7", 0, 2, 2, Padding.ZERO) is None
        True
    """
    if padding is Padding.NONE:
        return n_to_m_digits(text, position, 1, m)
    if padding is Padding.ZERO:
        return n_to_m_digits(text, position, n, m)

    start = position
    while position - start < n - 1 and position < len(text) and text[position] == " ":
        position += 1
    pad_width = position - start
    return n_to_m_digits(text, position, n - pad_width, m - pad_width)


def first_match(
    text: str, position: int, options: Sequence[tuple[str, T]]
) -> ParsedItem[T] | None:
    """Consume the first option whose text appears at ``position``.

    Examples:
        >>> first_match("PM", 0, [("AM", False), ("PM", True)])
        (2, True)
    """
    for candidate, value in options:
        if text.startswith(candidate, position):
            return position + len(candidate), value
    return None


__all__ = [
    "ascii_char",
    "sign",
    "any_digit",
    "n_to_m_digits",
    "exactly_n_digits",
    "n_to_m_digits_padded",
    "first_match",
]
