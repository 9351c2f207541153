"""Parsing of text into temporal components.

This module provides the pieces shared by every parsable description:
    - Parsed: accumulator of the components read so far
    - Parsable: base class of descriptions that can parse
    - combinator: low-level parsers over a string and a position
"""

from __future__ import annotations

from horologe.parsing.parsable import Parsable
from horologe.parsing.parsed import Parsed

__all__: list[str] = ["Parsable", "Parsed"]
