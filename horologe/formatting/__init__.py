"""Rendering of temporal values into text.

This module provides the pieces shared by every formattable description:
    - Formattable: base class of descriptions that can format
    - format_component: renders a single component
"""

from __future__ import annotations

from horologe.formatting.formattable import Formattable
from horologe.formatting.formatter import format_component

__all__: list[str] = ["Formattable", "format_component"]
