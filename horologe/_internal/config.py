"""Process-wide configuration for Horologe.

Settings are read once from environment variables when the package is
imported and are immutable afterwards.

Env vars:
- HOROLOGE_LARGE_DATES: '1', 'true', 'yes' or 'on' widens the supported
  year range from +/-9,999 to +/-999,999 (default: off)

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

LARGE_DATES_ENV = "HOROLOGE_LARGE_DATES"


@dataclass(frozen=True)
class Settings:
    """Library settings loaded from the environment.

    Attributes:
        large_dates: Whether the extended year range is enabled.
    """

    large_dates: bool

    @property
    def max_year(self) -> int:
        """Largest supported year, inclusive."""
        return 999_999 if self.large_dates else 9_999

    @property
    def min_year(self) -> int:
        """Smallest supported year, inclusive."""
        return -self.max_year


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off", ""}:
        return False
    return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from a mapping of environment variables.

    Args:
        environ: The variables to read. Defaults to ``os.environ``.

    Returns:
        The resulting Settings.
    """
    if environ is None:
        environ = os.environ
    settings = Settings(large_dates=_parse_bool(environ.get(LARGE_DATES_ENV, "")))
    logger.debug("loaded settings: %s", settings)
    return settings


SETTINGS: Settings = load_settings()


__all__ = ["Settings", "load_settings", "SETTINGS", "LARGE_DATES_ENV"]
