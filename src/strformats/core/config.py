"""Configuration constants for string formats.

Values are plain module-level constants. The default time zone can be
overridden with the STRFORMATS_TIMEZONE environment variable.
"""

from __future__ import annotations

import os
from zoneinfo import ZoneInfo

DEFAULT_TIME_ZONE = ZoneInfo(os.getenv("STRFORMATS_TIMEZONE", "UTC"))
"""Zone applied to timestamps that carry no UTC offset."""

NAME_SEPARATORS = "-_. \t"
"""Characters stripped from format names by the default normalizer."""

RFC3339_FULL_DATE = "%Y-%m-%d"
"""strftime layout of a full-date (e.g. 2014-12-15)."""

DATETIME_TIMESPEC = "milliseconds"
"""Precision used when rendering a DateTime as text."""
