"""Built-in format registry -- the default catalogue of string formats.

DEFAULT is the process-wide registry seeded with every built-in format.
Each format module registers its formats at import time. Code that needs
to add or remove formats without affecting other users should work on an
independent copy from new_formats() and pass it along explicitly.
"""

from __future__ import annotations

from strformats.core.models import Parser, Validator
from strformats.core.registry import FormatRegistry

DEFAULT = FormatRegistry()
"""Process-wide registry pre-seeded with the built-in formats."""


def register(
    name: str,
    fmt: type,
    validator: Validator,
    *,
    parser: Parser | None = None,
    zero_expression: str | None = None,
) -> bool:
    """Register a format in the default registry.

    Args:
        name: Format name (e.g., "date-time").
        fmt: Format class.
        validator: Predicate for raw strings.
        parser: Decode routine used by the decode hook.
        zero_expression: Generator hint for an empty value.

    Returns:
        True if the format was new.
    """
    return DEFAULT.add(name, fmt, validator, parser=parser, zero_expression=zero_expression)


def new_formats() -> FormatRegistry:
    """Return a new registry holding a copy of the default registry's formats.

    Returns:
        An independent FormatRegistry.
    """
    return FormatRegistry.seeded(DEFAULT)


# Auto-import to trigger registration
from strformats.formats import (  # noqa: E402, F401
    currency,
    dates,
    identifiers,
    network,
    text,
)
from strformats.formats.currency import Currency  # noqa: E402
from strformats.formats.dates import Date, DateTime, Duration  # noqa: E402
from strformats.formats.identifiers import (  # noqa: E402
    ISBN,
    ISBN10,
    ISBN13,
    SSN,
    ULID,
    UUID,
    UUID3,
    UUID4,
    UUID5,
    CreditCard,
    ObjectId,
)
from strformats.formats.network import CIDR, MAC, URI, Email, Hostname, IPv4, IPv6  # noqa: E402
from strformats.formats.text import Base64, HexColor, Password, RGBColor  # noqa: E402

__all__ = [
    "CIDR",
    "DEFAULT",
    "ISBN",
    "ISBN10",
    "ISBN13",
    "MAC",
    "SSN",
    "ULID",
    "URI",
    "UUID",
    "UUID3",
    "UUID4",
    "UUID5",
    "Base64",
    "CreditCard",
    "Currency",
    "Date",
    "DateTime",
    "Duration",
    "Email",
    "HexColor",
    "Hostname",
    "IPv4",
    "IPv6",
    "ObjectId",
    "Password",
    "RGBColor",
    "new_formats",
    "register",
]
