"""Exceptions raised by format registries and the structure decoder.

All errors derive from ValueError so that pydantic validation and
callers catching ValueError treat them as ordinary bad-input failures.
"""

from __future__ import annotations


class FormatError(ValueError):
    """Base class for string format failures.

    Args:
        message: Human-readable description.
        name: Format name involved, if any.
    """

    def __init__(self, message: str, name: str = "") -> None:
        super().__init__(message)
        self.name = name


class UnknownFormatError(FormatError):
    """No registered format matches the requested name, or its type cannot decode text."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is an invalid type name", name=name)


class FormatDecodeError(FormatError):
    """A known format rejected a malformed string."""


class DecodeError(FormatError):
    """The structure decoder could not populate a field.

    Args:
        field: Name of the field being decoded.
        message: What went wrong.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"'{field}': {message}")
        self.field = field
