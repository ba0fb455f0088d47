"""Core data models for string format registries."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable

Validator = Callable[[str], bool]
"""Predicate telling whether a raw string satisfies a format."""

Parser = Callable[[str], Any]
"""Converts a raw string into a typed format value, raising on bad input."""

NameNormalizer = Callable[[str], str]
"""Maps a user-supplied format name to its canonical lookup key."""


@runtime_checkable
class Format(Protocol):
    """Capability contract every registrable format type provides.

    A format value renders itself as a string, encodes itself to text and
    can be rebuilt from text. ``from_text`` raises FormatDecodeError on
    malformed input.
    """

    def __str__(self) -> str: ...

    def to_text(self) -> str: ...

    @classmethod
    def from_text(cls, text: str) -> Self: ...


@dataclass(frozen=True)
class FormatEntry:
    """One registered format.

    Args:
        name: Normalized lookup key, unique within a registry.
        original_name: Name as first registered (e.g., "date-time").
        type: Concrete class implementing the Format contract.
        validator: Predicate bound at registration time.
        parser: Routine used when decoding structures. None means
            ``type.from_text``.
        zero_expression: Literal expression generators emit for an
            empty value of ``type``. None means ``"<TypeName>()"``.
    """

    name: str
    original_name: str
    type: type
    validator: Validator
    parser: Parser | None = None
    zero_expression: str | None = None

    @property
    def type_name(self) -> str:
        return self.type.__name__

    def zero(self) -> str:
        """Return the zero-value expression, falling back to a default constructor call."""
        if self.zero_expression is not None:
            return self.zero_expression
        return f"{self.type_name}()"
