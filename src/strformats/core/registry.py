"""Format registry -- the catalogue of known string formats.

A FormatRegistry maps normalized format names to FormatEntry records.
It answers validation and parsing requests and exposes read-only metadata
for code generators. Every public method holds the registry lock for its full
duration, so concurrent callers observe mutations atomically.

Typical usage:
    >>> from strformats.formats import new_formats
    >>> registry = new_formats()
    >>> registry.validates("date-time", "2012-03-02T15:06:05Z")
    True
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Any

from strformats.core.config import NAME_SEPARATORS
from strformats.core.decode import DecodeHook, format_decode_hook
from strformats.core.errors import UnknownFormatError
from strformats.core.models import Format, FormatEntry, NameNormalizer, Parser, Validator

logger = logging.getLogger(__name__)

_STRIP_SEPARATORS = str.maketrans("", "", NAME_SEPARATORS)


def default_name_normalizer(name: str) -> str:
    """Strip separators and lower-case a format name.

    Example:
        >>> default_name_normalizer("date-time")
        'datetime'
        >>> default_name_normalizer("dateTime")
        'datetime'
    """
    return name.translate(_STRIP_SEPARATORS).lower()


def _type_of(fmt: Any) -> type:
    """Return the class of a format given either the class or an instance."""
    return fmt if isinstance(fmt, type) else type(fmt)


class FormatRegistry:
    """Thread-safe registry of string formats.

    Entries are kept in a dict keyed by normalized name, in registration
    order, with a secondary index from type to the names registered for it.

    Args:
        normalizer: Name normalizer. Defaults to default_name_normalizer.
    """

    def __init__(self, normalizer: NameNormalizer | None = None) -> None:
        self._normalize = normalizer or default_name_normalizer
        self._entries: dict[str, FormatEntry] = {}
        self._by_type: dict[type, list[str]] = {}
        self._lock = threading.RLock()

    @classmethod
    def seeded(
        cls, source: FormatRegistry | None = None, normalizer: NameNormalizer | None = None
    ) -> FormatRegistry:
        """Create a registry holding a copy of another registry's entries.

        The copy is independent: later changes to either registry are not
        seen by the other. Entries are re-keyed from their original names
        with the new registry's normalizer.

        Args:
            source: Registry to copy. None creates an empty registry.
            normalizer: Normalizer for the new registry.

        Returns:
            A new FormatRegistry.
        """
        registry = cls(normalizer)
        if source is not None:
            for entry in source:
                registry.add(
                    entry.original_name,
                    entry.type,
                    entry.validator,
                    parser=entry.parser,
                    zero_expression=entry.zero_expression,
                )
        return registry

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    def normalize(self, name: str) -> str:
        """Apply this registry's normalizer without checking membership."""
        return self._normalize(name)

    def add(
        self,
        name: str,
        fmt: Any,
        validator: Validator,
        *,
        parser: Parser | None = None,
        zero_expression: str | None = None,
    ) -> bool:
        """Register a format, replacing any entry with the same normalized name.

        Args:
            name: Format name (e.g., "date-time").
            fmt: Format class, or an instance of it.
            validator: Predicate for raw strings.
            parser: Decode routine used by the decode hook. Defaults to the
                type's ``from_text``.
            zero_expression: Generator hint for an empty value of the type.

        Returns:
            True if the format was new, False if it replaced an entry.
        """
        tpe = _type_of(fmt)
        with self._lock:
            key = self._normalize(name)
            current = self._entries.get(key)
            if current is not None:
                self._unindex(current)
                self._entries[key] = FormatEntry(
                    name=key,
                    original_name=current.original_name,
                    type=tpe,
                    validator=validator,
                    parser=parser,
                    zero_expression=zero_expression,
                )
                self._by_type.setdefault(tpe, []).append(key)
                logger.debug("replaced format %s -> %s", key, tpe.__name__)
                return False

            self._insert(
                FormatEntry(
                    name=key,
                    original_name=name,
                    type=tpe,
                    validator=validator,
                    parser=parser,
                    zero_expression=zero_expression,
                )
            )
            logger.debug("added format %s -> %s", key, tpe.__name__)
            return True

    def remove(self, name: str) -> bool:
        """Remove the format registered under a name.

        Returns:
            True when an entry was removed.
        """
        with self._lock:
            entry = self._entries.pop(self._normalize(name), None)
            if entry is None:
                return False
            self._unindex(entry)
            logger.debug("removed format %s", entry.name)
            return True

    def remove_by_type(self, fmt: Any) -> bool:
        """Remove the first entry (in registration order) whose type matches.

        Returns:
            True when an entry was removed.
        """
        tpe = _type_of(fmt)
        with self._lock:
            entry = self._first_for_type(tpe)
            if entry is None:
                return False
            del self._entries[entry.name]
            self._unindex(entry)
            logger.debug("removed format %s by type %s", entry.name, tpe.__name__)
            return True

    def contains_name(self, name: str) -> bool:
        with self._lock:
            return self._normalize(name) in self._entries

    def contains_type(self, fmt: Any) -> bool:
        with self._lock:
            return _type_of(fmt) in self._by_type

    def type_of(self, name: str) -> tuple[type | None, bool]:
        """Resolve a format name to its registered type.

        Returns:
            ``(type, True)`` when registered, ``(None, False)`` otherwise.
        """
        with self._lock:
            entry = self._entries.get(self._normalize(name))
            if entry is None:
                return None, False
            return entry.type, True

    def entry(self, name: str) -> FormatEntry | None:
        with self._lock:
            return self._entries.get(self._normalize(name))

    def entry_for_type(self, fmt: Any) -> FormatEntry | None:
        """Return the first entry registered for a type, or None."""
        with self._lock:
            return self._first_for_type(_type_of(fmt))

    def validates(self, name: str, value: str) -> bool:
        """Check a raw string against a format.

        The name is normalized first, so "date-time" uses the "datetime"
        validator. Unknown names report False rather than raising.
        """
        with self._lock:
            entry = self._entries.get(self._normalize(name))
            if entry is None:
                return False
            return bool(entry.validator(value))

    def parse(self, name: str, value: str) -> Any:
        """Parse a string into the type registered for a format.

        Args:
            name: Format name.
            value: Raw string.

        Returns:
            An instance of the registered type.

        Raises:
            UnknownFormatError: If the name is not registered, or its type
                does not implement the Format contract.
            FormatDecodeError: If the format rejects the value.
        """
        with self._lock:
            entry = self._entries.get(self._normalize(name))
            if entry is None or not issubclass(entry.type, Format):
                raise UnknownFormatError(name)
            return entry.type.from_text(value)

    def decode_hook(self) -> DecodeHook:
        """Return a hook that converts strings into registered format types.

        The hook is meant for Decoder (or any decoder using the same
        ``(source_type, target_type, value)`` convention).
        """
        return format_decode_hook(self)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains_name(name)

    def __iter__(self) -> Iterator[FormatEntry]:
        with self._lock:
            snapshot = list(self._entries.values())
        return iter(snapshot)

    # ------------------------------------------------------------------
    # Generator metadata
    # ------------------------------------------------------------------

    def normalized(self, name: str) -> str:
        """Return the normalized name if registered, else an empty string.

        Example: "date-time" => "datetime"
        """
        with self._lock:
            key = self._normalize(name)
            return key if key in self._entries else ""

    def formats(self) -> list[str]:
        """Return all normalized format names in registration order."""
        with self._lock:
            return list(self._entries)

    def types(self) -> list[str]:
        """Return the type name of each entry, parallel to formats()."""
        with self._lock:
            return [entry.type_name for entry in self._entries.values()]

    def format_to_types(self) -> dict[str, str]:
        """Map each format name to its type name (e.g., "byte" => "Base64")."""
        with self._lock:
            return {entry.name: entry.type_name for entry in self._entries.values()}

    def type_to_formats(self) -> dict[str, list[str]]:
        """Map each type name to the format names registered for it."""
        with self._lock:
            lookup: dict[str, list[str]] = {}
            for entry in self._entries.values():
                lookup.setdefault(entry.type_name, []).append(entry.name)
            return lookup

    def zero_expression(self, type_name: str) -> str:
        """Return the zero-value expression for a type name, or "" if unknown."""
        with self._lock:
            for entry in self._entries.values():
                if entry.type_name == type_name:
                    return entry.zero()
            return ""

    def zero_expressions(self) -> dict[str, str]:
        """Map each registered type name to its zero-value expression.

        Example: "Date" => "Date(1, 1, 1)"
        """
        with self._lock:
            lookup: dict[str, str] = {}
            for entry in self._entries.values():
                lookup.setdefault(entry.type_name, entry.zero())
            return lookup

    def schema_info(self, value: Any) -> tuple[str, str]:
        """Return the (schema type, schema format) pair for a format value.

        Example:
            >>> registry.schema_info(Date(2014, 12, 15))
            ('string', 'date')

        Both strings are empty when the value's type is not registered.
        """
        with self._lock:
            entry = self._first_for_type(_type_of(value))
            if entry is None:
                return "", ""
            return "string", entry.name

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _insert(self, entry: FormatEntry) -> None:
        self._entries[entry.name] = entry
        self._by_type.setdefault(entry.type, []).append(entry.name)

    def _unindex(self, entry: FormatEntry) -> None:
        names = self._by_type.get(entry.type, [])
        if entry.name in names:
            names.remove(entry.name)
        if not names:
            self._by_type.pop(entry.type, None)

    def _first_for_type(self, tpe: type) -> FormatEntry | None:
        names = self._by_type.get(tpe)
        if not names:
            return None
        for key, entry in self._entries.items():
            if key in names:
                return entry
        return None
