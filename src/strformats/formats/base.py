"""Shared behaviour for built-in format value types.

Every built-in format implements the Format contract (``__str__``,
``to_text``, ``from_text``) and three adapters on top of it:

- ``scan`` builds a value from what a database driver returns (str or bytes)
- ``__conform__`` lets sqlite3 store the value as its text form
- ``__get_pydantic_core_schema__`` makes the type usable as a pydantic
  field that validates through ``from_text`` and serialises to text in
  JSON mode

Subclasses only implement ``from_text`` (and ``__str__`` when they are not
plain strings).
"""

from __future__ import annotations

import sqlite3
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from strformats.core.errors import FormatDecodeError


class FormatValue:
    """Mixin implementing the adapters shared by all format values."""

    schema_format: ClassVar[str] = ""
    """Schema format name reported in JSON schemas (e.g., "date-time")."""

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str) -> Self:
        raise NotImplementedError

    @classmethod
    def scan(cls, raw: Any) -> Self:
        """Build a value from a database driver result.

        Raises:
            FormatDecodeError: If raw is neither str nor bytes, or is malformed.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bytes):
            return cls.from_text(raw.decode("utf-8"))
        if isinstance(raw, str):
            return cls.from_text(raw)
        raise FormatDecodeError(
            f"cannot scan type {type(raw).__name__} into {cls.__name__}", name=cls.schema_format
        )

    def __conform__(self, protocol: Any) -> str | None:
        if protocol is sqlite3.PrepareProtocol:
            return self.to_text()
        return None

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.scan,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema: JsonSchemaValue = {"type": "string"}
        if cls.schema_format:
            json_schema["format"] = cls.schema_format
        return json_schema


class StringFormat(FormatValue, str):
    """A format whose value is the string itself (email, hostname, UUID, ...).

    Decoding never validates: ``from_text`` accepts any string, and
    callers check validity through the registry's validator.
    """

    @classmethod
    def from_text(cls, text: str) -> Self:
        return cls(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"
