"""Structure decoding with format-aware hooks.

Decoder populates a dataclass (or a pydantic model) from a loosely typed
mapping, such as parsed JSON or YAML. Before converting each field value it
calls a decode hook with ``(source_type, target_type, value)``; the hook may
return a converted value or the original one. A registry's hook turns
strings into registered format types:

    >>> registry = new_formats()
    >>> Decoder(Layout, registry.decode_hook()).decode({"d": "2014-12-15"})
    Layout(d=Date(2014, 12, 15))

Without a hook the decoder is strict: values must already have the
declared type (ints are accepted for float fields).
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, ValidationError

from strformats.core.errors import DecodeError, UnknownFormatError
from strformats.core.models import Format

if TYPE_CHECKING:
    from strformats.core.registry import FormatRegistry

DecodeHook = Callable[[type, Any, Any], Any]
"""Called as hook(source_type, target_type, value) before a field is converted."""

_UNION_TYPES = (Union, types.UnionType)


def format_decode_hook(registry: FormatRegistry) -> DecodeHook:
    """Build a decode hook that parses strings into registered format types.

    The hook leaves non-string values and unregistered target types
    untouched. For a registered type it runs the entry's parser (or the
    type's ``from_text`` when the entry has none) and lets parse errors
    propagate.

    Args:
        registry: Registry consulted on every call.

    Returns:
        The decode hook.
    """

    def hook(source_type: type, target_type: Any, value: Any) -> Any:
        if not isinstance(value, str) or not isinstance(target_type, type):
            return value
        entry = registry.entry_for_type(target_type)
        if entry is None:
            return value
        if entry.parser is not None:
            return entry.parser(value)
        if not issubclass(entry.type, Format):
            raise UnknownFormatError(entry.name)
        return entry.type.from_text(value)

    return hook


@dataclasses.dataclass(frozen=True)
class _Field:
    attr: str
    key: str
    type: Any
    required: bool


def _is_struct(tpe: Any) -> bool:
    if not isinstance(tpe, type):
        return False
    return dataclasses.is_dataclass(tpe) or issubclass(tpe, BaseModel)


def _struct_fields(cls: type) -> list[_Field]:
    """List the decodable fields of a dataclass or pydantic model."""
    if issubclass(cls, BaseModel):
        return [
            _Field(name, info.alias or name, info.annotation, info.is_required())
            for name, info in cls.model_fields.items()
        ]

    hints = typing.get_type_hints(cls)
    fields = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        fields.append(_Field(f.name, f.metadata.get("key", f.name), hints[f.name], required))
    return fields


def _lookup_key(data: Mapping[str, Any], key: str) -> str | None:
    """Find a mapping key matching a field key, exactly or ignoring case."""
    if key in data:
        return key
    folded = key.lower()
    for candidate in data:
        if isinstance(candidate, str) and candidate.lower() == folded:
            return candidate
    return None


class Decoder:
    """Decode mappings into dataclasses or pydantic models.

    Args:
        result_type: Target dataclass or pydantic model class.
        decode_hook: Hook applied to every value before conversion.
        registry: Shortcut for ``decode_hook=registry.decode_hook()``.

    Raises:
        TypeError: If result_type is neither a dataclass nor a pydantic model.
    """

    def __init__(
        self,
        result_type: type,
        decode_hook: DecodeHook | None = None,
        *,
        registry: FormatRegistry | None = None,
    ) -> None:
        if not _is_struct(result_type):
            raise TypeError(f"{result_type!r} is not a dataclass or pydantic model")
        if decode_hook is None and registry is not None:
            decode_hook = registry.decode_hook()
        self.result_type = result_type
        self.decode_hook = decode_hook

    def decode(self, data: Mapping[str, Any]) -> Any:
        """Decode a mapping into a new instance of the result type.

        Raises:
            DecodeError: If a field is missing, has the wrong type, or its
                value is rejected by the decode hook.
        """
        return self._decode_struct(self.result_type, data, "")

    def _decode_struct(self, cls: type, data: Any, path: str) -> Any:
        if not isinstance(data, Mapping):
            raise DecodeError(path or cls.__name__, f"expected a map, got '{type(data).__name__}'")

        values: dict[str, Any] = {}
        for field in _struct_fields(cls):
            field_path = f"{path}.{field.key}" if path else field.key
            key = _lookup_key(data, field.key)
            if key is None:
                if field.required:
                    raise DecodeError(field_path, "missing required field")
                continue
            decoded = self._decode_value(field.type, data[key], field_path)
            values[field.key if issubclass(cls, BaseModel) else field.attr] = decoded

        if issubclass(cls, BaseModel):
            try:
                return cls.model_validate(values)
            except ValidationError as exc:
                raise DecodeError(path or cls.__name__, str(exc)) from exc
        return cls(**values)

    def _decode_value(self, tpe: Any, value: Any, path: str) -> Any:
        if tpe is Any or tpe is object:
            return value

        origin = typing.get_origin(tpe)
        args = typing.get_args(tpe)

        if origin in _UNION_TYPES:
            return self._decode_union(args, value, path)
        if origin is list:
            if not isinstance(value, (list, tuple)):
                raise DecodeError(path, f"expected a list, got '{type(value).__name__}'")
            item_type = args[0] if args else Any
            return [self._decode_value(item_type, v, f"{path}[{i}]") for i, v in enumerate(value)]
        if origin is dict:
            if not isinstance(value, Mapping):
                raise DecodeError(path, f"expected a map, got '{type(value).__name__}'")
            value_type = args[1] if len(args) == 2 else Any
            return {k: self._decode_value(value_type, v, f"{path}[{k}]") for k, v in value.items()}

        if _is_struct(tpe) and isinstance(value, Mapping):
            return self._decode_struct(tpe, value, path)

        if self.decode_hook is not None:
            try:
                value = self.decode_hook(type(value), tpe, value)
            except DecodeError:
                raise
            except (ValueError, TypeError) as exc:
                raise DecodeError(path, str(exc)) from exc

        if not isinstance(tpe, type):
            return value
        if tpe is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if tpe is int and isinstance(value, bool):
            raise DecodeError(path, "expected type 'int', got unconvertible type 'bool'")
        if isinstance(value, tpe):
            return value
        raise DecodeError(
            path,
            f"expected type '{tpe.__name__}', got unconvertible type '{type(value).__name__}'",
        )

    def _decode_union(self, args: tuple[Any, ...], value: Any, path: str) -> Any:
        if value is None and type(None) in args:
            return None
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1:
            return self._decode_value(members[0], value, path)

        failure: DecodeError | None = None
        for member in members:
            try:
                return self._decode_value(member, value, path)
            except DecodeError as exc:
                failure = exc
        raise DecodeError(path, f"no union member accepts the value: {failure}")
