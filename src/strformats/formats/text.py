"""Colors, base64-encoded binary data and passwords."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Self

from strformats.core.errors import FormatDecodeError
from strformats.formats import register
from strformats.formats.base import FormatValue, StringFormat

_HEX_COLOR = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

_BYTE = r"\s*(?:0|[1-9]\d?|1\d\d|2[0-4]\d|25[0-5])\s*"
_RGB_COLOR = re.compile(rf"^rgb\({_BYTE},{_BYTE},{_BYTE}\)$")


class HexColor(StringFormat):
    schema_format = "hexcolor"


class RGBColor(StringFormat):
    schema_format = "rgbcolor"


class Password(StringFormat):
    """A password; never printed in repr output."""

    schema_format = "password"

    def __repr__(self) -> str:
        return "Password('******')"


class Base64(FormatValue, bytes):
    """Binary data whose text form is standard base64.

    Example:
        >>> Base64.from_text("ZWxpemFiZXRocG9zZXk=")
        Base64(b'elizabethposey')
        >>> str(Base64(b"elizabethposey"))
        'ZWxpemFiZXRocG9zZXk='
    """

    schema_format = "byte"

    @classmethod
    def from_text(cls, text: str) -> Self:
        try:
            return cls(base64.b64decode(text, validate=True))
        except (binascii.Error, ValueError) as exc:
            raise FormatDecodeError(f"invalid base64 data {text!r}: {exc}", "byte") from exc

    def __str__(self) -> str:
        return base64.b64encode(self).decode("ascii")

    def __repr__(self) -> str:
        return f"Base64({bytes.__repr__(self)})"


def is_hex_color(value: str) -> bool:
    return _HEX_COLOR.match(value) is not None


def is_rgb_color(value: str) -> bool:
    return _RGB_COLOR.match(value) is not None


def is_base64(value: str) -> bool:
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def is_password(value: str) -> bool:
    return True


register("hexcolor", HexColor, is_hex_color, zero_expression='HexColor("#000000")')
register("rgbcolor", RGBColor, is_rgb_color, zero_expression='RGBColor("rgb(0,0,0)")')
register("byte", Base64, is_base64, zero_expression='Base64(b"")')
register("password", Password, is_password)
