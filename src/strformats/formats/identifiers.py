"""Identifier formats: UUIDs, ULID, BSON ObjectId, ISBN, credit card and SSN numbers."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Self

from strformats.core.errors import FormatDecodeError
from strformats.formats import register
from strformats.formats.base import StringFormat

_UUID = re.compile(r"^[0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12}$", re.I)
_UUID3 = re.compile(r"^[0-9a-f]{8}-?[0-9a-f]{4}-?3[0-9a-f]{3}-?[0-9a-f]{4}-?[0-9a-f]{12}$", re.I)
_UUID4 = re.compile(
    r"^[0-9a-f]{8}-?[0-9a-f]{4}-?4[0-9a-f]{3}-?[89ab][0-9a-f]{3}-?[0-9a-f]{12}$", re.I
)
_UUID5 = re.compile(
    r"^[0-9a-f]{8}-?[0-9a-f]{4}-?5[0-9a-f]{3}-?[89ab][0-9a-f]{3}-?[0-9a-f]{12}$", re.I
)

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")
_SSN = re.compile(r"^\d{3}[- ]?\d{2}[- ]?\d{4}$")
_ISBN_SEPARATORS = re.compile(r"[\s-]")

# Crockford's base32, as used by ULIDs
_ULID_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_ULID_LENGTH = 26
ULID_ZERO = "0" * _ULID_LENGTH
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class UUID(StringFormat):
    schema_format = "uuid"


class UUID3(StringFormat):
    schema_format = "uuid3"


class UUID4(StringFormat):
    schema_format = "uuid4"


class UUID5(StringFormat):
    schema_format = "uuid5"


class ObjectId(StringFormat):
    """A BSON ObjectId as 24 hex characters."""

    schema_format = "bsonobjectid"


class ISBN(StringFormat):
    schema_format = "isbn"


class ISBN10(StringFormat):
    schema_format = "isbn10"


class ISBN13(StringFormat):
    schema_format = "isbn13"


class CreditCard(StringFormat):
    schema_format = "creditcard"


class SSN(StringFormat):
    schema_format = "ssn"


class ULID(StringFormat):
    """A Universally Unique Lexicographically Sortable Identifier.

    Unlike plain string formats, ``from_text`` validates: an empty or
    overflowing ULID raises FormatDecodeError. Values are stored upper-case.
    """

    schema_format = "ulid"

    @classmethod
    def from_text(cls, text: str) -> Self:
        return cls(parse_ulid(text))

    @property
    def timestamp(self) -> datetime:
        """Creation time encoded in the first 10 characters (millisecond precision)."""
        millis = 0
        for char in self[:10]:
            millis = millis * 32 + _ULID_ALPHABET.index(char)
        return _EPOCH + timedelta(milliseconds=millis)


def parse_ulid(text: str) -> str:
    """Validate a ULID string and return it upper-cased.

    Raises:
        FormatDecodeError: If text has the wrong length, contains characters
            outside Crockford's base32 alphabet, or exceeds 2^128 - 1.
    """
    if len(text) != _ULID_LENGTH:
        raise FormatDecodeError(f"ulid: bad data size when unmarshaling {text!r}", "ulid")
    upper = text.upper()
    if any(char not in _ULID_ALPHABET for char in upper):
        raise FormatDecodeError(f"ulid: bad data characters when unmarshaling {text!r}", "ulid")
    if upper[0] > "7":
        raise FormatDecodeError(f"ulid: overflow when unmarshaling {text!r}", "ulid")
    return upper


def is_ulid(value: str) -> bool:
    try:
        parse_ulid(value)
    except FormatDecodeError:
        return False
    return True


def is_uuid(value: str) -> bool:
    return _UUID.match(value) is not None


def is_uuid3(value: str) -> bool:
    return _UUID3.match(value) is not None


def is_uuid4(value: str) -> bool:
    return _UUID4.match(value) is not None


def is_uuid5(value: str) -> bool:
    return _UUID5.match(value) is not None


def is_object_id(value: str) -> bool:
    return _OBJECT_ID.match(value) is not None


def is_isbn10(value: str) -> bool:
    """Check an ISBN-10, ignoring dashes and spaces (last digit may be X)."""
    digits = _ISBN_SEPARATORS.sub("", value)
    if not re.fullmatch(r"\d{9}[\dX]", digits):
        return False
    total = sum((10 - i) * int(d) for i, d in enumerate(digits[:9]))
    total += 10 if digits[9] == "X" else int(digits[9])
    return total % 11 == 0


def is_isbn13(value: str) -> bool:
    """Check an ISBN-13, ignoring dashes and spaces."""
    digits = _ISBN_SEPARATORS.sub("", value)
    if not re.fullmatch(r"\d{13}", digits):
        return False
    total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(digits))
    return total % 10 == 0


def is_isbn(value: str) -> bool:
    return is_isbn10(value) or is_isbn13(value)


def is_credit_card(value: str) -> bool:
    """Check a 13 to 19 digit card number (dashes and spaces allowed) with the Luhn checksum."""
    digits = re.sub(r"[\s-]", "", value)
    if not re.fullmatch(r"\d{13,19}", digits):
        return False
    total = 0
    for i, d in enumerate(reversed(digits)):
        n = int(d)
        if i % 2:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def is_ssn(value: str) -> bool:
    return _SSN.match(value) is not None


register("uuid", UUID, is_uuid)
register("uuid3", UUID3, is_uuid3)
register("uuid4", UUID4, is_uuid4)
register("uuid5", UUID5, is_uuid5)
register("ulid", ULID, is_ulid, zero_expression=f'ULID("{ULID_ZERO}")')
register("bsonobjectid", ObjectId, is_object_id)
register("isbn", ISBN, is_isbn)
register("isbn10", ISBN10, is_isbn10)
register("isbn13", ISBN13, is_isbn13)
register("creditcard", CreditCard, is_credit_card)
register("ssn", SSN, is_ssn)
