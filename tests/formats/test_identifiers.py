"""Tests for identifier formats."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from strformats.core.errors import FormatDecodeError
from strformats.formats import DEFAULT, ULID
from strformats.formats.identifiers import parse_ulid


class TestUUIDs:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("uuid", "a8098c1a-f86e-11da-bd1a-00112444be1e"),
            ("uuid", "A8098C1AF86E11DABD1A00112444BE1E"),
            ("uuid3", "bcd02e22-68f0-3046-a512-327cca9def8f"),
            ("uuid4", "025b0d74-00a2-4048-bf57-227c5111bb34"),
            ("uuid5", "886313e1-3b8a-5372-9b90-0c9aee199e5d"),
        ],
    )
    def test_valid(self, name: str, value: str) -> None:
        assert DEFAULT.validates(name, value)

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("uuid", "a8098c1a-f86e-11da-bd1a-00112444be1"),
            ("uuid", "g8098c1a-f86e-11da-bd1a-00112444be1e"),
            ("uuid3", "025b0d74-00a2-4048-bf57-227c5111bb34"),
            ("uuid4", "bcd02e22-68f0-3046-a512-327cca9def8f"),
            ("uuid5", "025b0d74-00a2-4048-bf57-227c5111bb34"),
        ],
    )
    def test_invalid(self, name: str, value: str) -> None:
        assert not DEFAULT.validates(name, value)


class TestULID:
    def test_parse_upper_cases(self) -> None:
        assert parse_ulid("01aryz6s41tsv4rrffq69g5fav") == "01ARYZ6S41TSV4RRFFQ69G5FAV"

    def test_max_value(self) -> None:
        assert ULID.from_text("7ZZZZZZZZZZZZZZZZZZZZZZZZZ") == "7ZZZZZZZZZZZZZZZZZZZZZZZZZ"

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("", "bad data size"),
            ("01ARYZ6S41TSV4RRFFQ69G5FA", "bad data size"),
            ("01ARYZ6S41TSV4RRFFQ69G5FAU", "bad data characters"),
            ("8000000000YYYYYYYYYYYYYYYY", "overflow"),
        ],
    )
    def test_rejects(self, text: str, message: str) -> None:
        with pytest.raises(FormatDecodeError, match=message):
            ULID.from_text(text)

    def test_timestamp(self) -> None:
        value = ULID.from_text("01ARYZ6S41TSV4RRFFQ69G5FAV")
        assert value.timestamp == datetime(2016, 7, 30, 22, 36, 16, 385000, tzinfo=UTC)

    def test_zero_timestamp_is_epoch(self) -> None:
        assert ULID("0" * 26).timestamp == datetime(1970, 1, 1, tzinfo=UTC)

    def test_validator(self) -> None:
        assert DEFAULT.validates("ulid", "01ARYZ6S41TSV4RRFFQ69G5FAV")
        assert not DEFAULT.validates("ulid", "")


class TestNumbers:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("isbn", "0321751043"),
            ("isbn", "978-0321751041"),
            ("isbn10", "0-321-75104-3"),
            ("isbn10", "080442957X"),
            ("isbn13", "978 0321751041"),
            ("creditcard", "4111-1111-1111-1111"),
            ("creditcard", "4111111111111111"),
            ("creditcard", "378282246310005"),
            ("ssn", "111-11-1111"),
            ("ssn", "111111111"),
            ("bsonobjectid", "507f1f77bcf86cd799439011"),
        ],
    )
    def test_valid(self, name: str, value: str) -> None:
        assert DEFAULT.validates(name, value)

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("isbn", "0321751044"),
            ("isbn10", "978-0321751041"),
            ("isbn13", "0321751043"),
            ("isbn13", "978-0321751042"),
            ("creditcard", "4111-1111-1111-1112"),
            ("creditcard", "4111"),
            ("ssn", "11-111-1111"),
            ("bsonobjectid", "507f1f77bcf86cd79943901"),
        ],
    )
    def test_invalid(self, name: str, value: str) -> None:
        assert not DEFAULT.validates(name, value)
