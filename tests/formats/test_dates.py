"""Tests for date, date-time and duration formats."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from strformats.core.errors import FormatDecodeError
from strformats.formats import DEFAULT, Date, DateTime, Duration
from strformats.formats.dates import parse_date, parse_date_time, parse_duration


class TestDate:
    def test_parse(self) -> None:
        assert parse_date("2014-12-15") == Date(2014, 12, 15)
        assert isinstance(parse_date("2014-12-15"), Date)

    @pytest.mark.parametrize("text", ["", "2014-12-1", "2014-13-01", "2014-02-30", "15/12/2014"])
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(FormatDecodeError):
            parse_date(text)

    def test_from_text_empty_is_zero(self) -> None:
        assert Date.from_text("") == Date(1, 1, 1)

    def test_text_round_trip(self) -> None:
        value = Date(2014, 12, 15)
        assert str(value) == "2014-12-15"
        assert Date.from_text(value.to_text()) == value

    def test_scan_plain_date(self) -> None:
        value = Date.scan(date(2020, 2, 29))
        assert value == Date(2020, 2, 29)
        assert type(value) is Date

    def test_repr(self) -> None:
        assert repr(Date(2014, 12, 15)) == "Date(2014, 12, 15)"

    def test_validator(self) -> None:
        assert DEFAULT.validates("date", "2014-12-15")
        assert not DEFAULT.validates("date", "2014-12-15T00:00:00Z")
        assert not DEFAULT.validates("date", "")


class TestDateTime:
    def test_parse_utc(self) -> None:
        value = DateTime.from_text("2012-03-02T15:06:05Z")
        assert value == datetime(2012, 3, 2, 15, 6, 5, tzinfo=UTC)

    def test_parse_truncates_nanoseconds(self) -> None:
        value = DateTime.from_text("2012-03-02T15:06:05.999999999Z")
        assert value.microsecond == 999999

    def test_parse_offset(self) -> None:
        value = DateTime.from_text("2012-03-02T15:06:05-07:30")
        assert value.utcoffset() == -timedelta(hours=7, minutes=30)

    def test_parse_without_seconds(self) -> None:
        assert DateTime.from_text("2012-03-02T15:06Z") == datetime(2012, 3, 2, 15, 6, tzinfo=UTC)

    def test_parse_without_offset_uses_default_zone(self) -> None:
        value = DateTime.from_text("2012-03-02 15:06:05")
        assert value.tzinfo is not None
        assert value.replace(tzinfo=None) == datetime(2012, 3, 2, 15, 6, 5)

    def test_from_text_empty_is_zero(self) -> None:
        assert DateTime.from_text("") == DateTime(1, 1, 1, tzinfo=UTC)

    def test_strict_parser_rejects_empty(self) -> None:
        with pytest.raises(FormatDecodeError, match="empty string is an invalid datetime format"):
            parse_date_time("")

    @pytest.mark.parametrize(
        "text",
        [
            "2019-01-01abc",
            "2019-01-01",
            "2019-02-30T00:00:00Z",
            "2012-03-02T15:06:05+24:00",
            "2012-03-02T15:06:05+23:99",
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(FormatDecodeError):
            DateTime.from_text(text)

    def test_str_uses_milliseconds_and_z(self) -> None:
        value = DateTime(2012, 3, 2, 15, 6, 5, 123456, tzinfo=UTC)
        assert str(value) == "2012-03-02T15:06:05.123Z"

    def test_str_keeps_offset(self) -> None:
        value = DateTime(2012, 3, 2, 15, 6, 5, tzinfo=timezone(timedelta(hours=2)))
        assert value.to_text() == "2012-03-02T15:06:05.000+02:00"

    def test_scan_plain_datetime(self) -> None:
        value = DateTime.scan(datetime(2020, 1, 1, tzinfo=UTC))
        assert type(value) is DateTime
        assert value == datetime(2020, 1, 1, tzinfo=UTC)

    def test_scan_bytes(self) -> None:
        assert DateTime.scan(b"2020-01-01T00:00:00Z") == datetime(2020, 1, 1, tzinfo=UTC)

    def test_scan_rejects_other_types(self) -> None:
        with pytest.raises(FormatDecodeError, match="cannot scan type int"):
            DateTime.scan(42)

    def test_validator_names(self) -> None:
        assert DEFAULT.validates("date-time", "2012-03-02T15:06:05Z")
        assert DEFAULT.validates("datetime", "2012-03-02T15:06:05Z")
        assert not DEFAULT.validates("date-time", "")

    @pytest.mark.parametrize("text", ["2012-03-02T15:06:05+24:00", "2012-03-02T15:06:05-23:99"])
    def test_out_of_range_offset_is_invalid(self, text: str) -> None:
        assert not DEFAULT.validates("date-time", text)


class TestDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", timedelta(0)),
            ("5s", timedelta(seconds=5)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1.5ms", timedelta(microseconds=1500)),
            ("-2m", -timedelta(minutes=2)),
            ("3 days", timedelta(days=3)),
            ("2 weeks", timedelta(weeks=2)),
            ("1 hour 15 mins", timedelta(hours=1, minutes=15)),
        ],
    )
    def test_parse(self, text: str, expected: timedelta) -> None:
        value = parse_duration(text)
        assert value == expected
        assert isinstance(value, Duration)

    @pytest.mark.parametrize(
        "text",
        ["", "5", "five seconds", "3 fortnights", "1x", "99999999999999999h", "99999999999 weeks"],
    )
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(FormatDecodeError):
            parse_duration(text)

    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (Duration(0), "0s"),
            (Duration(seconds=5), "5s"),
            (Duration(hours=1, minutes=30), "1h30m0s"),
            (Duration(microseconds=1500), "1.5ms"),
            (Duration(microseconds=250), "250µs"),
            (Duration(seconds=90, microseconds=500000), "1m30.5s"),
            (Duration(seconds=-5), "-5s"),
        ],
    )
    def test_str(self, value: Duration, text: str) -> None:
        assert str(value) == text

    def test_text_round_trip(self) -> None:
        value = parse_duration("26h3m4s")
        assert parse_duration(str(value)) == value

    def test_scan_nanoseconds(self) -> None:
        assert Duration.scan(5_000_000_000) == timedelta(seconds=5)

    def test_scan_timedelta(self) -> None:
        value = Duration.scan(timedelta(minutes=1))
        assert type(value) is Duration
        assert value == timedelta(minutes=1)

    @pytest.mark.parametrize("text", ["99999999999999999h", "99999999999 weeks", "9" * 400 + "s"])
    def test_overflow_is_invalid(self, text: str) -> None:
        assert not DEFAULT.validates("duration", text)

    def test_scan_overflow(self) -> None:
        with pytest.raises(FormatDecodeError, match="invalid duration"):
            Duration.scan(10**40)
