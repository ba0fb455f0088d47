"""Date, date-time and duration formats.

Date and DateTime accept the empty string in ``from_text`` and return the
zero value (0001-01-01). Their decode parsers, used when decoding
structures, are strict and reject it.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta, timezone
from typing import Any, Self

from strformats.core.config import DATETIME_TIMESPEC, DEFAULT_TIME_ZONE, RFC3339_FULL_DATE
from strformats.core.errors import FormatDecodeError
from strformats.core.models import Parser, Validator
from strformats.formats import register
from strformats.formats.base import FormatValue

_FULL_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_DATE_TIME = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d+))?)?"
    r"(Z|z|[+-]\d{2}:?\d{2})?$"
)

_GO_DURATION = re.compile(r"^([+-])?((?:(?:\d+\.?\d*|\.\d+)(?:ns|us|µs|μs|ms|s|m|h))+)$")
_GO_DURATION_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_WORD_DURATION = re.compile(r"^(?:\s*\d+\s*[A-Za-zµμ]+\s*)+$")
_WORD_DURATION_PART = re.compile(r"(\d+)\s*([A-Za-zµμ]+)")

_MICROSECONDS = {
    "ns": 0.001,
    "us": 1,
    "µs": 1,
    "μs": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60_000_000,
    "h": 3_600_000_000,
}

_UNIT_ALIASES = {
    "ns": "ns", "nano": "ns", "nanos": "ns", "nanosecond": "ns", "nanoseconds": "ns",
    "us": "us", "µs": "us", "μs": "us", "micro": "us", "micros": "us",
    "microsecond": "us", "microseconds": "us",
    "ms": "ms", "milli": "ms", "millis": "ms", "millisecond": "ms", "milliseconds": "ms",
    "s": "s", "sec": "s", "secs": "s", "second": "s", "seconds": "s",
    "m": "m", "min": "m", "mins": "m", "minute": "m", "minutes": "m",
    "h": "h", "hr": "h", "hrs": "h", "hour": "h", "hours": "h",
    "d": "d", "day": "d", "days": "d",
    "w": "w", "wk": "w", "week": "w", "weeks": "w",
}

_DAY_MICROSECONDS = 86_400_000_000


class Date(FormatValue, date):
    """A full-date (``YYYY-MM-DD``), e.g. ``Date(2014, 12, 15)``."""

    schema_format = "date"

    @classmethod
    def from_text(cls, text: str) -> Self:
        if not text:
            return cls(1, 1, 1)
        return parse_date(text)

    @classmethod
    def scan(cls, raw: Any) -> Self:
        if isinstance(raw, date) and not isinstance(raw, (cls, datetime)):
            return cls(raw.year, raw.month, raw.day)
        return super().scan(raw)


class DateTime(FormatValue, datetime):
    """An RFC 3339 timestamp, rendered with millisecond precision."""

    schema_format = "date-time"

    @classmethod
    def from_text(cls, text: str) -> Self:
        if not text:
            return cls(1, 1, 1, tzinfo=UTC)
        return cls._from_datetime(_parse_timestamp(text))

    @classmethod
    def scan(cls, raw: Any) -> Self:
        if isinstance(raw, datetime) and not isinstance(raw, cls):
            return cls._from_datetime(raw)
        return super().scan(raw)

    @classmethod
    def _from_datetime(cls, value: datetime) -> Self:
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
            fold=value.fold,
        )

    def __str__(self) -> str:
        text = self.isoformat(timespec=DATETIME_TIMESPEC)
        if text.endswith("+00:00"):
            return text[: -len("+00:00")] + "Z"
        return text


class Duration(FormatValue, timedelta):
    """A duration written Go-style (``1h30m5s``) or in words (``3 days``)."""

    schema_format = "duration"

    @classmethod
    def from_text(cls, text: str) -> Self:
        return parse_duration(text)

    @classmethod
    def scan(cls, raw: Any) -> Self:
        if isinstance(raw, timedelta) and not isinstance(raw, cls):
            return cls(days=raw.days, seconds=raw.seconds, microseconds=raw.microseconds)
        if isinstance(raw, int) and not isinstance(raw, bool):
            # drivers hand durations back as nanoseconds; sub-microsecond digits are dropped
            return _duration(raw // 1000, f"{raw}ns")
        return super().scan(raw)

    def __str__(self) -> str:
        total = (self.days * 86_400 + self.seconds) * 1_000_000 + self.microseconds
        if total == 0:
            return "0s"
        sign = "-" if total < 0 else ""
        total = abs(total)
        if total < 1_000:
            return f"{sign}{total}µs"
        if total < 1_000_000:
            return f"{sign}{_decimal(total, 1_000)}ms"
        hours, rest = divmod(total, 3_600_000_000)
        minutes, rest = divmod(rest, 60_000_000)
        text = f"{hours}h" if hours else ""
        if hours or minutes:
            text += f"{minutes}m"
        return f"{sign}{text}{_decimal(rest, 1_000_000)}s"


def _decimal(value: int, unit: int) -> str:
    """Render value/unit without trailing zeros (1500, 1000 -> "1.5")."""
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def _parse_timestamp(text: str) -> datetime:
    match = _DATE_TIME.match(text)
    if match is None:
        raise FormatDecodeError(f"parsing time {text!r}: not an RFC 3339 date-time", "datetime")
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        if offset is None:
            tz: Any = DEFAULT_TIME_ZONE
        elif offset in ("Z", "z"):
            tz = UTC
        else:
            sign = -1 if offset[0] == "-" else 1
            digits = offset[1:].replace(":", "")
            tz = timezone(sign * timedelta(hours=int(digits[:2]), minutes=int(digits[2:])))
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second or 0), micro,
            tzinfo=tz,
        )
    except ValueError as exc:
        raise FormatDecodeError(f"parsing time {text!r}: {exc}", "datetime") from exc


def parse_date(text: str) -> Date:
    """Parse a full-date strictly.

    Raises:
        FormatDecodeError: If text is not a valid ``YYYY-MM-DD`` date.
    """
    if not _FULL_DATE.match(text):
        raise FormatDecodeError(f"parsing time {text!r} as {RFC3339_FULL_DATE!r}", "date")
    try:
        parsed = datetime.strptime(text, RFC3339_FULL_DATE)
    except ValueError as exc:
        raise FormatDecodeError(f"parsing time {text!r}: {exc}", "date") from exc
    return Date(parsed.year, parsed.month, parsed.day)


def parse_date_time(text: str) -> DateTime:
    """Parse a date-time, rejecting the empty string.

    Raises:
        FormatDecodeError: If text is empty or not RFC 3339.
    """
    if not text:
        raise FormatDecodeError("empty string is an invalid datetime format", "datetime")
    return DateTime.from_text(text)


def _duration(micros: float, text: str) -> Duration:
    try:
        return Duration(microseconds=micros)
    except OverflowError as exc:
        raise FormatDecodeError(f"invalid duration {text!r}: {exc}", "duration") from exc


def parse_duration(text: str) -> Duration:
    """Parse a Go-style or worded duration.

    Example:
        >>> parse_duration("1h30m")
        Duration(seconds=5400)
        >>> parse_duration("3 days")
        Duration(days=3)

    Raises:
        FormatDecodeError: If text is not a recognised duration.
    """
    if text == "0":
        return Duration(0)

    match = _GO_DURATION.match(text)
    if match is not None:
        micros = sum(
            float(amount) * _MICROSECONDS[unit]
            for amount, unit in _GO_DURATION_PART.findall(match.group(2))
        )
        if match.group(1) == "-":
            micros = -micros
        return _duration(micros, text)

    if _WORD_DURATION.match(text):
        micros = 0
        for amount, unit in _WORD_DURATION_PART.findall(text):
            canonical = _UNIT_ALIASES.get(unit.lower())
            if canonical is None:
                raise FormatDecodeError(
                    f"invalid time unit {unit!r} in duration {text!r}", "duration"
                )
            if canonical == "d":
                micros += int(amount) * _DAY_MICROSECONDS
            elif canonical == "w":
                micros += int(amount) * 7 * _DAY_MICROSECONDS
            else:
                micros += int(amount) * _MICROSECONDS[canonical]
        return _duration(micros, text)

    raise FormatDecodeError(f"invalid duration {text!r}", "duration")


def _accepts(parse: Parser) -> Validator:
    """Turn a strict parser into a validator predicate."""

    def validator(text: str) -> bool:
        try:
            parse(text)
        except FormatDecodeError:
            return False
        return True

    return validator


is_date = _accepts(parse_date)
is_date_time = _accepts(parse_date_time)
is_duration = _accepts(parse_duration)


register("date", Date, is_date, parser=parse_date, zero_expression="Date(1, 1, 1)")
register(
    "date-time",
    DateTime,
    is_date_time,
    parser=parse_date_time,
    zero_expression="DateTime(1, 1, 1, tzinfo=timezone.utc)",
)
register("duration", Duration, is_duration, parser=parse_duration, zero_expression="Duration(0)")
