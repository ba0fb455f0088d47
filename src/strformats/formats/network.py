"""Network-related string formats: URI, email, hostname, IP addresses, CIDR, MAC."""

from __future__ import annotations

import ipaddress
import re
from email.utils import parseaddr
from urllib.parse import urlsplit

from strformats.formats import register
from strformats.formats.base import StringFormat

_LABEL = r"[^\W_](?:(?:[^\W_]|-){0,61}[^\W_])?"

_HOSTNAME_LABEL = re.compile(rf"^{_LABEL}$")

_EMAIL = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    rf"@{_LABEL}(?:\.{_LABEL})*$"
)

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_OR_SPACE = re.compile(r"[\x00-\x20\x7f]")

_MAC_SEPARATED = re.compile(r"^[0-9A-Fa-f]{2}(?:([:-])[0-9A-Fa-f]{2})(?:\1[0-9A-Fa-f]{2})*$")
_MAC_DOTTED = re.compile(r"^[0-9A-Fa-f]{4}(?:\.[0-9A-Fa-f]{4})*$")
_MAC_OCTETS = {6, 8, 20}


class URI(StringFormat):
    schema_format = "uri"


class Email(StringFormat):
    schema_format = "email"


class Hostname(StringFormat):
    schema_format = "hostname"


class IPv4(StringFormat):
    schema_format = "ipv4"


class IPv6(StringFormat):
    schema_format = "ipv6"


class CIDR(StringFormat):
    schema_format = "cidr"


class MAC(StringFormat):
    schema_format = "mac"


def is_uri(value: str) -> bool:
    """Check that a string parses as a URI reference.

    Whitespace, control characters and malformed percent-escapes are rejected.
    """
    if _CONTROL_OR_SPACE.search(value) or _BAD_ESCAPE.search(value):
        return False
    try:
        urlsplit(value)
    except ValueError:
        return False
    return True


def is_email(value: str) -> bool:
    """Check for an RFC 5322 address, optionally with a display name."""
    _, address = parseaddr(value)
    return bool(address) and _EMAIL.match(address) is not None


def is_hostname(value: str) -> bool:
    """Check for an RFC 1123 hostname of at most 255 characters."""
    if not value or len(value) > 255:
        return False
    return all(_HOSTNAME_LABEL.match(label) for label in value.split("."))


def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_cidr(value: str) -> bool:
    """Check for an IP network in CIDR notation (host bits may be set)."""
    if "/" not in value:
        return False
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


def is_mac(value: str) -> bool:
    """Check for an IEEE 802 MAC-48, EUI-48, EUI-64 or 20-octet InfiniBand address."""
    if _MAC_SEPARATED.match(value):
        return len(re.split(r"[:-]", value)) in _MAC_OCTETS
    if _MAC_DOTTED.match(value):
        return len(value.split(".")) * 2 in _MAC_OCTETS
    return False


register("uri", URI, is_uri)
register("email", Email, is_email)
register("hostname", Hostname, is_hostname)
register("ipv4", IPv4, is_ipv4)
register("ipv6", IPv6, is_ipv6)
register("cidr", CIDR, is_cidr)
register("mac", MAC, is_mac)
