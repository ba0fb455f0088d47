"""Tests for network-related formats."""

from __future__ import annotations

import pytest

from strformats.formats import DEFAULT


class TestNetworkValidators:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("uri", "http://www.dummy.com"),
            ("uri", "https://example.com/path?q=1#frag"),
            ("uri", "urn:isbn:0321751043"),
            ("uri", "/relative/path%20with%20escapes"),
            ("email", "dummy@dummy.com"),
            ("email", "Jane Doe <jane.doe+tag@mail.example.org>"),
            ("hostname", "somewhere.com"),
            ("hostname", "localhost"),
            ("hostname", "xn--bcher-kva.example"),
            ("ipv4", "192.168.254.1"),
            ("ipv6", "::1"),
            ("ipv6", "2001:db8::ff00:42:8329"),
            ("cidr", "192.0.2.1/24"),
            ("cidr", "2001:db8::/32"),
            ("mac", "01:02:03:04:05:06"),
            ("mac", "01-02-03-04-05-06"),
            ("mac", "0102.0304.0506"),
            ("mac", "01:02:03:04:05:06:07:08"),
        ],
    )
    def test_valid(self, name: str, value: str) -> None:
        assert DEFAULT.validates(name, value)

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("uri", "http://exa mple.com"),
            ("uri", "http://example.com/%zz"),
            ("uri", "http://[::1"),
            ("email", "not-an-email"),
            ("email", "dummy@"),
            ("hostname", ""),
            ("hostname", "-leading.com"),
            ("hostname", "under_score.com"),
            ("hostname", "a" * 64 + ".com"),
            ("ipv4", "256.1.1.1"),
            ("ipv4", "::1"),
            ("ipv6", "192.168.1.1"),
            ("cidr", "192.0.2.1"),
            ("cidr", "192.0.2.1/33"),
            ("mac", "01:02:03:04:05"),
            ("mac", "01:02-03:04:05:06"),
            ("mac", "0102.0304"),
        ],
    )
    def test_invalid(self, name: str, value: str) -> None:
        assert not DEFAULT.validates(name, value)
