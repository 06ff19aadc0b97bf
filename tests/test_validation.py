"""Tests for address parsing and alias validation."""

from ipaddress import IPv4Address, IPv6Address

import pytest

from hosts_table.validation import is_valid_alias, parse_address


class TestParseAddress:
    """Verify address parsing never raises."""

    def test_ipv4_text(self) -> None:
        """Dotted quads parse to IPv4Address."""
        assert parse_address("192.168.1.1") == IPv4Address("192.168.1.1")

    def test_ipv6_text(self) -> None:
        """IPv6 text parses to IPv6Address."""
        assert parse_address("fe80::1") == IPv6Address("fe80::1")

    def test_address_objects_pass_through(self) -> None:
        """Already-parsed addresses are returned unchanged."""
        ip = IPv6Address("::1")
        assert parse_address(ip) is ip

    @pytest.mark.parametrize("value", ["not-an-ip", "010.0.10.1", "256.0.0.1", "", None, 42])
    def test_invalid_values(self, value: object) -> None:
        """Anything that is not an address yields None."""
        assert parse_address(value) is None


class TestAliasValidation:
    """Verify the alias pattern."""

    @pytest.mark.parametrize(
        "alias",
        ["localhost", "the-same", "good321", "but-domain.ok", "ab", "Host.Example.COM"],
    )
    def test_valid_aliases(self, alias: str) -> None:
        """Letter first, letter or digit last, letters/digits/-/. between."""
        assert is_valid_alias(alias)

    @pytest.mark.parametrize(
        "alias",
        ["", "x", "1bad.org", "totaly$%@wrong", ".looked.ok", "this.is.bad.too.", "ends-", "under_score", "café"],
    )
    def test_invalid_aliases(self, alias: str) -> None:
        """Everything else, including single characters, is rejected."""
        assert not is_valid_alias(alias)

    def test_non_strings_are_invalid(self) -> None:
        """Non-string values are never aliases."""
        assert not is_valid_alias(None)
