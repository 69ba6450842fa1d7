# tests/test_resolver_unit.py
import ipaddress
import socket

import pytest

from tcping import resolver
from tcping.errors import NoAddressForFamilyError, ResolutionError

V4A = ipaddress.ip_address("192.0.2.10")
V4B = ipaddress.ip_address("198.51.100.7")
V6A = ipaddress.ip_address("2001:db8::1")
V6B = ipaddress.ip_address("2001:db8::2")


def fake_getaddrinfo(addrs):
    def _getaddrinfo(host, port, *args, **kwargs):
        out = []
        for a in addrs:
            ip = ipaddress.ip_address(a)
            if ip.version == 6:
                out.append((socket.AF_INET6, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", (a, 0, 0, 0)))
            else:
                out.append((socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", (a, 0)))
        return out
    return _getaddrinfo


def failing_getaddrinfo(*args, **kwargs):
    raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


def test_auto_prefers_ipv4_and_never_mixes():
    mixed = [V6A, V4A, V6B, V4B]
    assert resolver.filter_addresses(mixed, "auto") == [V4A, V4B]
    assert resolver.filter_addresses([V6A, V6B], "auto") == [V6A, V6B]


def test_explicit_family_filters():
    mixed = [V6A, V4A, V6B, V4B]
    assert resolver.filter_addresses(mixed, "ipv4") == [V4A, V4B]
    assert resolver.filter_addresses(mixed, "ipv6") == [V6A, V6B]
    assert resolver.filter_addresses([V4A], "ipv6") == []


def test_lookup_dedupes_in_order(monkeypatch):
    monkeypatch.setattr(resolver.socket, "getaddrinfo",
                        fake_getaddrinfo(["192.0.2.10", "192.0.2.10", "2001:db8::1"]))
    assert resolver.lookup("example.test") == [V4A, V6A]


def test_select_target_uses_first_filtered_address(monkeypatch):
    monkeypatch.setattr(resolver.socket, "getaddrinfo",
                        fake_getaddrinfo(["2001:db8::1", "198.51.100.7", "192.0.2.10"]))
    target = resolver.select_target("example.test", 443)
    assert target.ip == V4B
    assert target.port == 443
    assert target.display == "example.test:443"


def test_literal_fallback_when_lookup_fails(monkeypatch):
    monkeypatch.setattr(resolver.socket, "getaddrinfo", failing_getaddrinfo)
    assert resolver.resolve_host("192.0.2.10") == [V4A]
    assert resolver.resolve_host("[2001:db8::1]") == [V6A]


def test_unresolvable_host(monkeypatch):
    monkeypatch.setattr(resolver.socket, "getaddrinfo", failing_getaddrinfo)
    with pytest.raises(ResolutionError):
        resolver.resolve_host("no-such-host.invalid")


def test_empty_lookup_is_unresolvable(monkeypatch):
    monkeypatch.setattr(resolver.socket, "getaddrinfo", fake_getaddrinfo([]))
    with pytest.raises(ResolutionError):
        resolver.resolve_host("empty.test")


def test_ipv6_literal_with_ipv4_only():
    """A literal IPv6 address cannot satisfy an IPv4-only request."""
    with pytest.raises(NoAddressForFamilyError) as exc:
        resolver.select_target("::1", 80, "ipv4")
    assert "IPv4" in str(exc.value)


def test_ipv6_target_display_is_bracketed(monkeypatch):
    monkeypatch.setattr(resolver.socket, "getaddrinfo", fake_getaddrinfo(["2001:db8::1"]))
    target = resolver.select_target("v6only.test", 8080)
    assert target.family_label == "IPv6"
    assert target.display == "[2001:db8::1]:8080"
