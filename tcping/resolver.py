# tcping/resolver.py
import ipaddress
import logging
import socket
from typing import List, Optional

from tcping.errors import NoAddressForFamilyError, ResolutionError
from tcping.schemas import IPAddress, ResolvedTarget

log = logging.getLogger(__name__)


def lookup(host: str) -> List[IPAddress]:
    """
    Name lookup through the system resolver (DNS, hosts file, ...).
    Returns addresses in resolver order with duplicates removed.
    Raises socket.gaierror / OSError when the lookup itself fails.
    """
    infos = socket.getaddrinfo(host, None, type=socket.SOCK_STREAM, proto=socket.IPPROTO_TCP)
    addrs: List[IPAddress] = []
    for family, _type, _proto, _canon, sockaddr in infos:
        if family not in (socket.AF_INET, socket.AF_INET6):
            continue
        ip = ipaddress.ip_address(sockaddr[0])
        if ip not in addrs:
            addrs.append(ip)
    return addrs


def parse_literal(host: str) -> Optional[IPAddress]:
    text = host.strip()
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def filter_addresses(addrs: List[IPAddress], family: str = "auto") -> List[IPAddress]:
    """
    ipv4 / ipv6: keep only that family.
    auto: every IPv4 address if there is at least one, otherwise every IPv6 address.
    The two families are never mixed in the result.
    """
    v4 = [ip for ip in addrs if ip.version == 4]
    v6 = [ip for ip in addrs if ip.version == 6]
    if family == "ipv4":
        return v4
    if family == "ipv6":
        return v6
    if v4:
        if v6:
            log.debug("found both IPv4 and IPv6 addresses, preferring IPv4")
        return v4
    return v6


def resolve_host(host: str, family: str = "auto") -> List[IPAddress]:
    log.debug("resolving host %s (family=%s)", host, family)

    addrs: List[IPAddress] = []
    try:
        addrs = lookup(host)
        log.debug("lookup returned %d address(es) for %s", len(addrs), host)
    except (OSError, UnicodeError) as e:
        log.debug("lookup failed for %s: %s; trying it as a literal address", host, e)

    if not addrs:
        literal = parse_literal(host)
        if literal is None:
            raise ResolutionError(host)
        addrs = [literal]

    filtered = filter_addresses(addrs, family)
    if not filtered:
        raise NoAddressForFamilyError(host, family)

    if len(filtered) > 1:
        log.debug("several addresses found, using the first: %s (others: %s)",
                  filtered[0], ", ".join(str(ip) for ip in filtered[1:]))
    return filtered


def select_target(host: str, port: int, family: str = "auto") -> ResolvedTarget:
    # first filtered address only; no fallback to the others if it turns out to be dead
    ip = resolve_host(host, family)[0]
    return ResolvedTarget(host=host, ip=ip, port=port)
