"""Network helpers: private address checks, client address lookup behind
reverse proxies, and IPv4 address/integer conversion."""

from __future__ import annotations

import ipaddress
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_MAX_IPV4 = 0xFFFFFFFF

_LOOPBACK_V4 = ipaddress.IPv4Network("127.0.0.0/8")
_LOCAL_V4 = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("169.254.0.0/16"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)


@dataclass
class Request:
    """The parts of an HTTP request used to find the client address.

    Header names are matched without regard to case.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    remote_addr: str = ""


def _header(request: Request, name: str) -> str:
    wanted = name.lower()
    for key, value in request.headers.items():
        if key.lower() == wanted:
            return value
    return ""


def _parse_ip(ip: IPAddress | str | None) -> IPAddress | None:
    """Turn ``ip`` into an address object, or None if it is not an address."""
    if ip is None:
        return None
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip
    if isinstance(ip, str):
        if "%" in ip:
            return None
        try:
            return ipaddress.ip_address(ip)
        except ValueError:
            return None
    raise TypeError(f"expected an IP address or string, got {type(ip).__name__}")


def _to4(addr: IPAddress | None) -> ipaddress.IPv4Address | None:
    """Return the IPv4 form of ``addr``, including IPv4-mapped IPv6."""
    if isinstance(addr, ipaddress.IPv4Address):
        return addr
    if isinstance(addr, ipaddress.IPv6Address):
        return addr.ipv4_mapped
    return None


def _split_host(hostport: str) -> str | None:
    """Return the host part of ``host:port``, or None if it is malformed."""
    i = hostport.rfind(":")
    if i < 0:
        return None
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0 or end + 1 != i:
            return None
        host = hostport[1:end]
        bracket_from, close_from = 1, end + 1
    else:
        host = hostport[:i]
        if ":" in host:
            return None
        bracket_from, close_from = 0, 0
    if "[" in hostport[bracket_from:] or "]" in hostport[close_from:]:
        return None
    return host


def has_local_ip(ip: IPAddress | str | None) -> bool:
    """Tell whether ``ip`` is a loopback, link-local or private address."""
    addr = _parse_ip(ip)
    if addr is None:
        return False
    v4 = _to4(addr)
    if v4 is None:
        return addr.is_loopback
    if v4 in _LOOPBACK_V4:
        return True
    return any(v4 in net for net in _LOCAL_V4)


def has_local_ip_addr(ip: str) -> bool:
    """Tell whether the address string ``ip`` is a local address."""
    return has_local_ip(_parse_ip(ip))


def remote_ip(request: Request) -> str:
    """Return the host part of the request's remote address, or ""."""
    host = _split_host(request.remote_addr.strip())
    return host if host is not None else ""


def client_ip(request: Request) -> str:
    """Best-effort client address, honouring X-Forwarded-For and X-Real-Ip."""
    ip = _header(request, "X-Forwarded-For").split(",")[0].strip()
    if ip:
        return ip
    ip = _header(request, "X-Real-Ip").strip()
    if ip:
        return ip
    return remote_ip(request)


def client_public_ip(request: Request) -> str:
    """Best-effort public client address; local addresses are skipped."""
    for candidate in _header(request, "X-Forwarded-For").split(","):
        ip = candidate.strip()
        if ip and not has_local_ip_addr(ip):
            return ip

    ip = _header(request, "X-Real-Ip").strip()
    if ip and not has_local_ip_addr(ip):
        return ip

    host = _split_host(request.remote_addr.strip())
    if host is not None and not has_local_ip_addr(host):
        return host
    return ""


def ip_to_long(ip: IPAddress | str | None) -> int:
    """Return the IPv4 address ``ip`` as an integer.

    Raises ValueError when ``ip`` is not an IPv4 address.
    """
    v4 = _to4(_parse_ip(ip))
    if v4 is None:
        raise ValueError("invalid ipv4 format")
    return int(v4)


def ip_string_to_long(ip: str) -> int:
    """Return the IPv4 address string ``ip`` as an integer."""
    return ip_to_long(ip)


def long_to_ip(i: int) -> ipaddress.IPv4Address:
    """Return the IPv4 address for the integer ``i``.

    Raises ValueError when ``i`` does not fit in 32 unsigned bits.
    """
    if not 0 <= i <= _MAX_IPV4:
        raise ValueError("beyond the scope of ipv4")
    return ipaddress.IPv4Address(i)


def long_to_ip_string(i: int) -> str:
    """Return the dotted IPv4 string for the integer ``i``."""
    return str(long_to_ip(i))