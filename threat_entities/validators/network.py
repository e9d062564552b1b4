"""Network indicators: IP, CIDR, FQDN, URL, email, MAC address and port.

We keep canonicalization conservative but consistent: lower-case where the
format is case-insensitive, and otherwise preserve the input.
"""

from __future__ import annotations

import ipaddress
import re
from email import errors as email_errors
from email.headerregistry import HeaderRegistry
from urllib.parse import urlsplit

from ..errors import FormatError, RangeRejection
from ..fingerprint import fingerprint

# RFC 1918 and RFC 4193 ranges. Wider "special purpose" ranges (documentation,
# benchmarking, ...) are accepted.
_PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(n) for n in ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16", "fc00::/7")
)

_FQDN_RE = re.compile(r"[a-z0-9]+(?:(?:-{1,2}|\.)[a-z0-9]+)*\.[a-z]{2,20}")

_MAC_RE = re.compile(r"[0-9A-F]{2}([:-])[0-9A-F]{2}(?:\1[0-9A-F]{2}){4}")

_PORT_RE = re.compile(
    r"(6553[0-5]|655[0-2][0-9]|65[0-4][0-9]{2}|6[0-4][0-9]{3}|[1-5][0-9]{4}|[1-9][0-9]{0,3})"
    r"/(tcp|udp)"
)

_HEADERS = HeaderRegistry()


def _parse_ip(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    text = value.lower()
    # Zone identifiers (fe80::1%eth0) are not accepted.
    if "%" in text:
        raise FormatError(f"invalid IP: {value}")
    try:
        addr = ipaddress.ip_address(text)
    except ValueError:
        raise FormatError(f"invalid IP: {value}") from None

    # ::ffff:a.b.c.d is the IPv4 address a.b.c.d
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        return addr.ipv4_mapped
    return addr


def _check_public(addr: ipaddress.IPv4Address | ipaddress.IPv6Address, value: str) -> None:
    if any(addr in net for net in _PRIVATE_NETWORKS):
        raise RangeRejection(f"cannot accept private IP: {value}")
    if addr.is_loopback:
        raise RangeRejection(f"cannot accept loopback IP: {value}")
    if addr.is_multicast:
        raise RangeRejection(f"cannot accept multicast IP: {value}")
    if addr.is_link_local:
        raise RangeRejection(f"cannot accept link local unicast IP: {value}")
    if addr.is_unspecified:
        raise RangeRejection(f"cannot accept unspecified IP: {value}")


def validate_ip(value: str) -> tuple[str, str]:
    addr = _parse_ip(value)
    _check_public(addr, value)
    a = str(addr)
    return a, fingerprint(a)


def validate_cidr(value: str) -> tuple[str, str]:
    address, sep, prefix = value.lower().partition("/")
    if not sep or not prefix.isascii() or not prefix.isdigit():
        raise FormatError(f"invalid CIDR address: {value}")

    addr = _parse_ip(address)
    try:
        network = ipaddress.ip_interface(f"{address.lower()}/{prefix}").network
    except ValueError:
        raise FormatError(f"invalid CIDR address: {value}") from None
    _check_public(addr, value)

    c = str(network)
    return c, fingerprint(c)


def validate_fqdn(value: str) -> tuple[str, str]:
    v = value.lower()
    if not _FQDN_RE.fullmatch(v):
        raise FormatError(f"invalid FQDN: {value}")
    return v, fingerprint(v)


def validate_email(value: str) -> tuple[str, str]:
    text = value.lower()
    if any(ord(ch) < 0x20 or ch == "\x7f" for ch in text):
        raise FormatError(f"invalid email address: {value!r}")

    try:
        header = _HEADERS("to", text)
    except (email_errors.HeaderParseError, ValueError, IndexError):
        raise FormatError(f"invalid email address: {value}") from None

    if header.defects or len(header.addresses) != 1:
        raise FormatError(f"invalid email address: {value}")
    address = header.addresses[0]
    if not address.username or not address.domain:
        raise FormatError(f"invalid email address: {value}")

    a = address.addr_spec
    return a, fingerprint(a)


def _lower_host(authority: str) -> str:
    # Userinfo keeps its case, host (and port) are lower-cased.
    userinfo, at, hostport = authority.rpartition("@")
    return f"{userinfo}{at}{hostport.lower()}"


def validate_url(value: str) -> tuple[str, str]:
    """Validate an absolute request URI.

    Accepted: `scheme://authority/...`, `scheme:/...`, an opaque `scheme:rest`
    (mailto:, urn:) or an absolute path.
    Scheme and host are lower-cased; path, query and fragment are kept as-is.
    """
    if not value or any(ch.isspace() or ord(ch) < 0x20 or ch == "\x7f" for ch in value):
        raise FormatError(f"invalid URL: {value!r}")

    try:
        parts = urlsplit(value)
        parts.port  # noqa: B018 - raises ValueError on a malformed port
    except ValueError as e:
        raise FormatError(f"invalid URL: {value}: {e}") from None

    scheme = parts.scheme
    rest = value[len(scheme) + 1 :] if scheme else value
    if not scheme:
        if not rest.startswith("/"):
            raise FormatError(f"invalid URL: {value}: not an absolute request URI")
        return value, fingerprint(value)

    if rest.startswith("//"):
        authority_end = len(rest)
        for delim in "/?#":
            idx = rest.find(delim, 2)
            if idx != -1:
                authority_end = min(authority_end, idx)
        rest = "//" + _lower_host(rest[2:authority_end]) + rest[authority_end:]

    u = f"{scheme.lower()}:{rest}"
    return u, fingerprint(u)


def validate_mac(value: str) -> tuple[str, str]:
    v = value.upper()
    if not _MAC_RE.fullmatch(v):
        raise FormatError(f"invalid MAC address: {value}")
    m = v.replace(":", "-")
    return m, fingerprint(m)


def validate_port(value: str) -> tuple[str, str]:
    v = value.lower()
    if not _PORT_RE.fullmatch(v):
        raise FormatError(f"invalid port: {value}")
    return v, fingerprint(v)
