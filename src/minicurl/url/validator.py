"""
Strict URL validation.

Generic URL parsers are lenient about malformed IP literals and ports, so
the raw string is checked first (IPv6 literal, IPv4 octets, port range) and
only then handed to ``urllib.parse`` for the scheme check. The first defect
found wins, always in the order IPv6 -> IPv4 -> port -> protocol.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from netaddr import valid_ipv6

from minicurl.errors import (
    InvalidIPv6,
    InvalidIPv4,
    InvalidPort,
    InvalidProtocol,
)

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")
MAX_PORT = 65535

_DIGITS = re.compile(r"^[0-9]+$")
_AUTHORITY_END = re.compile(r"[/?#]")


@dataclass(frozen=True)
class ValidatedUrl:
    """A URL that passed every check in validate_url()."""
    raw: str
    scheme: str
    host: str
    port: int | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    @property
    def is_ipv6(self) -> bool:
        return ":" in self.host

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class _Authority:
    """Host and port text cut out of the raw string, before any parsing."""
    host: str
    port: str | None
    bracketed: bool
    closed: bool = True


def _split_authority(raw: str) -> _Authority | None:
    """Extract the host[:port] segment following '://', if there is one."""
    if "://" not in raw:
        return None

    rest = raw.split("://", 1)[1]
    authority = _AUTHORITY_END.split(rest, 1)[0]
    # userinfo
    authority = authority.rpartition("@")[2]

    if authority.startswith("[") and "]" in authority:
        end = authority.index("]")
        after = authority[end + 1:]
        port = after[1:] if after.startswith(":") else None
        return _Authority(host=authority[1:end], port=port, bracketed=True)

    # Unterminated IPv6 literal
    if authority.startswith("["):
        return _Authority(host=authority[1:], port=None, bracketed=True, closed=False)

    host, sep, port = authority.partition(":")
    return _Authority(host=host, port=port if sep else None, bracketed=False)


def check_ipv6(authority: _Authority) -> None:
    if not authority.bracketed:
        return

    if not authority.closed or not authority.host or not valid_ipv6(authority.host):
        logger.debug("Rejected IPv6 literal %r", authority.host)
        raise InvalidIPv6()


def check_ipv4(authority: _Authority) -> None:
    if authority.bracketed:
        return

    octets = authority.host.split(".")
    if len(octets) != 4 or not all(_DIGITS.match(o) for o in octets):
        # Not dotted-decimal; treated as a hostname
        return

    if any(int(o) > 255 for o in octets):
        logger.debug("Rejected IPv4 literal %r", authority.host)
        raise InvalidIPv4()


def check_port(authority: _Authority) -> None:
    port = authority.port
    if not port:
        return

    if not _DIGITS.match(port) or int(port) > MAX_PORT:
        logger.debug("Rejected port %r", port)
        raise InvalidPort()


def pre_parse_checks(raw: str) -> None:
    """String-level checks run before the URL is parsed."""
    authority = _split_authority(raw)
    if authority is None:
        return

    check_ipv6(authority)
    check_ipv4(authority)
    check_port(authority)


def post_parse_checks(raw: str) -> ValidatedUrl:
    """Parse the URL and require an http(s) scheme with a host."""
    try:
        parts = urlsplit(raw)
        port = parts.port
    except ValueError as e:
        logger.debug("URL parser rejected %r: %s", raw, e)
        raise InvalidProtocol() from e

    scheme = parts.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        logger.debug("Rejected scheme %r", parts.scheme)
        raise InvalidProtocol()

    if not parts.hostname:
        logger.debug("No host in %r", raw)
        raise InvalidProtocol()

    return ValidatedUrl(
        raw=raw,
        scheme=scheme,
        host=parts.hostname,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )


def validate_url(raw: str) -> ValidatedUrl:
    """
    Validate a user-supplied URL.

    Args:
        raw: The URL exactly as given on the command line

    Returns:
        ValidatedUrl with an http/https scheme and a well-formed host

    Raises:
        InvalidIPv6, InvalidIPv4, InvalidPort, InvalidProtocol
    """
    pre_parse_checks(raw)
    return post_parse_checks(raw)
