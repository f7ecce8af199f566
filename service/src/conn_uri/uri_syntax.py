"""Strict URI reference parsing.

``urllib.parse.urlsplit`` does the structural split but is deliberately
lenient: it accepts illegal characters, lowercases the scheme and cannot tell
an empty query from a missing one. This module layers RFC 3986 validation on
top of it and reports the outcome as a ``URIParseResult`` instead of raising,
so callers can try several strategies in sequence.
"""

import ipaddress
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlsplit

from .exceptions import URISyntaxError
from .models.uri import ConnectionURI

logger = logging.getLogger(__name__)

# Never legal anywhere in a URI (in addition to whitespace and controls)
_ILLEGAL_CHARS = frozenset('"<>\\^`{|}')
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DIGITS = frozenset("0123456789")
_HOST_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-."
)
_HOST_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_MAX_PORT = 65535


@dataclass(frozen=True)
class URIParseResult:
    """Outcome of a parse attempt: exactly one of ``uri`` and ``error`` is set."""

    uri: Optional[ConnectionURI] = None
    error: Optional[URISyntaxError] = None

    @property
    def ok(self) -> bool:
        return self.uri is not None


def _find_any(value: str, chars: str) -> int:
    """Index of the first character of value found in chars, or -1."""
    for i, c in enumerate(value):
        if c in chars:
            return i
    return -1


def _check_characters(text: str) -> None:
    for i, c in enumerate(text):
        if c in _ILLEGAL_CHARS or c.isspace() or not c.isprintable():
            raise URISyntaxError(text, "Illegal character", i)
        if c == "%":
            pair = text[i + 1:i + 3]
            if len(pair) != 2 or not set(pair) <= _HEX_DIGITS:
                raise URISyntaxError(text, "Malformed escape pair", i)


def _parse_port(text: str, port_text: str, offset: int) -> Optional[int]:
    # "host:" is allowed and means no port
    if not port_text:
        return None
    for i, c in enumerate(port_text):
        if c not in _DIGITS:
            raise URISyntaxError(text, "Illegal character in port number", offset + i)
    port = int(port_text)
    if port > _MAX_PORT:
        raise URISyntaxError(text, "Port number out of range", offset)
    return port


def _parse_hostname(text: str, host: str, offset: int) -> str:
    if not host:
        raise URISyntaxError(text, "Expected hostname", offset)
    for i, c in enumerate(host):
        if c not in _HOST_CHARS:
            raise URISyntaxError(text, "Illegal character in hostname", offset + i)
    labels = host[:-1] if host.endswith(".") else host
    if not all(_HOST_LABEL.fullmatch(label) for label in labels.split(".")):
        raise URISyntaxError(text, "Malformed hostname", offset)
    return host


def _parse_authority(
    text: str, netloc: str, offset: int
) -> Tuple[Optional[str], str, Optional[int]]:
    """Split an authority into (raw user info, host, port)."""
    user_info = None
    host_port = netloc
    host_offset = offset
    if "@" in netloc:
        user_info, _, host_port = netloc.rpartition("@")
        bad = _find_any(user_info, "@[]")
        if bad >= 0:
            raise URISyntaxError(text, "Illegal character in user info", offset + bad)
        host_offset = offset + len(user_info) + 1

    if host_port.startswith("["):
        end = host_port.find("]")
        if end < 0:
            raise URISyntaxError(text, "Expected closing bracket for IPv6 address", host_offset)
        host = host_port[1:end]
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            raise URISyntaxError(text, "Malformed IPv6 address", host_offset + 1) from None
        rest = host_port[end + 1:]
        if rest and not rest.startswith(":"):
            raise URISyntaxError(text, "Illegal character in authority", host_offset + end + 1)
        port = _parse_port(text, rest[1:], host_offset + end + 2)
        return user_info, host, port

    host, _, port_text = host_port.partition(":")
    host = _parse_hostname(text, host, host_offset)
    port = _parse_port(text, port_text, host_offset + len(host) + 1)
    return user_info, host, port


def _check_component(text: str, value: str, component: str, offset: int, illegal: str) -> None:
    bad = _find_any(value, illegal)
    if bad >= 0:
        raise URISyntaxError(text, f"Illegal character in {component}", offset + bad)


def _parse(text: str) -> ConnectionURI:
    _check_characters(text)
    try:
        parts = urlsplit(text)
    except ValueError as e:
        raise URISyntaxError(text, str(e)) from None

    # urlsplit lowercases the scheme; keep it as written
    scheme = text[:len(parts.scheme)] if parts.scheme else None
    scheme_end = len(scheme) + 1 if scheme else 0

    user_info = host = port = None
    has_authority = text.startswith("//", scheme_end)
    path_offset = scheme_end
    if has_authority:
        authority_offset = scheme_end + 2
        if parts.netloc:
            user_info, host, port = _parse_authority(text, parts.netloc, authority_offset)
        elif not parts.path:
            raise URISyntaxError(text, "Expected authority", authority_offset)
        path_offset = authority_offset + len(parts.netloc)

    _check_component(text, parts.path, "path", path_offset, "[]")

    # An empty query ("?") and an empty fragment ("#") are present, not absent
    fragment_start = text.find("#")
    before_fragment = text if fragment_start < 0 else text[:fragment_start]
    raw_query = None
    if "?" in before_fragment:
        raw_query = parts.query
        query_offset = path_offset + len(parts.path) + 1
        _check_component(text, raw_query, "query", query_offset, "[]")

    raw_fragment = None
    if fragment_start >= 0:
        raw_fragment = parts.fragment
        _check_component(text, raw_fragment, "fragment", fragment_start + 1, "#[]")

    return ConnectionURI(
        scheme=scheme,
        raw_user_info=user_info,
        host=host,
        port=port,
        raw_path=parts.path,
        raw_query=raw_query,
        raw_fragment=raw_fragment,
    )


def parse_uri_reference(text: str) -> URIParseResult:
    """
    Parse text as a URI reference.

    Strings without an authority (``localhost``, ``localhost:9200``) are valid
    references and parse with ``host`` set to None.

    Returns:
        URIParseResult: the parsed URI, or the syntax error describing why
        text is not a URI
    """
    try:
        return URIParseResult(uri=_parse(text))
    except URISyntaxError as e:
        logger.debug(f"URI syntax error: {e}")
        return URIParseResult(error=e)
