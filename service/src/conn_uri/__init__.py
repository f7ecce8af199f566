"""Normalize user-supplied connection strings into complete http(s) URIs."""

from .exceptions import (
    ConnURIError,
    InvalidArgumentError,
    InvalidConnectionStringError,
    URISyntaxError,
)
from .models.uri import ConnectionURI
from .uri_syntax import URIParseResult, parse_uri_reference
from .utils.uri_utils import append_segment_to_path, parse_uri, remove_query

__all__ = [
    "ConnectionURI",
    "ConnURIError",
    "InvalidArgumentError",
    "InvalidConnectionStringError",
    "URISyntaxError",
    "URIParseResult",
    "parse_uri_reference",
    "parse_uri",
    "remove_query",
    "append_segment_to_path",
]
