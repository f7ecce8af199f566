"""Common type definitions for conn-uri.

TypedDict definitions for the serialized form of a URI, used by the CLI's
JSON output and by callers that want plain dicts instead of model instances.
"""

from typing import Optional, TypedDict


class URIComponentsDict(TypedDict):
    """Components of a resolved connection URI."""
    uri: str
    scheme: Optional[str]
    user_info: Optional[str]
    host: Optional[str]
    port: Optional[int]
    path: str
    query: Optional[str]
    raw_query: Optional[str]
    fragment: Optional[str]
    raw_fragment: Optional[str]
