"""Immutable URI value model."""

from typing import Optional
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import URISyntaxError
from ..types import URIComponentsDict


def _decode(raw: Optional[str]) -> Optional[str]:
    return None if raw is None else unquote(raw)


def render_uri(
    scheme: Optional[str],
    raw_user_info: Optional[str],
    host: Optional[str],
    port: Optional[int],
    raw_path: str,
    raw_query: Optional[str] = None,
    raw_fragment: Optional[str] = None,
) -> str:
    """
    Assemble a URI string from already-escaped components.

    Components are spliced in verbatim, so escaping is preserved exactly.
    A query or fragment of ``None`` is omitted; an empty string still emits
    its delimiter.

    Raises:
        URISyntaxError: If the path is relative while an authority is present
    """
    parts = []
    if scheme is not None:
        parts.append(f"{scheme}:")

    if host is not None:
        if raw_path and not raw_path.startswith("/"):
            raise URISyntaxError(raw_path, "Relative path in absolute URI")
        parts.append("//")
        if raw_user_info is not None:
            parts.append(f"{raw_user_info}@")
        # IPv6 literals are stored without brackets
        parts.append(f"[{host}]" if ":" in host else host)
        if port is not None:
            parts.append(f":{port}")

    parts.append(raw_path)
    if raw_query is not None:
        parts.append(f"?{raw_query}")
    if raw_fragment is not None:
        parts.append(f"#{raw_fragment}")
    return "".join(parts)


class ConnectionURI(BaseModel):
    """
    A parsed network address.

    Raw (still percent-escaped) components are stored; decoded views are
    exposed as properties. Absent query and fragment are ``None``, which is
    distinct from present-but-empty (``""``).
    """

    model_config = ConfigDict(frozen=True)

    scheme: Optional[str] = Field(None, description="Scheme, case preserved")
    raw_user_info: Optional[str] = Field(None, description="Escaped user info")
    host: Optional[str] = Field(None, description="Host name or IP literal (no brackets)")
    port: Optional[int] = Field(None, description="Port number, None when absent")
    raw_path: str = Field("", description="Escaped path, empty when absent")
    raw_query: Optional[str] = Field(None, description="Escaped query")
    raw_fragment: Optional[str] = Field(None, description="Escaped fragment")

    @classmethod
    def from_string(cls, text: str) -> "ConnectionURI":
        """
        Parse a URI reference.

        Raises:
            URISyntaxError: If text is not a valid URI reference
        """
        from ..uri_syntax import parse_uri_reference

        result = parse_uri_reference(text)
        if result.uri is None:
            raise result.error
        return result.uri

    @property
    def user_info(self) -> Optional[str]:
        return _decode(self.raw_user_info)

    @property
    def path(self) -> str:
        return unquote(self.raw_path)

    @property
    def query(self) -> Optional[str]:
        return _decode(self.raw_query)

    @property
    def fragment(self) -> Optional[str]:
        return _decode(self.raw_fragment)

    def components(self) -> URIComponentsDict:
        """Return the components as a plain dict."""
        return URIComponentsDict(
            uri=str(self),
            scheme=self.scheme,
            user_info=self.user_info,
            host=self.host,
            port=self.port,
            path=self.path,
            query=self.query,
            raw_query=self.raw_query,
            fragment=self.fragment,
            raw_fragment=self.raw_fragment,
        )

    def __str__(self) -> str:
        return render_uri(
            self.scheme,
            self.raw_user_info,
            self.host,
            self.port,
            self.raw_path,
            self.raw_query,
            self.raw_fragment,
        )
