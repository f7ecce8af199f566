"""Data models for conn-uri."""

from .uri import ConnectionURI, render_uri

__all__ = [
    "ConnectionURI",
    "render_uri",
]
