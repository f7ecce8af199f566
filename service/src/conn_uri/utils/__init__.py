"""URI helpers."""

from .uri_utils import append_segment_to_path, parse_uri, remove_query

__all__ = ["parse_uri", "remove_query", "append_segment_to_path"]
