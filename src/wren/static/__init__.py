"""Static assets — path-safe resolution, content types and caching policy."""

from wren.static.cache import cache_control, page_cache_control
from wren.static.content_types import content_type_for
from wren.static.resolver import SearchPath, StaticFile, resolve, search_paths_for

__all__ = [
    "SearchPath",
    "StaticFile",
    "cache_control",
    "content_type_for",
    "page_cache_control",
    "resolve",
    "search_paths_for",
]
