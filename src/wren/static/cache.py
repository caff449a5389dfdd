"""Cache-Control policy by file extension and cache strategy.

=============  ============  ===========================
extension      dev           prod
=============  ============  ===========================
``.html``      no-store      no-cache, must-revalidate
``.js/.css``   no-store      public, max-age=300
other          public, max-age=300 (both modes)
=============  ============  ===========================
"""

from wren.config import CacheStrategy

NO_STORE = "no-store"
REVALIDATE = "no-cache, must-revalidate"
SHORT_LIVED = "public, max-age=300"

# Edited by hand during development; never cached in dev mode.
_SOURCE_EXTENSIONS = frozenset({".html", ".js", ".css"})


def cache_control(extension: str, strategy: CacheStrategy) -> str:
    """Return the ``Cache-Control`` value for a file with *extension*."""
    ext = extension.lower()
    if strategy == CacheStrategy.DEV:
        return NO_STORE if ext in _SOURCE_EXTENSIONS else SHORT_LIVED
    if ext == ".html":
        return REVALIDATE
    return SHORT_LIVED


def page_cache_control(strategy: CacheStrategy) -> str:
    """``Cache-Control`` for layout-rendered pages."""
    return cache_control(".html", strategy)
