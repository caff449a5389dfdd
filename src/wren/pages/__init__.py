"""Page registry — URL path to layout-rendered page metadata.

Built once at startup, read-only afterwards::

    from wren.pages import PageEntry, PageRegistry, render_page

    pages = PageRegistry([("/", PageEntry("Home", "Welcome", "views/pages/home.html"))])
    entry = pages.get("/")
    html = await render_page(entry, layout_file=..., base_dir=...)
"""

from wren.pages.registry import DEFAULT_PAGES, PageEntry, PageRegistry, normalize_page_path
from wren.pages.renderer import LAYOUT_SLOTS, render_page

__all__ = [
    "DEFAULT_PAGES",
    "LAYOUT_SLOTS",
    "PageEntry",
    "PageRegistry",
    "normalize_page_path",
    "render_page",
]
