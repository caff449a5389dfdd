"""Assemble a registered page from the shared layout and its fragment."""

from pathlib import Path

import anyio

from wren.pages.registry import PageEntry
from wren.templating import render

# Placeholders the layout document is expected to carry.
LAYOUT_SLOTS = ("TITLE", "SUBTITLE", "CONTENT", "STYLESHEETS", "SCRIPTS")


async def render_page(
    entry: PageEntry,
    *,
    layout_file: str | Path,
    base_dir: str | Path,
) -> str:
    """Render *entry* into the layout and return the full HTML document.

    The layout and the content fragment are two independent reads. A
    missing file raises ``FileNotFoundError``; the router answers 404.
    """
    layout = await anyio.Path(layout_file).read_text(encoding="utf-8")
    content = await anyio.Path(Path(base_dir) / entry.content_file).read_text(encoding="utf-8")

    return render(
        layout,
        {
            "TITLE": entry.title,
            "SUBTITLE": entry.subtitle,
            "CONTENT": content,
            "STYLESHEETS": entry.stylesheets,
            "SCRIPTS": entry.scripts,
        },
    )
