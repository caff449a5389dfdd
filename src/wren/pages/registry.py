"""PageEntry and the immutable PageRegistry."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PageEntry:
    """Metadata for a page rendered into the shared layout.

    Attributes:
        title: Document and heading title.
        subtitle: Short line shown under the heading.
        content_file: HTML fragment injected into the layout, relative
            to the app's base directory.
        stylesheets: Extra ``<link>`` tags for the page head.
        scripts: Extra ``<script>`` tags for the end of the body.
    """

    title: str
    subtitle: str
    content_file: str
    stylesheets: str = ""
    scripts: str = ""


def normalize_page_path(path: str) -> str:
    """Canonical registry key: leading slash, no trailing slash (except ``/``)."""
    if not path.startswith("/"):
        msg = f"Page path must start with '/', got {path!r}"
        raise ConfigurationError(msg)
    stripped = path.rstrip("/")
    return stripped or "/"


class PageRegistry(Mapping[str, PageEntry]):
    """Immutable mapping from URL path to ``PageEntry``.

    Duplicate paths are rejected at construction rather than silently
    overwritten::

        PageRegistry([("/", home), ("/", other)])  # ConfigurationError
    """

    __slots__ = ("_pages",)

    def __init__(self, pages: Iterable[tuple[str, PageEntry]] = ()) -> None:
        table: dict[str, PageEntry] = {}
        for path, entry in pages:
            key = normalize_page_path(path)
            if key in table:
                msg = f"Duplicate page path {key!r}"
                raise ConfigurationError(msg)
            table[key] = entry
        self._pages = MappingProxyType(table)

    def __getitem__(self, path: str) -> PageEntry:
        return self._pages[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"PageRegistry({list(self._pages)!r})"

    def lookup(self, path: str) -> PageEntry | None:
        """Return the entry for a request path, tolerating a trailing slash."""
        stripped = path.rstrip("/") or "/"
        return self._pages.get(stripped)


_UI_LIBRARY_CSS = '<link rel="stylesheet" href="/css/ui-library.css" />'
_FORMS_CSS = '<link rel="stylesheet" href="/css/components/forms.css" />'
_CARDS_CSS = '<link rel="stylesheet" href="/css/components/cards.css" />'


def _module_script(src: str) -> str:
    return f'<script type="module" src="{src}"></script>'


DEFAULT_PAGES = PageRegistry(
    [
        (
            "/",
            PageEntry(
                title="Home",
                subtitle="A learning-first web application",
                content_file="views/pages/home.html",
            ),
        ),
        (
            "/api-demo",
            PageEntry(
                title="API Demo",
                subtitle="Test the server health check endpoint:",
                content_file="views/pages/api-demo.html",
                stylesheets='<link rel="stylesheet" href="/css/api-demo.css" />',
                scripts=_module_script("/js/api-demo.js"),
            ),
        ),
        (
            "/ui-library",
            PageEntry(
                title="UI Library",
                subtitle="A collection of reusable UI components for testing and reference",
                content_file="views/pages/ui-library.html",
                stylesheets=_UI_LIBRARY_CSS + _FORMS_CSS + _CARDS_CSS,
                scripts=_module_script("/js/ui-library.js"),
            ),
        ),
        (
            "/ui-library/buttons",
            PageEntry(
                title="Buttons",
                subtitle="Various button styles and states",
                content_file="views/pages/ui-library/buttons.html",
                stylesheets=_UI_LIBRARY_CSS,
                scripts=_module_script("/js/ui-library/buttons.js"),
            ),
        ),
        (
            "/ui-library/forms",
            PageEntry(
                title="Form Elements",
                subtitle="Input fields and form controls",
                content_file="views/pages/ui-library/forms.html",
                stylesheets=_UI_LIBRARY_CSS + _FORMS_CSS,
                scripts=_module_script("/js/ui-library/forms.js"),
            ),
        ),
        (
            "/ui-library/cards",
            PageEntry(
                title="Cards",
                subtitle="Content containers with borders and shadows",
                content_file="views/pages/ui-library/cards.html",
                stylesheets=_UI_LIBRARY_CSS + _CARDS_CSS,
                scripts=_module_script("/js/ui-library/cards.js"),
            ),
        ),
        (
            "/style-showcase",
            PageEntry(
                title="Style Showcase",
                subtitle="A visual guide to the theme colors, spacing scale, and design system",
                content_file="views/pages/style-showcase.html",
                stylesheets='<link rel="stylesheet" href="/css/style-showcase.css" />',
            ),
        ),
    ]
)
