"""Tests for wren.pages — registry and layout assembly."""

import pytest

from wren.errors import ConfigurationError
from wren.pages import DEFAULT_PAGES, LAYOUT_SLOTS, PageEntry, PageRegistry, render_page
from wren.pages.registry import normalize_page_path

HOME = PageEntry(title="Home", subtitle="Welcome", content_file="views/pages/home.html")


class TestNormalizePagePath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/", "/"), ("/about", "/about"), ("/about/", "/about"), ("//", "/")],
    )
    def test_normalizes(self, path, expected) -> None:
        assert normalize_page_path(path) == expected

    def test_requires_leading_slash(self) -> None:
        with pytest.raises(ConfigurationError):
            normalize_page_path("about")


class TestPageRegistry:
    def test_mapping_interface(self) -> None:
        registry = PageRegistry([("/", HOME)])

        assert len(registry) == 1
        assert list(registry) == ["/"]
        assert registry["/"] is HOME

    def test_duplicate_path_rejected(self) -> None:
        other = PageEntry(title="Other", subtitle="", content_file="x.html")
        with pytest.raises(ConfigurationError, match="Duplicate page path '/about'"):
            PageRegistry([("/about", HOME), ("/about/", other)])

    def test_lookup(self) -> None:
        registry = PageRegistry([("/", HOME), ("/about", HOME)])

        assert registry.lookup("/") is HOME
        assert registry.lookup("/about") is HOME
        assert registry.lookup("/about/") is HOME
        assert registry.lookup("/missing") is None

    def test_immutable(self) -> None:
        registry = PageRegistry([("/", HOME)])
        with pytest.raises(TypeError):
            registry["/new"] = HOME  # type: ignore[index]

    def test_entry_frozen(self) -> None:
        with pytest.raises(AttributeError):
            HOME.title = "changed"  # type: ignore[misc]


class TestDefaultPages:
    def test_demo_pages(self) -> None:
        assert set(DEFAULT_PAGES) == {
            "/",
            "/api-demo",
            "/ui-library",
            "/ui-library/buttons",
            "/ui-library/forms",
            "/ui-library/cards",
            "/style-showcase",
        }

    def test_content_files_are_fragments(self) -> None:
        for entry in DEFAULT_PAGES.values():
            assert entry.content_file.startswith("views/pages/")
            assert entry.content_file.endswith(".html")


class TestRenderPage:
    async def test_fills_layout(self, site_dir) -> None:
        entry = PageEntry(
            title="About",
            subtitle="Who we are",
            content_file="views/pages/about.html",
            stylesheets="<link>",
            scripts="<script></script>",
        )

        html = await render_page(
            entry,
            layout_file=site_dir / "views" / "layout.html",
            base_dir=site_dir,
        )

        assert "<title>About</title>" in html
        assert "<h1>About</h1>" in html
        assert "<p>Who we are</p>" in html
        assert "<section>about body</section>" in html
        assert "<link>" in html
        assert "<script></script>" in html
        for slot in LAYOUT_SLOTS:
            assert "{{" + slot + "}}" not in html

    async def test_empty_subtitle(self, site_dir) -> None:
        entry = PageEntry(title="T", subtitle="", content_file="views/pages/home.html")

        html = await render_page(
            entry,
            layout_file=site_dir / "views" / "layout.html",
            base_dir=site_dir,
        )

        assert "<p></p>" in html

    async def test_missing_fragment_raises(self, site_dir) -> None:
        entry = PageEntry(title="T", subtitle="", content_file="views/pages/nope.html")

        with pytest.raises(FileNotFoundError):
            await render_page(
                entry,
                layout_file=site_dir / "views" / "layout.html",
                base_dir=site_dir,
            )

    async def test_missing_layout_raises(self, site_dir) -> None:
        with pytest.raises(FileNotFoundError):
            await render_page(
                HOME,
                layout_file=site_dir / "views" / "missing.html",
                base_dir=site_dir,
            )
