"""Shared fixtures: a throwaway site tree and an App serving it."""

import pytest

from wren.app import App
from wren.config import AppConfig, CacheStrategy
from wren.pages.registry import PageEntry, PageRegistry

LAYOUT = (
    "<html><head><title>{{TITLE}}</title>{{STYLESHEETS}}</head>"
    "<body><h1>{{TITLE}}</h1><p>{{SUBTITLE}}</p>{{CONTENT}}{{SCRIPTS}}</body></html>"
)


@pytest.fixture
def site_dir(tmp_path):
    """Create a site with a layout, two page fragments, assets and a dist root."""
    site = tmp_path / "site"

    views = site / "views"
    (views / "pages").mkdir(parents=True)
    (views / "layout.html").write_text(LAYOUT)
    (views / "pages" / "home.html").write_text("<section>home body</section>")
    (views / "pages" / "about.html").write_text("<section>about body</section>")

    frontend = site / "frontend"
    (frontend / "css").mkdir(parents=True)
    (frontend / "js").mkdir()
    (frontend / "css" / "main.css").write_text("body { color: red; }")
    (frontend / "js" / "app.js").write_text("console.log('hello');")
    (frontend / "index.html").write_text("<h1>static index</h1>")
    (frontend / "contact.html").write_text("<h1>contact</h1>")
    (frontend / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (frontend / "blob.qqq").write_bytes(b"\x00\x01\x02")
    (frontend / "docs").mkdir()
    (frontend / "docs" / "guide.html").write_text("<h1>guide</h1>")

    dist = site / "dist"
    dist.mkdir()
    (dist / "bundle.css").write_text("/* bundled */")

    # A sibling of the site that must never be reachable.
    (tmp_path / "secret.txt").write_text("top secret")

    return site


@pytest.fixture
def pages():
    return PageRegistry(
        [
            (
                "/",
                PageEntry(
                    title="Home",
                    subtitle="Welcome",
                    content_file="views/pages/home.html",
                ),
            ),
            (
                "/about",
                PageEntry(
                    title="About",
                    subtitle="",
                    content_file="views/pages/about.html",
                    stylesheets='<link rel="stylesheet" href="/css/main.css" />',
                    scripts='<script src="/js/app.js"></script>',
                ),
            ),
        ]
    )


@pytest.fixture
def make_app(site_dir, pages):
    """Factory for an App over ``site_dir`` with the given cache strategy."""

    def factory(strategy: CacheStrategy = CacheStrategy.DEV, **config) -> App:
        return App(
            AppConfig(cache_strategy=strategy, **config),
            pages=pages,
            base_dir=site_dir,
        )

    return factory
