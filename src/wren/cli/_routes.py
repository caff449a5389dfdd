"""``wren routes`` — print the page registry and API route table."""

import argparse

from wren.cli._app import build_app


def list_routes(args: argparse.Namespace) -> None:
    """Print every registered page and API route."""
    app = build_app(args)

    print("Pages:")
    for path, entry in app.pages.items():
        print(f"  GET  {path:<24} {entry.title}  ({entry.content_file})")

    print("API:")
    for route in app.api.routes:
        print(f"  {route.key}")
