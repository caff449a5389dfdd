"""Server launcher.

Starts a pounce ASGI server with the live wren App object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server for *app*.

    Pounce's ``run()`` takes an import string, but wren has a live
    ``App`` object, so ``pounce.Server`` is used directly with the
    ASGI callable.

    Args:
        app: ASGI callable (wren App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on source changes (development only).
        app_path: Optional ``"module:attribute"`` import string used by
            pounce to reimport the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=(".html", ".css", ".js"),
    )
    server = Server(config, app, app_path=app_path)
    server.run()
