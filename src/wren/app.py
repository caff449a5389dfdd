"""The wren App — an ASGI 3 callable wiring config, pages and API together.

Everything is assembled once in ``__init__``; after that the app holds
only immutable state, so concurrent requests need no coordination::

    from wren import App, AppConfig

    app = App(AppConfig.from_env(), base_dir="site")
    app.run()
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from wren._internal.asgi import Receive, Scope, Send
from wren.api.dispatch import ApiDispatcher, ApiRoute
from wren.api.handlers import DEFAULT_ROUTES
from wren.config import AppConfig
from wren.pages.registry import DEFAULT_PAGES, PageEntry, PageRegistry
from wren.router import SiteRouter
from wren.server.handler import handle_request

logger = logging.getLogger("wren.server")


class App:
    """The wren application.

    Args:
        config: Application configuration. Defaults to ``AppConfig()``.
        pages: Page registry, or ``(path, PageEntry)`` pairs to build one.
        routes: API routes for the dispatcher.
        base_dir: Directory that content paths (frontend, dist, layout,
            page fragments) are relative to.
    """

    __slots__ = ("api", "base_dir", "config", "pages", "router")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        pages: PageRegistry | Iterable[tuple[str, PageEntry]] = DEFAULT_PAGES,
        routes: Iterable[ApiRoute] = DEFAULT_ROUTES,
        base_dir: str | Path = ".",
    ) -> None:
        self.base_dir = Path(base_dir).resolve()
        self.config = (config or AppConfig()).with_base_dir(self.base_dir)
        self.pages = pages if isinstance(pages, PageRegistry) else PageRegistry(pages)
        self.api = ApiDispatcher(routes)
        self.router = SiteRouter(self.config, self.pages, self.api, base_dir=self.base_dir)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            router=self.router,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        There is nothing to open or close; startup only reports what the
        app will serve.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                logger.info(
                    "Serving %d pages and %d API routes (cache strategy: %s)",
                    len(self.pages),
                    len(self.api.routes),
                    self.config.cache_strategy,
                )
                logger.debug("Frontend root: %s", self.config.frontend_dir)
                logger.debug("Dist root: %s", self.config.dist_dir)
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        reload: bool = False,
    ) -> None:
        """Start a pounce server for this app."""
        from wren.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=reload,
        )
