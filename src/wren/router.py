"""SiteRouter — classifies each request and delegates it.

Priority order:

1. ``/api/*`` → ``ApiDispatcher`` (its response is authoritative)
2. registered page → layout + content fragment
3. anything else → static file resolver
4. nothing matched → ``NotFound``

The router never reads ambient state: the cache strategy and content
roots come from the ``AppConfig`` it was built with.
"""

import logging
from pathlib import Path

from wren.api.dispatch import ApiDispatcher
from wren.config import AppConfig
from wren.errors import MethodNotAllowed, NotFound
from wren.http.request import Request
from wren.http.response import Response
from wren.pages.registry import PageRegistry
from wren.pages.renderer import render_page
from wren.static.cache import cache_control, page_cache_control
from wren.static.resolver import resolve, search_paths_for

logger = logging.getLogger("wren.router")

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
READ_METHODS = frozenset({"GET", "HEAD"})


class SiteRouter:
    """Routes a ``Request`` to exactly one ``Response``.

    Raises ``HTTPError`` subclasses for 4xx outcomes; the ASGI handler
    turns those into responses. Unexpected exceptions propagate.
    """

    __slots__ = ("_api", "_base_dir", "_config", "_pages")

    def __init__(
        self,
        config: AppConfig,
        pages: PageRegistry,
        api: ApiDispatcher,
        *,
        base_dir: str | Path = ".",
    ) -> None:
        self._config = config
        self._pages = pages
        self._api = api
        self._base_dir = Path(base_dir)

    @property
    def config(self) -> AppConfig:
        return self._config

    def is_api(self, path: str) -> bool:
        prefix = self._config.api_prefix
        return path.startswith(prefix) or path == prefix.rstrip("/")

    async def route(self, request: Request) -> Response:
        """Produce the response for *request*."""
        if self.is_api(request.path):
            return await self._api.dispatch(request)

        if request.method not in READ_METHODS:
            raise MethodNotAllowed(READ_METHODS)

        entry = self._pages.lookup(request.path)
        if entry is not None:
            try:
                html = await render_page(
                    entry,
                    layout_file=self._config.layout_file,
                    base_dir=self._base_dir,
                )
            except FileNotFoundError as exc:
                logger.warning("Page %s is registered but %s is missing", request.path, exc.filename)
                raise NotFound() from exc
            return Response(
                body=html,
                content_type=HTML_CONTENT_TYPE,
            ).with_header("Cache-Control", page_cache_control(self._config.cache_strategy))

        found = await resolve(search_paths_for(request.path, self._config))
        if found is None:
            logger.debug("404 %s %s", request.method, request.path)
            raise NotFound()

        return Response(
            body=found.body,
            content_type=found.content_type,
        ).with_header("Cache-Control", cache_control(found.extension, self._config.cache_strategy))
