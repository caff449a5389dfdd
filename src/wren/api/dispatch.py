"""ApiRoute and the ApiDispatcher route table.

Routes are declared as typed ``ApiRoute`` values and compiled into an
immutable ``"METHOD /path"`` table at construction. Collisions are a
``ConfigurationError`` at startup, never a silent overwrite.
"""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from http import HTTPMethod
from types import MappingProxyType
from typing import TypeAlias

from wren.errors import ConfigurationError
from wren.http.request import Request
from wren.http.response import JSONResponse, Response

ApiHandler: TypeAlias = Callable[[Request], Awaitable[Response]]

NOT_FOUND_BODY = {"error": "not found", "code": "NOT_FOUND"}


@dataclass(frozen=True, slots=True)
class ApiRoute:
    """A single API endpoint."""

    method: HTTPMethod
    path: str
    handler: ApiHandler

    @property
    def key(self) -> str:
        """Route key, e.g. ``"GET /api/health"``."""
        return route_key(self.method, self.path)


def route_key(method: str, path: str) -> str:
    return f"{method.upper()} {path}"


class ApiDispatcher:
    """Exact-match dispatch table for API routes.

    Usage::

        api = ApiDispatcher([ApiRoute(HTTPMethod.GET, "/api/health", health)])
        response = await api.dispatch(request)
    """

    __slots__ = ("_table",)

    def __init__(self, routes: Iterable[ApiRoute]) -> None:
        table: dict[str, ApiRoute] = {}
        for route in routes:
            if route.key in table:
                msg = f"Duplicate API route {route.key!r}"
                raise ConfigurationError(msg)
            table[route.key] = route
        self._table = MappingProxyType(table)

    @property
    def routes(self) -> tuple[ApiRoute, ...]:
        """All registered routes, in registration order."""
        return tuple(self._table.values())

    async def dispatch(self, request: Request) -> Response:
        """Invoke the handler for the request, or answer 404 JSON."""
        route = self._table.get(route_key(request.method, request.path))
        if route is None:
            return JSONResponse(NOT_FOUND_BODY, status=404)
        return await route.handler(request)
