"""The incoming request as seen by the router and API handlers."""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, field
from typing import Any

from wren._internal.asgi import Receive, Scope
from wren.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` is always upper-case and ``path`` is the decoded ASGI
    path without its query string. The body stays on the ASGI channel
    until a handler asks for it; it is drained once and then cached.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    _cache: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a Request from an ASGI ``http`` scope."""
        return cls(
            method=scope["method"].upper(),
            path=scope["path"] or "/",
            headers=Headers(scope.get("headers", ())),
            query_string=scope.get("query_string", b""),
            _receive=receive,
        )

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    async def body(self) -> bytes:
        """Drain the ASGI channel and return the full body.

        A client disconnect ends the body early with whatever arrived.
        """
        if "body" not in self._cache:
            self._cache["body"] = await self._drain()
        return self._cache["body"]

    async def _drain(self) -> bytes:
        if self._receive is None:
            return b""
        chunks: list[bytes] = []
        more = True
        while more:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                break
            chunks.append(message.get("body", b""))
            more = message.get("more_body", False)
        return b"".join(chunks)

    async def text(self) -> str:
        """The body decoded as UTF-8."""
        return (await self.body()).decode("utf-8")

    async def json(self) -> Any:
        return json_module.loads(await self.body())
