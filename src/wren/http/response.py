"""The outgoing response produced by the router and API handlers.

Responses are values. Adjustments go through ``with_*`` methods that
return a copy, so a response can be passed around and decorated (the
router adds ``Cache-Control``, the error mapper adds ``Allow``) without
anyone mutating shared state.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

TEXT_PLAIN = "text/plain; charset=utf-8"
APPLICATION_JSON = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers and a complete body.

    ``content-type`` and ``content-length`` are not part of ``headers``;
    the sender derives them from ``content_type`` and the body.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = TEXT_PLAIN
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Copy with ``name: value`` appended to the headers."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Copy with every pair in *headers* appended."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name*, compared case-insensitively."""
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), None)

    @property
    def body_bytes(self) -> bytes:
        """The body as sent on the wire (str bodies are UTF-8 encoded)."""
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        return self.body if isinstance(self.body, str) else self.body.decode("utf-8")

    def json(self) -> Any:
        return json_module.loads(self.body_bytes)


def JSONResponse(payload: Any, status: int = 200) -> Response:  # noqa: N802
    """A ``Response`` whose body is *payload* as compact JSON.

    >>> JSONResponse({"status": "ok"}).body
    '{"status":"ok"}'
    """
    return Response(
        body=json_module.dumps(payload, separators=(",", ":")),
        status=status,
        content_type=APPLICATION_JSON,
    )
