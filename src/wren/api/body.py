"""JSON request body parsing."""

import json
from typing import Any

from wren.http.request import Request


class InvalidJSON(ValueError):  # noqa: N818
    """The request body is not valid UTF-8 JSON."""


async def read_json_body(request: Request) -> Any:
    """Read and parse the request body as JSON.

    An empty body parses as ``{}``. Raises ``InvalidJSON`` otherwise
    when the body cannot be decoded.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJSON("Invalid JSON") from exc
