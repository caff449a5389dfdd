"""Error handling for wren requests.

Maps HTTPError exceptions and unexpected failures to plain-text
Response objects.
"""

import logging

from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response

logger = logging.getLogger("wren.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response. Not logged as an error."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    response = Response(body=exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Log an unexpected exception with its traceback and answer 500."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        return Response(body=f"Internal Server Error\n\n{type(exc).__name__}: {exc}", status=500)
    return Response(body="Internal Server Error", status=500)
