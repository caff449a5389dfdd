"""ASGI handler — translates ASGI scope/messages to wren types.

Converts the scope dict to a typed Request, runs the site router, and
sends exactly one Response back through ASGI send(). A failure in one
request never escapes this function.
"""

from wren._internal.asgi import Receive, Scope, Send
from wren.errors import HTTPError
from wren.http.request import Request
from wren.router import SiteRouter
from wren.server.errors import handle_http_error, handle_internal_error
from wren.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: SiteRouter,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the router."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await router.route(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send, head=request.method == "HEAD")
