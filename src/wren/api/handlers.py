"""Demo API handlers.

Stubs that exercise the dispatcher contract: each takes the ``Request``
and returns a complete ``Response``.
"""

from http import HTTPMethod

from wren.api.body import InvalidJSON, read_json_body
from wren.api.dispatch import ApiRoute
from wren.api.validation import validate_data_payload
from wren.http.request import Request
from wren.http.response import JSONResponse, Response

SAMPLE_DATA = (1, 2, 3, 4, 5)


async def health(request: Request) -> Response:
    """GET /api/health"""
    return JSONResponse({"status": "ok"})


async def data_get(request: Request) -> Response:
    """GET /api/data"""
    return JSONResponse({"data": list(SAMPLE_DATA)})


async def data_post(request: Request) -> Response:
    """POST /api/data — echo a validated, trimmed ``message``."""
    try:
        body = await read_json_body(request)
    except InvalidJSON as exc:
        return JSONResponse({"error": str(exc)}, status=400)

    result = validate_data_payload(body)
    if not result:
        return JSONResponse({"error": result.error}, status=400)

    return JSONResponse({"received": {"message": body["message"].strip()}})


DEFAULT_ROUTES = (
    ApiRoute(HTTPMethod.GET, "/api/health", health),
    ApiRoute(HTTPMethod.GET, "/api/data", data_get),
    ApiRoute(HTTPMethod.POST, "/api/data", data_post),
)
