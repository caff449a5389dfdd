"""HTTP primitives — immutable request, response and headers."""

from wren.http.headers import Headers
from wren.http.request import Request
from wren.http.response import JSONResponse, Response

__all__ = ["Headers", "JSONResponse", "Request", "Response"]
