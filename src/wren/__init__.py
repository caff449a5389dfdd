"""wren — a small ASGI site server.

Serves a JSON API, layout-rendered pages and path-safe static assets::

    from wren import App, AppConfig

    app = App(AppConfig.from_env(), base_dir="site")

Run it with ``wren run --root site``.
"""

from wren.app import App
from wren.config import AppConfig, CacheStrategy
from wren.errors import (
    BadRequest,
    ConfigurationError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
    WrenError,
)
from wren.http.request import Request
from wren.http.response import JSONResponse, Response

__version__ = "0.1.0"

__all__ = [
    "App",
    "AppConfig",
    "BadRequest",
    "CacheStrategy",
    "ConfigurationError",
    "HTTPError",
    "JSONResponse",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "WrenError",
]
