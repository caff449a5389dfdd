"""JSON API — typed (method, path) dispatch to isolated handlers."""

from wren.api.body import InvalidJSON, read_json_body
from wren.api.dispatch import ApiDispatcher, ApiHandler, ApiRoute
from wren.api.handlers import DEFAULT_ROUTES, data_get, data_post, health
from wren.api.validation import MAX_MESSAGE_LENGTH, ValidationResult, validate_data_payload

__all__ = [
    "DEFAULT_ROUTES",
    "MAX_MESSAGE_LENGTH",
    "ApiDispatcher",
    "ApiHandler",
    "ApiRoute",
    "InvalidJSON",
    "ValidationResult",
    "data_get",
    "data_post",
    "health",
    "read_json_body",
    "validate_data_payload",
]
