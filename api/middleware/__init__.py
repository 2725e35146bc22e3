"""Error types, error handlers and request logging for the API."""

from api.middleware.error_handler import register_error_handlers, register_request_logging
from api.middleware.exceptions import (
    APIError,
    CombinatorError,
    MalformedJSONError,
    NotFoundError,
    ValidationError,
    format_error_response,
)

__all__ = [
    "APIError",
    "CombinatorError",
    "MalformedJSONError",
    "NotFoundError",
    "ValidationError",
    "format_error_response",
    "register_error_handlers",
    "register_request_logging",
]
