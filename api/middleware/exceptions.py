"""Errors raised by the API routes and their JSON representation.

Every error carries a machine-readable code and an HTTP status. The
error handler turns any APIError into:
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable error message",
        "details": {...}  # Only when there are details
    }
}
"""

import json
from typing import Any, Dict, Iterable, Optional


def format_error_response(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the error body shared by all failing responses."""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"error": error}


class APIError(Exception):
    """Base class for errors returned to API clients.

    Subclasses set `code` and `status_code`; instances carry the message
    and optional details.
    """

    code = "API_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response(self) -> Dict[str, Any]:
        return format_error_response(self.code, self.message, self.details)


class ValidationError(APIError):
    """Request body has a missing or badly typed field."""

    code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(APIError):
    """A named resource (such as a decode type) does not exist."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class CombinatorError(ValidationError):
    """Selectors were joined with a token outside the allowed combinators."""

    code = "INVALID_COMBINATOR"

    def __init__(self, combinator: str, allowed: Iterable[str]):
        allowed = list(allowed)
        super().__init__(
            f"Unknown combinator {combinator!r}, expected one of {allowed!r}",
            {"combinator": combinator, "allowed": allowed},
        )


class MalformedJSONError(ValidationError):
    """Text submitted for decoding is not valid JSON."""

    code = "INVALID_JSON"

    def __init__(self, error: json.JSONDecodeError):
        super().__init__(error.msg, {"line": error.lineno, "column": error.colno})
