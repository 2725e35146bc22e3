"""Centralized error handling middleware for the Flask API.

Converts exceptions raised by the route handlers into structured JSON
responses.

Error response format:
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable error message",
        "details": {...}  # Optional additional details
    }
}

Usage:
    from api.middleware.error_handler import register_error_handlers

    app = Flask(__name__)
    register_error_handlers(app)
"""

import logging
import time
import traceback
from typing import Any, Dict, Tuple

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from api.middleware.exceptions import APIError, format_error_response

logger = logging.getLogger("selectorsmith.api")

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
    500: "INTERNAL_SERVER_ERROR",
}


def log_error(error: Exception, include_traceback: bool = True) -> None:
    """Log an error with request context."""
    request_info = f"{request.method} {request.path}"

    if include_traceback:
        logger.error(f"Error handling request: {request_info}", exc_info=error)
    else:
        logger.warning(f"Handled error for request {request_info}: {error}")


# =============================================================================
# Error Handlers
# =============================================================================


def handle_api_error(error: APIError) -> Tuple[Dict[str, Any], int]:
    """Handle errors raised by the route handlers."""
    # 4xx errors are expected, no traceback
    log_error(error, include_traceback=error.status_code >= 500)
    return error.to_response(), error.status_code


def handle_http_exception(error: HTTPException) -> Tuple[Dict[str, Any], int]:
    """Handle Werkzeug HTTP exceptions."""
    code = HTTP_ERROR_CODES.get(error.code, f"HTTP_{error.code}")
    message = error.description or str(error)

    if error.code >= 500:
        log_error(error, include_traceback=True)

    return format_error_response(code=code, message=message), error.code


def handle_generic_exception(error: Exception) -> Tuple[Dict[str, Any], int]:
    """Handle unexpected exceptions."""
    log_error(error, include_traceback=True)

    # In debug mode, include traceback
    if current_app.debug:
        return (
            format_error_response(
                code="INTERNAL_ERROR",
                message=str(error),
                details={"traceback": traceback.format_exc()},
            ),
            500,
        )

    # In production, hide internal details
    return (
        format_error_response(
            code="INTERNAL_ERROR",
            message="An unexpected error occurred. Please try again later.",
        ),
        500,
    )


# =============================================================================
# Registration Function
# =============================================================================


def register_error_handlers(app: Flask) -> None:
    """
    Register all error handlers with the Flask app.

    Args:
        app: The Flask application instance
    """
    handlers = [
        (APIError, handle_api_error),
        (HTTPException, handle_http_exception),
        (Exception, handle_generic_exception),
    ]

    for exc_class, handler in handlers:
        def json_handler(error, handler=handler):
            response, status_code = handler(error)
            return jsonify(response), status_code

        app.register_error_handler(exc_class, json_handler)


# =============================================================================
# Request/Response Logging Middleware
# =============================================================================


def register_request_logging(app: Flask, log_level: int = logging.INFO) -> None:
    """
    Register request/response logging middleware.

    Logs method, path, response status code and time taken.

    Args:
        app: The Flask application instance
        log_level: Logging level for successful requests
    """

    @app.before_request
    def log_request_start():
        request.environ["selectorsmith.start_time"] = time.time()

    @app.after_request
    def log_request_end(response):
        started = request.environ.get("selectorsmith.start_time")
        duration_ms = int((time.time() - started) * 1000) if started else 0

        log_msg = (
            f"{request.method} {request.path} "
            f"- {response.status_code} "
            f"({duration_ms}ms)"
        )

        if response.status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.log(log_level, log_msg)

        return response
