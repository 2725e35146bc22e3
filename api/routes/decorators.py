"""Route decorators shared by the API blueprints."""

from functools import wraps
from flask import request, g

from api.middleware.exceptions import ValidationError


def require_json_object(f):
    """Decorator that loads the request body and rejects non-objects.

    Adds 'body' (a dict) to flask.g for use in the route handler.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        g.body = body
        return f(*args, **kwargs)
    return decorated


def require_fields(body: dict, *names: str) -> None:
    """Raise ValidationError listing the fields missing from body."""
    missing = [name for name in names if body.get(name) is None]
    if missing:
        raise ValidationError(
            f"Missing required field(s): {', '.join(missing)}",
            details={"missing": missing},
        )


def require_number(body: dict, name: str):
    """Return body[name], raising ValidationError unless it is a number."""
    value = body.get(name)
    # bool is an int subclass but never a valid dimension
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"'{name}' must be a number",
            details={"field": name, "value": value},
        )
    return value
