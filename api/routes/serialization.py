"""JSON encode/decode endpoints."""

import json

from flask import Blueprint, jsonify, g

from api.middleware.exceptions import MalformedJSONError, NotFoundError, ValidationError
from api.routes.decorators import require_json_object, require_fields
from core.serialization import from_json, get_json, replace_non_finite
from core.shapes import SHAPE_TYPES

serialization_bp = Blueprint("serialization", __name__)


@serialization_bp.route("/encode", methods=["POST"])
@require_json_object
def encode():
    """Return the compact JSON text of the given value."""
    if "value" not in g.body:
        raise ValidationError(
            "Missing required field(s): value",
            details={"missing": ["value"]},
        )
    return jsonify({"json": get_json(g.body["value"])})


@serialization_bp.route("/decode", methods=["POST"])
@require_json_object
def decode():
    """Decode JSON text onto one of the known shape types."""
    require_fields(g.body, "type", "json")
    type_name = g.body["type"]
    text = g.body["json"]

    proto = SHAPE_TYPES.get(type_name)
    if proto is None:
        raise NotFoundError("Type", type_name)
    if not isinstance(text, str):
        raise ValidationError("'json' must be a string", details={"field": "json"})

    try:
        obj = from_json(proto, text)
    except json.JSONDecodeError as e:
        raise MalformedJSONError(e)
    except TypeError as e:
        raise ValidationError(str(e), details={"field": "json"})

    response = {"type": type_name, "fields": vars(obj)}
    try:
        response["area"] = obj.get_area()
    except (AttributeError, TypeError, OverflowError):
        # Document lacks the fields the area needs, or they are out of range
        response["area"] = None
    return jsonify(replace_non_finite(response))
