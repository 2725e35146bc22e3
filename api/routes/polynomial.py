"""Polynomial evaluation endpoint."""

from flask import Blueprint, jsonify, g

from api.middleware.exceptions import ValidationError
from api.routes.decorators import require_json_object, require_fields
from core.polynomial import get_polynom
from core.serialization import replace_non_finite

polynomial_bp = Blueprint("polynomial", __name__)


def _numbers(body: dict, name: str) -> list:
    values = body.get(name)
    if not isinstance(values, list) or not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in values
    ):
        raise ValidationError(
            f"'{name}' must be a list of numbers",
            details={"field": name},
        )
    return values


@polynomial_bp.route("/evaluate", methods=["POST"])
@require_json_object
def evaluate():
    """Evaluate a polynomial at each of the given points."""
    require_fields(g.body, "coefficients", "x")
    coefficients = _numbers(g.body, "coefficients")
    points = _numbers(g.body, "x")

    polynom = get_polynom(*coefficients)
    if polynom is None:
        raise ValidationError(
            "At least one coefficient is required",
            details={"field": "coefficients"},
        )

    try:
        values = [polynom(x) for x in points]
    except OverflowError:
        # Integer coefficients too large to mix with float points
        raise ValidationError(
            "Polynomial value is out of range",
            details={"field": "coefficients"},
        )

    # Overflowed or undefined float values are returned as null
    return jsonify(replace_non_finite({
        "coefficients": coefficients,
        "x": points,
        "values": values,
    }))
