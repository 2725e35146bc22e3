"""Shape endpoints."""

from flask import Blueprint, jsonify, g

from api.routes.decorators import require_json_object, require_fields, require_number
from core.shapes import rectangle

shapes_bp = Blueprint("shapes", __name__)


@shapes_bp.route("/rectangle", methods=["POST"])
@require_json_object
def create_rectangle():
    """Create a rectangle and report its area."""
    require_fields(g.body, "width", "height")
    rect = rectangle(
        require_number(g.body, "width"),
        require_number(g.body, "height"),
    )
    return jsonify({
        "width": rect.width,
        "height": rect.height,
        "area": rect.get_area(),
    })
