"""Selector building endpoints."""

from typing import Any

from flask import Blueprint, jsonify, g

from api.middleware.exceptions import CombinatorError, ValidationError
from api.routes.decorators import require_json_object, require_fields
from core.config import get_config
from core.selectors import (
    BaseSelector,
    InvalidCombinatorError,
    SelectorBuilder,
    SelectorParts,
)

selectors_bp = Blueprint("selectors", __name__)

SINGLE_FIELDS = ("element", "id", "attribute", "pseudo_element")
LIST_FIELDS = ("classes", "pseudo_classes")


# =============================================================================
# Request parsing
# =============================================================================

def parse_parts(data: Any, path: str = "body") -> SelectorParts:
    """Validate a selector parts object and convert it to SelectorParts."""
    if not isinstance(data, dict):
        raise ValidationError(f"{path} must be an object", details={"path": path})

    for name in SINGLE_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"{path}.{name} must be a string",
                details={"path": f"{path}.{name}"},
            )

    for name in LIST_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValidationError(
                f"{path}.{name} must be a list of strings",
                details={"path": f"{path}.{name}"},
            )

    return SelectorParts.from_dict(data)


def parse_selector(data: Any, path: str = "body") -> BaseSelector:
    """
    Build a selector from a request object.

    An object with a "combinator" key is a combination of its "left" and
    "right" members, which may themselves be combinations. Any other
    object is a set of selector parts.
    """
    if isinstance(data, dict) and "combinator" in data:
        require_fields(data, "left", "right")
        combinator = data["combinator"]
        if not isinstance(combinator, str):
            raise ValidationError(
                f"{path}.combinator must be a string",
                details={"path": f"{path}.combinator"},
            )
        left = parse_selector(data["left"], f"{path}.left")
        right = parse_selector(data["right"], f"{path}.right")
        return left.combine(right, combinator)

    return SelectorBuilder.from_parts(parse_parts(data, path))


# =============================================================================
# Routes
# =============================================================================

@selectors_bp.route("/render", methods=["POST"])
@require_json_object
def render_selector():
    """Render a compound selector from its parts."""
    parts = parse_parts(g.body)
    builder = SelectorBuilder.from_parts(parts)
    return jsonify({
        "selector": builder.render(),
        "parts": parts.to_dict(),
    })


@selectors_bp.route("/combine", methods=["POST"])
@require_json_object
def combine_selectors():
    """Render a (possibly nested) combination of selectors."""
    require_fields(g.body, "left", "combinator", "right")
    try:
        selector = parse_selector(g.body)
    except InvalidCombinatorError as e:
        raise CombinatorError(e.combinator, e.allowed)
    return jsonify({"selector": selector.render()})


@selectors_bp.route("/combinators", methods=["GET"])
def list_combinators():
    """List the combinator tokens accepted by /combine."""
    return jsonify({"combinators": list(get_config().selectors.combinators)})
