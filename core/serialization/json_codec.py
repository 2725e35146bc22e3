"""JSON encoding of plain objects and decoding onto a prototype.

Usage:
    from core.serialization import get_json, from_json
    from core.shapes import Circle

    get_json([1, 2, 3])                       # => '[1,2,3]'
    get_json({"width": 10, "height": 20})     # => '{"width":10,"height":20}'

    c = from_json(Circle, '{"radius":10}')
    c.get_area()                              # => 314.159...
"""

import json
import math
from typing import Any, Dict, Optional, Type, TypeVar, Union

from core.config import JsonConfig, get_config
from utils.logger import log_decode

T = TypeVar("T")


def _public_fields(obj: Any) -> Dict[str, Any]:
    """Data attributes of an object, skipping private names and callables."""
    return {
        key: value
        for key, value in vars(obj).items()
        if not key.startswith("_") and not callable(value)
    }


def replace_non_finite(value: Any) -> Any:
    """Replace NaN and infinities with None, as JSON has no tokens for them."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [replace_non_finite(item) for item in value]
    return value


def _to_serializable(obj: Any) -> Any:
    """Fallback for json.dumps: objects are encoded as their data fields."""
    if hasattr(obj, "__dict__"):
        return replace_non_finite(_public_fields(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(value: Any, json_config: Optional[JsonConfig] = None) -> str:
    """
    Return the compact JSON representation of a value.

    Lists, dicts and scalars are encoded as-is. Other objects are encoded
    as a JSON object of their public data attributes; methods are left
    out. NaN and infinite floats are encoded as null.

    Args:
        value: Value to encode
        json_config: Overrides the configured encoding options

    Returns:
        JSON text without insignificant whitespace

    Raises:
        TypeError: If the value contains something that cannot be encoded
    """
    json_config = json_config or get_config().json
    return json.dumps(
        replace_non_finite(value),
        default=_to_serializable,
        separators=json_config.separators,
        ensure_ascii=json_config.ensure_ascii,
        sort_keys=json_config.sort_keys,
    )


def from_json(proto: Union[Type[T], T], text: str) -> T:
    """
    Parse JSON text into a new object that shares the behavior of proto.

    The new object is created without calling __init__; every field of
    the parsed JSON object is set on it as an attribute. When proto is an
    instance rather than a class, its attributes are used as defaults for
    fields missing from the document.

    Args:
        proto: Class (or instance of the class) providing the methods
        text: JSON text of an object

    Returns:
        New instance of proto's class carrying the parsed fields

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
        TypeError: If the JSON document is not an object
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    cls = proto if isinstance(proto, type) else type(proto)
    obj = cls.__new__(cls)
    if not isinstance(proto, type):
        obj.__dict__.update(vars(proto))
    for key, value in data.items():
        setattr(obj, key, value)

    log_decode(cls.__name__, len(data))
    return obj
