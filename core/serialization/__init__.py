"""JSON serialization helpers."""

from core.serialization.json_codec import from_json, get_json, replace_non_finite

__all__ = ["from_json", "get_json", "replace_non_finite"]
