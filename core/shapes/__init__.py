"""Simple shape data objects."""

from core.shapes.rectangle import Circle, Rectangle, rectangle

SHAPE_TYPES = {
    "rectangle": Rectangle,
    "circle": Circle,
}

__all__ = ["Circle", "Rectangle", "rectangle", "SHAPE_TYPES"]
