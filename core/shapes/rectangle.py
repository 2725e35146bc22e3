"""Rectangle and circle data objects."""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    """A rectangle with width and height."""

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height


@dataclass
class Circle:
    """A circle with a radius."""

    radius: Number

    def get_area(self) -> float:
        return math.pi * self.radius ** 2

    def get_circumference(self) -> float:
        return 2 * math.pi * self.radius


def rectangle(width: Number, height: Number) -> Rectangle:
    """
    Create a rectangle object.

    Example:
        r = rectangle(10, 20)
        r.width       # => 10
        r.height      # => 20
        r.get_area()  # => 200
    """
    return Rectangle(width=width, height=height)
