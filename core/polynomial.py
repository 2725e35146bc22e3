"""Polynomial evaluation."""

from typing import Callable, Optional, Union

Number = Union[int, float]


def get_polynom(*coefficients: Number) -> Optional[Callable[[Number], Number]]:
    """
    Return a function evaluating the polynomial with the given coefficients.

    Coefficients are ordered from the highest power down to the constant
    term, so get_polynom(2, 3, 5) is y = 2*x**2 + 3*x + 5.

    Example:
        p = get_polynom(2, 3, 5)
        p(0)  # => 5
        p(2)  # => 19

    Returns:
        The polynomial function, or None if no coefficients are given
    """
    if not coefficients:
        return None

    def polynom(x: Number) -> Number:
        # Horner's scheme
        result = 0
        for coefficient in coefficients:
            result = result * x + coefficient
        return result

    return polynom
