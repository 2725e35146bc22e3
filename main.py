"""Selectorsmith - polynomial evaluation demo."""

from core.polynomial import get_polynom

DEMO_POLYNOMS = [
    ((2, 3, 5), (0, 2, 3)),
    ((1, -3), (0, 2, 5)),
    ((8,), (0, 2, 5)),
]


def main():
    """Print sample evaluations of a few polynomials."""
    for coefficients, points in DEMO_POLYNOMS:
        polynom = get_polynom(*coefficients)
        print(*(polynom(x) for x in points))


if __name__ == "__main__":
    main()
