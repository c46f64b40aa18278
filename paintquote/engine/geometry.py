"""Surface geometry. Dimensions in feet, results in sq ft or linear ft."""

from decimal import Decimal


def wall_area(length: Decimal, width: Decimal, height: Decimal) -> Decimal:
    return 2 * (length * height + width * height)


def ceiling_area(length: Decimal, width: Decimal) -> Decimal:
    return length * width


def perimeter(length: Decimal, width: Decimal) -> Decimal:
    return 2 * (length + width)
