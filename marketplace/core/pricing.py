"""
Price conversion helpers.

Dependencies: decimal (stdlib)
System role: Decimal price strings to integer minor currency units
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from marketplace.core.exceptions import BadRequestError

_WHOLE_UNIT = Decimal("1")


def to_minor_units(price: str | int | float) -> int:
    """
    Convert a decimal price (e.g. "49.99") to minor units (4999).

    Fractions of a minor unit are rounded half-up.

    Args:
        price: Price as entered by the teacher

    Returns:
        int: Price in minor units

    Raises:
        BadRequestError: If the value is not a finite, non-negative number
    """
    try:
        amount = Decimal(str(price).strip())
    except InvalidOperation as e:
        raise BadRequestError(
            "Invalid price format",
            field="price",
            details={"error": "Price must be a valid number"},
        ) from e

    if not amount.is_finite() or amount < 0:
        raise BadRequestError(
            "Invalid price format",
            field="price",
            details={"error": "Price must be a valid number"},
        )

    return int((amount * 100).quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP))
