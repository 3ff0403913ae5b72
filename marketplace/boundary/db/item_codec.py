"""
Conversion between Python values and DynamoDB document items.

The boto3 document API refuses float values and hands numbers back as
Decimal. Writes turn floats into Decimal, reads turn Decimal back into
int or float.

Dependencies: decimal (stdlib)
System role: Item encoding for repositories
"""

from decimal import Decimal
from typing import Any


def to_item(value: Any) -> Any:
    """Recursively convert floats to Decimal for put/update calls."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: to_item(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_item(val) for val in value]
    return value


def from_item(value: Any) -> Any:
    """Recursively convert Decimal numbers to int (integral) or float."""
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, dict):
        return {key: from_item(val) for key, val in value.items()}
    if isinstance(value, (list, set)):
        return [from_item(val) for val in value]
    return value
