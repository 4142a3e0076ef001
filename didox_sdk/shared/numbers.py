"""
Numeric formatting for wire payloads.

The Didox API receives most amounts as strings. Three renderings are used:

- to_fixed: fixed-point string with half-up rounding of the exact
  binary value (``1200000`` -> ``"1200000.00"``)
- format_number: plain rendering where integral values carry no
  fractional part (``10.0`` -> ``"10"``, ``2.5`` -> ``"2.5"``)
- round_half_up: nearest integer, ties toward positive infinity
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from didox_sdk.shared.config.constants import MONEY_DECIMAL_PLACES

Number = Union[int, float, Decimal]


def to_fixed(value: Number, digits: int = MONEY_DECIMAL_PLACES) -> str:
    """
    Render a number as a fixed-point string.

    Args:
        value: Number to render
        digits: Number of decimal places (default: 2)

    Returns:
        Fixed-point string, e.g. "10000.00"
    """
    quantum = Decimal(1).scaleb(-digits)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def round_money(value: Number, digits: int = MONEY_DECIMAL_PLACES) -> float:
    """Round to ``digits`` decimal places (half-up) and return a float."""
    return float(to_fixed(value, digits))


def format_number(value: Union[Number, str]) -> str:
    """
    Render a number the way the API expects plain numeric strings.

    Args:
        value: Number (or already-rendered string)

    Returns:
        "10" for 10 and 10.0, "2.5" for 2.5; strings are returned unchanged
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def round_half_up(value: Number) -> int:
    """Round to the nearest integer; exact halves go toward positive infinity."""
    return math.floor(value + 0.5)
