# backend/utils/money.py
"""
Decimal helpers for prices and totals.

Cart totals are summed as exact Decimals and rounded to cents once,
at the end, so per-line rounding never accumulates.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

MONEY_PRECISION = Decimal("0.01")

Number = Union[str, int, float, Decimal, None]


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal.

    Floats go through their string form so 19.99 stays 19.99.
    None and unparseable values become Decimal("0").
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round to cents, half up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Number, symbol: str = "$") -> str:
    return f"{symbol}{round_money(value):,.2f}"


def to_float(value: Number) -> float:
    """Rounded float for JSON payloads sent to the backend."""
    return float(round_money(value))
