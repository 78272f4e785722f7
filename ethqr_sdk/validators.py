"""
Primitive predicates shared by the payment request schemas.

All predicates are total: they return ``False`` for values of the wrong type
instead of raising.
"""
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

ADDRESS_PATTERN = re.compile(r"0x[0-9a-f]{40}", re.IGNORECASE)
FUNCTION_NAME_PATTERN = re.compile(r"[a-z0-9_-]+", re.IGNORECASE)
ARGUMENT_NAME_PATTERN = FUNCTION_NAME_PATTERN
SOLIDITY_TYPE_PATTERN = re.compile(r"[a-z0-9]+", re.IGNORECASE)
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

# Upper bound on integer digits of amounts, gas and chain ids, keeps int/str conversion bounded
MAX_AMOUNT_DIGITS = 4096
MAX_INTEGER = 10 ** MAX_AMOUNT_DIGITS


def is_valid_address(value: Any) -> bool:
    """Check for ``0x`` followed by exactly 40 hex digits (any case)."""
    return isinstance(value, str) and ADDRESS_PATTERN.fullmatch(value) is not None


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Convert an amount-like value to an arbitrary-precision Decimal

    Args:
        value: int, float, Decimal or decimal string

    Returns:
        The finite Decimal, or None if the value is not a finite number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(value) if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, str) and DECIMAL_PATTERN.fullmatch(value):
        try:
            return Decimal(value)
        except InvalidOperation:
            return None
    return None


def is_valid_amount(value: Any) -> bool:
    """Check the value is a non-negative integral amount."""
    amount = to_decimal(value)
    if amount is None or (amount.is_signed() and amount != 0):
        return False
    if amount.adjusted() >= MAX_AMOUNT_DIGITS:
        return False
    return amount == amount.to_integral_value()


def format_amount(value: Any) -> str:
    """
    Render an amount as a base-10 integer string without going through float.

    Raises:
        ValueError: If the value is not a valid amount
    """
    if not is_valid_amount(value):
        raise ValueError(f"Not a valid amount: {value!r}")
    return str(int(to_decimal(value)))


def is_valid_gas(value: Any) -> bool:
    """Gas is a genuine ``int``; integral floats such as ``21000.0`` are rejected."""
    return _is_bounded_int(value) and value >= 0


def is_valid_chain_id(value: Any) -> bool:
    """Chain id is a positive genuine ``int``; integral floats are rejected."""
    return _is_bounded_int(value) and value > 0


def _is_bounded_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and abs(value) < MAX_INTEGER


def is_valid_function_name(value: Any) -> bool:
    return isinstance(value, str) and FUNCTION_NAME_PATTERN.fullmatch(value) is not None


def is_valid_argument_name(value: Any) -> bool:
    return isinstance(value, str) and ARGUMENT_NAME_PATTERN.fullmatch(value) is not None


def is_valid_solidity_type(value: Any) -> bool:
    return isinstance(value, str) and SOLIDITY_TYPE_PATTERN.fullmatch(value) is not None
