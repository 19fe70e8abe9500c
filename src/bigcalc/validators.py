"""Input validation functions with strict type checking."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bigcalc.config import MAX_BASE, MIN_BASE
from bigcalc.exceptions import (
    DivisionByZeroError,
    InvalidBaseError,
    InvalidFormatError,
    InvalidInputError,
)

if TYPE_CHECKING:
    from bigcalc.bigint import BigInt

DECIMAL_DIGITS = frozenset("0123456789")


def validate_number(text: str) -> str:
    """
    Validate that a string is a decimal integer literal.

    An optional leading '-' is allowed, followed by one or more ASCII digits.

    Args:
        text: The string to validate

    Returns:
        The validated string

    Raises:
        InvalidFormatError: If text is not a string or not a decimal literal
    """
    if not isinstance(text, str):
        raise InvalidFormatError(text, f"Expected string, got {type(text).__name__}")

    digits = text[1:] if text.startswith("-") else text
    if not digits:
        raise InvalidFormatError(text, "Empty number")

    if any(char not in DECIMAL_DIGITS for char in digits):
        raise InvalidFormatError(text, "Invalid number")

    return text


def validate_base(base: int) -> int:
    """
    Validate that a radix lies within [MIN_BASE, MAX_BASE].

    Args:
        base: The radix to validate

    Returns:
        The validated radix

    Raises:
        InvalidBaseError: If base is not an int or is out of range
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(base, MIN_BASE, MAX_BASE)

    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError(base, MIN_BASE, MAX_BASE)

    return base


def validate_non_zero(divisor: BigInt, dividend: BigInt) -> BigInt:
    """
    Validate that a divisor is not zero.

    Args:
        divisor: The value to validate
        dividend: The value being divided, reported in the error

    Returns:
        The validated divisor

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    if divisor.is_zero:
        raise DivisionByZeroError(dividend)

    return divisor


def validate_positive(value: BigInt, name: str = "value") -> BigInt:
    """
    Validate that a value is strictly positive.

    Raises:
        InvalidInputError: If value is zero or negative
    """
    if value.negative or value.is_zero:
        raise InvalidInputError(value, f"{name} must be positive")

    return value
