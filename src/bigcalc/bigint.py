"""Arbitrary-precision signed integer value type."""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering

from bigcalc.exceptions import InvalidFormatError
from bigcalc.validators import validate_number


class Ordering(IntEnum):
    """Result of comparing two BigInt values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _strip_leading_zeros(digits: str) -> str:
    stripped = digits.lstrip("0")
    return stripped or "0"


@total_ordering
class BigInt:
    """
    An immutable signed integer of unlimited size.

    The value is held as a sign flag plus a magnitude string of decimal
    digits, most significant first. Instances are always canonical: the
    magnitude has no leading zeros and zero is never negative.

    Example:
        >>> n = parse_int("-00042")
        >>> n.negative, n.magnitude
        (True, '42')
        >>> str(n)
        '-42'
    """

    __slots__ = ("_magnitude", "_negative")

    def __init__(self, magnitude: str = "0", negative: bool = False) -> None:
        """
        Build a value from an unsigned digit string and a sign flag.

        Args:
            magnitude: Decimal digits, leading zeros allowed
            negative: True for a negative value

        Raises:
            InvalidFormatError: If magnitude is not a digit string
        """
        validate_number(magnitude)
        if magnitude.startswith("-"):
            raise InvalidFormatError(magnitude, "Magnitude must be unsigned")
        magnitude = _strip_leading_zeros(magnitude)
        self._magnitude = magnitude
        self._negative = bool(negative) and magnitude != "0"

    @classmethod
    def from_int(cls, value: int) -> BigInt:
        """Build a value from a native Python int."""
        return cls(str(abs(value)), value < 0)

    @property
    def negative(self) -> bool:
        """True if the value is below zero."""
        return self._negative

    @property
    def magnitude(self) -> str:
        """Absolute value as a canonical digit string."""
        return self._magnitude

    @property
    def is_zero(self) -> bool:
        return self._magnitude == "0"

    def __abs__(self) -> BigInt:
        return BigInt(self._magnitude) if self._negative else self

    def __neg__(self) -> BigInt:
        return negate(self)

    def __int__(self) -> int:
        return -int(self._magnitude) if self._negative else int(self._magnitude)

    def __str__(self) -> str:
        return format_int(self)

    def __repr__(self) -> str:
        return f"BigInt('{format_int(self)}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._negative == other._negative and self._magnitude == other._magnitude

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __hash__(self) -> int:
        return hash((self._negative, self._magnitude))


ZERO = BigInt("0")
ONE = BigInt("1")


def parse_int(text: str) -> BigInt:
    """
    Parse a decimal string with an optional leading '-'.

    Leading zeros are stripped and "-0" becomes zero.

    Raises:
        InvalidFormatError: If text is empty after the sign or has a non-digit
    """
    validate_number(text)
    if text.startswith("-"):
        return BigInt(text[1:], negative=True)
    return BigInt(text)


def format_int(value: BigInt) -> str:
    """Render a value as '-' (only when negative and non-zero) plus its digits."""
    if value.negative and not value.is_zero:
        return "-" + value.magnitude
    return value.magnitude


def compare_magnitudes(m1: str, m2: str) -> Ordering:
    """Compare two canonical digit strings numerically."""
    if len(m1) != len(m2):
        return Ordering.GREATER if len(m1) > len(m2) else Ordering.LESS
    if m1 == m2:
        return Ordering.EQUAL
    return Ordering.GREATER if m1 > m2 else Ordering.LESS


def compare(a: BigInt, b: BigInt) -> Ordering:
    """
    Three-way comparison of two values.

    Differing signs settle the result; otherwise magnitudes are compared
    by length and then digit by digit, inverted when both are negative.
    """
    if a.negative != b.negative:
        return Ordering.LESS if a.negative else Ordering.GREATER

    result = compare_magnitudes(a.magnitude, b.magnitude)
    if a.negative:
        return Ordering(-result)
    return result


def negate(value: BigInt) -> BigInt:
    """Flip the sign, leaving the magnitude unchanged."""
    return BigInt(value.magnitude, not value.negative)


def copy(value: BigInt) -> BigInt:
    """Return an independent value equal to ``value``."""
    return BigInt(value.magnitude, value.negative)
