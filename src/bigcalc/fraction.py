"""
Rational arithmetic on top of BigInt.

Every fraction is kept in lowest terms with a non-negative denominator;
each arithmetic result is passed back through ``create_fraction`` so it
is simplified again.
"""

from __future__ import annotations

from bigcalc.bigint import ONE, BigInt
from bigcalc.exceptions import DivisionByZeroError
from bigcalc.operations import add, divide, modulo, multiply, subtract


def gcd(a: BigInt, b: BigInt) -> BigInt:
    """Greatest common divisor of |a| and |b| by the Euclidean algorithm."""
    a, b = abs(a), abs(b)
    while not b.is_zero:
        a, b = b, modulo(a, b)
    return a


class Fraction:
    """
    An immutable rational number numerator/denominator.

    Use ``create_fraction`` (or the constructor, which calls the same
    simplification) to build one.

    Example:
        >>> half = Fraction(BigInt("2"), BigInt("4"))
        >>> str(half)
        '1/2'
        >>> str(half + Fraction(BigInt("1"), BigInt("12")))
        '7/12'
    """

    __slots__ = ("_denominator", "_numerator")

    def __init__(self, numerator: BigInt, denominator: BigInt = ONE) -> None:
        """
        Initialize a fraction in lowest terms.

        Raises:
            DivisionByZeroError: If denominator is zero
        """
        if denominator.is_zero:
            raise DivisionByZeroError(numerator)

        if numerator.is_zero:
            self._numerator = numerator
            self._denominator = ONE
            return

        common = gcd(numerator, denominator)
        numerator = divide(numerator, common).quotient
        denominator = divide(denominator, common).quotient

        if denominator.negative:
            numerator = -numerator
            denominator = -denominator

        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> BigInt:
        """Numerator, carrying the sign of the fraction."""
        return self._numerator

    @property
    def denominator(self) -> BigInt:
        """Positive denominator."""
        return self._denominator

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return add_fractions(self, other)

    def __sub__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return subtract_fractions(self, other)

    def __mul__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return multiply_fractions(self, other)

    def __truediv__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return divide_fractions(self, other)

    def __str__(self) -> str:
        return format_fraction(self)

    def __repr__(self) -> str:
        return f"Fraction('{format_fraction(self)}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))


def create_fraction(numerator: BigInt, denominator: BigInt) -> Fraction:
    """
    Build a simplified fraction.

    Both parts are divided by their GCD and a negative denominator has
    its sign moved to the numerator. A zero numerator yields 0/1.

    Raises:
        DivisionByZeroError: If denominator is zero
    """
    return Fraction(numerator, denominator)


def add_fractions(a: Fraction, b: Fraction) -> Fraction:
    """a/b + c/d = (ad + cb) / bd"""
    numerator = add(
        multiply(a.numerator, b.denominator),
        multiply(b.numerator, a.denominator),
    )
    return create_fraction(numerator, multiply(a.denominator, b.denominator))


def subtract_fractions(a: Fraction, b: Fraction) -> Fraction:
    """a/b - c/d = (ad - cb) / bd"""
    numerator = subtract(
        multiply(a.numerator, b.denominator),
        multiply(b.numerator, a.denominator),
    )
    return create_fraction(numerator, multiply(a.denominator, b.denominator))


def multiply_fractions(a: Fraction, b: Fraction) -> Fraction:
    """a/b * c/d = ac / bd"""
    return create_fraction(
        multiply(a.numerator, b.numerator),
        multiply(a.denominator, b.denominator),
    )


def divide_fractions(a: Fraction, b: Fraction) -> Fraction:
    """
    a/b / c/d = ad / bc

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b.numerator.is_zero:
        raise DivisionByZeroError(a.numerator)

    return create_fraction(
        multiply(a.numerator, b.denominator),
        multiply(a.denominator, b.numerator),
    )


def format_fraction(frac: Fraction) -> str:
    """Render as 'n/d', prefixed with '-' when the fraction is negative."""
    sign = "-" if frac.numerator.negative != frac.denominator.negative else ""
    return f"{sign}{frac.numerator.magnitude}/{frac.denominator.magnitude}"
