"""Core arithmetic operations on arbitrary-precision integers."""

import logging
from typing import NamedTuple

from bigcalc.bigint import ONE, ZERO, BigInt, Ordering, compare_magnitudes
from bigcalc.exceptions import (
    InvalidInputError,
    NegativeExponentError,
    NegativeInputError,
)
from bigcalc.validators import validate_non_zero, validate_positive

logger = logging.getLogger(__name__)


class DivisionResult(NamedTuple):
    """Truncating quotient and remainder of an integer division."""

    quotient: BigInt
    remainder: BigInt


def add_magnitudes(m1: str, m2: str) -> str:
    """
    Add two digit strings with schoolbook carry propagation.

    Args:
        m1: First magnitude
        m2: Second magnitude

    Returns:
        Sum as a canonical digit string
    """
    digits = []
    carry = 0
    i, j = len(m1) - 1, len(m2) - 1

    while i >= 0 or j >= 0:
        total = carry
        if i >= 0:
            total += int(m1[i])
        if j >= 0:
            total += int(m2[j])
        digits.append(str(total % 10))
        carry = total // 10
        i -= 1
        j -= 1

    if carry:
        digits.append(str(carry))

    return "".join(reversed(digits)).lstrip("0") or "0"


def subtract_magnitudes(m1: str, m2: str) -> str:
    """
    Subtract digit string m2 from m1 with borrow propagation.

    Args:
        m1: Minuend, numerically >= m2
        m2: Subtrahend

    Returns:
        Difference as a canonical digit string, at least "0"

    Raises:
        InvalidInputError: If m1 is smaller than m2
    """
    if compare_magnitudes(m1, m2) is Ordering.LESS:
        raise InvalidInputError((m1, m2), "Minuend smaller than subtrahend")

    digits = []
    borrow = 0
    offset = len(m1) - len(m2)

    for i in range(len(m1) - 1, -1, -1):
        diff = int(m1[i]) - borrow
        if i - offset >= 0:
            diff -= int(m2[i - offset])
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        digits.append(str(diff))

    return "".join(reversed(digits)).lstrip("0") or "0"


def multiply_by_digit(magnitude: str, digit: int) -> str:
    """Multiply a digit string by a single decimal digit."""
    if digit == 0 or magnitude == "0":
        return "0"

    digits = []
    carry = 0
    for char in reversed(magnitude):
        product = int(char) * digit + carry
        digits.append(str(product % 10))
        carry = product // 10

    if carry:
        digits.append(str(carry))

    return "".join(reversed(digits))


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Add two integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, ZERO) == a
        - Inverse: add(a, negate(a)) == ZERO

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b
    """
    if a.negative == b.negative:
        return BigInt(add_magnitudes(a.magnitude, b.magnitude), a.negative)

    order = compare_magnitudes(a.magnitude, b.magnitude)
    if order is Ordering.EQUAL:
        return ZERO
    if order is Ordering.GREATER:
        return BigInt(subtract_magnitudes(a.magnitude, b.magnitude), a.negative)
    return BigInt(subtract_magnitudes(b.magnitude, a.magnitude), b.negative)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """
    Subtract b from a.

    Properties:
        - Self-inverse: subtract(a, a) == ZERO
        - Relationship to add: subtract(a, b) == add(a, negate(b))

    Args:
        a: Minuend
        b: Subtrahend

    Returns:
        Difference of a and b
    """
    return add(a, BigInt(b.magnitude, not b.negative))


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """
    Multiply two integers digit by digit.

    Each digit of b, least significant first, scales a's magnitude; the
    partial products are shifted into place and summed.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, ONE) == a
        - Zero: multiply(a, ZERO) == ZERO

    Args:
        a: First factor
        b: Second factor

    Returns:
        Product of a and b
    """
    if a.is_zero or b.is_zero:
        return ZERO

    product = "0"
    for place, char in enumerate(reversed(b.magnitude)):
        partial = multiply_by_digit(a.magnitude, int(char))
        if partial == "0":
            continue
        product = add_magnitudes(product, partial + "0" * place)

    return BigInt(product, a.negative != b.negative)


def divide(a: BigInt, b: BigInt) -> DivisionResult:
    """
    Divide a by b, truncating toward zero.

    Long division where each quotient digit is found by repeatedly
    subtracting |b| from the running remainder, so the result matches
    plain repeated subtraction of |b| from |a|.

    Properties:
        - Reconstruction: a == quotient * b + remainder
        - Quotient sign: negative iff exactly one operand is negative
        - Remainder sign: that of a (zero when exact)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        DivisionResult with quotient and remainder

    Raises:
        DivisionByZeroError: If b is zero
    """
    validate_non_zero(b, a)

    divisor = b.magnitude
    remainder = "0"
    quotient_digits = []

    for char in a.magnitude:
        remainder = (remainder + char).lstrip("0") or "0"
        count = 0
        while compare_magnitudes(remainder, divisor) is not Ordering.LESS:
            remainder = subtract_magnitudes(remainder, divisor)
            count += 1
        quotient_digits.append(str(count))

    quotient = BigInt("".join(quotient_digits), a.negative != b.negative)
    return DivisionResult(quotient, BigInt(remainder, a.negative))


def modulo(a: BigInt, b: BigInt) -> BigInt:
    """
    Remainder of the truncating division of a by b.

    The result takes the sign of a.

    Raises:
        DivisionByZeroError: If b is zero
    """
    return divide(a, b).remainder


def power(base: BigInt, exponent: BigInt) -> BigInt:
    """
    Raise base to a non-negative integer power by repeated multiplication.

    power(ZERO, ZERO) is ONE.

    Args:
        base: The base number
        exponent: The exponent, counted with a BigInt loop counter

    Returns:
        base raised to the power of exponent

    Raises:
        NegativeExponentError: If exponent is negative
    """
    if exponent.negative:
        raise NegativeExponentError(exponent)

    logger.debug("power: %s ^ %s", base, exponent)
    result = ONE
    counter = ZERO
    while counter < exponent:
        result = multiply(result, base)
        counter = add(counter, ONE)

    return result


def factorial(n: BigInt) -> BigInt:
    """
    Product 1 * 2 * ... * n, with factorial(ZERO) == ONE.

    Raises:
        NegativeInputError: If n is negative
    """
    if n.negative:
        raise NegativeInputError(n)

    logger.debug("factorial: %s!", n)
    result = ONE
    i = ONE
    while i <= n:
        result = multiply(result, i)
        i = add(i, ONE)

    return result


def logarithm(num: BigInt, base: BigInt) -> BigInt:
    """
    Floor of the base-``base`` logarithm of num.

    Multiplies a running power of base until it exceeds num; the loop
    overshoots by one step, so the count is decremented at the end.

    Args:
        num: A positive integer
        base: An integer greater than one

    Returns:
        The largest k with base ** k <= num

    Raises:
        InvalidInputError: If num is not positive or base is not above one
    """
    validate_positive(num, "Logarithm argument")
    if base.negative or base.is_zero or base == ONE:
        raise InvalidInputError(base, "Logarithm base must be greater than 1")

    logger.debug("logarithm: log%s(%s)", base, num)
    current = ONE
    count = ZERO
    while current <= num:
        current = multiply(current, base)
        count = add(count, ONE)

    return subtract(count, ONE)
