"""Conversion between BigInt values and digit strings in bases 2 to 36."""

import logging

from bigcalc.bigint import ZERO, BigInt
from bigcalc.config import DIGIT_ALPHABET
from bigcalc.exceptions import InvalidDigitError, InvalidFormatError
from bigcalc.operations import add, divide, multiply
from bigcalc.validators import validate_base

logger = logging.getLogger(__name__)

DIGIT_VALUES = {char: value for value, char in enumerate(DIGIT_ALPHABET)}
DIGIT_VALUES.update({char.lower(): value for char, value in DIGIT_VALUES.items()})


def char_to_value(char: str) -> int:
    """
    Numeric value of a digit character.

    '0'-'9' map to 0-9 and letters (either case) map to 10-35.

    Returns:
        The value, or -1 if the character is not a digit in any base
    """
    return DIGIT_VALUES.get(char, -1)


def to_base(num: BigInt, base: int) -> str:
    """
    Render num in the given base, using 0-9 then A-Z for digit values.

    Args:
        num: The value to convert
        base: Target radix

    Returns:
        Digit string, most significant first, with '-' for negatives

    Raises:
        InvalidBaseError: If base is outside [2, 36]
    """
    validate_base(base)

    if num.is_zero:
        return "0"

    logger.debug("to_base: %s in base %d", num, base)
    divisor = BigInt.from_int(base)
    current = abs(num)
    digits = []

    while not current.is_zero:
        current, remainder = divide(current, divisor)
        digits.append(DIGIT_ALPHABET[int(remainder)])

    if num.negative:
        digits.append("-")

    return "".join(reversed(digits))


def from_base(text: str, base: int) -> BigInt:
    """
    Parse a digit string written in the given base.

    Letters are accepted in either case; an optional leading '-' negates
    the result.

    Args:
        text: Digit string to parse
        base: Source radix

    Returns:
        The parsed value

    Raises:
        InvalidBaseError: If base is outside [2, 36]
        InvalidFormatError: If text has no digits
        InvalidDigitError: If a character is not a digit of the base
    """
    validate_base(base)

    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits:
        raise InvalidFormatError(text, "Empty number")

    logger.debug("from_base: '%s' from base %d", text, base)
    radix = BigInt.from_int(base)
    result = ZERO

    for char in digits:
        value = char_to_value(char)
        if value < 0 or value >= base:
            raise InvalidDigitError(char, base)
        result = add(multiply(result, radix), BigInt.from_int(value))

    return -result if negative else result
