"""
Arbitrary-precision integer and rational arithmetic.

This package provides:
- BigInt, an immutable signed integer of unlimited size
- Schoolbook add, subtract, multiply and divide with derived operations
- Conversion to and from bases 2 to 36
- Fraction, a rational number kept in lowest terms
- A command router and REPL built on top of these
"""

__version__ = "0.1.0"

from bigcalc.base_conversion import from_base, to_base
from bigcalc.bigint import (
    ONE,
    ZERO,
    BigInt,
    Ordering,
    compare,
    copy,
    format_int,
    negate,
    parse_int,
)
from bigcalc.core import Calculator, CommandRecord
from bigcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidBaseError,
    InvalidCommandError,
    InvalidDigitError,
    InvalidFormatError,
    InvalidInputError,
    NegativeExponentError,
    NegativeInputError,
)
from bigcalc.expression import evaluate, tokenize
from bigcalc.fraction import (
    Fraction,
    add_fractions,
    create_fraction,
    divide_fractions,
    format_fraction,
    gcd,
    multiply_fractions,
    subtract_fractions,
)
from bigcalc.operations import (
    DivisionResult,
    add,
    divide,
    factorial,
    logarithm,
    modulo,
    multiply,
    power,
    subtract,
)
from bigcalc.parser import parse_base_command, parse_fraction, parse_log_expr
from bigcalc.validators import validate_base, validate_number

__all__ = [
    "ONE",
    "ZERO",
    "BigInt",
    "Calculator",
    "CalculatorError",
    "CommandRecord",
    "DivisionByZeroError",
    "DivisionResult",
    "Fraction",
    "InvalidBaseError",
    "InvalidCommandError",
    "InvalidDigitError",
    "InvalidFormatError",
    "InvalidInputError",
    "NegativeExponentError",
    "NegativeInputError",
    "Ordering",
    "add",
    "add_fractions",
    "compare",
    "copy",
    "create_fraction",
    "divide",
    "divide_fractions",
    "evaluate",
    "factorial",
    "format_fraction",
    "format_int",
    "from_base",
    "gcd",
    "logarithm",
    "modulo",
    "multiply",
    "multiply_fractions",
    "negate",
    "parse_base_command",
    "parse_fraction",
    "parse_int",
    "parse_log_expr",
    "power",
    "subtract",
    "subtract_fractions",
    "to_base",
    "tokenize",
    "validate_base",
    "validate_number",
]
