"""Calculator class routing command lines onto the arithmetic operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bigcalc.base_conversion import from_base, to_base
from bigcalc.bigint import format_int, parse_int
from bigcalc.config import MAX_BASE, MAX_INPUT, MIN_BASE
from bigcalc.exceptions import InvalidBaseError, InvalidCommandError, InvalidFormatError
from bigcalc.expression import evaluate
from bigcalc.fraction import (
    add_fractions,
    divide_fractions,
    format_fraction,
    multiply_fractions,
    subtract_fractions,
)
from bigcalc.operations import (
    add,
    divide,
    factorial,
    logarithm,
    modulo,
    multiply,
    power,
    subtract,
)
from bigcalc.parser import BASE_COMMANDS, parse_base_command, parse_fraction, parse_log_expr
from bigcalc.validators import validate_number

if TYPE_CHECKING:
    from collections.abc import Callable

    from bigcalc.bigint import BigInt
    from bigcalc.fraction import Fraction

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Arbitrary Precision Calculator
Available operations:
  clear                Clear the screen
Basic Arithmetic:
  <num1> + <num2>      Addition
  <num1> - <num2>      Subtraction
  <num1> * <num2>      Multiplication
  <num1> / <num2>      Division
  <num1> % <num2>      Modulo
  <num1> ^ <num2>      Power
  (<expr>)             Expression with precedence and parentheses
Fraction Operations:
  <num1>/<den1> + <num2>/<den2>   Fraction addition
  <num1>/<den1> - <num2>/<den2>   Fraction subtraction
  <num1>/<den1> * <num2>/<den2>   Fraction multiplication
  <num1>/<den1> / <num2>/<den2>   Fraction division

Advanced Operations:
  <num>!                   Factorial
  log<base>(<num>)         Logarithm (base 10 if omitted)
  to_base <num> <base>     Convert to base
  from_base <num> <base>   Convert from base

Other Commands:
  help
  exit
"""

INTEGER_OPERATIONS: dict[str, Callable[[BigInt, BigInt], BigInt]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "%": modulo,
    "^": power,
}

FRACTION_OPERATIONS: dict[str, Callable[[Fraction, Fraction], Fraction]] = {
    "+": add_fractions,
    "-": subtract_fractions,
    "*": multiply_fractions,
    "/": divide_fractions,
}


@dataclass(frozen=True)
class CommandRecord:
    """A successfully executed command and its rendered output."""

    command: str
    output: str

    def __str__(self) -> str:
        return f"{self.command} => {self.output}"


def _parse_base(text: str) -> int:
    try:
        validate_number(text)
    except InvalidFormatError:
        raise InvalidBaseError(text, MIN_BASE, MAX_BASE) from None
    return int(text)


class Calculator:
    """
    Evaluates calculator command lines and keeps a history of results.

    Example:
        >>> calc = Calculator()
        >>> calc.execute("2 ^ 100")
        '1267650600228229401496703205376'
        >>> calc.execute("1/2 + 1/12")
        '7/12'
    """

    def __init__(self) -> None:
        self._history: list[CommandRecord] = []

    @property
    def history(self) -> list[CommandRecord]:
        """List of all commands executed successfully."""
        return self._history.copy()

    def clear_history(self) -> Calculator:
        """Forget all recorded commands."""
        self._history.clear()
        return self

    def execute(self, line: str) -> str:
        """
        Run one command line and return its printable output.

        Args:
            line: Raw input, e.g. "12 * 34", "log2(8)", "5!"

        Returns:
            The output text; empty for a blank line

        Raises:
            CalculatorError: If the command is malformed or an operation fails
        """
        command = line.strip()
        if not command:
            return ""
        if len(command) > MAX_INPUT:
            raise InvalidFormatError(f"{len(command)} characters", "Input too long")

        output = self._dispatch(command)
        self._history.append(CommandRecord(command=command, output=output))
        return output

    def _dispatch(self, command: str) -> str:
        if command == "help":
            return HELP_TEXT

        if command.split(maxsplit=1)[0] in BASE_COMMANDS:
            return self._base_conversion(command)

        if command.startswith("log"):
            return self._logarithm(command)

        if command.endswith("!"):
            logger.debug("routing %r to factorial", command)
            return format_int(factorial(parse_int(command[:-1].strip())))

        parts = command.split()
        if len(parts) == 3:
            first, op, second = parts
            if "/" in first and "/" in second:
                return self._fraction_operation(first, op, second)
            if op in INTEGER_OPERATIONS or op == "/":
                return self._integer_operation(first, op, second)

        logger.debug("routing %r to expression evaluator", command)
        return format_int(evaluate(command))

    def _base_conversion(self, command: str) -> str:
        name, number, base_text = parse_base_command(command)
        base = _parse_base(base_text)
        logger.debug("routing %r to %s", command, name)
        if name == "to_base":
            return to_base(parse_int(number), base)
        return format_int(from_base(number, base))

    def _logarithm(self, command: str) -> str:
        base, number = parse_log_expr(command)
        if not base or not number:
            raise InvalidCommandError(command, "Usage: log<base>(<number>)")
        logger.debug("routing %r to logarithm", command)
        return format_int(logarithm(parse_int(number), parse_int(base)))

    def _fraction_operation(self, first: str, op: str, second: str) -> str:
        operation = FRACTION_OPERATIONS.get(op)
        if operation is None:
            raise InvalidCommandError(op, "Unsupported fraction operation")
        logger.debug("routing %s %s %s to fraction arithmetic", first, op, second)
        return format_fraction(operation(parse_fraction(first), parse_fraction(second)))

    def _integer_operation(self, first: str, op: str, second: str) -> str:
        a = parse_int(first)
        b = parse_int(second)
        if op == "/":
            quotient, remainder = divide(a, b)
            return f"{format_int(quotient)}\nRemainder: {format_int(remainder)}"
        return format_int(INTEGER_OPERATIONS[op](a, b))

    def __repr__(self) -> str:
        return f"Calculator(history_len={len(self._history)})"
