"""
Tokenizer and operator-precedence evaluator for integer expressions.

Supports + - * / % ^ and parentheses over non-negative integer literals.
``/`` is the truncating quotient and ``%`` the matching remainder; ``^``
binds tightest and groups to the right.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from bigcalc.bigint import BigInt
from bigcalc.exceptions import InvalidFormatError
from bigcalc.operations import add, divide, modulo, multiply, power, subtract

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    """A single lexical element of an expression."""

    type: TokenType
    text: str

    def __str__(self) -> str:
        return self.text


PRECEDENCE = {"^": 3, "*": 2, "/": 2, "%": 2, "+": 1, "-": 1}
RIGHT_ASSOCIATIVE = frozenset("^")

OPERATIONS: dict[str, Callable[[BigInt, BigInt], BigInt]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": lambda a, b: divide(a, b).quotient,
    "%": modulo,
    "^": power,
}


def tokenize(expr: str) -> list[Token]:
    """
    Split an expression into tokens, skipping whitespace.

    Raises:
        InvalidFormatError: On any character that is not a digit,
            operator or parenthesis
    """
    tokens: list[Token] = []
    number: list[str] = []

    def flush() -> None:
        if number:
            tokens.append(Token(TokenType.NUMBER, "".join(number)))
            number.clear()

    for char in expr:
        if char in "0123456789":
            number.append(char)
            continue

        flush()
        if char.isspace():
            continue
        if char == "(":
            tokens.append(Token(TokenType.LPAREN, char))
        elif char == ")":
            tokens.append(Token(TokenType.RPAREN, char))
        elif char in PRECEDENCE:
            tokens.append(Token(TokenType.OPERATOR, char))
        else:
            raise InvalidFormatError(char, "Unexpected character in expression")

    flush()
    return tokens


def _should_reduce(top: str, incoming: str) -> bool:
    if top == "(":
        return False
    if incoming in RIGHT_ASSOCIATIVE:
        return PRECEDENCE[top] > PRECEDENCE[incoming]
    return PRECEDENCE[top] >= PRECEDENCE[incoming]


def _reduce(values: list[BigInt], operators: list[str], expr: str) -> None:
    if len(values) < 2:
        raise InvalidFormatError(expr, "Missing operand")
    right = values.pop()
    left = values.pop()
    values.append(OPERATIONS[operators.pop()](left, right))


def evaluate(expr: str) -> BigInt:
    """
    Evaluate an expression with the usual precedence rules.

    Example:
        >>> str(evaluate("2 + 3 * (4 - 1) ^ 2"))
        '29'

    Raises:
        InvalidFormatError: If the expression is empty or malformed
        DivisionByZeroError: If a '/' or '%' has a zero right operand
        NegativeExponentError: If a '^' has a negative right operand
    """
    tokens = tokenize(expr)
    if not tokens:
        raise InvalidFormatError(expr, "Empty expression")

    logger.debug("evaluate: %s", " ".join(map(str, tokens)))
    values: list[BigInt] = []
    operators: list[str] = []
    expect_operand = True

    for token in tokens:
        if token.type is TokenType.NUMBER:
            if not expect_operand:
                raise InvalidFormatError(expr, "Missing operator")
            values.append(BigInt(token.text))
            expect_operand = False
        elif token.type is TokenType.LPAREN:
            if not expect_operand:
                raise InvalidFormatError(expr, "Missing operator")
            operators.append("(")
        elif token.type is TokenType.RPAREN:
            if expect_operand:
                raise InvalidFormatError(expr, "Missing operand")
            while operators and operators[-1] != "(":
                _reduce(values, operators, expr)
            if not operators:
                raise InvalidFormatError(expr, "Unbalanced parentheses")
            operators.pop()
        else:
            if expect_operand:
                raise InvalidFormatError(expr, "Missing operand")
            while operators and _should_reduce(operators[-1], token.text):
                _reduce(values, operators, expr)
            operators.append(token.text)
            expect_operand = True

    if expect_operand:
        raise InvalidFormatError(expr, "Missing operand")

    while operators:
        if operators[-1] == "(":
            raise InvalidFormatError(expr, "Unbalanced parentheses")
        _reduce(values, operators, expr)

    return values[0]
