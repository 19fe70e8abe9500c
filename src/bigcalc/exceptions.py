"""Custom exceptions for the bigcalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidFormatError(CalculatorError):
    """Raised when a numeric string or expression is malformed."""

    def __init__(self, value: Any, reason: str = "Invalid number") -> None:
        super().__init__(reason, value)
        self.reason = reason


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero.

    ``undefined`` is True for 0/0 and False for n/0.
    """

    def __init__(self, numerator: Any) -> None:
        self.numerator = numerator
        self.undefined = str(numerator) == "0"
        reason = "Division by zero is undefined" if self.undefined else "Division by zero"
        super().__init__(reason, numerator)


class NegativeExponentError(CalculatorError):
    """Raised when a power is requested with a negative exponent."""

    def __init__(self, exponent: Any) -> None:
        super().__init__("Negative exponents not supported", exponent)
        self.exponent = exponent


class NegativeInputError(CalculatorError):
    """Raised when the factorial of a negative number is requested."""

    def __init__(self, value: Any) -> None:
        super().__init__("Factorial of negative number undefined", value)


class InvalidInputError(CalculatorError):
    """Raised when an operand lies outside an operation's domain."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidBaseError(CalculatorError):
    """Raised when a radix is outside the supported range."""

    def __init__(self, base: Any, min_base: int = 2, max_base: int = 36) -> None:
        super().__init__(f"Base must be between {min_base} and {max_base}", base)
        self.base = base
        self.min_base = min_base
        self.max_base = max_base


class InvalidDigitError(CalculatorError):
    """Raised when a character is not a valid digit for the given base."""

    def __init__(self, char: str, base: int) -> None:
        super().__init__(f"Invalid digit for base {base}", repr(char))
        self.char = char
        self.base = base


class InvalidCommandError(CalculatorError):
    """Raised when a command line matches no known command form."""

    def __init__(self, value: Any, reason: str = "Invalid input format") -> None:
        super().__init__(reason, value)
        self.reason = reason
