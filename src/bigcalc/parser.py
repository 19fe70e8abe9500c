"""Parsing of fraction literals, logarithm calls and base-conversion commands."""

from bigcalc.bigint import parse_int
from bigcalc.config import DEFAULT_LOG_BASE
from bigcalc.exceptions import InvalidCommandError, InvalidFormatError
from bigcalc.fraction import Fraction, create_fraction

BASE_COMMANDS = ("to_base", "from_base")


def parse_fraction(text: str) -> Fraction:
    """
    Parse "N/D" into a simplified fraction.

    Whitespace around either side of the slash is ignored.

    Raises:
        InvalidFormatError: If there is no '/' or a side is not an integer
        DivisionByZeroError: If D is zero
    """
    numerator, slash, denominator = text.partition("/")
    if not slash:
        raise InvalidFormatError(text, "Invalid fraction format")

    return create_fraction(parse_int(numerator.strip()), parse_int(denominator.strip()))


def parse_log_expr(text: str) -> tuple[str, str]:
    """
    Split "logB(N)" into its base and argument strings.

    The base defaults to "10" for "log(N)". Both parts are stripped of
    surrounding whitespace but not validated as numbers.

    Returns:
        (base, number), or ("", "") if the text is not a logarithm call
    """
    text = text.strip()
    if not text.startswith("log"):
        return "", ""

    open_paren = text.find("(")
    close_paren = text.rfind(")")
    if open_paren < 0 or close_paren <= open_paren:
        return "", ""

    base = text[3:open_paren].strip() or DEFAULT_LOG_BASE
    number = text[open_paren + 1 : close_paren].strip()
    if not number:
        return "", ""

    return base, number


def parse_base_command(text: str) -> tuple[str, str, str]:
    """
    Split "to_base N B" or "from_base N B" into its parts.

    Returns:
        (command, number, base) as raw strings

    Raises:
        InvalidCommandError: If the command word or an operand is missing
    """
    parts = text.split()
    if not parts or parts[0] not in BASE_COMMANDS:
        raise InvalidCommandError(text, "Not a base conversion command")
    if len(parts) != 3:
        raise InvalidCommandError(text, f"Usage: {parts[0]} <number> <base>")

    command, number, base = parts
    return command, number, base
