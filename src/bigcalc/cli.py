"""Command-line interface: one-shot evaluation or an interactive loop.

Provides the `bigcalc` command:
- `bigcalc` starts the read-eval-print loop
- `bigcalc -e "2 ^ 64" -e "20!"` evaluates commands and exits
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from bigcalc import __version__
from bigcalc.config import CLEAR_SEQUENCE, PROMPT, configure_logging
from bigcalc.core import Calculator
from bigcalc.exceptions import CalculatorError

EXIT_COMMANDS = frozenset({"exit", "quit"})


def run_commands(calc: Calculator, commands: list[str], out: TextIO) -> int:
    """Execute each command in order, stopping at the first error."""
    for command in commands:
        try:
            output = calc.execute(command)
        except CalculatorError as e:
            print(f"Error: {e}", file=out)
            return 1
        if output:
            print(output, file=out)
    return 0


def repl(calc: Calculator, stdin: TextIO, out: TextIO) -> int:
    """
    Read commands until exit or end of input.

    Errors are reported and the loop continues.
    """
    print("Welcome to Arbitrary Precision Calculator", file=out)
    print("Type 'help' for available commands or 'exit' to quit", file=out)

    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break

        command = line.strip()
        if command in EXIT_COMMANDS:
            break
        if command == "clear":
            print(CLEAR_SEQUENCE, end="", file=out, flush=True)
            continue

        try:
            output = calc.execute(command)
        except CalculatorError as e:
            print(f"Error: {e}", file=out)
            continue

        if output:
            print(output, file=out)

    print("Exiting...", file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigcalc",
        description="Arbitrary-precision integer and fraction calculator",
    )
    parser.add_argument(
        "-e",
        "--eval",
        action="append",
        dest="commands",
        metavar="COMMAND",
        help="Evaluate a command and exit (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: $BIGCALC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    calc = Calculator()
    if args.commands:
        return run_commands(calc, args.commands, sys.stdout)
    return repl(calc, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
