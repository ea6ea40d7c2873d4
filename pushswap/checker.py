"""Checking that a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .linereader import read_lines
from .parsing import InputError, arguments_to_tokens, parse_numbers
from .stack import Operation, Stacks

_COMMANDS = {f"{operation.value}\n": operation for operation in Operation}


def check(values: Iterable[int], commands: Iterable[str]) -> bool:
    """Apply newline-terminated commands and report whether a ends sorted and b empty.

    Raises InputError on a line that is not exactly one known command.
    """
    stacks = Stacks(values)
    for line in commands:
        try:
            operation = _COMMANDS[line]
        except KeyError:
            raise InputError(f"unknown command: {line!r}") from None
        stacks.apply(operation)
    return stacks.is_sorted() and not stacks.b


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    tokens = arguments_to_tokens(args)
    if not tokens:
        return 1
    try:
        values = parse_numbers(tokens)
        result = check(values, read_lines(sys.stdin.buffer))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())