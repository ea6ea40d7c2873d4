"""Reading and validating the integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    return [word for word in text.split(separator) if word]


def is_valid_number(token: str) -> bool:
    """Return True for an optional sign followed by one or more digits."""
    return _NUMBER.fullmatch(token) is not None


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Convert tokens to integers, rejecting bad syntax, overflow and duplicates."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not is_valid_number(token):
            raise InputError(f"not a number: {token!r}")
        number = int(token)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if number in seen:
            raise InputError(f"duplicate: {token!r}")
        seen.add(number)
        numbers.append(number)
    return numbers


def assign_indices(values: Sequence[int]) -> list[int]:
    """Rank the values: the smallest gets index 0, the largest len - 1.

    The ranking treats the value INT_MIN as already ranked and gives it
    index 1; the remaining values then take the indices from 1 upward.
    """
    ranked = sorted(value for value in values if value != INT_MIN)
    start = 1 if len(ranked) != len(values) else 0
    rank = {value: start + position for position, value in enumerate(ranked)}
    return [1 if value == INT_MIN else rank[value] for value in values]


def arguments_to_tokens(args: Sequence[str]) -> list[str]:
    """Turn command-line arguments into number tokens.

    A single argument is split on spaces. An empty list means there is
    nothing to work on.
    """
    if not args or (len(args) == 1 and not args[0]):
        return []
    if len(args) == 1:
        return split_words(args[0], " ")
    return list(args)