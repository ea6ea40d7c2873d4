"""The two stacks of the push_swap puzzle and the operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """The eleven moves allowed on the two stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Node:
    """One element of a stack, with the bookkeeping the solver fills in."""

    value: int
    index: int = 0
    position: int = 0
    target_position: int = 0
    cost_a: int = 0
    cost_b: int = 0


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    return all(left <= right for left, right in pairwise(values))


def _swap(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def _push(source: deque[Node], destination: deque[Node]) -> bool:
    if not source:
        return False
    destination.appendleft(source.popleft())
    return True


def _rotate(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _rotate_reverse(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stack a and stack b; the top of each stack is its first element.

    With ``record`` set, every operation that is carried out is appended to
    ``operations``. A single-stack move that changes nothing is not recorded;
    the combined moves ss, rr and rrr always are.
    """

    def __init__(self, values: Iterable[int], indices: Iterable[int] | None = None,
                 record: bool = False) -> None:
        values = list(values)
        indices = [0] * len(values) if indices is None else list(indices)
        if len(indices) != len(values):
            raise ValueError("values and indices differ in length")
        self.a: deque[Node] = deque(Node(value, index) for value, index in zip(values, indices))
        self.b: deque[Node] = deque()
        self.record = record
        self.operations: list[Operation] = []

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation; a string such as ``"rra"`` is accepted too."""
        op = Operation(operation)
        if op is Operation.SA:
            done = _swap(self.a)
        elif op is Operation.SB:
            done = _swap(self.b)
        elif op is Operation.SS:
            _swap(self.a)
            _swap(self.b)
            done = True
        elif op is Operation.PA:
            done = _push(self.b, self.a)
        elif op is Operation.PB:
            done = _push(self.a, self.b)
        elif op is Operation.RA:
            done = _rotate(self.a)
        elif op is Operation.RB:
            done = _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.a)
            _rotate(self.b)
            done = True
        elif op is Operation.RRA:
            done = _rotate_reverse(self.a)
        elif op is Operation.RRB:
            done = _rotate_reverse(self.b)
        else:
            _rotate_reverse(self.a)
            _rotate_reverse(self.b)
            done = True
        if done and self.record:
            self.operations.append(op)

    def is_sorted(self) -> bool:
        """Return True if stack a is in ascending order from the top."""
        return is_sorted(self.values_a())

    def values_a(self) -> list[int]:
        """The values of stack a, top first."""
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        """The values of stack b, top first."""
        return [node.value for node in self.b]