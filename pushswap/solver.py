"""Sorting stack a with the fewest practical push_swap operations."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence

from .parsing import InputError, arguments_to_tokens, assign_indices, parse_numbers
from .stack import Node, Operation, Stacks


def _set_positions(stack: deque[Node]) -> None:
    for position, node in enumerate(stack):
        node.position = position


def _lowest_index_node(stack: Iterable[Node]) -> Node:
    return min(stack, key=lambda node: node.index)


def sort_three(stacks: Stacks) -> None:
    """Sort stack a when it holds at most three elements."""
    if stacks.is_sorted():
        return
    a = stacks.a
    highest = max(node.index for node in a)
    if a[0].index == highest:
        stacks.apply(Operation.RA)
    elif a[1].index == highest:
        stacks.apply(Operation.RRA)
    if a[0].index > a[1].index:
        stacks.apply(Operation.SA)


def push_all_keep_three(stacks: Stacks) -> None:
    """Move everything but three elements to stack b, smaller half first."""
    size = len(stacks.a)
    pushed = 0
    if size > 6:
        half = size // 2
        for _ in range(size):
            if pushed >= half:
                break
            if stacks.a[0].index <= half:
                stacks.apply(Operation.PB)
                pushed += 1
            else:
                stacks.apply(Operation.RA)
    while size - pushed > 3:
        stacks.apply(Operation.PB)
        pushed += 1


def set_target_positions(stacks: Stacks) -> None:
    """For every node of b, note where in a it has to be inserted.

    The target is the node of a with the smallest index above the node's
    own; if there is none, it is the node of a with the smallest index.
    """
    _set_positions(stacks.a)
    _set_positions(stacks.b)
    target = 0
    for node in stacks.b:
        if stacks.a:
            larger = [candidate for candidate in stacks.a if candidate.index > node.index]
            target = _lowest_index_node(larger or stacks.a).position
        node.target_position = target


def _signed_distance(position: int, size: int) -> int:
    return position if position <= size // 2 else position - size


def compute_costs(stacks: Stacks) -> None:
    """Compute the rotations needed in a and b to bring each node of b home.

    A positive cost means forward rotations, a negative one reverse rotations.
    """
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for node in stacks.b:
        node.cost_b = _signed_distance(node.position, size_b)
        node.cost_a = _signed_distance(node.target_position, size_a)


def _select_move(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    while cost_a < 0 and cost_b < 0:
        stacks.apply(Operation.RRR)
        cost_a += 1
        cost_b += 1
    while cost_a > 0 and cost_b > 0:
        stacks.apply(Operation.RR)
        cost_a -= 1
        cost_b -= 1
    while cost_a or cost_b:
        if cost_a > 0:
            stacks.apply(Operation.RA)
            cost_a -= 1
        elif cost_a < 0:
            stacks.apply(Operation.RRA)
            cost_a += 1
        if cost_b > 0:
            stacks.apply(Operation.RB)
            cost_b -= 1
        elif cost_b < 0:
            stacks.apply(Operation.RRB)
            cost_b += 1
    stacks.apply(Operation.PA)


def move_cheapest(stacks: Stacks) -> None:
    """Bring the cheapest node of b into place in a and push it there."""
    cheapest = min(stacks.b, key=lambda node: abs(node.cost_a) + abs(node.cost_b))
    _select_move(stacks, cheapest.cost_a, cheapest.cost_b)


def _shift(stacks: Stacks) -> None:
    size = len(stacks.a)
    _set_positions(stacks.a)
    low = _lowest_index_node(stacks.a).position
    if low > size // 2:
        for _ in range(size - low):
            stacks.apply(Operation.RRA)
    else:
        for _ in range(low):
            stacks.apply(Operation.RA)


def sort_stacks(stacks: Stacks) -> None:
    """Sort a stack a of more than three elements using stack b."""
    push_all_keep_three(stacks)
    sort_three(stacks)
    while stacks.b:
        set_target_positions(stacks)
        compute_costs(stacks)
        move_cheapest(stacks)
    if not stacks.is_sorted():
        _shift(stacks)


def push_swap(stacks: Stacks) -> None:
    """Sort stack a, choosing the method by its size."""
    if stacks.is_sorted():
        return
    size = len(stacks.a)
    if size == 2:
        stacks.apply(Operation.SA)
    elif size == 3:
        sort_three(stacks)
    elif size > 3:
        sort_stacks(stacks)


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort the given values."""
    values = list(values)
    stacks = Stacks(values, assign_indices(values), record=True)
    push_swap(stacks)
    return list(stacks.operations)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    tokens = arguments_to_tokens(args)
    if not tokens:
        return 1
    try:
        values = parse_numbers(tokens)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())