# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed set of
operations. The package provides a solver that prints the operations it uses and a
checker that replays a sequence of operations and reports whether it sorted the input.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` upwards (the top goes to the bottom)   |
| `rb`  | rotate `b` upwards                                |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` downwards (the bottom goes to the top) |
| `rrb` | rotate `b` downwards                              |
| `rrr` | `rra` and `rrb` together                          |

A move on a stack with too few elements leaves it unchanged.

## Installation

```
pip install .
```

## Command line

The numbers are given as separate arguments or as one argument separated by spaces.

```
push-swap 3 2 1 5 4
push-swap "3 2 1 5 4"
```

The solver prints one operation per line; an input that is already sorted prints
nothing. Input that is not an integer (an optional sign followed by digits), is
outside the 32-bit signed range, or appears twice makes it print `Error` to standard
error and exit with status 1. With no numbers at all it exits with status 1 and
prints nothing.

The checker reads operations, one per line, from standard input, applies them, and
prints `OK` if `a` is sorted and `b` is empty, `KO` otherwise:

```
push-swap 3 2 1 | pushswap-checker 3 2 1
```

A line that is not exactly one known operation, or invalid numbers, give `Error` on
standard error and exit status 1.

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import check

operations = solve([3, 2, 1, 5, 4])
print([str(op) for op in operations])
print(check([3, 2, 1, 5, 4], (f"{op}\n" for op in operations)))  # True
```

- `pushswap.stack`: `Operation` (the eleven moves), `Stacks` (the two stacks;
  `apply`, `is_sorted`, `values_a`, `values_b`, and an `operations` list filled
  in when created with `record=True`), `Node`, and `is_sorted(values)`.
- `pushswap.parsing`: `split_words`, `is_valid_number`, `parse_numbers`
  (raises `InputError`), `assign_indices` and `arguments_to_tokens`.
- `pushswap.solver`: `solve(values)` returns the list of operations; `push_swap`,
  `sort_three`, `sort_stacks` and the other steps work on a `Stacks` directly.
- `pushswap.checker`: `check(values, commands)` takes newline-terminated command
  lines and returns a bool, raising `InputError` on an unknown command.
- `pushswap.linereader`: `LineReader` and `read_lines` read lines, newline
  included, from a file descriptor or binary file through a fixed-size buffer
  (42 bytes by default).
- `pushswap.formatter`: `format_printf` formats the conversions
  `%c %s %p %d %i %u %x %X %%`; `printf` writes the result to standard output and
  returns its length.

## Tests

```
pip install ".[test]"
pytest
```