# pushswap

`pushswap` sorts a list of distinct integers using two stacks, **a** and
**b**, and a small fixed set of operations. It prints the operations it
performs, one per line. Replaying them in order on the input sorts stack
**a** in ascending order, with the smallest number on top.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
pushswap 3 2 1
```

The same command can be started with `python -m pushswap.cli 3 2 1`.

Numbers can be given as separate arguments or inside one quoted argument,
separated by spaces:

```
pushswap "4 67 3 87 23"
```

The first number given is the top of stack **a**. A number is an optional
`-` followed by digits (a `+` sign is not accepted), at most 11 characters
long, and must lie in the 32-bit signed range.

### Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of a, of b, or of both |
| `pa` / `pb` | move the top of b onto a, or the top of a onto b |
| `ra` / `rb` / `rr` | rotate up: the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate down: the bottom element goes to the top |

### Strategy

- two numbers: a single swap
- three numbers: a fixed sequence of at most two operations
- five numbers: push the two smallest to b, sort the remaining three, push back
- anything else: a binary radix sort on each number's rank, lowest bit first

### Errors and exit status

The program writes `Error` to standard error when an argument is not a
whole number, is outside the 32-bit signed range, holds only spaces, or
when the numbers contain a repeat and are not already in order.

Nothing is printed when there are no arguments, when an argument is empty,
or when the input has a single number or is already in non-decreasing
order. The exit status is 0 in every case.

## Library use

```python
from pushswap.sorting import solve

solve([3, 2, 1])  # ['sa', 'rra']
```

- `pushswap.sorting.solve(values)` returns the list of operation names that
  sorts `values`, and raises `pushswap.parsing.InputError` on repeated
  values. The module also provides `is_sorted`, `index_values` (each
  value's rank), `max_bits`, `sort_three`, `sort_five` and `radix_sort`.
- `pushswap.parsing.parse_args(args)` turns command-line strings into
  integers. It raises `InputError` for invalid input and `EmptyArgument`
  for an empty argument. `parse_int`, `is_numeric`, `split_words` and
  `has_duplicate` are the helpers it is built from.
- `pushswap.stacks.Stacks(values)` holds the two stacks as deques `a` and
  `b` (top on the left) and provides each operation as a method. Every
  operation performed is appended to its `moves` list. Pushing from,
  rotating or reverse rotating an empty stack raises `IndexError`; a swap
  on a stack with fewer than two elements changes nothing but is still
  recorded.

## What it does not do

The package only produces a list of operations. It has no command that
reads a list of operations and checks whether it sorts a given input.