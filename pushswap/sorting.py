"""Choosing and performing the moves that sort stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice, pairwise, takewhile

from pushswap.parsing import InputError, has_duplicate
from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values never decrease."""
    return all(left <= right for left, right in pairwise(values))


def _index_of(values: list[int], position: int) -> int:
    value = values[position]
    # Walk onwards from the next element, wrapping round, up to the first
    # element equal to this one, and count the smaller ones on the way.
    cycle = values[position + 1:] + values[:position + 1]
    return sum(1 for other in takewhile(lambda o: o != value, cycle) if other < value)


def index_values(values: Iterable[int]) -> list[int]:
    """Give each value its rank: how many of the values are smaller.

    For distinct values the result is a permutation of ``range(len)``.
    """
    items = list(values)
    return [_index_of(items, position) for position in range(len(items))]


def max_bits(values: Iterable[int]) -> int:
    """One more than the number of bits of the largest value."""
    items = list(values)
    if not items:
        raise ValueError("no values")
    largest = max(items)
    if largest < 0:
        raise ValueError("largest value is negative")
    return largest.bit_length() + 1


def sort_three(stacks: Stacks) -> None:
    """Sort the top three elements of ``a`` with at most two moves."""
    if len(stacks.a) < 3:
        raise IndexError("stack a holds fewer than three elements")
    x, y, z = islice(stacks.a, 3)
    if y < x < z and y < z:
        stacks.sa()
    elif x > y > z:
        stacks.sa()
        stacks.rra()
    elif x > y and x > z and z > y:
        stacks.ra()
    elif x < y and y > z and z > x:
        stacks.sa()
        stacks.ra()
    elif y > x > z:
        stacks.rra()


def _bring_min_to_top(stacks: Stacks, window: int) -> None:
    head = list(islice(stacks.a, window))
    smallest = min(head)
    position = head.index(smallest) + 1
    while stacks.a[0] != smallest:
        if position <= 2:
            stacks.ra()
        else:
            stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort five elements of ``a`` by parking the two smallest on ``b``."""
    _bring_min_to_top(stacks, 5)
    stacks.pb()
    _bring_min_to_top(stacks, 4)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by the bits of each element's rank, lowest bit first."""
    values = list(stacks.a)
    if has_duplicate(values):
        raise ValueError("radix sort needs distinct values")
    rank = dict(zip(values, index_values(values)))
    size = len(values)
    bit = 0
    while not is_sorted(stacks.a):
        for _ in range(size):
            if rank[stacks.a[0]] >> bit & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
        bit += 1


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values``.

    Nothing is done for one value or values already in order; otherwise
    repeated values raise ``InputError``.
    """
    items = list(values)
    if len(items) <= 1 or is_sorted(items):
        return []
    if has_duplicate(items):
        raise InputError("duplicate values")
    stacks = Stacks(items)
    if len(items) == 3:
        sort_three(stacks)
    elif len(items) == 5:
        sort_five(stacks, )
    elif len(items) == 2:
        stacks.sa()
    else:
        radix_sort(stacks)
    return stacks.moves