"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each on the left.

    Every operation is recorded by name in ``moves``, in the order it was
    performed. A swap on a stack with fewer than two elements changes
    nothing but is still recorded. Pushing from, rotating or reverse
    rotating an empty stack raises ``IndexError``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: deque[int], target: deque[int], name: str) -> None:
        if not source:
            raise IndexError(f"{name}: nothing to push")
        target.appendleft(source.popleft())

    @staticmethod
    def _rotate(stack: deque[int], name: str) -> None:
        if not stack:
            raise IndexError(f"{name}: stack is empty")
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int], name: str) -> None:
        if not stack:
            raise IndexError(f"{name}: stack is empty")
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the first two elements of ``a``."""
        self._swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the first two elements of ``b``."""
        self._swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the first two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a, "pa")
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b, "pb")
        self.moves.append("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a, "ra")
        self.moves.append("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b, "rb")
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        if not self.a or not self.b:
            raise IndexError("rr: both stacks must be non-empty")
        self.a.rotate(-1)
        self.b.rotate(-1)
        self.moves.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a, "rra")
        self.moves.append("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b, "rrb")
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Reverse rotate both stacks."""
        if not self.a or not self.b:
            raise IndexError("rrr: both stacks must be non-empty")
        self.a.rotate(1)
        self.b.rotate(1)
        self.moves.append("rrr")