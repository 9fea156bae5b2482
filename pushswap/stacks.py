"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class PushSwap:
    """Stacks ``a`` and ``b`` (top at index 0) with a log of applied operations.

    Every operation that takes effect is appended by name to ``operations``.
    Swaps are logged even when the stack holds fewer than two numbers; pushes
    from an empty stack and rotations of fewer than two numbers are not.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={list(self.a)}, b={list(self.b)})"

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    def _push(self, source: deque[int], target: deque[int], name: str) -> None:
        if not source:
            return
        target.appendleft(source.popleft())
        self.operations.append(name)

    def _rotate(self, stack: deque[int], steps: int, name: str) -> None:
        if len(stack) < 2:
            return
        stack.rotate(steps)
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the two top numbers of a."""
        self._swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the two top numbers of b."""
        self._swap(self.b)
        self.operations.append("sb")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b, "pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a, -1, "ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b, -1, "rb")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._rotate(self.a, 1, "rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._rotate(self.b, 1, "rrb")


def min_index(values: Sequence[int]) -> int:
    """Position of the first occurrence of the smallest value."""
    return list(values).index(min(values))


def max_index(values: Sequence[int]) -> int:
    """Position of the first occurrence of the largest value."""
    return list(values).index(max(values))