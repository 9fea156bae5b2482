"""Strategies that sort stack a with the push-swap operations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from pushswap.parsing import rank
from pushswap.stacks import PushSwap, max_index, min_index


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether ``values`` ascend from top to bottom.

    An empty stack does not count as sorted.
    """
    values = list(values)
    if not values:
        return False
    return all(low <= high for low, high in zip(values, values[1:]))


def chunk_width(size: int) -> int:
    """Width of the window of ranks pushed to b in one pass for ``size`` numbers."""
    return math.isqrt(size) + size.bit_length()


def sort_three(machine: PushSwap) -> None:
    """Sort exactly three numbers on a using a rotation and at most one swap."""
    first, second, third = machine.a
    if first > second and first > third:
        machine.ra()
    elif second > first and second > third:
        machine.rra()
    if machine.a[0] > machine.a[1]:
        machine.sa()


def _bring_min_to_top(machine: PushSwap, forward_limit: int) -> None:
    size = len(machine.a)
    index = min_index(machine.a)
    if index < forward_limit:
        for _ in range(index):
            machine.ra()
    else:
        for _ in range(size - index):
            machine.rra()


def sort_four(machine: PushSwap) -> None:
    """Sort exactly four numbers on a, parking the smallest on b meanwhile."""
    _bring_min_to_top(machine, 2)
    machine.pb()
    sort_three(machine)
    machine.pa()


def sort_five(machine: PushSwap) -> None:
    """Sort exactly five numbers on a, parking the smallest on b meanwhile."""
    _bring_min_to_top(machine, 3)
    machine.pb()
    sort_four(machine)
    machine.pa()


def push_to_b(machine: PushSwap) -> None:
    """Move every rank from a to b in a loose butterfly order.

    Ranks already passed go to the bottom of b, ranks within the window go
    to its top, and the others are rotated past on a.
    """
    remaining = len(machine.a)
    width = chunk_width(remaining)
    counter = 0
    while remaining:
        top = machine.a[0]
        if top <= counter:
            machine.pb()
            machine.rb()
        elif top <= counter + width:
            machine.pb()
        else:
            machine.ra()
            continue
        counter += 1
        remaining -= 1


def push_to_a(machine: PushSwap) -> None:
    """Bring back the largest number of b to a until b is empty."""
    while machine.b:
        size = len(machine.b)
        index = max_index(machine.b)
        if index < (size + 1) // 2:
            for _ in range(index):
                machine.rb()
        else:
            for _ in range(size - index):
                machine.rrb()
        machine.pa()


def sort_stack(machine: PushSwap) -> None:
    """Sort stack a, picking a strategy by its size; a sorted stack is left alone."""
    size = len(machine.a)
    if is_sorted(machine.a):
        return
    if size == 2:
        if machine.a[0] > machine.a[1]:
            machine.sa()
    elif size == 3:
        sort_three(machine)
    elif size == 4:
        sort_four(machine)
    elif size == 5:
        sort_five(machine)
    else:
        push_to_b(machine)
        push_to_a(machine)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` (top first) in ascending order.

    Raises :class:`ValueError` if a value appears twice.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    machine = PushSwap(rank(values))
    sort_stack(machine)
    return machine.operations