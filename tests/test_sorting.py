from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.stacks import PushSwap
from pushswap.sorting import (
    chunk_width,
    is_sorted,
    push_to_a,
    push_to_b,
    solve,
    sort_five,
    sort_four,
    sort_stack,
    sort_three,
)


def _replay(values, operations):
    machine = PushSwap(values)
    for operation in operations:
        getattr(machine, operation)()
    return machine


def test_is_sorted_empty_is_false():
    assert is_sorted([]) is False


def test_is_sorted_single_and_ordered():
    assert is_sorted([5]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1, 3]) is False


def test_chunk_width_pinned():
    assert chunk_width(100) == 17


def test_chunk_width_non_decreasing():
    widths = [chunk_width(n) for n in range(0, 600)]
    assert widths == sorted(widths)
    assert widths[0] == 0


def test_sort_three_reverse():
    machine = PushSwap([2, 1, 0])
    sort_three(machine)
    assert list(machine.a) == [0, 1, 2]
    assert machine.operations == ["ra", "sa"]


@pytest.mark.parametrize("order", list(permutations(range(3))))
def test_sort_three_all_orders(order):
    machine = PushSwap(order)
    sort_three(machine)
    assert list(machine.a) == [0, 1, 2]
    assert len(machine.operations) <= 2


@pytest.mark.parametrize("order", list(permutations(range(4))))
def test_sort_four_all_orders(order):
    machine = PushSwap(order)
    sort_four(machine)
    assert list(machine.a) == [0, 1, 2, 3]
    assert not machine.b


@pytest.mark.parametrize("order", list(permutations(range(5))))
def test_sort_five_all_orders(order):
    machine = PushSwap(order)
    sort_five(machine)
    assert list(machine.a) == [0, 1, 2, 3, 4]
    assert not machine.b
    assert len(machine.operations) <= 12


def test_push_to_b_then_a():
    order = [7, 3, 9, 0, 5, 1, 8, 2, 6, 4]
    machine = PushSwap(order)
    push_to_b(machine)
    assert not machine.a
    assert sorted(machine.b) == list(range(10))
    push_to_a(machine)
    assert list(machine.a) == list(range(10))
    assert not machine.b


def test_sort_stack_leaves_sorted_input_alone():
    machine = PushSwap([0, 1, 2, 3, 4, 5, 6])
    sort_stack(machine)
    assert machine.operations == []
    assert list(machine.a) == [0, 1, 2, 3, 4, 5, 6]


def test_sort_stack_two():
    machine = PushSwap([1, 0])
    sort_stack(machine)
    assert machine.operations == ["sa"]


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([3, 1, 3])


def test_solve_sorted_input_gives_nothing():
    assert solve([-5, 0, 12]) == []


@settings(max_examples=60, deadline=None)
@given(
    st.lists(
        st.integers(min_value=-(2**31), max_value=2**31 - 1),
        unique=True,
        min_size=1,
        max_size=60,
    )
)
def test_solve_replays_to_sorted(values):
    operations = solve(values)
    machine = _replay(values, operations)
    assert list(machine.a) == sorted(values)
    assert not machine.b


def test_solve_hundred_numbers_replays():
    values = [(i * 37) % 101 - 50 for i in range(100)]
    operations = solve(values)
    machine = _replay(values, operations)
    assert list(machine.a) == sorted(values)
    assert set(operations) <= {"sa", "pa", "pb", "ra", "rb", "rra", "rrb"}