# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints each operation it performs, one per line.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of `a` or `b` |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb` | rotate: the top element goes to the bottom |
| `rra`, `rrb` | reverse rotate: the bottom element goes to the top |

The numbers are first replaced by their ranks (0 for the smallest), then
sorted. Two to five numbers are sorted with short fixed sequences. Larger
inputs use a chunked "butterfly" strategy: ranks go to `b` in a window whose
width is `isqrt(n) + n.bit_length()`, then come back to `a` largest first,
rotating `b` the shorter way each time.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 2 1
```

prints

```
ra
sa
```

The same can be run as `python -m pushswap.cli 3 2 1`.

Numbers may be given as separate arguments or inside one quoted argument
separated by spaces (`pushswap "4 67 3" 87 23`). Leading zeros and a leading
`+` are accepted. Input that is already sorted, or a single number, produces
no output.

The command writes `Error` to standard error and exits with status 1 when:

- an argument holds anything other than digits, spaces, `+` and `-`;
- a sign is not directly followed by a digit, or is not preceded by a space
  (unless it opens the argument);
- a value lies outside the 32-bit signed range;
- a value appears twice;
- no number is given at all.

An argument made only of spaces counts as the number 0.

## Library

```python
from pushswap.sorting import solve

operations = solve([3, 2, 1])
print(operations)  # ['ra', 'sa']
```

`solve` raises `ValueError` if a value appears twice.

The pieces are also available on their own:

- `pushswap.parsing`: `is_valid_argument`, `parse_int`, `split_numbers`,
  `parse_arguments`, `rank` and the `InputError` exception (a subclass of
  `ValueError`).
- `pushswap.stacks`: the `PushSwap` machine, which holds both stacks as
  deques `a` and `b` (top at index 0) and appends the name of every applied
  operation to its `operations` list, plus `min_index` and `max_index`.
  Pushes from an empty stack and rotations of fewer than two numbers are
  ignored and not recorded; swaps are always recorded.
- `pushswap.sorting`: `is_sorted`, `chunk_width`, `sort_three`, `sort_four`,
  `sort_five`, `push_to_b`, `push_to_a`, `sort_stack` and `solve`.

## Tests

```
pip install ".[test]"
pytest
```