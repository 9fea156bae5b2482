"""Validation of command-line arguments and their conversion into a stack."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ALLOWED_CHARS = frozenset("1234567890 -+")
_LEADING_NUMBER = re.compile(r" *([+-]?)([0-9]*)")
_NEXT_WORD = re.compile(r" *[^ ]* *")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack of integers."""


def is_valid_argument(text: str) -> bool:
    """Tell whether one argument holds only space-separated signed integers.

    Only digits, spaces and signs may appear. A sign must be followed by a
    digit and, unless it opens the argument, preceded by a space.
    """
    if not set(text) <= _ALLOWED_CHARS:
        return False
    for position, char in enumerate(text):
        if char not in "+-":
            continue
        if not text[position + 1 : position + 2].isdigit():
            return False
        if position > 0 and text[position - 1] != " ":
            return False
    return True


def parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, after any leading spaces.

    Text with no digits there reads as 0. A value outside the 32-bit signed
    range raises :class:`InputError`.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text.strip()!r}")
    return value


def split_numbers(text: str) -> list[int]:
    """Read every space-separated integer in ``text``, in order.

    A non-empty argument made only of spaces reads as a single 0.
    """
    numbers = []
    while text:
        numbers.append(parse_int(text))
        text = text[_NEXT_WORD.match(text).end() :]
    return numbers


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the values of stack a, top first.

    Raises :class:`InputError` if an argument is malformed, a value does not
    fit in 32 bits, no value is given, or a value appears twice.
    """
    args = list(args)
    for argument in args:
        if not is_valid_argument(argument):
            raise InputError(f"invalid argument: {argument!r}")
    values = [number for argument in args for number in split_numbers(argument)]
    if not values:
        raise InputError("no numbers given")
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers given")
    return values


def rank(values: Iterable[int]) -> list[int]:
    """Replace every value by its position in the sorted order of all values."""
    values = list(values)
    positions: dict[int, int] = {}
    for position, value in enumerate(sorted(values)):
        positions.setdefault(value, position)
    return [positions[value] for value in values]