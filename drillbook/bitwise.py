"""Short problems solved with bit operations: XOR, AND, OR and bit counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import and_, or_, xor

__all__ = [
    "trailing_zeros",
    "operations_to_all_odd",
    "xor_of_others",
    "special_matrix",
    "max_min_difference",
    "xor_equal_candidate",
    "min_time_both_skills",
    "max_zero_and_groups",
    "odd_one_out",
    "max_or_with",
]

_INT_MAX = 2**31 - 1

_PATTERN = (
    (0, 1, 1, 0),
    (1, 0, 0, 1),
    (1, 0, 0, 1),
    (0, 1, 1, 0),
)


def trailing_zeros(value: int) -> int:
    """Number of zero bits below the lowest set bit of ``value``."""
    if value == 0:
        raise ValueError("zero has no lowest set bit")
    return (value & -value).bit_length() - 1


def operations_to_all_odd(values: Iterable[int]) -> int:
    """Fewest merges or halvings that leave every number odd.

    With at least one odd number each even one is merged away in one step.
    With none, the even number with the fewest trailing zeros is halved
    until odd, and the rest are then merged into it.
    """
    values = list(values)
    evens = [v for v in values if v % 2 == 0]
    if not evens:
        return 0
    if len(evens) == len(values):
        return min(trailing_zeros(v) for v in evens) + len(evens) - 1
    return len(evens)


def xor_of_others(values: Iterable[int]) -> int:
    """Return the first number equal to the XOR of all the others."""
    values = list(values)
    if not values:
        raise ValueError("no numbers given")
    total = reduce(xor, values)
    for value in values:
        if total ^ value == value:
            return value
    raise ValueError("no number is the XOR of the others")


def special_matrix(rows: int, cols: int) -> list[list[int]]:
    """A 0/1 grid tiled from a 4x4 block in which every cell has exactly
    two orthogonal neighbours of the other value (for even sizes)."""
    return [[_PATTERN[r % 4][c % 4] for c in range(cols)] for r in range(rows)]


def max_min_difference(values: Iterable[int]) -> int:
    """OR of all numbers minus their AND, the AND starting from a 31-bit mask."""
    values = list(values)
    high = reduce(or_, values, 0)
    low = reduce(and_, values, _INT_MAX)
    return high - low


def xor_equal_candidate(values: Iterable[int]) -> int | None:
    """A number ``x`` such that XOR of every ``v ^ x`` is zero, or None.

    For an odd count the XOR of all numbers works. For an even count ``x``
    cancels out, so 1 is given when the XOR is already zero and None
    otherwise.
    """
    values = list(values)
    if not values:
        raise ValueError("no numbers given")
    total = reduce(xor, values)
    if len(values) % 2:
        return total
    return 1 if total == 0 else None


def min_time_both_skills(books: Iterable[tuple[int, str]]) -> int | None:
    """Least reading time to gain both skills from (time, skills) books.

    Skills are written as two bits: "01", "10" or "11"; any other string is
    ignored. Returns None when the two skills cannot both be had.
    """
    by_kind: dict[str, list[int]] = {"01": [], "10": [], "11": []}
    for time, skills in books:
        if skills in by_kind:
            by_kind[skills].append(time)
    options = []
    if by_kind["11"]:
        options.append(min(by_kind["11"]))
    if by_kind["01"] and by_kind["10"]:
        options.append(min(by_kind["01"]) + min(by_kind["10"]))
    return min(options) if options else None


def max_zero_and_groups(values: Sequence[int]) -> int:
    """Most consecutive groups the numbers split into while keeping the
    sum of the groups' ANDs minimal."""
    values = list(values)
    if not values:
        raise ValueError("no numbers given")
    groups = 1
    current = values[0]
    last = len(values) - 1
    for i, value in enumerate(values):
        current &= value
        if current == 0 and i < last:
            groups += 1
            current = values[i + 1]
    if current != 0:
        groups -= 1
    return max(groups, 1)


def odd_one_out(a: int, b: int, c: int) -> int:
    """Of three numbers where two are equal, return the other one."""
    return a ^ b ^ c


def max_or_with(z: int, values: Iterable[int]) -> int:
    """Largest ``z | x`` over the given numbers."""
    values = list(values)
    if not values:
        raise ValueError("no numbers given")
    return max(z | x for x in values)