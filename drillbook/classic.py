"""Maximum contiguous subarray sum and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import accumulate

__all__ = [
    "Move",
    "max_subarray_sum_cubic",
    "max_subarray_sum_quadratic",
    "max_subarray_sum",
    "hanoi_moves",
]


def max_subarray_sum_cubic(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, summing every run from scratch.

    An empty run counts, so the result is never below zero.
    """
    values = list(values)
    best = 0
    for start in range(len(values)):
        for stop in range(start + 1, len(values) + 1):
            best = max(best, sum(values[start:stop]))
    return best


def max_subarray_sum_quadratic(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, extending each start incrementally."""
    values = list(values)
    best = 0
    for start in range(len(values)):
        best = max(best, 0, *accumulate(values[start:]))
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run in linear time (Kadane)."""
    best = current = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


@dataclass(frozen=True)
class Move:
    """One disk moved from one rod to another."""

    disk: int
    source: int
    target: int

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def hanoi_moves(disks: int, source: int, target: int, spare: int) -> Iterator[Move]:
    """Yield the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 1:
        raise ValueError("at least one disk is needed")
    if disks == 1:
        yield Move(1, source, target)
        return
    yield from hanoi_moves(disks - 1, source, spare, target)
    yield Move(disks, source, target)
    yield from hanoi_moves(disks - 1, spare, target, source)