"""Short counting and greedy puzzles: products, grids, chargers, chess
draws and note diversity."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "max_product_after_increments",
    "reduce_grid",
    "count_charging_minutes",
    "max_draws",
    "max_draws_bruteforce",
    "bit_clearing_sequence",
    "diversity_after_increment",
    "diversity_with_set",
]

_INCREMENTS = 5


def max_product_after_increments(a: int, b: int, c: int) -> int:
    """Largest ``a * b * c`` after adding 1 to one of the numbers five times."""
    return max(
        (a + x) * (b + y) * (c + _INCREMENTS - x - y)
        for x in range(_INCREMENTS + 1)
        for y in range(_INCREMENTS + 1 - x)
    )


def reduce_grid(grid: Sequence[str], k: int) -> list[str]:
    """Shrink an ``n`` by ``n`` grid made of ``k`` by ``k`` uniform blocks
    to one cell per block, taking each block's top-left cell."""
    if k < 1:
        raise ValueError("block size must be positive")
    size = len(grid) // k
    return ["".join(row[::k][:size]) for row in list(grid)[::k][:size]]


def count_charging_minutes(a: int, b: int) -> int:
    """Minutes two joysticks last when one charger is moved each minute.

    Each minute the charged joystick gains 1 percent and the other loses 2;
    the charger always goes to the one with less charge. The game ends when
    either runs out, or when both are at 1 percent.
    """
    minutes = 0
    while a > 0 and b > 0:
        if a == 1 and b == 1:
            break
        minutes += 1
        if a > b:
            a -= 2
            b += 1
        else:
            b -= 2
            a += 1
    return minutes


def max_draws(p1: int, p2: int, p3: int) -> int | None:
    """Most drawn games that could give three players these scores
    (``p1 <= p2 <= p3``), or None when the scores are impossible.

    A win gives 2 points and a draw 1 to each player, so the total is even.
    """
    total = p1 + p2 + p3
    if total % 2:
        return None
    return min(total // 2, p1 + p2)


def max_draws_bruteforce(p1: int, p2: int, p3: int) -> int | None:
    """Same as :func:`max_draws`, found by trying every count of draws
    between each pair of players."""
    if (p1 + p2 + p3) % 2:
        return None
    best = 0
    # a: draws between players 1 and 2, b: 1 and 3, c: 2 and 3.
    for a in range(p1 + 1):
        for b in range(p1 - a + 1):
            for c in range(min(p2 - a, p3 - b) + 1):
                rests = (p1 - a - b, p2 - a - c, p3 - b - c)
                if all(rest % 2 == 0 for rest in rests):
                    best = max(best, a + b + c)
    return best


def bit_clearing_sequence(n: int) -> list[int]:
    """``n`` followed by the values got by clearing its set bits one at a
    time from the lowest, stopping before zero."""
    if n < 0:
        raise ValueError("n must not be negative")
    sequence = []
    while n:
        sequence.append(n)
        n &= n - 1
    return sequence


def diversity_after_increment(values: Sequence[int]) -> int:
    """Most distinct notes after raising any of the sorted notes by at most 1.

    Works from the largest note down, raising a note whenever the value
    above it is still free.
    """
    notes = list(values)
    counts = Counter(notes)
    distinct = len(counts)
    for note in reversed(notes):
        if counts[note + 1] == 0:
            counts[note + 1] += 1
            counts[note] -= 1
            if counts[note] != 0:
                distinct += 1
    return distinct


def diversity_with_set(values: Iterable[int]) -> int:
    """Most distinct notes, raising a sorted note by 1 whenever it is taken."""
    seen: set[int] = set()
    for note in values:
        seen.add(note + 1 if note in seen else note)
    return len(seen)