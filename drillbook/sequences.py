"""Number sequences built greedily or by halving and bit tricks."""

from __future__ import annotations

__all__ = [
    "split_into_distinct",
    "blender_time",
    "profitable_deposit",
    "halving_sum",
    "or_chain_sequence",
]


def split_into_distinct(n: int) -> list[int]:
    """Split ``n`` into as many distinct positive parts as possible.

    Takes 1, 2, 3, ... while they fit, then adds what is left over to the
    last part. The parts come out in increasing order.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    parts: list[int] = []
    remaining = n
    step = 1
    while remaining >= step:
        parts.append(step)
        remaining -= step
        step += 1
    if remaining > 0:
        parts[-1] += remaining
    return parts


def blender_time(n: int, x: int, y: int) -> int:
    """Seconds to blend ``n`` fruits when ``y`` go in and ``x`` are blended
    each second: ``n`` divided by the smaller rate, rounded down."""
    rate = min(x, y)
    if rate <= 0:
        raise ValueError("rates must be positive")
    return n // rate


def profitable_deposit(a: int, b: int) -> int:
    """Most coins that can go into the profitable deposit.

    Putting ``t`` coins into the other deposit lowers the requirement ``b``
    by ``2 * t``; the best is to put in exactly ``b - a`` coins when that
    leaves anything.
    """
    if a >= b:
        return a
    shortfall = b - a
    if shortfall > a:
        return 0
    return a - shortfall


def halving_sum(n: int) -> int:
    """Sum of ``n``, ``n // 2``, ``n // 4``, ... down to and including 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    total = 1
    while n != 1:
        total += n
        n //= 2
    return total


def or_chain_sequence(n: int) -> list[int]:
    """Values from 1 onwards, each the previous OR-ed with its successor,
    as long as they do not exceed ``n``."""
    sequence: list[int] = []
    current = 1
    while current <= n:
        sequence.append(current)
        current |= current + 1
    return sequence