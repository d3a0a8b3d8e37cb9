"""Classic comparison sorts and the partition schemes behind quicksort.

Every sort accepts any iterable and returns a new list; the input is left
untouched. The partition functions work in place on a list, as quicksort
needs them to.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any

__all__ = [
    "bubble_sort",
    "bubble_sort_early_exit",
    "insertion_sort",
    "insertion_sort_sentinel",
    "cocktail_sort",
    "merge",
    "merge_sort",
    "lomuto_partition",
    "first_pivot_partition",
    "quick_sort",
]


class _Bottom:
    """A sentinel that orders below every other value."""

    def __lt__(self, other: Any) -> bool:
        return True

    def __gt__(self, other: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return "<bottom>"


_BOTTOM = _Bottom()


def _bubble(items: Iterable, early_exit: bool) -> list:
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1, i, -1):
            if result[j] < result[j - 1]:
                result[j], result[j - 1] = result[j - 1], result[j]
                swapped = True
        if early_exit and not swapped:
            break
    return result


def bubble_sort(items: Iterable) -> list:
    """Sort by bubbling the smallest remaining item to the front each pass."""
    return _bubble(items, early_exit=False)


def bubble_sort_early_exit(items: Iterable) -> list:
    """Bubble sort that stops after the first pass with no swaps."""
    return _bubble(items, early_exit=True)


def insertion_sort(items: Iterable) -> list:
    """Sort by inserting each item into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def insertion_sort_sentinel(items: Iterable) -> list:
    """Insertion sort with a bottom sentinel in front, so the inner loop
    needs no bounds check."""
    work: list = [_BOTTOM, *items]
    for i in range(2, len(work)):
        key = work[i]
        j = i - 1
        while work[j] > key:
            work[j + 1] = work[j]
            j -= 1
        work[j + 1] = key
    return work[1:]


def cocktail_sort(items: Iterable) -> list:
    """Bidirectional bubble sort: alternate forward and backward passes."""
    result = list(items)
    start, end = 0, len(result) - 1
    while True:
        swapped = False
        for i in range(start, end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
        end -= 1
        swapped = False
        for i in range(end, start, -1):
            if result[i] < result[i - 1]:
                result[i], result[i - 1] = result[i - 1], result[i]
                swapped = True
        start += 1
        if not swapped:
            break
    return result


def merge(left: Iterable, right: Iterable) -> list:
    """Merge two sorted sequences into one sorted list.

    On ties the item from ``right`` is taken first.
    """
    left, right = list(left), list(right)
    merged: list = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable) -> list:
    """Top-down merge sort; the left half takes the middle item."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _check_bounds(items: MutableSequence, low: int, high: int) -> None:
    if not 0 <= low <= high < len(items):
        raise IndexError(
            f"partition bounds {low}..{high} outside a sequence of length {len(items)}"
        )


def lomuto_partition(items: MutableSequence, low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around its last item.

    Returns the pivot's final index: everything before it is smaller,
    everything after it is not.
    """
    _check_bounds(items, low, high)
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def first_pivot_partition(items: MutableSequence, low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around its first item.

    Returns the pivot's final index.
    """
    _check_bounds(items, low, high)
    pivot = items[low]
    i = low + 1
    for j in range(low + 1, high + 1):
        if items[j] < pivot:
            items[i], items[j] = items[j], items[i]
            i += 1
    items[low], items[i - 1] = items[i - 1], items[low]
    return i - 1


def quick_sort(items: Iterable) -> list:
    """Quicksort using the last-item (Lomuto) partition."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = lomuto_partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result