"""Classic comparison sorts and an ordering check.

Every sort returns a new list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise


def bubble_sort(values: Iterable) -> list:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def cyclic_sort(values: Iterable[int]) -> list[int]:
    """Place every value ``v`` with ``1 <= v <= len(values)`` at position ``v - 1``.

    For a permutation of ``1..n`` this sorts the list; values outside that
    range, and repeated values, are left wherever the swaps put them.
    """
    items = list(values)
    size = len(items)
    i = 0
    while i < size:
        target = items[i] - 1
        if 0 <= target < size and items[i] != items[target]:
            items[i], items[target] = items[target], items[i]
        else:
            i += 1
    return items


def insertion_sort(values: Iterable) -> list:
    """Sort by inserting each item behind the sorted items not greater than it."""
    items: list = []
    for value in values:
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list, low: int, high: int) -> int:
    boundary = low
    for i in range(low, high + 1):
        if items[i] <= items[high]:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    return boundary - 1


def quick_sort(values: Iterable) -> list:
    """Quicksort using the last item of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def selection_sort(values: Iterable) -> list:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def is_strictly_increasing(values: Iterable) -> bool:
    """Return True if every item is less than the one after it."""
    return all(a < b for a, b in pairwise(values))