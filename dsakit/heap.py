"""Binary max-heaps stored in plain lists."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.errors import CapacityError, EmptyError


def heapify(values: list, size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items."""
    if not 0 <= size <= len(values):
        raise ValueError(f"size {size} out of range for {len(values)} items")
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def _sift_up(values: list, index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if values[parent] >= values[index]:
            return
        values[index], values[parent] = values[parent], values[index]
        index = parent


def build_heap(values: list) -> None:
    """Turn ``values`` into a max-heap in place, sifting down from the last parent."""
    for index in reversed(range(len(values) // 2)):
        heapify(values, len(values), index)


def build_heap_top_down(values: list) -> None:
    """Turn ``values`` into a max-heap in place by inserting items one at a time."""
    for index in range(1, len(values)):
        _sift_up(values, index)


class MaxHeap:
    """A max-heap holding at most ``capacity`` items."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"negative capacity {capacity}")
        self.capacity = capacity
        self._items: list = []

    def push(self, value) -> None:
        """Add ``value``; raise CapacityError if the heap is full."""
        if len(self._items) >= self.capacity:
            raise CapacityError("heap overflow")
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self):
        """Remove and return the largest item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Yield the items in storage order."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MaxHeap(capacity={self.capacity}, items={self._items!r})"