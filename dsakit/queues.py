"""Queues: a bounded double-ended queue, an array-style queue and a linked queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from dsakit.errors import CapacityError, EmptyError


class BoundedDeque:
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"negative capacity {capacity}")
        self.capacity = capacity
        self._items: deque = deque()

    def is_full(self) -> bool:
        """Return True if no more items can be added."""
        return len(self._items) >= self.capacity

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front; raise CapacityError if full."""
        if self.is_full():
            raise CapacityError("deque overflow")
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back; raise CapacityError if full."""
        if self.is_full():
            raise CapacityError("deque overflow")
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("deque underflow")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("deque underflow")
        return self._items.pop()

    def front(self) -> Any:
        """Return the front item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("deque underflow")
        return self._items[0]

    def back(self) -> Any:
        """Return the back item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("deque underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Yield the items from front to back."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedDeque(capacity={self.capacity}, items={list(self._items)!r})"


class BoundedQueue:
    """A first-in first-out queue over a fixed row of ``capacity`` slots.

    Slots freed by ``pop`` are not reused: once ``capacity`` items have been
    pushed, further pushes fail until the queue has been emptied completely,
    which makes every slot available again.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: deque = deque()
        self._slots_used = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the rear; raise CapacityError when the slots run out."""
        if not self._items:
            self._slots_used = 0
        elif self._slots_used >= self.capacity:
            raise CapacityError("queue overflow")
        self._items.append(value)
        self._slots_used += 1

    def pop(self) -> Any:
        """Remove and return the front item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("queue underflow")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self.capacity}, items={list(self._items)!r})"


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedQueue:
    """An unbounded first-in first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise EmptyError if empty."""
        if self._front is None:
            raise EmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the front item; raise EmptyError if empty."""
        if self._front is None:
            raise EmptyError("queue is empty")
        return self._front.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


def reverse_queue(queue: deque) -> None:
    """Reverse ``queue`` in place using only front removals and rear appends."""
    items = list(queue)
    queue.clear()
    queue.extend(reversed(items))