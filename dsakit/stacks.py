"""Stacks, queue/stack adapters and recursive stack utilities.

Where a stack is a plain list, its top is the last item.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from dsakit.errors import CapacityError, EmptyError


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"negative capacity {capacity}")
        self.capacity = capacity
        self._items: list = []

    def push(self, value: Any) -> None:
        """Push ``value``; raise CapacityError if full."""
        if len(self._items) >= self.capacity:
            raise CapacityError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item; raise EmptyError if empty."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Push ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item; raise EmptyError if empty."""
        if self._top is None:
            raise EmptyError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top item; raise EmptyError if empty."""
        if self._top is None:
            raise EmptyError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """A first-in first-out queue made of an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list = []
        self._outbox: list = []

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise EmptyError if empty."""
        if not self._outbox:
            if not self._inbox:
                raise EmptyError("queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class QueueStack:
    """A last-in first-out stack made of two first-in first-out queues."""

    def __init__(self) -> None:
        self._main: deque = deque()
        self._spare: deque = deque()

    def push(self, value: Any) -> None:
        """Push ``value`` on top."""
        self._main.append(value)

    def _take_last(self) -> Any:
        if not self._main:
            raise EmptyError("stack is empty")
        while len(self._main) > 1:
            self._spare.append(self._main.popleft())
        return self._main.popleft()

    def pop(self) -> Any:
        """Remove and return the top item; raise EmptyError if empty."""
        last = self._take_last()
        self._main, self._spare = self._spare, self._main
        return last

    def top(self) -> Any:
        """Return the top item; raise EmptyError if empty."""
        last = self._take_last()
        self._spare.append(last)
        self._main, self._spare = self._spare, self._main
        return last

    def __len__(self) -> int:
        return len(self._main)


def reverse_stack(stack: list) -> None:
    """Reverse ``stack`` in place, so the old bottom becomes the top."""
    stack.reverse()


def sort_stack(stack: list) -> None:
    """Sort ``stack`` in place so the largest item is on top."""
    stack.sort()


def stacks_equal(first: Iterable, second: Iterable) -> bool:
    """Return True if both stacks hold the same items in the same order."""
    return list(first) == list(second)