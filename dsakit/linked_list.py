"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list with a tail pointer."""

    def __init__(self, values: Iterable = ()):
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the start."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete_middle(self) -> Any:
        """Remove the node at position ``len // 2`` and return its value.

        Lists with fewer than two nodes are left unchanged and None is returned.
        """
        if self._head is None or self._head.next is None:
            return None
        previous = None
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            previous = slow
            slow = slow.next
        previous.next = slow.next
        if slow is self._tail:
            self._tail = previous
        self._size -= 1
        return slow.data

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*(str(value) for value in self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"