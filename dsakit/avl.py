"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """One node of an AVL tree; a new node is a leaf of height 1."""

    key: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _insert(node: AVLNode | None, key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _leftmost(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: AVLNode | None, key: Any) -> AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _leftmost(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A set of distinct keys kept in a height-balanced binary search tree."""

    def __init__(self, keys: Iterable = ()):
        self.root: AVLNode | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key``; a key already present is left alone."""
        if key in self:
            return
        self.root = _insert(self.root, key)
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key``; a key that is absent is ignored."""
        if key not in self:
            return
        self.root = _delete(self.root, key)
        self._size -= 1

    def preorder(self) -> list:
        """Return the keys in preorder: node, left subtree, right subtree."""
        keys = []
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            keys.append(node.key)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return keys

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator:
        """Yield the keys in ascending order."""
        pending: list[AVLNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"