"""Plain binary trees: construction from value streams, traversals and measures.

In the value streams ``-1`` (or ``None``) stands for a missing child.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

NULL = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _is_null(value: Any) -> bool:
    return value is None or value == NULL


def _next_value(values: Iterator) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("value stream ended before the tree was complete") from None


def build_preorder(values: Iterable) -> TreeNode | None:
    """Build a tree from values in preorder, each missing child written as -1."""
    stream = iter(values)

    def build() -> TreeNode | None:
        value = _next_value(stream)
        if _is_null(value):
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable) -> TreeNode:
    """Build a tree from the root value followed by children level by level.

    For every node, in the order nodes are created, the stream gives its left
    and then its right child, -1 meaning none.
    """
    stream = iter(values)
    root = TreeNode(_next_value(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _next_value(stream)
        if not _is_null(left):
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _next_value(stream)
        if not _is_null(right):
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def level_order(root: TreeNode | None) -> list:
    """Return the values breadth first, left to right."""
    result = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def _inorder(node: TreeNode | None) -> Iterator:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: TreeNode | None) -> list:
    """Return the values in order: left subtree, node, right subtree."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list:
    """Return the values in preorder: node, left subtree, right subtree."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list:
    """Return the values in postorder: left subtree, right subtree, node."""
    return list(_postorder(root))


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def leaf_count(root: TreeNode | None) -> int:
    """Return the number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def size(root: TreeNode | None) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _preorder(root))


def tree_sum(root: TreeNode | None) -> Any:
    """Return the sum of all node values."""
    return sum(_preorder(root))