"""A prefix tree of words."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A set of words stored character by character."""

    def __init__(self, words: Iterable[str] = ()):
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted and not removed since."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word

    def remove(self, word: str) -> None:
        """Remove ``word``, pruning branches left without words; absent words are ignored."""
        self._remove(self._root, word, 0)

    def _remove(self, node: _TrieNode, word: str, depth: int) -> bool:
        if depth == len(word):
            if not node.is_word:
                return False
            node.is_word = False
            return not node.children
        ch = word[depth]
        child = node.children.get(ch)
        if child is None:
            return False
        if self._remove(child, word, depth + 1):
            del node.children[ch]
            return not node.is_word and not node.children
        return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)