"""Small algorithms over strings."""

from __future__ import annotations

from itertools import compress, groupby, product


def subsequences(text: str) -> list[str]:
    """Return every subsequence of ``text``, the empty one first.

    Each character is first left out and then taken, so for ``"ab"`` the
    order is ``"", "b", "a", "ab"``.
    """
    return [
        "".join(compress(text, mask))
        for mask in product((False, True), repeat=len(text))
    ]


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse every run of equal adjacent characters to one character."""
    return "".join(ch for ch, _ in groupby(text))


def replace_pi(text: str) -> str:
    """Replace each occurrence of ``pi`` with ``3.14``, scanning left to right."""
    return text.replace("pi", "3.14")


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def sort_string(text: str) -> str:
    """Return the characters of ``text`` in sorted order."""
    return "".join(sorted(text))


def min_language_cost(languages: str, learn_cost: int) -> int:
    """Return the cheaper of learning every distinct language or hiring translators.

    Learning costs ``learn_cost`` per distinct language; translators for k
    distinct languages cost 1 + 2 + ... + k.
    """
    distinct = len(set(languages))
    learning = distinct * learn_cost
    translating = distinct * (distinct + 1) // 2
    return min(learning, translating)