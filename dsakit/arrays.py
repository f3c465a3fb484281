"""Small algorithms over flat lists and integer grids."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product


def majority_element(values: Sequence[int]) -> int | None:
    """Return the value occurring more than ``len(values) // 2`` times, or None."""
    best = None
    best_count = 0
    for value in values:
        count = values.count(value)
        if count > best_count:
            best, best_count = value, count
    if best_count > len(values) // 2:
        return best
    return None


def max_identical_square(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest value filling a whole 2x2 block of ``grid``, or 0."""
    best = None
    for upper, lower in zip(grid, grid[1:]):
        for (a, b), (c, d) in zip(zip(upper, upper[1:]), zip(lower, lower[1:])):
            if a == b == c == d and (best is None or a > best):
                best = a
    return 0 if best is None else best


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}")
    factors = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 2
    if n > 2:
        factors.append(n)
    return factors


def _reverse_span(values: list, start: int, stop: int) -> None:
    values[start:stop] = values[start:stop][::-1]


def reverse_in_place(values: list) -> None:
    """Reverse ``values`` in place."""
    _reverse_span(values, 0, len(values))


def rotate_left(values: Sequence, d: int) -> list:
    """Return a new list with ``values`` rotated ``d`` places to the left."""
    if not values:
        return []
    d %= len(values)
    return [*values[d:], *values[:d]]


def rotate_left_by_reversal(values: list, d: int) -> None:
    """Rotate ``values`` ``d`` places to the left in place, by three reversals."""
    if not values:
        return
    d %= len(values)
    _reverse_span(values, 0, d)
    _reverse_span(values, d, len(values))
    _reverse_span(values, 0, len(values))


def pair_sums(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every ordered pair of positions whose values add up to ``target``.

    A position may pair with itself, and both orders of a pair are reported.
    """
    return [(a, b) for a, b in product(values, repeat=2) if a + b == target]