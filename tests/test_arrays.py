from math import prod

import pytest

from dsakit.arrays import (
    majority_element,
    max_identical_square,
    pair_sums,
    prime_factors,
    reverse_in_place,
    rotate_left,
    rotate_left_by_reversal,
)


def _is_prime(n):
    return n > 1 and all(n % k for k in range(2, int(n**0.5) + 1))


def test_majority_found():
    assert majority_element([2, 2, 1, 2]) == 2


def test_majority_needs_strictly_more_than_half():
    assert majority_element([1, 2, 1, 2]) is None


def test_majority_of_empty():
    assert majority_element([]) is None


def test_identical_square_found():
    grid = [
        [1, 7, 7, 2],
        [3, 7, 7, 4],
        [5, 6, 9, 9],
        [8, 8, 9, 9],
    ]
    assert max_identical_square(grid) == 9


def test_identical_square_single():
    grid = [[7, 7, 1], [7, 7, 2], [3, 4, 5]]
    assert max_identical_square(grid) == 7


def test_identical_square_none_gives_zero():
    grid = [[1, 2], [3, 4]]
    assert max_identical_square(grid) == 0


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1024, 29919, 600851])
def test_prime_factors_invariants(n):
    factors = prime_factors(n)
    assert prod(factors) == n
    assert factors == sorted(factors)
    assert all(_is_prime(f) for f in factors)


def test_prime_factors_of_one():
    assert prime_factors(1) == []


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)


def test_reverse_in_place():
    values = list(range(7))
    reverse_in_place(values)
    assert values == list(range(6, -1, -1))
    reverse_in_place(values)
    assert values == list(range(7))


def test_rotate_left_example():
    assert rotate_left([1, 2, 3, 4, 5], 2) == [3, 4, 5, 1, 2]


def test_rotate_left_full_turn_and_inverse():
    values = [4, 8, 15, 16, 23, 42]
    assert rotate_left(values, len(values)) == values
    assert rotate_left(rotate_left(values, 4), 2) == values


def test_rotate_left_empty():
    assert rotate_left([], 3) == []


@pytest.mark.parametrize("d", [0, 1, 3, 5, 6, 11])
def test_rotation_by_reversal_agrees(d):
    values = [9, 1, 8, 2, 7, 3]
    expected = rotate_left(values, d)
    rotate_left_by_reversal(values, d)
    assert values == expected


def test_pair_sums():
    pairs = pair_sums([1, 2, 3], 4)
    assert set(pairs) == {(1, 3), (2, 2), (3, 1)}
    assert all(a + b == 4 for a, b in pairs)


def test_pair_sums_none():
    assert pair_sums([1, 2], 100) == []