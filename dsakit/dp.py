"""Dynamic-programming and greedy counting problems."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cache

DENOMINATIONS = (1, 2, 5, 10, 20, 50, 100, 200, 500, 2000)


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"negative argument {n}")


def binomial(n: int, r: int) -> int:
    """Return n choose r by memoised Pascal recursion; 0 when ``r > n``."""
    _check_non_negative(n)
    _check_non_negative(r)
    if r > n:
        return 0

    @cache
    def choose(top: int, pick: int) -> int:
        if pick == 0 or pick == top:
            return 1
        return choose(top - 1, pick - 1) + choose(top - 1, pick)

    return choose(n, r)


def climb_stairs(n: int) -> int:
    """Count ways to climb ``n`` stairs taking 1 or 2 steps, bottom-up."""
    _check_non_negative(n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def climb_stairs_memo(n: int) -> int:
    """Count ways to climb ``n`` stairs taking 1 or 2 steps, top-down."""
    _check_non_negative(n)

    @cache
    def ways(k: int) -> int:
        if k <= 1:
            return 1
        return ways(k - 1) + ways(k - 2)

    return ways(n)


def min_coin_change(amount: int, coins: Iterable[int]) -> int | None:
    """Return the fewest coins summing to ``amount``, or None if impossible."""
    _check_non_negative(amount)
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    best: list[int | None] = [0] + [None] * amount
    for total in range(1, amount + 1):
        options = [
            best[total - coin]
            for coin in coins
            if coin <= total and best[total - coin] is not None
        ]
        best[total] = min(options) + 1 if options else None
    return best[amount]


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, computed bottom-up."""
    _check_non_negative(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_memo(n: int) -> int:
    """Return the ``n``-th Fibonacci number, computed top-down with memoisation."""
    _check_non_negative(n)

    @cache
    def fib(k: int) -> int:
        if k <= 1:
            return k
        return fib(k - 1) + fib(k - 2)

    return fib(n)


def fibonacci_naive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain exponential recursion."""
    _check_non_negative(n)
    if n <= 1:
        return n
    return fibonacci_naive(n - 1) + fibonacci_naive(n - 2)


def greedy_coins(amount: int) -> list[int]:
    """Make ``amount`` from DENOMINATIONS, largest coins first."""
    coins: list[int] = []
    for coin in reversed(DENOMINATIONS):
        if amount >= coin:
            count, amount = divmod(amount, coin)
            coins.extend([coin] * count)
    return coins