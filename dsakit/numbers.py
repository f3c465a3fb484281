"""Conversions between integers and their written forms."""

from __future__ import annotations

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_ROMAN_SYMBOLS = sorted(
    ((value, symbol) for symbol, value in _ROMAN_VALUES.items()), reverse=True
)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral, honouring subtractive pairs."""
    if not s:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = sum(-v if v < nxt else v for v, nxt in zip(values, values[1:]))
    return total + values[-1]


def int_to_roman(n: int) -> str:
    """Write ``n`` in purely additive Roman notation (4 is ``IIII``)."""
    parts = []
    for value, symbol in _ROMAN_SYMBOLS:
        count, n = divmod(n, value) if n > 0 else (0, n)
        parts.append(symbol * count)
    return "".join(parts)


def to_binary_digits(n: int) -> str:
    """Return the binary digits of a non-negative integer, most significant first."""
    if n < 0:
        raise ValueError(f"negative number {n}")
    digits = []
    while n > 0:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits)) or "0"


def greatest(a, b, c):
    """Return the greatest of three values."""
    if a >= b and a >= c:
        return a
    if b >= a and b >= c:
        return b
    return c