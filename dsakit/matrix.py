"""Integer matrix multiplication."""

from __future__ import annotations

from collections.abc import Sequence


class ShapeError(ValueError):
    """Raised for ragged matrices or incompatible dimensions."""


def _width(rows: Sequence[Sequence[int]]) -> int:
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ShapeError("rows have different lengths")
    return widths.pop() if widths else 0


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the product of two matrices given as lists of rows."""
    inner = _width(a)
    _width(b)
    if inner != len(b):
        raise ShapeError(
            f"cannot multiply: {inner} columns against {len(b)} rows"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


class Matrix:
    """An immutable rectangular matrix of numbers."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Sequence[int]]):
        self._rows = tuple(tuple(row) for row in rows)
        _width(self._rows)

    @property
    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._rows]

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), _width(self._rows)

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(multiply(self._rows, other._rows))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in row) for row in self._rows)