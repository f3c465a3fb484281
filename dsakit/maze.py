"""All simple paths for a rat through a square maze."""

from __future__ import annotations

from collections.abc import Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell.

    Cells holding 1 are open. A path is a string of moves D, L, R and U,
    never visiting a cell twice; paths come out in the order found when
    moves are tried as D, L, R, U.
    """
    n = len(maze)
    if n == 0:
        return []
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    if maze[0][0] == 0 or maze[n - 1][n - 1] == 0:
        return []

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    route: list[str] = []

    def explore(i: int, j: int) -> None:
        if i == n - 1 and j == n - 1:
            paths.append("".join(route))
            return
        visited.add((i, j))
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < n
                and 0 <= nj < n
                and maze[ni][nj] == 1
                and (ni, nj) not in visited
            ):
                route.append(letter)
                explore(ni, nj)
                route.pop()
        visited.discard((i, j))

    explore(0, 0)
    return paths