"""Undirected graph building, traversal, bipartiteness, spread times and Prim's MST.

A graph is a list of neighbour lists indexed by vertex number.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError(f"negative vertex count {vertex_count}")


def _check_vertex(vertex_count: int, *vertices: int) -> None:
    for vertex in vertices:
        if not 0 <= vertex < vertex_count:
            raise ValueError(
                f"vertex {vertex} out of range for {vertex_count} vertices"
            )


def adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return neighbour lists for an undirected, unweighted graph."""
    _check_count(vertex_count)
    graph: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(vertex_count, u, v)
        graph[u].append(v)
        graph[v].append(u)
    return graph


def weighted_adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[tuple[int, int]]]:
    """Return ``(neighbour, weight)`` lists for an undirected weighted graph."""
    _check_count(vertex_count)
    graph: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(vertex_count, u, v)
        graph[u].append((v, weight))
        graph[v].append((u, weight))
    return graph


def adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the 0/1 adjacency matrix of an undirected graph."""
    _check_count(vertex_count)
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(vertex_count, u, v)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def weighted_adjacency_matrix(
    vertex_count: int,
    edges: Iterable[tuple[int, int, int]],
    directed: bool = False,
) -> list[list[int]]:
    """Return a matrix holding each edge's weight, 0 where there is no edge."""
    _check_count(vertex_count)
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(vertex_count, u, v)
        matrix[u][v] = weight
        if not directed:
            matrix[v][u] = weight
    return matrix


def is_bipartite_bfs(graph: Sequence[Sequence[int]]) -> bool:
    """Return True if the graph can be two-coloured, colouring breadth first."""
    color: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if color[start] is not None:
            continue
        color[start] = 0
        pending = deque([start])
        while pending:
            node = pending.popleft()
            for neighbour in graph[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    pending.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def is_bipartite_dfs(graph: Sequence[Sequence[int]]) -> bool:
    """Return True if the graph can be two-coloured, colouring depth first."""
    color: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if color[start] is not None:
            continue
        color[start] = 0
        pending = [start]
        while pending:
            node = pending.pop()
            for neighbour in graph[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    pending.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def bfs(graph: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _check_vertex(len(graph), start)
    visited = {start}
    order = []
    pending = deque([start])
    while pending:
        node = pending.popleft()
        order.append(node)
        for neighbour in graph[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def spread_time(graph: Sequence[Sequence[int]], source: int) -> int | None:
    """Return the steps needed to reach every vertex from ``source``.

    Returns None if some vertex can never be reached.
    """
    _check_vertex(len(graph), source)
    time: list[int | None] = [None] * len(graph)
    time[source] = 0
    pending = deque([source])
    while pending:
        node = pending.popleft()
        for neighbour in graph[node]:
            if time[neighbour] is None:
                time[neighbour] = time[node] + 1
                pending.append(neighbour)
    if any(t is None for t in time):
        return None
    return max(time)


_GRID_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def grid_spread_time(grid: Sequence[Sequence[int]]) -> int | None:
    """Return the time for every 1 cell to be reached from the 2 cells.

    Cells are 0 (empty), 1 (patient) or 2 (source); infection moves one
    cell up, down, left or right per step. Returns None if some patient is
    never reached. The grid passed in is not modified.
    """
    cells = [list(row) for row in grid]
    if not cells:
        return 0
    width = len(cells[0])
    if any(len(row) != width for row in cells):
        raise ValueError("rows have different lengths")
    rows = len(cells)

    pending = deque()
    patients = 0
    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            if value == 2:
                pending.append((r, c, 0))
            elif value == 1:
                patients += 1

    infected = 0
    longest = 0
    while pending:
        r, c, t = pending.popleft()
        for dr, dc in _GRID_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < width and cells[nr][nc] == 1:
                cells[nr][nc] = 2
                pending.append((nr, nc, t + 1))
                infected += 1
                longest = max(longest, t + 1)
    return longest if infected == patients else None


def prim_mst(
    adjacency: Sequence[Sequence[tuple[int, int]]],
) -> list[tuple[int, int]]:
    """Return the minimum spanning tree edges grown from vertex 0.

    ``adjacency[u]`` lists ``(v, weight)`` pairs. Each edge is reported as
    ``(parent, child)`` in order of the child vertex; vertices not reachable
    from 0 get no edge.
    """
    count = len(adjacency)
    if count == 0:
        return []
    key: list[float] = [float("inf")] * count
    parent: list[int | None] = [None] * count
    in_tree = [False] * count
    key[0] = 0
    pending = [(0, 0)]
    while pending:
        _, u = heapq.heappop(pending)
        if in_tree[u]:
            continue
        in_tree[u] = True
        for v, weight in adjacency[u]:
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                heapq.heappush(pending, (weight, v))
    return [(p, v) for v, p in enumerate(parent) if v > 0 and p is not None]