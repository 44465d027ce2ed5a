"""Depth-first and breadth-first traversal of graphs given as adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_start(adjacency: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise IndexError(f"start vertex {start} out of range for {len(adjacency)} vertices")


def depth_first_search(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in the order a recursive depth-first search visits them.

    Neighbours are explored in ascending vertex order.
    """
    _check_start(adjacency, start)
    visited = [False] * len(adjacency)
    order: list[int] = []

    def visit(vertex: int) -> None:
        order.append(vertex)
        visited[vertex] = True
        for neighbour, edge in enumerate(adjacency[vertex]):
            if edge == 1 and not visited[neighbour]:
                visit(neighbour)

    visit(start)
    return order


def breadth_first_search(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in the order a breadth-first search visits them.

    Neighbours are explored in ascending vertex order.
    """
    _check_start(adjacency, start)
    visited = [False] * len(adjacency)
    order = [start]
    visited[start] = True
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour, edge in enumerate(adjacency[vertex]):
            if edge == 1 and not visited[neighbour]:
                order.append(neighbour)
                visited[neighbour] = True
                pending.append(neighbour)
    return order