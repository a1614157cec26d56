"""Breadth-first ordering and connected components of undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from graphkit.graph import Graph


def bfs_order(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the breadth-first visiting order of an undirected graph.

    Components are started from vertices ``0 .. vertex_count - 1`` in
    ascending order; vertices without edges are appended at the end.
    """
    graph = Graph(edges)
    visited: set[int] = set()
    order: list[int] = []

    for start in range(vertex_count):
        if start not in graph or start in visited:
            continue
        visited.add(start)
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in graph.neighbors(node):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

    order.extend(v for v in range(vertex_count) if v not in visited)
    return order


def connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the connected components of an undirected graph.

    Each component is sorted, and components are listed in the order of
    their smallest vertex among ``0 .. vertex_count - 1``.
    """
    graph = Graph(edges)
    visited: set[int] = set()
    components: list[list[int]] = []

    for start in range(vertex_count):
        if start in visited:
            continue
        visited.add(start)
        component: list[int] = []
        stack = [start]
        while stack:
            node = stack.pop()
            component.append(node)
            for neighbor in graph.neighbors(node):
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        components.append(sorted(component))

    return components