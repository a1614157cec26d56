"""Topological ordering of directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from graphkit.graph import Graph


def kahn_topological_sort(
    edges: Iterable[tuple[int, int]], vertex_count: int
) -> list[int]:
    """Order the vertices ``0 .. vertex_count - 1`` with Kahn's algorithm.

    Vertices of in-degree zero are released in breadth-first order. When the
    graph has a cycle, the vertices on or behind it never reach in-degree
    zero and are missing from the result. Edge targets must lie in the
    vertex range.
    """
    graph = Graph()
    indegree = [0] * vertex_count
    for u, v in edges:
        if not 0 <= v < vertex_count:
            raise ValueError(f"edge target {v} outside 0..{vertex_count - 1}")
        graph.add_edge(u, v, directed=True)
        indegree[v] += 1

    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.neighbors(node):
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    return order


def dfs_topological_sort(
    edges: Iterable[tuple[int, int]], vertex_count: int
) -> list[int]:
    """Order a directed acyclic graph by reversed depth-first finishing time.

    Searches start from vertices ``0 .. vertex_count - 1`` in ascending
    order. Every visited vertex appears exactly once, even if the graph has
    a cycle, in which case the order is not a valid topological order.
    """
    graph = Graph(edges, directed=True)
    visited: set[int] = set()
    finished: list[int] = []

    for root in range(vertex_count):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(graph.neighbors(root)))]
        while stack:
            node, pending = stack[-1]
            for neighbor in pending:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
            else:
                finished.append(node)
                stack.pop()

    finished.reverse()
    return finished