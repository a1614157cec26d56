"""Cycle detection in directed and undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from graphkit.graph import Graph


def has_directed_cycle_kahn(
    edges: Iterable[tuple[int, int]], vertex_count: int
) -> bool:
    """Report whether a directed graph on ``0 .. vertex_count - 1`` has a cycle.

    Uses Kahn's algorithm: the graph is cyclic when not every vertex can be
    removed in topological order. Edge targets must lie in the vertex range.
    """
    graph = Graph()
    indegree = [0] * vertex_count
    for u, v in edges:
        if not 0 <= v < vertex_count:
            raise ValueError(f"edge target {v} outside 0..{vertex_count - 1}")
        graph.add_edge(u, v, directed=True)
        indegree[v] += 1

    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    processed = 0
    while queue:
        node = queue.popleft()
        processed += 1
        for neighbor in graph.neighbors(node):
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    return processed != vertex_count


def has_directed_cycle_dfs(
    edges: Iterable[tuple[int, int]], vertex_count: int
) -> bool:
    """Report whether a directed graph has a cycle, by depth-first search.

    Searches start from vertices ``0 .. vertex_count - 1``; a back edge to a
    vertex on the current path means a cycle.
    """
    graph = Graph(edges, directed=True)
    visited: set[int] = set()
    on_path: set[int] = set()

    for root in range(vertex_count):
        if root in visited:
            continue
        visited.add(root)
        on_path.add(root)
        stack = [(root, iter(graph.neighbors(root)))]
        while stack:
            node, pending = stack[-1]
            for neighbor in pending:
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_path.add(neighbor)
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
                if neighbor in on_path:
                    return True
            else:
                on_path.discard(node)
                stack.pop()

    return False


def has_undirected_cycle_bfs(
    edges: Iterable[tuple[int, int]], vertex_count: int
) -> bool:
    """Report whether an undirected graph has a cycle, by breadth-first search.

    A visited neighbour other than the current vertex's parent means a cycle;
    self-loops and parallel edges therefore count as cycles.
    """
    graph = Graph(edges)
    visited: set[int] = set()

    for root in range(vertex_count):
        if root in visited:
            continue
        visited.add(root)
        parent: dict[int, int | None] = {root: None}
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbor in graph.neighbors(node):
                if neighbor in visited:
                    if neighbor != parent[node]:
                        return True
                else:
                    visited.add(neighbor)
                    parent[neighbor] = node
                    queue.append(neighbor)

    return False


def has_undirected_cycle_dfs(
    edges: Iterable[tuple[int, int]], vertex_count: int
) -> bool:
    """Report whether an undirected graph has a cycle, by depth-first search.

    A visited neighbour other than the vertex we came from means a cycle;
    self-loops and parallel edges therefore count as cycles.
    """
    graph = Graph(edges)
    visited: set[int] = set()

    for root in range(vertex_count):
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[int, int | None, object]] = [
            (root, None, iter(graph.neighbors(root)))
        ]
        while stack:
            node, parent, pending = stack[-1]
            for neighbor in pending:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append((neighbor, node, iter(graph.neighbors(neighbor))))
                    break
                if neighbor != parent:
                    return True
            else:
                stack.pop()

    return False