"""Shortest paths: unweighted by breadth-first search, weighted on DAGs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from graphkit.graph import Graph


def shortest_path(
    edges: Iterable[tuple[int, int]], start: int, target: int
) -> list[int]:
    """Return a fewest-edges path from ``start`` to ``target`` in an undirected graph.

    The path includes both ends. An empty list means ``target`` cannot be
    reached.
    """
    graph = Graph(edges)
    parent: dict[int, int | None] = {start: None}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            if neighbor not in parent:
                parent[neighbor] = node
                queue.append(neighbor)

    if target not in parent:
        return []

    path: list[int] = []
    node: int | None = target
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


class WeightedDigraph:
    """Directed graph with integer edge weights, for shortest paths in DAGs."""

    def __init__(self, edges: Iterable[tuple[int, int, int]] = ()) -> None:
        self._adjacency: dict[int, list[tuple[int, int]]] = {}
        for u, v, weight in edges:
            self.add_edge(u, v, weight)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge from ``u`` to ``v`` carrying ``weight``."""
        self._adjacency.setdefault(u, []).append((v, weight))

    def format(self) -> str:
        """Render one ``u -> (v,w), `` line per node that has outgoing edges."""
        return "".join(
            f"{node} -> "
            + "".join(f"({target},{weight}), " for target, weight in targets)
            + "\n"
            for node, targets in self._adjacency.items()
        )

    def __str__(self) -> str:
        return self.format()

    def topological_order(self, vertex_count: int) -> list[int]:
        """Return vertices by reversed depth-first finishing time.

        Searches start from ``0 .. vertex_count - 1`` in ascending order.
        """
        visited: set[int] = set()
        finished: list[int] = []

        for root in range(vertex_count):
            if root in visited:
                continue
            visited.add(root)
            stack = [(root, iter(self._adjacency.get(root, ())))]
            while stack:
                node, pending = stack[-1]
                for neighbor, _weight in pending:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(
                            (neighbor, iter(self._adjacency.get(neighbor, ())))
                        )
                        break
                else:
                    finished.append(node)
                    stack.pop()

        finished.reverse()
        return finished

    def shortest_distances(self, vertex_count: int, source: int) -> list[int | None]:
        """Return the least total weight from ``source`` to each vertex.

        The graph must be acyclic; negative weights are allowed. Unreachable
        vertices get ``None``.
        """
        if not 0 <= source < vertex_count:
            raise ValueError(f"source {source} outside 0..{vertex_count - 1}")

        distances: list[int | None] = [None] * vertex_count
        distances[source] = 0
        for node in self.topological_order(vertex_count):
            if not 0 <= node < vertex_count:
                raise ValueError(f"vertex {node} outside 0..{vertex_count - 1}")
            base = distances[node]
            if base is None:
                continue
            for neighbor, weight in self._adjacency.get(node, ()):
                candidate = base + weight
                current = distances[neighbor]
                if current is None or candidate < current:
                    distances[neighbor] = candidate
        return distances