"""A simple adjacency-list graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator


class Graph:
    """Adjacency-list graph whose edges may be directed or undirected.

    Nodes appear in the order they were first used, and each node's
    neighbours keep the order in which their edges were added.
    """

    def __init__(
        self,
        edges: Iterable[tuple[Hashable, Hashable]] = (),
        directed: bool = False,
    ) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}
        for u, v in edges:
            self.add_edge(u, v, directed)

    def add_edge(self, u: Hashable, v: Hashable, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbors(self, node: Hashable) -> list[Hashable]:
        """Return a copy of the nodes reachable from ``node`` by one edge."""
        return list(self._adjacency.get(node, ()))

    def format(self) -> str:
        """Render one ``node->a,b,`` line per node that has outgoing edges."""
        return "".join(
            f"{node}->" + "".join(f"{neighbor}," for neighbor in neighbors) + "\n"
            for node, neighbors in self._adjacency.items()
        )

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return self.format()