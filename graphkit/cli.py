"""Command-line front end reading graphs as whitespace-separated integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from graphkit.cycles import has_directed_cycle_dfs
from graphkit.paths import shortest_path
from graphkit.topo import kahn_topological_sort
from graphkit.traversal import bfs_order, connected_components


@dataclass
class GraphInput:
    """A vertex count, an edge list and any integers that followed them."""

    vertex_count: int
    edges: list[tuple[int, int]]
    extra: list[int] = field(default_factory=list)


def read_graph(stream: TextIO) -> GraphInput:
    """Parse ``n m`` followed by ``m`` pairs ``u v`` from ``stream``."""
    tokens = stream.read().split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"expected integers only: {exc}") from None

    if len(numbers) < 2:
        raise ValueError("expected the vertex count and the edge count")
    vertex_count, edge_count = numbers[0], numbers[1]
    if vertex_count < 0 or edge_count < 0:
        raise ValueError("vertex and edge counts must not be negative")

    end = 2 + 2 * edge_count
    if len(numbers) < end:
        raise ValueError(f"expected {edge_count} edges of two vertices each")
    pairs = numbers[2:end]
    edges = list(zip(pairs[::2], pairs[1::2]))
    return GraphInput(vertex_count, edges, numbers[end:])


def _nodes(nodes: Iterable[int]) -> str:
    return "".join(f"{node} " for node in nodes)


def _run(command: str, data: GraphInput) -> list[str]:
    if command == "bfs":
        return [f"BFS Traversal: {_nodes(bfs_order(data.vertex_count, data.edges))}"]

    if command == "components":
        lines = ["Connected Components:"]
        components = connected_components(data.vertex_count, data.edges)
        lines.extend(
            f"Component {index}: {_nodes(component)}"
            for index, component in enumerate(components, start=1)
        )
        return lines

    if command == "path":
        if len(data.extra) < 2:
            raise ValueError("expected start and target vertices after the edges")
        start, target = data.extra[:2]
        path = shortest_path(data.edges, start, target)
        if not path:
            return [f"No path found from {start} to {target}"]
        return [f"Shortest path from {start} to {target}:", _nodes(path)]

    if command == "topo":
        order = kahn_topological_sort(data.edges, data.vertex_count)
        if not order:
            return []
        return ["Topological Order (Kahn's Algorithm):", _nodes(order)]

    cyclic = has_directed_cycle_dfs(data.edges, data.vertex_count)
    return ["YES" if cyclic else "NO"]


def main(argv: Sequence[str] | None = None) -> int:
    """Run one graph algorithm on a graph read from a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="graphkit",
        description="Run a graph algorithm on 'n m' followed by m edges 'u v'.",
    )
    parser.add_argument(
        "command",
        choices=["bfs", "components", "path", "topo", "cycle"],
        help="algorithm to run; 'path' reads start and target after the edges",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file to read the graph from (default: standard input)",
    )
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            data = read_graph(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as handle:
                data = read_graph(handle)
        lines = _run(args.command, data)
    except (OSError, ValueError) as exc:
        print(f"graphkit: error: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())