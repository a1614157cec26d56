# graphkit

A small collection of classic graph algorithms on integer-labelled
vertices, with no dependencies beyond the standard library.

It covers:

- building and printing adjacency lists (`graphkit.graph`)
- breadth-first order and connected components (`graphkit.traversal`)
- cycle detection in directed and undirected graphs (`graphkit.cycles`)
- topological sorting, by Kahn's algorithm or by depth-first search
  (`graphkit.topo`)
- unweighted shortest paths and single-source shortest distances in a
  weighted DAG (`graphkit.paths`)
- a `graphkit` command that runs several of these on a graph read from a
  file or standard input (`graphkit.cli`)

Most functions take a vertex count and an edge list: vertices are the
integers `0 .. vertex_count - 1`, edges are pairs `(u, v)`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Adjacency lists

```python
from graphkit.graph import Graph

g = Graph()
g.add_edge(0, 1, False)   # undirected: stored both ways
g.add_edge(1, 2, True)    # directed: 1 -> 2 only

g.neighbors(1)            # [0, 2]
print(g.format(), end="")
# 0->1,
# 1->0,2,
```

A graph can also be built in one step with `Graph(edges, directed=False)`.
`format()` (also what `str(g)` gives) lists only nodes that have outgoing
edges, in the order they were first used. `len(g)`, iteration and `in`
work over those same nodes.

### Traversal

```python
from graphkit.traversal import bfs_order, connected_components

edges = [(0, 1), (0, 2), (1, 3)]

bfs_order(5, edges)             # [0, 1, 2, 3, 4]
connected_components(5, edges)  # [[0, 1, 2, 3], [4]]
```

Every vertex appears in the breadth-first order; vertices without edges
come at the end. Each component is listed with its vertices sorted, and
components are ordered by their smallest vertex.

### Cycle detection

```python
from graphkit.cycles import (
    has_directed_cycle_dfs,
    has_directed_cycle_kahn,
    has_undirected_cycle_bfs,
    has_undirected_cycle_dfs,
)

has_directed_cycle_kahn([(0, 1), (1, 2), (2, 0)], 3)   # True
has_directed_cycle_dfs([(0, 1), (1, 2)], 3)            # False
has_undirected_cycle_bfs([(0, 1), (1, 2), (2, 0)], 3)  # True
has_undirected_cycle_dfs([(0, 1), (1, 2)], 3)          # False
```

In the undirected checks a self-loop or a repeated edge counts as a cycle.
`has_directed_cycle_kahn` raises `ValueError` when an edge points at a
vertex outside `0 .. vertex_count - 1`.

### Topological sorting

```python
from graphkit.topo import dfs_topological_sort, kahn_topological_sort

edges = [(0, 1), (0, 2), (1, 3), (2, 3)]

kahn_topological_sort(edges, 4)   # [0, 1, 2, 3]
dfs_topological_sort(edges, 4)    # [0, 2, 1, 3]
```

When the graph has a cycle, Kahn's algorithm returns only the vertices it
could order, so a result shorter than the vertex count means the graph is
not a DAG. It raises `ValueError` for an edge target outside the vertex
range. The depth-first version always returns every visited vertex once,
but its order is only meaningful for an acyclic graph.

### Shortest paths

Fewest-edges path between two vertices of an undirected graph:

```python
from graphkit.paths import shortest_path

shortest_path([(0, 1), (1, 2), (0, 3), (3, 2)], 0, 2)   # [0, 1, 2]
shortest_path([(0, 1)], 0, 5)                           # [] - unreachable
```

Shortest distances from one source in a weighted directed acyclic graph,
negative weights allowed:

```python
from graphkit.paths import WeightedDigraph

g = WeightedDigraph([
    (0, 1, 5), (0, 2, 3), (1, 2, 2), (1, 3, 6), (2, 3, 7),
    (2, 4, 4), (2, 5, 2), (3, 4, -1), (4, 5, -2),
])

print(g.format(), end="")       # "0 -> (1,5), (2,3), " and so on
g.topological_order(6)          # [0, 1, 2, 3, 4, 5]
g.shortest_distances(6, 1)      # [None, 0, 2, 6, 5, 3]
```

Unreachable vertices get `None`. `shortest_distances` raises `ValueError`
if the source, or any vertex it reaches, lies outside `0 .. vertex_count - 1`.

## Command line

Installing the package provides a `graphkit` command:

```
graphkit COMMAND [INPUT]
```

It reads the number of vertices `n`, the number of edges `m` and then `m`
pairs `u v`, all as whitespace-separated integers, from the file `INPUT`
or from standard input when `INPUT` is omitted or `-`.

| Command      | Prints                                                        |
|--------------|---------------------------------------------------------------|
| `bfs`        | `BFS Traversal:` followed by the breadth-first order          |
| `components` | `Connected Components:` and one `Component k:` line each      |
| `path`       | the shortest path between a start and a target vertex, given as two more integers after the edges, or `No path found from s to t` |
| `topo`       | `Topological Order (Kahn's Algorithm):` and the order, or nothing if no vertex could be ordered |
| `cycle`      | `YES` if the graph, read as directed, has a cycle, else `NO`  |

For example:

```
$ printf '4 3\n0 1\n1 2\n2 3\n0 3\n' | graphkit path
Shortest path from 0 to 3:
0 1 2 3
```

Malformed input or an unreadable file is reported on standard error and the
command exits with status 1. See `graphkit --help` for the usage summary.

## What it does not do

The command line works only on unweighted graphs: weighted shortest
distances (`WeightedDigraph`), the undirected cycle checks and the
depth-first topological sort are available from Python only. There is no
reading or writing of graph file formats beyond the plain integer input
described above, and no drawing of graphs.