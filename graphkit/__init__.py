"""Graph algorithms: adjacency lists, traversal, cycle detection, topological sorting, shortest paths and a command line."""

__version__ = "0.1.0"

__all__ = ["cli", "cycles", "graph", "paths", "topo", "traversal"]