import pytest

from graphkit.graph import Graph


def test_undirected_edge_goes_both_ways():
    g = Graph()
    g.add_edge(3, 7, False)
    assert g.neighbors(3) == [7]
    assert g.neighbors(7) == [3]


def test_directed_edge_goes_one_way():
    g = Graph()
    g.add_edge(3, 7, True)
    assert g.neighbors(3) == [7]
    assert g.neighbors(7) == []
    assert 7 not in g


def test_unknown_node_has_no_neighbors():
    g = Graph([(0, 1)])
    assert not g.neighbors(42)


def test_neighbors_returns_a_copy():
    g = Graph([(0, 1)])
    g.neighbors(0).append(99)
    assert 99 not in g.neighbors(0)


def test_neighbors_keep_insertion_order():
    g = Graph()
    for v in (5, 2, 9):
        g.add_edge(0, v)
    assert g.neighbors(0) == [5, 2, 9]


def test_format_pinned():
    g = Graph()
    g.add_edge(0, 1, False)
    assert g.format() == "0->1,\n1->0,\n"


def test_format_empty_graph():
    assert Graph().format() == ""


@pytest.mark.parametrize(
    "edges",
    [[(0, 1)], [(0, 1), (1, 2), (2, 0)], [(4, 4)], [(1, 2), (3, 4), (1, 3)]],
)
def test_format_has_one_line_per_node(edges):
    g = Graph(edges)
    lines = g.format().splitlines()
    assert len(lines) == len(g)
    for line, node in zip(lines, g):
        head, _, tail = line.partition("->")
        assert head == str(node)
        assert tail.split(",")[:-1] == [str(n) for n in g.neighbors(node)]


def test_constructor_matches_add_edge():
    edges = [(0, 1), (1, 2), (2, 3)]
    built = Graph(edges, directed=True)
    manual = Graph()
    for u, v in edges:
        manual.add_edge(u, v, True)
    assert built.format() == manual.format()
    assert str(built) == manual.format()