import pytest

from graphkit.topo import dfs_topological_sort, kahn_topological_sort

DAG_EDGES = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]


def _violated_edges(order, edges):
    position = {node: index for index, node in enumerate(order)}
    return [(u, v) for u, v in edges if position[u] >= position[v]]


def test_dag_order_is_permutation():
    assert sorted(kahn_topological_sort(DAG_EDGES, 6)) == list(range(6))
    assert sorted(dfs_topological_sort(DAG_EDGES, 6)) == list(range(6))


@pytest.mark.parametrize("sorter", [kahn_topological_sort, dfs_topological_sort])
def test_dag_order_respects_every_edge(sorter):
    order = sorter(DAG_EDGES, 6)
    assert len(order) == 6
    assert _violated_edges(order, DAG_EDGES) == []


def test_chain_has_single_order():
    edges = [(0, 1), (1, 2)]
    assert kahn_topological_sort(edges, 3) == [0, 1, 2]
    assert dfs_topological_sort(edges, 3) == [0, 1, 2]


def test_no_edges_yields_all_vertices():
    assert sorted(kahn_topological_sort([], 4)) == [0, 1, 2, 3]
    assert sorted(dfs_topological_sort([], 4)) == [0, 1, 2, 3]


def test_kahn_starts_with_zero_indegree_vertices():
    order = kahn_topological_sort(DAG_EDGES, 6)
    assert set(order[:2]) == {4, 5}


def test_kahn_leaves_out_cycle():
    edges = [(0, 1), (1, 2), (2, 1)]
    order = kahn_topological_sort(edges, 3)
    assert order == [0]


def test_kahn_fully_cyclic_graph_is_empty():
    assert kahn_topological_sort([(0, 1), (1, 0)], 2) == []


def test_kahn_rejects_target_out_of_range():
    with pytest.raises(ValueError):
        kahn_topological_sort([(0, 5)], 3)


def test_dfs_keeps_every_vertex_of_cyclic_graph():
    order = dfs_topological_sort([(0, 1), (1, 2), (2, 0)], 3)
    assert sorted(order) == [0, 1, 2]


def test_dfs_handles_long_chain_without_recursion_limit():
    count = 5000
    edges = [(i, i + 1) for i in range(count - 1)]
    assert dfs_topological_sort(edges, count) == list(range(count))


def test_empty_graph():
    assert kahn_topological_sort([], 0) == []
    assert dfs_topological_sort([], 0) == []