import math

import pytest
from hypothesis import given, strategies as st

from algobox.graph import (
    DisjointSet,
    bfs,
    count_components,
    degrees,
    dfs,
    find_hub,
    floyd_warshall,
    has_cycle,
    has_path,
)


def undirected(n, edges):
    graph = [[0] * n for _ in range(n)]
    for u, v in edges:
        graph[u][v] = 1
        graph[v][u] = 1
    return graph


@st.composite
def graphs(draw, max_n=7):
    n = draw(st.integers(min_value=1, max_value=max_n))
    pairs = [(i, j) for i in range(n) for j in range(i + 1, n)]
    edges = draw(st.lists(st.sampled_from(pairs), unique=True)) if pairs else []
    return n, edges, undirected(n, edges)


@st.composite
def directed_graphs(draw, max_n=6):
    n = draw(st.integers(min_value=1, max_value=max_n))
    return [draw(st.lists(st.integers(0, 1), min_size=n, max_size=n)) for _ in range(n)]


@st.composite
def weighted_graphs(draw, max_n=6):
    n = draw(st.integers(min_value=1, max_value=max_n))
    weight = st.one_of(st.integers(1, 9), st.just(math.inf))
    graph = [[draw(weight) for _ in range(n)] for _ in range(n)]
    for i in range(n):
        graph[i][i] = 0
    return graph


def test_bfs_and_dfs_orders_differ_on_branching_graph():
    graph = undirected(4, [(0, 1), (0, 2), (1, 3)])
    assert bfs(graph, 0) == [0, 1, 2, 3]
    assert dfs(graph, 0) == [0, 1, 3, 2]


def test_path_graph_is_visited_in_index_order():
    n = 6
    graph = undirected(n, [(i, i + 1) for i in range(n - 1)])
    assert bfs(graph, 0) == list(range(n))
    assert dfs(graph, 0) == list(range(n))


@given(graphs())
def test_traversals_visit_each_reachable_vertex_once(data):
    n, _, graph = data
    reachable = {v for v in range(n) if has_path(graph, 0, v)}
    for order in (bfs(graph, 0), dfs(graph, 0)):
        assert order[0] == 0
        assert len(order) == len(set(order))
        assert set(order) == reachable


def test_traversal_rejects_bad_start_and_non_square():
    graph = undirected(3, [(0, 1)])
    with pytest.raises(IndexError):
        bfs(graph, 3)
    with pytest.raises(IndexError):
        dfs(graph, -1)
    with pytest.raises(ValueError):
        bfs([[0, 1], [1]], 0)


@given(graphs())
def test_count_components_matches_disjoint_set(data):
    n, edges, graph = data
    sets = DisjointSet(n)
    for u, v in edges:
        sets.union(u, v)
    assert count_components(graph) == len({sets.find(v) for v in range(n)})


def test_isolated_vertices_are_separate_components():
    n = 5
    assert count_components(undirected(n, [])) == n


@given(graphs())
def test_cycle_exists_iff_more_edges_than_a_forest(data):
    n, edges, graph = data
    assert has_cycle(graph) == (len(edges) > n - count_components(graph))


def test_cycle_examples():
    assert has_cycle(undirected(3, [(0, 1), (1, 2), (2, 0)]))
    assert not has_cycle(undirected(4, [(0, 1), (1, 2), (2, 3)]))
    self_loop = undirected(2, [(0, 1)])
    self_loop[1][1] = 1
    assert has_cycle(self_loop)


def test_has_path():
    graph = undirected(5, [(0, 1), (1, 2), (3, 4)])
    assert has_path(graph, 0, 2)
    assert has_path(graph, 4, 3)
    assert not has_path(graph, 0, 4)
    assert has_path(graph, 3, 3)
    with pytest.raises(IndexError):
        has_path(graph, 0, 5)


def test_has_path_follows_edge_direction():
    graph = [[0, 1], [0, 0]]
    assert has_path(graph, 0, 1)
    assert not has_path(graph, 1, 0)


@given(weighted_graphs())
def test_floyd_warshall_satisfies_triangle_inequality(graph):
    original = [list(row) for row in graph]
    dist = floyd_warshall(graph)
    n = len(graph)
    assert graph == original
    for i in range(n):
        assert dist[i][i] == 0
        for j in range(n):
            assert dist[i][j] <= graph[i][j]
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_prefers_shorter_detour():
    inf = math.inf
    graph = [[0, 1, 10], [inf, 0, 2], [inf, inf, 0]]
    dist = floyd_warshall(graph)
    assert dist[0][2] == 3
    assert dist[2][0] == inf


@given(directed_graphs())
def test_degree_sums_equal_edge_count(graph):
    result = degrees(graph)
    edges = sum(1 for row in graph for w in row if w)
    assert sum(result.in_degree) == edges
    assert sum(result.out_degree) == edges


@given(directed_graphs())
def test_degrees_swap_under_transpose(graph):
    flipped = [list(col) for col in zip(*graph)]
    result = degrees(graph)
    other = degrees(flipped)
    assert result.in_degree == other.out_degree
    assert result.out_degree == other.in_degree


@given(directed_graphs())
def test_find_hub_has_most_connections(graph):
    hub = find_hub(graph)
    counts = [row.count(1) for row in graph]
    assert counts[hub] == max(counts)
    assert counts.index(max(counts)) == hub or max(counts) == 0


def test_find_hub_without_edges_is_first_vertex():
    assert find_hub(undirected(4, [])) == 0


def test_disjoint_set_union_and_find():
    sets = DisjointSet(6)
    assert sets.find(4) == 4
    sets.union(0, 1)
    sets.union(2, 3)
    assert sets.same_set(0, 1)
    assert not sets.same_set(1, 2)
    sets.union(1, 3)
    assert sets.same_set(0, 2)
    assert not sets.same_set(0, 5)


@given(st.lists(st.tuples(st.integers(0, 7), st.integers(0, 7))))
def test_disjoint_set_agrees_with_components(pairs):
    n = 8
    sets = DisjointSet(n)
    for u, v in pairs:
        sets.union(u, v)
    graph = undirected(n, [(u, v) for u, v in pairs if u != v])
    for u in range(n):
        for v in range(n):
            assert sets.same_set(u, v) == has_path(graph, u, v)


def test_disjoint_set_rejects_bad_input():
    with pytest.raises(ValueError):
        DisjointSet(-1)
    sets = DisjointSet(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.union(-1, 0)