import pytest

from dstructs.graph import INF, Graph, NegativeCycleError, format_distances


def make_graph(count, edges):
    graph = Graph()
    for _ in range(count):
        graph.add_node()
    for a, b, weight in edges:
        graph.add_edge(a, b, weight)
    return graph


WEIGHTED = [
    (0, 1, 4),
    (0, 2, 1),
    (2, 1, 2),
    (1, 3, 1),
    (2, 3, 5),
    (3, 4, 3),
]


def test_add_node_returns_sequential_numbers():
    graph = Graph()
    assert [graph.add_node() for _ in range(3)] == [0, 1, 2]
    assert len(graph) == 3


def test_neighbors_keep_insertion_order():
    graph = make_graph(3, [(0, 2, 9), (0, 1, 4)])
    assert graph.neighbors(0) == [(2, 9), (1, 4)]
    assert graph.neighbors(1) == []


def test_add_edge_rejects_unknown_nodes():
    graph = make_graph(2, [])
    with pytest.raises(IndexError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0, 1)


def test_bfs_visits_reachable_set_from_source():
    graph = make_graph(6, WEIGHTED)
    order = graph.bfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert 5 not in order


def test_bfs_is_level_ordered():
    graph = make_graph(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1)])
    order = graph.bfs(0)
    assert set(order[:3]) == {0, 1, 2}
    assert set(order[3:]) == {3, 4}


def test_dfs_follows_first_edge_first():
    graph = make_graph(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1)])
    assert graph.dfs(0) == [0, 1, 3, 2]


def test_dfs_and_bfs_cover_same_vertices():
    graph = make_graph(6, WEIGHTED + [(4, 0, 1)])
    for src in range(6):
        assert sorted(graph.dfs(src)) == sorted(graph.bfs(src))


def test_is_path():
    graph = make_graph(4, [(0, 1, 1), (1, 2, 1)])
    assert graph.is_path(0, 2)
    assert not graph.is_path(2, 0)
    assert graph.is_path(3, 3)
    assert not graph.is_path(0, 3)


def test_find_scc_groups_cycle():
    graph = make_graph(4, [(0, 1, 1), (1, 2, 1), (2, 0, 1), (2, 3, 1)])
    assert graph.find_scc() == [[0, 1, 2], [3]]


def test_find_scc_partitions_vertices_into_mutually_reachable_sets():
    edges = [(0, 1, 1), (1, 0, 1), (1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 2, 1)]
    graph = make_graph(6, edges)
    components = graph.find_scc()
    flat = sorted(v for component in components for v in component)
    assert flat == list(range(6))
    for component in components:
        for a in component:
            for b in component:
                assert graph.is_path(a, b)


def test_topological_sort_respects_every_edge():
    edges = [(5, 2, 1), (5, 0, 1), (4, 0, 1), (4, 1, 1), (2, 3, 1), (3, 1, 1)]
    graph = make_graph(6, edges)
    order = graph.topological_sort()
    assert sorted(order) == list(range(6))
    position = {v: i for i, v in enumerate(order)}
    for a, b, _ in edges:
        assert position[a] < position[b]


def test_empty_graph_results():
    graph = Graph()
    assert graph.topological_sort() == []
    assert graph.find_scc() == []
    assert graph.floyd_warshall() == []


def test_dijkstra_single_edge():
    graph = make_graph(2, [(0, 1, 7)])
    assert graph.dijkstra(0) == [0, 7]
    assert graph.dijkstra(1) == [INF, 0]


def test_shortest_path_algorithms_agree():
    graph = make_graph(6, WEIGHTED)
    matrix = graph.floyd_warshall()
    for src in range(6):
        dijkstra = graph.dijkstra(src)
        assert dijkstra == graph.bellman_ford(src)
        assert dijkstra == matrix[src]
        assert dijkstra[src] == 0
        assert dijkstra[5] == (0 if src == 5 else INF)


def test_distances_satisfy_edge_relaxation():
    graph = make_graph(6, WEIGHTED)
    dist = graph.dijkstra(0)
    for u, v, weight in WEIGHTED:
        assert dist[v] <= dist[u] + weight


def test_bellman_ford_handles_negative_edges():
    edges = [(0, 1, 4), (1, 2, -3), (0, 2, 5)]
    graph = make_graph(3, edges)
    dist = graph.bellman_ford(0)
    assert dist == graph.floyd_warshall()[0]
    for u, v, weight in edges:
        assert dist[v] <= dist[u] + weight
    assert dist[2] < 5


def test_bellman_ford_detects_negative_cycle():
    graph = make_graph(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)])
    with pytest.raises(NegativeCycleError):
        graph.bellman_ford(0)


def test_unreachable_negative_cycle_is_ignored():
    graph = make_graph(4, [(0, 1, 2), (2, 3, -2), (3, 2, 1)])
    assert graph.bellman_ford(0) == [0, 2, INF, INF]


def test_floyd_warshall_diagonal_and_unreachable():
    graph = make_graph(3, [(0, 1, 3)])
    matrix = graph.floyd_warshall()
    assert [matrix[i][i] for i in range(3)] == [0, 0, 0]
    assert matrix[1][0] == INF
    assert matrix[0][1] == 3


def test_invalid_source_raises():
    graph = make_graph(2, [])
    with pytest.raises(IndexError):
        graph.dijkstra(2)
    with pytest.raises(IndexError):
        graph.bfs(5)


def test_format_distances_layout():
    text = format_distances([[0, INF], [3, 0]])
    assert text == (
        "Shortest distances (vertex number):\n"
        "   0\t1\t\n"
        "0: 0\tINF\t\n"
        "1: 3\t0\t\n"
    )


def test_format_distances_of_graph_has_row_per_vertex():
    graph = make_graph(4, [(0, 1, 1)])
    lines = format_distances(graph.floyd_warshall()).splitlines()
    assert lines[0] == "Shortest distances (vertex number):"
    assert len(lines) == 2 + 4
    assert lines[3].startswith("1: ")